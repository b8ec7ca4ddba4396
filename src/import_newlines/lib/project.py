"""project — loading and validating ``.import_newlines.yaml``.

The project file carries the rule options (either accepted shape) and the
scan-log settings::

    options:
      items: 4
      max-len: 100
    logging:
      enabled: true
      directory: .import_newlines_logs

PyYAML is a required dependency; files are always read with ``safe_load``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

import yaml


@dataclass(frozen=True)
class LoggingConfig:
    """Scan-log settings.

    Attributes:
        enabled: Whether to append a JSONL entry per linted file.
        directory: Directory holding the log file.
    """

    enabled: bool = False
    directory: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LoggingConfig:
        return cls(
            enabled=bool(data.get("enabled", False)),
            directory=data.get("directory", "") or "",
        )


@dataclass(frozen=True)
class ProjectConfig:
    """Top-level project configuration.

    Attributes:
        options: Raw rule options, normalised later by ``normalize_options``.
        logging: Scan-log settings.
    """

    options: Any = None
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> ProjectConfig:
        """Build from a parsed YAML mapping; ``None`` yields the defaults."""
        if not data:
            return cls()
        return cls(
            options=data.get("options"),
            logging=LoggingConfig.from_dict(data.get("logging") or {}),
        )


def load_yaml(path: Union[str, Path]) -> Any:
    """Load a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file contains invalid YAML.
    """
    with open(path, "r", encoding="utf-8") as fh:
        return yaml.safe_load(fh)


def load_project_config(path: Union[str, Path]) -> Optional[dict[str, Any]]:
    """Load the project configuration file.

    Args:
        path: Path to ``.import_newlines.yaml``.

    Returns:
        Parsed mapping, or None if the file does not exist.
    """
    try:
        return load_yaml(path)
    except FileNotFoundError:
        return None


def validate_project_config(data: Any) -> list[str]:
    """Validate the structure of a project configuration mapping.

    Option values are not checked here; ``normalize_options`` does that.

    Args:
        data: The parsed YAML content.

    Returns:
        List of validation error messages. Empty if valid.
    """
    errors: list[str] = []

    if not isinstance(data, dict):
        errors.append(f"Project config must be a mapping, got {type(data).__name__}")
        return errors

    for key in data:
        if key not in ("options", "logging"):
            errors.append(f"Unknown top-level key: {key!r}")

    options = data.get("options")
    if options is not None and not isinstance(options, (dict, list)):
        errors.append(
            f"'options' must be a mapping or a list, got {type(options).__name__}"
        )

    logging_cfg = data.get("logging")
    if logging_cfg is not None:
        if not isinstance(logging_cfg, dict):
            errors.append(
                f"'logging' must be a mapping, got {type(logging_cfg).__name__}"
            )
        else:
            enabled = logging_cfg.get("enabled")
            if enabled is not None and not isinstance(enabled, bool):
                errors.append(
                    f"logging.enabled must be a boolean, got {type(enabled).__name__}"
                )
            directory = logging_cfg.get("directory")
            if directory is not None and not isinstance(directory, str):
                errors.append(
                    f"logging.directory must be a string, "
                    f"got {type(directory).__name__}"
                )

    return errors
