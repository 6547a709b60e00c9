"""
Settings file loading.

Reads the optional envctx.yaml that tunes the loader and logging.
"""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import yaml

from envctx.exceptions import ConfigurationError

SETTINGS_FILENAME = "envctx.yaml"

DEFAULTS: dict[str, Any] = {
    "loader": {
        "initial_capacity": 10,
        "max_capacity": None,
        "max_line_length": 1024,
    },
    "logging": {
        "level": "WARNING",
        "file": None,
        "console_type": "rich",
    },
}


class Settings:
    """envctx settings container with dict-like access."""

    def __init__(self, data: dict[str, Any] | None = None, path: Path | None = None):
        self.data = _merge_dict(_copy_defaults(), data or {})
        self.path = path

    @property
    def initial_capacity(self) -> int:
        return self.get("loader.initial_capacity")

    @property
    def max_capacity(self) -> int | None:
        return self.get("loader.max_capacity")

    @property
    def max_line_length(self) -> int:
        return self.get("loader.max_line_length")

    @property
    def logging(self) -> dict[str, Any]:
        return self.data.get("logging") or {}

    def get(self, key: str, default: Any = None) -> Any:
        """Get a settings value using dot notation."""
        value: Any = self.data
        for k in key.split("."):
            if not isinstance(value, dict) or k not in value:
                return default
            value = value[k]
        return value

    def __getitem__(self, key: str) -> Any:
        if key not in self:
            raise KeyError(f"Settings key '{key}' not found")
        return self.get(key)

    def __contains__(self, key: str) -> bool:
        value: Any = self.data
        for k in key.split("."):
            if not isinstance(value, dict) or k not in value:
                return False
            value = value[k]
        return True

    def __iter__(self) -> Iterator[str]:
        return iter(self.data)

    def validate(self) -> None:
        """Validate settings structure and content."""
        errors = []

        for section in ("loader", "logging"):
            if not isinstance(self.data.get(section), dict):
                errors.append(f"'{section}' must be a mapping, got {type(self.data.get(section)).__name__}")
        if errors:
            raise ConfigurationError("\n".join(errors), details={"path": str(self.path) if self.path else None})

        initial_capacity = self.initial_capacity
        if not _is_int(initial_capacity) or initial_capacity <= 0:
            errors.append(f"'loader.initial_capacity' must be a positive integer, got {initial_capacity!r}")

        max_capacity = self.max_capacity
        if max_capacity is not None:
            if not _is_int(max_capacity) or max_capacity <= 0:
                errors.append(f"'loader.max_capacity' must be a positive integer or null, got {max_capacity!r}")
            elif _is_int(initial_capacity) and max_capacity < initial_capacity:
                errors.append(
                    f"'loader.max_capacity' ({max_capacity}) is smaller than "
                    f"'loader.initial_capacity' ({initial_capacity})"
                )

        max_line_length = self.max_line_length
        if not _is_int(max_line_length) or max_line_length < 2:
            errors.append(f"'loader.max_line_length' must be an integer >= 2, got {max_line_length!r}")

        if errors:
            raise ConfigurationError("\n".join(errors), details={"path": str(self.path) if self.path else None})


def load_settings(path: Path | None = None, project_dir: Path | None = None) -> Settings:
    """
    Load envctx settings.

    Args:
        path: Explicit settings file; it must exist
        project_dir: Directory searched for envctx.yaml when no path is given
            (default: current directory). A missing file there means defaults.

    Returns:
        Validated Settings instance
    """
    if path is None:
        candidate = (project_dir or Path.cwd()) / SETTINGS_FILENAME
        if not candidate.is_file():
            return Settings()
        path = candidate
    elif not path.is_file():
        raise ConfigurationError(
            f"Settings file not found: {path}\n" f"  Suggestion: Check the --config path",
            details={"path": str(path)},
        )

    try:
        with open(path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                mark = getattr(e, "problem_mark", None)
                where = f" at line {mark.line + 1}, column {mark.column + 1}" if mark is not None else ""
                raise ConfigurationError(
                    f"Error parsing {path.name}{where}:\n"
                    f"  {e}\n"
                    f"  File: {path}\n"
                    f"  Suggestion: Check YAML syntax, ensure proper indentation and quotes",
                    details={"path": str(path)},
                ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read settings file: {path}\n" f"  Error: {e}\n" f"  Suggestion: Check file permissions",
            details={"path": str(path)},
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Settings must be a mapping, got {type(data).__name__}\n" f"  File: {path}",
            details={"path": str(path)},
        )

    settings = Settings(data, path=path)
    settings.validate()
    return settings


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _copy_defaults() -> dict[str, Any]:
    return {section: dict(values) for section, values in DEFAULTS.items()}


def _merge_dict(base: dict, override: dict) -> dict:
    """Recursively merge override into base."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _merge_dict(base[key], value)
        else:
            base[key] = value
    return base
