"""Settings loader for package manager detection.

Settings come from an optional JSON or YAML file, then environment variables,
then whatever the caller (e.g. the CLI) overrides. Every field is optional:

    {
      "preferred": ["pnpm", "yarn", "npm"],
      "checkExecutable": false,
      "ignorePackageManagerField": false,
      "versionCheckTimeout": 10
    }
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

from .core import DEFAULT_VERSION_CHECK_TIMEOUT
from .models.package_manager import PackageManager

CONFIG_PATH_ENV_VAR = "PM_DETECTOR_CONFIG"
PREFERRED_ENV_VAR = "PM_DETECTOR_PREFERRED"
CHECK_EXECUTABLE_ENV_VAR = "PM_DETECTOR_CHECK_EXECUTABLE"
IGNORE_FIELD_ENV_VAR = "PM_DETECTOR_IGNORE_PACKAGE_MANAGER_FIELD"

_TRUTHY = {"1", "true", "yes", "y"}


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be loaded or is invalid."""


@dataclass(slots=True, frozen=True)
class Settings:
    """Detection options."""

    preferred: tuple[PackageManager, ...] = ()
    check_executable: bool = False
    ignore_package_manager_field: bool = False
    version_check_timeout: float = DEFAULT_VERSION_CHECK_TIMEOUT

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        """Create Settings from a parsed document, validating each field."""
        preferred = data.get("preferred", [])
        if not isinstance(preferred, list) or not all(isinstance(pm, str) for pm in preferred):
            raise ConfigError("'preferred' must be an array of package manager names")
        try:
            parsed_preferred = tuple(PackageManager.parse(pm) for pm in preferred)
        except ValueError as exc:
            raise ConfigError(f"Invalid 'preferred' entry: {exc}") from exc

        check_executable = data.get("checkExecutable", False)
        if not isinstance(check_executable, bool):
            raise ConfigError("'checkExecutable' must be a boolean")

        ignore_field = data.get("ignorePackageManagerField", False)
        if not isinstance(ignore_field, bool):
            raise ConfigError("'ignorePackageManagerField' must be a boolean")

        timeout = data.get("versionCheckTimeout", DEFAULT_VERSION_CHECK_TIMEOUT)
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ConfigError("'versionCheckTimeout' must be a positive number")

        return cls(
            preferred=parsed_preferred,
            check_executable=check_executable,
            ignore_package_manager_field=ignore_field,
            version_check_timeout=float(timeout),
        )


def _resolve_config_path(path: Path | str | None = None) -> Path | None:
    """Resolve the configuration file path.

    Priority:
    1. Explicit path argument
    2. PM_DETECTOR_CONFIG environment variable
    3. None (defaults only)
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return None


def _parse_document(config_path: Path, content: str) -> Any:
    if config_path.suffix.lower() in {".yaml", ".yml"}:
        try:
            return yaml.safe_load(content) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in configuration file: {exc}") from exc

    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc


def _apply_environment(settings: Settings) -> Settings:
    preferred_env = os.environ.get(PREFERRED_ENV_VAR, "").strip()
    if preferred_env:
        try:
            preferred = tuple(
                PackageManager.parse(name) for name in preferred_env.split(",") if name.strip()
            )
        except ValueError as exc:
            raise ConfigError(f"Invalid {PREFERRED_ENV_VAR}: {exc}") from exc
        settings = replace(settings, preferred=preferred)

    check_env = os.environ.get(CHECK_EXECUTABLE_ENV_VAR)
    if check_env is not None:
        settings = replace(settings, check_executable=check_env.strip().lower() in _TRUTHY)

    ignore_env = os.environ.get(IGNORE_FIELD_ENV_VAR)
    if ignore_env is not None:
        settings = replace(
            settings, ignore_package_manager_field=ignore_env.strip().lower() in _TRUTHY
        )

    return settings


def load_settings(path: Path | str | None = None) -> Settings:
    """Load settings from a file (if any) and the environment.

    Args:
        path: Optional path to a JSON or YAML config file. If not provided,
            uses the PM_DETECTOR_CONFIG env var or falls back to defaults.

    Raises:
        ConfigError: If the file cannot be read or contains invalid data.
    """
    config_path = _resolve_config_path(path)
    settings = Settings()

    if config_path is not None:
        if not config_path.exists():
            raise ConfigError(f"Configuration file not found: {config_path}")

        try:
            content = config_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Failed to read configuration file: {exc}") from exc

        data = _parse_document(config_path, content)
        if not isinstance(data, dict):
            raise ConfigError("Configuration must be an object")

        settings = Settings.from_dict(data)

    return _apply_environment(settings)
