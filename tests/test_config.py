"""Tests for the settings loader."""

import json

import pytest

from pm_detector.config import (
    CHECK_EXECUTABLE_ENV_VAR,
    CONFIG_PATH_ENV_VAR,
    IGNORE_FIELD_ENV_VAR,
    PREFERRED_ENV_VAR,
    ConfigError,
    Settings,
    load_settings,
)
from pm_detector.models import PackageManager


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (CONFIG_PATH_ENV_VAR, PREFERRED_ENV_VAR, CHECK_EXECUTABLE_ENV_VAR, IGNORE_FIELD_ENV_VAR):
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_file():
    assert load_settings() == Settings()


def test_load_json(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps(
            {
                "preferred": ["pnpm", "npm"],
                "checkExecutable": True,
                "ignorePackageManagerField": True,
                "versionCheckTimeout": 2,
            }
        )
    )

    settings = load_settings(path)

    assert settings == Settings(
        preferred=(PackageManager.PNPM, PackageManager.NPM),
        check_executable=True,
        ignore_package_manager_field=True,
        version_check_timeout=2.0,
    )


def test_load_yaml(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("preferred:\n  - yarn\ncheckExecutable: true\n")

    settings = load_settings(path)

    assert settings.preferred == (PackageManager.YARN,)
    assert settings.check_executable is True


def test_empty_yaml_is_defaults(tmp_path):
    path = tmp_path / "settings.yml"
    path.write_text("")
    assert load_settings(path) == Settings()


def test_path_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "custom.json"
    path.write_text(json.dumps({"preferred": ["npm"]}))
    monkeypatch.setenv(CONFIG_PATH_ENV_VAR, str(path))

    assert load_settings().preferred == (PackageManager.NPM,)


def test_environment_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"preferred": ["npm"], "checkExecutable": True}))
    monkeypatch.setenv(PREFERRED_ENV_VAR, "yarn, pnpm")
    monkeypatch.setenv(CHECK_EXECUTABLE_ENV_VAR, "no")
    monkeypatch.setenv(IGNORE_FIELD_ENV_VAR, "Yes")

    settings = load_settings(path)

    assert settings.preferred == (PackageManager.YARN, PackageManager.PNPM)
    assert settings.check_executable is False
    assert settings.ignore_package_manager_field is True


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_settings(tmp_path / "missing.json")


def test_invalid_json(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{")
    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_settings(path)


def test_invalid_yaml(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("preferred: [yarn\n")
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_settings(path)


def test_not_an_object(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("[]")
    with pytest.raises(ConfigError, match="must be an object"):
        load_settings(path)


@pytest.mark.parametrize(
    "data, message",
    [
        ({"preferred": "npm"}, "'preferred' must be an array"),
        ({"preferred": ["bun"]}, "Invalid 'preferred' entry"),
        ({"checkExecutable": "yes"}, "'checkExecutable' must be a boolean"),
        ({"ignorePackageManagerField": 1}, "'ignorePackageManagerField' must be a boolean"),
        ({"versionCheckTimeout": 0}, "'versionCheckTimeout' must be a positive number"),
        ({"versionCheckTimeout": True}, "'versionCheckTimeout' must be a positive number"),
    ],
)
def test_invalid_fields(data, message):
    with pytest.raises(ConfigError, match=message):
        Settings.from_dict(data)


def test_invalid_preferred_env(monkeypatch):
    monkeypatch.setenv(PREFERRED_ENV_VAR, "npm,bun")
    with pytest.raises(ConfigError, match=PREFERRED_ENV_VAR):
        load_settings()
