"""Tests for configuration loading and merging."""

from pathlib import Path

import pytest
import yaml

from xmldoc_help.errors import ConfigError
from xmldoc_help.exit_code import ExitCode
from xmldoc_help.load_config import DEFAULT_CONFIG, load_config


def _write(tmp_path: Path, name: str, data: object) -> Path:
    path = tmp_path / name
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config()
    assert config == DEFAULT_CONFIG
    assert config["cache"]["enabled"] is True
    assert config["warnings"]["as_errors"] is False


def test_load_config_does_not_share_defaults() -> None:
    """Verify that mutating a loaded config leaves the defaults intact."""
    config = load_config()
    config["warnings"]["as_errors"] = True
    config["warnings"]["suppress"].append("N.C")
    assert DEFAULT_CONFIG["warnings"]["as_errors"] is False
    assert DEFAULT_CONFIG["warnings"]["suppress"] == []


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = _write(
        tmp_path,
        "config.yml",
        {
            "warnings": {"as_errors": True, "suppress": ["N.Legacy"]},
            "crossrefs": {"rewrite": False},
        },
    )
    config = load_config(str(config_file))
    assert config["warnings"]["as_errors"] is True
    assert config["warnings"]["ignore_missing"] is False
    assert config["warnings"]["suppress"] == ["N.Legacy"]
    assert config["crossrefs"]["rewrite"] is False
    assert config["cache"]["enabled"] is True


def test_load_config_layers(tmp_path: Path) -> None:
    """Verify that later files win on scalars and suppress lists accumulate."""
    shared = _write(
        tmp_path,
        "shared.yml",
        {"warnings": {"as_errors": True, "suppress": ["N.B", "N.A"]}},
    )
    local = _write(
        tmp_path,
        "local.yml",
        {"warnings": {"as_errors": False, "suppress": ["N.B", "N.C"]}},
    )
    config = load_config(shared, local)
    assert config["warnings"]["as_errors"] is False
    assert config["warnings"]["suppress"] == ["N.A", "N.B", "N.C"]


def test_load_config_empty_file(tmp_path: Path) -> None:
    """Verify that an empty file leaves the defaults unchanged."""
    empty = tmp_path / "empty.yml"
    empty.write_text("", encoding="utf-8")
    assert load_config(empty) == DEFAULT_CONFIG


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify that a named but nonexistent file is an error."""
    with pytest.raises(ConfigError, match="not found") as exc_info:
        load_config(tmp_path / "absent.yml")
    assert exc_info.value.exit_code == ExitCode.CONFIG_ERROR


def test_load_config_invalid_yaml(tmp_path: Path) -> None:
    """Verify that unparsable YAML is reported as a config error."""
    bad = tmp_path / "bad.yml"
    bad.write_text("warnings: [unclosed", encoding="utf-8")
    with pytest.raises(ConfigError, match="not valid YAML"):
        load_config(bad)


@pytest.mark.parametrize(
    ("data", "message"),
    [
        (["x"], "must be a mapping, got list"),
        ({"warnings": True}, "'warnings' must be a mapping"),
        ({"cache": ["enabled"]}, "'cache' must be a mapping"),
        ({"crossrefs": "off"}, "'crossrefs' must be a mapping"),
        ({"warnings": {"as_errors": "yes"}}, "'warnings.as_errors' must be bool"),
        ({"warnings": {"suppress": "N.C"}}, "'warnings.suppress' must be a list"),
        ({"warnings": {"suppress": [1]}}, "'warnings.suppress' must be a list"),
        ({"warnings": {"as_error": True}}, "unknown key 'warnings.as_error'"),
        ({"strict": True}, "unknown key 'strict'"),
    ],
)
def test_load_config_rejects_bad_shape(
    tmp_path: Path, data: object, message: str
) -> None:
    """Verify that values not matching the default shape are rejected."""
    path = _write(tmp_path, "config.yml", data)
    with pytest.raises(ConfigError, match=message):
        load_config(path)
