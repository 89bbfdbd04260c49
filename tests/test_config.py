"""Tests for ConfigManager."""

import os

import pytest

from awsprof.aws.exceptions import ConfigError
from awsprof.config import Config, ConfigManager


@pytest.fixture
def manager(tmp_path):
    return ConfigManager(config_dir=tmp_path / "awsprof")


def test_defaults_without_file(manager):
    config = manager.get()

    assert config == Config()
    assert config.session_duration == 86400
    assert config.profile_env_var == "AWS_PROFILE"
    assert not manager.exists()


def test_set_value_persists(manager, tmp_path):
    manager.set_value("session-duration", "3600")

    reloaded = ConfigManager(config_dir=tmp_path / "awsprof").get()
    assert reloaded.session_duration == 3600
    assert os.stat(manager.config_file).st_mode & 0o777 == 0o600


def test_set_unknown_key(manager):
    with pytest.raises(ConfigError, match="Unknown setting"):
        manager.set_value("region", "us-east-1")


def test_set_out_of_range_duration(manager):
    with pytest.raises(ConfigError):
        manager.set_value("session_duration", "60")
    assert not manager.exists()


def test_unset_optional_value(manager):
    manager.set_value("aws_timeout", "30")
    assert manager.set_value("aws_timeout", "none").aws_timeout is None


def test_invalid_yaml(manager):
    manager.config_dir.mkdir(parents=True)
    manager.config_file.write_text("aws_command: [unclosed\n")

    with pytest.raises(ConfigError, match="Invalid YAML"):
        manager.load()


def test_invalid_values(manager):
    manager.config_dir.mkdir(parents=True)
    manager.config_file.write_text("profile_env_var: 'not valid'\n")

    with pytest.raises(ConfigError):
        manager.load()
