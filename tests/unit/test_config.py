"""Tests for Config validation, environment settings and YAML loading."""

import pytest
from pydantic import ValidationError

from kill_tree.core.config import Config, KillTreeSettings, load_config


class TestConfig:
    def test_defaults(self):
        config = Config()

        assert config.signal == "SIGTERM"
        assert config.include_target is True

    def test_signal_normalized(self):
        assert Config(signal=" sigkill ").signal == "SIGKILL"

    def test_empty_signal_rejected(self):
        with pytest.raises(ValidationError):
            Config(signal="  ")

    def test_frozen(self):
        config = Config()

        with pytest.raises(ValidationError):
            config.signal = "SIGKILL"

    def test_unknown_keys_rejected(self):
        with pytest.raises(ValidationError):
            Config(signl="SIGKILL")


class TestSettings:
    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("KILL_TREE_SIGNAL", "SIGINT")
        monkeypatch.setenv("KILL_TREE_INCLUDE_TARGET", "false")
        monkeypatch.setenv("KILL_TREE_LOG_LEVEL", "debug")

        settings = KillTreeSettings()

        assert settings.to_config() == Config(signal="SIGINT", include_target=False)
        assert settings.log_level == "DEBUG"


class TestLoadConfig:
    @pytest.fixture(autouse=True)
    def _clean_env(self, monkeypatch):
        for name in ("KILL_TREE_SIGNAL", "KILL_TREE_INCLUDE_TARGET", "KILL_TREE_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

    def test_no_path_uses_defaults(self):
        assert load_config() == Config()

    def test_missing_file_warns_and_uses_defaults(self, tmp_path, caplog):
        config = load_config(tmp_path / "missing.yaml")

        assert config == Config()
        assert "Config file not found" in caplog.text

    def test_reads_yaml(self, tmp_path):
        path = tmp_path / "kill-tree.yaml"
        path.write_text("signal: SIGKILL\ninclude_target: false\n")

        assert load_config(path) == Config(signal="SIGKILL", include_target=False)

    def test_partial_yaml_keeps_environment_defaults(self, tmp_path, monkeypatch):
        monkeypatch.setenv("KILL_TREE_SIGNAL", "SIGINT")
        path = tmp_path / "kill-tree.yaml"
        path.write_text("include_target: false\n")

        assert load_config(path) == Config(signal="SIGINT", include_target=False)

    def test_expands_environment_variables(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TEARDOWN_SIGNAL", "SIGHUP")
        path = tmp_path / "kill-tree.yaml"
        path.write_text("signal: ${TEARDOWN_SIGNAL}\n")

        assert load_config(path).signal == "SIGHUP"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "kill-tree.yaml"
        path.write_text("")

        assert load_config(path) == Config()

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / "kill-tree.yaml"
        path.write_text("- SIGKILL\n")

        with pytest.raises(ValueError, match="must contain a mapping"):
            load_config(path)

    def test_unknown_key_rejected(self, tmp_path):
        path = tmp_path / "kill-tree.yaml"
        path.write_text("signl: SIGKILL\n")

        with pytest.raises(ValidationError):
            load_config(path)
