"""Tests for config validation."""

import pytest

from resume_studio.config import DB_PATH_ENV, ExportConfig, LoggingConfig, load_config


class TestConfigValidation:
    def test_valid_defaults(self, monkeypatch):
        """Default config passes validation without raising."""
        monkeypatch.delenv(DB_PATH_ENV, raising=False)
        config = load_config(None)
        assert config.export.default_template in ("classic", "minimal", "modern")

    def test_invalid_default_template(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("export:\n  default_template: fancy\n")
        with pytest.raises(ValueError, match="default_template"):
            load_config(yaml)

    def test_invalid_log_level(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("logging:\n  level: chatty\n")
        with pytest.raises(ValueError, match="logging.level"):
            load_config(yaml)

    def test_unknown_key(self, tmp_path):
        """Unknown keys inside a section are rejected by the dataclass."""
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("export:\n  colour: blue\n")
        with pytest.raises(TypeError):
            load_config(yaml)

    def test_direct_construction(self):
        with pytest.raises(ValueError, match="export.default_template"):
            ExportConfig(default_template="Classic")
        assert LoggingConfig(level="warning").numeric_level == 30
