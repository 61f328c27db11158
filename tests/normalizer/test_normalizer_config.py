"""
Tests for NormalizerConfig validation and JSON loading.
"""

import json

import pytest

from snippet_toolkit.normalizer import ConfigError, NormalizerConfig


class TestNormalizerConfig:
    """Tests for NormalizerConfig."""

    def test_init_when_defaults_then_esbuild_and_prettier(self):
        config = NormalizerConfig()
        assert "esbuild" in config.transform_command
        assert "prettier" in config.format_command
        assert config.typed_languages == frozenset({"typescript", "tsx"})

    def test_init_when_lists_then_stored_as_tuples(self):
        config = NormalizerConfig(transform_command=["a", "b"], typed_languages=["TS"])
        assert config.transform_command == ("a", "b")
        assert config.typed_languages == frozenset({"ts"})

    def test_init_when_empty_command_then_raises_error(self):
        with pytest.raises(ValueError, match="transform_command"):
            NormalizerConfig(transform_command=())

    def test_init_when_non_positive_timeout_then_raises_error(self):
        with pytest.raises(ValueError, match="timeout_s"):
            NormalizerConfig(timeout_s=0)

    def test_from_json_when_partial_then_defaults_kept(self, tmp_path):
        path = tmp_path / "normalizer.json"
        path.write_text(json.dumps({"timeout_s": 3, "format_command": ["fmt"]}))
        config = NormalizerConfig.from_json(path)
        assert config.timeout_s == 3
        assert config.format_command == ("fmt",)
        assert "esbuild" in config.transform_command

    def test_from_json_when_missing_then_raises_config_error(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            NormalizerConfig.from_json(tmp_path / "missing.json")

    def test_from_json_when_corrupted_then_raises_config_error(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError, match="corrupted"):
            NormalizerConfig.from_json(path)

    def test_from_json_when_unknown_key_then_raises_config_error(self, tmp_path):
        path = tmp_path / "extra.json"
        path.write_text(json.dumps({"parser": "babel"}))
        with pytest.raises(ConfigError, match="Unknown config keys"):
            NormalizerConfig.from_json(path)

    def test_from_json_when_invalid_value_then_raises_config_error(self, tmp_path):
        path = tmp_path / "invalid.json"
        path.write_text(json.dumps({"timeout_s": -1}))
        with pytest.raises(ConfigError, match="Invalid config"):
            NormalizerConfig.from_json(path)

    def test_from_json_when_not_object_then_raises_config_error(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[]")
        with pytest.raises(ConfigError, match="JSON object"):
            NormalizerConfig.from_json(path)
