"""Tests for configuration handling."""

import json

import pytest

from primality_test.utils.config import EngineConfig, load_config, save_config


class TestEngineConfig:
    """Tests for EngineConfig."""

    def test_defaults(self):
        """Test default values."""
        config = EngineConfig()
        assert config.sieve_limit == 10000
        assert config.default_width == "u64"
        assert config.log_file is None
        assert config.validate() is config

    def test_from_dict_ignores_unknown(self):
        """Test that unknown keys are dropped."""
        config = EngineConfig.from_dict({"sieve_limit": 500, "color": "blue"})
        assert config.sieve_limit == 500
        assert not hasattr(config, "color")

    def test_to_dict(self):
        """Test dictionary conversion."""
        d = EngineConfig(sieve_limit=42).to_dict()
        assert d["sieve_limit"] == 42
        assert d["default_width"] == "u64"

    @pytest.mark.parametrize("kwargs", [
        {"sieve_limit": 1},
        {"default_width": "u128"},
        {"log_level": "LOUD"},
    ])
    def test_invalid(self, kwargs):
        """Test that invalid settings raise ValueError."""
        with pytest.raises(ValueError):
            EngineConfig(**kwargs).validate()


class TestConfigFiles:
    """Tests for loading and saving JSON configuration."""

    def test_save_and_load(self, tmp_path):
        """Test that a saved configuration loads back unchanged."""
        config = EngineConfig(sieve_limit=2000, default_width="u32", log_level="DEBUG")
        path = save_config(config, tmp_path / "nested" / "config.json")
        assert path.exists()
        assert load_config(path) == config

    def test_load_validates(self, tmp_path):
        """Test that loading rejects invalid values."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"sieve_limit": 0}))
        with pytest.raises(ValueError):
            load_config(path)

    @pytest.mark.parametrize("data", [
        {"sieve_limit": "100"},
        {"sieve_limit": 100.0},
        {"sieve_limit": True},
        {"default_width": 64},
        {"log_level": 10},
        {"log_file": 3},
    ])
    def test_load_rejects_wrong_types(self, tmp_path, data):
        """Test that wrongly typed fields raise ValueError."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps(data))
        with pytest.raises(ValueError):
            load_config(path)

    @pytest.mark.parametrize("data", [[1, 2], "u64", 42, None])
    def test_load_rejects_non_object(self, tmp_path, data):
        """Test that a top-level value other than an object raises ValueError."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps(data))
        with pytest.raises(ValueError):
            load_config(path)
