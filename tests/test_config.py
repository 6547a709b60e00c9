"""
Tests for settings loading and validation.
"""

import pytest

from envctx.config.loader import Settings, _merge_dict, load_settings
from envctx.exceptions import ConfigurationError


class TestSettings:
    """Tests for Settings class."""

    def test_defaults(self):
        settings = Settings()
        assert settings.initial_capacity == 10
        assert settings.max_capacity is None
        assert settings.max_line_length == 1024
        assert settings.logging["level"] == "WARNING"

    def test_partial_override_keeps_defaults(self):
        settings = Settings({"loader": {"initial_capacity": 32}})
        assert settings.initial_capacity == 32
        assert settings.max_line_length == 1024

    def test_dot_notation(self):
        settings = Settings({"loader": {"max_capacity": 100}})
        assert settings.get("loader.max_capacity") == 100
        assert settings.get("loader.missing", "fallback") == "fallback"
        assert settings.get("loader.initial_capacity.deeper") is None

    def test_contains_and_getitem(self):
        settings = Settings()
        assert "loader" in settings
        assert "loader.max_line_length" in settings
        assert "loader.nope" not in settings
        assert settings["loader.max_line_length"] == 1024
        with pytest.raises(KeyError):
            _ = settings["nope"]

    def test_defaults_not_shared(self):
        first = Settings({"loader": {"initial_capacity": 99}})
        second = Settings()
        assert first.initial_capacity == 99
        assert second.initial_capacity == 10

    def test_validate_ok(self):
        Settings({"loader": {"initial_capacity": 4, "max_capacity": 8}}).validate()

    @pytest.mark.parametrize(
        "loader",
        [
            {"initial_capacity": 0},
            {"initial_capacity": "ten"},
            {"initial_capacity": True},
            {"max_capacity": -1},
            {"initial_capacity": 8, "max_capacity": 4},
            {"max_line_length": 1},
        ],
    )
    def test_validate_rejects(self, loader):
        with pytest.raises(ConfigurationError):
            Settings({"loader": loader}).validate()

    def test_validate_section_must_be_mapping(self):
        with pytest.raises(ConfigurationError, match="must be a mapping"):
            Settings({"loader": None}).validate()


class TestLoadSettings:
    """Tests for load_settings()."""

    def test_no_file_returns_defaults(self, tmp_path):
        settings = load_settings(project_dir=tmp_path)
        assert settings.path is None
        assert settings.initial_capacity == 10

    def test_reads_project_file(self, tmp_path):
        (tmp_path / "envctx.yaml").write_text("loader:\n  initial_capacity: 3\nlogging:\n  level: DEBUG\n")
        settings = load_settings(project_dir=tmp_path)
        assert settings.initial_capacity == 3
        assert settings.logging["level"] == "DEBUG"
        assert settings.path == tmp_path / "envctx.yaml"

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("loader:\n  max_line_length: 256\n")
        assert load_settings(path).max_line_length == 256

    def test_explicit_missing_path_raises(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_settings(tmp_path / "missing.yaml")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "envctx.yaml"
        path.write_text("")
        assert load_settings(path).initial_capacity == 10

    def test_invalid_yaml_raises(self, tmp_path):
        path = tmp_path / "envctx.yaml"
        path.write_text("loader: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Error parsing"):
            load_settings(path)

    def test_non_mapping_raises(self, tmp_path):
        path = tmp_path / "envctx.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError, match="must be a mapping"):
            load_settings(path)

    def test_invalid_values_raise(self, tmp_path):
        path = tmp_path / "envctx.yaml"
        path.write_text("loader:\n  initial_capacity: -5\n")
        with pytest.raises(ConfigurationError, match="initial_capacity"):
            load_settings(path)


class TestMergeDict:
    """Tests for _merge_dict helper."""

    def test_nested_merge(self):
        base = {"a": {"x": 1, "y": 2}}
        _merge_dict(base, {"a": {"y": 3, "z": 4}})
        assert base == {"a": {"x": 1, "y": 3, "z": 4}}

    def test_replace_dict_with_scalar(self):
        base = {"a": {"x": 1}}
        _merge_dict(base, {"a": None})
        assert base == {"a": None}
