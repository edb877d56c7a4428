"""Tests for configuration loading."""

from pathlib import Path

from jsdoc_serializer.config import (
    CONFIG_FILENAME,
    DEFAULT_EXTENSIONS,
    SerializerConfig,
    load_config,
    save_config,
)


class TestConfigLoading:
    """Tests for load_config."""

    def test_defaults_when_missing(self, tmp_path: Path) -> None:
        """Test a directory without a config gives defaults."""
        config = load_config(tmp_path)

        assert config.extensions == DEFAULT_EXTENSIONS
        assert config.attach_todos is False
        assert config.indent == 2

    def test_load_from_directory(self, tmp_path: Path) -> None:
        """Test the config file is found inside a directory."""
        (tmp_path / CONFIG_FILENAME).write_text(
            "extensions: [js, .ts]\nexclude: [vendor]\nattach_todos: true\nindent: 4\n"
        )

        config = load_config(tmp_path)

        assert config.extensions == [".js", ".ts"]
        assert config.exclude == ["vendor"]
        assert config.attach_todos is True
        assert config.indent == 4

    def test_partial_config_keeps_defaults(self, tmp_path: Path) -> None:
        """Test missing keys keep their defaults."""
        path = tmp_path / "custom.yaml"
        path.write_text("attach_todos: true\n")

        config = load_config(path)

        assert config.attach_todos is True
        assert config.extensions == DEFAULT_EXTENSIONS

    def test_scalar_lists_are_wrapped(self, tmp_path: Path) -> None:
        """Test a single extension or exclude written as a scalar is one entry."""
        path = tmp_path / "scalar.yaml"
        path.write_text("extensions: js\nexclude: vendor\n")

        config = load_config(path)

        assert config.extensions == [".js"]
        assert config.exclude == ["vendor"]

    def test_invalid_yaml_falls_back(self, tmp_path: Path, caplog) -> None:
        """Test unreadable YAML logs a warning and uses defaults."""
        path = tmp_path / "broken.yaml"
        path.write_text("extensions: [unclosed\n")

        config = load_config(path)

        assert config == SerializerConfig()
        assert "Could not load config" in caplog.text

    def test_non_mapping_falls_back(self, tmp_path: Path) -> None:
        """Test a YAML list is ignored."""
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        assert load_config(path) == SerializerConfig()


class TestConfigSaving:
    """Tests for save_config."""

    def test_save_and_load(self, tmp_path: Path) -> None:
        """Test a saved config loads back equal."""
        config = SerializerConfig(extensions=[".js"], exclude=[], attach_todos=True, indent=0)
        path = tmp_path / "nested" / CONFIG_FILENAME

        save_config(config, path)

        assert load_config(path) == config
