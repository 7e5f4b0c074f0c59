"""Tests for Configuration."""

from pathlib import Path

import enumerated_attribute.configuration as configuration_module
import pytest
from enumerated_attribute import Configuration
from enumerated_attribute import SchemaFileNotFoundError
from enumerated_attribute import SchemaFileNotReadableError


class TestDefaultConfig:
    """Test the computed default configuration."""

    def test_default_in_project_root(self, schema_dir, monkeypatch):
        """Test the default schema file lives in the project root."""
        (schema_dir / "pyproject.toml").write_text("")
        nested = schema_dir / "app" / "models"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)

        config = Configuration()

        expected = Path.cwd().parent.parent / "enumerated_attributes.yml"
        assert config.default_config == {"schema_file": expected}
        assert config.schema_file == expected

    def test_default_in_cwd_without_project_root(self, schema_dir, monkeypatch):
        """Test the working directory is used when no project root is found."""
        monkeypatch.chdir(schema_dir)
        monkeypatch.setattr(configuration_module, "find_project_root", lambda start: None)

        config = Configuration()

        assert config.schema_file == Path.cwd() / "enumerated_attributes.yml"

    def test_default_config_is_read_only(self):
        """Test the default configuration cannot be modified."""
        config = Configuration()
        with pytest.raises(TypeError):
            config.default_config["schema_file"] = Path("other.yml")

    def test_default_config_is_memoized(self, schema_dir, monkeypatch):
        """Test the default is computed once."""
        monkeypatch.chdir(schema_dir)
        config = Configuration()
        first = config.default_config

        monkeypatch.chdir(schema_dir.parent)
        assert config.default_config is first


class TestSchemaFile:
    """Test setting the schema file."""

    def test_set_schema_file(self, schema_dir):
        """Test setting a valid schema file."""
        config = Configuration()
        config.schema_file = str(schema_dir / "fake_user.yml")
        assert config.schema_file == schema_dir / "fake_user.yml"

    def test_constructor_schema_file(self, schema_dir):
        """Test passing the schema file to the constructor."""
        config = Configuration(schema_file=schema_dir / "fake_user.yml")
        assert config.schema_file == schema_dir / "fake_user.yml"

    def test_missing_schema_file(self, schema_dir):
        """Test a missing file raises SchemaFileNotFoundError with the path."""
        config = Configuration()
        missing = schema_dir / "invalid_file.php"
        with pytest.raises(SchemaFileNotFoundError) as exc_info:
            config.schema_file = missing
        assert exc_info.value.schema_file == missing

    def test_directory_schema_file(self, schema_dir):
        """Test a directory raises SchemaFileNotFoundError."""
        with pytest.raises(SchemaFileNotFoundError) as exc_info:
            Configuration(schema_file=schema_dir)
        assert exc_info.value.schema_file == schema_dir

    def test_unreadable_schema_file(self, schema_dir, unreadable):
        """Test an unreadable file raises SchemaFileNotReadableError with the path."""
        path = schema_dir / "enumerated_attributes.yml"
        unreadable.add(path)
        config = Configuration()
        with pytest.raises(SchemaFileNotReadableError) as exc_info:
            config.schema_file = path
        assert exc_info.value.schema_file == path

    def test_failed_set_keeps_previous_value(self, schema_dir):
        """Test a rejected value leaves the schema file unchanged."""
        config = Configuration(schema_file=schema_dir / "fake_user.yml")
        with pytest.raises(SchemaFileNotFoundError):
            config.schema_file = schema_dir / "missing.yml"
        assert config.schema_file == schema_dir / "fake_user.yml"

    def test_reset_to_default(self, schema_dir):
        """Test None resets to the default schema file."""
        config = Configuration(schema_file=schema_dir / "fake_user.yml")
        config.schema_file = None
        assert config.schema_file == config.default_config["schema_file"]


class TestSchema:
    """Test the shared schema document."""

    def test_schema_loaded(self, config):
        """Test the schema document is parsed from the schema file."""
        assert config.schema == {"fake_superhero": {"powers": ["lying", "flexing", "none"]}}

    def test_schema_loaded_once(self, config, monkeypatch):
        """Test the schema file is read only once."""
        calls = []
        real_load = configuration_module.load_schema_file

        def counting_load(path):
            calls.append(path)
            return real_load(path)

        monkeypatch.setattr(configuration_module, "load_schema_file", counting_load)

        first = config.schema
        second = config.schema

        assert first is second
        assert len(calls) == 1

    def test_schema_reloaded_after_change(self, config, schema_dir):
        """Test setting a new schema file discards the cached document."""
        assert "fake_superhero" in config.schema
        config.schema_file = schema_dir / "shop.yml"
        assert config.schema == {"shop": {"user": {"role": ["member", "admin"]}}}

    def test_missing_default_schema(self, schema_dir, monkeypatch):
        """Test a missing default file raises when the schema is needed."""
        empty_dir = schema_dir / "project"
        empty_dir.mkdir()
        (empty_dir / "pyproject.toml").write_text("")
        monkeypatch.chdir(empty_dir)

        config = Configuration()

        with pytest.raises(SchemaFileNotFoundError):
            config.schema
