"""Tests for configuration loading and grouping configuration models."""

import json
import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from pathgroup.config import (
    GeneratorOptions,
    GroupingConfig,
    GroupingMode,
    _expand_env_vars,
    _expand_env_vars_recursive,
    get_config,
)
from pathgroup.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep PATHGROUP_* variables from leaking into option defaults."""
    for name in list(os.environ):
        if name.startswith('PATHGROUP_'):
            monkeypatch.delenv(name)


class TestGroupingMode:
    """Tests for the GroupingMode enum."""

    def test_enum_values(self):
        """Test that both modes exist with their string values."""
        assert GroupingMode.TAG.value == 'tag'
        assert GroupingMode.PATH.value == 'path'

    def test_invalid_mode(self):
        """Test that unknown values raise an error."""
        with pytest.raises(ValueError):
            GroupingMode('alphabetical')


class TestGroupingConfig:
    """Tests for the GroupingConfig model."""

    def test_default_mode(self):
        """Test that path-segment grouping is the default."""
        assert GroupingConfig().mode is GroupingMode.PATH

    def test_from_string(self):
        """Test creating a config from the mode's string value."""
        assert GroupingConfig(mode='tag').mode is GroupingMode.TAG

    def test_invalid_mode(self):
        """Test that an unknown mode is rejected at construction."""
        with pytest.raises(ValidationError):
            GroupingConfig(mode='alphabetical')

    def test_frozen(self):
        """Test that the config cannot be changed after construction."""
        config = GroupingConfig()
        with pytest.raises(ValidationError):
            config.mode = GroupingMode.TAG


class TestGeneratorOptions:
    """Tests for the GeneratorOptions settings."""

    def test_defaults(self):
        """Test the default flag values."""
        options = GeneratorOptions()
        assert options.use_tags is False
        assert options.interface_only is False
        assert options.generate_pom is True
        assert options.return_response is False

    def test_grouping_config(self):
        """Test that use_tags selects the grouping mode."""
        assert GeneratorOptions().grouping_config().mode is GroupingMode.PATH
        assert (
            GeneratorOptions(use_tags=True).grouping_config().mode is GroupingMode.TAG
        )

    def test_from_environment(self, monkeypatch):
        """Test that flags are read from PATHGROUP_ variables."""
        monkeypatch.setenv('PATHGROUP_USE_TAGS', 'true')
        assert GeneratorOptions().use_tags is True

    def test_from_additional_properties(self):
        """Test reading flags from a camelCase property bag."""
        options = GeneratorOptions.from_additional_properties(
            {'useTags': 'true', 'generatePom': False, 'interfaceOnly': 'TRUE'}
        )
        assert options.use_tags is True
        assert options.generate_pom is False
        assert options.interface_only is True
        assert options.return_response is False

    def test_additional_properties_only_true_is_true(self):
        """Test that values other than 'true' parse as false."""
        options = GeneratorOptions.from_additional_properties(
            {'useTags': 'yes', 'returnResponse': 1}
        )
        assert options.use_tags is False
        assert options.return_response is False

    def test_additional_properties_missing_keys_keep_defaults(self):
        """Test that absent keys leave defaults in place."""
        options = GeneratorOptions.from_additional_properties({'unrelated': 'true'})
        assert options.generate_pom is True
        assert options.use_tags is False


class TestEnvironmentVariableExpansion:
    """Tests for environment variable expansion in configuration."""

    def test_expand_simple_env_var(self):
        """Test expanding a simple environment variable."""
        with patch.dict(os.environ, {'TEST_VAR': 'test_value'}):
            assert _expand_env_vars('${TEST_VAR}') == 'test_value'

    def test_expand_env_var_with_default(self):
        """Test expanding an env var with default when not set."""
        os.environ.pop('UNSET_VAR', None)
        assert _expand_env_vars('${UNSET_VAR:-false}') == 'false'

    def test_expand_recursive(self):
        """Test expansion inside nested structures."""
        with patch.dict(os.environ, {'GROUP_BY_TAG': 'true'}):
            data = {'use_tags': '${GROUP_BY_TAG}', 'nested': ['${GROUP_BY_TAG}', 3]}
            assert _expand_env_vars_recursive(data) == {
                'use_tags': 'true',
                'nested': ['true', 3],
            }


class TestGetConfig:
    """Tests for get_config."""

    def test_explicit_yaml_file(self, tmp_path):
        """Test loading an explicit YAML file."""
        config_file = tmp_path / 'custom.yaml'
        config_file.write_text('use_tags: true\ngenerate_pom: false\n')

        options = get_config(str(config_file))

        assert options.use_tags is True
        assert options.generate_pom is False

    def test_explicit_json_file(self, tmp_path):
        """Test loading an explicit JSON file."""
        config_file = tmp_path / 'custom.json'
        config_file.write_text(json.dumps({'return_response': True}))

        assert get_config(str(config_file)).return_response is True

    def test_missing_explicit_file(self, tmp_path):
        """Test that a missing explicit file is a configuration error."""
        with pytest.raises(ConfigurationError) as exc_info:
            get_config(str(tmp_path / 'missing.yaml'))
        assert 'missing.yaml' in str(exc_info.value)

    def test_invalid_yaml(self, tmp_path):
        """Test that unparsable YAML is a configuration error."""
        config_file = tmp_path / 'broken.yaml'
        config_file.write_text('use_tags: [unclosed\n')

        with pytest.raises(ConfigurationError):
            get_config(str(config_file))

    def test_not_a_mapping(self, tmp_path):
        """Test that a non-mapping document is rejected."""
        config_file = tmp_path / 'list.yaml'
        config_file.write_text('- use_tags\n')

        with pytest.raises(ConfigurationError):
            get_config(str(config_file))

    def test_invalid_value_names_field(self, tmp_path):
        """Test that an invalid value reports the offending field."""
        config_file = tmp_path / 'bad.yaml'
        config_file.write_text('use_tags: sometimes\n')

        with pytest.raises(ConfigurationError) as exc_info:
            get_config(str(config_file))
        assert exc_info.value.field == 'use_tags'

    def test_env_expansion_in_file(self, tmp_path):
        """Test that ${VAR} references in a file are expanded."""
        config_file = tmp_path / 'env.yaml'
        config_file.write_text('use_tags: ${GROUP_BY_TAG:-true}\n')

        assert get_config(str(config_file)).use_tags is True

    def test_default_filename_in_cwd(self, tmp_path, monkeypatch):
        """Test discovery of pathgroup.yaml in the working directory."""
        (tmp_path / 'pathgroup.yaml').write_text('use_tags: true\n')
        monkeypatch.chdir(tmp_path)

        assert get_config().use_tags is True

    def test_pyproject_tool_section(self, tmp_path, monkeypatch):
        """Test discovery of [tool.pathgroup] in pyproject.toml."""
        (tmp_path / 'pyproject.toml').write_text(
            '[tool.pathgroup]\nuse_tags = true\ninterface_only = true\n'
        )
        monkeypatch.chdir(tmp_path)

        options = get_config()

        assert options.use_tags is True
        assert options.interface_only is True

    def test_malformed_pyproject(self, tmp_path, monkeypatch):
        """Test that an unparsable pyproject.toml is a configuration error."""
        (tmp_path / 'pyproject.toml').write_text('[tool.pathgroup\nuse_tags = true\n')
        monkeypatch.chdir(tmp_path)

        with pytest.raises(ConfigurationError) as exc_info:
            get_config()
        assert exc_info.value.config_path == str(tmp_path / 'pyproject.toml')

    def test_defaults_when_nothing_found(self, tmp_path, monkeypatch):
        """Test falling back to default options."""
        monkeypatch.chdir(tmp_path)

        assert get_config() == GeneratorOptions()
