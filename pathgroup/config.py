import json
import os
import re
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from pathgroup.exceptions import ConfigurationError

DEFAULT_FILENAMES = ['pathgroup.yaml', 'pathgroup.yml']

_ENV_VAR_PATTERN = re.compile(r'\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-([^}]*))?\}')

# Property-bag keys as the generator front end spells them.
USE_TAGS = 'useTags'
INTERFACE_ONLY = 'interfaceOnly'
GENERATE_POM = 'generatePom'
RETURN_RESPONSE = 'returnResponse'


class GroupingMode(str, Enum):
    """How operations are partitioned into resource groups."""

    TAG = 'tag'
    PATH = 'path'


class GroupingConfig(BaseModel):
    """Immutable grouping configuration handed to the grouper at call time."""

    model_config = ConfigDict(frozen=True)

    mode: GroupingMode = Field(
        GroupingMode.PATH,
        description='Group by declared tag or by first path segment.',
    )


class GeneratorOptions(BaseSettings):
    """Generator flags, read from a config file, the environment or a property bag.

    Only ``use_tags`` influences grouping; the remaining flags are carried for
    the template and packaging stages.
    """

    model_config = SettingsConfigDict(env_prefix='PATHGROUP_', extra='ignore')

    use_tags: bool = Field(
        False, description='Whether to use tags for grouping operations.'
    )

    interface_only: bool = Field(
        False,
        description='Whether to generate only API interface stubs without the server files.',
    )

    generate_pom: bool = Field(
        True,
        description='Whether to generate pom.xml if the file does not already exist.',
    )

    return_response: bool = Field(
        False, description='Whether to return a javax.ws.rs.core.Response.'
    )

    @classmethod
    def from_additional_properties(
        cls, properties: dict[str, Any]
    ) -> 'GeneratorOptions':
        """Build options from a loose camelCase property bag.

        A flag is only set when its key is present. Its value is true when its
        string form equals ``true`` ignoring case, so ``'yes'`` or ``1`` are false.
        """
        keys = {
            USE_TAGS: 'use_tags',
            INTERFACE_ONLY: 'interface_only',
            GENERATE_POM: 'generate_pom',
            RETURN_RESPONSE: 'return_response',
        }
        values = {
            field: _parse_bool(properties[key])
            for key, field in keys.items()
            if key in properties
        }
        return cls(**values)

    @property
    def grouping_mode(self) -> GroupingMode:
        return GroupingMode.TAG if self.use_tags else GroupingMode.PATH

    def grouping_config(self) -> GroupingConfig:
        return GroupingConfig(mode=self.grouping_mode)


def _parse_bool(value: Any) -> bool:
    return str(value).lower() == 'true'


def _expand_env_vars(value: str) -> str:
    """Expand ``${VAR}`` and ``${VAR:-default}`` references in a string."""

    def replace(match: re.Match) -> str:
        name, default = match.group(1), match.group(2)
        return os.environ.get(name, default if default is not None else '')

    return _ENV_VAR_PATTERN.sub(replace, value)


def _expand_env_vars_recursive(data: Any) -> Any:
    if isinstance(data, str):
        return _expand_env_vars(data)
    if isinstance(data, dict):
        return {key: _expand_env_vars_recursive(value) for key, value in data.items()}
    if isinstance(data, list):
        return [_expand_env_vars_recursive(item) for item in data]
    return data


def load_yaml(path: str | Path) -> Any:
    return yaml.safe_load(Path(path).read_text())


def load_json(path: str | Path) -> Any:
    return json.loads(Path(path).read_text())


def _load_file(path: Path) -> Any:
    try:
        if path.suffix == '.json':
            return load_json(path)
        return load_yaml(path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise ConfigurationError(
            f'Could not read configuration: {e}', config_path=str(path)
        ) from e


def _validate(data: Any, source: str) -> GeneratorOptions:
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError('Configuration must be a mapping', config_path=source)
    try:
        return GeneratorOptions(**_expand_env_vars_recursive(data))
    except ValidationError as e:
        error = e.errors()[0]
        field = '.'.join(str(part) for part in error['loc'])
        raise ConfigurationError(error['msg'], config_path=source, field=field) from e


def get_config(path: str | None = None) -> GeneratorOptions:
    """Load generator options from a file, or fall back to defaults and environment.

    Args:
        path: Optional explicit YAML or JSON configuration file.

    Returns:
        The loaded GeneratorOptions.

    Raises:
        ConfigurationError: If an explicit file is missing, unreadable or invalid.
    """
    if path:
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigurationError('Configuration file not found', config_path=path)
        return _validate(_load_file(config_path), path)

    cwd = Path(os.getcwd())

    for filename in DEFAULT_FILENAMES:
        candidate = cwd / filename
        if candidate.exists():
            return _validate(_load_file(candidate), str(candidate))

    pyproject_path = cwd / 'pyproject.toml'

    if pyproject_path.exists():
        import tomllib

        try:
            pyproject = tomllib.loads(pyproject_path.read_text())
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigurationError(
                f'Could not read configuration: {e}', config_path=str(pyproject_path)
            ) from e
        tools = pyproject.get('tool', {})

        if 'pathgroup' in tools:
            return _validate(tools['pathgroup'], str(pyproject_path))

    return GeneratorOptions()
