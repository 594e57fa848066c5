import os
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from intellitype.exceptions import ConfigurationError

DEFAULT_FILENAMES = ['intellitype.yaml', 'intellitype.yml']


class DocumentConfig(BaseModel):
    """Represents a single model document to be processed."""

    source: str = Field(..., description='Path to the model document (YAML or JSON).')

    output: str = Field(
        ...,
        description='Output file for the generated code. A .ts extension selects '
        'the declaration notation, anything else the stub notation.',
    )

    namespace: str = Field(
        'server', description='Name of the container the generated members live in.'
    )

    bracket_generic_arguments: bool = Field(
        False,
        description='Render primitive generic class arguments as Name<Number> '
        'instead of NameNumber.',
    )

    only_if_changed: bool = Field(
        True, description='Skip writing when the output already holds the same text.'
    )


class CodegenConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='INTELLITYPE_')

    documents: list[DocumentConfig] = Field(
        ..., description='List of model documents to process.'
    )


def load_yaml(path: str | Path) -> dict:
    import yaml

    return yaml.load(Path(path).read_text(), Loader=yaml.FullLoader)


def _validate(data: dict, config_path: str | None = None) -> CodegenConfig:
    try:
        return CodegenConfig.model_validate(data)
    except ValidationError as e:
        field = '.'.join(str(loc) for loc in e.errors()[0]['loc']) or None
        raise ConfigurationError('Invalid configuration', config_path, field) from e


def _load_file(path: str | Path) -> CodegenConfig:
    import yaml

    try:
        data = load_yaml(path)
    except (yaml.YAMLError, OSError) as e:
        raise ConfigurationError('Invalid configuration', str(path)) from e
    return _validate(data, str(path))


def _load_pyproject(path: Path) -> CodegenConfig | None:
    import tomllib

    try:
        pyproject = tomllib.loads(path.read_text())
    except (tomllib.TOMLDecodeError, OSError) as e:
        raise ConfigurationError('Invalid configuration', str(path)) from e

    tools = pyproject.get('tool', {})
    if 'intellitype' in tools:
        return _validate(tools['intellitype'], str(path))
    return None


def get_config(path: str | None = None) -> CodegenConfig:
    """Load configuration from a file or the current directory."""
    if path:
        if not Path(path).exists():
            raise ConfigurationError('Configuration file not found', config_path=path)
        return _load_file(path)

    cwd = os.getcwd()

    for filename in DEFAULT_FILENAMES:
        path = Path(cwd) / filename
        if path.exists():
            return _load_file(path)

    path = Path(cwd) / 'pyproject.toml'

    if path.exists():
        config = _load_pyproject(path)
        if config is not None:
            return config

    raise ConfigurationError('Configuration not found', config_path=cwd)
