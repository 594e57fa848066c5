"""Loading of model documents.

A model document lists the objects of a host project and their properties.
It stands in for reflecting over the project itself, which is left to
whichever tool exports the document. Both YAML and JSON documents are
accepted:

    objects:
      - name: Person
        fullName: Acme.Models.Person
        properties:
          - name: Age
            type: int
            summary: Age in years.
"""

import json
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError
from upath import UPath

from intellitype.codegen.model import ModelDocument, ModelObject
from intellitype.exceptions import ModelLoadError, ModelValidationError

logger = logging.getLogger(__name__)


class ModelLoader:
    """Loads model objects from YAML or JSON documents.

    Example:
        >>> loader = ModelLoader()
        >>> objects = loader.load('./model.yaml')
        >>> [obj.name for obj in objects]
        ['Person']
    """

    def __init__(self, base_path: str | Path | None = None):
        """Initialize the model loader.

        Args:
            base_path: Base path for resolving relative document paths.
                      Defaults to the current working directory.
        """
        self._base_path = UPath(base_path) if base_path else UPath(Path.cwd())

    def load(self, source: str | Path | UPath) -> tuple[ModelObject, ...]:
        """Load and validate the model objects of a document.

        Args:
            source: Path to the document.

        Returns:
            The model objects, in document order.

        Raises:
            ModelLoadError: If the document cannot be read or parsed.
            ModelValidationError: If the document does not describe model objects.
        """
        try:
            content = self._load_from_file(source)
            document = self.validate(content, str(source))
        except (ModelLoadError, ModelValidationError):
            raise
        except Exception as e:
            raise ModelLoadError(str(source), cause=e)

        logger.debug(f'Loaded {len(document.objects)} model objects from {source}')
        return document.objects

    def loads(self, text: str, source: str = '<string>') -> tuple[ModelObject, ...]:
        """Load model objects from document text."""
        try:
            content = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ModelLoadError(source, cause=e)
        return self.validate(content, source).objects

    def validate(self, content, source: str) -> ModelDocument:
        if content is None:
            content = {}
        if isinstance(content, list):
            content = {'objects': content}

        try:
            return ModelDocument.model_validate(content)
        except ValidationError as e:
            errors = [
                f'{".".join(str(loc) for loc in error["loc"])}: {error["msg"]}'
                for error in e.errors()
            ]
            raise ModelValidationError(source, errors)

    def _load_from_file(self, file_path: str | Path | UPath):
        path = UPath(file_path)
        if not path.is_absolute():
            path = self._base_path / str(file_path)

        if not path.exists():
            raise ModelLoadError(
                str(file_path), cause=FileNotFoundError(f'File not found: {path}')
            )

        try:
            content = path.read_text(encoding='utf-8')
            if path.suffix.lower() == '.json':
                return json.loads(content)
            return yaml.safe_load(content)
        except (json.JSONDecodeError, yaml.YAMLError, OSError) as e:
            raise ModelLoadError(str(file_path), cause=e)
