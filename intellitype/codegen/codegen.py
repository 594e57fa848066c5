"""Code generation module for intellitype.

This module provides the Codegen class that drives one generation run: it
loads the model document, picks the emitter from the output extension and
writes the emitted text.
"""

import logging
from collections.abc import Iterable

from upath import UPath

from intellitype.codegen.emitter import Emitter, select_emitter
from intellitype.codegen.file_writer import OutputWriter
from intellitype.codegen.loader import ModelLoader
from intellitype.codegen.model import ModelObject
from intellitype.config import DocumentConfig

logger = logging.getLogger(__name__)


class Codegen:
    """Generates an IntelliSense file for one configured model document.

    Attributes:
        config: The DocumentConfig containing source and output settings.
        emitter: The emitter selected from the output extension.

    Example:
        >>> from intellitype.config import DocumentConfig
        >>> from intellitype.codegen.codegen import Codegen
        >>>
        >>> config = DocumentConfig(source='./model.yaml', output='./server.d.ts')
        >>> Codegen(config).generate()
        # Writes the TypeScript declarations to ./server.d.ts
    """

    def __init__(
        self,
        config: DocumentConfig,
        loader: ModelLoader | None = None,
        writer: OutputWriter | None = None,
    ):
        """Initialize the code generator.

        Args:
            config: Configuration specifying the model document and output file.
            loader: Optional custom model loader.
            writer: Optional custom output writer. Defaults to one honouring
                    ``config.only_if_changed``.
        """
        self.config = config
        self.emitter: Emitter = select_emitter(
            config.output,
            namespace=config.namespace,
            bracket_generic_arguments=config.bracket_generic_arguments,
        )
        self._loader = loader or ModelLoader()
        self._writer = writer or OutputWriter(only_if_changed=config.only_if_changed)

    def render(self, objects: Iterable[ModelObject]) -> str:
        """Render model objects with the selected emitter."""
        return self.emitter.emit(objects)

    def generate(self) -> UPath:
        """Load the model document, render it and write the output file.

        Returns:
            The output path.

        Raises:
            ModelLoadError: If the model document cannot be read or parsed.
            ModelValidationError: If the document does not describe model objects.
            OutputError: If the output cannot be written.
        """
        objects = self._loader.load(self.config.source)
        content = self.render(objects)

        output = UPath(self.config.output)
        self._writer.write(output, content)

        logger.info(
            f'Generated {len(objects)} objects from {self.config.source} into {output}'
        )
        return output
