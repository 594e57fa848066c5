"""Emitters rendering model objects in the two supported notations.

An emitter turns a sequence of ModelObject instances into the text of one
output file. Emitters keep no state between calls: ``emit`` is a pure function
of its input, so emitting the same objects twice yields identical text.
"""

import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import PurePath
from xml.sax.saxutils import escape

from intellitype.codegen.model import ModelObject, ModelProperty
from intellitype.codegen.resolver import resolve_dynamic, resolve_static
from intellitype.codegen.types import classify

__all__ = [
    'Emitter',
    'StubEmitter',
    'DeclarationEmitter',
    'select_emitter',
    'DECLARATION_EXTENSION',
]

logger = logging.getLogger(__name__)

DECLARATION_EXTENSION = '.ts'

_LINE_BREAK_PATTERN = re.compile(r'\s*[\r\n]+\s*')
_XML_ENTITIES = {'"': '&quot;', "'": '&apos;'}


class Emitter(ABC):
    """Abstract base class for emitters.

    Attributes:
        namespace: Name of the container the generated members live in.
    """

    file_extension: str

    def __init__(self, namespace: str = 'server'):
        self.namespace = namespace

    @abstractmethod
    def emit(self, objects: Iterable[ModelObject]) -> str:
        """Render the objects, in the given order, as the text of one file."""
        pass


class StubEmitter(Emitter):
    """Emits a JavaScript IntelliSense stub.

    Every object becomes a constructor function on the namespace object. Each
    property is documented with a ``/// <field>`` comment and initialised with
    a placeholder built from its runtime tag, e.g. ``new Number()``.
    """

    file_extension = '.js'

    def emit(self, objects: Iterable[ModelObject]) -> str:
        lines = [f'var {self.namespace} = {self.namespace} || {{}};']

        for obj in objects:
            lines.append(f'{self.namespace}.{obj.name} = function()  {{')
            for prop in obj.properties:
                lines.extend(self._emit_property(obj, prop))
            lines.append('};')
            lines.append('')

        return '\n'.join(lines) + '\n'

    def _emit_property(self, obj: ModelObject, prop: ModelProperty) -> list[str]:
        value = resolve_dynamic(prop.type)
        comment = escape(self._comment(obj, prop), _XML_ENTITIES)
        return [
            f'\t/// <field name="{prop.name}" type="{value}">{comment}</field>',
            f'\tthis.{prop.name} = new {value}();',
        ]

    @staticmethod
    def _comment(obj: ModelObject, prop: ModelProperty) -> str:
        comment = prop.summary
        if comment is None:
            comment = f'The {prop.name} property as defined in {obj.full_name}'
        return _LINE_BREAK_PATTERN.sub(' ', comment).strip()


class DeclarationEmitter(Emitter):
    """Emits a TypeScript ambient module with one interface per object."""

    file_extension = DECLARATION_EXTENSION

    def __init__(
        self, namespace: str = 'server', bracket_generic_arguments: bool = False
    ):
        """Initialize the declaration emitter.

        Args:
            namespace: Name of the declared module.
            bracket_generic_arguments: Passed on to the static resolver; renders
                ``Nullable<int>`` as ``Nullable<Number>`` instead of
                ``NullableNumber``.
        """
        super().__init__(namespace)
        self.bracket_generic_arguments = bracket_generic_arguments

    def emit(self, objects: Iterable[ModelObject]) -> str:
        lines = [f'declare module {self.namespace} {{', '']

        for obj in objects:
            lines.append(self._interface_header(obj))
            for prop in obj.properties:
                value = resolve_static(prop.type, self.bracket_generic_arguments)
                lines.append(f'\t\t{prop.name}: {value};')
            lines.append('}')

        lines.append('}')
        return '\n'.join(lines) + '\n'

    @staticmethod
    def generic_parameter(full_name: str) -> str | None:
        """Return the generic parameter of a ``Name<T>`` full name, if any.

        A primitive parameter is replaced by its canonical name; anything else
        is returned as written.
        """
        start = full_name.find('<')
        if start < 0 or not full_name.endswith('>'):
            return None

        parameter = full_name[start + 1 : -1]
        canonical = classify(parameter)
        if canonical is not None:
            return canonical.value
        return parameter

    def _interface_header(self, obj: ModelObject) -> str:
        parameter = self.generic_parameter(obj.full_name)
        if parameter is None:
            return f'\tinterface {obj.name}{{'
        return f'\tinterface {obj.name}<{parameter}> {{'


def select_emitter(
    path: str | PurePath,
    namespace: str = 'server',
    bracket_generic_arguments: bool = False,
) -> Emitter:
    """Choose the emitter for an output path based on its extension.

    A ``.ts`` extension (in any casing) selects the declaration notation;
    every other extension selects the stub notation.
    """
    suffix = PurePath(path).suffix.lower()
    if suffix == DECLARATION_EXTENSION:
        emitter = DeclarationEmitter(namespace, bracket_generic_arguments)
    else:
        emitter = StubEmitter(namespace)

    logger.debug(f'Selected {type(emitter).__name__} for {path}')
    return emitter
