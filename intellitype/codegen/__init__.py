"""Code generation module for intellitype.

Main Components:
    - classify: Maps a type descriptor to its canonical primitive
    - parse_descriptor: Parses a type descriptor into a tagged variant
    - resolve_dynamic / resolve_static: Render descriptors per notation
    - StubEmitter / DeclarationEmitter: Render model objects as text
    - ModelLoader: Loads model objects from YAML or JSON documents
    - OutputWriter: Persists generated text with change detection
    - Codegen: Drives a generation run for one configured document

Example:
    >>> from intellitype.codegen import DeclarationEmitter, ModelObject, ModelProperty
    >>>
    >>> person = ModelObject(
    ...     name='Person',
    ...     full_name='Acme.Person',
    ...     properties=[ModelProperty(name='Age', type='int')],
    ... )
    >>> print(DeclarationEmitter().emit([person]))
"""

from intellitype.codegen.codegen import Codegen
from intellitype.codegen.descriptors import (
    ArrayOf,
    Descriptor,
    GenericClass,
    GenericCollection,
    Named,
    Opaque,
    Primitive,
    parse_descriptor,
)
from intellitype.codegen.emitter import (
    DeclarationEmitter,
    Emitter,
    StubEmitter,
    select_emitter,
)
from intellitype.codegen.file_writer import OutputWriter
from intellitype.codegen.loader import ModelLoader
from intellitype.codegen.model import ModelDocument, ModelObject, ModelProperty
from intellitype.codegen.resolver import render_static, resolve_dynamic, resolve_static
from intellitype.codegen.types import CanonicalType, classify

__all__ = [
    # Main codegen class
    'Codegen',
    # Input model
    'ModelObject',
    'ModelProperty',
    'ModelDocument',
    'ModelLoader',
    # Type classification and resolution
    'CanonicalType',
    'classify',
    'parse_descriptor',
    'Descriptor',
    'Primitive',
    'Named',
    'ArrayOf',
    'GenericCollection',
    'GenericClass',
    'Opaque',
    'resolve_dynamic',
    'resolve_static',
    'render_static',
    # Code emission
    'Emitter',
    'StubEmitter',
    'DeclarationEmitter',
    'select_emitter',
    'OutputWriter',
]
