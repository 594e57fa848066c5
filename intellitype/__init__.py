"""intellitype - Generate IntelliSense files from server-side model descriptions.

intellitype turns a description of server-side model objects (their names and
the type descriptors of their properties) into editor IntelliSense files: a
JavaScript stub module or a TypeScript ambient declaration module.

Quick Start:
    >>> from intellitype import Codegen, DocumentConfig
    >>>
    >>> config = DocumentConfig(source='./model.yaml', output='./server.d.ts')
    >>> Codegen(config).generate()

CLI Usage:
    $ intellitype generate --config intellitype.yaml
    $ intellitype resolve 'System.Collections.Generic.List<int>' 'int?'
"""

from intellitype.codegen.codegen import Codegen
from intellitype.codegen.emitter import DeclarationEmitter, StubEmitter, select_emitter
from intellitype.codegen.loader import ModelLoader
from intellitype.codegen.model import ModelObject, ModelProperty
from intellitype.codegen.resolver import resolve_dynamic, resolve_static
from intellitype.codegen.types import CanonicalType, classify
from intellitype.config import CodegenConfig, DocumentConfig, get_config
from intellitype.exceptions import (
    ConfigurationError,
    IntellitypeError,
    ModelError,
    ModelLoadError,
    ModelValidationError,
    OutputError,
)

__all__ = [
    # Main classes
    'Codegen',
    'ModelLoader',
    'ModelObject',
    'ModelProperty',
    'StubEmitter',
    'DeclarationEmitter',
    'select_emitter',
    'CanonicalType',
    'classify',
    'resolve_dynamic',
    'resolve_static',
    # Configuration
    'CodegenConfig',
    'DocumentConfig',
    'get_config',
    # Exceptions
    'IntellitypeError',
    'ModelError',
    'ModelLoadError',
    'ModelValidationError',
    'ConfigurationError',
    'OutputError',
]

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version('intellitype')
except PackageNotFoundError:
    __version__ = 'unknown'
