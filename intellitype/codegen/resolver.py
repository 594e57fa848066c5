"""Resolution of type descriptors into target-notation type names.

The stub notation only needs a constructor that can produce a placeholder
value, so ``resolve_dynamic`` returns one of a handful of runtime tags. The
declaration notation wants the most precise type expression available, which
``resolve_static`` renders from the parsed descriptor.
"""

from intellitype.codegen.descriptors import (
    ARRAY_SUFFIX,
    ARRAY_TOKEN,
    COLLECTIONS_MARKER,
    ArrayOf,
    Descriptor,
    GenericClass,
    GenericCollection,
    Named,
    Opaque,
    Primitive,
    parse_descriptor,
)
from intellitype.codegen.types import classify

__all__ = ['resolve_dynamic', 'resolve_static', 'render_static']

ARRAY_TAG = 'Array'
OBJECT_TAG = 'Object'


def resolve_dynamic(descriptor: str) -> str:
    """Return the runtime constructor name used for a placeholder value.

    Examples:
        >>> resolve_dynamic('Int32')
        'Number'
        >>> resolve_dynamic('System.Collections.Generic.List<Widget>')
        'Array'
        >>> resolve_dynamic('Acme.Widget')
        'Object'
    """
    canonical = classify(descriptor)
    if canonical is not None:
        return canonical.value

    if (
        COLLECTIONS_MARKER in descriptor
        or ARRAY_SUFFIX in descriptor
        or ARRAY_TOKEN in descriptor
    ):
        return ARRAY_TAG

    return OBJECT_TAG


def render_static(
    descriptor: Descriptor, bracket_generic_arguments: bool = False
) -> str:
    """Render a parsed descriptor as a type expression.

    Args:
        descriptor: The parsed descriptor.
        bracket_generic_arguments: Render a generic class with a primitive
            argument as ``Nullable<Number>``. By default the name and the
            canonical argument are concatenated (``NullableNumber``).
    """
    if isinstance(descriptor, Primitive):
        return descriptor.canonical.value
    if isinstance(descriptor, Named):
        return descriptor.name
    if isinstance(descriptor, ArrayOf):
        return f'Array<{descriptor.element}>'
    if isinstance(descriptor, GenericCollection):
        return f'Array<{render_static(descriptor.argument)}>'
    if isinstance(descriptor, GenericClass):
        argument = render_static(descriptor.argument)
        if bracket_generic_arguments:
            return f'{descriptor.name}<{argument}>'
        return descriptor.name + argument
    if isinstance(descriptor, Opaque):
        return descriptor.raw
    raise TypeError(f'Unsupported descriptor: {descriptor!r}')


def resolve_static(descriptor: str, bracket_generic_arguments: bool = False) -> str:
    """Return the declaration-notation type expression for a descriptor.

    Examples:
        >>> resolve_static('int?')
        'Number'
        >>> resolve_static('System.Collections.Generic.List<System.String>')
        'Array<String>'
        >>> resolve_static('int[]')
        'Array<int>'
        >>> resolve_static('Nullable<int>')
        'NullableNumber'
    """
    return render_static(parse_descriptor(descriptor), bracket_generic_arguments)
