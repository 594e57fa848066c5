"""Parsing of free-form type descriptors into tagged variants.

A descriptor is the type string a host project reports for a property, e.g.
``int?``, ``System.String[]``, ``Nullable<int>`` or
``System.Collections.Generic.List<Acme.Widget>``. The parser recognises a
fixed set of shapes and never fails: anything it cannot place becomes a
``Named`` identifier or an ``Opaque`` pass-through.

Generic type arguments are classified but never parsed themselves, so only a
single level of nesting is understood. ``List<List<int>>`` is therefore a
collection of ``List<int>``, not a collection of collections.
"""

import dataclasses
import logging
import string

from intellitype.codegen.types import CanonicalType, classify

__all__ = [
    'Primitive',
    'Named',
    'ArrayOf',
    'GenericCollection',
    'GenericClass',
    'Opaque',
    'Descriptor',
    'parse_descriptor',
    'COLLECTIONS_MARKER',
    'ARRAY_TOKEN',
    'ARRAY_SUFFIX',
]

logger = logging.getLogger(__name__)

COLLECTIONS_MARKER = 'System.Collections'
ARRAY_TOKEN = 'Array'
ARRAY_SUFFIX = '[]'
NULLABLE_MARKER = '?'


@dataclasses.dataclass(frozen=True)
class Primitive:
    canonical: CanonicalType


@dataclasses.dataclass(frozen=True)
class Named:
    """A bare class name with any namespace qualifier removed."""

    name: str


@dataclasses.dataclass(frozen=True)
class ArrayOf:
    """A ``Name[]`` array. The element name is kept exactly as written."""

    element: str


@dataclasses.dataclass(frozen=True)
class GenericCollection:
    collection: str
    argument: Primitive | Named


@dataclasses.dataclass(frozen=True)
class GenericClass:
    """A non-collection generic whose single argument is a primitive."""

    name: str
    argument: Primitive


@dataclasses.dataclass(frozen=True)
class Opaque:
    raw: str


Descriptor = Primitive | Named | ArrayOf | GenericCollection | GenericClass | Opaque


def _is_letter(char: str) -> bool:
    return char in string.ascii_letters


def _trailing_letters(text: str) -> str:
    start = len(text)
    while start > 0 and _is_letter(text[start - 1]):
        start -= 1
    return text[start:]


def _match_generic(text: str, qualified: bool) -> tuple[str, str, int] | None:
    """Find the leftmost ``Name<Argument>`` that runs to the end of ``text``.

    With ``qualified`` the name must directly follow a ``.``. The name is a run
    of ASCII letters immediately followed by ``<``; the argument is everything
    between that ``<`` and the final ``>`` and must not be empty.

    Returns:
        ``(name, argument, start)`` where ``start`` is the index of the name,
        or None when there is no such suffix.
    """
    if not text.endswith('>'):
        return None

    end = len(text) - 1
    for index, char in enumerate(text):
        if qualified:
            if char != '.':
                continue
            name_start = index + 1
        else:
            name_start = index

        name_stop = name_start
        while name_stop < end and _is_letter(text[name_stop]):
            name_stop += 1

        if name_stop == name_start or text[name_stop] != '<':
            continue

        argument = text[name_stop + 1 : end]
        if argument:
            return text[name_start:name_stop], argument, name_start

    return None


def _parse_argument(argument: str) -> Primitive | Named:
    canonical = classify(argument)
    if canonical is not None:
        return Primitive(canonical)
    return Named(argument.split('.')[-1])


def parse_descriptor(descriptor: str) -> Descriptor:
    """Parse a type descriptor. Rules are tried in order, first match wins.

    1. Nullable markers are removed.
    2. Primitive table lookup.
    3. Namespaced collection ``ns.Collection<Arg>`` (only tried when the
       descriptor mentions ``System.Collections`` or ``Array``).
    4. ``Name[]`` array suffix.
    5. Generic class ``Name<Arg>``; only a primitive argument is understood,
       anything else keeps the matched text as it is.
    6. Trailing identifier, e.g. ``Guid`` for ``System.Guid``.

    A descriptor matching none of these is returned unchanged as ``Opaque``.
    """
    text = descriptor.replace(NULLABLE_MARKER, '')

    canonical = classify(text)
    if canonical is not None:
        return Primitive(canonical)

    if COLLECTIONS_MARKER in text or ARRAY_TOKEN in text:
        match = _match_generic(text, qualified=True)
        if match is not None:
            collection, argument, _ = match
            return GenericCollection(collection, _parse_argument(argument))

    if text.endswith(ARRAY_SUFFIX):
        element = _trailing_letters(text[: -len(ARRAY_SUFFIX)])
        if element:
            return ArrayOf(element)

    match = _match_generic(text, qualified=False)
    if match is not None:
        name, argument, start = match
        canonical = classify(argument)
        if canonical is not None:
            return GenericClass(name, Primitive(canonical))
        return Opaque(text[start:])

    identifier = _trailing_letters(text)
    if identifier:
        return Named(identifier)

    logger.debug(f'Unrecognized type descriptor passed through: {descriptor!r}')
    return Opaque(text)
