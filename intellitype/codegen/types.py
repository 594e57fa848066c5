"""Primitive type classification shared by every notation."""

from enum import Enum

__all__ = ['CanonicalType', 'classify', 'DATETIME_TYPE_NAME']

DATETIME_TYPE_NAME = 'system.datetime'


class CanonicalType(str, Enum):
    NUMBER = 'Number'
    DATE = 'Date'
    STRING = 'String'
    BOOLEAN = 'Boolean'

    def __str__(self) -> str:
        return self.value


_PRIMITIVE_TYPE_MAP = {
    'int': CanonicalType.NUMBER,
    'int32': CanonicalType.NUMBER,
    'int64': CanonicalType.NUMBER,
    'long': CanonicalType.NUMBER,
    'double': CanonicalType.NUMBER,
    'float': CanonicalType.NUMBER,
    'decimal': CanonicalType.NUMBER,
    DATETIME_TYPE_NAME: CanonicalType.DATE,
    'string': CanonicalType.STRING,
    'bool': CanonicalType.BOOLEAN,
    'boolean': CanonicalType.BOOLEAN,
}


def classify(descriptor: str) -> CanonicalType | None:
    """Map a type descriptor to its canonical primitive, or None if not primitive.

    The lookup is case-insensitive and exact: ``Int32`` is a Number but
    ``System.Int32`` is not primitive.
    """
    return _PRIMITIVE_TYPE_MAP.get(descriptor.lower())
