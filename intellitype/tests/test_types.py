"""Test primitive type classification."""

import pytest

from intellitype.codegen.types import CanonicalType, classify


class TestClassify:
    """Test the classify function."""

    @pytest.mark.parametrize(
        'descriptor',
        ['int', 'int32', 'int64', 'long', 'double', 'float', 'decimal'],
    )
    def test_numeric_types(self, descriptor):
        """Test that every numeric descriptor is a Number."""
        assert classify(descriptor) is CanonicalType.NUMBER

    def test_date_time(self):
        """Test the date-time type name."""
        assert classify('System.DateTime') is CanonicalType.DATE

    def test_string(self):
        """Test the string type name."""
        assert classify('string') is CanonicalType.STRING

    def test_booleans(self):
        """Test both boolean spellings."""
        assert classify('bool') is CanonicalType.BOOLEAN
        assert classify('boolean') is CanonicalType.BOOLEAN

    @pytest.mark.parametrize(
        'descriptor,expected',
        [
            ('Int32', CanonicalType.NUMBER),
            ('INT64', CanonicalType.NUMBER),
            ('Decimal', CanonicalType.NUMBER),
            ('SYSTEM.DATETIME', CanonicalType.DATE),
            ('String', CanonicalType.STRING),
            ('BOOLEAN', CanonicalType.BOOLEAN),
        ],
    )
    def test_case_insensitive(self, descriptor, expected):
        """Test that matching ignores casing."""
        assert classify(descriptor) is expected

    @pytest.mark.parametrize(
        'descriptor',
        ['', 'int?', 'System.Int32', 'System.String', 'DateTime', 'Widget', 'char'],
    )
    def test_not_primitive(self, descriptor):
        """Test that anything outside the table is not primitive."""
        assert classify(descriptor) is None

    def test_canonical_names(self):
        """Test the canonical type names used in the output."""
        assert [t.value for t in CanonicalType] == [
            'Number',
            'Date',
            'String',
            'Boolean',
        ]
        assert str(CanonicalType.NUMBER) == 'Number'
