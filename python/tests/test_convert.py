"""Tests for field value conversion."""

import pytest


class TestIntegerConversion:
    """Tests for integer conversions."""

    def test_plain_integer(self):
        """Test a simple integer parses."""
        import rowcsv

        assert rowcsv.convert("42", int) == (42, True)

    def test_trailing_garbage(self):
        """Test that trailing characters fail the conversion."""
        import rowcsv

        assert not rowcsv.convert("42x", int).ok

    def test_empty_text(self):
        """Test that empty text fails."""
        import rowcsv

        assert not rowcsv.convert("", int).ok

    def test_sign_and_leading_whitespace(self):
        """Test that a sign and leading whitespace are accepted."""
        import rowcsv

        assert rowcsv.convert("-17", int).value == -17
        assert rowcsv.convert("+5", int).value == 5
        assert rowcsv.convert("  8", int).value == 8

    def test_trailing_whitespace_rejected(self):
        """Test that trailing whitespace counts as garbage."""
        import rowcsv

        assert not rowcsv.convert("8 ", int).ok

    def test_underscores_rejected(self):
        """Test that Python digit separators are not accepted."""
        import rowcsv

        assert not rowcsv.convert("1_000", int).ok

    def test_decimal_rejected(self):
        """Test that a decimal number is not an integer."""
        import rowcsv

        assert not rowcsv.convert("1.5", int).ok

    @pytest.mark.parametrize(
        "field_type,text,ok",
        [
            ("int32", "2147483647", True),
            ("int32", "2147483648", False),
            ("int32", "-2147483648", True),
            ("int32", "-2147483649", False),
            ("uint32", "4294967295", True),
            ("uint32", "4294967296", False),
            ("int64", "9223372036854775807", True),
            ("int64", "9223372036854775808", False),
            ("uint64", "18446744073709551615", True),
            ("uint64", "18446744073709551616", False),
        ],
    )
    def test_range_limits(self, field_type, text, ok):
        """Test that values outside a type's range fail."""
        import rowcsv

        assert rowcsv.convert(text, field_type).ok is ok

    def test_unsigned_rejects_negative(self):
        """Test that unsigned types reject a minus sign."""
        import rowcsv

        assert not rowcsv.convert("-1", rowcsv.FieldType.UINT32).ok
        assert rowcsv.convert("+1", rowcsv.FieldType.UINT64).value == 1


class TestFloatConversion:
    """Tests for floating-point conversions."""

    def test_plain_float(self):
        """Test decimal and exponent notation."""
        import rowcsv

        assert rowcsv.convert("95.5", float) == (95.5, True)
        assert rowcsv.convert("1e3", float).value == 1000.0
        assert rowcsv.convert(".25", float).value == 0.25
        assert rowcsv.convert("3.", float).value == 3.0

    def test_integer_text_is_float(self):
        """Test that integer text converts to float."""
        import rowcsv

        assert rowcsv.convert("7", float).value == 7.0

    def test_trailing_garbage(self):
        """Test that trailing characters fail the conversion."""
        import rowcsv

        assert not rowcsv.convert("1.5kg", float).ok
        assert not rowcsv.convert("", float).ok

    def test_special_values(self):
        """Test infinity and NaN spellings."""
        import math

        import rowcsv

        assert rowcsv.convert("inf", float).value == math.inf
        assert rowcsv.convert("-Infinity", float).value == -math.inf
        assert math.isnan(rowcsv.convert("nan", float).value)

    def test_float64_overflow(self):
        """Test that a finite literal beyond double range fails."""
        import rowcsv

        assert not rowcsv.convert("1e400", float).ok

    def test_float64_underflow(self):
        """Test that a nonzero literal rounding to zero fails."""
        import rowcsv

        assert not rowcsv.convert("1e-400", float).ok
        assert rowcsv.convert("0e-400", float) == (0.0, True)

    def test_float32_range(self):
        """Test float32 overflow and rounding."""
        import rowcsv

        assert not rowcsv.convert("1e39", "float32").ok
        assert rowcsv.convert("3.4e38", "float32").ok
        assert rowcsv.convert("0.1", "float32").value != 0.1
        assert rowcsv.convert("0.5", "float32").value == 0.5


class TestOtherConversions:
    """Tests for character and string conversions."""

    def test_char(self):
        """Test that a char needs exactly one character."""
        import rowcsv

        assert rowcsv.convert("x", rowcsv.FieldType.CHAR) == ("x", True)
        assert not rowcsv.convert("xy", rowcsv.FieldType.CHAR).ok
        assert not rowcsv.convert("", rowcsv.FieldType.CHAR).ok

    def test_string_passthrough(self):
        """Test that strings always convert verbatim."""
        import rowcsv

        assert rowcsv.convert("", str) == ("", True)
        assert rowcsv.convert(" a b ", str) == (" a b ", True)

    def test_unknown_type(self):
        """Test that unsupported types are rejected."""
        import rowcsv

        with pytest.raises(TypeError):
            rowcsv.convert("1", "decimal")

        with pytest.raises(TypeError):
            rowcsv.convert("1", bytes)


class TestToText:
    """Tests for writing values as text."""

    def test_values(self):
        """Test text forms of common values."""
        import rowcsv

        assert rowcsv.to_text("abc") == "abc"
        assert rowcsv.to_text(42) == "42"
        assert rowcsv.to_text(2.5) == "2.5"

    def test_float_round_trip(self):
        """Test that written floats convert back to the same value."""
        import rowcsv

        value = 0.1 + 0.2

        assert rowcsv.convert(rowcsv.to_text(value), float).value == value
