"""Conversion between raw field text and typed values.

Every conversion reports its own success through the returned
:class:`Conversion`; nothing is signalled through shared state, so
conversions may run from any thread.
"""

import enum
import math
import re
import struct
from typing import Any, NamedTuple

_INTEGER_RE = re.compile(r"\s*([+-]?)([0-9]+)\Z", re.ASCII)
_FLOAT_RE = re.compile(
    r"\s*[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)\Z",
    re.ASCII | re.IGNORECASE,
)


class FieldType(enum.Enum):
    """Scalar types a field can be converted to."""

    CHAR = "char"
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    STRING = "string"

    @classmethod
    def coerce(cls, spec: "FieldType | type | str") -> "FieldType":
        """Resolve a FieldType, a builtin type (int, float, str) or a type name."""
        if isinstance(spec, cls):
            return spec
        if spec in _BUILTIN_ALIASES:
            return _BUILTIN_ALIASES[spec]
        if isinstance(spec, str):
            try:
                return cls(spec.lower())
            except ValueError:
                pass
        raise TypeError(f"unsupported field type: {spec!r}")


_BUILTIN_ALIASES = {
    int: FieldType.INT64,
    float: FieldType.FLOAT64,
    str: FieldType.STRING,
}

_INTEGER_BOUNDS = {
    FieldType.INT32: (-(2**31), 2**31 - 1),
    FieldType.UINT32: (0, 2**32 - 1),
    FieldType.INT64: (-(2**63), 2**63 - 1),
    FieldType.UINT64: (0, 2**64 - 1),
}


class Conversion(NamedTuple):
    """Result of converting one field: the value and whether it succeeded."""

    value: Any
    ok: bool


_FAILED = Conversion(None, False)


def _to_integer(text: str, field_type: FieldType) -> Conversion:
    match = _INTEGER_RE.match(text)
    if match is None:
        return _FAILED
    low, high = _INTEGER_BOUNDS[field_type]
    if low == 0 and match.group(1) == "-":
        return _FAILED
    value = int(match.group(1) + match.group(2))
    if not low <= value <= high:
        return _FAILED
    return Conversion(value, True)


def _has_nonzero_mantissa(text: str) -> bool:
    mantissa = re.split("[eE]", text, maxsplit=1)[0]
    return any(c in "123456789" for c in mantissa)


def _to_float(text: str, field_type: FieldType) -> Conversion:
    if _FLOAT_RE.match(text) is None:
        return _FAILED
    value = float(text)
    literal = text.strip().lstrip("+-").lower()
    is_special = literal.startswith(("inf", "nan"))
    if math.isinf(value) and not is_special:
        return _FAILED
    if field_type is FieldType.FLOAT32:
        try:
            value = struct.unpack("f", struct.pack("f", value))[0]
        except OverflowError:
            return _FAILED
    # underflow to zero
    if value == 0.0 and not is_special and _has_nonzero_mantissa(literal):
        return _FAILED
    return Conversion(value, True)


def convert(text: str, field_type: "FieldType | type | str") -> Conversion:
    """Convert raw field text to a typed value.

    Parameters
    ----------
    text : str
        Raw field text, without the delimiter.
    field_type : FieldType, type or str
        Target type. ``int``, ``float`` and ``str`` stand for INT64, FLOAT64
        and STRING.

    Returns
    -------
    Conversion
        ``(value, ok)``. ``value`` is None when ``ok`` is False.

    Notes
    -----
    Numeric text must be consumed entirely: leading whitespace and a sign are
    accepted, trailing characters are not. Values outside the range of the
    target type fail, as does empty text.
    """
    field_type = FieldType.coerce(field_type)
    if field_type is FieldType.STRING:
        return Conversion(text, True)
    if field_type is FieldType.CHAR:
        return Conversion(text, True) if len(text) == 1 else _FAILED
    if field_type in _INTEGER_BOUNDS:
        return _to_integer(text, field_type)
    return _to_float(text, field_type)


def to_text(value: Any) -> str:
    """Text form of a value for output. No validation is performed."""
    return value if isinstance(value, str) else str(value)
