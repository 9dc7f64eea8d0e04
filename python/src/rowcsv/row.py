"""Rows that own a copy of each selected field."""

from typing import Any, Iterator, Sequence

from rowcsv.convert import FieldType, convert
from rowcsv.errors import ConversionError
from rowcsv.split import split


class Slot:
    """Typed destination for one field of a sequential read.

    ``value`` is only assigned when the conversion into ``field_type``
    succeeds.
    """

    __slots__ = ("field_type", "value")

    def __init__(self, field_type: "FieldType | type | str" = FieldType.STRING, value: Any = None):
        self.field_type = FieldType.coerce(field_type)
        self.value = value

    def fill(self, text: str) -> bool:
        result = convert(text, self.field_type)
        if result.ok:
            self.value = result.value
        return result.ok

    def __repr__(self) -> str:
        return f"Slot({self.field_type.name}, value={self.value!r})"


def slots(*field_types: "FieldType | type | str") -> list[Slot]:
    """One empty slot per field type, e.g. ``x, y = slots(int, str)``."""
    return [Slot(field_type) for field_type in field_types]


def convert_or_raise(text: str, field_type: "FieldType | type | str") -> Any:
    field_type = FieldType.coerce(field_type)
    result = convert(text, field_type)
    if not result.ok:
        raise ConversionError(text, field_type)
    return result.value


class Row:
    """Fields of one line, extracted in selection order."""

    def __init__(self, fields: Sequence[str] = ()):
        self._fields = list(fields)

    def parse_line(self, line: str, delimiter: str, selected: Sequence[int]) -> None:
        """Replace the fields with those of ``line`` at the ``selected`` positions."""
        self._fields = split(line, delimiter, selected)

    @property
    def fields(self) -> list[str]:
        return list(self._fields)

    def read(self, *slots: Slot) -> bool:
        """Convert fields into ``slots`` from left to right.

        Returns False without touching any slot when more slots are given
        than the row has fields, and stops at the first failed conversion,
        leaving that slot and every later one unchanged.
        """
        if len(slots) > len(self._fields):
            return False
        return all(slot.fill(text) for slot, text in zip(slots, self._fields))

    def get(self, index: int, field_type: "FieldType | type | str" = FieldType.STRING) -> Any:
        """Typed value of the field at ``index``.

        Raises
        ------
        IndexError
            If ``index`` is not a field position of this row.
        ConversionError
            If the field does not convert to ``field_type``.
        """
        if not 0 <= index < len(self._fields):
            raise IndexError(f"field index {index} out of range for {len(self._fields)} fields")
        return convert_or_raise(self._fields[index], field_type)

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __repr__(self) -> str:
        return f"Row({self._fields!r})"
