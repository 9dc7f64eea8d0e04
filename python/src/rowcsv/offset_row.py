"""Rows that keep the whole line and read fields in place.

Parsing an :class:`OffsetRow` only records where each field starts; no field
text is copied until it is read. Reads go through :class:`Cursor` values
that the caller holds, so any number of readers can walk the same row in any
order without disturbing each other.
"""

from typing import Any, Iterator, NamedTuple, Sequence

from rowcsv.catalog import Selection
from rowcsv.convert import Conversion, FieldType, convert
from rowcsv.errors import SelectionError
from rowcsv.row import Slot, convert_or_raise
from rowcsv.split import BOUNDARY, field_offsets

_EXHAUSTED = Conversion(None, False)


class Cursor(NamedTuple):
    """Read position inside an offset row's line."""

    position: int


class OffsetRow:
    """All fields of one line, addressed by their start offsets.

    Parameters
    ----------
    selection : Selection, optional
        Columns used by :meth:`read`. Every field is read when omitted.
    """

    def __init__(self, selection: Selection | None = None):
        self.selection = selection
        self._line = ""
        self._offsets: list[int] = [0]

    def parse_line(self, line: str, delimiter: str) -> None:
        """Replace the line and the offsets of all of its fields."""
        self._line, self._offsets = field_offsets(line, delimiter)

    @property
    def line(self) -> str:
        """The current line, with delimiters rewritten to BOUNDARY."""
        return self._line

    @property
    def offsets(self) -> list[int]:
        return list(self._offsets)

    @property
    def fields(self) -> list[str]:
        return self._line.split(BOUNDARY)

    def cursor(self, index: int) -> Cursor:
        """Cursor at the start of field ``index``."""
        if not 0 <= index < len(self._offsets):
            raise IndexError(f"field index {index} out of range for {len(self._offsets)} fields")
        return Cursor(self._offsets[index])

    def text_at(self, cursor: Cursor) -> tuple[str | None, Cursor]:
        """Field text starting at ``cursor`` and the cursor of the next field.

        The text is None once the cursor has moved past the last field.
        """
        start = cursor.position
        if start > len(self._line):
            return None, cursor
        end = self._line.find(BOUNDARY, start)
        if end == -1:
            end = len(self._line)
        return self._line[start:end], Cursor(end + 1)

    def extract(self, cursor: Cursor, field_type: "FieldType | type | str") -> tuple[Conversion, Cursor]:
        """Convert the field at ``cursor``; also return the next field's cursor."""
        text, following = self.text_at(cursor)
        if text is None:
            return _EXHAUSTED, following
        return convert(text, field_type), following

    def read(self, *slots: Slot) -> bool:
        """Convert the fields of the row's selection into ``slots``."""
        if self.selection is None:
            return self._read_from(range(len(self._offsets)), slots)
        return self._read_from(self.selection.indices, slots)

    def read_selected(self, selection: "Selection | Sequence[bool]", *slots: Slot) -> bool:
        """Like :meth:`read`, with ``selection`` (or a boolean mask) instead."""
        if not isinstance(selection, Selection):
            try:
                selection = Selection.from_mask(selection, len(self._offsets))
            except SelectionError:
                return False
        return self._read_from(selection.indices, slots)

    def _read_from(self, indices: Sequence[int], slots: Sequence[Slot]) -> bool:
        if len(slots) > len(indices):
            return False
        for slot, index in zip(slots, indices):
            if index >= len(self._offsets):
                return False
            result, _ = self.extract(Cursor(self._offsets[index]), slot.field_type)
            if not result.ok:
                return False
            slot.value = result.value
        return True

    def get(self, index: int, field_type: "FieldType | type | str" = FieldType.STRING) -> Any:
        """Typed value of field ``index``; same contract as :meth:`Row.get`."""
        text, _ = self.text_at(self.cursor(index))
        return convert_or_raise(text, field_type)

    def __len__(self) -> int:
        return len(self._offsets)

    def __iter__(self) -> Iterator[str]:
        # selected fields, in selection order
        indices = range(len(self._offsets)) if self.selection is None else self.selection.indices
        for index in indices:
            text, _ = self.text_at(self.cursor(index))
            yield text

    def __repr__(self) -> str:
        return f"OffsetRow({self.fields!r})"
