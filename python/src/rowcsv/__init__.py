"""
rowcsv: Delimited text reader and writer with column selection and typed fields.

This package reads and writes simple delimited files, featuring:
- Column selection by name, index list (with repeats and reordering) or mask
- Typed field conversion that reports failures instead of guessing
- Two row strategies: copy only the selected fields, or keep the line and
  read fields in place through explicit cursors
- Arrow export of string columns (requires pyarrow)

Fields are separated by a single character; there is no quoting or escaping.

Basic Usage
-----------
>>> import rowcsv
>>> reader = rowcsv.Reader()
>>> reader.open("data.csv")
True
>>> reader.select_cols("c", "a")
True
>>> c, a = rowcsv.slots(int, int)
>>> while reader.read_row(c, a):
...     print(c.value, a.value)

Writing
-------
>>> with rowcsv.Writer() as writer:
...     writer.open("out.csv")
...     writer.set_column_names("a", "b")
...     writer.write_row(1, "x")

Arrow Interoperability
----------------------
>>> import pyarrow as pa
>>> reader.open("data.csv")
>>> arrow_table = reader.to_arrow()
"""

from rowcsv.catalog import NOT_FOUND, ColumnCatalog, Selection
from rowcsv.convert import Conversion, FieldType, convert, to_text
from rowcsv.errors import ConversionError, RowCsvError, SelectionError, SourceError
from rowcsv.offset_row import Cursor, OffsetRow
from rowcsv.reader import (
    DEFAULT_DELIMITER,
    DEFAULT_ENCODING,
    Reader,
    ReaderState,
    RowStrategy,
    read_csv_rows,
)
from rowcsv.row import Row, Slot, slots
from rowcsv.split import BOUNDARY, field_count, field_offsets, field_spans, split
from rowcsv.writer import RowBuilder, Writer

__version__ = "0.1.0"

__all__ = [
    "BOUNDARY",
    "ColumnCatalog",
    "Conversion",
    "ConversionError",
    "Cursor",
    "DEFAULT_DELIMITER",
    "DEFAULT_ENCODING",
    "FieldType",
    "NOT_FOUND",
    "OffsetRow",
    "Reader",
    "ReaderState",
    "Row",
    "RowBuilder",
    "RowCsvError",
    "RowStrategy",
    "Selection",
    "SelectionError",
    "Slot",
    "SourceError",
    "Writer",
    "convert",
    "field_count",
    "field_offsets",
    "field_spans",
    "read_csv_rows",
    "slots",
    "split",
    "to_text",
    "__version__",
]
