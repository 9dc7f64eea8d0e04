"""Reading delimited text files row by row.

A :class:`Reader` moves through three states::

    CLOSED --open()--> HEADER_READ --next_row()...--> EXHAUSTED

Opening reads the header line into the column catalog and selects every
column. Each advance splits one more line into the current row. Once the
input runs out the reader stays exhausted: every further advance returns
False.
"""

import enum
import logging
import os
from typing import Callable, Iterable, Iterator, Sequence

from rowcsv.catalog import ColumnCatalog, NOT_FOUND, Selection
from rowcsv.errors import SelectionError, SourceError
from rowcsv.offset_row import OffsetRow
from rowcsv.row import Row, Slot
from rowcsv.split import check_delimiter

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = ","
DEFAULT_ENCODING = "utf-8"


class ReaderState(enum.Enum):
    CLOSED = "closed"
    HEADER_READ = "header_read"
    EXHAUSTED = "exhausted"


class RowStrategy(enum.Enum):
    """How lines are turned into rows.

    COPY splits out only the selected fields of each line. OFFSET keeps the
    line and the start of every field, and applies the selection when the
    row is read.
    """

    COPY = "copy"
    OFFSET = "offset"


class Reader:
    """Row reader over one delimited text file.

    Parameters
    ----------
    strategy : RowStrategy or str, default RowStrategy.COPY
        Row representation, see :class:`RowStrategy`.

    Examples
    --------
    >>> reader = Reader()
    >>> reader.open("data.csv")
    True
    >>> reader.select_cols("c", "a")
    True
    >>> x, y = Slot(int), Slot(int)
    >>> reader.read_row(x, y)
    True
    """

    def __init__(self, strategy: "RowStrategy | str" = RowStrategy.COPY):
        self._strategy = RowStrategy(strategy)
        self._file = None
        self._path = None
        self._delimiter = DEFAULT_DELIMITER
        self._state = ReaderState.CLOSED
        self._line_number = 0
        self._reset()

    def _reset(self) -> None:
        self._catalog = ColumnCatalog(())
        self._selection = Selection(())
        self._row = self._new_row()

    def _new_row(self) -> "Row | OffsetRow":
        if self._strategy is RowStrategy.OFFSET:
            return OffsetRow(self._selection)
        return Row()

    def open(
        self,
        path: "str | os.PathLike[str]",
        delimiter: str = DEFAULT_DELIMITER,
        encoding: str = DEFAULT_ENCODING,
    ) -> bool:
        """Open ``path`` and read its header line.

        Returns
        -------
        bool
            False if the file cannot be opened or has no header line.

        Raises
        ------
        ValueError
            If ``delimiter`` is not a single character.
        """
        check_delimiter(delimiter)
        self.close()

        try:
            self._file = open(path, encoding=encoding)
        except OSError as exc:
            logger.debug("Cannot open %s: %s", path, exc)
            return False

        header = self._file.readline()
        if not header:
            logger.debug("No header line in %s", path)
            self.close()
            return False

        self._path = path
        self._delimiter = delimiter
        self._line_number = 1
        self._catalog = ColumnCatalog.from_header(header.rstrip("\n"), delimiter)
        self._selection = Selection.all(len(self._catalog))
        self._row = self._new_row()
        self._state = ReaderState.HEADER_READ
        logger.debug("Opened %s with %d columns", path, len(self._catalog))
        return True

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            logger.debug("Closed %s", self._path)
        self._file = None
        self._path = None
        self._state = ReaderState.CLOSED
        self._reset()

    @property
    def is_open(self) -> bool:
        return self._file is not None

    @property
    def state(self) -> ReaderState:
        return self._state

    @property
    def strategy(self) -> RowStrategy:
        return self._strategy

    @property
    def delimiter(self) -> str:
        return self._delimiter

    @property
    def line_number(self) -> int:
        """Number of lines consumed so far, header included."""
        return self._line_number

    @property
    def catalog(self) -> ColumnCatalog:
        return self._catalog

    @property
    def column_names(self) -> list[str]:
        return self._catalog.names

    def column_index(self, name: str) -> int:
        """Index of the first column called ``name``, or NOT_FOUND."""
        return self._catalog.resolve(name)

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def selected_names(self) -> list[str]:
        return [self._catalog[index] for index in self._selection]

    @property
    def row(self) -> "Row | OffsetRow":
        """The most recently parsed row."""
        return self._row

    def _next_line(self) -> str | None:
        if self._state is not ReaderState.HEADER_READ:
            return None
        line = self._file.readline()
        if not line:
            self._state = ReaderState.EXHAUSTED
            logger.debug("Reached end of %s after %d lines", self._path, self._line_number)
            return None
        self._line_number += 1
        return line[:-1] if line.endswith("\n") else line

    def next_row(self) -> bool:
        """Advance to the next line.

        Returns False at the end of the input, and for a line that lacks a
        selected column. Such a line is still consumed, so the reader stays
        in HEADER_READ and the next call moves on to the following line.
        """
        line = self._next_line()
        if line is None:
            return False

        if self._strategy is RowStrategy.OFFSET:
            self._row.parse_line(line, self._delimiter)
            if max(self._selection.indices, default=-1) < len(self._row):
                return True
        else:
            try:
                self._row.parse_line(line, self._delimiter, self._selection.indices)
                return True
            except IndexError:
                pass

        logger.warning(
            "Line %d of %s has fewer fields than the selected columns %s",
            self._line_number,
            self._path,
            list(self._selection.indices),
        )
        return False

    def read_row(self, *slots: Slot) -> bool:
        """Advance and convert the selected fields of the new row into ``slots``.

        Fails without consuming a line when the number of slots differs from
        the number of selected columns.
        """
        if len(slots) != len(self._selection):
            return False
        if not self.next_row():
            return False
        return self._row.read(*slots)

    def select_cols(self, *names: str) -> bool:
        """Select columns by name, in the given order."""
        return self.select_cols_by_names(names)

    def select_cols_by_names(self, names: Iterable[str]) -> bool:
        return self._select(lambda: Selection.from_names(names, self._catalog))

    def select_cols_by_index(self, indices: Iterable[int]) -> bool:
        """Select columns by index; indices may repeat and be in any order."""
        return self._select(lambda: Selection.from_indices(indices, len(self._catalog)))

    def select_cols_by_mask(self, mask: Sequence[bool]) -> bool:
        """Select the columns whose mask entry is true, in header order."""
        return self._select(lambda: Selection.from_mask(mask, len(self._catalog)))

    def _select(self, build: Callable[[], Selection]) -> bool:
        # a failed selection keeps the previous one
        if not self.is_open:
            return False
        try:
            selection = build()
        except SelectionError as exc:
            logger.warning("Rejected column selection: %s", exc)
            return False
        self._selection = selection
        if isinstance(self._row, OffsetRow):
            self._row.selection = selection
        return True

    def to_arrow(self):
        """Remaining rows of the current selection as a ``pyarrow.Table``."""
        from rowcsv.arrow import to_arrow

        return to_arrow(self)

    def __iter__(self) -> Iterator["Row | OffsetRow"]:
        # lines lacking a selected column are skipped, not treated as the end
        while self._state is ReaderState.HEADER_READ:
            if self.next_row():
                yield self._row

    def __enter__(self) -> "Reader":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"Reader(state={self._state.value}, strategy={self._strategy.value}, "
            f"{len(self._catalog)} columns)"
        )


def read_csv_rows(
    path: "str | os.PathLike[str]",
    delimiter: str = DEFAULT_DELIMITER,
    usecols: Sequence[str | int] | None = None,
    encoding: str = DEFAULT_ENCODING,
) -> Iterator[dict[str, str]]:
    """Iterate over the rows of a file as dictionaries.

    Parameters
    ----------
    path : str or PathLike
        Path to the file to read.
    delimiter : str, default ","
        Field delimiter character.
    usecols : sequence of str or int, optional
        Column names or indices to include, in output order. All columns are
        included when omitted.
    encoding : str, default "utf-8"
        File encoding.

    Returns
    -------
    iterator of dict
        One ``{column name: field text}`` mapping per data line.

    Raises
    ------
    ValueError
        If ``delimiter`` is not a single character.
    SourceError
        If the file cannot be opened or has no header line.
    SelectionError
        If ``usecols`` names an unknown column or an out-of-range index.
    """
    reader = Reader()
    if not reader.open(path, delimiter, encoding):
        raise SourceError(f"cannot read a header from {os.fspath(path)!r}")

    if usecols is not None:
        indices = []
        for col in usecols:
            if isinstance(col, int) and not isinstance(col, bool):
                index = col
            else:
                index = reader.column_index(col)
            if index == NOT_FOUND or not 0 <= index < len(reader.catalog):
                reader.close()
                raise SelectionError(f"unknown column: {col!r}")
            indices.append(index)
        reader.select_cols_by_index(indices)

    return _iter_dicts(reader)


def _iter_dicts(reader: Reader) -> Iterator[dict[str, str]]:
    with reader:
        names = reader.selected_names
        for row in reader:
            yield dict(zip(names, row))
