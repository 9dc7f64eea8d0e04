"""Writing delimited text files.

The header line is written just before the first row. Values are written
with :func:`rowcsv.convert.to_text` and are not checked: a value containing
the delimiter or a newline produces a malformed file.
"""

import logging
import os
from typing import Any, TextIO

from rowcsv.convert import to_text
from rowcsv.errors import RowCsvError
from rowcsv.reader import DEFAULT_DELIMITER, DEFAULT_ENCODING
from rowcsv.split import check_delimiter

logger = logging.getLogger(__name__)


class RowBuilder:
    """A row written one column at a time.

    The line is ended by :meth:`flush`, or on leaving a ``with`` block if
    columns are pending.

    Examples
    --------
    >>> with writer.new_row() as row:
    ...     row.write_column("a")
    ...     row.write_columns(1, 2.5)
    """

    def __init__(self, stream: TextIO, delimiter: str):
        self._stream = stream
        self._delimiter = delimiter
        self._values: list[str] = []

    @property
    def columns(self) -> int:
        """Number of columns written to the pending line."""
        return len(self._values)

    def write_column(self, value: Any) -> None:
        self._values.append(to_text(value))

    def write_columns(self, *values: Any) -> None:
        for value in values:
            self.write_column(value)

    def flush(self) -> None:
        """Write the pending columns as one line."""
        self._stream.write(self._delimiter.join(self._values) + "\n")
        self._values = []

    def __enter__(self) -> "RowBuilder":
        return self

    def __exit__(self, *exc_info) -> None:
        if self._values:
            self.flush()


class Writer:
    """Row writer for one delimited text file."""

    def __init__(self):
        self._file = None
        self._path = None
        self._delimiter = DEFAULT_DELIMITER
        self._header_written = False
        self._column_names: list[str] = []

    def open(
        self,
        path: "str | os.PathLike[str]",
        delimiter: str = DEFAULT_DELIMITER,
        encoding: str = DEFAULT_ENCODING,
    ) -> bool:
        """Create or truncate ``path`` for writing.

        Returns
        -------
        bool
            False if the file cannot be opened.

        Raises
        ------
        ValueError
            If ``delimiter`` is not a single character.
        """
        check_delimiter(delimiter)
        self.close()

        try:
            self._file = open(path, "w", encoding=encoding, newline="")
        except OSError as exc:
            logger.debug("Cannot open %s for writing: %s", path, exc)
            return False

        self._path = path
        self._delimiter = delimiter
        self._header_written = False
        logger.debug("Opened %s for writing", path)
        return True

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            logger.debug("Closed %s", self._path)
        self._file = None
        self._path = None

    @property
    def is_open(self) -> bool:
        return self._file is not None

    @property
    def delimiter(self) -> str:
        return self._delimiter

    @property
    def column_names(self) -> list[str]:
        return list(self._column_names)

    def set_column_names(self, *names: str) -> None:
        self._column_names = [to_text(name) for name in names]

    def _write_header(self) -> None:
        self._file.write(self._delimiter.join(self._column_names) + "\n")
        self._header_written = True

    def write_row(self, *values: Any) -> bool:
        """Write one row, preceded by the header on first use.

        Returns False when the writer is closed, no column names are set, or
        the number of values differs from the number of columns.
        """
        if not self.is_open or not self._column_names:
            return False
        if len(values) != len(self._column_names):
            logger.debug(
                "Row of %d values does not match %d columns", len(values), len(self._column_names)
            )
            return False
        if not self._header_written:
            self._write_header()
        self._file.write(self._delimiter.join(to_text(value) for value in values) + "\n")
        return True

    def new_row(self) -> RowBuilder:
        """Start a row built column by column.

        Raises
        ------
        RowCsvError
            If the writer is not open.
        """
        if not self.is_open:
            raise RowCsvError("writer is not open")
        if not self._header_written and self._column_names:
            self._write_header()
        return RowBuilder(self._file, self._delimiter)

    def __enter__(self) -> "Writer":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "open" if self.is_open else "closed"
        return f"Writer({state}, {len(self._column_names)} columns)"
