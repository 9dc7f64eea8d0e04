"""Splitting a line into delimiter-bounded fields.

A field is the half-open span between the previous delimiter (or the start of
the line) and the next delimiter (or the end of the line). A line with ``k``
delimiters always has ``k + 1`` fields.
"""

from typing import Sequence

#: Character every delimiter is rewritten to in an offset-scanned line.
BOUNDARY = "\x1f"


def check_delimiter(delimiter: str) -> None:
    """Raise ValueError unless ``delimiter`` is a single character."""
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character, got {delimiter!r}")


def field_count(line: str, delimiter: str) -> int:
    """Number of fields in ``line``."""
    return line.count(delimiter) + 1


def field_spans(line: str, delimiter: str) -> list[tuple[int, int]]:
    """Return the ``(begin, end)`` span of every field, left to right."""
    spans = []
    begin = 0
    for _ in range(field_count(line, delimiter) - 1):
        end = line.index(delimiter, begin)
        spans.append((begin, end))
        begin = end + 1
    spans.append((begin, len(line)))
    return spans


def split(line: str, delimiter: str, positions: Sequence[int] | None = None) -> list[str]:
    """Extract fields of ``line`` as new strings.

    Parameters
    ----------
    line : str
        One line of text, without its line terminator.
    delimiter : str
        Single-character field separator.
    positions : sequence of int, optional
        Field positions to extract, in the order they should be returned.
        Positions may repeat. All fields are returned when omitted.

    Returns
    -------
    list of str
        One string per requested position.

    Raises
    ------
    IndexError
        If a position is at or beyond the number of fields. Positions are
        expected to have been validated against the header already.
    """
    if positions is None:
        return line.split(delimiter)
    spans = field_spans(line, delimiter)
    return [line[begin:end] for begin, end in (spans[pos] for pos in positions)]


def field_offsets(line: str, delimiter: str) -> tuple[str, list[int]]:
    """Scan ``line`` once for in-place field access.

    Returns
    -------
    tuple of (str, list of int)
        The line with every delimiter replaced by :data:`BOUNDARY`, and the
        start offset of every field in it.
    """
    offsets = [0]
    offsets.extend(end + 1 for _, end in field_spans(line, delimiter)[:-1])
    if delimiter != BOUNDARY:
        line = line.replace(delimiter, BOUNDARY)
    return line, offsets
