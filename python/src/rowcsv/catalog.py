"""Column names from the header line and column selections over them."""

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from rowcsv.errors import SelectionError
from rowcsv.split import split

#: Returned by :meth:`ColumnCatalog.resolve` for unknown names.
NOT_FOUND = -1


class ColumnCatalog:
    """Ordered column names of an open source.

    Names need not be unique; lookups return the first match. The catalog
    never changes once built.
    """

    def __init__(self, names: Iterable[str]):
        self._names = tuple(names)

    @classmethod
    def from_header(cls, line: str, delimiter: str) -> "ColumnCatalog":
        """Build the catalog from a header line."""
        return cls(split(line, delimiter))

    @property
    def names(self) -> list[str]:
        return list(self._names)

    def resolve(self, name: str) -> int:
        """Index of the first column called ``name``, or NOT_FOUND."""
        try:
            return self._names.index(name)
        except ValueError:
            return NOT_FOUND

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __getitem__(self, index: int) -> str:
        return self._names[index]

    def __repr__(self) -> str:
        return f"ColumnCatalog({list(self._names)!r})"


@dataclass(frozen=True)
class Selection:
    """Columns exposed per row, as catalog indices in read order.

    A selection built from an index or name list may repeat and reorder
    columns. One built from a boolean mask is in catalog order without
    repeats.
    """

    indices: tuple[int, ...]
    masked: bool = False

    @classmethod
    def all(cls, width: int) -> "Selection":
        return cls(tuple(range(width)), masked=True)

    @classmethod
    def from_indices(cls, indices: Iterable[int], width: int) -> "Selection":
        """Selection of explicit column indices.

        Raises
        ------
        SelectionError
            If an index is not a valid column index for ``width`` columns.
        """
        indices = tuple(indices)
        bad = [
            i for i in indices
            if isinstance(i, bool) or not isinstance(i, int) or not 0 <= i < width
        ]
        if bad:
            raise SelectionError(f"column index out of range for {width} columns: {bad}")
        return cls(indices)

    @classmethod
    def from_names(cls, names: Iterable[str], catalog: ColumnCatalog) -> "Selection":
        """Selection of columns by header name.

        Raises
        ------
        SelectionError
            If a name is not in the catalog.
        """
        names = list(names)
        indices = [catalog.resolve(name) for name in names]
        missing = [name for name, index in zip(names, indices) if index == NOT_FOUND]
        if missing:
            raise SelectionError(f"unknown columns: {missing}")
        return cls(tuple(indices))

    @classmethod
    def from_mask(cls, mask: Sequence[bool], width: int) -> "Selection":
        """Selection of the columns whose mask entry is true.

        A mask shorter than ``width`` leaves the remaining columns unselected.

        Raises
        ------
        SelectionError
            If the mask is longer than ``width``.
        """
        if len(mask) > width:
            raise SelectionError(f"mask of length {len(mask)} exceeds {width} columns")
        return cls(tuple(i for i, keep in enumerate(mask) if keep), masked=True)

    def mask(self, width: int) -> list[bool]:
        """Boolean mask of the selected columns (order and repeats are lost)."""
        keep = [False] * width
        for index in self.indices:
            keep[index] = True
        return keep

    def __len__(self) -> int:
        return len(self.indices)

    def __iter__(self) -> Iterator[int]:
        return iter(self.indices)
