"""Export of reader rows to Arrow tables.

Requires pyarrow (``pip install rowcsv[arrow]``). Every column is exported as
a string column; no type inference is done.
"""

import pyarrow as pa

from rowcsv.reader import Reader


def to_arrow(reader: Reader) -> pa.Table:
    """Read the remaining rows of ``reader`` into a ``pyarrow.Table``.

    Parameters
    ----------
    reader : Reader
        An open reader. Rows are consumed, leaving it exhausted.

    Returns
    -------
    pyarrow.Table
        One string column per selected column, named after the header.
        Column names repeat when the selection does.
    """
    names = reader.selected_names
    columns: list[list[str]] = [[] for _ in names]
    for row in reader:
        for column, text in zip(columns, row):
            column.append(text)
    arrays = [pa.array(column, type=pa.string()) for column in columns]
    return pa.Table.from_arrays(arrays, names=names)
