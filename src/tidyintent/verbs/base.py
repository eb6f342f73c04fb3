"""Helpers shared by the verbs.

Verbs accept tables, record batches and grouped tables
as their dataset. These helpers take care of getting
to the actual :class:`pyarrow.Table` and of giving
back a result of the same kind as the input.
"""

from typing import Any

import pyarrow as pa

from ..compute import GroupedTable

Dataset = pa.Table | pa.RecordBatch | GroupedTable


def as_table(dataset: Dataset) -> pa.Table:
    """The plain table behind any accepted dataset."""
    if isinstance(dataset, GroupedTable):
        return dataset.table
    if isinstance(dataset, pa.RecordBatch):
        return pa.Table.from_batches([dataset])
    if isinstance(dataset, pa.Table):
        return dataset
    raise TypeError(
        f"Expected a pyarrow Table, RecordBatch or GroupedTable, got {type(dataset).__name__}"
    )


def regroup(dataset: Dataset, table: pa.Table) -> pa.Table | GroupedTable:
    """Preserve the grouping of ``dataset`` on the new ``table``."""
    if isinstance(dataset, GroupedTable):
        return dataset.regroup(table)
    return table


def broadcast(value: Any, length: int) -> pa.Array | pa.ChunkedArray:
    """Make a column of ``length`` rows out of ``value``.

    Arrays must already have the right length,
    scalars are repeated on every row.

    >>> broadcast(3, 2).to_pylist()
    [3, 3]
    >>> broadcast([1, 2], 2).to_pylist()
    [1, 2]
    """
    if isinstance(value, (pa.Array, pa.ChunkedArray)):
        data = value
    elif isinstance(value, pa.Scalar):
        return pa.repeat(value, length)
    elif isinstance(value, (list, tuple)):
        data = pa.array(value)
    else:
        return pa.repeat(pa.scalar(value), length)

    if len(data) != length:
        raise ValueError(f"Expected a column of {length} rows, got {len(data)}")
    return data
