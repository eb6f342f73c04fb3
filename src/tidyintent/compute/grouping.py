"""Grouped datasets.

``group_by`` does not compute anything, it only records
which columns identify a group. The verbs that care about
groups, like ``summarize`` and ``count``, ask the grouped
table for its groups when they are applied.

>>> import pyarrow as pa
>>> data = pa.table({
...     "city": ["New York", "New York", "Los Angeles", "Los Angeles", "New York"],
...     "n_employees": [10, 15, 8, 12, 20],
... })
>>> grouped = GroupedTable(data, ["city"])
>>> [(key, group.num_rows) for key, group in grouped.groups()]
[(('Los Angeles',), 2), (('New York',), 3)]
"""

import math
from typing import Iterator

import pyarrow as pa

from .base import column


class GroupedTable:
    """A table together with the names of the columns it is grouped by.

    Exposes the same ``column_names``, ``column()`` and ``num_rows``
    accessors of :class:`pyarrow.Table`, so expressions resolve
    against a grouped table exactly as they would against
    the table itself.
    """

    def __init__(self, table: pa.Table, keys: list[str]) -> None:
        """
        :param table: The grouped data.
        :param keys: The columns identifying the groups.
        """
        for key in keys:
            column(table, key)
        self.table = table
        self.keys = list(keys)

    def __str__(self) -> str:
        return f"GroupedTable(keys={self.keys}, columns={self.table.column_names}, rows={self.table.num_rows})"

    __repr__ = __str__

    @property
    def column_names(self) -> list[str]:
        return self.table.column_names

    @property
    def num_rows(self) -> int:
        return self.table.num_rows

    @property
    def schema(self) -> pa.Schema:
        return self.table.schema

    def column(self, name: str) -> pa.ChunkedArray:
        return self.table.column(name)

    def regroup(self, table: pa.Table) -> "GroupedTable":
        """Group a new table by the same keys."""
        return self.__class__(table, self.keys)

    def groups(self) -> Iterator[tuple[tuple, pa.Table]]:
        """Emit each group as its key values and the rows belonging to it.

        The data is sorted by the grouping keys first,
        this makes sure that all the rows of the same group
        are sequential. So until the key changes we keep
        extending the current group, and emit it as soon
        as a different key shows up. Groups are thus
        emitted in ascending order of their keys.
        NaN keys are considered equal to each other,
        so all of them fall in the same group.
        """
        sorted_table = self.table.sort_by([(k, "ascending") for k in self.keys])
        keys_data = [sorted_table.column(k).to_pylist() for k in self.keys]

        current_key = None
        chunk_start = 0
        for row_index in range(sorted_table.num_rows):
            row_key = tuple(values[row_index] for values in keys_data)
            if current_key is None:
                current_key = row_key
            if not _same_key(row_key, current_key):
                yield current_key, sorted_table.slice(chunk_start, row_index - chunk_start)
                current_key = row_key
                chunk_start = row_index

        # Emit the last group
        if current_key is not None:
            yield current_key, sorted_table.slice(chunk_start)


def _same_value(a, b) -> bool:
    if isinstance(a, float) and isinstance(b, float) and math.isnan(a):
        return math.isnan(b)
    return a == b


def _same_key(left: tuple, right: tuple) -> bool:
    return all(_same_value(a, b) for a, b in zip(left, right))
