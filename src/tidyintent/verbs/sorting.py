"""Verbs that perform sorting of data.

When computing ranks or looking for most significant
values, it's often necessary to sort the data based
on one or more columns.
"""

from ..compute import column
from .base import Dataset, as_table, regroup


def desc(name: str) -> str:
    """Sort by ``name`` in descending order.

    >>> desc("bill_length_mm")
    '-bill_length_mm'
    """
    return f"-{name}"


def arrange(dataset: Dataset, *keys: str) -> Dataset:
    """Sort rows by one or more columns.

    Keys are applied in the order they are provided,
    use :func:`desc` or a leading ``-`` for descending order.
    Rows with equal keys keep their relative order.

    >>> import pyarrow as pa
    >>> data = pa.table({"a": [1, 2, 1], "b": [3, 2, 1]})
    >>> arrange(data, "a", desc("b")).to_pydict()
    {'a': [1, 1, 2], 'b': [3, 1, 2]}

    :param dataset: The data to sort.
    :param keys: The columns to sort by.
    """
    if not keys:
        return dataset

    table = as_table(dataset)
    sorting = []
    for key in keys:
        if key.startswith("-"):
            sorting.append((key[1:], "descending"))
        else:
            sorting.append((key, "ascending"))
        column(table, sorting[-1][0])

    return regroup(dataset, table.sort_by(sorting))
