"""Verbs that add or replace columns."""

from typing import Any

from .base import Dataset, as_table, broadcast, regroup


def mutate(dataset: Dataset, **columns: Any) -> Dataset:
    """Add new columns or replace existing ones.

    Replaced columns keep their position, new columns
    are appended in the order they were provided.

    >>> import pyarrow as pa
    >>> data = pa.table({"a": [1, 2, 3]})
    >>> mutate(data, b=pa.array([4, 5, 6]), c=0).to_pydict()
    {'a': [1, 2, 3], 'b': [4, 5, 6], 'c': [0, 0, 0]}

    :param dataset: The data to extend.
    :param columns: The {name: values} of the columns to set,
                    values are arrays as long as the dataset or
                    scalars that are repeated on each row.
    """
    table = as_table(dataset)
    for name, value in columns.items():
        data = broadcast(value, table.num_rows)
        if name in table.column_names:
            table = table.set_column(table.column_names.index(name), name, data)
        else:
            table = table.append_column(name, data)
    return regroup(dataset, table)
