"""Verbs that implement selection of columns.

A common request in analyses is to keep only
some of the columns of a dataset.
An example is the ``SELECT`` clause in SQL queries.
"""

from ..compute import GroupedTable, column
from .base import Dataset, as_table, regroup


def select(dataset: Dataset, *names: str | list[str]) -> Dataset:
    """Keep only the named columns, in the order they were named.

    A name starting with ``-`` excludes that column instead,
    when only exclusions are provided all the other columns are kept.
    The grouping keys of a grouped dataset are always kept.

    >>> import pyarrow as pa
    >>> data = pa.table({"a": [1], "b": [2], "c": [3]})
    >>> select(data, "c", "a").column_names
    ['c', 'a']
    >>> select(data, "-b").column_names
    ['a', 'c']

    :param dataset: The data to select columns from.
    :param names: The column names, or a single list of them.
    """
    if len(names) == 1 and isinstance(names[0], (list, tuple)):
        names = tuple(names[0])

    table = as_table(dataset)
    excluded = [name[1:] for name in names if name.startswith("-")]
    selected = [name for name in names if not name.startswith("-")]
    for name in excluded + selected:
        column(table, name)

    if not selected and excluded:
        selected = list(table.column_names)
    selected = [name for name in selected if name not in excluded]

    if isinstance(dataset, GroupedTable):
        missing_keys = [key for key in dataset.keys if key not in selected]
        selected = missing_keys + selected

    return regroup(dataset, table.select(selected))
