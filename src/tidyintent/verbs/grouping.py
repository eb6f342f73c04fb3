"""Verbs that set or remove the grouping of a dataset."""

from ..compute import GroupedTable
from .base import Dataset, as_table


def group_by(dataset: Dataset, *names: str, add: bool = False) -> GroupedTable:
    """Group the dataset by one or more columns.

    Grouping doesn't change the data, it only affects
    how the following verbs, like ``summarize``, will process it.

    :param dataset: The data to group.
    :param names: The columns identifying each group.
    :param add: Add ``names`` to the existing grouping instead of replacing it.
    """
    keys = list(names)
    if add and isinstance(dataset, GroupedTable):
        keys = dataset.keys + [name for name in keys if name not in dataset.keys]
    return GroupedTable(as_table(dataset), keys)


def ungroup(dataset: Dataset) -> Dataset:
    """Remove the grouping, if any."""
    if isinstance(dataset, GroupedTable):
        return dataset.table
    return dataset
