"""Verbs that compute aggregations.

``summarize`` reduces each group of a dataset to a single row,
computing the requested aggregations for the rows of that group.

For example, given the following data::

    city, shop, n_employees
    New York, Shop A, 10
    New York, Shop B, 15
    Los Angeles, Shop C, 8
    Los Angeles, Shop D, 12
    New York, Shop E, 20

We could group by city and compute the sum of the employees
to get::

    city, total_employees
    Los Angeles, 20
    New York, 45
"""

from typing import Any

import pyarrow as pa

from ..compute import Aggregation, GroupedTable, n
from .base import Dataset, as_table

GROUPS_MODES = ("drop", "drop_last", "keep")


def summarize(dataset: Dataset, groups: str = "drop", **aggregations: Any) -> Dataset:
    """Compute one row of aggregations for each group.

    The result has the grouping keys as its first columns,
    followed by one column for each aggregation in the order
    they were provided. Groups are sorted by their keys.
    An ungrouped dataset is summarized into a single row.

    >>> import pyarrow as pa
    >>> from tidyintent.compute import total, n
    >>> data = pa.table({
    ...    'city': ['New York', 'New York', 'Los Angeles', 'Los Angeles', 'New York'],
    ...    'n_employees': [10, 15, 8, 12, 20]
    ... })
    >>> summarize(GroupedTable(data, ["city"]), total_employees=total("n_employees")).to_pydict()
    {'city': ['Los Angeles', 'New York'], 'total_employees': [20, 45]}
    >>> summarize(data, shops=n()).to_pydict()
    {'shops': [5]}

    :param dataset: The data to summarize.
    :param groups: What grouping the result should have:
                   ``"drop"`` removes it, ``"drop_last"`` groups by
                   all keys but the last one and ``"keep"`` preserves it.
    :param aggregations: The aggregations to compute in the form of
                         {"new_col_name": Aggregation}. Callables accepting
                         the rows of a group are accepted too.
    """
    if groups not in GROUPS_MODES:
        raise ValueError(f"Unsupported groups mode {groups!r}, expected one of {GROUPS_MODES}")

    if isinstance(dataset, GroupedTable):
        keys = dataset.keys
        chunks = dataset.groups()
    else:
        keys = []
        chunks = [((), as_table(dataset))]

    schema = as_table(dataset).schema
    keys_data: dict[str, list] = {k: [] for k in keys}
    results: dict[str, list] = {k: [] for k in aggregations}
    for keyvalue, rows in chunks:
        for key, value in zip(keys, keyvalue):
            keys_data[key].append(value)
        for name, aggregation in aggregations.items():
            results[name].append(_aggregate(aggregation, rows))

    columns = {k: pa.array(keys_data[k], type=schema.field(k).type) for k in keys}
    for name, values in results.items():
        columns[name] = _as_array(values)
    table = pa.table(columns)

    if groups == "keep" and keys:
        return GroupedTable(table, keys)
    if groups == "drop_last" and len(keys) > 1:
        return GroupedTable(table, keys[:-1])
    return table


def count(dataset: Dataset, *names: str, sort: bool = False, name: str = "n") -> Dataset:
    """Count the rows for each combination of values of ``names``.

    The existing grouping keys of the dataset are counted by too,
    and the grouping is preserved on the result.

    >>> import pyarrow as pa
    >>> data = pa.table({"species": ["Adelie", "Gentoo", "Adelie"]})
    >>> count(data, "species", sort=True).to_pydict()
    {'species': ['Adelie', 'Gentoo'], 'n': [2, 1]}

    :param dataset: The data to count.
    :param names: The columns to count the combinations of.
    :param sort: Sort the result by descending count.
    :param name: The name of the column holding the counts.
    """
    group_keys = dataset.keys if isinstance(dataset, GroupedTable) else []
    keys = group_keys + [k for k in names if k not in group_keys]

    table = as_table(dataset)
    if keys:
        table = summarize(GroupedTable(table, keys), **{name: n()})
    else:
        table = summarize(table, **{name: n()})

    if sort:
        table = table.sort_by([(name, "descending")])
    if group_keys:
        return GroupedTable(table, group_keys)
    return table


def _aggregate(aggregation: Any, rows: pa.Table) -> Any:
    if isinstance(aggregation, Aggregation):
        return aggregation.compute(rows)
    if callable(aggregation):
        return aggregation(rows)
    return aggregation


def _as_array(values: list) -> pa.Array:
    scalars = [v for v in values if isinstance(v, pa.Scalar)]
    if scalars and len(scalars) == len(values):
        return pa.array([v.as_py() for v in values], type=scalars[0].type)
    return pa.array([v.as_py() if isinstance(v, pa.Scalar) else v for v in values])
