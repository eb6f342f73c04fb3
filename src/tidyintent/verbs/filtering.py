"""Verbs that implement filtering of rows.

A common request in analyses is to filter the data to
pick only the rows that respect a specific condition.
An example is the ``WHERE`` condition in SQL queries.
"""

from typing import Any

import pyarrow as pa
import pyarrow.compute as pc

from .base import Dataset, as_table, regroup


def filter(dataset: Dataset, *predicates: Any, skip_missing: bool = True) -> Dataset:
    """Keep only the rows for which all the predicates are true.

    Each predicate is a boolean column, as emitted by applying
    an expression like ``col("species") == "Adelie"`` to the dataset.
    Multiple predicates are combined with a logical and.

    Rows where a predicate is missing are discarded when
    ``skip_missing`` is ``True``, otherwise a missing value
    in the predicates is an error.

    >>> import pyarrow as pa
    >>> data = pa.table({"values": [1, 2, 3, 4, 5]})
    >>> filter(data, pa.array([False, True, False, True, True])).column("values").to_pylist()
    [2, 4, 5]

    :param dataset: The data to filter.
    :param predicates: The boolean columns rows are selected with.
    :param skip_missing: Discard rows where a predicate is missing.
    """
    table = as_table(dataset)

    mask = None
    for predicate in predicates:
        if isinstance(predicate, pa.Scalar):
            predicate = predicate.as_py()
        if predicate is None or isinstance(predicate, bool):
            predicate = pa.repeat(pa.scalar(predicate, pa.bool_()), table.num_rows)
        elif isinstance(predicate, (list, tuple)):
            predicate = pa.array(predicate, pa.bool_())
        if not pa.types.is_boolean(predicate.type):
            raise ValueError(f"Filter predicates must be boolean, got {predicate.type}")
        mask = predicate if mask is None else pc.and_kleene(mask, predicate)

    if mask is None:
        return dataset

    if not skip_missing and mask.null_count:
        raise ValueError(
            f"Filter predicates have {mask.null_count} missing values, "
            "pass skip_missing=True to discard those rows"
        )

    return regroup(dataset, table.filter(mask, null_selection_behavior="drop"))
