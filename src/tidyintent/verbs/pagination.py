"""Verbs limiting the number of rows of a dataset."""

from .base import Dataset, as_table, regroup


def slice_head(dataset: Dataset, n: int) -> Dataset:
    """Keep only the first ``n`` rows.

    >>> import pyarrow as pa
    >>> slice_head(pa.table({"a": [1, 2, 3]}), 2).column("a").to_pylist()
    [1, 2]
    """
    if n < 0:
        raise ValueError(f"Number of rows must be positive, got {n}")
    return regroup(dataset, as_table(dataset).slice(0, n))
