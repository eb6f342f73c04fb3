"""Deferred expressions over Apache Arrow data

The compute package provides the primitive the rest of
tidyintent is built upon: a way to write down a computation
over the columns of a dataset before the dataset is known,
and to evaluate it later against any dataset.

Datasets are :class:`pyarrow.Table` or :class:`pyarrow.RecordBatch`
objects, or :class:`GroupedTable` when a grouping was requested.
Applying an expression to a dataset resolves the column names
it references against the columns of that dataset and
emits a new column::

    (Dataset)-->Expression.apply()--(Array)

Expressions can be built explicitly, or through Python operators:

>>> import pyarrow as pa
>>> data = pa.table({
...    "animals": pa.array(["Flamingo", "Horse", "Brittle stars", "Centipede"]),
...    "n_legs": pa.array([2, 4, 5, 100])
... })
>>>
>>> from tidyintent.compute import X, col
>>> predicate = (col("n_legs") >= 5) & (X.animals != "Horse")
>>> predicate.apply(data).to_pylist()
[False, False, True, True]

Nothing is evaluated until ``apply`` is called, so the same
expression can be applied to any dataset having the columns it needs.
"""

from .aggregate import (
    Aggregation,
    CountAggregation,
    CountDistinctAggregation,
    MaxAggregation,
    MeanAggregation,
    MinAggregation,
    StddevAggregation,
    SumAggregation,
    maximum,
    mean,
    minimum,
    n,
    n_distinct,
    sd,
    total,
)
from .base import ColumnRef, Expression, Literal, NameResolutionError, X, col, column, lit
from .expressions import FunctionCallExpression, LambdaExpression, expr
from .grouping import GroupedTable

__all__ = (
    "Expression",
    "ColumnRef",
    "Literal",
    "FunctionCallExpression",
    "LambdaExpression",
    "NameResolutionError",
    "GroupedTable",
    "col",
    "lit",
    "expr",
    "column",
    "X",
    "Aggregation",
    "CountAggregation",
    "CountDistinctAggregation",
    "MaxAggregation",
    "MeanAggregation",
    "MinAggregation",
    "StddevAggregation",
    "SumAggregation",
    "mean",
    "sd",
    "total",
    "minimum",
    "maximum",
    "n",
    "n_distinct",
)
