"""Aggregations computed by ``summarize``.

Frequently when analysing data is necessary
to compute statistics like the min, max, average, etc...
of the data stored in datasets.

An aggregation reduces a column, or an expression over
the columns, of a table to a single value. ``summarize``
computes each aggregation once per group.

For example, given the following data::

    species, body_mass_g
    Adelie, 3750
    Adelie, 3800
    Gentoo, 5000

We could group by species and compute the mean mass
to get::

    species, mean_mass
    Adelie, 3775
    Gentoo, 5000

>>> import pyarrow as pa
>>> data = pa.table({"body_mass_g": [3750, 3800, None]})
>>> mean("body_mass_g").compute(data).as_py()
3775.0
>>> mean("body_mass_g", na_rm=False).compute(data).as_py() is None
True
>>> n().compute(data).as_py()
3
"""

import abc
from typing import Any

import pyarrow as pa
import pyarrow.compute as pc

from .base import Expression, column

__all__ = (
    "Aggregation",
    "SumAggregation",
    "MinAggregation",
    "MaxAggregation",
    "MeanAggregation",
    "StddevAggregation",
    "CountAggregation",
    "CountDistinctAggregation",
    "mean",
    "sd",
    "total",
    "minimum",
    "maximum",
    "n",
    "n_distinct",
)


class Aggregation(abc.ABC):
    """Base class for aggregations.

    Every aggregation is expected to implement
    a method reducing the rows of a table
    to a single :class:`pyarrow.Scalar`.
    """

    def __init__(self, column: str | Expression | None, na_rm: bool = True) -> None:
        """
        :param column: The column name, or the expression, to aggregate.
        :param na_rm: Skip missing values. When ``False`` any missing
                      value makes the result missing.
        """
        self.column = column
        self.na_rm = na_rm

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.column})"

    __repr__ = __str__

    def values(self, table: Any) -> Any:
        """The data being aggregated, resolved against ``table``."""
        if isinstance(self.column, Expression):
            return self.column.apply(table)
        return column(table, self.column)

    @abc.abstractmethod
    def compute(self, table: Any) -> pa.Scalar: ...


class SimpleAggregation(Aggregation):
    """Provide a base implementation for aggregations of a single compute function."""

    @abc.abstractmethod
    def _aggregate(self, data: Any) -> pa.Scalar: ...

    def compute(self, table: Any) -> pa.Scalar:
        return self._aggregate(self.values(table))


class SumAggregation(SimpleAggregation):
    """Compute the sum of an aggregated column."""

    def _aggregate(self, data: Any) -> pa.Scalar:
        return pc.sum(data, skip_nulls=self.na_rm)


class MinAggregation(SimpleAggregation):
    """Compute the min of an aggregated column."""

    def _aggregate(self, data: Any) -> pa.Scalar:
        return pc.min(data, skip_nulls=self.na_rm)


class MaxAggregation(SimpleAggregation):
    """Compute the max of an aggregated column."""

    def _aggregate(self, data: Any) -> pa.Scalar:
        return pc.max(data, skip_nulls=self.na_rm)


class MeanAggregation(SimpleAggregation):
    """Compute the mean of an aggregated column."""

    def _aggregate(self, data: Any) -> pa.Scalar:
        return pc.mean(data, skip_nulls=self.na_rm)


class StddevAggregation(SimpleAggregation):
    """Compute the sample standard deviation of an aggregated column."""

    def _aggregate(self, data: Any) -> pa.Scalar:
        return pc.stddev(data, ddof=1, skip_nulls=self.na_rm)


class CountDistinctAggregation(SimpleAggregation):
    """Count the distinct values of an aggregated column."""

    def _aggregate(self, data: Any) -> pa.Scalar:
        return pc.count_distinct(data, mode="only_valid" if self.na_rm else "all")


class CountAggregation(Aggregation):
    """Count the rows of the table, missing values included."""

    def __init__(self) -> None:
        super().__init__(None)

    def __str__(self) -> str:
        return "CountAggregation()"

    __repr__ = __str__

    def compute(self, table: Any) -> pa.Scalar:
        return pa.scalar(table.num_rows, pa.int64())


def mean(x: str | Expression, na_rm: bool = True) -> MeanAggregation:
    """Mean of ``x``."""
    return MeanAggregation(x, na_rm=na_rm)


def sd(x: str | Expression, na_rm: bool = True) -> StddevAggregation:
    """Sample standard deviation of ``x``."""
    return StddevAggregation(x, na_rm=na_rm)


def total(x: str | Expression, na_rm: bool = True) -> SumAggregation:
    """Sum of ``x``."""
    return SumAggregation(x, na_rm=na_rm)


def minimum(x: str | Expression, na_rm: bool = True) -> MinAggregation:
    return MinAggregation(x, na_rm=na_rm)


def maximum(x: str | Expression, na_rm: bool = True) -> MaxAggregation:
    return MaxAggregation(x, na_rm=na_rm)


def n() -> CountAggregation:
    """Number of rows in the group."""
    return CountAggregation()


def n_distinct(x: str | Expression, na_rm: bool = True) -> CountDistinctAggregation:
    """Number of distinct values of ``x`` in the group."""
    return CountDistinctAggregation(x, na_rm=na_rm)
