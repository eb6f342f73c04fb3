"""Base classes and interfaces for deferred expressions

This module defines the building blocks necessary to
reference the columns of a dataset before the dataset
itself is known, and to resolve those references later
against whatever dataset is provided.
"""

import abc
from typing import Any

import pyarrow as pa


class NameResolutionError(KeyError):
    """A name could not be resolved against the columns of a dataset.

    Raised when an expression or a verb references a column
    that the dataset it is applied to does not provide.
    It's a :class:`KeyError`, so code looking up columns
    by name can keep catching the usual exception.
    """

    def __init__(self, name: str, available: list[str]) -> None:
        """
        :param name: The name that failed to resolve.
        :param available: The column names the dataset actually provides.
        """
        super().__init__(name)
        self.name = name
        self.available = list(available)

    def __str__(self) -> str:
        return f"Unable to resolve name {self.name!r}, available columns: {self.available}"


def column(dataset: Any, name: str) -> pa.ChunkedArray | pa.Array:
    """Get the data of a column from a dataset.

    Works with anything exposing ``column_names`` and ``column(name)``,
    like :class:`pyarrow.Table`, :class:`pyarrow.RecordBatch` and
    :class:`tidyintent.compute.GroupedTable`.

    >>> table = pa.table({"a": [1, 2, 3]})
    >>> column(table, "a").to_pylist()
    [1, 2, 3]

    Looking up a column the dataset does not have raises
    :class:`NameResolutionError`.
    """
    if name not in dataset.column_names:
        raise NameResolutionError(name, dataset.column_names)
    return dataset.column(name)


class Expression(abc.ABC):
    """Expression to apply to a dataset.

    Expressions are some form of operation that
    has to be applied to the data of a dataset
    to create new data.

    Typical example of expressions are: A + B
    which is expected to sum column A of the dataset
    to column B of the dataset and return the result.

    Applying an expression always results in a new column,
    thus in a :class:`pyarrow.Array` or :class:`pyarrow.ChunkedArray`
    that contains the data for that column.

    Nothing is evaluated when the expression is built,
    so expressions can reference columns of datasets
    that do not exist yet. Python operators on expressions
    build new expressions::

        (col("bill_length_mm") / col("bill_depth_mm")) > 2
    """

    @abc.abstractmethod
    def apply(self, dataset: Any) -> pa.Array:
        """Apply the expression to a dataset.

        Expression classes must implement this method
        to dictate what will happen when an expression
        is applied.
        """
        ...

    @abc.abstractmethod
    def __str__(self) -> str:
        """Human readable representation of the expression."""
        ...

    def __repr__(self) -> str:
        return str(self)

    def __bool__(self) -> bool:
        raise ValueError(
            f"The truth value of {self} is only known once applied to a dataset, "
            "use & | ~ instead of and, or, not"
        )

    def _call(self, name: str, *args: Any) -> "Expression":
        from . import expressions

        return expressions.FunctionCallExpression(expressions.OPERATORS[name], *args)

    def __eq__(self, other: Any) -> "Expression":  # type: ignore[override]
        return self._call("==", self, other)

    def __ne__(self, other: Any) -> "Expression":  # type: ignore[override]
        return self._call("!=", self, other)

    def __lt__(self, other: Any) -> "Expression":
        return self._call("<", self, other)

    def __le__(self, other: Any) -> "Expression":
        return self._call("<=", self, other)

    def __gt__(self, other: Any) -> "Expression":
        return self._call(">", self, other)

    def __ge__(self, other: Any) -> "Expression":
        return self._call(">=", self, other)

    def __add__(self, other: Any) -> "Expression":
        return self._call("+", self, other)

    def __radd__(self, other: Any) -> "Expression":
        return self._call("+", other, self)

    def __sub__(self, other: Any) -> "Expression":
        return self._call("-", self, other)

    def __rsub__(self, other: Any) -> "Expression":
        return self._call("-", other, self)

    def __mul__(self, other: Any) -> "Expression":
        return self._call("*", self, other)

    def __rmul__(self, other: Any) -> "Expression":
        return self._call("*", other, self)

    def __truediv__(self, other: Any) -> "Expression":
        return self._call("/", self, other)

    def __rtruediv__(self, other: Any) -> "Expression":
        return self._call("/", other, self)

    def __pow__(self, other: Any) -> "Expression":
        return self._call("**", self, other)

    def __and__(self, other: Any) -> "Expression":
        return self._call("&", self, other)

    def __rand__(self, other: Any) -> "Expression":
        return self._call("&", other, self)

    def __or__(self, other: Any) -> "Expression":
        return self._call("|", self, other)

    def __ror__(self, other: Any) -> "Expression":
        return self._call("|", other, self)

    def __invert__(self) -> "Expression":
        return self._call("~", self)

    def __neg__(self) -> "Expression":
        return self._call("neg", self)

    __hash__ = object.__hash__

    def is_null(self) -> "Expression":
        """True for each row where the value is missing."""
        return self._call("is_null", self)

    def is_valid(self) -> "Expression":
        """True for each row where the value is not missing."""
        return self._call("is_valid", self)

    def is_in(self, values: Any) -> "Expression":
        """True for each row where the value is one of ``values``."""
        return self._call("is_in", self, list(values))


class ColumnRef(Expression):
    """References a column in a dataset.

    When another expression or a verb need
    to operate on a specific column, we will
    need a way to reference that column and its data.

    This expression is aware of the column and when
    applied to a dataset returns the data for
    that column.
    """

    def __init__(self, name: str) -> None:
        """
        :param name: The name of the column being referenced.
        """
        self.name = name

    def apply(self, dataset: Any) -> pa.Array:
        """Get the data for the column."""
        return column(dataset, self.name)

    def __str__(self) -> str:
        return f"ColumnRef({self.name})"


class Literal(Expression):
    """A constant value.

    Applying a literal gives back the value itself
    as a :class:`pyarrow.Scalar`, compute functions
    broadcast it against the columns they are combined with.
    """

    def __init__(self, value: Any) -> None:
        """
        :param value: The constant, converted to an arrow scalar.
        """
        self.value = value if isinstance(value, pa.Scalar) else pa.scalar(value)

    def apply(self, dataset: Any) -> pa.Scalar:
        return self.value

    def __str__(self) -> str:
        return f"Literal({self.value!r})"


class ColumnNamespace:
    """Build column references through attribute access.

    ``X.species`` is the same as ``col("species")``, and
    ``X["bill length"]`` allows names that are not valid
    Python identifiers or that start with an underscore.
    """

    def __getattr__(self, name: str) -> ColumnRef:
        if name.startswith("_"):
            raise AttributeError(name)
        return ColumnRef(name)

    def __getitem__(self, name: str) -> ColumnRef:
        return ColumnRef(name)

    def __repr__(self) -> str:
        return "X"


col = ColumnRef
lit = Literal
X = ColumnNamespace()
