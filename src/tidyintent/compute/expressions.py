"""Expressions combining columns, literals and compute functions.

Verbs like ``filter`` need a ``predicate``, so an expression that
returns ``true`` or ``false`` for each row that has to be
kept.

``mutate`` needs an expression that computes the values
of the new column, for example ``A + B``.

This module implements the most common ones and the
mapping from Python operators to arrow compute functions
that :class:`tidyintent.compute.base.Expression` relies on.
"""

import inspect
from typing import Any, Callable

import pyarrow as pa
import pyarrow.compute as pc

from .. import utils
from .base import Expression, column


def apply_expression_if_needed(dataset: Any, o: Expression | Any) -> Any:
    """Invoke Apply on expressions when needed

    If the provided object is an Expression,
    it will be applied to the target dataset.

    Otherwise it will treat it as if it's
    already the result of an expression
    or a literal value.

    This allows us to apply all arguments
    we receive without having to care if
    they are the data we need or if they
    are the expression resulting in that data.
    """
    if isinstance(o, Expression):
        o = o.apply(dataset)
    return o


def true_divide(dividend: Any, divisor: Any) -> Any:
    """Divide always producing floating point results.

    Arrow divides integers with integer division,
    while ``/`` in Python is always a true division.
    """
    return pc.divide(_as_float(dividend), _as_float(divisor))


def _as_float(value: Any) -> Any:
    if isinstance(value, (pa.Array, pa.ChunkedArray, pa.Scalar)):
        if pa.types.is_integer(value.type):
            return pc.cast(value, pa.float64())
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    return value


def is_in(values: Any, value_set: list) -> Any:
    """Check membership of each value in ``value_set``."""
    return pc.is_in(values, value_set=pa.array(value_set))


OPERATORS: dict[str, Callable] = {
    "==": pc.equal,
    "!=": pc.not_equal,
    "<": pc.less,
    "<=": pc.less_equal,
    ">": pc.greater,
    ">=": pc.greater_equal,
    "+": pc.add,
    "-": pc.subtract,
    "*": pc.multiply,
    "/": true_divide,
    "**": pc.power,
    "&": pc.and_kleene,
    "|": pc.or_kleene,
    "~": pc.invert,
    "neg": pc.negate,
    "is_null": pc.is_null,
    "is_valid": pc.is_valid,
    "is_in": is_in,
}


class FunctionCallExpression(Expression):
    """Call a compute function on its arguments.

    Given a compute function, and a set of arguments
    (other expressions, literals or data), execute
    the function on the provided arguments and return
    the resulting data.

    For example to sum two columns this would be used as::

        FunctionCallExpression(pyarrow.compute.add, ColumnRef("A"), ColumnRef("B"))

    >>> import pyarrow as pa
    >>> from tidyintent.compute import col
    >>> data = pa.table({"values": [1, 2, 3, 4, 5]})
    >>> FunctionCallExpression(pc.greater, col("values"), 3).apply(data).to_pylist()
    [False, False, False, True, True]
    """

    def __init__(self, func: Callable, *args: Any) -> None:
        """
        :param func: The function accepting the arguments.
        :param *args: The arguments for the function.
        """
        self.func = func
        self.args = args

    def __str__(self) -> str:
        func_qualname = utils.inspect.get_qualname(self.func)
        return f"{func_qualname}({','.join(map(str, self.args))})"

    def apply(self, dataset: Any) -> Any:
        """Invoke the function resolving all arguments on the dataset.

        When the function arguments are expressions themselves,
        this will apply the expressions on the provided dataset
        and the resulting data will be used as the arguments for the
        function.
        """
        args = tuple(apply_expression_if_needed(dataset, arg) for arg in self.args)
        return self.func(*args)


class LambdaExpression(Expression):
    """Compute a column with a plain Python function.

    The names of the function parameters are resolved
    against the columns of the dataset when the expression
    is applied, while any other name the function uses
    comes from the scope where the function was written::

        threshold = 40
        long_bills = LambdaExpression(
            lambda bill_length_mm: pc.greater(bill_length_mm, threshold)
        )

    A parameter with a default value falls back to its default
    when the dataset has no column with that name.

    >>> import pyarrow as pa
    >>> factor = 10
    >>> scaled = LambdaExpression(lambda a: pc.multiply(a, factor))
    >>> scaled.apply(pa.table({"a": [1, 2]})).to_pylist()
    [10, 20]
    """

    def __init__(self, func: Callable) -> None:
        """
        :param func: The function computing the column,
                     its parameters are named after the columns it needs.
        """
        self.func = func
        self.parameters = inspect.signature(func).parameters

    def __str__(self) -> str:
        return f"{utils.inspect.get_qualname(self.func)}({','.join(self.parameters)})"

    def apply(self, dataset: Any) -> Any:
        """Call the function with the columns named by its parameters."""
        kwargs = {}
        for name, parameter in self.parameters.items():
            if (
                name not in dataset.column_names
                and parameter.default is not inspect.Parameter.empty
            ):
                continue
            kwargs[name] = column(dataset, name)
        return self.func(**kwargs)


expr = LambdaExpression
