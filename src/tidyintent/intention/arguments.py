"""Capture the arguments of a verb without evaluating them.

When a verb is delayed its arguments are provided long
before the dataset they refer to. :class:`Arguments`
keeps them exactly as they were given, and only resolves
the expressions among them once a dataset is available.
"""

import types
from typing import Any

from ..compute import Expression


class FrozenList(tuple):
    """A list captured as an argument, it can no longer change."""

    def __repr__(self) -> str:
        return repr(list(self))


def freeze(value: Any) -> Any:
    """Copy the lists, tuples and dictionaries of an argument into read-only ones.

    Anything else is kept as is.
    """
    if isinstance(value, list):
        return FrozenList(freeze(v) for v in value)
    if type(value) is tuple:
        return tuple(freeze(v) for v in value)
    if isinstance(value, (dict, types.MappingProxyType)):
        return types.MappingProxyType({k: freeze(v) for k, v in value.items()})
    return value


def resolve(value: Any, dataset: Any) -> Any:
    """Resolve a single argument against ``dataset``.

    Expressions are applied to the dataset, lists, tuples
    and dictionaries are resolved item by item, anything else
    was already bound where the argument was written and is
    returned as is.
    """
    if isinstance(value, Expression):
        return value.apply(dataset)
    if isinstance(value, (list, FrozenList)):
        return [resolve(v, dataset) for v in value]
    if isinstance(value, tuple):
        return tuple(resolve(v, dataset) for v in value)
    if isinstance(value, (dict, types.MappingProxyType)):
        return {k: resolve(v, dataset) for k, v in value.items()}
    return value


class Arguments:
    """The positional and keyword arguments of a verb, not yet evaluated.

    Arguments are captured in order together with their names.
    Lists and dictionaries among them are copied into read-only
    containers, so changing them afterwards does not affect
    the captured arguments.
    Capturing never fails and never looks at the content
    of the arguments: any error is reported when they are
    evaluated against a dataset.

    >>> import pyarrow as pa
    >>> from tidyintent.compute import col
    >>> arguments = Arguments(col("a") + 1, how="fast")
    >>> str(arguments)
    "pyarrow.compute.add(ColumnRef(a),1), how='fast'"
    >>> args, kwargs = arguments.evaluate(pa.table({"a": [1, 2]}))
    >>> args[0].to_pylist(), kwargs
    ([2, 3], {'how': 'fast'})
    """

    __slots__ = ("args", "kwargs")

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """
        :param args: The positional arguments.
        :param kwargs: The keyword arguments.
        """
        self.args = tuple(freeze(v) for v in args)
        self.kwargs = types.MappingProxyType({k: freeze(v) for k, v in kwargs.items()})

    def __len__(self) -> int:
        return len(self.args) + len(self.kwargs)

    def __str__(self) -> str:
        return ", ".join(
            [_describe(v) for v in self.args]
            + [f"{k}={_describe(v)}" for k, v in self.kwargs.items()]
        )

    def __repr__(self) -> str:
        return f"Arguments({self})"

    def names(self) -> tuple[str, ...]:
        """The names of the keyword arguments, in the order they were given."""
        return tuple(self.kwargs)

    def evaluate(self, dataset: Any) -> tuple[tuple, dict[str, Any]]:
        """Resolve all the arguments against ``dataset``.

        Returns the positional and keyword arguments ready
        to be passed to the verb. Each call evaluates the
        arguments anew, the captured ones are left untouched.
        """
        args = tuple(resolve(v, dataset) for v in self.args)
        kwargs = {k: resolve(v, dataset) for k, v in self.kwargs.items()}
        return args, kwargs


def _describe(value: Any) -> str:
    if isinstance(value, Expression):
        return str(value)
    if isinstance(value, types.MappingProxyType):
        return repr(dict(value))
    return repr(value)
