"""Delay verbs until the data they work on is available.

A verb is a function accepting a dataset as its first argument
and any number of options after it, like ``filter(dataset, predicate)``.

Delaying a verb splits it in two steps: first the options
are provided, then the dataset. The first step gives back
an :class:`Intention`, a function of the dataset alone,
that can be stored, named, composed and applied to
as many datasets as needed::

    filtering = delay(filter)
    adelie = filtering(col("species") == "Adelie")
    adelie(penguins)

The options can reference the columns of the dataset
through expressions, which are only evaluated when the
intention is applied to a dataset.

>>> import pyarrow as pa
>>> from tidyintent.compute import col
>>> from tidyintent.verbs import filter
>>> big = delay(filter)(col("n") > 1)
>>> big(pa.table({"n": [1, 2, 3]})).column("n").to_pylist()
[2, 3]
"""

import functools
import logging
from typing import Any, Callable

from .. import utils
from .arguments import Arguments
from .base import Intention
from .memoize import DEFAULT_CACHE_SIZE, memoize

LOGGER = logging.getLogger(__name__)


class DelayedVerb(Intention):
    """A verb waiting for the dataset it has to be applied to.

    Holds the verb and its captured :class:`Arguments`.
    Each time it is invoked the arguments are evaluated
    against the provided dataset and the verb is applied,
    nothing is kept from previous invocations.
    """

    def __init__(self, verb: Callable, arguments: Arguments) -> None:
        """
        :param verb: The function accepting the dataset followed by the arguments.
        :param arguments: The arguments the verb will be invoked with.
        """
        self.verb = verb
        self.arguments = arguments

    def __str__(self) -> str:
        return f"{utils.inspect.get_qualname(self.verb)}({self.arguments})"

    def __call__(self, dataset: Any) -> Any:
        """Evaluate the arguments against ``dataset`` and apply the verb.

        Failures to resolve the arguments or to apply the verb
        propagate to the caller, with a note about the intention
        that was being applied.
        """
        LOGGER.debug("Applying %s", self)
        try:
            args, kwargs = self.arguments.evaluate(dataset)
            return self.verb(dataset, *args, **kwargs)
        except Exception as e:
            e.add_note(f"While applying {self}")
            raise


class Delayer:
    """Build intentions out of a verb.

    Calling the delayer with the arguments of the verb,
    minus the dataset, gives back the intention applying
    the verb with those arguments.
    """

    def __init__(
        self,
        verb: Callable,
        memoized: bool = False,
        cache_size: int | None = DEFAULT_CACHE_SIZE,
    ) -> None:
        """
        :param verb: The verb to delay.
        :param memoized: Cache the results of the intentions built by this delayer.
        :param cache_size: How many results each memoized intention keeps.
        """
        if not callable(verb):
            raise TypeError(f"Only callables can be delayed, got {verb!r}")
        self.verb = verb
        self.memoized = memoized
        self.cache_size = cache_size
        # The attributes of the verb must not override the ones of the delayer.
        functools.update_wrapper(self, verb, updated=())

    def __str__(self) -> str:
        return f"delay({utils.inspect.get_qualname(self.verb)})"

    __repr__ = __str__

    def __call__(self, *args: Any, **kwargs: Any) -> Intention:
        intention: Intention = DelayedVerb(self.verb, Arguments(*args, **kwargs))
        if self.memoized:
            intention = memoize(intention, maxsize=self.cache_size)
        return intention


def delay(
    verb: Callable | None = None,
    *,
    memoized: bool = False,
    cache_size: int | None = DEFAULT_CACHE_SIZE,
) -> Delayer | Callable[[Callable], Delayer]:
    """Delay a verb, see :class:`Delayer`.

    Can also be used as a decorator, with or without options::

        @delay(memoized=True)
        def keep_species(table, species):
            ...

    :param verb: The function accepting a dataset as its first argument.
    :param memoized: Wrap every intention with :func:`memoize`.
    :param cache_size: The ``maxsize`` of the memoized intentions.
    """
    if verb is None:
        return functools.partial(delay, memoized=memoized, cache_size=cache_size)
    return Delayer(verb, memoized=memoized, cache_size=cache_size)
