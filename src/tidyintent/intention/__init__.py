"""Delayed, composable and memoizable verbs

The intention package turns verbs, functions whose first
argument is a dataset, into intentions: functions of the
dataset alone, that carry all the other arguments of the verb.

The package is made of three layers, each built on the previous one:

* :class:`Arguments` captures the arguments of a verb
  without evaluating them, so they can reference columns
  of a dataset that is not available yet.
* :func:`delay` turns a verb into a constructor of intentions,
  that when invoked with a dataset evaluate the captured
  arguments against it and apply the verb.
* :func:`compose` and :func:`compose_right` combine intentions
  into pipelines, that are intentions themselves.

On top of those, :func:`memoize` caches the results of an
intention so that applying it again to the same dataset
doesn't compute it again.

>>> import pyarrow as pa
>>> from tidyintent.compute import X
>>> from tidyintent.intention import filtering, mutating
>>> adelie = filtering(X.species == "Adelie")
>>> ratio = mutating(ratio=X.bill_length_mm / X.bill_depth_mm)
>>> penguins = pa.table({
...     "species": ["Adelie", "Gentoo", "Adelie"],
...     "bill_length_mm": [39.0, 46.0, 40.0],
...     "bill_depth_mm": [19.5, 14.0, 20.0],
... })
>>> (penguins >> adelie >> ratio).column("ratio").to_pylist()
[2.0, 2.0]

None of the verbs is bound to the intention layer:
any function accepting a dataset as its first argument can be delayed.
"""

from .arguments import Arguments
from .base import Intention
from .compose import Pipeline, compose, compose_right
from .delay import DelayedVerb, Delayer, delay
from .interface import (
    arranging,
    counting,
    filtering,
    grouping,
    mutating,
    selecting,
    slicing,
    summarizing,
    ungrouping,
)
from .memoize import DEFAULT_CACHE_SIZE, CacheInfo, Memoized, memoize

__all__ = (
    "Arguments",
    "Intention",
    "DelayedVerb",
    "Delayer",
    "Pipeline",
    "Memoized",
    "CacheInfo",
    "DEFAULT_CACHE_SIZE",
    "delay",
    "compose",
    "compose_right",
    "memoize",
    "filtering",
    "mutating",
    "selecting",
    "arranging",
    "grouping",
    "ungrouping",
    "summarizing",
    "counting",
    "slicing",
)
