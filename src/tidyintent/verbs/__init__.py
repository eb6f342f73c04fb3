"""Tidy data verbs over Apache Arrow tables.

A verb is a function whose first argument is the dataset
it works on, followed by any option it needs, and that
returns a new dataset. Verbs never modify their input.

The verbs in this package are eager: they immediately
compute their result. The columns they work with are
provided as already computed data or as column names::

    >>> import pyarrow as pa
    >>> import pyarrow.compute as pc
    >>> from tidyintent.verbs import filter, mutate
    >>> data = pa.table({"a": [1, 2, 3], "b": [4, 5, 6]})
    >>> data = filter(data, pc.greater(data.column("a"), 1))
    >>> mutate(data, ab=pc.add(data.column("a"), data.column("b"))).to_pydict()
    {'a': [2, 3], 'b': [5, 6], 'ab': [7, 9]}

Delaying them with :func:`tidyintent.intention.delay`
is what allows to write the columns as expressions
before the data is available.

The datasets accepted by verbs are :class:`pyarrow.Table`,
:class:`pyarrow.RecordBatch` and :class:`tidyintent.compute.GroupedTable`.
"""

from .aggregate import count, summarize
from .filtering import filter
from .grouping import group_by, ungroup
from .mutation import mutate
from .pagination import slice_head
from .selection import select
from .sorting import arrange, desc

__all__ = (
    "filter",
    "mutate",
    "select",
    "arrange",
    "desc",
    "group_by",
    "ungroup",
    "summarize",
    "count",
    "slice_head",
)
