"""tidyintent

Delayed, composable and memoizable tidy data verbs.

Tidy data APIs provide verbs like filter, mutate, summarize,
group by, arrange and select. Each verb accepts a dataset
and returns a new one, so an analysis is a chain of verbs
applied to some data.

tidyintent allows to write the steps of that chain before
the data is available. A verb is delayed into a function
of its options, that returns an *intention*: a function
of the dataset alone. Intentions can be named, composed
into pipelines, reordered and applied to any dataset::

    from tidyintent import X, filtering, grouping, summarizing, mean, n

    flts = filtering(X.sex.is_valid(), X.species == "Adelie")
    by_sex = grouping("sex")
    smz_mass = summarizing(mean_mass=mean("body_mass_g"), n=n())

    pipeline = flts >> by_sex >> smz_mass
    pipeline(penguins)

The project is made of multiple components, each isolated within its own
package:

* The Compute package, deferred expressions over Apache Arrow data.
* The Verbs package, eager tidy verbs over Arrow tables.
* The Intention package, delaying, composing and memoizing verbs.

For the user guide and code documentation of each component, refer to the
component itself.
"""

from . import compute, intention, verbs
from .compute import (
    GroupedTable,
    NameResolutionError,
    X,
    col,
    expr,
    lit,
    maximum,
    mean,
    minimum,
    n,
    n_distinct,
    sd,
    total,
)
from .intention import (
    Arguments,
    Intention,
    Pipeline,
    arranging,
    compose,
    compose_right,
    counting,
    delay,
    filtering,
    grouping,
    memoize,
    mutating,
    selecting,
    slicing,
    summarizing,
    ungrouping,
)
from .verbs import desc

__all__ = (
    "compute",
    "intention",
    "verbs",
    "Arguments",
    "Intention",
    "Pipeline",
    "GroupedTable",
    "NameResolutionError",
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
    "col",
    "lit",
    "expr",
    "X",
    "desc",
    "mean",
    "sd",
    "total",
    "minimum",
    "maximum",
    "n",
    "n_distinct",
)
