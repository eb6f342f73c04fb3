"""Delayed versions of the tidy verbs.

Each of these is a function from the options of a verb
to an intention, a function of the dataset only.
They allow to describe the steps of an analysis
without having the data at hand, name them, and
then combine them in different ways::

    smz_mass = summarizing(
        mean_mass=mean("body_mass_g"),
        sd_mass=sd("body_mass_g"),
        n=n(),
    )
    by_sex = grouping("sex")
    flts = filtering(X.sex.is_valid(), X.species == "Adelie")

    smz_mass(penguins)
    (smz_mass @ by_sex)(penguins)
    (smz_mass @ by_sex @ flts)(penguins)

The summarizing step was written once, and is reused
in all the analyses without rewriting it.
"""

from .. import verbs
from .delay import delay

filtering = delay(verbs.filter)
mutating = delay(verbs.mutate)
selecting = delay(verbs.select)
arranging = delay(verbs.arrange)
grouping = delay(verbs.group_by)
ungrouping = delay(verbs.ungroup)
summarizing = delay(verbs.summarize)
counting = delay(verbs.count)
slicing = delay(verbs.slice_head)

__all__ = (
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
