"""Combine intentions into pipelines.

Composing intentions builds a new intention that applies
each of them in turn, feeding the result of one to the next.
As the result is an intention itself, pipelines can be
named, reused and composed further, without ever being
bound to a dataset::

    summary = compose_right(flts, by_sex, smz_mass)
    summary(penguins)

:func:`compose` lists the intentions in the order of mathematical
function composition, ``compose(g, f)(x) == g(f(x))``, while
:func:`compose_right` lists them in the order they are applied,
``compose_right(f, g)(x) == g(f(x))``.

>>> double = lambda x: x * 2
>>> increment = lambda x: x + 1
>>> compose(double, increment)(3)
8
>>> compose_right(double, increment)(3)
7
"""

import logging
from typing import Any, Callable

from .. import utils
from .base import Intention

LOGGER = logging.getLogger(__name__)


class Pipeline(Intention):
    """An intention made of a sequence of stages.

    Stages are applied in order, each one receiving
    the result of the previous one. Nested pipelines
    are flattened, so the way stages were grouped when
    composing them doesn't matter.

    When a stage fails the following stages are not applied,
    and the exception reaches the caller with a note
    reporting the stage that failed.
    """

    def __init__(self, *stages: Callable) -> None:
        """
        :param stages: The unary functions to apply, in order.
        """
        if len(stages) < 2:
            raise TypeError(f"A pipeline requires at least two stages, got {len(stages)}")

        flattened: list[Callable] = []
        for stage in stages:
            if not callable(stage):
                raise TypeError(f"Pipeline stages must be callable, got {stage!r}")
            if isinstance(stage, Pipeline):
                flattened.extend(stage.stages)
            else:
                flattened.append(stage)
        self.stages = tuple(flattened)

    def __str__(self) -> str:
        return " >> ".join(_describe(stage) for stage in self.stages)

    def __call__(self, dataset: Any) -> Any:
        """Flow ``dataset`` through all the stages."""
        for index, stage in enumerate(self.stages):
            LOGGER.debug("Pipeline stage %d/%d: %s", index + 1, len(self.stages), _describe(stage))
            try:
                dataset = stage(dataset)
            except Exception as e:
                e.add_note(f"In stage {index} of pipeline: {_describe(stage)}")
                raise
        return dataset


def compose(*intentions: Callable) -> Pipeline:
    """Compose intentions, the last one is applied first."""
    return Pipeline(*reversed(intentions))


def compose_right(*intentions: Callable) -> Pipeline:
    """Compose intentions, the first one is applied first."""
    return Pipeline(*intentions)


def _describe(stage: Callable) -> str:
    if isinstance(stage, Intention):
        return str(stage)
    return utils.inspect.get_qualname(stage)
