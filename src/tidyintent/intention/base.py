"""The interface shared by all intentions."""

import abc
from typing import Any, Callable


class Intention(abc.ABC):
    """A function from a dataset to a new dataset.

    Intentions know what has to be done with the data,
    but are not bound to any specific data: they are
    invoked with the dataset they have to work on::

        result = intention(dataset)

    Intentions compose with the ``>>`` operator, in the
    order they are applied, or with ``@`` in the order
    of mathematical function composition. A dataset can
    also be piped through them with ``>>``::

        pipeline = by_sex >> smz_mass
        pipeline = smz_mass @ by_sex
        result = dataset >> by_sex >> smz_mass
    """

    @abc.abstractmethod
    def __call__(self, dataset: Any) -> Any:
        """Apply the intention to ``dataset`` and return the result."""
        ...

    @abc.abstractmethod
    def __str__(self) -> str:
        """Human readable representation of the intention."""
        ...

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self}>"

    def __rshift__(self, other: Callable) -> "Intention":
        from .compose import compose_right

        return compose_right(self, other)

    def __rrshift__(self, other: Any) -> Any:
        from .compose import compose_right

        if callable(other):
            return compose_right(other, self)
        return self(other)

    def __matmul__(self, other: Callable) -> "Intention":
        from .compose import compose

        return compose(self, other)

    def __rmatmul__(self, other: Callable) -> "Intention":
        from .compose import compose

        return compose(other, self)
