"""Provide insights about Python objects."""

import inspect
from typing import Any


def get_qualname(obj: Any) -> str:
    """Get the qualified name of the given object.

    Will return the name of the object and the
    name of the module and class it belongs to.

    For functions or methods, this will return
    something like `module.class.method` or
    `module.function`. Callable instances are named
    after their class, unless they carry a ``__name__``
    of their own, as wrappers built with
    :func:`functools.update_wrapper` do.

    >>> class TestClass:
    ...   def method(self, arg):
    ...     pass
    >>> get_qualname(TestClass.method)
    'tidyintent.utils.inspect.TestClass.method'
    """
    module = inspect.getmodule(obj)
    module_name = module.__name__ if module is not None else type(obj).__module__
    if inspect.ismethod(obj) or inspect.isfunction(obj):
        if hasattr(obj, "__self__") and obj.__self__:
            class_name = obj.__self__.__class__.__name__
            return f"{module_name}.{class_name}.{obj.__name__}"
        return f"{module_name}.{obj.__qualname__}"
    elif inspect.isclass(obj):
        return f"{module_name}.{obj.__name__}"
    elif inspect.ismodule(obj):
        return obj.__name__
    elif hasattr(obj, "__qualname__"):
        return f"{module_name}.{obj.__qualname__}"
    return f"{module_name}.{obj.__class__.__name__}"
