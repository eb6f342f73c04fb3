"""Avoid recomputing intentions applied to the same dataset.

Memoized intentions keep the results they computed,
and when applied again to the very same dataset object
they return the previous result instead of applying the
verb once more.

Datasets are recognized by identity, not by content:
hashing the content of a table would cost as much as
recomputing the result. A cached entry keeps a reference
to its dataset, so the identity can't be reused by a different
object while the entry exists. The cache holds at most
``maxsize`` entries, discarding the least recently used ones.

>>> calls = []
>>> def expensive(dataset):
...     calls.append(dataset)
...     return len(dataset)
>>> data = [1, 2, 3]
>>> cached = memoize(expensive)
>>> cached(data), cached(data), len(calls)
(3, 3, 1)
>>> cached.cache_info()
CacheInfo(hits=1, misses=1, maxsize=32, currsize=1)
"""

import collections
import logging
import threading
from typing import Any, Callable

from .. import utils
from .base import Intention

LOGGER = logging.getLogger(__name__)

DEFAULT_CACHE_SIZE = 32

CacheInfo = collections.namedtuple("CacheInfo", ["hits", "misses", "maxsize", "currsize"])


class Memoized(Intention):
    """An intention caching its results by the identity of the dataset.

    Failures are never cached, applying the intention
    again after a failure computes it again.

    The cache is safe to share across threads: concurrent
    callers applying the intention to the same dataset
    compute it only once, the others wait for the result.
    """

    def __init__(self, intention: Callable, maxsize: int | None = DEFAULT_CACHE_SIZE) -> None:
        """
        :param intention: The intention to cache the results of.
        :param maxsize: How many results to keep, ``None`` for no limit.
        """
        if maxsize is not None and maxsize < 0:
            raise ValueError(f"maxsize must be non-negative or None, got {maxsize}")
        self.intention = intention
        self.maxsize = maxsize
        self.hits = 0
        self.misses = 0
        # {id(dataset): (dataset, result)}
        self._cache: collections.OrderedDict[int, tuple[Any, Any]] = collections.OrderedDict()
        self._lock = threading.Lock()
        self._key_locks: dict[int, list] = {}

    def __str__(self) -> str:
        if isinstance(self.intention, Intention):
            return f"memoize({self.intention})"
        return f"memoize({utils.inspect.get_qualname(self.intention)})"

    def __call__(self, dataset: Any) -> Any:
        key = id(dataset)
        with self._lock:
            found, result = self._lookup(key, dataset)
            if found:
                return result
            # [lock, number of callers holding or waiting for it]
            key_lock = self._key_locks.setdefault(key, [threading.Lock(), 0])
            key_lock[1] += 1

        try:
            with key_lock[0]:
                return self._compute(key, dataset)
        finally:
            with self._lock:
                key_lock[1] -= 1
                if not key_lock[1]:
                    del self._key_locks[key]

    def _compute(self, key: int, dataset: Any) -> Any:
        # Another caller might have computed it while we were waiting.
        with self._lock:
            found, result = self._lookup(key, dataset)
            if found:
                return result

        LOGGER.debug("Cache miss for %s", self)
        result = self.intention(dataset)
        with self._lock:
            self.misses += 1
            self._store(key, dataset, result)
        return result

    def cache_info(self) -> CacheInfo:
        """Statistics about the usage of the cache."""
        with self._lock:
            return CacheInfo(self.hits, self.misses, self.maxsize, len(self._cache))

    def cache_clear(self) -> None:
        """Discard all cached results and statistics."""
        with self._lock:
            self._cache.clear()
            self.hits = self.misses = 0

    def _lookup(self, key: int, dataset: Any) -> tuple[bool, Any]:
        entry = self._cache.get(key)
        if entry is None or entry[0] is not dataset:
            return False, None
        self._cache.move_to_end(key)
        self.hits += 1
        LOGGER.debug("Cache hit for %s", self)
        return True, entry[1]

    def _store(self, key: int, dataset: Any, result: Any) -> None:
        self._cache[key] = (dataset, result)
        self._cache.move_to_end(key)
        while self.maxsize is not None and len(self._cache) > self.maxsize:
            self._cache.popitem(last=False)


def memoize(intention: Callable, maxsize: int | None = DEFAULT_CACHE_SIZE) -> Memoized:
    """Cache the results of ``intention``, see :class:`Memoized`.

    Memoizing an already memoized intention gives it back unchanged,
    keeping its own ``maxsize`` whatever ``maxsize`` is given here.
    """
    if isinstance(intention, Memoized):
        return intention
    return Memoized(intention, maxsize=maxsize)
