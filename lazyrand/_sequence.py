# Copyright 2026 BrainX Ecosystem Limited. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ==============================================================================

"""
Lazy sequence substrate.

Generators return :class:`RandomIterable` objects. A ``RandomIterable`` holds
an iterator factory rather than values: every call to ``iter()`` builds a new
pull-based iterator that draws from the provider's shared bit source. Nothing
is cached, so iterating the same object twice yields different values.

The ``*_infinite`` helpers assume unbounded sources and raise
:class:`InfiniteSequenceRequiredError` when a source runs out.
"""

import itertools
from typing import Any, Callable, Dict, Generic, Hashable, Iterable, Iterator, List, Tuple, TypeVar

from ._error import ConfigurationError, InfiniteSequenceRequiredError

__all__ = [
    'RandomIterable',
    'repeat',
    'filter_infinite',
    'zip_infinite',
    'chunk_infinite',
    'distinct_chunk_infinite',
    'pull',
    'CachedIterator',
    'EqualityIteratorCache',
    'IdentityIteratorCache',
]

T = TypeVar('T')

_END = object()


class RandomIterable(Generic[T]):
    """A lazy, re-iterable and usually infinite sequence of random values.

    Parameters
    ----------
    factory : callable
        A zero-argument callable returning a fresh iterator. Generator
        functions are the usual factories.

    Notes
    -----
    Re-iterating never replays values: the factory's iterator pulls from a
    bit source that keeps advancing. Use :meth:`RandomProvider.reset` or a
    deep copy of the provider to reproduce a stream.

    Examples
    --------
    .. code-block:: python

        >>> import lazyrand
        >>> rp = lazyrand.RandomProvider.example()
        >>> digits = rp.range(0, 9)
        >>> len(digits.take(5))
        5
    """
    __module__ = 'lazyrand'
    __slots__ = ('_factory',)

    def __init__(self, factory: Callable[[], Iterator[T]]):
        self._factory = factory

    def __iter__(self) -> Iterator[T]:
        return iter(self._factory())

    def take(self, n: int) -> List[T]:
        """Return a list of the next ``n`` values of a fresh iterator."""
        if n < 0:
            raise ConfigurationError(f'cannot take a negative number of values. Invalid count: {n}')
        return list(itertools.islice(iter(self), n))

    def first(self) -> T:
        """Return the first value of a fresh iterator."""
        return next(iter(self))

    def map(self, fn: Callable[[T], Any]) -> 'RandomIterable':
        """Return a sequence applying ``fn`` to every value."""
        return RandomIterable(lambda: map(fn, iter(self)))

    def filter(self, predicate: Callable[[T], bool]) -> 'RandomIterable':
        """Return a sequence keeping the values that satisfy ``predicate``."""
        return filter_infinite(predicate, self)

    def __repr__(self):
        return f'{self.__class__.__name__}({getattr(self._factory, "__qualname__", self._factory)})'


def repeat(x: T) -> RandomIterable[T]:
    """Return a constant sequence that consumes no entropy."""
    return RandomIterable(lambda: itertools.repeat(x))


def pull(it: Iterator, what: str = 'source'):
    """Return the next element of ``it``, treating exhaustion as an error."""
    x = next(it, _END)
    if x is _END:
        raise InfiniteSequenceRequiredError(f'{what} must be infinite, but it ran out of elements')
    return x


def filter_infinite(predicate: Callable[[T], bool], xs: Iterable[T]) -> RandomIterable[T]:
    """Keep the elements of the infinite ``xs`` that satisfy ``predicate``."""

    def gen():
        it = iter(xs)
        while True:
            x = pull(it, 'filtered source')
            if predicate(x):
                yield x

    return RandomIterable(gen)


def zip_infinite(*xss: Iterable) -> RandomIterable[Tuple]:
    """Zip infinite sources, pulling each element of a tuple in argument order."""

    def gen():
        its = [iter(xs) for xs in xss]
        while True:
            yield tuple(pull(it, 'zipped source') for it in its)

    return RandomIterable(gen)


def chunk_infinite(size: int, xs: Iterable[T]) -> RandomIterable[Tuple[T, ...]]:
    """Group consecutive elements of the infinite ``xs`` into tuples of ``size``."""
    if size < 0:
        raise ConfigurationError(f'size cannot be negative. Invalid size: {size}')
    if size == 0:
        return repeat(())

    def gen():
        it = iter(xs)
        while True:
            yield tuple(pull(it, 'chunked source') for _ in range(size))

    return RandomIterable(gen)


def distinct_chunk_infinite(size: int, xs: Iterable[T]) -> RandomIterable[Tuple[T, ...]]:
    """Collect ``size`` distinct consecutive elements, in first-seen order, per tuple.

    The source must keep producing at least ``size`` distinct values, or the
    iterator never returns.
    """
    if size < 0:
        raise ConfigurationError(f'size cannot be negative. Invalid size: {size}')
    if size == 0:
        return repeat(())

    def gen():
        it = iter(xs)
        while True:
            seen = {}
            while len(seen) < size:
                seen.setdefault(pull(it, 'chunked source'), None)
            yield tuple(seen)

    return RandomIterable(gen)


class CachedIterator(Generic[T]):
    """Memoize the elements of an iterator for random access.

    ``known_size`` becomes the length of the source once it is exhausted and
    stays ``None`` while more elements may follow.
    """

    def __init__(self, xs: Iterable[T]):
        self._it = iter(xs)
        self._cache: List[T] = []
        self.known_size = None

    def get(self, i: int):
        """Return element ``i``, or ``None`` paired with ``False`` when the source is shorter."""
        while len(self._cache) <= i:
            if self.known_size is not None:
                return None, False
            x = next(self._it, _END)
            if x is _END:
                self.known_size = len(self._cache)
                return None, False
            self._cache.append(x)
        return self._cache[i], True

    def prefix(self, n: int):
        """Return the first ``n`` elements, or ``None`` when the source is shorter."""
        if n > 0 and not self.get(n - 1)[1]:
            return None
        return self._cache[:n]


class EqualityIteratorCache:
    """One derived iterator per distinct key, keyed by equality.

    Parameters
    ----------
    factory : callable
        Maps a key to an iterable; it is called at most once per distinct key.
    """

    def __init__(self, factory: Callable[[Any], Iterable]):
        self._factory = factory
        self._iterators: Dict[Hashable, Iterator] = {}

    def __len__(self):
        return len(self._iterators)

    def next_for(self, key):
        it = self._iterators.get(key)
        if it is None:
            it = iter(self._factory(key))
            self._iterators[key] = it
        return pull(it, 'dependent source')


class IdentityIteratorCache:
    """One derived iterator per key object, keyed by identity.

    Keys do not need to be hashable. Each key is kept alive by the cache so
    that its ``id`` cannot be reused by another object.
    """

    def __init__(self, factory: Callable[[Any], Iterable]):
        self._factory = factory
        self._entries: Dict[int, Tuple[Any, Iterator]] = {}

    def __len__(self):
        return len(self._entries)

    def next_for(self, key):
        entry = self._entries.get(id(key))
        if entry is None:
            entry = (key, iter(self._factory(key)))
            self._entries[id(key)] = entry
        return pull(entry[1], 'dependent source')
