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
Composite generators built from other sequences.

Sources passed to these generators are usually other provider sequences,
which are infinite; sources that run out raise
:class:`InfiniteSequenceRequiredError`. List lengths are geometric with mean
``scale`` unless stated otherwise.
"""

import itertools
from typing import Any, Callable, Iterable, List, NamedTuple, Sequence

from ._error import ConfigurationError, EmptySourceError, ScaleError
from ._sequence import (
    CachedIterator,
    EqualityIteratorCache,
    IdentityIteratorCache,
    RandomIterable,
    chunk_infinite,
    distinct_chunk_infinite,
    filter_infinite,
    pull,
    repeat,
    zip_infinite,
)

__all__ = [
    'Either',
    'CompoundMixin',
]


class Either(NamedTuple):
    """A value taken from one of two sources.

    Attributes
    ----------
    is_a : bool
        ``True`` if the value came from the first source.
    value : object
        The value itself.
    """
    is_a: bool
    value: Any

    @classmethod
    def of_a(cls, value):
        return cls(True, value)

    @classmethod
    def of_b(cls, value):
        return cls(False, value)


def _check_size(size: int, label: str = 'size'):
    if size < 0:
        raise ConfigurationError(f'{label} cannot be negative. Invalid {label}: {size}')


class CompoundMixin:
    """Tuples, lists, permutations and other structures of random values."""

    # ──────────────────────────────────────────────────────────────────
    #  Element insertion and dependent pairs
    # ──────────────────────────────────────────────────────────────────

    def with_element(self, x, xs: Iterable) -> RandomIterable:
        """Mix ``x`` into ``xs``: each step yields ``x`` with probability ``1 / scale``.

        Raises
        ------
        ScaleError
            If ``scale < 2``.
        """
        if self._scale < 2:
            raise ScaleError(f'this must have a scale of at least 2. Invalid scale: {self._scale}')
        choices = self.range(1, self._scale)

        def gen():
            source = iter(xs)
            for choice in choices:
                yield x if choice == 1 else pull(source, 'xs')

        return RandomIterable(gen)

    def dependent_pairs(self, xs: Iterable, f: Callable[[Any], Iterable]) -> RandomIterable:
        """Pairs ``(a, b)`` where ``b`` is drawn from ``f(a)``.

        ``f`` is called once per distinct (equal) ``a``; repeated keys continue
        the same derived iterator. Keys must be hashable.

        Examples
        --------
        .. code-block:: python

            >>> import lazyrand
            >>> rp = lazyrand.RandomProvider.example()
            >>> pairs = rp.dependent_pairs(rp.range(1, 3), lambda n: rp.range(0, n))
            >>> all(b <= a for a, b in pairs.take(50))
            True
        """

        def gen():
            cache = EqualityIteratorCache(f)
            it = iter(xs)
            while True:
                a = pull(it, 'xs')
                yield a, cache.next_for(a)

        return RandomIterable(gen)

    def dependent_pairs_identity(self, xs: Iterable, f: Callable[[Any], Iterable]) -> RandomIterable:
        """Like :meth:`dependent_pairs`, but keys are compared by identity and need not be hashable."""

        def gen():
            cache = IdentityIteratorCache(f)
            it = iter(xs)
            while True:
                a = pull(it, 'xs')
                yield a, cache.next_for(a)

        return RandomIterable(gen)

    # ──────────────────────────────────────────────────────────────────
    #  Permutations
    # ──────────────────────────────────────────────────────────────────

    def shuffle(self, xs: List):
        """Shuffle the list ``xs`` in-place, uniformly over its permutations."""
        limit = len(xs) - 1
        for i in range(limit):
            j = self.range(i, limit).first()
            xs[i], xs[j] = xs[j], xs[i]

    def permutations_finite(self, xs: Sequence) -> RandomIterable[List]:
        """Uniformly random permutations of ``xs``, as new lists."""
        items = list(xs)

        def gen():
            while True:
                copy = list(items)
                self.shuffle(copy)
                yield copy

        return RandomIterable(gen)

    def prefix_permutations(self, xs: Iterable) -> RandomIterable:
        """Re-iterables that permute a geometric-length prefix of ``xs`` and keep the rest.

        ``xs`` may be infinite and must be re-iterable. Sources with fewer
        than two elements are returned unchanged. Once a finite source's
        length is known, only prefixes covering the whole source are used.

        Raises
        ------
        ScaleError
            If ``scale < 1``.
        """
        if self._scale < 1:
            raise ScaleError(f'this must have a positive scale. Invalid scale: {self._scale}')
        if len(list(itertools.islice(xs, 2))) < 2:
            return repeat(RandomIterable(lambda: iter(xs)))
        prefix_sizes = self.natural_integers_geometric()

        def gen():
            cached = CachedIterator(xs)
            for prefix_size in prefix_sizes:
                if cached.known_size is not None and cached.known_size > prefix_size:
                    continue
                prefix = cached.prefix(prefix_size)
                if prefix is None:
                    continue
                self.shuffle(prefix)
                yield _prefixed(prefix, prefix_size, xs)

        return RandomIterable(gen)

    # ──────────────────────────────────────────────────────────────────
    #  Tuples
    # ──────────────────────────────────────────────────────────────────

    def _tuples(self, n: int, xss, name: str) -> RandomIterable:
        if len(xss) == 1:
            return chunk_infinite(n, xss[0])
        if len(xss) == n:
            return zip_infinite(*xss)
        raise TypeError(f'{name}() takes 1 or {n} sources ({len(xss)} given)')

    def pairs(self, *xss: Iterable) -> RandomIterable:
        """Pairs from one source (consecutive elements) or from two sources (zipped)."""
        return self._tuples(2, xss, 'pairs')

    def triples(self, *xss: Iterable) -> RandomIterable:
        return self._tuples(3, xss, 'triples')

    def quadruples(self, *xss: Iterable) -> RandomIterable:
        return self._tuples(4, xss, 'quadruples')

    def quintuples(self, *xss: Iterable) -> RandomIterable:
        return self._tuples(5, xss, 'quintuples')

    def sextuples(self, *xss: Iterable) -> RandomIterable:
        return self._tuples(6, xss, 'sextuples')

    def septuples(self, *xss: Iterable) -> RandomIterable:
        return self._tuples(7, xss, 'septuples')

    def distinct_tuples(self, size: int, xs: Iterable) -> RandomIterable:
        """Tuples of ``size`` distinct elements, in the order first drawn."""
        return distinct_chunk_infinite(size, xs)

    def bag_tuples(self, size: int, xs: Iterable) -> RandomIterable:
        """Sorted tuples of ``size`` elements."""
        return chunk_infinite(size, xs).map(lambda t: tuple(sorted(t)))

    def subset_tuples(self, size: int, xs: Iterable) -> RandomIterable:
        """Sorted tuples of ``size`` distinct elements."""
        return distinct_chunk_infinite(size, xs).map(lambda t: tuple(sorted(t)))

    # ──────────────────────────────────────────────────────────────────
    #  Lists, bags and subsets
    # ──────────────────────────────────────────────────────────────────

    def _sized(self, sizes: RandomIterable, xs: Iterable) -> RandomIterable[List]:
        def gen():
            source = iter(xs)
            for size in sizes:
                yield [pull(source, 'xs') for _ in range(size)]

        return RandomIterable(gen)

    def lists_of_size(self, size: int, xs: Iterable) -> RandomIterable[List]:
        """Lists of exactly ``size`` consecutive elements of ``xs``."""
        return chunk_infinite(size, xs).map(list)

    def lists(self, xs: Iterable) -> RandomIterable[List]:
        """Lists whose length is geometric with mean ``scale``."""
        return self._sized(self.natural_integers_geometric(), xs)

    def lists_at_least(self, min_size: int, xs: Iterable) -> RandomIterable[List]:
        """Lists of at least ``min_size`` elements, with mean length ``scale``.

        Raises
        ------
        ConfigurationError
            If ``min_size`` is negative.
        ScaleError
            If ``scale <= min_size``.
        """
        _check_size(min_size, 'min_size')
        return self._sized(self.range_up_geometric(min_size), xs)

    def distinct_lists_of_size(self, size: int, xs: Iterable) -> RandomIterable[List]:
        """Lists of ``size`` distinct elements; ``xs`` must supply enough distinct values."""
        return distinct_chunk_infinite(size, xs).map(list)

    def distinct_lists(self, xs: Iterable) -> RandomIterable[List]:
        """The distinct elements among a geometric number of draws, in first-seen order."""
        sizes = self.natural_integers_geometric()

        def gen():
            source = iter(xs)
            for size in sizes:
                yield list(dict.fromkeys(pull(source, 'xs') for _ in range(size)))

        return RandomIterable(gen)

    def distinct_lists_at_least(self, min_size: int, xs: Iterable) -> RandomIterable[List]:
        """Distinct-element lists of at least ``min_size`` elements.

        Draws until ``min_size`` distinct values are collected, then adds
        ``size - min_size`` further draws, where ``size`` is drawn from
        :meth:`range_up_geometric`.
        """
        _check_size(min_size, 'min_size')
        sizes = self.range_up_geometric(min_size)

        def gen():
            source = iter(xs)
            for size in sizes:
                seen = {}
                while len(seen) < min_size:
                    seen.setdefault(pull(source, 'xs'), None)
                for _ in range(size - min_size):
                    seen.setdefault(pull(source, 'xs'), None)
                yield list(seen)

        return RandomIterable(gen)

    def bags_of_size(self, size: int, xs: Iterable) -> RandomIterable[List]:
        return chunk_infinite(size, xs).map(sorted)

    def bags(self, xs: Iterable) -> RandomIterable[List]:
        """Sorted lists with geometric length."""
        return self.lists(xs).map(sorted)

    def bags_at_least(self, min_size: int, xs: Iterable) -> RandomIterable[List]:
        return self.lists_at_least(min_size, xs).map(sorted)

    def subsets_of_size(self, size: int, xs: Iterable) -> RandomIterable[List]:
        return distinct_chunk_infinite(size, xs).map(sorted)

    def subsets(self, xs: Iterable) -> RandomIterable[List]:
        """Sorted lists of distinct elements with geometric length."""
        return self.distinct_lists(xs).map(sorted)

    def subsets_at_least(self, min_size: int, xs: Iterable) -> RandomIterable[List]:
        return self.distinct_lists_at_least(min_size, xs).map(sorted)

    # ──────────────────────────────────────────────────────────────────
    #  Strings
    # ──────────────────────────────────────────────────────────────────

    def _alphabet(self, chars):
        return self.characters() if chars is None else self.uniform_sample(chars)

    def strings_of_size(self, size: int, chars: str = None) -> RandomIterable[str]:
        """Strings of ``size`` characters drawn uniformly from ``chars`` (any character by default).

        Raises
        ------
        EmptySourceError
            If ``chars`` is empty and ``size`` is not 0.
        """
        _check_size(size)
        if chars is not None and len(chars) == 0:
            if size == 0:
                return repeat('')
            raise EmptySourceError(f'if chars is empty, size must be 0. Invalid size: {size}')
        return chunk_infinite(size, self._alphabet(chars)).map(''.join)

    def strings(self, chars: str = None) -> RandomIterable[str]:
        """Strings of geometric length drawn from ``chars`` (any character by default)."""
        if chars is not None and len(chars) == 0:
            return repeat('')
        return self.lists(self._alphabet(chars)).map(''.join)

    def strings_at_least(self, min_size: int, chars: str = None) -> RandomIterable[str]:
        """Strings of at least ``min_size`` characters drawn from ``chars``."""
        _check_size(min_size, 'min_size')
        if chars is not None and len(chars) == 0:
            if min_size == 0:
                return repeat('')
            raise EmptySourceError(f'if chars is empty, min_size must be 0. Invalid min_size: {min_size}')
        return self.lists_at_least(min_size, self._alphabet(chars)).map(''.join)

    # ──────────────────────────────────────────────────────────────────
    #  Choices between sources
    # ──────────────────────────────────────────────────────────────────

    def eithers(self, as_: Iterable, bs: Iterable) -> RandomIterable[Either]:
        """Values from ``as_`` or ``bs``; ``bs`` is chosen with probability ``1 / (scale + 1)``.

        Raises
        ------
        ScaleError
            If ``scale < 1``.
        """
        if self._scale < 1:
            raise ScaleError(f'this must have a positive scale. Invalid scale: {self._scale}')
        indices = self.range(0, self._scale)

        def gen():
            as_it = iter(as_)
            bs_it = iter(bs)
            for index in indices:
                if index == 0:
                    yield Either.of_b(pull(bs_it, 'bs'))
                else:
                    yield Either.of_a(pull(as_it, 'as_'))

        return RandomIterable(gen)

    def choose(self, xss: Sequence[Iterable]) -> RandomIterable:
        """Values from a uniformly chosen source at each step.

        Raises
        ------
        EmptySourceError
            If ``xss`` is empty.
        """
        sources = list(xss)
        if not sources:
            raise EmptySourceError('xss cannot be empty')
        indices = self.uniform_below(len(sources))

        def gen():
            its = [iter(xs) for xs in sources]
            for index in indices:
                yield pull(its[index], 'chosen source')

        return RandomIterable(gen)

    def cartesian_product(self, xss: Sequence[Sequence]) -> RandomIterable[List]:
        """Lists holding one uniformly chosen element of each list in ``xss``.

        Raises
        ------
        EmptySourceError
            If ``xss`` or any of its lists is empty.
        """
        if len(xss) == 0:
            raise EmptySourceError('xss cannot be empty')
        samplers = [self.uniform_sample(xs) for xs in xss]
        return zip_infinite(*samplers).map(list)

    # ──────────────────────────────────────────────────────────────────
    #  Lists with guaranteed content
    # ──────────────────────────────────────────────────────────────────

    def lists_with_element(self, x, xs: Iterable) -> RandomIterable[List]:
        """Lists containing ``x``, surrounded by geometric-length runs of ``xs``.

        The run before ``x`` never contains ``x``, so the first occurrence of
        ``x`` has a well-defined position.

        Raises
        ------
        ScaleError
            If ``scale < 3``.
        """
        if self._scale < 3:
            raise ScaleError(f'this must have a scale of at least 3. Invalid scale: {self._scale}')
        left_scale = (self._scale - 1) // 2
        right_scale = left_scale if self._scale & 1 else left_scale + 1
        lefts = self.with_scale(left_scale).lists(filter_infinite(lambda y: y != x, xs))
        rights = self.with_scale(right_scale).lists(xs)
        return zip_infinite(lefts, rights).map(lambda pair: pair[0] + [x] + pair[1])

    def subsets_with_element(self, x, xs: Iterable) -> RandomIterable[List]:
        """Sorted distinct-element lists containing ``x``.

        Raises
        ------
        ScaleError
            If ``scale < 2``.
        """
        if self._scale < 2:
            raise ScaleError(f'this must have a scale of at least 2. Invalid scale: {self._scale}')
        others = self.with_scale(self._scale - 1).subsets(filter_infinite(lambda y: y != x, xs))
        return others.map(lambda ys: sorted([x] + ys))

    def lists_with_sublists(self, sublists: Iterable[Sequence], xs: Iterable) -> RandomIterable[List]:
        """Lists made of a run of ``xs``, one element of ``sublists`` and another run of ``xs``.

        Raises
        ------
        ScaleError
            If ``scale < 2``.
        """
        if self._scale < 2:
            raise ScaleError(f'this must have a scale of at least 2. Invalid scale: {self._scale}')
        left_scale = self._scale // 2
        right_scale = left_scale if self._scale & 1 == 0 else left_scale + 1
        lefts = self.with_scale(left_scale).lists(xs)
        rights = self.with_scale(right_scale).lists(xs)
        return zip_infinite(lefts, sublists, rights).map(lambda t: t[0] + list(t[1]) + t[2])


def _prefixed(prefix: List, prefix_size: int, xs: Iterable) -> RandomIterable:
    return RandomIterable(lambda: itertools.chain(prefix, itertools.islice(xs, prefix_size, None)))
