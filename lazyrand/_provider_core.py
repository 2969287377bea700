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
Provider state and the bounded samplers every generator is built on.

A provider owns an immutable seed, a handle to a mutable :class:`IsaacPRNG`
and three scales. Shallow copies (including every ``with_*_scale``
derivative) share the handle, so they advance one common stream. Deep copies
clone it.

Uniform sampling below a bound ``n`` masks raw draws to ``ceil(log2(n))``
bits and rejects values ``>= n``. Because ``n > 2**(k - 1)``, at least half of
the masked values are accepted, so a value costs fewer than two draws on
average.
"""

import decimal
from collections.abc import Mapping
from typing import AbstractSet, Optional, Sequence, Tuple

from ._error import ConfigurationError, EmptySourceError
from ._isaac import SIZE, IsaacPRNG
from ._sequence import RandomIterable, filter_infinite, repeat
from .config import (
    DEFAULT_SCALE,
    DEFAULT_SECONDARY_SCALE,
    DEFAULT_TERTIARY_SCALE,
    get_default_scales,
)

__all__ = [
    'INT_MAX',
    'LONG_MAX',
    'ProviderCore',
]

INT_MAX = (1 << 31) - 1
LONG_MAX = (1 << 63) - 1

_ROUNDING_MODES = (
    decimal.ROUND_UP,
    decimal.ROUND_DOWN,
    decimal.ROUND_CEILING,
    decimal.ROUND_FLOOR,
    decimal.ROUND_HALF_UP,
    decimal.ROUND_HALF_DOWN,
    decimal.ROUND_HALF_EVEN,
    decimal.ROUND_05UP,
)


def _ceiling_log2(n: int) -> int:
    return (n - 1).bit_length()


class ProviderCore:
    """Seeded state, scales and primitive samplers of a random provider."""

    def __init__(self, seed: Optional[Sequence[int]] = None):
        if seed is None:
            bootstrap = IsaacPRNG()
            seed = [bootstrap.next_int() for _ in range(SIZE)]
            scales = get_default_scales()
        else:
            # A seed must reproduce the same values regardless of user config.
            scales = (DEFAULT_SCALE, DEFAULT_SECONDARY_SCALE, DEFAULT_TERTIARY_SCALE)
        prng = IsaacPRNG(seed)
        self._seed = tuple(int(word) for word in seed)
        self._prng = prng
        self._scale, self._secondary_scale, self._tertiary_scale = scales

    @classmethod
    def example(cls):
        """Return a provider with a fixed seed, for examples and regression tests."""
        source = IsaacPRNG.example()
        return cls([source.next_int() for _ in range(SIZE)])

    # ──────────────────────────────────────────────────────────────────
    #  State and configuration
    # ──────────────────────────────────────────────────────────────────

    @property
    def seed(self) -> Tuple[int, ...]:
        return self._seed

    @property
    def scale(self) -> int:
        return self._scale

    @property
    def secondary_scale(self) -> int:
        return self._secondary_scale

    @property
    def tertiary_scale(self) -> int:
        return self._tertiary_scale

    def _derive(self, prng: IsaacPRNG, **scales):
        other = object.__new__(self.__class__)
        other._seed = self._seed
        other._prng = prng
        other._scale = scales.get('scale', self._scale)
        other._secondary_scale = scales.get('secondary_scale', self._secondary_scale)
        other._tertiary_scale = scales.get('tertiary_scale', self._tertiary_scale)
        return other

    def copy(self):
        """Return a provider sharing this provider's bit source."""
        return self._derive(self._prng)

    def deep_copy(self):
        """Return a provider with an independent clone of this provider's bit source."""
        return self._derive(self._prng.copy())

    def with_scale(self, scale: int):
        """Return a provider sharing the bit source, with ``scale`` replaced."""
        return self._derive(self._prng, scale=scale)

    def with_secondary_scale(self, secondary_scale: int):
        """Return a provider sharing the bit source, with ``secondary_scale`` replaced."""
        return self._derive(self._prng, secondary_scale=secondary_scale)

    def with_tertiary_scale(self, tertiary_scale: int):
        """Return a provider sharing the bit source, with ``tertiary_scale`` replaced."""
        return self._derive(self._prng, tertiary_scale=tertiary_scale)

    def reset(self):
        """Restore the bit source to its initial state.

        The source is shared, so every shallow copy observes the reset.
        """
        self._prng.set_seed(self._seed)

    def get_id(self) -> int:
        """Return a fingerprint of the current bit-source state."""
        return self._prng.get_id()

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, ProviderCore):
            return NotImplemented
        return (
            self._scale == other._scale
            and self._secondary_scale == other._secondary_scale
            and self._tertiary_scale == other._tertiary_scale
            and self._seed == other._seed
            and self._prng == other._prng
        )

    def __hash__(self):
        return hash((self._seed, self._prng, self._scale, self._secondary_scale, self._tertiary_scale))

    def __repr__(self):
        return (
            f'{self.__class__.__name__}[@{self.get_id()}, '
            f'{self._scale}, {self._secondary_scale}, {self._tertiary_scale}]'
        )

    # ──────────────────────────────────────────────────────────────────
    #  Raw draws
    # ──────────────────────────────────────────────────────────────────

    def _next_long(self) -> int:
        high = self._prng.next_int()
        low = self._prng.next_int()
        return (high << 32) | (low & 0xFFFFFFFF)

    def _next_big_pow2(self, bits: int) -> int:
        # Big-endian bytes, four per draw, least significant byte of a draw first.
        value = 0
        word = 0
        for i in range(bits // 8 + 1):
            if i % 4 == 0:
                word = self._prng.next_int()
            value = (value << 8) | (word & 0xFF)
            word >>= 8
        return value & ((1 << bits) - 1)

    def longs(self) -> RandomIterable[int]:
        """Signed 64-bit integers built from two draws, high word first."""

        def gen():
            while True:
                yield self._next_long()

        return RandomIterable(gen)

    def booleans(self) -> RandomIterable[bool]:
        """Uniform booleans from the low bit of each draw."""

        def gen():
            next_int = self._prng.next_int
            while True:
                yield (next_int() & 1) != 0

        return RandomIterable(gen)

    def _integers_pow2(self, bits: int) -> RandomIterable[int]:
        if not 0 <= bits <= 32:
            raise ConfigurationError(f'bits must be in [0, 32]. Invalid bits: {bits}')
        mask = (1 << bits) - 1

        def gen():
            next_int = self._prng.next_int
            while True:
                yield next_int() & mask

        return RandomIterable(gen)

    def _longs_pow2(self, bits: int) -> RandomIterable[int]:
        if not 0 <= bits <= 64:
            raise ConfigurationError(f'bits must be in [0, 64]. Invalid bits: {bits}')
        mask = (1 << bits) - 1

        def gen():
            while True:
                yield self._next_long() & mask

        return RandomIterable(gen)

    def _big_integers_pow2(self, bits: int) -> RandomIterable[int]:
        if bits < 0:
            raise ConfigurationError(f'bits cannot be negative. Invalid bits: {bits}')

        def gen():
            while True:
                yield self._next_big_pow2(bits)

        return RandomIterable(gen)

    # ──────────────────────────────────────────────────────────────────
    #  Bounded samplers
    # ──────────────────────────────────────────────────────────────────

    def uniform_below(self, n: int) -> RandomIterable[int]:
        """Uniform integers in ``[0, n)`` for ``1 <= n <= 2**31 - 1``.

        Parameters
        ----------
        n : int
            Exclusive upper bound.

        Returns
        -------
        RandomIterable of int
            ``n == 1`` gives a constant stream of 0 that consumes no draws.
            A power of two consumes exactly one draw per value.

        Raises
        ------
        ConfigurationError
            If ``n`` is not in ``[1, 2**31 - 1]``.
        """
        if not 1 <= n <= INT_MAX:
            raise ConfigurationError(f'n must be in [1, 2^31 - 1]. Invalid n: {n}')
        return self._bounded(n, self._integers_pow2)

    def uniform_below_long(self, n: int) -> RandomIterable[int]:
        """Uniform integers in ``[0, n)`` for ``1 <= n <= 2**63 - 1``, built from 64-bit draws."""
        if not 1 <= n <= LONG_MAX:
            raise ConfigurationError(f'n must be in [1, 2^63 - 1]. Invalid n: {n}')
        return self._bounded(n, self._longs_pow2)

    def uniform_below_big(self, n: int) -> RandomIterable[int]:
        """Uniform integers in ``[0, n)`` for any positive ``n``."""
        if n < 1:
            raise ConfigurationError(f'n must be positive. Invalid n: {n}')
        return self._bounded(n, self._big_integers_pow2)

    @staticmethod
    def _bounded(n, pow2):
        if n == 1:
            return repeat(0)
        bits = _ceiling_log2(n)
        if n & (n - 1) == 0:
            return pow2(bits)
        return filter_infinite(lambda i: i < n, pow2(bits))

    def uniform_sample(self, xs: Sequence) -> RandomIterable:
        """Uniformly chosen elements of ``xs`` (characters, for a string).

        ``xs`` must have a reproducible order, so sets and mappings are
        refused.

        Raises
        ------
        TypeError
            If ``xs`` is a set or a mapping.
        EmptySourceError
            If ``xs`` is empty.
        """
        if isinstance(xs, (AbstractSet, Mapping)):
            raise TypeError('xs must be a sequence. For sets, use sorted(xs).')
        items = xs if isinstance(xs, (str, list, tuple, range)) else list(xs)
        if len(items) == 0:
            raise EmptySourceError('cannot sample uniformly from an empty collection')
        return self.uniform_below(len(items)).map(items.__getitem__)

    def rounding_modes(self) -> RandomIterable[str]:
        """Uniformly chosen :mod:`decimal` rounding modes."""
        return self.uniform_sample(_ROUNDING_MODES)
