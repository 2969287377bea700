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
Arbitrary-precision integer generators.

Unbounded generators draw a bit length from a geometric distribution with
mean ``scale`` and then a uniform value of exactly that bit length, so
``scale`` controls the typical magnitude.
"""

from ._error import InvalidRangeError, ScaleError
from ._provider_core import INT_MAX
from ._sequence import RandomIterable, repeat, zip_infinite

__all__ = [
    'BigIntegerMixin',
]


class BigIntegerMixin:
    """Generators over Python ``int`` values of unbounded size."""

    def _with_top_bit(self, bits: int) -> int:
        return self._next_big_pow2(bits) | (1 << (bits - 1))

    def positive_big_integers(self) -> RandomIterable[int]:
        """Positive integers whose bit length has mean ``scale``.

        Raises
        ------
        ScaleError
            If ``scale < 2``.
        """
        return self.positive_integers_geometric().map(self._with_top_bit)

    def negative_big_integers(self) -> RandomIterable[int]:
        """Negative integers whose absolute bit length has mean ``scale``."""
        return self.positive_big_integers().map(lambda i: -i)

    def natural_big_integers(self) -> RandomIterable[int]:
        """Non-negative integers whose bit length has mean ``scale``; 0 has bit length 0."""
        return self.natural_integers_geometric().map(lambda bits: self._with_top_bit(bits) if bits else 0)

    def nonzero_big_integers(self) -> RandomIterable[int]:
        """Nonzero integers whose absolute bit length has mean ``scale``; the sign is uniform."""
        return zip_infinite(self.positive_big_integers(), self.booleans()).map(
            lambda pair: pair[0] if pair[1] else -pair[0]
        )

    def big_integers(self) -> RandomIterable[int]:
        """Integers whose absolute bit length has mean ``scale``; the sign is uniform."""
        return zip_infinite(self.natural_big_integers(), self.booleans()).map(
            lambda pair: pair[0] if pair[1] else -pair[0]
        )

    def big_range_up(self, a: int) -> RandomIterable[int]:
        """Integers greater than or equal to ``a``.

        A bit length is drawn geometrically with mean ``scale``, starting from
        the smallest bit length admissible for the bound. Values whose bit
        length differs from ``|a|``'s are drawn freely; at ``|a|``'s bit
        length the value is drawn uniformly from the part of that bit length
        that lies above ``a``.

        Raises
        ------
        ScaleError
            If ``scale`` does not exceed the minimum bit length (0 for a
            negative ``a``, else ``a.bit_length()``), or the minimum bit
            length is 0 and ``scale == 2**31 - 1``.
        """
        min_bit_length = 0 if a < 0 else a.bit_length()
        if self._scale <= min_bit_length:
            raise ScaleError(
                f'this must have a scale greater than minBitLength, which is {min_bit_length}. '
                f'Invalid scale: {self._scale}'
            )
        if min_bit_length == 0 and self._scale == INT_MAX:
            raise ScaleError(f'if minBitLength is 0, scale cannot be {INT_MAX}')
        abs_bit_length = abs(a).bit_length()
        bit_lengths = self.range_up_geometric(min_bit_length)
        offsets = self.uniform_below_big(1 - a if a < 0 else (1 << abs_bit_length) - a)
        # Offsets below half map to the positive values of |a|'s bit length,
        # the rest to the negative ones down to a.
        half = 1 << (abs_bit_length - 1) if abs_bit_length else 0

        def gen():
            lengths = iter(bit_lengths)
            offset_it = iter(offsets)
            while True:
                bits = next(lengths)
                if bits != abs_bit_length:
                    if bits == 0:
                        yield 0
                        continue
                    i = self._next_big_pow2(bits)
                    if not i >> (bits - 1):
                        i |= 1 << (bits - 1)
                        if bits < abs_bit_length and a < 0:
                            i = -i
                    yield i
                elif a >= 0:
                    yield next(offset_it) + a
                else:
                    x = next(offset_it)
                    yield x + half if x < half else -x

        return RandomIterable(gen)

    def big_range_down(self, a: int) -> RandomIterable[int]:
        """Integers less than or equal to ``a``; the reflection of :meth:`big_range_up`."""
        return self.big_range_up(-a).map(lambda i: -i)

    def big_range(self, a: int, b: int) -> RandomIterable[int]:
        """Uniform integers in ``[a, b]``.

        Raises
        ------
        InvalidRangeError
            If ``a > b``.
        """
        if a > b:
            raise InvalidRangeError(f'a must be less than or equal to b. a: {a}, b: {b}')
        if a == b:
            return repeat(a)
        return self.uniform_below_big(b - a + 1).map(lambda i: i + a)
