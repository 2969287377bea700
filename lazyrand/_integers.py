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
Fixed-width integer and character generators.

Every generator takes an :class:`IntegerWidth` trait (``INT`` by default).
Ranges add an offset to a uniform draw over the span, where the span is
sampled with the next wider bounded sampler so that it always fits.
"""

from ._error import DomainError, InvalidRangeError
from ._sequence import RandomIterable, filter_infinite, repeat
from ._width import CHAR, INT, IntegerWidth

__all__ = [
    'IntegerMixin',
]


def _check_signed(width: IntegerWidth):
    if not width.signed:
        raise DomainError(f'{width.name} is unsigned; use characters() or range() instead')


def _check_bound(a: int, width: IntegerWidth, label: str):
    if not width.contains(a):
        raise InvalidRangeError(
            f'{label} must be a {width.name} in [{width.min_value}, {width.max_value}]. Invalid {label}: {a}'
        )


class IntegerMixin:
    """Generators over fixed-width integers and characters."""

    def integers(self, width: IntegerWidth = INT) -> RandomIterable:
        """Uniform values over the whole width.

        Widths up to 32 bits truncate one draw; ``LONG`` uses two.

        Examples
        --------
        .. code-block:: python

            >>> import lazyrand
            >>> rp = lazyrand.RandomProvider.example()
            >>> all(-128 <= b < 128 for b in rp.integers(lazyrand.BYTE).take(100))
            True
        """
        if width.bits > 32:
            return self.longs().map(width.box)
        box = width.box
        wrap = width.wrap

        def gen():
            next_int = self._prng.next_int
            while True:
                yield box(wrap(next_int()))

        return RandomIterable(gen)

    def naturals(self, width: IntegerWidth = INT) -> RandomIterable[int]:
        """Uniform non-negative values of a signed width."""
        _check_signed(width)
        if width.bits > 32:
            return self._longs_pow2(width.bits - 1)
        return self._integers_pow2(width.bits - 1)

    def positives(self, width: IntegerWidth = INT) -> RandomIterable[int]:
        """Uniform positive values of a signed width."""
        return filter_infinite(lambda i: i > 0, self.naturals(width))

    def negatives(self, width: IntegerWidth = INT) -> RandomIterable[int]:
        """Uniform negative values of a signed width."""
        return self.naturals(width).map(lambda i: ~i)

    def nonzeros(self, width: IntegerWidth = INT) -> RandomIterable:
        """Uniform nonzero values over the whole width."""
        return filter_infinite(lambda i: width.unbox(i) != 0, self.integers(width))

    def ascii_characters(self) -> RandomIterable[str]:
        """Uniform characters with code points below 128."""
        return self._integers_pow2(7).map(chr)

    def characters(self) -> RandomIterable[str]:
        """Uniform UTF-16 code units, as one-character strings."""
        return self.integers(CHAR)

    def range_up(self, a, width: IntegerWidth = INT) -> RandomIterable:
        """Uniform values of the width greater than or equal to ``a``."""
        a = width.unbox(a)
        _check_bound(a, width, 'a')
        return self._span(a, width.max_value - a + 1, width)

    def range_down(self, a, width: IntegerWidth = INT) -> RandomIterable:
        """Uniform values of the width less than or equal to ``a``."""
        a = width.unbox(a)
        _check_bound(a, width, 'a')
        return self._span(width.min_value, a - width.min_value + 1, width)

    def range(self, a, b, width: IntegerWidth = INT) -> RandomIterable:
        """Uniform values in ``[a, b]``.

        Parameters
        ----------
        a, b : int or str
            Inclusive bounds; one-character strings for ``CHAR``.
        width : IntegerWidth, optional
            The integer type of the values. Defaults to ``INT``.

        Returns
        -------
        RandomIterable
            A constant stream when ``a == b``, consuming no draws.

        Raises
        ------
        InvalidRangeError
            If ``a > b`` or either bound lies outside the width.
        """
        a = width.unbox(a)
        b = width.unbox(b)
        _check_bound(a, width, 'a')
        _check_bound(b, width, 'b')
        if a > b:
            raise InvalidRangeError(f'a must be less than or equal to b. a: {a}, b: {b}')
        if a == b:
            return repeat(width.box(a))
        return self._span(a, b - a + 1, width)

    def _span(self, offset: int, n: int, width: IntegerWidth) -> RandomIterable:
        box = width.box
        return getattr(self, width.span_sampler)(n).map(lambda i: box(i + offset))
