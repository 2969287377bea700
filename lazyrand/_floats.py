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
Floating-point generators.

Two notions of uniformity are offered for both IEEE-754 formats:

* **Bit-pattern uniform** (``floats``, ``float_range*``): every representable
  value is equally likely. Half of all values lie in ``(-2, 2)``, and
  infinities and both zeros are reachable.
* **Real uniform** (``*_uniform``): values are drawn uniformly from the real
  line between the bounds, in units of the smallest subnormal, and rounded
  down or up to a representable neighbour at random. Infinities and
  negative zero are never produced.

Single precision values are ``numpy.float32``; double precision values are
Python ``float``.
"""

import math

from ._error import InvalidRangeError, NotFiniteError
from ._float_utils import (
    abs_negative_zeros,
    as_format,
    from_bits,
    from_ordered_representation,
    is_negative_zero,
    is_positive_zero,
    round_scaled,
    scale_up,
    scaled_up_max,
    to_ordered_representation,
)
from ._sequence import RandomIterable, filter_infinite, repeat, zip_infinite
from ._width import DOUBLE, FloatFormat

__all__ = [
    'FloatMixin',
]


def _check_order(a, b):
    if math.isnan(a) or math.isnan(b):
        raise NotFiniteError(f'bounds cannot be NaN. a: {a}, b: {b}')
    if not (is_positive_zero(a) and is_negative_zero(b)) and a > b:
        raise InvalidRangeError(f'a must be less than or equal to b. a: {a}, b: {b}')


def _check_finite(x, label: str):
    if not math.isfinite(x):
        raise NotFiniteError(f'{label} must be finite. Invalid {label}: {x}')


class FloatMixin:
    """Generators over single and double precision values."""

    # ──────────────────────────────────────────────────────────────────
    #  Bit-pattern uniform
    # ──────────────────────────────────────────────────────────────────

    def floats(self, precision: FloatFormat = DOUBLE) -> RandomIterable:
        """Values with uniformly random bit patterns.

        NaN bit patterns other than the canonical one are rejected, so NaN
        appears once in the value space, like any other value.

        Parameters
        ----------
        precision : FloatFormat, optional
            ``SINGLE`` (one draw per candidate) or ``DOUBLE`` (two draws).
            Defaults to ``DOUBLE``.

        Examples
        --------
        .. code-block:: python

            >>> import lazyrand
            >>> rp = lazyrand.RandomProvider.example()
            >>> xs = rp.floats(lazyrand.SINGLE).take(3)
            >>> type(xs[0]).__name__
            'float32'
        """
        mask = (1 << precision.bits) - 1
        bits_source = self.integers() if precision.bits == 32 else self.longs()
        canonical_nan = precision.canonical_nan_bits

        def gen():
            for word in bits_source:
                bits = word & mask
                x = from_bits(bits, precision)
                if not math.isnan(x) or bits == canonical_nan:
                    yield x

        return RandomIterable(gen)

    def positive_floats(self, precision: FloatFormat = DOUBLE) -> RandomIterable:
        """Positive values (including positive infinity) with uniformly random bit patterns."""
        return filter_infinite(lambda x: x > 0, self.floats(precision))

    def negative_floats(self, precision: FloatFormat = DOUBLE) -> RandomIterable:
        """Negative values (including negative infinity) with uniformly random bit patterns."""
        return filter_infinite(lambda x: x < 0, self.floats(precision))

    def nonzero_floats(self, precision: FloatFormat = DOUBLE) -> RandomIterable:
        """Nonzero values with uniformly random bit patterns; NaN is included."""
        return filter_infinite(lambda x: x != 0, self.floats(precision))

    def float_range_up(self, a, precision: FloatFormat = DOUBLE) -> RandomIterable:
        """Values greater than or equal to ``a``, uniform over bit patterns.

        Positive infinity is always reachable. If ``a`` is not positive,
        both zeros are reachable.

        Raises
        ------
        NotFiniteError
            If ``a`` is NaN.
        InvalidRangeError
            If ``a`` is not representable in ``precision``.
        """
        a = as_format(a, precision)
        oa = to_ordered_representation(a, precision)
        top = precision.positive_finite_count + 1
        if oa <= 0:
            return self._ordered_range(oa - 1, top, precision, negative_zero_slot=oa - 1)
        return self._ordered_range(oa, top, precision)

    def float_range_down(self, a, precision: FloatFormat = DOUBLE) -> RandomIterable:
        """Values less than or equal to ``a``; the reflection of :meth:`float_range_up`."""
        a = as_format(a, precision)
        return self.float_range_up(-a, precision).map(lambda x: -x)

    def float_range(self, a, b, precision: FloatFormat = DOUBLE) -> RandomIterable:
        """Values in ``[a, b]``, uniform over bit patterns.

        ``(+0.0, -0.0)`` is accepted as a range. Equal zero bounds yield
        ``+0.0`` and ``-0.0`` with equal probability.

        Raises
        ------
        NotFiniteError
            If a bound is NaN.
        InvalidRangeError
            If ``a > b`` or a bound is not representable in ``precision``.
        """
        a = as_format(a, precision)
        b = as_format(b, precision)
        _check_order(a, b)
        if a == b:
            if a == 0:
                return self.uniform_sample([as_format(0.0, precision), as_format(-0.0, precision)])
            return repeat(a)
        oa = to_ordered_representation(a, precision)
        ob = to_ordered_representation(b, precision)
        if oa <= 0 <= ob:
            return self._ordered_range(oa - 1, ob, precision, negative_zero_slot=oa - 1)
        return self._ordered_range(oa, ob, precision)

    def _ordered_range(self, lo, hi, precision: FloatFormat, negative_zero_slot=None) -> RandomIterable:
        negative_zero = as_format(-0.0, precision)

        def convert(n):
            if n == negative_zero_slot:
                return negative_zero
            return from_ordered_representation(n, precision)

        return self.range(lo, hi, precision.ordered_width).map(convert)

    # ──────────────────────────────────────────────────────────────────
    #  Real uniform
    # ──────────────────────────────────────────────────────────────────

    def _rounded(self, scaled: RandomIterable, precision: FloatFormat) -> RandomIterable:
        def pick(pair):
            floor, ceiling = round_scaled(pair[0], precision)
            return floor if pair[1] else ceiling

        return zip_infinite(scaled, self.booleans()).map(pick)

    def floats_uniform(self, precision: FloatFormat = DOUBLE) -> RandomIterable:
        """Finite values drawn uniformly from the real interval between the extreme finite values."""
        limit = scaled_up_max(precision)
        return self._rounded(self.big_range(-limit, limit), precision)

    def positive_floats_uniform(self, precision: FloatFormat = DOUBLE) -> RandomIterable:
        """Positive finite values drawn uniformly from the real line."""
        return self._rounded(self.big_range(1, scaled_up_max(precision)), precision)

    def negative_floats_uniform(self, precision: FloatFormat = DOUBLE) -> RandomIterable:
        """Negative finite values drawn uniformly from the real line."""
        return self.positive_floats_uniform(precision).map(lambda x: -x)

    def nonzero_floats_uniform(self, precision: FloatFormat = DOUBLE) -> RandomIterable:
        """Nonzero finite values drawn uniformly from the real line; the sign is uniform."""
        return zip_infinite(self.positive_floats_uniform(precision), self.booleans()).map(
            lambda pair: pair[0] if pair[1] else -pair[0]
        )

    def float_range_up_uniform(self, a, precision: FloatFormat = DOUBLE) -> RandomIterable:
        """Finite values greater than or equal to ``a``, uniform on the real line.

        Raises
        ------
        NotFiniteError
            If ``a`` is not finite.
        """
        _check_finite(a, 'a')
        a = as_format(a, precision)
        return self._rounded(self.big_range(scale_up(a, precision), scaled_up_max(precision)), precision)

    def float_range_down_uniform(self, a, precision: FloatFormat = DOUBLE) -> RandomIterable:
        """Finite values less than or equal to ``a``, uniform on the real line."""
        _check_finite(a, 'a')
        a = as_format(a, precision)
        return self.float_range_up_uniform(-a, precision).map(lambda x: abs_negative_zeros(-x))

    def float_range_uniform(self, a, b, precision: FloatFormat = DOUBLE) -> RandomIterable:
        """Values in ``[a, b]``, uniform on the real line.

        Raises
        ------
        NotFiniteError
            If a bound is not finite.
        InvalidRangeError
            If ``a > b``, other than for ``(+0.0, -0.0)``.
        """
        _check_finite(a, 'a')
        _check_finite(b, 'b')
        a = as_format(a, precision)
        b = as_format(b, precision)
        _check_order(a, b)
        if a == b:
            return repeat(abs_negative_zeros(a))
        return self._rounded(self.big_range(scale_up(a, precision), scale_up(b, precision)), precision)
