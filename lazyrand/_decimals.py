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
Decimal generators.

A decimal is an unscaled integer with a scale (``unscaled * 10**-scale``).
``scale`` drives the bit length of the unscaled value and
``secondary_scale`` the decimal scale. Canonical generators produce every
value exactly once in its canonical representation; the non-canonical
ranges then pad the precision with a geometric number of zeros, so that the
same value also appears with other representations.
"""

from decimal import Decimal

from ._decimal_utils import (
    EXACT,
    canonicalize,
    ceiling_log10,
    check_finite,
    make_decimal,
    precision,
    set_precision,
    strip_trailing_zeros,
)
from ._error import InvalidRangeError, ScaleError
from ._sequence import RandomIterable, filter_infinite, repeat, zip_infinite

__all__ = [
    'DecimalMixin',
]


def _check_range_scales(provider):
    if provider._scale < 1:
        raise ScaleError(f'this must have a positive scale. Invalid scale: {provider._scale}')
    if provider._secondary_scale < 1:
        raise ScaleError(
            f'this must have a positive secondaryScale. Invalid secondaryScale: {provider._secondary_scale}'
        )


class DecimalMixin:
    """Generators over :class:`decimal.Decimal` values."""

    def _decimals_from(self, unscaled: RandomIterable) -> RandomIterable[Decimal]:
        scales = self.with_scale(self._secondary_scale).integers_geometric()
        return zip_infinite(unscaled, scales).map(lambda pair: make_decimal(pair[0], pair[1]))

    def positive_decimals(self) -> RandomIterable[Decimal]:
        """Positive decimals with a geometric unscaled bit length and a geometric signed scale.

        Raises
        ------
        ScaleError
            If ``scale < 2`` or ``secondary_scale < 1``.
        """
        return self._decimals_from(self.positive_big_integers())

    def negative_decimals(self) -> RandomIterable[Decimal]:
        return self._decimals_from(self.negative_big_integers())

    def nonzero_decimals(self) -> RandomIterable[Decimal]:
        return self._decimals_from(self.nonzero_big_integers())

    def decimals(self) -> RandomIterable[Decimal]:
        """Decimals of any sign and representation; zero appears with many scales."""
        return self._decimals_from(self.big_integers())

    def _canonical_unscaled(self, bits: int) -> int:
        while True:
            unscaled = self._with_top_bit(bits)
            if unscaled % 10 != 0:
                return unscaled

    def positive_canonical_decimals(self) -> RandomIterable[Decimal]:
        """Positive decimals in canonical form.

        The scale is drawn from ``natural_integers_geometric`` at
        ``secondary_scale``. A zero scale takes any positive integer; a
        positive scale redraws unscaled values until one is not divisible by
        ten.
        """
        positive_big_integers = self.positive_big_integers()
        bit_lengths = self.positive_integers_geometric()
        scales = self.with_scale(self._secondary_scale).natural_integers_geometric()

        def gen():
            integers_it = iter(positive_big_integers)
            lengths_it = iter(bit_lengths)
            for scale in scales:
                if scale == 0:
                    unscaled = next(integers_it)
                else:
                    unscaled = self._canonical_unscaled(next(lengths_it))
                yield make_decimal(unscaled, scale)

        return RandomIterable(gen)

    def negative_canonical_decimals(self) -> RandomIterable[Decimal]:
        return self.positive_canonical_decimals().map(EXACT.minus)

    def nonzero_canonical_decimals(self) -> RandomIterable[Decimal]:
        return zip_infinite(self.positive_canonical_decimals(), self.booleans()).map(
            lambda pair: pair[0] if pair[1] else EXACT.minus(pair[0])
        )

    def canonical_decimals(self) -> RandomIterable[Decimal]:
        """Decimals of any sign in canonical form."""
        signs = self.booleans()
        natural_big_integers = self.natural_big_integers()
        bit_lengths = self.positive_integers_geometric()
        scales = self.with_scale(self._secondary_scale).natural_integers_geometric()

        def gen():
            signs_it = iter(signs)
            integers_it = iter(natural_big_integers)
            lengths_it = iter(bit_lengths)
            for scale in scales:
                if scale == 0:
                    unscaled = next(integers_it)
                else:
                    unscaled = self._canonical_unscaled(next(lengths_it))
                yield make_decimal(unscaled if next(signs_it) else -unscaled, scale)

        return RandomIterable(gen)

    def _zero_to_power_of_ten_canonical(self, power: int) -> RandomIterable[Decimal]:
        # Canonical decimals in [0, 10**power]. Each normalized scale s keeps
        # its own digit sampler over [1, 10**s - 1].
        signs = self.booleans()
        normalized_scales = self.natural_integers_geometric()

        def gen():
            signs_it = iter(signs)
            digit_samplers = {}
            for normalized_scale in normalized_scales:
                if normalized_scale == 0:
                    yield make_decimal(1, -power) if next(signs_it) else make_decimal(0, 0)
                    continue
                digits_it = digit_samplers.get(normalized_scale)
                if digits_it is None:
                    digits_it = iter(self.big_range(1, 10 ** normalized_scale - 1))
                    digit_samplers[normalized_scale] = digits_it
                digits = next(digits_it)
                while digits % 10 == 0:
                    digits = next(digits_it)
                yield make_decimal(digits, normalized_scale - power)

        return RandomIterable(gen)

    def _uncanonicalize(self, canonical: RandomIterable[Decimal]) -> RandomIterable[Decimal]:
        zero_scales = self.integers_geometric()
        paddings = self.natural_integers_geometric()

        def gen():
            zero_scales_it = iter(zero_scales)
            paddings_it = iter(paddings)
            for d in canonical:
                if d == 0:
                    yield make_decimal(0, next(zero_scales_it))
                else:
                    d = strip_trailing_zeros(d)
                    yield set_precision(d, next(paddings_it) + precision(d))

        return RandomIterable(gen)

    def decimal_range_up_canonical(self, a) -> RandomIterable[Decimal]:
        """Canonical decimals greater than or equal to ``a``."""
        a = check_finite(a)
        non_negative = filter_infinite(lambda d: d >= 0, self.canonical_decimals())
        return non_negative.map(lambda c: canonicalize(EXACT.add(a, c)))

    def decimal_range_down_canonical(self, a) -> RandomIterable[Decimal]:
        """Canonical decimals less than or equal to ``a``."""
        a = check_finite(a)
        return self.decimal_range_up_canonical(EXACT.minus(a)).map(EXACT.minus)

    def decimal_range_canonical(self, a, b) -> RandomIterable[Decimal]:
        """Canonical decimals in ``[a, b]``.

        Raises
        ------
        ScaleError
            If ``scale < 1`` or ``secondary_scale < 1``.
        InvalidRangeError
            If ``a > b``.
        """
        _check_range_scales(self)
        a = check_finite(a)
        b = check_finite(b)
        if a > b:
            raise InvalidRangeError(f'a must be less than or equal to b. a: {a}, b: {b}')
        if a == b:
            return repeat(canonicalize(a))
        difference = canonicalize(EXACT.subtract(b, a))
        offsets = self.with_scale(self._secondary_scale)._zero_to_power_of_ten_canonical(
            ceiling_log10(difference)
        )
        return filter_infinite(lambda d: d <= difference, offsets).map(lambda c: canonicalize(EXACT.add(a, c)))

    def decimal_range_up(self, a) -> RandomIterable[Decimal]:
        """Decimals greater than or equal to ``a``, in canonical and padded representations."""
        return self.with_scale(self._secondary_scale)._uncanonicalize(self.decimal_range_up_canonical(a))

    def decimal_range_down(self, a) -> RandomIterable[Decimal]:
        """Decimals less than or equal to ``a``; the reflection of :meth:`decimal_range_up`."""
        a = check_finite(a)
        return self.decimal_range_up(EXACT.minus(a)).map(EXACT.minus)

    def decimal_range(self, a, b) -> RandomIterable[Decimal]:
        """Decimals in ``[a, b]``, in canonical and padded representations.

        Raises
        ------
        ScaleError
            If ``scale < 1`` or ``secondary_scale < 1``.
        InvalidRangeError
            If ``a > b``.
        """
        _check_range_scales(self)
        a = check_finite(a)
        b = check_finite(b)
        if a > b:
            raise InvalidRangeError(f'a must be less than or equal to b. a: {a}, b: {b}')
        return self.with_scale(self._secondary_scale)._uncanonicalize(self.decimal_range_canonical(a, b))
