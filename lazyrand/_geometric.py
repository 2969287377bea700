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
Geometric distribution engine.

The provider's ``scale`` is the mean of every generator here. A positive
geometric value is the number of draws from ``uniform_below(scale)`` up to
and including the first 0, so each draw succeeds with probability
``1 / scale``. Other variants are shifts, reflections and sign
attachments of that count. Counts saturate at ``2**31 - 1``.
"""

from ._error import DomainError, ScaleError
from ._provider_core import INT_MAX
from ._sequence import RandomIterable, filter_infinite, zip_infinite

__all__ = [
    'GeometricMixin',
]


def _with_sign(pair):
    value, positive = pair
    return value if positive else -value


class GeometricMixin:
    """Geometrically distributed integers."""

    def positive_integers_geometric(self) -> RandomIterable[int]:
        """Positive integers with mean ``scale``.

        Raises
        ------
        ScaleError
            If ``scale < 2``.
        """
        if self._scale < 2:
            raise ScaleError(f'this must have a scale of at least 2. Invalid scale: {self._scale}')
        bounded = self.uniform_below(self._scale)

        def gen():
            it = iter(bounded)
            while True:
                count = 1
                while next(it) != 0 and count < INT_MAX:
                    count += 1
                yield count

        return RandomIterable(gen)

    def negative_integers_geometric(self) -> RandomIterable[int]:
        """Negative integers with mean ``-scale``."""
        return self.positive_integers_geometric().map(lambda i: -i)

    def natural_integers_geometric(self) -> RandomIterable[int]:
        """Non-negative integers with mean ``scale``.

        Raises
        ------
        ScaleError
            If ``scale < 1`` or ``scale == 2**31 - 1``.
        """
        if self._scale < 1:
            raise ScaleError(f'this must have a positive scale. Invalid scale: {self._scale}')
        if self._scale == INT_MAX:
            raise ScaleError(f'this cannot have a scale of {INT_MAX}')
        return self.with_scale(self._scale + 1).positive_integers_geometric().map(lambda i: i - 1)

    def nonzero_integers_geometric(self) -> RandomIterable[int]:
        """Nonzero integers whose absolute value has mean ``scale``; the sign is uniform."""
        return zip_infinite(self.positive_integers_geometric(), self.booleans()).map(_with_sign)

    def integers_geometric(self) -> RandomIterable[int]:
        """Integers whose absolute value has mean ``scale``; the sign is uniform."""
        return zip_infinite(self.natural_integers_geometric(), self.booleans()).map(_with_sign)

    def natural_integers_geometric_ratio(self, numerator: int, denominator: int) -> RandomIterable[int]:
        """Non-negative integers with mean ``numerator / denominator``.

        Each value counts the draws from ``uniform_below(numerator +
        denominator)`` that land on or above ``denominator`` before one
        lands below it.

        Raises
        ------
        DomainError
            If either argument is not positive or their sum exceeds
            ``2**31 - 1``.
        """
        if numerator < 1:
            raise DomainError(f'numerator must be positive. Invalid numerator: {numerator}')
        if denominator < 1:
            raise DomainError(f'denominator must be positive. Invalid denominator: {denominator}')
        total = numerator + denominator
        if total > INT_MAX:
            raise DomainError(
                f'the sum of numerator and denominator must be at most {INT_MAX}. '
                f'numerator: {numerator}, denominator: {denominator}'
            )
        bounded = self.uniform_below(total)

        def gen():
            it = iter(bounded)
            while True:
                count = 0
                while next(it) >= denominator and count < INT_MAX:
                    count += 1
                yield count

        return RandomIterable(gen)

    def integers_geometric_ratio(self, numerator: int, denominator: int) -> RandomIterable[int]:
        """Integers whose absolute value has mean ``numerator / denominator``; the sign is uniform."""
        naturals = self.natural_integers_geometric_ratio(numerator, denominator)
        return zip_infinite(naturals, self.booleans()).map(_with_sign)

    def range_up_geometric(self, a: int) -> RandomIterable[int]:
        """Integers greater than or equal to ``a`` with mean ``scale``.

        Raises
        ------
        ScaleError
            If ``scale <= a``, or ``a < 1`` and ``scale >= 2**31 - 1 + a``.
        """
        if self._scale <= a:
            raise ScaleError(f'this must have a scale greater than a, which is {a}. Invalid scale: {self._scale}')
        if a < 1 and self._scale >= INT_MAX + a:
            raise ScaleError(
                f'if a is less than 1, scale must be less than {INT_MAX} + a. a: {a}, scale: {self._scale}'
            )
        shifted = self.with_scale(self._scale - a + 1).positive_integers_geometric().map(lambda i: i + a - 1)
        return filter_infinite(lambda j: a <= j <= INT_MAX, shifted)

    def range_down_geometric(self, a: int) -> RandomIterable[int]:
        """Integers less than or equal to ``a`` with mean ``scale``.

        Raises
        ------
        ScaleError
            If ``scale >= a``, or ``a >= 0`` and ``scale <= a - (2**31 - 1)``.
        """
        if self._scale >= a:
            raise ScaleError(f'this must have a scale less than a, which is {a}. Invalid scale: {self._scale}')
        if a >= 0 and self._scale <= a - INT_MAX:
            raise ScaleError(
                f'if a is non-negative, scale must be greater than a - {INT_MAX}. a: {a}, scale: {self._scale}'
            )
        shifted = self.with_scale(a - self._scale + 1).positive_integers_geometric().map(lambda i: a - i + 1)
        return filter_infinite(lambda j: -INT_MAX - 1 <= j <= a, shifted)
