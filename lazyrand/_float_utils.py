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
Bit-level helpers for IEEE-754 values.

Single precision values are represented as ``numpy.float32`` and double
precision values as Python ``float``. Bit patterns are reinterpreted through
numpy array views, which preserve NaN payloads and the sign of zero.

The *ordered representation* maps the non-NaN values of a format onto a
contiguous range of integers: ``+x`` maps to its bit pattern, ``-x`` to the
negated bit pattern of ``|x|``, and both zeros to 0. Adjacent integers are
adjacent floats.
"""

import math
from typing import Tuple

import numpy as np

from ._error import InvalidRangeError, NotFiniteError
from ._width import DOUBLE, FloatFormat

__all__ = [
    'to_bits',
    'from_bits',
    'as_format',
    'is_negative_zero',
    'is_positive_zero',
    'abs_negative_zeros',
    'to_ordered_representation',
    'from_ordered_representation',
    'scaled_up_max',
    'scale_up',
    'round_scaled',
]


def to_bits(x, fmt: FloatFormat = DOUBLE) -> int:
    """Return the unsigned bit pattern of ``x`` in ``fmt``."""
    return int(np.array([x], dtype=fmt.dtype).view(fmt.int_dtype)[0])


def from_bits(bits: int, fmt: FloatFormat = DOUBLE):
    """Return the value of ``fmt`` whose unsigned bit pattern is ``bits``."""
    value = np.array([bits], dtype=fmt.int_dtype).view(fmt.dtype)[0]
    return value if fmt.bits == 32 else float(value)


def as_format(x, fmt: FloatFormat = DOUBLE):
    """Convert ``x`` to ``fmt`` exactly.

    Raises
    ------
    InvalidRangeError
        If ``x`` is not exactly representable in ``fmt``.
    """
    value = fmt.dtype(x)
    if not math.isnan(value) and float(value) != float(x):
        raise InvalidRangeError(f'{x!r} is not representable as a {fmt.name}')
    return value if fmt.bits == 32 else float(value)


def is_negative_zero(x) -> bool:
    return x == 0 and math.copysign(1.0, x) < 0


def is_positive_zero(x) -> bool:
    return x == 0 and math.copysign(1.0, x) > 0


def abs_negative_zeros(x):
    """Return ``x`` with a negative zero replaced by positive zero."""
    return x - x if is_negative_zero(x) else x


def to_ordered_representation(x, fmt: FloatFormat = DOUBLE) -> int:
    """Return the position of ``x`` in the ordered representation of ``fmt``.

    Raises
    ------
    NotFiniteError
        If ``x`` is NaN.
    """
    if math.isnan(x):
        raise NotFiniteError('NaN has no ordered representation')
    bits = to_bits(x, fmt)
    if bits & fmt.sign_bit:
        return -(bits & (fmt.sign_bit - 1))
    return bits


def from_ordered_representation(n: int, fmt: FloatFormat = DOUBLE):
    """Inverse of :func:`to_ordered_representation`; 0 maps to positive zero."""
    if abs(n) > fmt.positive_infinity_bits:
        raise InvalidRangeError(f'{n} is outside the ordered representation of {fmt.name}')
    if n >= 0:
        return from_bits(n, fmt)
    return from_bits(-n | fmt.sign_bit, fmt)


def scaled_up_max(fmt: FloatFormat = DOUBLE) -> int:
    """Return the largest finite value of ``fmt`` in units of the smallest subnormal."""
    largest_significand = (1 << fmt.precision) - 1
    largest_exponent = (1 << (fmt.exponent_bits - 1)) - fmt.precision
    return largest_significand << (largest_exponent - fmt.min_subnormal_exponent)


def scale_up(x, fmt: FloatFormat = DOUBLE) -> int:
    """Return the finite ``x`` as an exact multiple of the smallest subnormal of ``fmt``."""
    if not math.isfinite(x):
        raise NotFiniteError(f'{x!r} must be finite')
    numerator, denominator = float(x).as_integer_ratio()
    return numerator * ((1 << -fmt.min_subnormal_exponent) // denominator)


def round_scaled(i: int, fmt: FloatFormat = DOUBLE) -> Tuple:
    """Return the representable neighbours of ``i * 2**min_subnormal_exponent``.

    Returns
    -------
    floor, ceiling
        The largest value not above and the smallest value not below the
        exact quantity. Both are equal when it is representable. ``i`` must
        lie within ``[-scaled_up_max(fmt), scaled_up_max(fmt)]``.
    """
    magnitude = abs(i)
    shift = max(magnitude.bit_length() - fmt.precision, 0)
    low = magnitude >> shift
    high = low if low << shift == magnitude else low + 1
    exponent = shift + fmt.min_subnormal_exponent
    low_value = fmt.dtype(math.ldexp(low, exponent))
    high_value = fmt.dtype(math.ldexp(high, exponent))
    if fmt.bits != 32:
        low_value = float(low_value)
        high_value = float(high_value)
    if i < 0:
        return -high_value, -low_value
    return low_value, high_value
