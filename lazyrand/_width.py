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
Width traits for fixed-width integers and IEEE-754 formats.

Generators are written once and parameterized by a trait object instead of
being overloaded per value type. Integer widths describe the value range,
how a raw draw is truncated to the width, and which bounded sampler covers
the span of a range in that width. Float formats describe the bit layout
and the numpy dtypes used to reinterpret bits.
"""

from typing import Any, Callable, NamedTuple

import numpy as np

__all__ = [
    'IntegerWidth',
    'BYTE',
    'SHORT',
    'INT',
    'LONG',
    'CHAR',
    'FloatFormat',
    'SINGLE',
    'DOUBLE',
]


class IntegerWidth(NamedTuple):
    """A fixed-width integer type.

    Attributes
    ----------
    name : str
        Display name used in error messages.
    bits : int
        Width in bits.
    signed : bool
        Whether values use two's complement.
    span_sampler : str
        Name of the provider's bounded sampler able to cover the span of any
        range in this width: ``'uniform_below'`` for spans below ``2**31``,
        ``'uniform_below_long'`` below ``2**63``, otherwise
        ``'uniform_below_big'``.
    box : callable
        Converts an integer of the width to the value handed to callers.
    unbox : callable
        Inverse of ``box``.
    """
    name: str
    bits: int
    signed: bool
    span_sampler: str
    box: Callable[[int], Any] = int
    unbox: Callable[[Any], int] = int

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def wrap(self, i: int) -> int:
        """Truncate ``i`` to this width."""
        i &= (1 << self.bits) - 1
        if self.signed and i >> (self.bits - 1):
            i -= 1 << self.bits
        return i

    def contains(self, i: int) -> bool:
        return self.min_value <= i <= self.max_value


BYTE = IntegerWidth('byte', 8, True, 'uniform_below')
SHORT = IntegerWidth('short', 16, True, 'uniform_below')
INT = IntegerWidth('int', 32, True, 'uniform_below_long')
LONG = IntegerWidth('long', 64, True, 'uniform_below_big')
CHAR = IntegerWidth('char', 16, False, 'uniform_below', chr, ord)


class FloatFormat(NamedTuple):
    """An IEEE-754 binary format.

    Attributes
    ----------
    name : str
        Display name used in error messages.
    bits : int
        Total width in bits.
    precision : int
        Significand bits including the implicit leading bit.
    min_subnormal_exponent : int
        Exponent ``e`` such that ``2**e`` is the smallest positive subnormal.
    canonical_nan_bits : int
        The only NaN bit pattern a bit-pattern sampler may return.
    dtype, int_dtype : numpy dtype
        Float dtype and the unsigned integer dtype of the same width.
    ordered_width : IntegerWidth
        Integer width holding the ordered representation.
    """
    name: str
    bits: int
    precision: int
    min_subnormal_exponent: int
    canonical_nan_bits: int
    dtype: Any
    int_dtype: Any
    ordered_width: IntegerWidth

    @property
    def exponent_bits(self) -> int:
        return self.bits - self.precision

    @property
    def positive_infinity_bits(self) -> int:
        return ((1 << self.exponent_bits) - 1) << (self.precision - 1)

    @property
    def positive_finite_count(self) -> int:
        """Number of positive finite values, which is also the bits of the largest one."""
        return self.positive_infinity_bits - 1

    @property
    def sign_bit(self) -> int:
        return 1 << (self.bits - 1)


SINGLE = FloatFormat('float', 32, 24, -149, 0x7fc00000, np.float32, np.uint32, INT)
DOUBLE = FloatFormat('double', 64, 53, -1074, 0x7ff8000000000000, np.float64, np.uint64, LONG)
