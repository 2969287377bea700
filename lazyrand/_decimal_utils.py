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
Exact helpers for :class:`decimal.Decimal` values.

A decimal is viewed as ``unscaled * 10**-scale``; ``scale`` is the negated
exponent of :meth:`decimal.Decimal.as_tuple`. A decimal is *canonical* when
its scale is 0, or positive with an unscaled value not divisible by ten.
All arithmetic goes through :data:`EXACT`, a context that never rounds in
practice.
"""

import decimal
from decimal import Decimal

from ._error import DomainError, NotFiniteError

__all__ = [
    'EXACT',
    'make_decimal',
    'unscaled_value',
    'scale_of',
    'precision',
    'canonicalize',
    'is_canonical',
    'strip_trailing_zeros',
    'set_precision',
    'ceiling_log10',
    'check_finite',
]

EXACT = decimal.Context(
    prec=decimal.MAX_PREC,
    Emax=decimal.MAX_EMAX,
    Emin=decimal.MIN_EMIN,
    rounding=decimal.ROUND_HALF_EVEN,
    traps=[decimal.InvalidOperation, decimal.Overflow, decimal.Inexact],
)


def make_decimal(unscaled: int, scale: int) -> Decimal:
    """Return ``unscaled * 10**-scale`` with exactly that representation."""
    digits = tuple(int(c) for c in str(abs(unscaled)))
    return Decimal((1 if unscaled < 0 else 0, digits, -scale))


def check_finite(d: Decimal) -> Decimal:
    if not isinstance(d, Decimal):
        d = Decimal(d)
    if not d.is_finite():
        raise NotFiniteError(f'decimal bound must be finite. Invalid bound: {d}')
    return d


def unscaled_value(d: Decimal) -> int:
    sign, digits, _ = d.as_tuple()
    value = int(''.join(map(str, digits)))
    return -value if sign else value


def scale_of(d: Decimal) -> int:
    return -d.as_tuple().exponent


def precision(d: Decimal) -> int:
    """Number of digits of the unscaled value; zero has precision 1."""
    return len(str(abs(unscaled_value(d))))


def canonicalize(d: Decimal) -> Decimal:
    """Return the canonical representation of ``d``'s value."""
    unscaled = unscaled_value(d)
    scale = scale_of(d)
    if scale < 0:
        return make_decimal(unscaled * 10 ** -scale, 0)
    while scale > 0 and unscaled % 10 == 0:
        unscaled //= 10
        scale -= 1
    return make_decimal(unscaled, scale)


def is_canonical(d: Decimal) -> bool:
    scale = scale_of(d)
    return scale == 0 or (scale > 0 and unscaled_value(d) % 10 != 0)


def strip_trailing_zeros(d: Decimal) -> Decimal:
    """Remove every trailing zero of the unscaled value; the scale may become negative."""
    unscaled = unscaled_value(d)
    if unscaled == 0:
        return make_decimal(0, 0)
    scale = scale_of(d)
    while unscaled % 10 == 0:
        unscaled //= 10
        scale -= 1
    return make_decimal(unscaled, scale)


def set_precision(d: Decimal, digits: int) -> Decimal:
    """Pad ``d`` with trailing zeros until it has ``digits`` digits.

    ``digits`` may not be smaller than the current precision.
    """
    current = precision(d)
    if digits < current:
        raise DomainError(f'cannot reduce precision from {current} to {digits}')
    padding = digits - current
    return make_decimal(unscaled_value(d) * 10 ** padding, scale_of(d) + padding)


def ceiling_log10(d: Decimal) -> int:
    """Smallest ``k`` such that ``10**k >= d``, for positive ``d``."""
    if d <= 0:
        raise DomainError(f'd must be positive. Invalid d: {d}')
    unscaled = unscaled_value(d)
    k = len(str(unscaled)) - 1
    if 10 ** k < unscaled:
        k += 1
    return k - scale_of(d)
