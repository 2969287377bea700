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

# -*- coding: utf-8 -*-

from ._big_integers import BigIntegerMixin
from ._compound import CompoundMixin
from ._decimals import DecimalMixin
from ._floats import FloatMixin
from ._geometric import GeometricMixin
from ._integers import IntegerMixin
from ._provider_core import ProviderCore

__all__ = [
    'RandomProvider',
]


class RandomProvider(
    CompoundMixin,
    DecimalMixin,
    FloatMixin,
    BigIntegerMixin,
    GeometricMixin,
    IntegerMixin,
    ProviderCore,
):
    """A seeded source of lazy, infinite sequences of random values.

    Every generator method returns a :class:`RandomIterable`. Its values are
    deterministic functions of the seed and of the draws made before it, so a
    provider rebuilt from the same seed and asked the same questions in the
    same order reproduces every value.

    Parameters
    ----------
    seed : sequence of int, optional
        Exactly ``SIZE`` (256) integers. When omitted, a seed is drawn from
        operating-system entropy.

    Attributes
    ----------
    scale : int
        Mean of geometric generators and of the bit length of unbounded
        integers. Defaults to 32.
    secondary_scale : int
        Mean of the decimal scale of generated decimals. Defaults to 8.
    tertiary_scale : int
        Reserved for nested structures. Defaults to 2.

    Raises
    ------
    SeedLengthError
        If ``seed`` does not contain exactly ``SIZE`` integers.

    See Also
    --------
    RandomProvider.copy : Share the bit source.
    RandomProvider.deep_copy : Clone the bit source.
    lazyrand.config.set_user_default : Persist default scales for entropy-seeded providers.

    Notes
    -----
    Generators validate their arguments when they are called, before any
    value is drawn. Providers derived with ``with_scale`` and friends share
    the bit source with the provider they came from, so their draws interleave.
    Seeded providers, including :meth:`example`, always start at the
    built-in scales ``(32, 8, 2)``. Only entropy-seeded providers read user
    defaults.
    Providers are not thread safe.

    Examples
    --------
    .. code-block:: python

        >>> import lazyrand
        >>> rp = lazyrand.RandomProvider.example()
        >>> xs = rp.with_scale(4).lists(rp.range(0, 9)).take(2)
        >>> rp.reset()
        >>> rp.with_scale(4).lists(rp.range(0, 9)).take(2) == xs
        True
    """
    __module__ = 'lazyrand'
