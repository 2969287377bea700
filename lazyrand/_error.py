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


__all__ = [
    'LazyRandError',
    'ConfigurationError',
    'ScaleError',
    'SeedLengthError',
    'DomainError',
    'InvalidRangeError',
    'NotFiniteError',
    'EmptySourceError',
    'InfiniteSequenceRequiredError',
]


class LazyRandError(Exception):
    """Base exception for all errors raised by lazyrand.

    Catch this exception to handle any failure of a random provider
    generically, regardless of whether it was caused by the provider's
    configuration or by the arguments of a single request.

    Parameters
    ----------
    message : str
        A human-readable description of the error.

    See Also
    --------
    ConfigurationError : The provider is configured inconsistently.
    DomainError : The arguments of a request are invalid.

    Examples
    --------
    .. code-block:: python

        >>> import lazyrand
        >>> try:
        ...     lazyrand.RandomProvider.example().range(5, 1)
        ... except lazyrand.LazyRandError as e:
        ...     print(type(e).__name__)
        InvalidRangeError
    """
    __module__ = 'lazyrand'


class ConfigurationError(LazyRandError, ValueError):
    """Raised when a provider's configuration cannot serve a request.

    Configuration errors are about the state of the provider (its seed or
    its scales) or about a structural size argument such as a list length,
    not about the values the caller asked for.

    Parameters
    ----------
    message : str
        A human-readable description of the misconfiguration.

    See Also
    --------
    ScaleError : A scale parameter is out of range for the request.
    SeedLengthError : A seed does not hold exactly ``SIZE`` words.

    Notes
    -----
    Inherits from :class:`ValueError` so that code written against plain
    Python conventions keeps working.
    """
    __module__ = 'lazyrand'


class ScaleError(ConfigurationError):
    """Raised when a scale parameter is inconsistent with the requested generator.

    Geometric generators interpret ``scale`` as a mean, so it must be large
    enough for the distribution to exist (for instance at least 2 for
    positive geometric integers) and, for bounded variants, strictly on the
    correct side of the bound.

    Parameters
    ----------
    message : str
        A description naming the offending scale and the request.

    See Also
    --------
    RandomProvider.with_scale : Derive a provider with another scale.

    Examples
    --------
    .. code-block:: python

        >>> import lazyrand
        >>> rp = lazyrand.RandomProvider.example().with_scale(1)
        >>> rp.positive_integers_geometric()  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        lazyrand.ScaleError: this must have a scale of at least 2. Invalid scale: 1
    """
    __module__ = 'lazyrand'


class SeedLengthError(ConfigurationError):
    """Raised when a seed does not contain exactly ``SIZE`` words."""
    __module__ = 'lazyrand'


class DomainError(LazyRandError, ValueError):
    """Raised when the arguments of a request are outside its domain.

    Examples are a range whose lower bound exceeds its upper bound, a NaN
    bound, or a uniform sample from an empty collection.

    Parameters
    ----------
    message : str
        A human-readable description of the invalid argument.

    See Also
    --------
    InvalidRangeError : Bounds in the wrong order or outside a width.
    NotFiniteError : A NaN or infinite value where a finite one is needed.
    EmptySourceError : Sampling from an empty collection.
    InfiniteSequenceRequiredError : A finite source where an infinite one
        is needed.
    """
    __module__ = 'lazyrand'


class InvalidRangeError(DomainError):
    """Raised when range bounds are reversed or do not fit the requested width.

    Parameters
    ----------
    message : str
        A description containing both bounds.

    Notes
    -----
    The only reversed pair accepted by floating-point ranges is
    ``(+0.0, -0.0)``, because the two zeros compare equal.
    """
    __module__ = 'lazyrand'


class NotFiniteError(DomainError):
    """Raised when a NaN, or an infinity where a finite value is required, is passed."""
    __module__ = 'lazyrand'


class EmptySourceError(DomainError):
    """Raised when sampling from an empty collection."""
    __module__ = 'lazyrand'


class InfiniteSequenceRequiredError(DomainError):
    """Raised when a source that must be infinite runs out of elements.

    Zipping, chunking, and element-insertion generators pull from their
    sources indefinitely. The check can only happen while iterating, so this
    is the one error that surfaces after a sequence has been built.

    Parameters
    ----------
    message : str
        A description of the exhausted source.

    Examples
    --------
    .. code-block:: python

        >>> import lazyrand
        >>> rp = lazyrand.RandomProvider.example()
        >>> pairs = rp.pairs([1, 2, 3])
        >>> list(pairs)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        lazyrand.InfiniteSequenceRequiredError: chunked source must be infinite, but it ran out of elements
    """
    __module__ = 'lazyrand'
