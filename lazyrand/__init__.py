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

__version__ = "0.0.1"

from . import config
from ._compound import Either
from ._error import (
    ConfigurationError,
    DomainError,
    EmptySourceError,
    InfiniteSequenceRequiredError,
    InvalidRangeError,
    LazyRandError,
    NotFiniteError,
    ScaleError,
    SeedLengthError,
)
from ._float_utils import from_ordered_representation, to_ordered_representation
from ._isaac import SIZE, IsaacPRNG
from ._provider import RandomProvider
from ._sequence import RandomIterable
from ._width import BYTE, CHAR, DOUBLE, INT, LONG, SHORT, SINGLE, FloatFormat, IntegerWidth

__all__ = [

    # --- providers --- #
    'RandomProvider',
    'RandomIterable',
    'IsaacPRNG',
    'SIZE',

    # --- value types --- #
    'IntegerWidth',
    'BYTE',
    'SHORT',
    'INT',
    'LONG',
    'CHAR',
    'FloatFormat',
    'SINGLE',
    'DOUBLE',
    'Either',
    'to_ordered_representation',
    'from_ordered_representation',

    # --- errors --- #
    'LazyRandError',
    'ConfigurationError',
    'ScaleError',
    'SeedLengthError',
    'DomainError',
    'InvalidRangeError',
    'NotFiniteError',
    'EmptySourceError',
    'InfiniteSequenceRequiredError',

    # --- configuration --- #
    'config',
]
