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
ISAAC deterministic bit source.

This module implements Bob Jenkins' ISAAC generator with a 256-word state.
It is the only entropy root of :class:`lazyrand.RandomProvider`: every
distribution in the package is a deterministic transformation of the signed
32-bit words returned by :meth:`IsaacPRNG.next_int`.

The state lives in ``int64`` numpy arrays that hold unsigned 32-bit values.
The kernels mask every sum and left shift with ``0xFFFFFFFF`` so that numba
never has to promote mixed unsigned and signed operands.
"""

import hashlib
from typing import Optional, Sequence, Tuple

import numba
import numpy as np

from ._error import ConfigurationError, SeedLengthError

__all__ = [
    'SIZE',
    'IsaacPRNG',
    'isaac_mix',
    'isaac_init',
    'isaac_generate',
]

SIZE = 256

_MASK32 = 0xFFFFFFFF
_GOLDEN_RATIO = 0x9e3779b9


# ──────────────────────────────────────────────────────────────────────
#  Kernels
# ──────────────────────────────────────────────────────────────────────

@numba.njit(inline='always')
def isaac_mix(s):
    """Scramble the eight-word mixing register ``s`` in-place."""
    a = s[0]
    b = s[1]
    c = s[2]
    d = s[3]
    e = s[4]
    f = s[5]
    g = s[6]
    h = s[7]

    a ^= (b << 11) & _MASK32
    d = (d + a) & _MASK32
    b = (b + c) & _MASK32
    b ^= c >> 2
    e = (e + b) & _MASK32
    c = (c + d) & _MASK32
    c ^= (d << 8) & _MASK32
    f = (f + c) & _MASK32
    d = (d + e) & _MASK32
    d ^= e >> 16
    g = (g + d) & _MASK32
    e = (e + f) & _MASK32
    e ^= (f << 10) & _MASK32
    h = (h + e) & _MASK32
    f = (f + g) & _MASK32
    f ^= g >> 4
    a = (a + f) & _MASK32
    g = (g + h) & _MASK32
    g ^= (h << 8) & _MASK32
    b = (b + g) & _MASK32
    h = (h + a) & _MASK32
    h ^= a >> 9
    c = (c + h) & _MASK32
    a = (a + b) & _MASK32

    s[0] = a
    s[1] = b
    s[2] = c
    s[3] = d
    s[4] = e
    s[5] = f
    s[6] = g
    s[7] = h


@numba.njit
def isaac_generate(memory, results, registers):
    """Produce the next batch of ``SIZE`` words.

    Parameters
    ----------
    memory : np.ndarray
        ``(SIZE,)`` ``int64`` internal state, updated in-place.
    results : np.ndarray
        ``(SIZE,)`` ``int64`` output buffer, overwritten.
    registers : np.ndarray
        ``(3,)`` ``int64`` accumulator, previous result and counter
        (``a``, ``b``, ``c`` in the reference implementation), updated
        in-place.
    """
    aa = registers[0]
    cc = (registers[2] + 1) & _MASK32
    bb = (registers[1] + cc) & _MASK32
    for i in range(SIZE):
        x = memory[i]
        step = i & 3
        if step == 0:
            aa ^= (aa << 13) & _MASK32
        elif step == 1:
            aa ^= aa >> 6
        elif step == 2:
            aa ^= (aa << 2) & _MASK32
        else:
            aa ^= aa >> 16
        aa = (memory[(i + SIZE // 2) & (SIZE - 1)] + aa) & _MASK32
        y = (memory[(x >> 2) & (SIZE - 1)] + aa + bb) & _MASK32
        memory[i] = y
        bb = (memory[(y >> 10) & (SIZE - 1)] + x) & _MASK32
        results[i] = bb
    registers[0] = aa
    registers[1] = bb
    registers[2] = cc


@numba.njit
def isaac_init(seed, memory, results, registers):
    """Initialise the state from ``seed`` and generate the first batch.

    Parameters
    ----------
    seed : np.ndarray
        ``(SIZE,)`` ``int64`` seed words in ``[0, 2**32)``.
    memory, results, registers : np.ndarray
        Buffers as in :func:`isaac_generate`; all are overwritten.
    """
    s = np.empty(8, dtype=np.int64)
    s[:] = _GOLDEN_RATIO
    for _ in range(4):
        isaac_mix(s)
    for i in range(0, SIZE, 8):
        for j in range(8):
            s[j] = (s[j] + seed[i + j]) & _MASK32
        isaac_mix(s)
        for j in range(8):
            memory[i + j] = s[j]
    for i in range(0, SIZE, 8):
        for j in range(8):
            s[j] = (s[j] + memory[i + j]) & _MASK32
        isaac_mix(s)
        for j in range(8):
            memory[i + j] = s[j]
    registers[0] = 0
    registers[1] = 0
    registers[2] = 0
    isaac_generate(memory, results, registers)


# ──────────────────────────────────────────────────────────────────────
#  Generator object
# ──────────────────────────────────────────────────────────────────────

def _entropy_seed() -> np.ndarray:
    return np.random.SeedSequence().generate_state(SIZE, dtype=np.uint32).astype(np.int64)


def _as_seed_array(seed: Sequence[int]) -> np.ndarray:
    if len(seed) != SIZE:
        raise SeedLengthError(f'seed must have length {SIZE}. Length of invalid seed: {len(seed)}')
    return np.array([int(word) & _MASK32 for word in seed], dtype=np.int64)


class IsaacPRNG:
    """ISAAC pseudo-random generator emitting signed 32-bit words.

    Parameters
    ----------
    seed : sequence of int, optional
        Exactly ``SIZE`` integers; each is taken modulo ``2**32``. When
        omitted, the generator is seeded from operating-system entropy.

    Raises
    ------
    SeedLengthError
        If ``seed`` does not contain exactly ``SIZE`` words.

    Notes
    -----
    Words of each batch are handed out from the highest index down, which
    matches the reference ``rand`` macro, so the stream is comparable with
    published ISAAC test vectors.

    Examples
    --------
    .. code-block:: python

        >>> from lazyrand import IsaacPRNG
        >>> prng = IsaacPRNG([0] * 256)
        >>> clone = prng.copy()
        >>> prng.next_int() == clone.next_int()
        True
    """
    __module__ = 'lazyrand'

    def __init__(self, seed: Optional[Sequence[int]] = None):
        self._memory = np.zeros(SIZE, dtype=np.int64)
        self._results = np.zeros(SIZE, dtype=np.int64)
        self._registers = np.zeros(3, dtype=np.int64)
        self._count = 0
        if seed is None:
            self._init(_entropy_seed())
        else:
            self._init(_as_seed_array(seed))

    @classmethod
    def example(cls) -> 'IsaacPRNG':
        """Return a generator with the all-zero seed."""
        return cls([0] * SIZE)

    def _init(self, seed: np.ndarray):
        isaac_init(seed, self._memory, self._results, self._registers)
        self._count = SIZE

    def set_seed(self, seed: Sequence[int]):
        """Re-initialise this generator in-place from ``seed``."""
        self._init(_as_seed_array(seed))

    def next_int(self) -> int:
        """Return the next word as a signed 32-bit integer."""
        if self._count == 0:
            isaac_generate(self._memory, self._results, self._registers)
            self._count = SIZE
        self._count -= 1
        word = int(self._results[self._count])
        return word - (1 << 32) if word & 0x80000000 else word

    def copy(self) -> 'IsaacPRNG':
        """Return an independent generator whose future output equals this one's."""
        clone = object.__new__(IsaacPRNG)
        clone._memory = self._memory.copy()
        clone._results = self._results.copy()
        clone._registers = self._registers.copy()
        clone._count = self._count
        return clone

    def get_state(self) -> Tuple:
        """Return a hashable snapshot of the full generator state."""
        return (
            tuple(int(v) for v in self._memory),
            tuple(int(v) for v in self._results),
            tuple(int(v) for v in self._registers),
            self._count,
        )

    def set_state(self, state: Tuple):
        """Restore a snapshot produced by :meth:`get_state`."""
        memory, results, registers, count = state
        if len(memory) != SIZE or len(results) != SIZE or len(registers) != 3:
            raise ConfigurationError(f'state arrays must have lengths {SIZE}, {SIZE} and 3')
        if not 0 <= count <= SIZE:
            raise ConfigurationError(f'state counter must be in [0, {SIZE}]. Invalid counter: {count}')
        self._memory = np.array(memory, dtype=np.int64)
        self._results = np.array(results, dtype=np.int64)
        self._registers = np.array(registers, dtype=np.int64)
        self._count = count

    def get_id(self) -> int:
        """Return a 64-bit fingerprint of the current state."""
        digest = hashlib.blake2b(digest_size=8)
        digest.update(self._memory.tobytes())
        digest.update(self._results.tobytes())
        digest.update(self._registers.tobytes())
        digest.update(self._count.to_bytes(2, 'little'))
        return int.from_bytes(digest.digest(), 'little', signed=True)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, IsaacPRNG):
            return NotImplemented
        return (
            self._count == other._count
            and np.array_equal(self._memory, other._memory)
            and np.array_equal(self._results, other._results)
            and np.array_equal(self._registers, other._registers)
        )

    def __hash__(self):
        return hash(self.get_state())

    def __repr__(self):
        return f'IsaacPRNG[@{self.get_id()}]'
