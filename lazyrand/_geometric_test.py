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

import numpy as np
import pytest

from lazyrand._error import DomainError, ScaleError
from lazyrand._provider import RandomProvider
from lazyrand._provider_core import INT_MAX


@pytest.fixture
def rp():
    return RandomProvider.example()


# First values of RandomProvider.example(), recorded from an independent ISAAC
# implementation.
_NATURALS_SCALE_32 = [27, 7, 32, 39, 14, 8, 32, 85, 7, 40]


def _replay_naturals(provider, scale, n):
    """Recompute natural geometric values of ``scale`` from raw draws."""
    mask = (1 << scale.bit_length()) - 1
    values = []
    count = 0
    while len(values) < n:
        x = provider._prng.next_int() & mask
        if x > scale:
            continue
        if x == 0:
            values.append(count)
            count = 0
        else:
            count += 1
    return values


class TestGolden:
    """Test geometric values against recorded and replayed sequences."""

    def test_natural_scale_32(self, rp):
        replay = rp.deep_copy()
        values = rp.with_scale(32).natural_integers_geometric().take(100)
        assert values == _replay_naturals(replay, 32, 100)
        assert rp == replay

    def test_natural_scale_32_recorded(self):
        values = RandomProvider.example().with_scale(32).natural_integers_geometric().take(10)
        assert values == _NATURALS_SCALE_32

    def test_reproducible(self):
        a = RandomProvider.example().natural_integers_geometric().take(50)
        b = RandomProvider.example().natural_integers_geometric().take(50)
        assert a == b


class TestMeans:
    """Test that the scale is the mean."""

    def test_positive(self, rp):
        values = np.array(rp.with_scale(10).positive_integers_geometric().take(5000))
        assert values.min() >= 1
        assert abs(values.mean() - 10) < 1.0

    def test_natural(self, rp):
        values = np.array(rp.with_scale(4).natural_integers_geometric().take(5000))
        assert values.min() == 0
        assert abs(values.mean() - 4) < 0.4

    def test_negative(self, rp):
        values = rp.with_scale(5).negative_integers_geometric().take(1000)
        assert all(v <= -1 for v in values)

    def test_signed_variants(self, rp):
        nonzero = rp.with_scale(3).nonzero_integers_geometric().take(2000)
        assert 0 not in nonzero
        assert min(nonzero) < 0 < max(nonzero)
        signed = rp.with_scale(3).integers_geometric().take(2000)
        assert 0 in signed
        assert abs(np.mean(np.abs(signed)) - 3) < 0.4

    def test_ratio(self, rp):
        values = np.array(rp.natural_integers_geometric_ratio(3, 2).take(5000))
        assert values.min() == 0
        assert abs(values.mean() - 1.5) < 0.15
        signed = rp.integers_geometric_ratio(3, 2).take(2000)
        assert min(signed) < 0 < max(signed)


class TestRanges:
    """Test geometric ranges."""

    def test_range_up(self, rp):
        values = np.array(rp.with_scale(10).range_up_geometric(5).take(5000))
        assert values.min() >= 5
        assert abs(values.mean() - 10) < 0.6

    def test_range_up_negative_bound(self, rp):
        values = rp.with_scale(0).range_up_geometric(-3).take(1000)
        assert min(values) == -3

    def test_range_down(self, rp):
        values = np.array(rp.with_scale(-10).range_down_geometric(-5).take(5000))
        assert values.max() <= -5
        assert abs(values.mean() + 10) < 0.6


class TestErrors:
    """Test scale validation."""

    def test_positive_scale(self, rp):
        with pytest.raises(ScaleError):
            rp.with_scale(1).positive_integers_geometric()

    def test_natural_scale(self, rp):
        with pytest.raises(ScaleError):
            rp.with_scale(0).natural_integers_geometric()
        with pytest.raises(ScaleError):
            rp.with_scale(INT_MAX).natural_integers_geometric()

    def test_ratio_arguments(self, rp):
        with pytest.raises(DomainError):
            rp.natural_integers_geometric_ratio(0, 1)
        with pytest.raises(DomainError):
            rp.natural_integers_geometric_ratio(1, -2)
        with pytest.raises(DomainError):
            rp.natural_integers_geometric_ratio(INT_MAX, 1)

    def test_range_scales(self, rp):
        with pytest.raises(ScaleError):
            rp.with_scale(5).range_up_geometric(5)
        with pytest.raises(ScaleError):
            rp.with_scale(5).range_down_geometric(5)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
