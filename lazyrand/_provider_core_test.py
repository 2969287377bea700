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

import decimal

import numpy as np
import pytest

from lazyrand import config
from lazyrand._error import ConfigurationError, EmptySourceError, SeedLengthError
from lazyrand._isaac import SIZE
from lazyrand._provider import RandomProvider


@pytest.fixture
def rp():
    return RandomProvider.example()


def _raw(provider, n):
    return [provider._prng.next_int() for _ in range(n)]


class TestConstruction:
    """Test seeding, defaults and structural equality."""

    def test_seed_length(self):
        with pytest.raises(SeedLengthError):
            RandomProvider([1, 2, 3])

    def test_default_scales(self, rp):
        assert (rp.scale, rp.secondary_scale, rp.tertiary_scale) == (32, 8, 2)

    def test_user_default_scales_only_for_entropy_seeds(self):
        config.set_user_default('scale', 16)
        config.set_user_default('tertiary_scale', 5)
        assert RandomProvider().scale == 16
        assert RandomProvider().tertiary_scale == 5
        seeded = RandomProvider(list(range(SIZE)))
        assert (seeded.scale, seeded.secondary_scale, seeded.tertiary_scale) == (32, 8, 2)
        example = RandomProvider.example()
        assert (example.scale, example.secondary_scale, example.tertiary_scale) == (32, 8, 2)

    def test_seeded_values_ignore_user_defaults(self):
        before = RandomProvider.example()
        expected = before.lists(before.range(0, 9)).take(3)
        config.set_user_default('scale', 2)
        rp = RandomProvider.example()
        assert rp.lists(rp.range(0, 9)).take(3) == expected

    def test_same_seed_equal(self):
        seed = list(range(SIZE))
        a = RandomProvider(seed)
        b = RandomProvider(seed)
        assert a == b
        assert hash(a) == hash(b)
        assert a.seed == tuple(seed)

    def test_entropy_providers_differ(self):
        assert RandomProvider() != RandomProvider()

    def test_scales_affect_equality(self, rp):
        assert rp.with_scale(5) != rp
        assert rp.with_scale(32) == rp
        assert rp.with_secondary_scale(3).secondary_scale == 3
        assert rp.with_tertiary_scale(7).tertiary_scale == 7

    def test_repr(self, rp):
        assert repr(rp) == f'RandomProvider[@{rp.get_id()}, 32, 8, 2]'


class TestCopies:
    """Test shared and independent bit sources."""

    def test_shallow_copy_shares_stream(self, rp):
        expected = rp.deep_copy().integers().take(10)
        first = rp.copy().integers().take(5)
        second = rp.integers().take(5)
        assert first + second == expected

    def test_with_scale_shares_stream(self, rp):
        expected = rp.deep_copy().integers().take(6)
        first = rp.with_scale(7).integers().take(3)
        assert first + rp.integers().take(3) == expected

    def test_deep_copy_is_independent(self, rp):
        clone = rp.deep_copy()
        assert clone == rp
        a = rp.integers().take(20)
        assert clone != rp
        assert clone.integers().take(20) == a

    def test_reset(self, rp):
        shallow = rp.copy()
        expected = rp.integers().take(10)
        rp.reset()
        assert shallow.integers().take(10) == expected

    def test_reset_matches_fresh_provider(self, rp):
        rp.longs().take(50)
        rp.reset()
        assert rp == RandomProvider.example()


class TestRawDraws:
    """Test the primitive streams."""

    def test_longs(self, rp):
        replay = rp.deep_copy()
        longs = rp.longs().take(10)
        raw = _raw(replay, 20)
        expected = [(raw[2 * i] << 32) | (raw[2 * i + 1] & 0xFFFFFFFF) for i in range(10)]
        assert longs == expected
        assert all(-(1 << 63) <= v < (1 << 63) for v in longs)

    def test_booleans(self, rp):
        replay = rp.deep_copy()
        bs = rp.booleans().take(1000)
        assert bs == [(x & 1) != 0 for x in _raw(replay, 1000)]
        assert 0.45 <= np.mean(bs) <= 0.55

    def test_big_pow2_byte_layout(self, rp):
        replay = rp.deep_copy()
        value = rp._next_big_pow2(20)
        x = _raw(replay, 1)[0] & 0xFFFFFFFF
        expected = ((x & 0xFF) << 16) | (((x >> 8) & 0xFF) << 8) | ((x >> 16) & 0xFF)
        assert value == expected & ((1 << 20) - 1)
        assert rp == replay

    def test_big_pow2_draw_count(self, rp):
        replay = rp.deep_copy()
        rp._next_big_pow2(32)
        _raw(replay, 2)
        assert rp == replay
        assert rp._next_big_pow2(0) == 0


class TestBoundedSamplers:
    """Test uniform sampling below a bound."""

    def test_one_consumes_nothing(self, rp):
        replay = rp.deep_copy()
        assert rp.uniform_below(1).take(100) == [0] * 100
        assert rp.uniform_below_big(1).take(100) == [0] * 100
        assert rp == replay

    def test_power_of_two_one_draw_each(self, rp):
        replay = rp.deep_copy()
        values = rp.uniform_below(8).take(50)
        assert values == [x & 7 for x in _raw(replay, 50)]
        assert rp == replay

    def test_rejection_replay(self, rp):
        replay = rp.deep_copy()
        values = rp.uniform_below(5).take(200)
        expected = []
        while len(expected) < 200:
            x = replay._prng.next_int() & 7
            if x < 5:
                expected.append(x)
        assert values == expected
        assert rp == replay

    @pytest.mark.parametrize('n', [3, 5, 100, 1000, (1 << 20) + (1 << 19)])
    def test_expected_draws_below_two(self, rp, n):
        replay = rp.deep_copy()
        samples = 2000
        rp.uniform_below(n).take(samples)
        mask = (1 << (n - 1).bit_length()) - 1
        draws = 0
        accepted = 0
        while accepted < samples:
            draws += 1
            if replay._prng.next_int() & mask < n:
                accepted += 1
        assert rp == replay
        assert draws / samples < 2

    def test_uniformity(self, rp):
        counts = np.bincount(rp.uniform_below(6).take(12000), minlength=6)
        assert counts.shape == (6,)
        assert np.all(np.abs(counts - 2000) < 150)

    def test_long_and_big_ranges(self, rp):
        n = (1 << 40) + 12345
        assert all(0 <= v < n for v in rp.uniform_below_long(n).take(200))
        m = (1 << 100) + 7
        values = rp.uniform_below_big(m).take(200)
        assert all(0 <= v < m for v in values)
        assert max(values) > 1 << 95

    def test_invalid_bounds(self, rp):
        for bad in (0, -3, 1 << 31):
            with pytest.raises(ConfigurationError):
                rp.uniform_below(bad)
        with pytest.raises(ConfigurationError):
            rp.uniform_below_long(1 << 63)
        with pytest.raises(ConfigurationError):
            rp.uniform_below_big(0)


class TestUniformSample:
    """Test sampling from collections."""

    def test_list(self, rp):
        values = rp.uniform_sample(['a', 'b', 'c']).take(300)
        assert set(values) == {'a', 'b', 'c'}

    def test_string(self, rp):
        values = rp.uniform_sample('xyz').take(100)
        assert set(values) <= {'x', 'y', 'z'}

    def test_single_element_consumes_nothing(self, rp):
        replay = rp.deep_copy()
        assert rp.uniform_sample([42]).take(5) == [42] * 5
        assert rp == replay

    def test_empty(self, rp):
        with pytest.raises(EmptySourceError):
            rp.uniform_sample([])
        with pytest.raises(EmptySourceError):
            rp.uniform_sample('')

    def test_unordered_collections(self, rp):
        for xs in ({'a', 'b'}, frozenset('ab'), {'a': 1, 'b': 2}):
            with pytest.raises(TypeError):
                rp.uniform_sample(xs)
        values = rp.uniform_sample(sorted({'b', 'a'})).take(100)
        assert set(values) == {'a', 'b'}

    def test_rounding_modes(self, rp):
        modes = set(rp.rounding_modes().take(500))
        assert decimal.ROUND_HALF_EVEN in modes
        assert len(modes) == 8


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
