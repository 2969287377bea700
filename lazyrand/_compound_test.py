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

import itertools
from collections import Counter

import numpy as np
import pytest

from lazyrand._compound import Either
from lazyrand._error import (
    ConfigurationError,
    EmptySourceError,
    InfiniteSequenceRequiredError,
    ScaleError,
)
from lazyrand._provider import RandomProvider
from lazyrand._sequence import RandomIterable, repeat


@pytest.fixture
def rp():
    return RandomProvider.example()


def _counting():
    return RandomIterable(itertools.count)


class TestWithElement:
    """Test element insertion and dependent pairs."""

    def test_frequency(self, rp):
        values = rp.with_scale(4).with_element('x', rp.range(0, 9)).take(4000)
        fraction = values.count('x') / len(values)
        assert abs(fraction - 0.25) < 0.05
        assert all(v == 'x' or 0 <= v <= 9 for v in values)

    def test_scale(self, rp):
        with pytest.raises(ScaleError):
            rp.with_scale(1).with_element('x', rp.integers())

    def test_dependent_pairs(self, rp):
        pairs = rp.dependent_pairs(rp.range(1, 3), lambda n: rp.range(0, n)).take(300)
        assert all(0 <= b <= a for a, b in pairs)

    def test_dependent_pairs_continue_per_key(self, rp):
        keys = rp.uniform_sample(['a', 'b'])
        pairs = rp.dependent_pairs(keys, lambda k: RandomIterable(itertools.count)).take(100)
        for key in 'ab':
            assert [b for a, b in pairs if a == key] == list(range(sum(a == key for a, _ in pairs)))

    def test_dependent_pairs_identity(self, rp):
        left, right = [1], [1]
        keys = rp.uniform_sample([left, right])
        pairs = rp.dependent_pairs_identity(keys, lambda k: RandomIterable(itertools.count)).take(100)
        left_values = [b for a, b in pairs if a is left]
        assert left_values == list(range(len(left_values)))
        assert 0 < len(left_values) < 100

    def test_dependent_pairs_finite_keys(self, rp):
        with pytest.raises(InfiniteSequenceRequiredError):
            rp.dependent_pairs([1, 2], lambda k: repeat(k)).take(3)
        with pytest.raises(InfiniteSequenceRequiredError):
            rp.dependent_pairs_identity([[1]], lambda k: repeat(k)).take(2)


class TestPermutations:
    """Test shuffles and permutations."""

    def test_shuffle_in_place(self, rp):
        xs = list(range(10))
        rp.shuffle(xs)
        assert sorted(xs) == list(range(10))
        empty = []
        rp.shuffle(empty)
        assert empty == []

    def test_permutation_uniformity(self, rp):
        counts = Counter(tuple(p) for p in rp.permutations_finite([0, 1, 2, 3]).take(24000))
        assert len(counts) == 24
        assert all(abs(c - 1000) < 200 for c in counts.values())

    def test_permutations_return_new_lists(self, rp):
        source = ['a', 'b', 'c']
        perms = rp.permutations_finite(source).take(20)
        assert source == ['a', 'b', 'c']
        assert all(sorted(p) == source for p in perms)

    def test_prefix_permutations_finite(self, rp):
        perms = [tuple(p) for p in rp.with_scale(2).prefix_permutations([1, 2, 3]).take(300)]
        assert all(sorted(p) == [1, 2, 3] for p in perms)
        assert len(set(perms)) == 6

    def test_prefix_permutations_infinite(self, rp):
        for p in rp.with_scale(4).prefix_permutations(_counting()).take(100):
            assert sorted(p.take(60)) == list(range(60))

    def test_prefix_permutations_short(self, rp):
        replay = rp.deep_copy()
        assert list(rp.prefix_permutations([7]).first()) == [7]
        assert list(rp.prefix_permutations([]).first()) == []
        assert rp == replay

    def test_prefix_permutations_scale(self, rp):
        with pytest.raises(ScaleError):
            rp.with_scale(0).prefix_permutations([1, 2])


class TestTuples:
    """Test fixed-size tuples."""

    def test_one_source(self, rp):
        assert rp.pairs(_counting()).take(2) == [(0, 1), (2, 3)]
        assert rp.triples(_counting()).first() == (0, 1, 2)
        assert rp.septuples(_counting()).first() == tuple(range(7))

    def test_many_sources(self, rp):
        assert rp.pairs(_counting(), repeat('x')).take(2) == [(0, 'x'), (1, 'x')]
        quads = rp.quadruples(rp.integers(), rp.booleans(), rp.characters(), rp.longs()).take(10)
        assert all(len(q) == 4 and isinstance(q[1], bool) for q in quads)
        assert len(rp.quintuples(*[_counting()] * 5).first()) == 5
        assert rp.sextuples(*[repeat(0)] * 6).first() == (0,) * 6

    def test_wrong_arity(self, rp):
        with pytest.raises(TypeError):
            rp.triples(_counting(), _counting())

    def test_distinct_bag_subset(self, rp):
        letters = rp.uniform_sample('abc')
        assert all(sorted(t) == ['a', 'b', 'c'] for t in rp.distinct_tuples(3, letters).take(50))
        assert all(t == ('a', 'b', 'c') for t in rp.subset_tuples(3, letters).take(50))
        assert all(list(t) == sorted(t) for t in rp.bag_tuples(4, letters).take(50))

    def test_finite_source(self, rp):
        with pytest.raises(InfiniteSequenceRequiredError):
            rp.pairs([1, 2, 3]).take(2)


class TestLists:
    """Test variable-size lists, bags and subsets."""

    def test_lists_of_size(self, rp):
        assert rp.lists_of_size(3, _counting()).take(2) == [[0, 1, 2], [3, 4, 5]]
        assert rp.lists_of_size(0, _counting()).take(2) == [[], []]

    def test_distinct_lists_of_size(self, rp):
        counts = Counter(tuple(xs) for xs in rp.distinct_lists_of_size(3, rp.uniform_sample('abc')).take(600))
        assert len(counts) == 6
        assert all(50 < c < 150 for c in counts.values())

    def test_lists_mean_length(self, rp):
        lengths = [len(xs) for xs in rp.with_scale(5).lists(rp.integers()).take(2000)]
        assert abs(np.mean(lengths) - 5) < 0.5
        assert 0 in lengths

    def test_lists_at_least(self, rp):
        assert all(len(xs) >= 2 for xs in rp.with_scale(6).lists_at_least(2, rp.integers()).take(500))
        with pytest.raises(ScaleError):
            rp.with_scale(2).lists_at_least(2, rp.integers())
        with pytest.raises(ConfigurationError):
            rp.lists_at_least(-1, rp.integers())

    def test_distinct_lists(self, rp):
        for xs in rp.distinct_lists(rp.range(0, 9)).take(200):
            assert len(set(xs)) == len(xs)
        for xs in rp.with_scale(6).distinct_lists_at_least(3, rp.range(0, 9)).take(200):
            assert len(xs) >= 3 and len(set(xs)) == len(xs)

    def test_bags_and_subsets(self, rp):
        source = rp.range(0, 9)
        for xs in rp.with_scale(6).bags(source).take(200):
            assert xs == sorted(xs)
        for xs in rp.with_scale(6).subsets(source).take(200):
            assert xs == sorted(set(xs))
        assert all(len(xs) >= 2 for xs in rp.with_scale(6).bags_at_least(2, source).take(100))
        assert all(len(set(xs)) >= 2 for xs in rp.with_scale(6).subsets_at_least(2, source).take(100))
        assert all(xs == sorted(xs) and len(xs) == 3 for xs in rp.bags_of_size(3, source).take(100))
        assert all(xs == [0, 1] for xs in rp.subsets_of_size(2, rp.range(0, 1)).take(20))


class TestStrings:
    """Test string generators."""

    def test_strings_of_size(self, rp):
        values = rp.strings_of_size(4, 'ab').take(100)
        assert all(len(s) == 4 and set(s) <= {'a', 'b'} for s in values)
        assert all(len(s) == 5 for s in rp.strings_of_size(5).take(20))

    def test_strings(self, rp):
        values = rp.with_scale(4).strings('xyz').take(300)
        assert all(set(s) <= set('xyz') for s in values)
        assert '' in values
        assert all(isinstance(s, str) for s in rp.with_scale(4).strings().take(50))

    def test_strings_at_least(self, rp):
        assert all(len(s) >= 2 and set(s) == {'q'} for s in rp.with_scale(5).strings_at_least(2, 'q').take(100))

    def test_empty_alphabet(self, rp):
        assert rp.strings_of_size(0, '').take(2) == ['', '']
        assert rp.strings('').first() == ''
        assert rp.strings_at_least(0, '').first() == ''
        with pytest.raises(EmptySourceError):
            rp.strings_of_size(1, '')
        with pytest.raises(EmptySourceError):
            rp.strings_at_least(1, '')


class TestChoices:
    """Test choosing between sources."""

    def test_eithers(self, rp):
        values = rp.with_scale(3).eithers(_counting(), repeat('b')).take(4000)
        assert all(isinstance(e, Either) for e in values)
        a_values = [e.value for e in values if e.is_a]
        assert a_values == list(range(len(a_values)))
        assert all(e.value == 'b' for e in values if not e.is_a)
        assert abs(1 - len(a_values) / len(values) - 0.25) < 0.05

    def test_either_constructors(self):
        assert Either.of_a(1) == Either(True, 1)
        assert Either.of_b(2) == (False, 2)

    def test_eithers_scale(self, rp):
        with pytest.raises(ScaleError):
            rp.with_scale(0).eithers(repeat(1), repeat(2))

    def test_choose(self, rp):
        values = rp.choose([repeat(1), repeat(2), repeat(3)]).take(300)
        assert set(values) == {1, 2, 3}
        with pytest.raises(EmptySourceError):
            rp.choose([])

    def test_cartesian_product(self, rp):
        values = rp.cartesian_product([[1, 2], ['x']]).take(100)
        assert {tuple(v) for v in values} == {(1, 'x'), (2, 'x')}
        with pytest.raises(EmptySourceError):
            rp.cartesian_product([])
        with pytest.raises(EmptySourceError):
            rp.cartesian_product([[1], []])


class TestListsWithContent:
    """Test lists guaranteed to contain given content."""

    def test_lists_with_element(self, rp):
        values = rp.lists_with_element(0, rp.range(1, 9)).take(1000)
        assert all(0 in xs for xs in values)
        assert abs(np.mean([len(xs) for xs in values]) - 32) < 3

    def test_lists_with_element_scale(self, rp):
        with pytest.raises(ScaleError):
            rp.with_scale(2).lists_with_element(0, rp.integers())

    def test_subsets_with_element(self, rp):
        for xs in rp.with_scale(4).subsets_with_element(5, rp.range(0, 9)).take(200):
            assert 5 in xs
            assert xs == sorted(set(xs))
        with pytest.raises(ScaleError):
            rp.with_scale(1).subsets_with_element(5, rp.integers())

    def test_lists_with_sublists(self, rp):
        for xs in rp.with_scale(4).lists_with_sublists(repeat([100, 200]), rp.range(0, 9)).take(200):
            i = xs.index(100)
            assert xs[i + 1] == 200
        with pytest.raises(ScaleError):
            rp.with_scale(1).lists_with_sublists(repeat([1]), rp.integers())


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
