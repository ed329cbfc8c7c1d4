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

import math

import numpy as np
import pytest

from lfsrkit import NaiveLFSR, TapOutOfRangeError
from lfsrkit._benchmark import (
    BenchmarkRecord,
    BenchmarkResult,
    _drive,
    benchmark_function,
    benchmark_variants,
)
from lfsrkit._registry import _VARIANT_REGISTRY, register_variant


class _BrokenLFSR(NaiveLFSR):
    def multiclock(self, clocks):
        raise RuntimeError('broken kernel')


class _WrongLFSR(NaiveLFSR):
    def multiclock(self, clocks):
        return 1 - super().multiclock(clocks)


@pytest.fixture
def extra_variants():
    register_variant('broken', _BrokenLFSR, tags=('test',))
    register_variant('wrong', _WrongLFSR, tags=('test',))
    yield
    _VARIANT_REGISTRY.pop('broken', None)
    _VARIANT_REGISTRY.pop('wrong', None)


def _record(variant, mean_ms, success=True, matches=True):
    return BenchmarkRecord(variant, mean_ms, 0.0, mean_ms, 1e6, matches, success)


class TestBenchmarkFunction:
    def test_counts_calls(self):
        calls = []
        mean, std, min_, max_, output = benchmark_function(lambda: calls.append(1) or len(calls), n_warmup=2, n_runs=3)
        assert len(calls) == 5
        assert output == 5
        assert 0 <= min_ <= mean <= max_
        assert std >= 0


class TestDrive:
    def test_sets_each_seed(self):
        lfsr = NaiveLFSR(7, [1, 7], 0)
        bits = _drive(lfsr, [39, 5], 10)
        assert bits.shape == (20,)
        assert bits[:10].tolist() == [1, 1, 1, 0, 0, 1, 0, 1, 0, 1]
        np.testing.assert_array_equal(bits[10:], NaiveLFSR(7, [1, 7], 5).multiclock(10))

    def test_no_seeds(self):
        assert _drive(NaiveLFSR(7, [1, 7], 0), [], 10).shape == (0,)


class TestBenchmarkResult:
    def test_fastest_skips_failures_and_mismatches(self):
        result = BenchmarkResult(
            [
                _record('slow', 5.0),
                _record('failed', float('nan'), success=False),
                _record('wrong', 0.5, matches=False),
                _record('fast', 1.0),
            ],
            width=7, taps=[1, 7], n_seeds=2, clocks=10,
        )
        assert result.fastest().variant == 'fast'

    def test_fastest_none(self):
        result = BenchmarkResult([_record('wrong', 0.5, matches=False)], 7, [1, 7], 2, 10)
        assert result.fastest() is None

    def test_records_is_copy(self):
        result = BenchmarkResult([_record('a', 1.0)], 7, [1, 7], 2, 10)
        result.records.clear()
        assert len(result.records) == 1

    def test_to_dict(self):
        result = BenchmarkResult([_record('a', 1.0)], 7, (1, 7), 2, 10)
        data = result.to_dict()
        assert data['width'] == 7
        assert data['taps'] == [1, 7]
        assert data['n_seeds'] == 2
        assert data['clocks'] == 10
        assert data['records'][0]['variant'] == 'a'
        assert data['records'][0]['error'] is None

    def test_table(self):
        result = BenchmarkResult(
            [_record('a', 1.0), BenchmarkRecord('b', float('nan'), float('nan'), float('nan'),
                                                 None, False, False, 'RuntimeError: boom')],
            7, [1, 7], 2, 10,
        )
        text = str(result)
        assert 'Variant' in text
        assert 'FAILED' in text and 'boom' in text
        assert repr(result) == 'BenchmarkResult(width=7, taps=(1, 7), records=2)'


class TestBenchmarkVariants:
    def test_all_variants_match(self):
        result = benchmark_variants(13, [1, 10, 11, 13], n_seeds=3, clocks=200, n_warmup=1, n_runs=2)
        names = [r.variant for r in result.records]
        assert names == ['count_ones', 'galois', 'naive', 'pop_cnt']
        for record in result.records:
            assert record.success, record.error
            assert record.matches_reference
            assert record.clocks_per_second > 0
        assert result.fastest() is not None

    def test_variant_subset(self):
        result = benchmark_variants(7, [1, 7], n_seeds=2, clocks=50, variants=['galois'], n_runs=1)
        assert [r.variant for r in result.records] == ['galois']

    def test_failures_are_recorded(self, extra_variants):
        result = benchmark_variants(7, [1, 7], n_seeds=2, clocks=50,
                                    variants=['broken', 'wrong', 'naive'], n_runs=1)
        records = {r.variant: r for r in result.records}
        assert not records['broken'].success
        assert 'broken kernel' in records['broken'].error
        assert math.isnan(records['broken'].mean_ms)
        assert records['wrong'].success and not records['wrong'].matches_reference
        assert result.fastest().variant == 'naive'

    def test_invalid_configuration(self):
        with pytest.raises(TapOutOfRangeError):
            benchmark_variants(7, [8], n_seeds=1, clocks=10)

    def test_unknown_variant(self):
        with pytest.raises(KeyError):
            benchmark_variants(7, [1, 7], n_seeds=1, clocks=10, variants=['does_not_exist'])
