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

from lfsrkit import CountOnesLFSR, NaiveLFSR
from lfsrkit._count_ones import count_ones_multiclock
from lfsrkit._test_util import LONG_RUN_CONFIGS


class TestCountOnesLFSR:
    @pytest.mark.parametrize('width,taps,seed', LONG_RUN_CONFIGS)
    def test_matches_naive_clock(self, width, taps, seed):
        naive = NaiveLFSR(width, taps, seed)
        count_ones = CountOnesLFSR(width, taps, seed)
        for _ in range(2 ** 15):
            assert naive.clock() == count_ones.clock()

    @pytest.mark.parametrize('width,taps,seed', LONG_RUN_CONFIGS)
    def test_matches_naive_multiclock(self, width, taps, seed):
        naive = NaiveLFSR(width, taps, seed)
        count_ones = CountOnesLFSR(width, taps, seed)
        np.testing.assert_array_equal(count_ones.multiclock(2 ** 15), naive.multiclock(2 ** 15))
        assert count_ones.get() == naive.get()

    def test_feedback_independent_of_tap_order(self):
        a = CountOnesLFSR(13, [1, 10, 11, 13], 7413)
        b = CountOnesLFSR(13, [13, 11, 10, 1], 7413)
        assert a.tapmask == b.tapmask
        np.testing.assert_array_equal(a.multiclock(1000), b.multiclock(1000))


class TestCountOnesKernel:
    def test_returns_final_state(self):
        out = np.empty(10, dtype=np.uint8)
        state = count_ones_multiclock(
            np.uint64(39), np.uint64(0b1000001), np.uint64(0b1111111), np.uint64(6), out
        )
        assert int(state) == 51
        assert out.tolist() == [1, 1, 1, 0, 0, 1, 0, 1, 0, 1]

    def test_empty_output(self):
        out = np.empty(0, dtype=np.uint8)
        state = count_ones_multiclock(
            np.uint64(39), np.uint64(0b1000001), np.uint64(0b1111111), np.uint64(6), out
        )
        assert int(state) == 39
