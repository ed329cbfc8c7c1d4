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
Fibonacci register with feedback computed as the parity of the tapped bits.

XOR-folding the tapped bits and taking the population count of
``state & tapmask`` modulo 2 are the same operation, so a single masked
popcount replaces the per-tap loop of :class:`~lfsrkit.NaiveLFSR`.
"""

import numba
import numpy as np

from ._base import LFSR
from ._popcount import popcount_portable, popcount_swar

__all__ = [
    'CountOnesLFSR',
]


@numba.njit(nogil=True)
def count_ones_multiclock(state, tapmask, regmask, shift, out):
    """Clock a register ``out.shape[0]`` times, writing output bits to ``out``.

    All scalar arguments are ``np.uint64``. Returns the final state.
    """
    one = np.uint64(1)
    dead = state & ~regmask
    for i in range(out.shape[0]):
        out[i] = state & one
        feedback = popcount_swar(state & tapmask) & one
        state = dead | ((state & regmask) >> one) | (feedback << shift)
    return state


class CountOnesLFSR(LFSR):
    """Fibonacci register using a portable masked-parity feedback.

    The feedback bit is ``popcount(state & tapmask) & 1``, with the
    population count computed by the portable SWAR bit-trick. O(1) per
    clock regardless of the number of taps. Output is bit-identical to
    :class:`~lfsrkit.NaiveLFSR` for the same ``(width, taps, seed)``.
    """
    __module__ = 'lfsrkit'

    def clock(self) -> int:
        state = self._state
        output_bit = state & 1
        feedback_bit = popcount_portable(state & self._tapmask) & 1
        self._state = self._shifted(state) | (feedback_bit << self._shift)
        return output_bit

    def multiclock(self, clocks: int) -> np.ndarray:
        out = np.empty(self._check_clocks(clocks), dtype=np.uint8)
        if out.shape[0]:
            self._state = int(count_ones_multiclock(
                np.uint64(self._state),
                np.uint64(self._tapmask),
                np.uint64(self._regmask),
                np.uint64(self._shift),
                out,
            ))
        return out
