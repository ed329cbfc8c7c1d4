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

from typing import Sequence

import numba
import numpy as np

from ._count_ones import CountOnesLFSR
from ._popcount import popcount_hardware, use_hardware_popcount

__all__ = [
    'PopCntLFSR',
]


@numba.njit(nogil=True)
def pop_cnt_clock(state, tapmask, regmask, shift):
    one = np.uint64(1)
    output_bit = state & one
    feedback = popcount_hardware(state & tapmask) & one
    state = (state & ~regmask) | ((state & regmask) >> one) | (feedback << shift)
    return output_bit, state


@numba.njit(nogil=True)
def pop_cnt_multiclock(state, tapmask, regmask, shift, out):
    one = np.uint64(1)
    dead = state & ~regmask
    for i in range(out.shape[0]):
        out[i] = state & one
        feedback = popcount_hardware(state & tapmask) & one
        state = dead | ((state & regmask) >> one) | (feedback << shift)
    return state

class PopCntLFSR(CountOnesLFSR):
    """Fibonacci register using the CPU population count instruction.

    Same algorithm as :class:`~lfsrkit.CountOnesLFSR`, with the parity of
    ``state & tapmask`` taken from the hardware instruction. The backend is
    resolved once, at construction; when the host has no instruction the
    inherited portable path is used instead, with identical output.

    Parameters
    ----------
    width : int
        Number of bits in the register.
    taps : sequence of int
        Fibonacci tap positions, each in ``[1, width]``.
    seed : int, optional
        Initial state.
    backend : {'auto', 'hardware', 'portable'}, optional
        Population count backend, see
        :func:`~lfsrkit._popcount.use_hardware_popcount`. Defaults to
        ``'auto'``.

    Attributes
    ----------
    hardware : bool
        Whether this instance uses the hardware instruction.
    """
    __module__ = 'lfsrkit'

    def __init__(self, width: int, taps: Sequence[int], seed: int = 0, *, backend: str = 'auto'):
        super().__init__(width, taps, seed)
        self._hardware = use_hardware_popcount(backend)

    @property
    def hardware(self) -> bool:
        return self._hardware

    def clock(self) -> int:
        if not self._hardware:
            return super().clock()
        output_bit, state = pop_cnt_clock(
            np.uint64(self._state),
            np.uint64(self._tapmask),
            np.uint64(self._regmask),
            np.uint64(self._shift),
        )
        self._state = int(state)
        return int(output_bit)

    def multiclock(self, clocks: int) -> np.ndarray:
        if not self._hardware:
            return super().multiclock(clocks)
        out = np.empty(self._check_clocks(clocks), dtype=np.uint8)
        if out.shape[0]:
            self._state = int(pop_cnt_multiclock(
                np.uint64(self._state),
                np.uint64(self._tapmask),
                np.uint64(self._regmask),
                np.uint64(self._shift),
                out,
            ))
        return out
