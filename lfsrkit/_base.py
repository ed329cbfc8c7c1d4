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

import abc
import copy
import operator
from typing import Sequence, Tuple

import numpy as np

from ._tapmask import WORD_MASK, calculate_tapmasks, check_taps, check_width, register_mask

__all__ = [
    'LFSR',
]


class LFSR(abc.ABC):
    """Common contract of every linear-feedback shift register variant.

    A register is built once from ``(width, taps, seed)`` and validated;
    afterwards only its state changes, once per clock. The low bit of the
    state is the next output bit. Bits above ``width`` are never tapped and
    never shifted into the register: they stay fixed for the life of the
    instance.

    Subclasses implement :meth:`clock`. The base :meth:`multiclock` is the
    plain ``clock()`` loop; accelerated variants override it with a
    compiled kernel that must stay observably identical to that loop.

    Parameters
    ----------
    width : int
        Number of bits in the register, in ``[1, WORD_BITS]``.
    taps : sequence of int
        1-indexed tap positions counted from the output end, each in
        ``[1, width]``. Order and duplicates are kept.
    seed : int, optional
        Initial state. Reduced to one machine word. Defaults to ``0``.

    Raises
    ------
    UnsupportedWidthError
        If ``width`` does not fit one machine word or is not positive.
    TapOutOfRangeError
        If a tap lies outside ``[1, width]``.

    Notes
    -----
    Instances are not safe to share between threads without external
    locking. Independent instances share nothing and may be driven from
    separate threads freely.
    """
    __module__ = 'lfsrkit'

    def __init__(self, width: int, taps: Sequence[int], seed: int = 0):
        width = check_width(width)
        # taps may be a one-shot iterable: read it once, then work from the tuple.
        self._taps: Tuple[int, ...] = check_taps(width, taps)
        self._tapmask = calculate_tapmasks(width, self._taps)[0]
        self._width = width
        self._regmask = register_mask(width)
        self._shift = width - 1
        self._state = 0
        self.set(seed)

    # ------------------------------------------------------------------
    # Clocking
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def clock(self) -> int:
        """Advance the register by one step and return the bit shifted out."""

    def multiclock(self, clocks: int) -> np.ndarray:
        """Advance the register ``clocks`` times and collect the output bits.

        Parameters
        ----------
        clocks : int
            Number of steps. ``0`` returns an empty array without touching
            the state.

        Returns
        -------
        np.ndarray
            A ``(clocks,)`` ``uint8`` array of output bits in clock order.
        """
        clocks = self._check_clocks(clocks)
        out = np.empty(clocks, dtype=np.uint8)
        for i in range(clocks):
            out[i] = self.clock()
        return out

    @staticmethod
    def _check_clocks(clocks) -> int:
        clocks = operator.index(clocks)
        if clocks < 0:
            raise ValueError(f'The number of clocks must be non-negative, but got {clocks}.')
        return clocks

    def _shifted(self, state: int) -> int:
        # Shift the register bits right by one, keeping the dead bits in place.
        return (state & ~self._regmask) | ((state & self._regmask) >> 1)

    # ------------------------------------------------------------------
    # State and configuration
    # ------------------------------------------------------------------

    def get(self) -> int:
        """Return the current state."""
        return self._state

    def set(self, value: int):
        """Replace the state. ``value`` is reduced to one machine word."""
        self._state = int(value) & WORD_MASK

    def taps(self) -> Tuple[int, ...]:
        """Return the configured tap positions."""
        return self._taps

    def width(self) -> int:
        """Return the register width in bits."""
        return self._width

    @property
    def tapmask(self) -> int:
        """The tapmask cached at construction."""
        return self._tapmask

    def copy(self) -> 'LFSR':
        """Return an independent register with the same configuration and state."""
        return copy.copy(self)

    # ------------------------------------------------------------------
    # Comparison and display
    # ------------------------------------------------------------------

    def _key(self) -> tuple:
        return self._width, self._taps, self._state

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    __hash__ = None

    def __repr__(self) -> str:
        return (f'{type(self).__name__}(width={self._width}, taps={self._taps}, '
                f'state=0b{self.get():0{self._width}b})')
