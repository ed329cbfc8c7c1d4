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

from ._base import LFSR

__all__ = [
    'NaiveLFSR',
]


class NaiveLFSR(LFSR):
    """Fibonacci register computing feedback one tap at a time.

    The feedback bit is the XOR of ``(state >> (tap - 1)) & 1`` over every
    tap, and is shifted into bit ``width - 1``. This is the reference
    semantics every other variant is checked against. O(taps) per clock.

    Examples
    --------
    .. code-block:: python

        >>> import lfsrkit
        >>> lfsr = lfsrkit.NaiveLFSR(7, [1, 7], 0b100111)
        >>> [lfsr.clock() for _ in range(8)]
        [1, 1, 1, 0, 0, 1, 0, 1]
    """
    __module__ = 'lfsrkit'

    def clock(self) -> int:
        state = self._state
        output_bit = state & 1
        feedback_bit = 0
        for tap in self._taps:
            feedback_bit ^= (state >> (tap - 1)) & 1
        self._state = self._shifted(state) | (feedback_bit << self._shift)
        return output_bit
