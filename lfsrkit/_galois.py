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
Galois-configuration register.

Instead of aggregating the tapped bits into one feedback bit, a Galois
register shifts right and XORs the whole tapmask into the state whenever
the bit shifted out was 1. With the taps mirrored end for end
(``tap -> width - tap + 1``) the output obeys the same linear recurrence
as the Fibonacci register with the original taps, but at a different
phase for the same state. Matching a Fibonacci register bit for bit
therefore also needs the state mapped between the two representations:

* A Fibonacci state holds the next ``width`` output bits, LSB first.
* The Galois state producing those bits is
  ``g_i = f_i ^ XOR_{k < i} (m_k & f_{i-1-k})``, where ``m`` is the
  (mirrored) Galois tapmask.
"""

from typing import Sequence, Tuple

import numba
import numpy as np

from ._base import LFSR
from ._tapmask import check_width, mirror_taps, register_mask

__all__ = [
    'GaloisLFSR',
    'fibonacci_to_galois',
    'galois_to_fibonacci',
]


def fibonacci_to_galois(width: int, tapmask: int, state: int) -> int:
    """Map the low ``width`` bits of a Fibonacci state to a Galois state.

    Parameters
    ----------
    width : int
        Register width.
    tapmask : int
        Galois tapmask, i.e. the mask of the mirrored taps.
    state : int
        Fibonacci state. Bits above ``width`` are ignored.

    Returns
    -------
    int
        The Galois state whose next ``width`` output bits are the low
        ``width`` bits of ``state``.
    """
    galois = 0
    for i in range(width):
        bit = (state >> i) & 1
        for k in range(i):
            bit ^= (tapmask >> k) & (state >> (i - 1 - k)) & 1
        galois |= bit << i
    return galois


def galois_to_fibonacci(width: int, tapmask: int, state: int) -> int:
    """Map the low ``width`` bits of a Galois state to a Fibonacci state.

    The Fibonacci state is the next ``width`` output bits of the Galois
    register, packed LSB first. Inverse of :func:`fibonacci_to_galois`.
    """
    state &= register_mask(width)
    fibonacci = 0
    for i in range(width):
        output_bit = state & 1
        state = (state >> 1) ^ (-output_bit & tapmask)
        fibonacci |= output_bit << i
    return fibonacci


@numba.njit(nogil=True)
def galois_multiclock(state, tapmask, regmask, out):
    """Clock a Galois register ``out.shape[0]`` times, writing output bits to ``out``.

    All scalar arguments are ``np.uint64``. Returns the final state.
    """
    one = np.uint64(1)
    zero = np.uint64(0)
    dead = state & ~regmask
    for i in range(out.shape[0]):
        output_bit = state & one
        out[i] = output_bit
        state = dead | (((state & regmask) >> one) ^ ((zero - output_bit) & tapmask))
    return state


class GaloisLFSR(LFSR):
    """Galois-configuration register.

    On each clock the state shifts right by one and the whole tapmask is
    XORed in when the bit shifted out was 1, branchlessly, as
    ``state ^= -bit & tapmask``.

    The direct constructor takes Galois tap numbering and exposes the raw
    Galois state; its output is a valid LFSR sequence but is not expected
    to match the Fibonacci variants. Use :meth:`fibonacci` for a register
    that is bit-identical to :class:`~lfsrkit.NaiveLFSR`.

    Parameters
    ----------
    width : int
        Number of bits in the register.
    taps : sequence of int
        Galois tap positions, each in ``[1, width]``.
    seed : int, optional
        Initial raw Galois state.

    Examples
    --------
    .. code-block:: python

        >>> import lfsrkit
        >>> fib = lfsrkit.NaiveLFSR(13, [1, 10, 11, 13], 7413)
        >>> gal = lfsrkit.GaloisLFSR.fibonacci(13, [1, 10, 11, 13], 7413)
        >>> gal.taps()
        (1, 10, 11, 13)
        >>> gal.galois_taps()
        (13, 4, 3, 1)
        >>> list(gal.multiclock(16)) == list(fib.multiclock(16))
        True
    """
    __module__ = 'lfsrkit'

    def __init__(self, width: int, taps: Sequence[int], seed: int = 0, *, representation: str = 'galois'):
        if representation not in ('galois', 'fibonacci'):
            raise ValueError(f"The representation must be 'galois' or 'fibonacci', but got {representation!r}.")
        self._fibonacci = representation == 'fibonacci'
        super().__init__(width, taps, seed)

    @classmethod
    def fibonacci(cls, width: int, taps: Sequence[int], seed: int = 0) -> 'GaloisLFSR':
        """Build a Galois register from a Fibonacci-style configuration.

        The taps are validated, then mirrored (``tap -> width - tap + 1``)
        into Galois numbering. ``seed``, and every later :meth:`get` and
        :meth:`set`, use the Fibonacci state representation, so the
        register is bit-identical to ``NaiveLFSR(width, taps, seed)``.

        Raises
        ------
        UnsupportedWidthError
            If ``width`` does not fit one machine word.
        TapOutOfRangeError
            If a tap lies outside ``[1, width]``.
        """
        width = check_width(width)
        galois_taps = mirror_taps(width, taps)
        return cls(width, galois_taps, seed, representation='fibonacci')

    @property
    def representation(self) -> str:
        """``'fibonacci'`` or ``'galois'``: how :meth:`get`/:meth:`set` read the state."""
        return 'fibonacci' if self._fibonacci else 'galois'

    def taps(self) -> Tuple[int, ...]:
        """Return the configured taps.

        Registers built by :meth:`fibonacci` report the Fibonacci taps they
        were given, like every other variant; direct instances report their
        Galois taps.
        """
        return self.fibonacci_taps() if self._fibonacci else self._taps

    def galois_taps(self) -> Tuple[int, ...]:
        """Return the taps in Galois numbering, as applied by :meth:`clock`."""
        return self._taps

    def fibonacci_taps(self) -> Tuple[int, ...]:
        """Return the taps in Fibonacci numbering (the mirror of :meth:`galois_taps`)."""
        return mirror_taps(self._width, self._taps)

    def clock(self) -> int:
        state = self._state
        output_bit = state & 1
        self._state = self._shifted(state) ^ (-output_bit & self._tapmask)
        return output_bit

    def multiclock(self, clocks: int) -> np.ndarray:
        out = np.empty(self._check_clocks(clocks), dtype=np.uint8)
        if out.shape[0]:
            self._state = int(galois_multiclock(
                np.uint64(self._state),
                np.uint64(self._tapmask),
                np.uint64(self._regmask),
                out,
            ))
        return out

    def get(self) -> int:
        if not self._fibonacci:
            return self._state
        dead = self._state & ~self._regmask
        return dead | galois_to_fibonacci(self._width, self._tapmask, self._state)

    def set(self, value: int):
        super().set(value)
        if self._fibonacci:
            dead = self._state & ~self._regmask
            self._state = dead | fibonacci_to_galois(self._width, self._tapmask, self._state)

    def _key(self) -> tuple:
        return super()._key() + (self._fibonacci,)

    def __repr__(self) -> str:
        if not self._fibonacci:
            return super().__repr__()
        return (f'{type(self).__name__}.fibonacci(width={self._width}, '
                f'taps={self.fibonacci_taps()}, state=0b{self.get():0{self._width}b})')
