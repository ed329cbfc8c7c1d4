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
Population count over one 64-bit word.

Three implementations of the same function are provided:

* ``popcount_portable``: the SWAR bit-trick in plain Python.
* ``popcount_swar``: the same bit-trick as a ``@numba.njit`` function
  on ``np.uint64`` values, for use inside compiled kernels.
* ``popcount_hardware``: a numba intrinsic emitting ``llvm.ctpop``, which
  LLVM lowers to the CPU's population count instruction.

Whether the hardware path should be used is decided by
:func:`use_hardware_popcount`, combining the host CPU capability with the
backend a register was asked to use.
"""

import functools
import platform
import warnings

import numba
import numpy as np
from llvmlite import binding as llvm
from numba import types
from numba.extending import intrinsic

__all__ = [
    'POPCOUNT_BACKENDS',
    'popcount_portable',
    'popcount_swar',
    'popcount_hardware',
    'hardware_popcount_available',
    'use_hardware_popcount',
]

_M1 = 0x5555555555555555
_M2 = 0x3333333333333333
_M4 = 0x0F0F0F0F0F0F0F0F
_H01 = 0x0101010101010101
_MASK64 = 0xFFFFFFFFFFFFFFFF

POPCOUNT_BACKENDS = ('auto', 'hardware', 'portable')

# LLVM feature enabling a single-instruction ctpop, per machine name.
_POPCOUNT_FEATURES = {
    'x86_64': 'popcnt',
    'amd64': 'popcnt',
    'i386': 'popcnt',
    'i686': 'popcnt',
    'x86': 'popcnt',
    'aarch64': 'neon',
    'arm64': 'neon',
    'ppc64le': 'popcntd',
    'ppc64': 'popcntd',
}


def popcount_portable(value: int) -> int:
    """Count the set bits of a 64-bit word with the SWAR bit-trick.

    Bits are summed pairwise, then per nibble, then per byte, and the
    byte sums are gathered into the top byte by one multiplication.

    Parameters
    ----------
    value : int
        A non-negative integer below ``2**64``.

    Returns
    -------
    int
        The number of set bits in ``value``.
    """
    value = value - ((value >> 1) & _M1)
    value = (value & _M2) + ((value >> 2) & _M2)
    value = (value + (value >> 4)) & _M4
    return ((value * _H01) & _MASK64) >> 56


@numba.njit(inline='always')
def popcount_swar(value):
    """Count the set bits of a ``np.uint64`` with the SWAR bit-trick."""
    value = value - ((value >> np.uint64(1)) & np.uint64(_M1))
    value = (value & np.uint64(_M2)) + ((value >> np.uint64(2)) & np.uint64(_M2))
    value = (value + (value >> np.uint64(4))) & np.uint64(_M4)
    return (value * np.uint64(_H01)) >> np.uint64(56)


@intrinsic
def popcount_hardware(typingctx, value):
    """Count the set bits of an integer with ``llvm.ctpop``.

    Only callable from numba-compiled code. The result has the type of the
    argument.
    """
    if not isinstance(value, types.Integer):
        return None
    sig = value(value)

    def codegen(context, builder, signature, args):
        return builder.ctpop(args[0])

    return sig, codegen


@functools.lru_cache(maxsize=None)
def hardware_popcount_available() -> bool:
    """Return whether the host CPU exposes a population count instruction.

    The answer is read once per process from the CPU feature map LLVM
    reports for the host.

    Returns
    -------
    bool
        ``False`` on architectures without a known instruction, or when the
        feature map cannot be read.
    """
    feature = _POPCOUNT_FEATURES.get(platform.machine().lower())
    if feature is None:
        return False
    try:
        features = llvm.get_host_cpu_features()
    except RuntimeError:
        return False
    return bool(features.get(feature, False))


def use_hardware_popcount(backend: str = 'auto') -> bool:
    """Resolve a popcount backend against the host capability.

    Parameters
    ----------
    backend : {'auto', 'hardware', 'portable'}
        ``'auto'`` uses the CPU instruction when the host exposes one,
        ``'hardware'`` requests it, and ``'portable'`` always uses the
        software bit-trick.

    Returns
    -------
    bool
        ``True`` if :func:`popcount_hardware` should be used.

    Warns
    -----
    RuntimeWarning
        If the ``'hardware'`` backend was requested but the host has no
        population count instruction; the portable path is used instead.

    Raises
    ------
    ValueError
        If ``backend`` is not one of :data:`POPCOUNT_BACKENDS`.
    """
    if backend not in POPCOUNT_BACKENDS:
        raise ValueError(f'The popcount backend must be one of {POPCOUNT_BACKENDS}, but got {backend!r}.')
    if backend == 'portable':
        return False
    available = hardware_popcount_available()
    if backend == 'hardware' and not available:
        warnings.warn(
            f"lfsrkit: No hardware population count instruction on "
            f"'{platform.machine()}'. Falling back to the portable implementation.",
            RuntimeWarning,
            stacklevel=3,
        )
    return available
