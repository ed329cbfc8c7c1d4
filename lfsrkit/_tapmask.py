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

"""Tapmask construction and register configuration checks.

A tapmask has bit ``tap - 1`` set for every tap, so that the tapped bits
of a state can be selected with a single ``&``. Masks are laid out one per
machine word; registers currently accept only widths that fit in one word.
"""

import operator
from typing import Sequence, Tuple

import numpy as np

from ._error import TapOutOfRangeError, UnsupportedWidthError

__all__ = [
    'WORD_BITS',
    'WORD_MASK',
    'check_width',
    'check_taps',
    'calculate_tapmasks',
    'calculate_tapmask',
    'mirror_taps',
    'register_mask',
]

WORD_BITS: int = np.iinfo(np.uintp).bits
WORD_MASK: int = (1 << WORD_BITS) - 1


def check_width(width, word_bits: int = WORD_BITS) -> int:
    """Validate a register width against the native word size.

    Parameters
    ----------
    width : int
        Number of bits in the register.
    word_bits : int, optional
        Bit count of the native word. Defaults to :data:`WORD_BITS`.

    Returns
    -------
    int
        The width as a plain ``int``.

    Raises
    ------
    UnsupportedWidthError
        If ``width`` is not an integer in ``[1, word_bits]``.
    """
    try:
        width = operator.index(width)
    except TypeError:
        raise UnsupportedWidthError(width, word_bits) from None
    if not 1 <= width <= word_bits:
        raise UnsupportedWidthError(width, word_bits)
    return width


def check_taps(width: int, taps: Sequence[int]) -> Tuple[int, ...]:
    """Validate tap positions against a register width.

    Parameters
    ----------
    width : int
        Number of bits in the register.
    taps : sequence of int
        1-indexed tap positions. Order and duplicates are preserved.

    Returns
    -------
    tuple of int
        The taps as plain ``int`` values.

    Raises
    ------
    TapOutOfRangeError
        For the first tap outside ``[1, width]``.
    """
    checked = []
    for tap in taps:
        try:
            value = operator.index(tap)
        except TypeError:
            raise TapOutOfRangeError(tap, width) from None
        if not 1 <= value <= width:
            raise TapOutOfRangeError(value, width)
        checked.append(value)
    return tuple(checked)


def calculate_tapmasks(width: int, taps: Sequence[int], word_bits: int = WORD_BITS) -> Tuple[int, ...]:
    """Build the per-word tapmasks for a register.

    Bit ``(tap - 1) % word_bits`` of word ``(tap - 1) // word_bits`` is
    toggled for every tap. Toggling makes a duplicated tap pair cancel,
    exactly as the pair cancels in a per-tap XOR fold.

    Parameters
    ----------
    width : int
        Number of bits in the register.
    taps : sequence of int
        1-indexed tap positions.
    word_bits : int, optional
        Bit count of one mask word. Defaults to :data:`WORD_BITS`.

    Returns
    -------
    tuple of int
        ``ceil(width / word_bits)`` mask words, least-significant word first.

    Raises
    ------
    TapOutOfRangeError
        If any tap lies outside ``[1, width]``.

    Examples
    --------
    .. code-block:: python

        >>> calculate_tapmasks(7, [1, 7])
        (65,)
        >>> calculate_tapmasks(7, [2, 2])
        (0,)
    """
    taps = check_taps(width, taps)
    masks = [0] * (-(-width // word_bits))
    for tap in taps:
        word, bit = divmod(tap - 1, word_bits)
        masks[word] ^= 1 << bit
    return tuple(masks)


def calculate_tapmask(width: int, taps: Sequence[int]) -> int:
    """Validate ``(width, taps)`` and return the single-word tapmask.

    Raises
    ------
    UnsupportedWidthError
        If ``width`` does not fit one machine word.
    TapOutOfRangeError
        If any tap lies outside ``[1, width]``.
    """
    width = check_width(width)
    return calculate_tapmasks(width, taps)[0]


def mirror_taps(width: int, taps: Sequence[int]) -> Tuple[int, ...]:
    """Mirror tap positions end for end: ``tap -> width - tap + 1``.

    Taps are validated before mirroring, since an out-of-range tap can
    mirror onto an in-range (or non-positive) position.
    """
    return tuple(width - tap + 1 for tap in check_taps(width, taps))


def register_mask(width: int) -> int:
    """Return the mask of the ``width`` bits addressed by a register."""
    return (1 << width) - 1
