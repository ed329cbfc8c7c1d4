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


__all__ = [
    'LFSRConfigurationError',
    'UnsupportedWidthError',
    'TapOutOfRangeError',
]


class LFSRConfigurationError(ValueError):
    """Base exception for invalid register configurations.

    Raised while constructing a register (or building its tapmask) when
    the ``(width, taps)`` pair cannot be simulated. Once a register has
    been constructed no operation on it raises this exception.

    See Also
    --------
    UnsupportedWidthError : The register width cannot be represented.
    TapOutOfRangeError : A tap addresses a bit outside the register.

    Examples
    --------
    .. code-block:: python

        >>> import lfsrkit
        >>> try:
        ...     lfsrkit.NaiveLFSR(7, [8])
        ... except lfsrkit.LFSRConfigurationError as e:
        ...     print(type(e).__name__)
        TapOutOfRangeError
    """
    __module__ = 'lfsrkit'


class UnsupportedWidthError(LFSRConfigurationError):
    """Raised when the register width does not fit one machine word.

    Every register variant keeps its state and tapmask in a single native
    unsigned word, so ``width`` must lie in ``[1, word_bits]``. A width of
    zero is degenerate (there is no bit to feed back into) and is rejected
    as well.

    Parameters
    ----------
    width : int
        The requested register width.
    word_bits : int
        The number of bits in the native word.

    Attributes
    ----------
    width : int
        The offending width.
    word_bits : int
        The native word size the width was checked against.

    See Also
    --------
    TapOutOfRangeError : Raised for taps outside ``[1, width]``.
    """
    __module__ = 'lfsrkit'

    def __init__(self, width, word_bits: int):
        self.width = width
        self.word_bits = word_bits
        super().__init__(
            f'Unsupported register width {width!r}: width must be an integer '
            f'between 1 and {word_bits} (one machine word).'
        )


class TapOutOfRangeError(LFSRConfigurationError):
    """Raised when a tap position lies outside ``[1, width]``.

    Taps are 1-indexed bit positions counted from the least-significant
    (output) end of the register.

    Parameters
    ----------
    tap : int
        The offending tap position.
    width : int
        The register width the tap was checked against.

    Attributes
    ----------
    tap : int
        The offending tap position.
    width : int
        The register width.

    See Also
    --------
    UnsupportedWidthError : Raised when the width itself is invalid.
    """
    __module__ = 'lfsrkit'

    def __init__(self, tap, width: int):
        self.tap = tap
        self.width = width
        super().__init__(
            f'Tap {tap!r} out of range for a register of width {width}: '
            f'taps must lie between 1 and {width}.'
        )
