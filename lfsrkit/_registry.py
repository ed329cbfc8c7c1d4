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

"""Registry of interchangeable register variants.

Every entry builds a register from a Fibonacci-style ``(width, taps, seed)``
configuration, so that callers comparing or benchmarking variants can hold
a variant name and the :class:`~lfsrkit.LFSR` contract rather than a
concrete class.
"""

from typing import Callable, Dict, FrozenSet, Iterable, List, NamedTuple, Optional, Sequence, Set

from ._base import LFSR
from ._count_ones import CountOnesLFSR
from ._galois import GaloisLFSR
from ._naive import NaiveLFSR
from ._pop_cnt import PopCntLFSR

__all__ = [
    'VariantInfo',
    'DEFAULT_VARIANT',
    'register_variant',
    'get_registry',
    'get_variants_by_tags',
    'get_all_variant_names',
    'make_lfsr',
]

DEFAULT_VARIANT = 'count_ones'


class VariantInfo(NamedTuple):
    name: str
    factory: Callable[..., LFSR]
    tags: FrozenSet[str]


_VARIANT_REGISTRY: Dict[str, VariantInfo] = {}


def register_variant(name: str, factory: Callable[..., LFSR], tags: Iterable[str] = ()):
    """Register a register variant under ``name``.

    Parameters
    ----------
    name : str
        The unique variant name. Registering an existing name replaces it.
    factory : callable
        ``factory(width, taps, seed) -> LFSR`` taking Fibonacci-style taps.
    tags : iterable of str, optional
        Labels used by :func:`get_variants_by_tags`.
    """
    _VARIANT_REGISTRY[name] = VariantInfo(name, factory, frozenset(tags))


def get_registry() -> Dict[str, VariantInfo]:
    """Return a copy of the full variant registry."""
    return dict(_VARIANT_REGISTRY)


def get_variants_by_tags(tags: Set[str]) -> Dict[str, VariantInfo]:
    """Return the variants that carry all of the given tags."""
    return {
        name: info
        for name, info in _VARIANT_REGISTRY.items()
        if set(tags).issubset(info.tags)
    }


def get_all_variant_names() -> List[str]:
    """Return a sorted list of all registered variant names."""
    return sorted(_VARIANT_REGISTRY.keys())


def make_lfsr(
    width: int,
    taps: Sequence[int],
    seed: int = 0,
    variant: Optional[str] = None,
) -> LFSR:
    """Build a register of the named variant.

    Parameters
    ----------
    width : int
        Number of bits in the register.
    taps : sequence of int
        Fibonacci-style tap positions.
    seed : int, optional
        Initial (Fibonacci) state.
    variant : str, optional
        Registered variant name. Defaults to :data:`DEFAULT_VARIANT`.

    Returns
    -------
    LFSR
        A new register. Every variant yields the same output sequence and
        reports the given ``taps`` from :meth:`~lfsrkit.LFSR.taps`.

    Raises
    ------
    KeyError
        If ``variant`` is not registered.
    UnsupportedWidthError, TapOutOfRangeError
        If the configuration is invalid.

    Examples
    --------
    .. code-block:: python

        >>> import lfsrkit
        >>> lfsr = lfsrkit.make_lfsr(7, [1, 7], 0b100111, variant='galois')
        >>> lfsr.multiclock(4).tolist()
        [1, 1, 1, 0]
    """
    if variant is None:
        variant = DEFAULT_VARIANT
    try:
        info = _VARIANT_REGISTRY[variant]
    except KeyError:
        raise KeyError(
            f'Unknown LFSR variant {variant!r}. Available variants: {get_all_variant_names()}.'
        ) from None
    return info.factory(width, taps, seed)


register_variant('naive', NaiveLFSR, tags=('fibonacci', 'reference'))
register_variant('count_ones', CountOnesLFSR, tags=('fibonacci', 'portable'))
register_variant('pop_cnt', PopCntLFSR, tags=('fibonacci', 'hardware'))
register_variant('galois', GaloisLFSR.fibonacci, tags=('galois',))
