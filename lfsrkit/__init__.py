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

__version__ = "0.1.0"

from ._base import LFSR
from ._benchmark import BenchmarkRecord, BenchmarkResult, benchmark_variants
from ._count_ones import CountOnesLFSR
from ._error import LFSRConfigurationError, TapOutOfRangeError, UnsupportedWidthError
from ._galois import GaloisLFSR, fibonacci_to_galois, galois_to_fibonacci
from ._naive import NaiveLFSR
from ._pop_cnt import PopCntLFSR
from ._popcount import POPCOUNT_BACKENDS, hardware_popcount_available
from ._registry import (
    DEFAULT_VARIANT,
    get_all_variant_names,
    get_registry,
    get_variants_by_tags,
    make_lfsr,
    register_variant,
)
from ._tapmask import WORD_BITS, calculate_tapmask, calculate_tapmasks, mirror_taps

__all__ = [

    # --- register contract and variants --- #
    'LFSR',
    'NaiveLFSR',
    'CountOnesLFSR',
    'PopCntLFSR',
    'GaloisLFSR',

    # --- tapmask builder --- #
    'WORD_BITS',
    'calculate_tapmask',
    'calculate_tapmasks',
    'mirror_taps',
    'fibonacci_to_galois',
    'galois_to_fibonacci',

    # --- errors --- #
    'LFSRConfigurationError',
    'UnsupportedWidthError',
    'TapOutOfRangeError',

    # --- variant registry --- #
    'DEFAULT_VARIANT',
    'register_variant',
    'get_registry',
    'get_variants_by_tags',
    'get_all_variant_names',
    'make_lfsr',
    'hardware_popcount_available',
    'POPCOUNT_BACKENDS',

    # --- benchmarking --- #
    'BenchmarkRecord',
    'BenchmarkResult',
    'benchmark_variants',

]
