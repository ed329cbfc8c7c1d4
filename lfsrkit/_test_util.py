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

import random

from ._tapmask import WORD_BITS

# (width, taps, seed, expected first output bits)
KNOWN_SEQUENCES = [
    (7, [1, 7], 0b100111,
     [1, 1, 1, 0, 0, 1, 0, 1, 0, 1, 1, 1, 0, 0, 1, 1, 0, 1, 0, 0, 0, 1, 0, 0,
      1, 1, 1, 1, 0, 0, 0, 1, 0, 1, 0]),
    (11, [1, 10], 0b101101101,
     [1, 0, 1, 1, 0, 1, 1, 0, 1, 0, 0, 1, 0, 0, 1, 0, 0, 1, 0, 0, 0, 0, 1, 0,
      1, 1, 1, 1, 0, 1, 0, 1, 0, 0, 0, 1, 1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 1, 1,
      1, 1, 1, 0, 1, 0, 1]),
    (13, [1, 10, 11, 13], 7413,
     [1, 0, 1, 0, 1, 1, 1, 1, 0, 0, 1, 1, 1, 1, 1, 0, 0, 1, 1, 0, 0, 0, 1, 0,
      1, 1, 1, 1, 1, 1, 0, 1, 1, 0, 1, 0, 1, 1, 1, 1, 0, 1, 0, 1, 1, 1, 0, 1,
      1, 1, 1, 0, 1, 1, 1, 0, 1, 0, 0, 1, 1, 0, 0, 1, 0]),
]

# Configurations the Galois register must reproduce for a full 2**15 clocks.
LONG_RUN_CONFIGS = [
    (7, [1, 2], 44),
    (11, [1, 10], 0b101101101),
    (13, [1, 10, 11, 13], 7413),
]


def random_configs(count, seed=2026, max_width=WORD_BITS):
    """Return ``count`` random valid ``(width, taps, seed)`` triples."""
    rng = random.Random(seed)
    configs = []
    for _ in range(count):
        width = rng.randint(1, max_width)
        taps = [rng.randint(1, width) for _ in range(rng.randint(0, 6))]
        configs.append((width, taps, rng.getrandbits(width)))
    return configs
