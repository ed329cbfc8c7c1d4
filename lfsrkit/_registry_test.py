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

import json

import pytest

from lfsrkit import CountOnesLFSR, GaloisLFSR, NaiveLFSR, PopCntLFSR
from lfsrkit._registry import (
    _VARIANT_REGISTRY,
    DEFAULT_VARIANT,
    get_all_variant_names,
    get_registry,
    get_variants_by_tags,
    make_lfsr,
    register_variant,
)


class TestRegistry:
    def test_registry_populated_on_import(self):
        """Importing lfsrkit should register every variant."""
        assert get_all_variant_names() == ['count_ones', 'galois', 'naive', 'pop_cnt']

    def test_get_registry_returns_copy(self):
        r1 = get_registry()
        r2 = get_registry()
        assert r1 is not r2
        assert r1 == r2

    def test_get_all_variant_names_sorted(self):
        names = get_all_variant_names()
        assert names == sorted(names)

    def test_get_variants_by_tags(self):
        assert set(get_variants_by_tags({'fibonacci'})) == {'naive', 'count_ones', 'pop_cnt'}
        assert set(get_variants_by_tags({'fibonacci', 'hardware'})) == {'pop_cnt'}
        assert set(get_variants_by_tags({'galois'})) == {'galois'}

    def test_get_variants_by_nonexistent_tag(self):
        assert len(get_variants_by_tags({'nonexistent_tag_xyz'})) == 0

    def test_register_variant_overwrites(self):
        old = _VARIANT_REGISTRY['naive']
        try:
            register_variant('naive', CountOnesLFSR, tags=('fibonacci',))
            assert isinstance(make_lfsr(7, [1, 7], 1, variant='naive'), CountOnesLFSR)
        finally:
            _VARIANT_REGISTRY['naive'] = old
        assert type(make_lfsr(7, [1, 7], 1, variant='naive')) is NaiveLFSR

    def test_tags_are_frozen(self):
        for info in get_registry().values():
            assert isinstance(info.tags, frozenset)


class TestMakeLFSR:
    @pytest.mark.parametrize('variant,cls', [
        ('naive', NaiveLFSR),
        ('count_ones', CountOnesLFSR),
        ('pop_cnt', PopCntLFSR),
        ('galois', GaloisLFSR),
    ])
    def test_variant_classes(self, variant, cls):
        assert type(make_lfsr(7, [1, 7], 1, variant=variant)) is cls

    def test_galois_uses_fibonacci_representation(self):
        lfsr = make_lfsr(13, [1, 10, 11, 13], 7413, variant='galois')
        assert lfsr.representation == 'fibonacci'
        assert lfsr.taps() == (1, 10, 11, 13)
        assert lfsr.get() == 7413

    def test_default_variant(self):
        assert type(make_lfsr(7, [1, 7], 1)) is _VARIANT_REGISTRY[DEFAULT_VARIANT].factory

    def test_default_variant_is_count_ones(self):
        assert DEFAULT_VARIANT == 'count_ones'
        assert type(make_lfsr(13, [1, 10, 11, 13], 7413)) is CountOnesLFSR

    def test_default_ignores_files_on_disk(self, tmp_path, monkeypatch):
        defaults = tmp_path / 'lfsrkit' / 'defaults.json'
        defaults.parent.mkdir()
        defaults.write_text(json.dumps({'schema_version': 1, 'defaults': {'13': 'galois'}}))
        monkeypatch.setenv('XDG_CONFIG_HOME', str(tmp_path))
        monkeypatch.setenv('APPDATA', str(tmp_path))
        assert type(make_lfsr(13, [1, 10, 11, 13], 7413)) is CountOnesLFSR

    def test_unknown_variant(self):
        with pytest.raises(KeyError, match='count_ones'):
            make_lfsr(7, [1, 7], 1, variant='does_not_exist')
