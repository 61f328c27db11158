"""
Tests for active-variant selection.
"""

import pytest

from snippet_toolkit.core.models import OnlyFlags, Surface, Variant
from snippet_toolkit.state import VariantStateStore, resolve_variant, select

NO_FLAGS = OnlyFlags()
ALL_FLAGS = [
    OnlyFlags(),
    OnlyFlags(desktop_only=True),
    OnlyFlags(mobile_only=True),
    OnlyFlags(desktop_only=True, mobile_only=True),
]


@pytest.fixture
def split_store():
    store = VariantStateStore()
    store.populate(
        common="d()",
        common_original="d()\n@MOBILE\nm()",
        desktop="d()",
        mobile="m()",
    )
    return store


@pytest.fixture
def common_store():
    store = VariantStateStore()
    store.populate(common="print('hi')", common_original="print('hi')\n")
    return store


class TestResolveVariant:
    """Tests for resolve_variant() dispatch."""

    @pytest.mark.parametrize("surface", [None, Surface.DESKTOP, Surface.MOBILE])
    @pytest.mark.parametrize("flags", ALL_FLAGS)
    def test_resolve_when_unsplit_then_common_for_any_input(self, surface, flags):
        assert resolve_variant(False, surface, flags) == (Variant.COMMON, False)

    def test_resolve_when_split_desktop_then_desktop(self):
        assert resolve_variant(True, Surface.DESKTOP, NO_FLAGS) == (Variant.DESKTOP, False)

    def test_resolve_when_split_mobile_then_mobile(self):
        assert resolve_variant(True, Surface.MOBILE, NO_FLAGS) == (Variant.MOBILE, False)

    def test_resolve_when_split_without_surface_then_common_fallback(self):
        assert resolve_variant(True, None, OnlyFlags(mobile_only=True)) == (Variant.COMMON, False)

    def test_resolve_when_mobile_only_then_desktop_suppressed(self):
        flags = OnlyFlags(mobile_only=True)
        assert resolve_variant(True, Surface.DESKTOP, flags) == (Variant.DESKTOP, True)
        assert resolve_variant(True, Surface.MOBILE, flags) == (Variant.MOBILE, False)

    def test_resolve_when_desktop_only_then_mobile_suppressed(self):
        flags = OnlyFlags(desktop_only=True)
        assert resolve_variant(True, Surface.MOBILE, flags) == (Variant.MOBILE, True)
        assert resolve_variant(True, Surface.DESKTOP, flags) == (Variant.DESKTOP, False)


class TestSelect:
    """Tests for select() against a populated store."""

    def test_select_when_desktop_mobile_only_then_blank(self, split_store):
        selection = select(True, Surface.DESKTOP, OnlyFlags(mobile_only=True), split_store)
        assert selection.active_code == ""
        assert selection.variant is Variant.DESKTOP

    def test_select_when_mobile_mobile_only_then_mobile_code(self, split_store):
        selection = select(True, Surface.MOBILE, OnlyFlags(mobile_only=True), split_store)
        assert selection.active_code == "m()"

    def test_select_when_suppressed_then_mutator_still_targets_slot(self, split_store):
        selection = select(True, Surface.DESKTOP, OnlyFlags(mobile_only=True), split_store)
        selection.mutate("d2()")
        assert split_store.get(Variant.DESKTOP) == "d2()"

    def test_select_when_mutate_mobile_then_desktop_untouched(self, split_store):
        select(True, Surface.MOBILE, NO_FLAGS, split_store).mutate("m2()")
        assert split_store.get(Variant.MOBILE) == "m2()"
        assert split_store.get(Variant.DESKTOP) == "d()"

    def test_select_when_reset_desktop_then_restores_normalized_original(self, split_store):
        selection = select(True, Surface.DESKTOP, NO_FLAGS, split_store)
        selection.mutate("X")
        selection.mutate("Y")
        before = split_store.reset_generation
        selection.reset()
        assert split_store.get(Variant.DESKTOP) == "d()"
        assert split_store.reset_generation != before

    def test_select_when_no_surface_on_split_then_common_bound(self, split_store):
        selection = select(True, None, NO_FLAGS, split_store)
        assert selection.active_code == "d()"
        selection.mutate("c()")
        assert split_store.get(Variant.COMMON) == "c()"
        selection.reset()
        assert split_store.get(Variant.COMMON) == "d()\n@MOBILE\nm()"

    @pytest.mark.parametrize("surface", [None, Surface.DESKTOP, Surface.MOBILE])
    def test_select_when_unsplit_then_common_for_any_surface(self, common_store, surface):
        selection = select(False, surface, OnlyFlags(mobile_only=True), common_store)
        assert selection.active_code == "print('hi')"
        assert selection.variant is Variant.COMMON

    def test_select_when_unsplit_reset_then_raw_source(self, common_store):
        selection = select(False, Surface.DESKTOP, NO_FLAGS, common_store)
        selection.mutate("edited")
        selection.reset()
        assert common_store.get(Variant.COMMON) == "print('hi')\n"

    @pytest.mark.parametrize("was_split", [False, True])
    @pytest.mark.parametrize("surface", [None, Surface.DESKTOP, Surface.MOBILE])
    @pytest.mark.parametrize("flags", ALL_FLAGS)
    def test_select_when_store_empty_then_never_raises(self, was_split, surface, flags):
        selection = select(was_split, surface, flags, VariantStateStore())
        assert selection.active_code == ""
