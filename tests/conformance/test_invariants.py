"""
Storage Invariant Conformance Tests

INVARIANT: For every outfit group, at all times:
    ∀ (outfit, wear) stored: quantity > 0
    ∀ outfit stored: its wear bucket is non-empty
    get_total_count(outfit) = Σ_wear quantity(outfit, wear)

These tests drive arbitrary sequences of add / remove / transfer /
increment_wear calls and check the invariants after every step.
"""

from hypothesis import given, settings, note
from hypothesis import strategies as st

from outfit_ledger import OutfitGroup, NO_WEAR

from .strategies import (
    CATALOG, LASER, stock_layout, operation, catalog_entries, counts, wears,
    build_group, apply_operation, violations,
)


class TestInvariantPreservation:
    """Property-based tests for the storage invariants."""

    @given(stock_layout(), stock_layout(), st.lists(st.tuples(st.booleans(), operation()), max_size=40))
    @settings(max_examples=150)
    def test_invariants_hold_for_arbitrary_sequences(self, layout_a, layout_b, steps):
        """
        PROPERTY: No sequence of operations leaves a zero, negative, or empty entry.
        """
        a = build_group(layout_a, "a")
        b = build_group(layout_b, "b")
        for on_a, op in steps:
            group, partner = (a, b) if on_a else (b, a)
            note(f"{group.name}: {op}")
            apply_operation(group, partner, op)
            assert violations(a) == []
            assert violations(b) == []

    @given(stock_layout())
    @settings(max_examples=100)
    def test_total_count_is_sum_of_levels(self, layout):
        group = build_group(layout)
        for item in CATALOG:
            expected = sum(count for entry, count, _ in layout if entry is item)
            assert group.get_total_count(item) == expected
            assert sum((group.find(item) or {}).values()) == expected

    @given(stock_layout())
    @settings(max_examples=100)
    def test_min_max_wear_bound_every_level(self, layout):
        group = build_group(layout)
        for item in CATALOG:
            held = group.find(item)
            if held is None:
                assert group.get_min_wear(item) == NO_WEAR
                assert group.get_max_wear(item) == NO_WEAR
            else:
                assert group.get_min_wear(item) == min(held)
                assert group.get_max_wear(item) == max(held)

    @given(stock_layout())
    @settings(max_examples=100)
    def test_iteration_is_canonical(self, layout):
        """
        PROPERTY: Iteration visits outfits in handle order, wear ascending within each.
        """
        group = build_group(layout)
        keys = [(id(item), wear) for item, wear, _ in group]
        assert keys == sorted(keys)
        assert len(keys) == len(set(keys))


class TestRoundTrip:

    @given(stock_layout(), counts, wears, st.booleans())
    @settings(max_examples=100)
    def test_add_then_remove_restores_group(self, layout, count, wear, most_worn_first):
        """
        PROPERTY: add_outfit(T, n, w) followed by remove_outfit(T, n, order)
        restores a group that held no T.
        """
        group = build_group([entry for entry in layout if entry[0] is not LASER])
        before = group.clone()
        group.add_outfit(LASER, count, wear)
        assert group.remove_outfit(LASER, count, most_worn_first) == count
        assert group == before

    @given(stock_layout(), catalog_entries, counts, wears)
    @settings(max_examples=100)
    def test_negative_add_undoes_add(self, layout, item, count, wear):
        group = build_group(layout)
        before = group.clone()
        group.add_outfit(item, count, wear)
        group.add_outfit(item, -count, wear)
        assert group == before

    @given(stock_layout(), st.integers(min_value=0, max_value=100))
    @settings(max_examples=100)
    def test_increment_wear_shifts_without_loss(self, layout, delta):
        """
        PROPERTY: increment_wear neither loses nor duplicates units.
        """
        group = build_group(layout)
        before = {item: group.find(item) for item in group.outfits()}
        group.increment_wear(delta)
        for item, held in before.items():
            assert group.find(item) == {wear + delta: quantity for wear, quantity in held.items()}
        assert set(group.outfits()) == set(before)

    @given(stock_layout())
    @settings(max_examples=50)
    def test_clear_empties(self, layout):
        group = build_group(layout)
        group.clear()
        assert group.empty()
        assert group == OutfitGroup()
