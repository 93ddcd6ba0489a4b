"""
wear_bucket.py - Ordered wear -> quantity map for one outfit type

A WearBucket keeps the wear levels of a single outfit type in ascending
order next to the quantity held at each level. Zero quantities are never
stored: a delta that brings a level to zero deletes that level.

Wear levels are kept in a sorted list maintained with bisect, so ordered
traversal in either direction needs no sorting.
"""

from __future__ import annotations
from bisect import bisect_left, insort
from typing import Dict, Iterator, List, Optional, Tuple

from .core import Wear, Quantity, WearMap, NO_WEAR, InsufficientStock


class WearBucket:
    """
    Quantities of one outfit type, keyed by wear level in ascending order.

    Invariant: every stored quantity is a positive integer.
    """

    __slots__ = ('_wears', '_quantities')

    def __init__(self, quantities: Optional[WearMap] = None):
        self._wears: List[Wear] = []
        self._quantities: Dict[Wear, Quantity] = {}
        if quantities:
            for wear, quantity in quantities.items():
                self.add(wear, quantity)

    # ========================================================================
    # READ ACCESS
    # ========================================================================

    def __len__(self) -> int:
        return len(self._wears)

    def __bool__(self) -> bool:
        return bool(self._wears)

    def __contains__(self, wear: Wear) -> bool:
        return wear in self._quantities

    def __getitem__(self, wear: Wear) -> Quantity:
        return self._quantities[wear]

    def __iter__(self) -> Iterator[Wear]:
        return iter(list(self._wears))

    def __eq__(self, other) -> bool:
        if not isinstance(other, WearBucket):
            return NotImplemented
        return self._quantities == other._quantities

    __hash__ = None

    def get(self, wear: Wear) -> Quantity:
        """Quantity held at a wear level (0 if none)."""
        return self._quantities.get(wear, 0)

    def wear_at(self, index: int) -> Wear:
        """The index-th wear level in ascending order."""
        return self._wears[index]

    def wears(self, most_worn_first: bool = False) -> List[Wear]:
        """Wear levels, ascending, or descending when most_worn_first."""
        if most_worn_first:
            return self._wears[::-1]
        return list(self._wears)

    def items(self) -> List[Tuple[Wear, Quantity]]:
        """(wear, quantity) pairs in ascending wear order."""
        return [(wear, self._quantities[wear]) for wear in self._wears]

    def to_dict(self) -> WearMap:
        """Copy as a plain dict whose iteration order is ascending wear."""
        return {wear: self._quantities[wear] for wear in self._wears}

    def total(self) -> Quantity:
        """Sum of quantities across all wear levels."""
        return sum(self._quantities.values())

    @property
    def min_wear(self) -> Wear:
        return self._wears[0] if self._wears else NO_WEAR

    @property
    def max_wear(self) -> Wear:
        return self._wears[-1] if self._wears else NO_WEAR

    # ========================================================================
    # MUTATION
    # ========================================================================

    def add(self, wear: Wear, count: Quantity) -> Quantity:
        """
        Change the quantity at one wear level by count.

        Returns:
            The resulting quantity at that wear level (0 means the level was removed)

        Raises:
            InsufficientStock: If count would take the level below zero. The
                bucket is left unchanged.
        """
        if not count:
            return self._quantities.get(wear, 0)
        current = self._quantities.get(wear)
        held = current or 0
        if held + count < 0:
            raise InsufficientStock(f"cannot remove {-count} at wear {wear}, only {held} held")
        if current is None:
            self._quantities[wear] = count
            insort(self._wears, wear)
            return count
        updated = current + count
        if updated:
            self._quantities[wear] = updated
        else:
            del self._quantities[wear]
            del self._wears[bisect_left(self._wears, wear)]
        return updated

    def shifted(self, delta: Wear) -> WearBucket:
        """
        A new bucket with every wear level moved by delta.

        Quantities landing on the same wear level are summed.
        """
        moved = WearBucket()
        for wear in self._wears:
            moved.add(wear + delta, self._quantities[wear])
        return moved

    def copy(self) -> WearBucket:
        duplicate = WearBucket()
        duplicate._wears = list(self._wears)
        duplicate._quantities = dict(self._quantities)
        return duplicate

    def __repr__(self) -> str:
        return f"WearBucket({self.to_dict()})"
