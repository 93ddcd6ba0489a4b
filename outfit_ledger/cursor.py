"""
cursor.py - Flattening cursor over an OutfitGroup

Walks the two-level {outfit: {wear: quantity}} structure of an OutfitGroup
as one ordered sequence of (outfit, wear, quantity) entries: outfits in
canonical handle order, wear levels ascending within each outfit.

A cursor is either positioned at (outfit, wear level) or at the end; the
end is an explicit state rather than a sentinel position. Any mutation of
the group after the cursor was created invalidates it.

Provides:
- StockEntry: one (outfit, wear, quantity) entry
- OutfitCursor: the cursor, usable as a Python iterator
- format_percent: rendering used by the cost-ratio display helper
"""

from __future__ import annotations
from decimal import Decimal
from typing import TYPE_CHECKING, List, NamedTuple, Optional, Tuple

from .core import (
    OutfitType, Wear, Quantity, MONEY_ROUNDING,
    CursorExhausted, CursorInvalidated,
)
from .depreciation import cost, effective_multiplier, ONE

if TYPE_CHECKING:
    from .outfit_group import OutfitGroup
    from .wear_bucket import WearBucket


class StockEntry(NamedTuple):
    """One (outfit, wear, quantity) entry of an outfit group."""
    outfit: OutfitType
    wear: Wear
    quantity: Quantity


def format_percent(part: int, whole: int) -> str:
    """
    Render part/whole as a whole percentage, e.g. "63%".

    A zero whole renders as "100%": an outfit with no base cost has
    nothing to lose to wear.
    """
    if not whole:
        return "100%"
    percent = (Decimal(100) * Decimal(part) / Decimal(whole)).quantize(ONE, rounding=MONEY_ROUNDING)
    return f"{int(percent)}%"


class OutfitCursor:
    """
    Read-only cursor over the (outfit, wear, quantity) entries of a group.

    Construction modes:
        OutfitCursor(group)                -> first entry (end if group is empty)
        OutfitCursor(group, outfit)        -> first wear level of that outfit only;
                                              reaches the end after its last level
        OutfitCursor(group, at_end=True)   -> the end

    Iterating a cursor yields StockEntry values and advances it, so
    list(group.begin()) is the whole group in canonical order.

    Example:
        cursor = group.begin()
        while not cursor.at_end:
            print(cursor.outfit, cursor.wear, cursor.quantity, cursor.cost_ratio_string())
            cursor.advance()
    """

    __slots__ = ('_group', '_version', '_outfits', '_type_index', '_wear_index', '_at_end')

    def __init__(self, group: OutfitGroup, outfit: Optional[OutfitType] = None, at_end: bool = False):
        self._group = group
        self._version = group._version
        if outfit is not None:
            self._outfits: List[OutfitType] = [outfit] if outfit in group else []
        else:
            self._outfits = group.outfits()
        self._type_index = 0
        self._wear_index = 0
        self._at_end = at_end or not self._outfits

    # ========================================================================
    # STATE
    # ========================================================================

    def _check(self) -> None:
        if self._group._version != self._version:
            raise CursorInvalidated(
                f"OutfitGroup {self._group.name!r} changed while a cursor was live"
            )

    def _bucket(self) -> WearBucket:
        self._check()
        if self._at_end:
            raise CursorExhausted("Cursor is at the end")
        return self._group._outfits[self._outfits[self._type_index]]

    @property
    def at_end(self) -> bool:
        self._check()
        return self._at_end

    def advance(self) -> bool:
        """
        Move to the next entry.

        Past the last wear level of an outfit the cursor moves to the first
        wear level of the next outfit; past the last outfit it reaches the end.

        Returns:
            True if the cursor is positioned on an entry afterwards, False at the end
        """
        self._check()
        if self._at_end:
            return False
        self._wear_index += 1
        if self._wear_index >= len(self._bucket()):
            self._wear_index = 0
            self._type_index += 1
            if self._type_index >= len(self._outfits):
                self._at_end = True
                return False
        return True

    def __iter__(self) -> OutfitCursor:
        return self

    def __next__(self) -> StockEntry:
        if self.at_end:
            raise StopIteration
        current = self.entry()
        self.advance()
        return current

    def __eq__(self, other) -> bool:
        if not isinstance(other, OutfitCursor):
            return NotImplemented
        self._check()
        other._check()
        if self._at_end or other._at_end:
            return self._at_end and other._at_end
        return (
            self._group is other._group
            and self._outfits[self._type_index] is other._outfits[other._type_index]
            and self._wear_index == other._wear_index
        )

    __hash__ = None

    # ========================================================================
    # POSITION ACCESSORS
    # ========================================================================

    @property
    def outfit(self) -> OutfitType:
        self._bucket()
        return self._outfits[self._type_index]

    @property
    def wear(self) -> Wear:
        return self._bucket().wear_at(self._wear_index)

    @property
    def quantity(self) -> Quantity:
        bucket = self._bucket()
        return bucket[bucket.wear_at(self._wear_index)]

    def entry(self) -> StockEntry:
        return StockEntry(self.outfit, self.wear, self.quantity)

    def total_cost(self) -> int:
        """Depreciated value of the units at this position."""
        return cost(self.outfit, self.wear, self._group.curve) * self.quantity

    def total_base_cost(self) -> int:
        """Unworn value of the units at this position."""
        return self.outfit.cost * self.quantity

    def cost_ratio(self) -> Decimal:
        """
        Price multiplier at this position.

        This is the effective multiplier, not the raw curve value: ageless
        outfits and ammunition report 1 at any wear, matching what cost()
        charges for them.
        """
        return effective_multiplier(self.outfit, self.wear, self._group.curve)

    def cost_ratio_range(self) -> Tuple[Decimal, Decimal]:
        """
        (cheapest, priciest) single-unit value of this outfit over the whole
        group, as fractions of its base cost.
        """
        low, high, base = self._unit_cost_range()
        if not base:
            return ONE, ONE
        return Decimal(low) / Decimal(base), Decimal(high) / Decimal(base)

    def cost_ratio_string(self) -> str:
        """
        Display form of cost_ratio_range(): "63%" when every unit is worth
        the same, otherwise a range such as "40%-90%".
        """
        low, high, base = self._unit_cost_range()
        if low == high:
            return format_percent(low, base)
        return f"{format_percent(low, base)}-{format_percent(high, base)}"

    def _unit_cost_range(self) -> Tuple[int, int, int]:
        outfit = self.outfit
        low = self._group.get_cost(outfit, 1, True)
        high = self._group.get_cost(outfit, 1, False)
        return low, high, outfit.cost

    def __repr__(self) -> str:
        if self._at_end:
            return f"OutfitCursor({self._group.name!r}, end)"
        return (
            f"OutfitCursor({self._group.name!r}, outfit={self._outfits[self._type_index]!r}, "
            f"wear_index={self._wear_index})"
        )
