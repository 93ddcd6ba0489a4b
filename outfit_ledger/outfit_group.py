"""
outfit_group.py - Depreciation-Aware Outfit Ledger

The OutfitGroup class holds stock of outfits keyed by outfit type and by
wear level, e.g. the outfits installed in a ship, sitting in cargo, or on
sale at a planet's outfitter. It is the only class that mutates that stock.

Key responsibilities:
    - Adds, removes and transfers units while preserving their wear
    - Ages all stock at once (increment_wear)
    - Answers count, wear, attribute and cost queries
    - Quotes the cost of a removal before it is committed (get_cost)
    - Hands out cursors over its contents in canonical order
"""

from __future__ import annotations
from typing import Dict, Iterator, List, Optional, Tuple

from .core import (
    # Types
    OutfitType, DepreciationCurve, Wear, Quantity, WearMap,
    # Constants
    DEFAULT_DEPRECIATION_CURVE, NEW_WEAR, NO_WEAR,
    # Exceptions
    InvalidOutfit, InsufficientStock, InvalidWearIncrement,
)
from .cursor import OutfitCursor, StockEntry
from .depreciation import cost as outfit_cost
from .wear_bucket import WearBucket


# Ordered (wear, quantity) selection produced by a removal plan.
RemovalPlan = List[Tuple[Wear, Quantity]]


def normalize_transfer(
    source: OutfitGroup,
    destination: OutfitGroup,
    count: Quantity,
) -> Tuple[OutfitGroup, OutfitGroup, Quantity, int]:
    """
    Turn a signed transfer into a positive one.

    A negative count means "move |count| units from destination to source".
    Swapping the groups and negating the count lets every transfer run
    through the same positive remove-with-destination path.

    Returns:
        (giver, receiver, amount, sign) with amount >= 0 and sign in {1, -1};
        the net result of the original call is sign * units moved.
    """
    if count < 0:
        return destination, source, -count, -1
    return source, destination, count, 1


def _label(outfit: OutfitType) -> str:
    return getattr(outfit, 'name', None) or repr(outfit)


class OutfitGroup:
    """
    Stock of outfits grouped by type and by wear level.

    Stored as {outfit: WearBucket}. No outfit ever maps to an empty bucket
    and no wear level ever holds zero or fewer units.

    Thread Safety:
        Not thread-safe. Each owner (a ship, a planet) keeps its own group
        and mutates it only from its own update step.

    Example:
        cargo = OutfitGroup("cargo")
        cargo.add_outfit(laser, 3)             # three new lasers
        cargo.add_outfit(laser, 2, 100)        # two lasers at wear 100
        sold = cargo.transfer_outfits(laser, 4, market, most_worn_first=True)
    """

    def __init__(
        self,
        name: str = "",
        curve: DepreciationCurve = DEFAULT_DEPRECIATION_CURVE,
        verbose: bool = False,
    ):
        """
        Create an empty outfit group.

        Args:
            name: Identifier shown in verbose output and repr
            curve: Depreciation curve used by every cost query and cursor
            verbose: Print a line for every mutation (default: False)
        """
        self.name = name
        self.curve = curve
        self.verbose = verbose
        self._outfits: Dict[OutfitType, WearBucket] = {}
        # Bumped on every mutation so live cursors can detect staleness
        self._version: int = 0

    # ========================================================================
    # QUERIES (read-only)
    # ========================================================================

    def empty(self) -> bool:
        """True iff the group holds nothing."""
        return not self._outfits

    def __len__(self) -> int:
        """Number of distinct outfit types held."""
        return len(self._outfits)

    def __contains__(self, outfit: OutfitType) -> bool:
        return outfit in self._outfits

    def outfits(self) -> List[OutfitType]:
        """
        Outfit types held, in canonical order.

        Types are ordered by handle (object identity). The order is stable
        for as long as the group holds the type, since the group keeps the
        handle alive.
        """
        return sorted(self._outfits, key=id)

    def find(self, outfit: OutfitType) -> Optional[WearMap]:
        """
        Wear distribution held for an outfit.

        Returns:
            A copy of {wear: quantity} in ascending wear order, or None if
            the outfit is not held
        """
        bucket = self._outfits.get(outfit)
        if bucket is None:
            return None
        return bucket.to_dict()

    def get_total_count(self, outfit: OutfitType) -> Quantity:
        """Units held of an outfit across all wear levels (0 if none)."""
        bucket = self._outfits.get(outfit)
        return bucket.total() if bucket is not None else 0

    def get_min_wear(self, outfit: OutfitType) -> Wear:
        """Least worn level holding the outfit, or NO_WEAR (-1)."""
        bucket = self._outfits.get(outfit)
        return bucket.min_wear if bucket is not None else NO_WEAR

    def get_max_wear(self, outfit: OutfitType) -> Wear:
        """Most worn level holding the outfit, or NO_WEAR (-1)."""
        bucket = self._outfits.get(outfit)
        return bucket.max_wear if bucket is not None else NO_WEAR

    def get_total_attribute(self, attribute: str) -> float:
        """
        Sum of an attribute over every unit held (e.g., total mass).

        Args:
            attribute: Attribute name read through outfit.get()

        Returns:
            Sum of outfit.get(attribute) * quantity
        """
        value = 0.
        cursor = self.begin()
        while not cursor.at_end:
            value += cursor.outfit.get(attribute) * cursor.quantity
            cursor.advance()
        return value

    def get_total_cost(self, outfit: Optional[OutfitType] = None) -> int:
        """
        Depreciated value of the stock.

        Args:
            outfit: Restrict the sum to one outfit type (default: everything)

        Returns:
            Sum of cost(outfit, wear) * quantity
        """
        total = 0
        cursor = self.begin() if outfit is None else self.find_cursor(outfit)
        while not cursor.at_end:
            total += cursor.total_cost()
            cursor.advance()
        return total

    def get_cost(self, outfit: OutfitType, count: Quantity, most_worn_first: bool = False) -> int:
        """
        Quote the value of removing units without removing them.

        Walks wear levels in exactly the order remove_outfit() would, so the
        quote always equals the value of what that call takes.

        Args:
            outfit: Outfit type to quote
            count: Number of units wanted
            most_worn_first: Take the most worn units first

        Returns:
            Summed cost of the units that would be taken (0 if none held)
        """
        return sum(
            outfit_cost(outfit, wear, self.curve) * taken
            for wear, taken in self._plan_removal(outfit, count, most_worn_first)
        )

    def _plan_removal(self, outfit: OutfitType, count: Quantity, most_worn_first: bool) -> RemovalPlan:
        """
        Select which units a removal of count would take.

        Both directions go through this one routine, so quoting and removing
        use identical traversal and partial-match logic.

        Returns:
            [(wear, units_taken), ...] in traversal order; empty if nothing is taken
        """
        bucket = self._outfits.get(outfit)
        if bucket is None or count <= 0:
            return []
        plan: RemovalPlan = []
        remaining = count
        for wear in bucket.wears(most_worn_first):
            taken = min(bucket[wear], remaining)
            plan.append((wear, taken))
            remaining -= taken
            if remaining <= 0:
                break
        return plan

    # ========================================================================
    # CURSORS
    # ========================================================================

    def begin(self) -> OutfitCursor:
        """Cursor at the first (outfit, wear) entry, or at the end if empty."""
        return OutfitCursor(self)

    def end(self) -> OutfitCursor:
        """Cursor at the end of the group."""
        return OutfitCursor(self, at_end=True)

    def find_cursor(self, outfit: OutfitType) -> OutfitCursor:
        """Cursor over only the wear levels of one outfit type."""
        return OutfitCursor(self, outfit)

    def __iter__(self) -> Iterator[StockEntry]:
        """Yield (outfit, wear, quantity) entries in canonical order."""
        return iter(self.begin())

    # ========================================================================
    # MUTATION
    # ========================================================================

    def _touch(self) -> None:
        self._version += 1

    def add_outfit(self, outfit: OutfitType, count: Quantity, wear: Wear = NEW_WEAR) -> Quantity:
        """
        Change the number of units held at one exact wear level.

        A negative count removes units, but only from that wear level.

        Args:
            outfit: Outfit type
            count: Units to add (negative to remove)
            wear: Wear level of the units (default: NEW_WEAR)

        Returns:
            count, unchanged

        Raises:
            InvalidOutfit: If outfit is None
            InsufficientStock: If a negative count exceeds the units held at
                that wear level. The group is left unchanged.
        """
        if outfit is None:
            raise InvalidOutfit("Cannot add a missing outfit")
        if not count:
            return 0

        bucket = self._outfits.get(outfit)
        if bucket is None:
            bucket = WearBucket()
        try:
            bucket.add(wear, count)
        except InsufficientStock as e:
            raise InsufficientStock(f"{self.name or 'group'}: {_label(outfit)}: {e}") from e
        if bucket:
            self._outfits[outfit] = bucket
        else:
            self._outfits.pop(outfit, None)
        self._touch()

        if self.verbose:
            print(f"✓ {self.name}: {count:+d} {_label(outfit)} @ wear {wear}")
        return count

    def remove_outfit(
        self,
        outfit: OutfitType,
        count: Quantity,
        most_worn_first: bool = False,
        destination: Optional[OutfitGroup] = None,
    ) -> Quantity:
        """
        Remove up to count units of an outfit, choosing wear levels in order.

        Args:
            outfit: Outfit type
            count: Units to remove
            most_worn_first: Take the most worn units first (default: least worn first)
            destination: If given, receives every removed unit at its original wear

        Returns:
            Units actually removed. Less than count when stock runs out; that
            is not an error.
        """
        plan = self._plan_removal(outfit, count, most_worn_first)
        if not plan:
            return 0

        bucket = self._outfits[outfit]
        removed = 0
        for wear, taken in plan:
            bucket.add(wear, -taken)
            removed += taken
            if destination is not None:
                destination.add_outfit(outfit, taken, wear)
        if not bucket:
            del self._outfits[outfit]
        self._touch()

        if self.verbose:
            where = f" → {destination.name}" if destination is not None else ""
            print(f"✓ {self.name}: removed {removed}/{count} {_label(outfit)}{where}")
        return removed

    def transfer_outfits(
        self,
        outfit: Optional[OutfitType],
        count: Quantity,
        destination: Optional[OutfitGroup] = None,
        most_worn_first: bool = False,
        default_wear: Wear = NEW_WEAR,
    ) -> Quantity:
        """
        Move units between this group and another, in either direction.

        Sign convention:
            count > 0: move count units from self to destination
            count < 0: move -count units from destination to self

        With no destination, a positive count deletes units (remove_outfit)
        and a negative count creates -count new units at default_wear.

        Args:
            outfit: Outfit type (None is a no-op)
            count: Signed number of units
            destination: The other group, or None
            most_worn_first: Which units the giving group hands over first
            default_wear: Wear given to units created from nowhere

        Returns:
            Net units moved, with the sign of count; 0 for a no-op
        """
        if not count or outfit is None:
            return 0

        if destination is None:
            if count > 0:
                return self.remove_outfit(outfit, count, most_worn_first)
            return -self.add_outfit(outfit, -count, default_wear)

        giver, receiver, amount, sign = normalize_transfer(self, destination, count)
        return sign * giver.remove_outfit(outfit, amount, most_worn_first, receiver)

    def increment_wear(self, delta: Wear = 1) -> None:
        """
        Age every unit of every outfit by delta.

        Raises:
            InvalidWearIncrement: If delta is negative
        """
        if delta < 0:
            raise InvalidWearIncrement(f"Wear cannot decrease (delta={delta})")
        if not delta:
            return
        for outfit, bucket in list(self._outfits.items()):
            self._outfits[outfit] = bucket.shifted(delta)
        self._touch()

        if self.verbose:
            print(f"✓ {self.name}: wear +{delta} on {len(self._outfits)} outfit type(s)")

    def clear(self) -> None:
        """Remove every unit."""
        self._outfits.clear()
        self._touch()

        if self.verbose:
            print(f"✓ {self.name}: cleared")

    # ========================================================================
    # COPYING AND COMPARISON
    # ========================================================================

    def clone(self) -> OutfitGroup:
        """
        Independent copy of this group.

        Buckets are copied, never shared; outfit handles are shared since the
        group does not own catalog entries.
        """
        cloned = OutfitGroup(self.name, self.curve, self.verbose)
        cloned._outfits = {outfit: bucket.copy() for outfit, bucket in self._outfits.items()}
        return cloned

    __copy__ = clone

    def __eq__(self, other) -> bool:
        """Two groups are equal when they hold the same units at the same wear."""
        if not isinstance(other, OutfitGroup):
            return NotImplemented
        return self._outfits == other._outfits

    __hash__ = None

    def __repr__(self) -> str:
        units = sum(bucket.total() for bucket in self._outfits.values())
        return f"OutfitGroup({self.name!r}, {len(self._outfits)} types, {units} units)"
