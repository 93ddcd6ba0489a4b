"""
Core types and configuration for the outfit ledger.

This module provides the foundational pieces every other module builds on:
1. Protocols: OutfitType for read-only access to catalog entries
2. Immutable data structures: Outfit, DepreciationCurve, WearRange
3. Exceptions: OutfitGroupError and domain-specific error types
4. Type aliases: Wear, Quantity, WearMap
5. Catalog factory: outfit() to create catalog entries

Nothing in this module mutates ledger state.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_EVEN
from typing import Dict, Tuple, Protocol, runtime_checkable


# ============================================================================
# CONSTANTS
# ============================================================================

# Category whose members never depreciate.
CATEGORY_AMMUNITION = "Ammunition"

# Attribute flag marking an outfit as exempt from wear.
ATTRIBUTE_AGELESS = "ageless"

# Sentinel returned by min/max wear queries for a type that is not held.
NO_WEAR = -1

# Wear assigned to freshly created stock (bought new).
NEW_WEAR = 0

# Rounding used when turning a scaled price into a whole monetary amount.
MONEY_ROUNDING = ROUND_HALF_EVEN


# ============================================================================
# TYPE ALIASES
# ============================================================================

# Accumulated use of a stock unit.
Wear = int

# Number of stock units.
Quantity = int

# Mapping from wear level to quantity held at that level.
WearMap = Dict[Wear, Quantity]


# ============================================================================
# PROTOCOLS
# ============================================================================

@runtime_checkable
class OutfitType(Protocol):
    """
    Read-only interface to an item-type catalog entry.

    The ledger only ever reads these three things from a catalog entry and
    never mutates or owns it. Two handles are the same type iff they are the
    same object; the ledger never deep-compares definitions.
    """

    @property
    def cost(self) -> int:
        """Return the base (unworn) cost of one unit."""
        ...

    @property
    def category(self) -> str:
        """Return the catalog category, e.g. "Ammunition"."""
        ...

    def get(self, attribute: str) -> float:
        """Return a named numeric attribute, 0 if absent."""
        ...


# ============================================================================
# EXCEPTIONS
# ============================================================================

class OutfitGroupError(Exception):
    """Base exception for all outfit ledger errors."""
    pass


class InvalidOutfit(OutfitGroupError):
    """Raised when an operation that must touch a catalog entry receives None."""
    pass


class InsufficientStock(OutfitGroupError):
    """Raised when a negative add would drive a wear level below zero units."""
    pass


class InvalidWearIncrement(OutfitGroupError):
    """Raised when wear is asked to decrease."""
    pass


class CursorExhausted(OutfitGroupError):
    """Raised when reading the position of a cursor that is at the end."""
    pass


class CursorInvalidated(OutfitGroupError):
    """Raised when a cursor is used after its outfit group was mutated."""
    pass


# ============================================================================
# CONFIGURATION RECORDS
# ============================================================================

def _as_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(frozen=True, slots=True)
class DepreciationCurve:
    """
    Parameters of the wear -> price multiplier curve.

    The first use drops value from full price to max_value; every further
    unit of wear costs loss_per_wear until the floor min_value is reached.

    Attributes:
        min_value: Floor of the multiplier (fraction of base cost).
        max_value: Multiplier right after first use.
        loss_per_wear: Linear loss per additional unit of wear.

    Values are coerced to Decimal so that curve arithmetic is exact.
    """
    min_value: Decimal = Decimal("0.40")
    max_value: Decimal = Decimal("0.90")
    loss_per_wear: Decimal = Decimal("0.0020")

    def __post_init__(self):
        object.__setattr__(self, 'min_value', _as_decimal(self.min_value))
        object.__setattr__(self, 'max_value', _as_decimal(self.max_value))
        object.__setattr__(self, 'loss_per_wear', _as_decimal(self.loss_per_wear))
        if not self.min_value.is_finite() or not self.max_value.is_finite():
            raise ValueError("Curve bounds must be finite")
        if not Decimal("0") <= self.min_value <= self.max_value <= Decimal("1"):
            raise ValueError(
                f"Curve bounds must satisfy 0 <= min <= max <= 1, "
                f"got min={self.min_value} max={self.max_value}"
            )
        if not self.loss_per_wear.is_finite() or self.loss_per_wear <= 0:
            raise ValueError(f"loss_per_wear must be positive, got {self.loss_per_wear}")


@dataclass(frozen=True, slots=True)
class WearRange:
    """
    A depreciation band, as fractions of the wear at which an item is fully depreciated.

    Attributes:
        min_fraction: Lower bound (inclusive).
        max_fraction: Upper bound (exclusive).
    """
    min_fraction: Decimal
    max_fraction: Decimal

    def __post_init__(self):
        object.__setattr__(self, 'min_fraction', _as_decimal(self.min_fraction))
        object.__setattr__(self, 'max_fraction', _as_decimal(self.max_fraction))
        if not Decimal("0") <= self.min_fraction <= self.max_fraction:
            raise ValueError(
                f"Wear range must satisfy 0 <= min <= max, "
                f"got {self.min_fraction}..{self.max_fraction}"
            )


DEFAULT_DEPRECIATION_CURVE = DepreciationCurve()

# Bought second hand: 20% to 50% depreciated.
USED_WEAR = WearRange(Decimal("0.2"), Decimal("0.5"))

# Taken from a disabled ship: 70% to 90% depreciated.
PLUNDERED_WEAR = WearRange(Decimal("0.7"), Decimal("0.9"))


# ============================================================================
# CATALOG ENTRIES
# ============================================================================

@dataclass(frozen=True, slots=True, eq=False)
class Outfit:
    """
    A catalog entry for one type of outfit.

    Implements the OutfitType protocol. eq=False keeps hashing and equality
    by identity, so two entries with identical fields are still distinct
    types as far as a ledger is concerned.

    Attributes:
        name: Human-readable name (e.g., "Laser Cannon").
        cost: Base cost of one unworn unit.
        category: Catalog category (e.g., "Guns", "Ammunition").
        _attributes: Frozen (name, value) pairs, sorted by name.
    """
    name: str
    cost: int
    category: str = ""
    _attributes: Tuple[Tuple[str, float], ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Outfit name cannot be empty")
        if self.cost < 0:
            raise ValueError(f"Outfit cost must be non-negative, got {self.cost}")

    @property
    def attributes(self) -> Dict[str, float]:
        """Attributes as a new dict each time."""
        return dict(self._attributes)

    def get(self, attribute: str) -> float:
        for key, value in self._attributes:
            if key == attribute:
                return value
        return 0.

    def __repr__(self) -> str:
        return f"Outfit({self.name!r}, cost={self.cost}, category={self.category!r})"


def outfit(name: str, cost: int, category: str = "", **attributes: float) -> Outfit:
    """
    Create an outfit catalog entry.

    Args:
        name: Human-readable name.
        cost: Base cost of one unworn unit.
        category: Catalog category. "Ammunition" never depreciates.
        **attributes: Named numeric attributes (e.g., mass=20, ageless=1).

    Returns:
        A new Outfit, distinct from every other Outfit even with equal fields.

    Example:
        laser = outfit("Laser Cannon", 12000, "Guns", mass=10)
        missile = outfit("Meteor Missile", 500, CATEGORY_AMMUNITION, mass=1)
    """
    frozen = tuple(sorted((key, float(value)) for key, value in attributes.items()))
    return Outfit(name=name, cost=cost, category=category, _attributes=frozen)
