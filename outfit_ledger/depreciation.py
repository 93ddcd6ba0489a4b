"""
depreciation.py - Wear-Based Cost Model

Pure functions mapping (outfit, wear) to a price multiplier and to a
monetary cost. Nothing here reads or changes ledger state, so callers can
price hypothetical wear levels (e.g., previewing a sale) and acquisition
paths can pick a plausible starting wear from the same curve that will
later price it.

Curve shape (DepreciationCurve, defaults min=0.40, max=0.90, loss=0.0020):

    multiplier(0)    = 1
    multiplier(wear) = max(min, max - loss * (wear - 1))     for wear > 0

Provides:
- Multipliers (price_multiplier, effective_multiplier, wear_exempt)
- Costs (cost)
- Random starting wear (full_depreciation_wear, random_wear, used_wear, plunder_wear)
"""

from decimal import Decimal
from typing import Optional, Tuple

import numpy as np

from .core import (
    OutfitType, DepreciationCurve, WearRange, Wear,
    DEFAULT_DEPRECIATION_CURVE, USED_WEAR, PLUNDERED_WEAR,
    CATEGORY_AMMUNITION, ATTRIBUTE_AGELESS, MONEY_ROUNDING,
    InvalidOutfit,
)


ONE = Decimal("1")


# ============================================================================
# MULTIPLIERS
# ============================================================================

def price_multiplier(wear: Wear, curve: DepreciationCurve = DEFAULT_DEPRECIATION_CURVE) -> Decimal:
    """
    Fraction of base cost that an item with the given wear is worth.

    Unworn items are worth full price. The first use drops the value to
    curve.max_value, after which it decays linearly toward curve.min_value.
    """
    if wear == 0:
        return ONE
    return max(curve.min_value, curve.max_value - curve.loss_per_wear * (wear - 1))


def wear_exempt(outfit: OutfitType) -> bool:
    """Return True if the outfit keeps full value regardless of wear."""
    return bool(outfit.get(ATTRIBUTE_AGELESS)) or outfit.category == CATEGORY_AMMUNITION


def effective_multiplier(
    outfit: OutfitType,
    wear: Wear,
    curve: DepreciationCurve = DEFAULT_DEPRECIATION_CURVE,
) -> Decimal:
    """price_multiplier() with ageless and ammunition outfits treated as unworn."""
    if outfit is None:
        raise InvalidOutfit("Cannot price a missing outfit")
    if wear_exempt(outfit):
        wear = 0
    return price_multiplier(wear, curve)


# ============================================================================
# COSTS
# ============================================================================

def cost(
    outfit: OutfitType,
    wear: Wear,
    curve: DepreciationCurve = DEFAULT_DEPRECIATION_CURVE,
) -> int:
    """
    Value of one unit of an outfit at the given wear.

    Args:
        outfit: Catalog entry to price
        wear: Wear level of the unit
        curve: Depreciation curve (default: DEFAULT_DEPRECIATION_CURVE)

    Returns:
        Whole monetary amount, rounded half-even

    Raises:
        InvalidOutfit: If outfit is None
    """
    multiplier = effective_multiplier(outfit, wear, curve)
    scaled = Decimal(outfit.cost) * multiplier
    return int(scaled.quantize(ONE, rounding=MONEY_ROUNDING))


# ============================================================================
# RANDOM STARTING WEAR
# ============================================================================

def full_depreciation_wear(curve: DepreciationCurve = DEFAULT_DEPRECIATION_CURVE) -> Decimal:
    """Wear at which price_multiplier() first reaches curve.min_value."""
    return (curve.max_value - curve.min_value) / curve.loss_per_wear + 1


def wear_bounds(
    wear_range: WearRange,
    curve: DepreciationCurve = DEFAULT_DEPRECIATION_CURVE,
) -> Tuple[Wear, Wear]:
    """
    Half-open integer wear interval [low, high) covered by a depreciation band.

    Both ends are truncated toward zero.
    """
    full = full_depreciation_wear(curve)
    return int(full * wear_range.min_fraction), int(full * wear_range.max_fraction)


def random_wear(
    wear_range: WearRange,
    curve: DepreciationCurve = DEFAULT_DEPRECIATION_CURVE,
    rng: Optional[np.random.Generator] = None,
) -> Wear:
    """
    Draw a uniformly random wear level inside a depreciation band.

    Args:
        wear_range: Band as fractions of full depreciation (e.g., USED_WEAR)
        curve: Depreciation curve the band is measured against
        rng: Random generator (default: a fresh numpy default_rng())

    Returns:
        Integer wear in [low, high); low itself when the band is empty

    Example:
        rng = np.random.default_rng(7)
        wear = random_wear(USED_WEAR, rng=rng)   # 50 <= wear < 125
    """
    low, high = wear_bounds(wear_range, curve)
    if high <= low:
        return low
    if rng is None:
        rng = np.random.default_rng()
    return low + int(rng.integers(high - low))


def used_wear(rng: Optional[np.random.Generator] = None) -> Wear:
    """Random wear for an outfit bought second hand (20%-50% depreciated)."""
    return random_wear(USED_WEAR, DEFAULT_DEPRECIATION_CURVE, rng)


def plunder_wear(rng: Optional[np.random.Generator] = None) -> Wear:
    """Random wear for an outfit taken from a disabled ship (70%-90% depreciated)."""
    return random_wear(PLUNDERED_WEAR, DEFAULT_DEPRECIATION_CURVE, rng)
