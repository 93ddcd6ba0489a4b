"""
outfit_ledger - Depreciation-Aware Outfit Ledger

Tracks countable outfits by type and by wear level, moves them between
groups without losing their wear, and values them on a depreciation curve.

Usage:
    from outfit_ledger import OutfitGroup, outfit, used_wear

    laser = outfit("Laser Cannon", 12000, "Guns", mass=10)

    ship = OutfitGroup("ship")
    market = OutfitGroup("market")
    market.add_outfit(laser, 3)                 # new stock
    market.add_outfit(laser, 2, used_wear())    # second hand stock

    # Quote, then buy the two cheapest lasers
    price = market.get_cost(laser, 2, most_worn_first=True)
    bought = ship.transfer_outfits(laser, -2, market, most_worn_first=True)

    for entry in ship:
        print(entry.outfit.name, entry.wear, entry.quantity)
"""

# Core types
from .core import (
    OutfitType,
    Outfit,
    outfit,
    DepreciationCurve,
    WearRange,
    Wear,
    Quantity,
    WearMap,
    OutfitGroupError,
    InvalidOutfit,
    InsufficientStock,
    InvalidWearIncrement,
    CursorExhausted,
    CursorInvalidated,
    DEFAULT_DEPRECIATION_CURVE,
    USED_WEAR,
    PLUNDERED_WEAR,
    CATEGORY_AMMUNITION,
    ATTRIBUTE_AGELESS,
    NO_WEAR,
    NEW_WEAR,
)

# Cost model
from .depreciation import (
    price_multiplier,
    effective_multiplier,
    wear_exempt,
    cost,
    full_depreciation_wear,
    wear_bounds,
    random_wear,
    used_wear,
    plunder_wear,
)

# Ledger
from .wear_bucket import WearBucket
from .outfit_group import OutfitGroup, normalize_transfer
from .cursor import OutfitCursor, StockEntry, format_percent

__all__ = [
    # Core
    'OutfitType', 'Outfit', 'outfit',
    'DepreciationCurve', 'WearRange',
    'Wear', 'Quantity', 'WearMap',
    'OutfitGroupError', 'InvalidOutfit', 'InsufficientStock',
    'InvalidWearIncrement', 'CursorExhausted', 'CursorInvalidated',
    'DEFAULT_DEPRECIATION_CURVE', 'USED_WEAR', 'PLUNDERED_WEAR',
    'CATEGORY_AMMUNITION', 'ATTRIBUTE_AGELESS', 'NO_WEAR', 'NEW_WEAR',
    # Cost model
    'price_multiplier', 'effective_multiplier', 'wear_exempt', 'cost',
    'full_depreciation_wear', 'wear_bounds', 'random_wear', 'used_wear', 'plunder_wear',
    # Ledger
    'WearBucket', 'OutfitGroup', 'normalize_transfer',
    'OutfitCursor', 'StockEntry', 'format_percent',
]

__version__ = '1.0.0'
