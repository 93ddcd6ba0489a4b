#!/usr/bin/env python3
"""
demo.py - Interactive Tutorial: Learn the Outfit Ledger Step by Step

This is a pedagogical demonstration of how outfit groups track, move and
value worn equipment. Each step builds on the previous one. Press Enter to
advance.

WHAT YOU'LL LEARN:
  1-3:  Foundation   - Catalog entries, the empty group, stock at wear levels
  4-6:  Trading      - Quotes, buying, selling most worn first
  7-8:  Wear         - Ageing stock, salvage from a disabled ship
  9-10: Advanced     - Per-economy curves, the conservation proof

Run:
    python demo.py           # Interactive mode (press Enter for each step)
    python demo.py --quick   # Run all steps without pausing
"""

from dataclasses import dataclass
import sys

import numpy as np

from outfit_ledger import (
    # Core classes
    OutfitGroup, DepreciationCurve,
    # Catalog
    outfit, CATEGORY_AMMUNITION,
    # Cost model
    cost, price_multiplier, full_depreciation_wear, wear_bounds,
    used_wear, plunder_wear, USED_WEAR, PLUNDERED_WEAR,
    # Errors
    InsufficientStock,
)


# ============================================================================
# CONFIGURATION
# ============================================================================

@dataclass
class DemoConfig:
    """Configuration for the tutorial. Modify these to experiment."""
    seed: int = 20140101

    # Starting stock
    market_lasers: int = 5
    market_missiles: int = 100
    ship_missiles: int = 20

    # Trading
    lasers_bought: int = 2
    days_travelled: int = 120


CONFIG = DemoConfig()

QUICK_MODE = "--quick" in sys.argv


def wait_for_enter():
    """Pause for user input unless in quick mode."""
    if not QUICK_MODE:
        input("\n[Press Enter to continue...]")


def step_header(number: int, title: str, objective: str):
    """Print a step header with learning objective."""
    print(f"\n{'='*70}")
    print(f"STEP {number}: {title}")
    print(f"{'='*70}")
    print(f"\nObjective: {objective}\n")


def section_header(text: str):
    """Print a section header within a step."""
    print(f"\n--- {text} ---\n")


def show_group(group: OutfitGroup):
    """Print every (outfit, wear, quantity) entry with its value."""
    if group.empty():
        print(f"{group.name}: (empty)")
        return
    print(f"{group.name}:")
    cursor = group.begin()
    while not cursor.at_end:
        print(f"  {cursor.outfit.name:<20} wear {cursor.wear:>4}  x{cursor.quantity:<4} "
              f"value {cursor.total_cost():>7}  ({cursor.cost_ratio_string()})")
        cursor.advance()
    print(f"  total value: {group.get_total_cost()}")


# ============================================================================
# PHASE 1: FOUNDATION (Steps 1-3)
# ============================================================================

def step_01_catalog():
    """Create catalog entries."""
    step_header(1, "The Catalog",
        "Outfits are catalog entries the ledger reads but never owns.")

    print("""
    An outfit type has three things the ledger cares about:

    - cost:      base price of one unworn unit
    - category:  "Ammunition" never depreciates
    - get(name): numeric attributes such as mass, or the "ageless" flag

    Two catalog entries are the same type only if they are the same object.
    """)

    wait_for_enter()

    print('>>> laser = outfit("Laser Cannon", 10000, "Guns", mass=10)')
    laser = outfit("Laser Cannon", 10000, "Guns", mass=10)
    missile = outfit("Meteor Missile", 500, CATEGORY_AMMUNITION, mass=1)
    scanner = outfit("Cargo Scanner", 3000, "Systems", mass=1, ageless=1)

    section_header("Value at Different Wear Levels")
    for wear in (0, 1, 50, 150, 251, 400):
        print(f"wear {wear:>3}: multiplier {price_multiplier(wear):<6}  "
              f"laser {cost(laser, wear):>6}  missile {cost(missile, wear):>4}  "
              f"scanner {cost(scanner, wear):>5}")

    section_header("Key Insight")
    print(f"""
    The first use drops value to 90%. After that it falls 0.2% per wear
    until it reaches the 40% floor at wear {full_depreciation_wear()}.
    Ammunition and ageless outfits keep full value forever.
    """)

    return laser, missile, scanner


def step_02_empty_group():
    """Create an empty group."""
    step_header(2, "The Empty Group",
        "An outfit group starts empty and reports nothing held.")

    print(">>> market = OutfitGroup('market', verbose=True)")
    market = OutfitGroup("market", verbose=True)

    section_header("Initial State")
    print(f"Repr:        {market!r}")
    print(f"Empty:       {market.empty()}")
    print(f"Total value: {market.get_total_cost()}")

    return market


def step_03_stock(market: OutfitGroup, laser, missile, rng):
    """Stock the market at several wear levels."""
    step_header(3, "Stock at Wear Levels",
        "Every unit is stored under its type AND its wear level.")

    wait_for_enter()

    print(f">>> market.add_outfit(laser, {CONFIG.market_lasers})")
    market.add_outfit(laser, CONFIG.market_lasers)
    low, high = wear_bounds(USED_WEAR)
    print(f">>> market.add_outfit(laser, 2, used_wear(rng))   # wear in [{low}, {high})")
    market.add_outfit(laser, 2, used_wear(rng))
    market.add_outfit(missile, CONFIG.market_missiles)

    section_header("Market Contents")
    show_group(market)
    print(f"\nLaser wear levels: {market.find(laser)}")
    print(f"Laser count:       {market.get_total_count(laser)}")
    print(f"Total mass:        {market.get_total_attribute('mass')}")

    section_header("Key Insight")
    print("""
    Zero quantities are never stored. Taking the last unit at a wear level
    removes the level; taking the last unit of a type removes the type.
    """)

    return market


# ============================================================================
# PHASE 2: TRADING (Steps 4-6)
# ============================================================================

def step_04_quote(market: OutfitGroup, laser):
    """Quote a purchase without changing anything."""
    step_header(4, "Quotes",
        "get_cost() prices a removal using the exact units it would take.")

    cheapest = market.get_cost(laser, CONFIG.lasers_bought, most_worn_first=True)
    newest = market.get_cost(laser, CONFIG.lasers_bought, most_worn_first=False)
    print(f"{CONFIG.lasers_bought} lasers, most worn first:  {cheapest}")
    print(f"{CONFIG.lasers_bought} lasers, least worn first: {newest}")
    print(f"\nMarket unchanged: {market!r}")
    return cheapest


def step_05_buy(market: OutfitGroup, laser, missile, quote: int):
    """Buy by transferring with a negative count."""
    step_header(5, "Buying",
        "A negative transfer pulls units from the other group at their own wear.")

    ship = OutfitGroup("ship", verbose=True)
    ship.add_outfit(missile, CONFIG.ship_missiles, 5)

    wait_for_enter()

    print(f">>> ship.transfer_outfits(laser, -{CONFIG.lasers_bought}, market, most_worn_first=True)")
    moved = ship.transfer_outfits(laser, -CONFIG.lasers_bought, market, most_worn_first=True)
    print(f"Returned: {moved}")
    print(f"Paid:     {ship.get_total_cost(laser)} (quoted {quote})")

    section_header("After the Purchase")
    show_group(ship)
    show_group(market)

    return ship


def step_06_sell(ship: OutfitGroup, market: OutfitGroup, laser):
    """Sell the most worn unit back."""
    step_header(6, "Selling",
        "Selling most worn first hands over the least valuable units.")

    offer = ship.get_cost(laser, 1, most_worn_first=True)
    print(f"Offer for the most worn laser: {offer}")
    ship.transfer_outfits(laser, 1, market, most_worn_first=True)

    section_header("Asking for Too Much")
    try:
        ship.add_outfit(laser, -10, 0)
    except InsufficientStock as e:
        print(f"✗ Rejected: {e}")
    print(f"Ship unchanged: {ship!r}")


# ============================================================================
# PHASE 3: WEAR (Steps 7-8)
# ============================================================================

def step_07_ageing(ship: OutfitGroup):
    """Age everything aboard."""
    step_header(7, "Ageing",
        "increment_wear() ages every unit of every type at once.")

    before = ship.get_total_cost()
    ship.verbose = False
    for _ in range(CONFIG.days_travelled):
        ship.increment_wear()
    print(f"Value before the voyage: {before}")
    print(f"Value after {CONFIG.days_travelled} days:  {ship.get_total_cost()}")
    show_group(ship)


def step_08_salvage(ship: OutfitGroup, laser, scanner, rng):
    """Strip a disabled ship."""
    step_header(8, "Salvage",
        "Plundered outfits arrive 70% to 90% depreciated.")

    wreck = OutfitGroup("wreck")
    wreck.add_outfit(laser, 1, plunder_wear(rng))
    wreck.add_outfit(scanner, 1, plunder_wear(rng))
    low, high = wear_bounds(PLUNDERED_WEAR)
    print(f"Plunder wear band: [{low}, {high})")
    show_group(wreck)

    for item in wreck.outfits():
        ship.transfer_outfits(item, -wreck.get_total_count(item), wreck)

    section_header("After Salvage")
    show_group(ship)
    show_group(wreck)


# ============================================================================
# PHASE 4: ADVANCED (Steps 9-10)
# ============================================================================

def step_09_curves(laser):
    """Price the same stock on another economy's curve."""
    step_header(9, "Depreciation Curves",
        "Each group can carry its own curve; the default is 0.40 / 0.90 / 0.0020.")

    harsh = DepreciationCurve("0.25", "0.75", "0.005")
    frontier = OutfitGroup("frontier", curve=harsh)
    core_world = OutfitGroup("core world")
    for group in (frontier, core_world):
        group.add_outfit(laser, 1, 60)
    print(f"Laser at wear 60, default curve:  {core_world.get_total_cost()}")
    print(f"Laser at wear 60, frontier curve: {frontier.get_total_cost()}")


def step_10_conservation(groups, catalog):
    """Show that transfers never create or destroy units."""
    step_header(10, "Conservation Proof",
        "Transfers redistribute units; only add_outfit and removal without a destination change totals.")

    for item in catalog:
        held = {group.name: group.get_total_count(item) for group in groups}
        print(f"{item.name:<20} {held}  sum = {sum(held.values())}")


def main():
    """Run the tutorial."""
    print("=" * 70)
    print("       OUTFIT LEDGER TUTORIAL")
    print("=" * 70)

    rng = np.random.default_rng(CONFIG.seed)

    laser, missile, scanner = step_01_catalog()
    wait_for_enter()

    market = step_02_empty_group()
    step_03_stock(market, laser, missile, rng)
    wait_for_enter()

    quote = step_04_quote(market, laser)
    ship = step_05_buy(market, laser, missile, quote)
    step_06_sell(ship, market, laser)
    wait_for_enter()

    step_07_ageing(ship)
    step_08_salvage(ship, laser, scanner, rng)
    wait_for_enter()

    step_09_curves(laser)
    step_10_conservation([ship, market], [laser, missile, scanner])

    print("\n" + "=" * 70)
    print("       TUTORIAL COMPLETE!")
    print("=" * 70)
    print("""
    You've learned:
      - Stock is tracked by type and by wear level
      - Quotes and removals take the same units in the same order
      - Transfers keep each unit's wear
      - Value falls with wear along a configurable curve

    Run tests: pytest tests/
    """)


if __name__ == "__main__":
    main()
