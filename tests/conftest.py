"""
conftest.py - Shared pytest fixtures for outfit ledger tests

Provides common fixtures used across unit and functional tests:
- Catalog entries (a depreciating gun, ammunition, an ageless outfit, ...)
- Outfit groups (empty, stocked, a ship/market pair)
- Invariant checking helper
"""

import pytest
import numpy as np

from outfit_ledger import (
    OutfitGroup, Outfit, outfit,
    CATEGORY_AMMUNITION,
)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def group_invariant_violations(group: OutfitGroup) -> list:
    """List every broken storage invariant of a group (empty when healthy)."""
    problems = []
    for item in group.outfits():
        wears = group.find(item)
        if not wears:
            problems.append(f"{item!r} maps to an empty bucket")
            continue
        for wear, quantity in wears.items():
            if quantity <= 0:
                problems.append(f"{item!r} @ {wear}: quantity {quantity}")
        if list(wears) != sorted(wears):
            problems.append(f"{item!r}: wear levels out of order {list(wears)}")
        if sum(wears.values()) != group.get_total_count(item):
            problems.append(f"{item!r}: total count mismatch")
    return problems


# =============================================================================
# CATALOG FIXTURES
# =============================================================================

@pytest.fixture
def laser() -> Outfit:
    """A depreciating gun."""
    return outfit("Laser Cannon", 10000, "Guns", mass=10, outfit_space=-10)


@pytest.fixture
def engine() -> Outfit:
    return outfit("Chipmunk Thruster", 1000, "Engines", mass=20, outfit_space=-20)


@pytest.fixture
def missile() -> Outfit:
    """Ammunition never depreciates."""
    return outfit("Meteor Missile", 500, CATEGORY_AMMUNITION, mass=1)


@pytest.fixture
def scanner() -> Outfit:
    """Ageless outfits never depreciate."""
    return outfit("Cargo Scanner", 3000, "Systems", mass=1, ageless=1)


# =============================================================================
# GROUP FIXTURES
# =============================================================================

@pytest.fixture
def empty_group():
    """Fresh group with nothing in it."""
    return OutfitGroup("test")


@pytest.fixture
def stocked_group(laser, engine):
    """3 new lasers, 2 lasers at wear 100, 4 engines at wear 10."""
    group = OutfitGroup("stocked")
    group.add_outfit(laser, 3, 0)
    group.add_outfit(laser, 2, 100)
    group.add_outfit(engine, 4, 10)
    return group


@pytest.fixture
def ship_and_market(laser, missile):
    """A ship with a few worn lasers and a market with new stock."""
    ship = OutfitGroup("ship")
    ship.add_outfit(laser, 1, 30)
    ship.add_outfit(laser, 1, 200)
    ship.add_outfit(missile, 20, 5)

    market = OutfitGroup("market")
    market.add_outfit(laser, 5, 0)
    market.add_outfit(missile, 100, 0)
    return ship, market


@pytest.fixture
def rng():
    """Seeded generator for reproducible random wear."""
    return np.random.default_rng(20140101)


@pytest.fixture
def invariant_violations():
    """The group_invariant_violations() helper, for tests in subdirectories."""
    return group_invariant_violations
