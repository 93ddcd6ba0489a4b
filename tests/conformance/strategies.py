"""
Shared hypothesis strategies and checks for the conformance suite.
"""

from collections import Counter

from hypothesis import strategies as st

from outfit_ledger import OutfitGroup, outfit, CATEGORY_AMMUNITION


# Module-level catalog: hypothesis forbids function-scoped fixtures in @given tests.
LASER = outfit("Laser Cannon", 10000, "Guns", mass=10)
THRUSTER = outfit("Chipmunk Thruster", 1000, "Engines", mass=20)
MISSILE = outfit("Meteor Missile", 500, CATEGORY_AMMUNITION, mass=1)
SCANNER = outfit("Cargo Scanner", 3000, "Systems", mass=1, ageless=1)

CATALOG = [LASER, THRUSTER, MISSILE, SCANNER]

catalog_entries = st.sampled_from(CATALOG)
wears = st.integers(min_value=0, max_value=400)
counts = st.integers(min_value=1, max_value=20)


@st.composite
def stock_layout(draw, max_size=15):
    """List of (outfit, count, wear) additions."""
    return draw(st.lists(st.tuples(catalog_entries, counts, wears), max_size=max_size))


@st.composite
def operation(draw):
    """One mutation applied to a pair of groups."""
    kind = draw(st.sampled_from(["add", "take", "remove", "transfer", "age"]))
    if kind == "age":
        return (kind, draw(st.integers(min_value=0, max_value=50)))
    if kind in ("add", "take"):
        return (kind, draw(catalog_entries), draw(counts), draw(wears))
    if kind == "remove":
        return (kind, draw(catalog_entries), draw(st.integers(0, 30)), draw(st.booleans()))
    return (kind, draw(catalog_entries), draw(st.integers(-30, 30)), draw(st.booleans()), draw(wears))


def build_group(layout, name="group"):
    group = OutfitGroup(name)
    for item, count, wear in layout:
        group.add_outfit(item, count, wear)
    return group


def apply_operation(group, partner, op):
    """Apply op to group (partner is the other side of transfers)."""
    kind = op[0]
    if kind == "add":
        _, item, count, wear = op
        group.add_outfit(item, count, wear)
    elif kind == "take":
        _, item, count, wear = op
        held = (group.find(item) or {}).get(wear, 0)
        if held:
            group.add_outfit(item, -min(held, count), wear)
    elif kind == "remove":
        _, item, count, most_worn_first = op
        group.remove_outfit(item, count, most_worn_first)
    elif kind == "transfer":
        _, item, count, most_worn_first, default_wear = op
        group.transfer_outfits(item, count, partner, most_worn_first, default_wear)
    elif kind == "age":
        group.increment_wear(op[1])


def violations(group):
    """Every broken storage invariant of a group (empty when healthy)."""
    problems = []
    for item in group.outfits():
        wears_held = group.find(item)
        if not wears_held:
            problems.append(f"{item!r} maps to an empty bucket")
            continue
        if any(quantity <= 0 for quantity in wears_held.values()):
            problems.append(f"{item!r} holds a non-positive quantity: {wears_held}")
        if list(wears_held) != sorted(wears_held):
            problems.append(f"{item!r} wear levels out of order: {list(wears_held)}")
    for entry in group:
        if entry.quantity <= 0:
            problems.append(f"iterated non-positive entry {entry}")
    return problems


def units(group):
    """Counter of (outfit, wear) -> quantity."""
    tally = Counter()
    for item, wear, quantity in group:
        tally[(item, wear)] += quantity
    return tally


def totals(*groups):
    """Counter of outfit -> quantity summed over groups."""
    tally = Counter()
    for group in groups:
        for item in CATALOG:
            tally[item] += group.get_total_count(item)
    return tally
