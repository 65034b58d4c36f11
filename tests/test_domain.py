# tests/test_domain.py
import random

from groupmaker.domain.allocation import allocate_units, expand_groups, group_count
from groupmaker.domain.feasibility import largest_together_component, validate_feasibility
from groupmaker.domain.models import Composite, ConstraintPair, Group, Singleton, TOGETHER, UnitGroup
from groupmaker.domain.union_find import DisjointSet, build_units

# ------------------------
# Union-find
# ------------------------

def test_disjoint_set_union_and_find():
    ds = DisjointSet(["A", "B", "C", "D"])
    ds.union("A", "B")
    ds.union("C", "D")
    assert ds.find("A") == ds.find("B")
    assert ds.find("A") != ds.find("C")
    ds.union("B", "D")
    assert len({ds.find(n) for n in "ABCD"}) == 1

def test_build_units_transitive():
    units = build_units(["A", "B", "C", "D"], [("A", "B"), ("B", "C")])
    assert units == [Composite(("A", "B", "C")), Singleton("D")]

def test_build_units_pair_order_irrelevant():
    names = ["A", "B", "C", "D", "E"]
    pairs = [("D", "E"), ("C", "B"), ("A", "E")]
    expected = build_units(names, pairs)
    assert build_units(names, list(reversed(pairs))) == expected
    assert expected == [Composite(("A", "D", "E")), Composite(("B", "C"))]

def test_build_units_drops_unknown_and_self_pairs():
    units = build_units(["A", "B"], [("A", "Zed"), ("B", "B")])
    assert units == [Singleton("A"), Singleton("B")]

def test_build_units_accepts_constraint_pairs():
    units = build_units(["A", "B", "C"], [ConstraintPair("C", "A", TOGETHER)])
    assert units == [Composite(("A", "C")), Singleton("B")]

def test_names_with_separator_characters():
    units = build_units(["A|B", "C"], [("A|B", "C")])
    assert units == [Composite(("A|B", "C"))]
    assert expand_groups([UnitGroup("Group 1", units, 2)])[0].members == ["A|B", "C"]

# ------------------------
# Allocation
# ------------------------

def test_group_count():
    assert group_count(6, 3) == 2
    assert group_count(7, 3) == 3
    assert group_count(4, 4) == 1

def test_allocate_single_group():
    units = [Singleton("A"), Composite(("B", "C")), Singleton("D")]
    groups = allocate_units(units, 4, random.Random(0))
    assert len(groups) == 1
    assert groups[0].members == units
    assert groups[0].effective_size == 4

def test_allocate_composites_largest_first():
    units = [Composite(("A", "B")), Composite(("C", "D", "E")), Singleton("F"), Singleton("G")]
    groups = allocate_units(units, 4, random.Random(0))
    assert [g.label for g in groups] == ["Group 1", "Group 2"]
    # 3-way composite placed first into Group 1, pair into Group 2
    assert groups[0].members[0] == Composite(("C", "D", "E"))
    assert groups[1].members[0] == Composite(("A", "B"))
    assert [g.effective_size for g in groups] == [4, 3]

def test_allocate_balance_bound():
    rng = random.Random(7)
    for _ in range(50):
        n = rng.randint(4, 40)
        names = [f"N{i}" for i in range(n)]
        pairs = [(rng.choice(names), rng.choice(names)) for _ in range(rng.randint(0, 5))]
        units = build_units(names, pairs)
        size = max(max(u.size for u in units), 2)
        groups = allocate_units(units, size, rng)
        counts = [g.effective_size for g in groups]
        assert sum(counts) == n
        assert max(counts) - min(counts) <= max(u.size for u in units)
        expected = group_count(n, size)
        assert len(groups) == (expected if expected > 1 else 1)

def test_allocate_effective_size_tracks_members():
    units = build_units([f"N{i}" for i in range(10)], [("N0", "N1"), ("N2", "N3")])
    for g in allocate_units(units, 3, random.Random(3)):
        assert g.effective_size == sum(u.size for u in g.members)

# ------------------------
# Expansion
# ------------------------

def test_expand_keeps_composite_position():
    group = UnitGroup("Group 1", [Singleton("A"), Composite(("B", "C")), Singleton("D")], 4)
    assert expand_groups([group]) == [Group(label="Group 1", members=["A", "B", "C", "D"])]

def test_expand_is_idempotent():
    groups = [UnitGroup("Group 1", [Composite(("X", "Y")), Singleton("Z")], 3),
              UnitGroup("Group 2", [Singleton("W")], 1)]
    once = expand_groups(groups)
    assert expand_groups(once) == once

# ------------------------
# Feasibility
# ------------------------

def test_validator_rejects_large_component():
    result = validate_feasibility(["A", "B", "C", "D"], [("A", "B"), ("B", "C")], 2)
    assert result.valid is False
    assert result.largest_component == 3
    assert "3 people must be together" in result.message
    assert "group size is only 2" in result.message

def test_validator_accepts_component_equal_to_size():
    result = validate_feasibility(["A", "B", "C", "D"], [("A", "B"), ("B", "C")], 3)
    assert result.valid is True
    assert result.message is None

def test_validator_ignores_unknown_names():
    assert largest_together_component(["A", "B"], [("A", "Q"), ("Q", "B")]) == 1

def test_validator_no_pairs():
    result = validate_feasibility(["A", "B"], [], 2)
    assert result.valid is True
    assert result.largest_component == 1
