# groupmaker/domain/allocation.py
"""
Balanced allocation of units into groups, and expansion back to plain names.

Composites are placed first, largest first, then the shuffled singletons.
Each unit goes to the group with the smallest headcount so far (first such
group on ties), so group sizes end up within one largest-unit of each other.
"""
import logging
import math
import random
from typing import List, Optional, Sequence, Union

from groupmaker.domain.models import Composite, Group, Unit, UnitGroup

logger = logging.getLogger(__name__)


def group_label(index: int) -> str:
    return f"Group {index + 1}"


def group_count(total: int, group_size: int) -> int:
    """
    Number of groups needed for `total` people.

    >>> group_count(7, 3)
    3
    """
    return math.ceil(total / group_size)


def _smallest_group(groups: List[UnitGroup]) -> UnitGroup:
    # min() returns the first occurrence, which is the lowest index on ties
    return min(groups, key=lambda g: g.effective_size)


def allocate_units(units: Sequence[Unit], group_size: int,
                   rng: Optional[random.Random] = None) -> List[UnitGroup]:
    """
    Distribute units across ceil(headcount / group_size) groups.

    With one group or fewer everything goes into "Group 1" in input order.
    """
    rng = rng or random.Random()
    total = sum(u.size for u in units)
    num_groups = group_count(total, group_size)

    if num_groups <= 1:
        single = UnitGroup(label=group_label(0))
        for unit in units:
            single.add(unit)
        return [single]

    groups = [UnitGroup(label=group_label(i)) for i in range(num_groups)]
    logger.debug("Allocating %d people into %d groups", total, num_groups)

    composites = [u for u in units if isinstance(u, Composite)]
    singletons = [u for u in units if not isinstance(u, Composite)]

    # sorted() is stable, equal sizes keep roster order
    for unit in sorted(composites, key=lambda u: u.size, reverse=True):
        _smallest_group(groups).add(unit)

    shuffled = list(singletons)
    rng.shuffle(shuffled)
    for unit in shuffled:
        _smallest_group(groups).add(unit)

    return groups


def expand_groups(groups: Sequence[Union[UnitGroup, Group]]) -> List[Group]:
    """
    Replace each unit with its names, keeping composite members contiguous at
    the composite's position. Already expanded groups come back unchanged.
    """
    expanded = []
    for group in groups:
        members = []
        for member in group.members:
            if isinstance(member, str):
                members.append(member)
            else:
                members.extend(member.names)
        expanded.append(Group(label=group.label, members=members))
    return expanded
