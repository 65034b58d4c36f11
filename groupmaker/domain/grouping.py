# groupmaker/domain/grouping.py
"""
Pure grouping pipeline.

    names + together pairs -> units -> balanced groups -> exception repair -> plain groups

Only plain Python data goes in and out; nothing here touches I/O. Callers
should run validate_feasibility() first: partitioning an infeasible set of
together constraints still returns groups, but they will be over-full.

Functions included:
- partition
- partition_with_report
- validate_feasibility (re-exported)
"""
import logging
import random
from dataclasses import dataclass
from typing import List, Optional

from groupmaker.domain.allocation import allocate_units, expand_groups
from groupmaker.domain.errors import PreconditionError
from groupmaker.domain.feasibility import validate_feasibility
from groupmaker.domain.models import Group, Name, PartitionResult
from groupmaker.domain.repair import MAX_SWAPS, repair_exceptions
from groupmaker.domain.union_find import build_units

logger = logging.getLogger(__name__)

__all__ = ["GroupingOptions", "partition", "partition_with_report", "validate_feasibility"]


@dataclass
class GroupingOptions:
    group_size: int
    max_swaps: int = MAX_SWAPS
    random_seed: int = None

    def make_rng(self) -> random.Random:
        return random.Random(self.random_seed)


def check_preconditions(names: List[Name], group_size: int) -> None:
    if group_size is None or group_size < 2:
        raise PreconditionError(f"Group size must be at least 2 (got {group_size})")
    if len(names) < 2:
        raise PreconditionError("Please add at least 2 names")
    seen = set()
    duplicates = []
    for name in names:
        if name in seen:
            duplicates.append(name)
        seen.add(name)
    if duplicates:
        raise PreconditionError(f"Duplicate names in roster: {', '.join(duplicates)}")


def partition_with_report(names: List[Name], group_size: int, exceptions=(), together=(),
                          rng: Optional[random.Random] = None,
                          max_swaps: int = MAX_SWAPS) -> PartitionResult:
    """
    Partition `names` into groups of about `group_size` and report what the
    exception repair could not fix.

    Example:
    >>> result = partition_with_report(["A", "B", "C", "D"], 4, rng=random.Random(1))
    >>> [g.members for g in result.groups]
    [['A', 'B', 'C', 'D']]
    """
    names = list(names)
    check_preconditions(names, group_size)
    rng = rng or random.Random()

    units = build_units(names, together)
    groups = allocate_units(units, group_size, rng)
    report = repair_exceptions(groups, exceptions, max_swaps=max_swaps)
    logger.info("Partitioned %d names into %d groups (%d swaps)",
                len(names), len(groups), report.swaps)
    return PartitionResult(groups=expand_groups(groups), report=report)


def partition(names: List[Name], group_size: int, exceptions=(), together=(),
              rng: Optional[random.Random] = None, max_swaps: int = MAX_SWAPS) -> List[Group]:
    """
    Partition `names` into balanced groups honouring together pairs and, as
    far as the repair pass manages, exception pairs.

    Example:
    >>> groups = partition(["A", "B", "C", "D", "E", "F"], 3, together=[("A", "B")], rng=random.Random(0))
    >>> [g.label for g in groups]
    ['Group 1', 'Group 2']
    """
    return partition_with_report(names, group_size, exceptions, together, rng, max_swaps).groups
