# groupmaker/domain/repair.py
"""
Best-effort repair of must-not-together ("exception") violations.

Local search without backtracking: repeatedly take the first violated
exception, and swap the offending unit with a unit from another group when
the swap is safe. An exception that cannot be fixed by any single swap is
dropped for the rest of the run. The number of swaps is capped, so the loop
always terminates, but a feasible assignment is not guaranteed even when one
exists.

An exception whose two names sit inside one composite can never be
separated; it is dropped before the search starts. Swaps that would push the
gap between the largest and smallest group past the largest unit size are
skipped, even when they are otherwise safe.

Groups are modified in place; whatever state they are in when the loop ends
is the result.
"""
import logging
from typing import List, Optional, Sequence, Tuple

from groupmaker.domain.models import (
    ConstraintPair,
    EXCEPTION,
    RepairReport,
    Unit,
    UnitGroup,
    to_pairs,
)

logger = logging.getLogger(__name__)

MAX_SWAPS = 50

BUDGET_MESSAGE = "Maximum swap attempts reached. Some constraints may not be satisfied."


def unresolved_message(pair: ConstraintPair) -> str:
    return (f"Couldn't resolve exception between {pair.first} and {pair.second}. "
            "Some constraints may not be satisfied.")


def _give_up(report: RepairReport, pair: ConstraintPair) -> None:
    report.unresolved.append(pair)
    message = unresolved_message(pair)
    report.warnings.append(message)
    logger.warning(message)


def _colocated(members: Sequence[Unit], pair: ConstraintPair) -> bool:
    return (any(u.contains(pair.first) for u in members)
            and any(u.contains(pair.second) for u in members))


def find_violation(groups: Sequence[UnitGroup],
                   exceptions: Sequence[ConstraintPair]) -> Optional[Tuple[int, int]]:
    """
    Return (exception index, group index) of the first violated exception, or None.
    """
    for i, pair in enumerate(exceptions):
        for g, group in enumerate(groups):
            if _colocated(group.members, pair):
                return i, g
    return None


def _is_safe_swap(before: Sequence[Sequence[Unit]], after: Sequence[Sequence[Unit]],
                  pair: ConstraintPair, exceptions: Sequence[ConstraintPair]) -> bool:
    for old, new in zip(before, after):
        for other in exceptions:
            if not _colocated(new, other):
                continue
            # a violation that was already there, and isn't the one being fixed
            if other != pair and _colocated(old, other):
                continue
            return False
    return True


def _spread_after_swap(groups: Sequence[UnitGroup], source: int, target: int, delta: int) -> int:
    sizes = [g.effective_size for g in groups]
    sizes[source] += delta
    sizes[target] -= delta
    return max(sizes) - min(sizes)


def _find_swap(groups: List[UnitGroup], source: int, mover_idx: int,
               pair: ConstraintPair, exceptions: Sequence[ConstraintPair],
               max_spread: int) -> Optional[Tuple[int, int]]:
    source_members = groups[source].members
    mover = source_members[mover_idx]
    for target, group in enumerate(groups):
        if target == source:
            continue
        for j, candidate in enumerate(group.members):
            # group sizes stay within one largest unit of each other
            if _spread_after_swap(groups, source, target, candidate.size - mover.size) > max_spread:
                continue
            new_source = list(source_members)
            new_source[mover_idx] = candidate
            new_target = list(group.members)
            new_target[j] = mover
            if _is_safe_swap((source_members, group.members), (new_source, new_target),
                             pair, exceptions):
                return target, j
    return None


def swap_units(groups: List[UnitGroup], a: int, a_idx: int, b: int, b_idx: int) -> None:
    """Exchange two units between groups, keeping effective sizes in step."""
    first = groups[a].members[a_idx]
    second = groups[b].members[b_idx]
    groups[a].members[a_idx] = second
    groups[b].members[b_idx] = first
    groups[a].effective_size += second.size - first.size
    groups[b].effective_size += first.size - second.size


def repair_exceptions(groups: List[UnitGroup], exceptions,
                      max_swaps: int = MAX_SWAPS) -> RepairReport:
    """
    Try to separate every exception pair by swapping units between groups.

    Returns a RepairReport with the swap count, the exceptions that were given
    up on and the warnings raised along the way.
    """
    report = RepairReport()
    roster = {name for g in groups for u in g.members for name in u.names}
    active = [p for p in to_pairs(exceptions, EXCEPTION) if p.is_valid_for(roster)]
    if not active:
        return report

    units = [u for g in groups for u in g.members]
    for pair in list(active):
        if any(u.contains(pair.first) and u.contains(pair.second) for u in units):
            active.remove(pair)
            _give_up(report, pair)

    sizes = [g.effective_size for g in groups]
    max_spread = max(max(u.size for g in groups for u in g.members), max(sizes) - min(sizes))

    while report.swaps < max_swaps:
        found = find_violation(groups, active)
        if found is None:
            break
        idx, source = found
        pair = active[idx]
        mover_idx = groups[source].index_of(pair.second)
        mover = groups[source].members[mover_idx]

        target = _find_swap(groups, source, mover_idx, pair, active, max_spread)
        if target is None:
            active.pop(idx)
            _give_up(report, pair)
            continue

        target_group, target_idx = target
        logger.debug("Swapping %s (%s) with %s (%s)",
                     mover.names, groups[source].label,
                     groups[target_group].members[target_idx].names, groups[target_group].label)
        swap_units(groups, source, mover_idx, target_group, target_idx)
        report.swaps += 1

    if report.swaps >= max_swaps:
        report.budget_exhausted = True
        report.warnings.append(BUDGET_MESSAGE)
        logger.warning(BUDGET_MESSAGE)

    return report
