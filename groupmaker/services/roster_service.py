# groupmaker/services/roster_service.py
"""
Roster helpers: importing names from text/CSV, cleaning constraint pairs,
suggesting a usable group size and exporting finished groups as text.
"""
import math
import re
from typing import Iterable, List, Optional, Sequence, Tuple

from groupmaker.config.settings import settings
from groupmaker.domain.models import Group


def parse_names(content: str, filename: Optional[str] = None) -> List[str]:
    """
    Split uploaded content into names. CSV files may hold several names per line.

    >>> parse_names("Ann, Bob\\nCid\\n", "people.csv")
    ['Ann', 'Bob', 'Cid']
    """
    lines = re.split(r"\r?\n", (content or "").strip())
    if filename and filename.lower().endswith(".csv"):
        return [n.strip() for line in lines for n in line.split(",") if n.strip()]
    return [line.strip() for line in lines if line.strip()]


def merge_names(existing: Iterable[str], new: Iterable[str]) -> Tuple[List[str], int]:
    """
    Add names not already on the roster. Returns (sorted roster, number added).
    """
    roster = list(existing)
    known = set(roster)
    added = 0
    for name in new:
        if name not in known:
            roster.append(name)
            known.add(name)
            added += 1
    roster.sort()
    return roster, added


def clean_pairs(pairs: Iterable[Sequence[str]]) -> List[Tuple[str, str]]:
    """Keep only pairs of two non-empty, different names."""
    cleaned = []
    for pair in pairs or []:
        if len(pair) != 2:
            continue
        a, b = (pair[0] or "").strip(), (pair[1] or "").strip()
        if a and b and a != b:
            cleaned.append((a, b))
    return cleaned


def suggest_group_size(count: int, group_size: int) -> Tuple[int, bool, Optional[str]]:
    """
    Check a requested group size against the roster size.

    Returns (group_size, adjusted, message).
    """
    if count >= 2 and group_size > count:
        suggested = math.ceil(count / (count // 2))
        return suggested, True, (
            f"Cannot create groups of {group_size} with only {count} people. "
            f"Group size adjusted to {suggested}."
        )

    if group_size == count and count > 3:
        suggested = math.ceil(count / 2)
        return suggested, True, (
            "Creating one group with all people defeats the purpose. "
            f"Group size adjusted to {suggested} to create multiple groups."
        )

    clamped = min(max(group_size, settings.GROUP_SIZE_MIN), settings.GROUP_SIZE_MAX)
    if clamped != group_size:
        return clamped, True, (
            f"Group size must be between {settings.GROUP_SIZE_MIN} and "
            f"{settings.GROUP_SIZE_MAX}. Group size adjusted to {clamped}."
        )
    return group_size, False, None


def export_groups_text(groups: Iterable[Group], title: Optional[str] = None) -> str:
    """
    Render groups as the downloadable text file.

    >>> print(export_groups_text([Group(label="Group 1", members=["Ann"])], title="Groups"), end="")
    Groups
    <BLANKLINE>
    Group 1
    -------
    - Ann
    <BLANKLINE>
    """
    lines = [title or settings.export_title, ""]
    for group in groups:
        lines.append(group.label)
        lines.append("-" * len(group.label))
        lines.extend(f"- {member}" for member in group.members)
        lines.append("")
    return "\n".join(lines) + "\n"
