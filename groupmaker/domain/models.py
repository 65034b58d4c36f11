# groupmaker/domain/models.py

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, Field

Name = str

TOGETHER = "together"
EXCEPTION = "exception"


@dataclass(frozen=True)
class ConstraintPair:
    """Unordered pair of two names, tagged 'together' or 'exception'."""
    first: Name
    second: Name
    kind: str = EXCEPTION

    def is_valid_for(self, roster) -> bool:
        return self.first != self.second and self.first in roster and self.second in roster


def to_pairs(pairs, kind: str) -> List[ConstraintPair]:
    """
    Accept ConstraintPair objects or plain 2-tuples/lists and return ConstraintPairs of `kind`.

    >>> to_pairs([("A", "B")], TOGETHER)
    [ConstraintPair(first='A', second='B', kind='together')]
    """
    result = []
    for p in pairs or []:
        if isinstance(p, ConstraintPair):
            result.append(p if p.kind == kind else ConstraintPair(p.first, p.second, kind))
        else:
            first, second = p
            result.append(ConstraintPair(first, second, kind))
    return result


@dataclass(frozen=True)
class Singleton:
    name: Name

    @property
    def names(self) -> Tuple[Name, ...]:
        return (self.name,)

    @property
    def size(self) -> int:
        return 1

    def contains(self, name: Name) -> bool:
        return self.name == name


@dataclass(frozen=True)
class Composite:
    """Names bound by must-together constraints. Moves between groups as one block."""
    members: Tuple[Name, ...]

    @property
    def names(self) -> Tuple[Name, ...]:
        return self.members

    @property
    def size(self) -> int:
        return len(self.members)

    def contains(self, name: Name) -> bool:
        return name in self.members


Unit = Union[Singleton, Composite]


@dataclass
class UnitGroup:
    """Working group used during allocation and repair."""
    label: str
    members: List[Unit] = field(default_factory=list)
    effective_size: int = 0

    def add(self, unit: Unit) -> None:
        self.members.append(unit)
        self.effective_size += unit.size

    def contains(self, name: Name) -> bool:
        return any(u.contains(name) for u in self.members)

    def index_of(self, name: Name) -> int:
        for i, unit in enumerate(self.members):
            if unit.contains(name):
                return i
        return -1


class Group(BaseModel):
    label: str
    members: List[Name] = Field(default_factory=list)


class FeasibilityResult(BaseModel):
    valid: bool
    message: Optional[str] = None
    largest_component: int = 0


@dataclass
class RepairReport:
    swaps: int = 0
    unresolved: List[ConstraintPair] = field(default_factory=list)
    budget_exhausted: bool = False
    warnings: List[str] = field(default_factory=list)


@dataclass
class PartitionResult:
    groups: List[Group]
    report: RepairReport = field(default_factory=RepairReport)
