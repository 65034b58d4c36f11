# groupmaker/domain/union_find.py
"""
Merge names bound by must-together pairs into composite units.
"""
import logging
from typing import Dict, Iterable, List

from groupmaker.domain.models import Composite, Name, Singleton, TOGETHER, Unit, to_pairs

logger = logging.getLogger(__name__)


class DisjointSet:
    """Union-find keyed by name, with path compression and union by rank."""

    def __init__(self, names: Iterable[Name] = ()):
        self.parent: Dict[Name, Name] = {}
        self.rank: Dict[Name, int] = {}
        for name in names:
            self.add(name)

    def add(self, name: Name) -> None:
        if name not in self.parent:
            self.parent[name] = name
            self.rank[name] = 0

    def __contains__(self, name: Name) -> bool:
        return name in self.parent

    def find(self, name: Name) -> Name:
        root = name
        while self.parent[root] != root:
            root = self.parent[root]
        # compress
        while self.parent[name] != root:
            self.parent[name], name = root, self.parent[name]
        return root

    def union(self, a: Name, b: Name) -> None:
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return
        if self.rank[root_a] < self.rank[root_b]:
            root_a, root_b = root_b, root_a
        self.parent[root_b] = root_a
        if self.rank[root_a] == self.rank[root_b]:
            self.rank[root_a] += 1

    def components(self, order: Iterable[Name]) -> List[List[Name]]:
        """
        Components listed in `order` of their first member; members also follow `order`.
        """
        by_root: Dict[Name, List[Name]] = {}
        for name in order:
            by_root.setdefault(self.find(name), []).append(name)
        return list(by_root.values())


def build_units(names: List[Name], together) -> List[Unit]:
    """
    Collapse the roster into units. Names transitively linked by together pairs
    become one Composite; everybody else is a Singleton.

    Pairs naming someone outside the roster are dropped.

    >>> build_units(["A", "B", "C", "D"], [("C", "B"), ("B", "A")])
    [Composite(members=('A', 'B', 'C')), Singleton(name='D')]
    """
    ds = DisjointSet(names)
    for pair in to_pairs(together, TOGETHER):
        if not pair.is_valid_for(ds):
            logger.debug("Ignoring together pair %s/%s", pair.first, pair.second)
            continue
        ds.union(pair.first, pair.second)

    units: List[Unit] = []
    for component in ds.components(names):
        if len(component) == 1:
            units.append(Singleton(component[0]))
        else:
            units.append(Composite(tuple(component)))
    return units
