# groupmaker/domain/feasibility.py
from typing import Dict, List

from groupmaker.domain.models import FeasibilityResult, Name, TOGETHER, to_pairs


def largest_together_component(names: List[Name], together) -> int:
    """
    Size of the largest connected component of the must-together graph.

    >>> largest_together_component(["A", "B", "C", "D"], [("A", "B"), ("B", "C")])
    3
    """
    graph: Dict[Name, List[Name]] = {name: [] for name in names}
    for pair in to_pairs(together, TOGETHER):
        if pair.is_valid_for(graph):
            graph[pair.first].append(pair.second)
            graph[pair.second].append(pair.first)

    visited = set()
    largest = 0
    for start in graph:
        if start in visited:
            continue
        visited.add(start)
        stack = [start]
        size = 0
        while stack:
            node = stack.pop()
            size += 1
            for neighbour in graph[node]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    stack.append(neighbour)
        largest = max(largest, size)
    return largest


def validate_feasibility(names: List[Name], together, group_size: int) -> FeasibilityResult:
    """
    Reject together constraints that force more people into one group than the group size.
    Run this before partitioning.
    """
    largest = largest_together_component(names, together)
    if largest > group_size:
        return FeasibilityResult(
            valid=False,
            largest_component=largest,
            message=(
                f"You have specified that {largest} people must be together, "
                f"but the group size is only {group_size}. Please increase the group "
                f"size or remove some \"must be together\" constraints."
            ),
        )
    return FeasibilityResult(valid=True, largest_component=largest)
