"""
Depth and height assignment by breadth-first layering.

Works on node handles so a cyclic graph is rejected before any node is
touched.
"""

from __future__ import annotations

from typing import Sequence

from .errors import CyclicGraphError


def _layer(n: int, neighbours: list[list[int]], what: str) -> list[int]:
    distances = [0] * n
    current = list(range(n))
    distance = 0

    while current:
        seen: set[int] = set()
        following = []
        for i in current:
            distances[i] = distance
            for j in neighbours[i]:
                if j not in seen:
                    seen.add(j)
                    following.append(j)

        distance += 1
        if distance > n:
            raise CyclicGraphError(f"circular link detected while computing node {what}")
        current = following

    return distances


def compute_depths(n: int, edges: Sequence[tuple[int, int]]) -> list[int]:
    """
    Longest distance of every node from a source, following links forward.

    Every node starts in the frontier; each round stamps the round number on
    the frontier and moves on to its successors.

    Args:
        n: Number of nodes
        edges: (source, target) handle pairs

    Returns:
        Depth per node handle

    Raises:
        CyclicGraphError: If the rounds outnumber the nodes
    """
    successors: list[list[int]] = [[] for _ in range(n)]
    for s, t in edges:
        successors[s].append(t)
    return _layer(n, successors, "depths")


def compute_heights(n: int, edges: Sequence[tuple[int, int]]) -> list[int]:
    """
    Longest distance of every node to a sink, following links backward.

    Raises:
        CyclicGraphError: If the rounds outnumber the nodes
    """
    predecessors: list[list[int]] = [[] for _ in range(n)]
    for s, t in edges:
        predecessors[t].append(s)
    return _layer(n, predecessors, "heights")
