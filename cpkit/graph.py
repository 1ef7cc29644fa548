"""Shortest paths from node 1 to node ``node_count`` in undirected graphs."""

from __future__ import annotations

import heapq
import math
from collections import defaultdict, deque
from collections.abc import Iterable


def _trace(parent: dict, target):
    path = [target]
    while (target := parent[target]) is not None:
        path.append(target)
    path.reverse()
    return path


def bfs_path(node_count: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Return a path with the fewest edges from node 1 to ``node_count``.

    Returns ``None`` when ``node_count`` cannot be reached.
    """
    adjacency = defaultdict(list)
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)

    parent = {1: None}
    queue = deque([1])
    while queue:
        node = queue.popleft()
        for neighbour in adjacency[node]:
            if neighbour not in parent:
                parent[neighbour] = node
                queue.append(neighbour)

    if node_count not in parent:
        return None
    return _trace(parent, node_count)


def dijkstra_path(
    node_count: int, edges: Iterable[tuple[int, int, int]]
) -> list[int] | None:
    """Return a least-weight path from node 1 to ``node_count``.

    Edges are ``(a, b, weight)`` and undirected. Returns ``None`` when
    ``node_count`` cannot be reached.
    """
    adjacency = defaultdict(list)
    for a, b, weight in edges:
        adjacency[a].append((b, weight))
        adjacency[b].append((a, weight))

    distance = {1: 0}
    parent = {1: None}
    heap = [(0, 1)]
    while heap:
        dist, node = heapq.heappop(heap)
        if dist > distance[node]:
            continue
        for neighbour, weight in adjacency[node]:
            candidate = dist + weight
            if candidate < distance.get(neighbour, math.inf):
                distance[neighbour] = candidate
                if neighbour != 1:
                    parent[neighbour] = node
                heapq.heappush(heap, (candidate, neighbour))

    if node_count not in parent:
        return None
    return _trace(parent, node_count)