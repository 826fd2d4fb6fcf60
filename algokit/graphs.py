"""Shortest paths, minimum spanning trees and topological order.

Nodes are the integers ``0 .. n-1``. Weighted edges are ``(u, v, weight)``
triples; parallel edges keep the lightest weight.
"""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable


class DisconnectedGraphError(ValueError):
    """Raised when the nodes asked about are not connected."""


class CycleError(ValueError):
    """Raised when a graph that must be acyclic has a cycle.

    ``partial`` holds the nodes that could be ordered before the cycle blocked
    progress.
    """

    def __init__(self, message: str, partial: list[int]) -> None:
        super().__init__(message)
        self.partial = partial


def _check_node(n: int, node: int) -> None:
    if not 0 <= node < n:
        raise ValueError(f"node {node} out of range 0..{n - 1}")


def _adjacency(
    n: int, edges: Iterable[tuple[int, int, float]], undirected: bool
) -> list[dict[int, float]]:
    if n < 0:
        raise ValueError(f"node count must be non-negative, got {n}")
    adjacency: list[dict[int, float]] = [{} for _ in range(n)]
    for u, v, weight in edges:
        _check_node(n, u)
        _check_node(n, v)
        pairs = [(u, v), (v, u)] if undirected else [(u, v)]
        for a, b in pairs:
            if b not in adjacency[a] or weight < adjacency[a][b]:
                adjacency[a][b] = weight
    return adjacency


def dijkstra(
    n: int, edges: Iterable[tuple[int, int, float]], source: int, target: int
) -> float:
    """Return the length of the shortest directed path from source to target.

    Weights must be non-negative. Raises DisconnectedGraphError when the
    target cannot be reached.
    """
    adjacency = _adjacency(n, edges, undirected=False)
    _check_node(n, source)
    _check_node(n, target)
    if any(w < 0 for row in adjacency for w in row.values()):
        raise ValueError("dijkstra needs non-negative edge weights")
    best: dict[int, float] = {source: 0}
    heap: list[tuple[float, int]] = [(0, source)]
    done: set[int] = set()
    while heap:
        distance, node = heapq.heappop(heap)
        if node in done:
            continue
        if node == target:
            return distance
        done.add(node)
        for neighbour, weight in adjacency[node].items():
            candidate = distance + weight
            if neighbour not in best or candidate < best[neighbour]:
                best[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    raise DisconnectedGraphError(f"node {target} is unreachable from {source}")


def floyd(n: int, edges: Iterable[tuple[int, int, float]]) -> list[list[float]]:
    """Return the all-pairs shortest distance matrix of a directed graph.

    Unreachable pairs hold ``math.inf``.
    """
    adjacency = _adjacency(n, edges, undirected=False)
    dist = [[0 if i == j else math.inf for j in range(n)] for i in range(n)]
    for u, row in enumerate(adjacency):
        for v, weight in row.items():
            dist[u][v] = min(dist[u][v], weight)
    for k in range(n):
        row_k = dist[k]
        for row in dist:
            through = row[k]
            if through == math.inf:
                continue
            for j, weight in enumerate(row_k):
                if through + weight < row[j]:
                    row[j] = through + weight
    return dist


def prim(n: int, edges: Iterable[tuple[int, int, float]]) -> float:
    """Return the total weight of a minimum spanning tree of an undirected graph.

    Raises DisconnectedGraphError when no spanning tree exists.
    """
    adjacency = _adjacency(n, edges, undirected=True)
    in_tree = [False] * n
    best = [math.inf] * n
    total: float = 0
    if n:
        best[0] = 0
    for _ in range(n):
        node = min((v for v in range(n) if not in_tree[v]), key=best.__getitem__)
        if best[node] == math.inf:
            raise DisconnectedGraphError("graph is not connected")
        total += best[node]
        in_tree[node] = True
        for neighbour, weight in adjacency[node].items():
            if neighbour != node and not in_tree[neighbour] and weight < best[neighbour]:
                best[neighbour] = weight
    return total


def topsort(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return the nodes in an order where every edge ``(u, v)`` has u before v.

    Nodes with no incoming edges are taken in queue order. Raises CycleError
    when the graph has a cycle.
    """
    if n < 0:
        raise ValueError(f"node count must be non-negative, got {n}")
    successors: list[list[int]] = [[] for _ in range(n)]
    indegree = [0] * n
    for u, v in edges:
        _check_node(n, u)
        _check_node(n, v)
        successors[u].append(v)
        indegree[v] += 1
    queue = deque(node for node in range(n) if indegree[node] == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in reversed(successors[node]):
            indegree[neighbour] -= 1
            if indegree[neighbour] == 0:
                queue.append(neighbour)
    if len(order) != n:
        raise CycleError("graph has a cycle", order)
    return order