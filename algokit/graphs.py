"""Shortest paths on weighted undirected graphs and graph traversal orders."""

import heapq
from collections import deque
from collections.abc import Hashable, Iterable, Mapping

Edge = tuple[int, int, int]


def _check_node(node: int, node_count: int, what: str) -> None:
    if not 1 <= node <= node_count:
        raise ValueError(f"{what} {node} is outside 1..{node_count}")


def shortest_distances(
    node_count: int, edges: Iterable[Edge], source: int = 1
) -> dict[int, int | None]:
    """Return the distance from ``source`` to every node ``1..node_count``.

    ``edges`` holds undirected ``(a, b, weight)`` triples. Nodes that
    cannot be reached map to None.
    """
    if node_count < 1:
        raise ValueError(f"node_count must be at least 1, got {node_count}")
    _check_node(source, node_count, "source")
    adjacency: dict[int, list[tuple[int, int]]] = {
        node: [] for node in range(1, node_count + 1)
    }
    for a, b, weight in edges:
        _check_node(a, node_count, "edge endpoint")
        _check_node(b, node_count, "edge endpoint")
        if weight < 0:
            raise ValueError(f"edge ({a}, {b}) has negative weight {weight}")
        adjacency[a].append((b, weight))
        adjacency[b].append((a, weight))

    distances: dict[int, int | None] = dict.fromkeys(adjacency)
    distances[source] = 0
    heap = [(0, source)]
    while heap:
        dist, node = heapq.heappop(heap)
        if dist > distances[node]:
            continue
        for neighbour, weight in adjacency[node]:
            candidate = dist + weight
            known = distances[neighbour]
            if known is None or candidate < known:
                distances[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return distances


def shortest_distance(
    node_count: int,
    edges: Iterable[Edge],
    source: int = 1,
    target: int | None = None,
) -> int | None:
    """Return the distance from ``source`` to ``target`` or None if unreachable.

    ``target`` defaults to the last node, ``node_count``.
    """
    if target is None:
        target = node_count
    _check_node(target, node_count, "target")
    return shortest_distances(node_count, edges, source)[target]


def dfs_order(
    adjacency: Mapping[Hashable, Iterable[Hashable]], start: Hashable
) -> list[Hashable]:
    """Return nodes in depth-first visiting order from ``start``.

    Neighbours are tried in the order listed; nodes missing from
    ``adjacency`` have no outgoing edges.
    """
    visited = {start}
    order = [start]
    stack = [iter(adjacency.get(start, ()))]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append(iter(adjacency.get(neighbour, ())))
                break
        else:
            stack.pop()
    return order


def bfs_order(
    adjacency: Mapping[Hashable, Iterable[Hashable]], start: Hashable
) -> list[Hashable]:
    """Return nodes in breadth-first visiting order from ``start``."""
    visited = {start}
    order = []
    queue = deque([start])
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency.get(node, ()):
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order