"""Graph algorithms: cycle detection, traversals, spanning trees and shortest paths."""

from __future__ import annotations

import heapq
import math
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Sequence


def _check_vertex(vertex: int, count: int) -> None:
    if not 0 <= vertex < count:
        raise ValueError(f"vertex {vertex} outside 0..{count - 1}")


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError("vertex count must not be negative")


class DirectedGraph:
    """A directed graph over the vertices 0..vertex_count-1."""

    def __init__(self, vertex_count: int) -> None:
        _check_count(vertex_count)
        self.vertex_count = vertex_count
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def add_edge(self, source: int, target: int) -> None:
        """Add an edge leading from source to target."""
        _check_vertex(source, self.vertex_count)
        _check_vertex(target, self.vertex_count)
        self._adjacency[source].append(target)

    def is_cyclic(self) -> bool:
        """Tell whether the graph contains a directed cycle."""
        new, active, done = 0, 1, 2
        state = [new] * self.vertex_count
        for root in range(self.vertex_count):
            if state[root] != new:
                continue
            state[root] = active
            stack = [(root, iter(self._adjacency[root]))]
            while stack:
                vertex, successors = stack[-1]
                for successor in successors:
                    if state[successor] == active:
                        return True
                    if state[successor] == new:
                        state[successor] = active
                        stack.append((successor, iter(self._adjacency[successor])))
                        break
                else:
                    state[vertex] = done
                    stack.pop()
        return False


class UndirectedGraph:
    """An undirected graph over the vertices 0..vertex_count-1."""

    def __init__(self, vertex_count: int) -> None:
        _check_count(vertex_count)
        self.vertex_count = vertex_count
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def add_edge(self, u: int, v: int) -> None:
        """Join u and v by an edge."""
        _check_vertex(u, self.vertex_count)
        _check_vertex(v, self.vertex_count)
        self._adjacency[u].append(v)
        self._adjacency[v].append(u)

    def bfs(self, start: int) -> list[int]:
        """Return the vertices reachable from start in breadth-first order."""
        _check_vertex(start, self.vertex_count)
        visited = {start}
        order = []
        queue = deque([start])
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in self._adjacency[vertex]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order

    def dfs(self, start: int) -> list[int]:
        """Return the vertices reachable from start in depth-first order."""
        _check_vertex(start, self.vertex_count)
        visited = {start}
        order = [start]
        stack = [iter(self._adjacency[start])]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    stack.append(iter(self._adjacency[neighbour]))
                    break
            else:
                stack.pop()
        return order

    def format(self) -> str:
        """Render the adjacency lists, one vertex per line."""
        return "".join(
            f"{vertex}: " + "".join(f"{n} " for n in neighbours) + "\n"
            for vertex, neighbours in enumerate(self._adjacency)
        )


@dataclass(frozen=True)
class Edge:
    """A weighted edge between two vertices."""

    source: int
    target: int
    weight: int


class DisjointSet:
    """Union-find over 0..size-1 with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        _check_count(size)
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, item: int) -> int:
        """Return the representative of the set holding item."""
        _check_vertex(item, len(self._parent))
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of x and y; return False if they were already one."""
        x_root, y_root = self.find(x), self.find(y)
        if x_root == y_root:
            return False
        if self._rank[x_root] < self._rank[y_root]:
            self._parent[x_root] = y_root
        elif self._rank[x_root] > self._rank[y_root]:
            self._parent[y_root] = x_root
        else:
            self._parent[y_root] = x_root
            self._rank[x_root] += 1
        return True


def prim_mst(matrix: Sequence[Sequence[int]]) -> list[Edge]:
    """Return the minimum spanning tree of a weighted adjacency matrix.

    A zero entry means no edge. Each returned edge runs from the parent of a
    vertex to that vertex, for vertices 1..n-1 in order.
    """
    rows = [list(row) for row in matrix]
    count = len(rows)
    if any(len(row) != count for row in rows):
        raise ValueError("adjacency matrix must be square")
    if count == 0:
        return []
    key = [math.inf] * count
    parent: list[int | None] = [None] * count
    in_tree = [False] * count
    key[0] = 0
    for _ in range(count - 1):
        candidates = [v for v in range(count) if not in_tree[v] and key[v] < math.inf]
        if not candidates:
            raise ValueError("graph is not connected")
        u = min(candidates, key=key.__getitem__)
        in_tree[u] = True
        for v, weight in enumerate(rows[u]):
            if weight and not in_tree[v] and weight < key[v]:
                parent[v] = u
                key[v] = weight
    tree = []
    for vertex in range(1, count):
        origin = parent[vertex]
        if origin is None:
            raise ValueError("graph is not connected")
        tree.append(Edge(origin, vertex, rows[vertex][origin]))
    return tree


def kruskal_mst(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    """Return the minimum spanning forest's edges in the order they were chosen."""
    forest = DisjointSet(vertex_count)
    chosen: list[Edge] = []
    for edge in sorted(edges, key=lambda e: e.weight):
        if len(chosen) >= vertex_count - 1:
            break
        if forest.union(edge.source, edge.target):
            chosen.append(edge)
    return chosen


def dijkstra(
    adjacency: Sequence[Iterable[tuple[int, int]]], start: int
) -> list[float]:
    """Return shortest distances from start; unreachable vertices get infinity.

    adjacency[u] holds (vertex, weight) pairs for the edges leaving u.
    """
    neighbours = [list(pairs) for pairs in adjacency]
    _check_vertex(start, len(neighbours))
    dist: list[float] = [math.inf] * len(neighbours)
    dist[start] = 0
    heap = [(0, start)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, weight in neighbours[u]:
            if dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                heapq.heappush(heap, (dist[v], v))
    return dist