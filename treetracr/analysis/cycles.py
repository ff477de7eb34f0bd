"""Cycle detection over the whole module graph."""

from __future__ import annotations

import enum
import os

from treetracr.analysis.graph_models import ModuleGraph


class _Color(enum.Enum):
    WHITE = 0  # unvisited
    GRAY = 1   # on the DFS stack
    BLACK = 2  # finished


class CycleDetector:
    """Three-color DFS from every module, independent of any entry point.

    Each cycle is returned as a path whose last element repeats the first.
    A cycle reachable from several start nodes is reported once. Results are
    cached per graph version.
    """

    def __init__(self):
        self._cached_version: int | None = None
        self._cached: list[list[str]] = []

    def detect(self, graph: ModuleGraph) -> list[list[str]]:
        if self._cached_version == graph.version:
            return [list(c) for c in self._cached]

        cycles: dict[str, list[str]] = {}
        color: dict[str, _Color] = {}
        path: list[str] = []

        for start in graph.forward:
            if color.get(start, _Color.WHITE) is not _Color.WHITE:
                continue

            color[start] = _Color.GRAY
            path.append(start)
            # (node, remaining neighbors); mirrors ``path``
            stack = [(start, iter(graph.dependencies(start)))]

            while stack:
                node, neighbors = stack[-1]
                for neighbor in neighbors:
                    state = color.get(neighbor, _Color.WHITE)
                    if state is _Color.WHITE:
                        color[neighbor] = _Color.GRAY
                        path.append(neighbor)
                        stack.append((neighbor, iter(graph.dependencies(neighbor))))
                        break
                    if state is _Color.GRAY:
                        cycle = path[path.index(neighbor):] + [neighbor]
                        cycles.setdefault(" -> ".join(cycle), cycle)
                else:
                    stack.pop()
                    path.pop()
                    color[node] = _Color.BLACK

        self._cached_version = graph.version
        self._cached = list(cycles.values())
        return [list(c) for c in self._cached]


def detect_cycles(graph: ModuleGraph) -> list[list[str]]:
    return CycleDetector().detect(graph)


def format_cycle(cycle: list[str], source_dir: str) -> str:
    return " -> ".join(os.path.relpath(p, source_dir) for p in cycle)
