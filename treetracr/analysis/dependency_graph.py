"""Dependency graph builder and reachability tracing from an entry point."""

from __future__ import annotations

import logging
import os

from treetracr.analysis.graph_models import ModuleGraph
from treetracr.extractor import ImportExtractor

logger = logging.getLogger(__name__)


def resolve_entry(entry_path: str, source_dir: str) -> str:
    """Absolute, normalized form of an entry path given relative to ``source_dir``."""
    if not os.path.isabs(entry_path):
        entry_path = os.path.join(os.path.abspath(source_dir), entry_path)
    return os.path.normpath(entry_path)


class DependencyGraphBuilder:
    """Build forward and reverse edge maps for a set of source files."""

    def __init__(self, extractor: ImportExtractor):
        self.extractor = extractor

    def build(self, files: list[str]) -> ModuleGraph:
        graph = ModuleGraph(files=list(files))

        for file_path in files:
            imports = self.extractor.extract_imports(file_path)
            graph.add_module(file_path, imports)

        logger.debug(
            "built graph v%d: %d modules, %d edges",
            graph.version,
            len(graph.forward),
            sum(len(deps) for deps in graph.forward.values()),
        )
        return graph


def trace_reachable(
    graph: ModuleGraph,
    entry_path: str,
    source_dir: str,
    visited: set[str] | None = None,
) -> set[str]:
    """Depth-first walk from ``entry_path`` over forward edges.

    Returns every module transitively imported from the entry, the entry
    included. Modules missing on disk are never added. Siblings are visited
    in the order their imports were found.
    """
    if visited is None:
        visited = set()

    stack = [resolve_entry(entry_path, source_dir)]
    while stack:
        module = os.path.normpath(stack.pop())
        if module in visited or not os.path.exists(module):
            continue
        visited.add(module)
        stack.extend(reversed(graph.dependencies(module)))

    return visited
