"""Graph analyses: building, reachability, cycles, trees, dead code, packages."""

from __future__ import annotations

from treetracr.analysis.cycles import CycleDetector, detect_cycles
from treetracr.analysis.dead_code import find_test_files, find_unused_modules
from treetracr.analysis.dependency_graph import (
    DependencyGraphBuilder,
    resolve_entry,
    trace_reachable,
)
from treetracr.analysis.graph_models import ModuleGraph
from treetracr.analysis.package_usage import check_unused_dependencies
from treetracr.analysis.tree import CIRCULAR_MARKER, TreeRenderer, format_tree

__all__ = [
    "CIRCULAR_MARKER",
    "CycleDetector",
    "DependencyGraphBuilder",
    "ModuleGraph",
    "TreeRenderer",
    "check_unused_dependencies",
    "detect_cycles",
    "find_test_files",
    "find_unused_modules",
    "format_tree",
    "resolve_entry",
    "trace_reachable",
]
