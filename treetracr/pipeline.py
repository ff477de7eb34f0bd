"""Analysis orchestrator: scan -> extract -> graph -> trace -> cycles -> render -> packages."""

from __future__ import annotations

import logging
import os
from typing import Callable

from treetracr.analysis.cycles import CycleDetector
from treetracr.analysis.dead_code import find_test_files, find_unused_modules
from treetracr.analysis.dependency_graph import (
    DependencyGraphBuilder,
    resolve_entry,
    trace_reachable,
)
from treetracr.analysis.graph_models import ModuleGraph
from treetracr.analysis.package_usage import check_unused_dependencies
from treetracr.analysis.tree import TreeRenderer, format_tree
from treetracr.extractor import ImportExtractor
from treetracr.manifest import determine_entry_point, load_manifest
from treetracr.models import AnalysisConfig, AnalysisReport
from treetracr.resolver import ModuleResolver
from treetracr.scanner import FileContentCache, scan_directory

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int], None]


def build_graph(
    config: AnalysisConfig,
    cache: FileContentCache | None = None,
) -> tuple[list[str], ModuleGraph]:
    """Scan ``config.source_dir`` and build its module graph."""
    if cache is None:
        cache = FileContentCache(config.cache_size)
    files = scan_directory(config.source_dir, config.skip_dirs, config.extensions)
    resolver = ModuleResolver(config.extensions, cache)
    extractor = ImportExtractor(resolver, cache)
    graph = DependencyGraphBuilder(extractor).build(files)
    return files, graph


def run_analysis(
    config: AnalysisConfig,
    progress: ProgressCallback | None = None,
) -> AnalysisReport:
    """Run every check once against a fresh graph."""
    source_dir = os.path.abspath(config.source_dir)
    cache = FileContentCache(config.cache_size)

    manifest = load_manifest(source_dir)
    entry_point = determine_entry_point(manifest, config.entry_point)
    entry_path = resolve_entry(entry_point, source_dir)
    logger.debug("entry point %s -> %s", entry_point, entry_path)

    # Stage 1: Scan + build
    if progress:
        progress("Scanning", 0, 1)
    files, graph = build_graph(config, cache)
    if progress:
        progress("Scanning", 1, 1)

    report = AnalysisReport(source_dir=source_dir, entry_point=entry_point, files=files)

    # Stage 2: Reachability
    report.reachable = trace_reachable(graph, entry_path, source_dir)
    report.unused_modules = find_unused_modules(
        files, report.reachable, config.test_dir, source_dir,
    )
    report.test_files = find_test_files(files, config.test_dir, source_dir)

    # Stage 3: Cycles
    if progress:
        progress("Detecting cycles", 0, 1)
    report.cycles = CycleDetector().detect(graph)
    if progress:
        progress("Detecting cycles", 1, 1)

    # Stage 4: Trees
    renderer = TreeRenderer(graph)
    report.tree_text = format_tree(renderer.render(entry_path, source_dir))
    report.tree_circular = list(renderer.circular_references)
    if report.test_files:
        report.test_tree_text = format_tree(renderer.render(report.test_files[0], source_dir))

    # Stage 5: Declared packages
    report.unused_dependencies = check_unused_dependencies(manifest, files, cache)

    cache.clear()
    return report
