"""Dependency tree rendering rooted at an entry point."""

from __future__ import annotations

import os

from treetracr.analysis.dependency_graph import resolve_entry
from treetracr.analysis.graph_models import ModuleGraph

CIRCULAR_MARKER = "⚠️ Circular Reference"

# label -> subtree, or None for a leaf marker
Tree = dict[str, "Tree | None"]


class TreeRenderer:
    """Render forward edges as a nested ``{label: subtree}`` mapping.

    Only modules that are keys of the forward map are shown; external and
    unresolved imports are left out. Each branch tracks its own ancestors,
    so a shared module shows up under every importer and a cycle is cut only
    when a module reappears on its own ancestor chain. Those chains are
    collected in ``circular_references`` for the last render.
    """

    def __init__(self, graph: ModuleGraph):
        self.graph = graph
        self.circular_references: list[str] = []

    def render(self, entry_path: str, source_dir: str) -> Tree:
        self.circular_references = []
        entry = resolve_entry(entry_path, source_dir)
        root: Tree = {}
        tree: Tree = {os.path.relpath(entry, source_dir): root}

        # Each frame fills ``out`` for one module. Children are pushed in
        # reverse so they are expanded in import order.
        stack: list[tuple[str, frozenset[str], tuple[str, ...], Tree]] = [
            (entry, frozenset(), (), root),
        ]
        while stack:
            module, ancestors, chain, out = stack.pop()
            if module in ancestors:
                self._record_circular(chain + (module,), source_dir)
                out[CIRCULAR_MARKER] = None
                continue

            ancestors = ancestors | {module}
            chain = chain + (module,)
            frames = []
            for dep in self.graph.dependencies(module):
                if dep not in self.graph:
                    continue
                label = os.path.relpath(dep, source_dir)
                ref_count = self.graph.reference_count(dep)
                if ref_count > 1:
                    label = f"{label} [ref: {ref_count}]"
                child: Tree = {}
                out[label] = child
                frames.append((dep, ancestors, chain, child))
            stack.extend(reversed(frames))

        return tree

    def _record_circular(self, chain: tuple[str, ...], source_dir: str) -> None:
        key = " -> ".join(os.path.relpath(p, source_dir) for p in chain)
        if key not in self.circular_references:
            self.circular_references.append(key)


def format_tree(tree: Tree) -> str:
    """Draw a nested mapping with box-drawing connectors."""
    lines: list[str] = []
    for label, children in tree.items():
        lines.append(label)
        if children:
            _format_children(children, lines)
    return "\n".join(lines)


def _format_children(tree: Tree, lines: list[str]) -> None:
    stack = [("", list(tree.items()))]
    while stack:
        prefix, items = stack[-1]
        if not items:
            stack.pop()
            continue
        label, children = items.pop(0)
        last = not items
        lines.append(f"{prefix}{'└─ ' if last else '├─ '}{label}")
        if children:
            stack.append((prefix + ("   " if last else "│  "), list(children.items())))
