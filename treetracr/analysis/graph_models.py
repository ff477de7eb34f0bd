"""Data models for the module dependency graph."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field

_graph_versions = itertools.count(1)


@dataclass
class ModuleGraph:
    files: list[str] = field(default_factory=list)
    forward: dict[str, list[str]] = field(default_factory=dict)  # module -> [imports]
    reverse: dict[str, list[str]] = field(default_factory=dict)  # module -> [importers]
    version: int = field(default_factory=lambda: next(_graph_versions))

    def add_module(self, module: str, imports: list[str]) -> None:
        self.forward[module] = list(imports)
        self.version = next(_graph_versions)
        for dep in imports:
            self.reverse.setdefault(dep, []).append(module)

    def dependencies(self, module: str) -> list[str]:
        return self.forward.get(module, [])

    def reference_count(self, module: str) -> int:
        return len(self.reverse.get(module, []))

    def __contains__(self, module: object) -> bool:
        return module in self.forward
