"""Data models for a treetracr analysis run."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path

from treetracr.scanner.language_map import IGNORE_DIRS, SOURCE_EXTENSIONS


class ExitCode(enum.IntEnum):
    OK = 0
    CIRCULAR = 1
    UNUSED = 2
    CIRCULAR_AND_UNUSED = 3
    UNUSED_DEPS = 4
    UNUSED_DEPS_COMBINED = 7
    FATAL = 70

    @classmethod
    def from_failures(cls, circular: bool, unused: bool, unused_deps: bool) -> "ExitCode":
        """Look up the exit code for a combination of failing checks."""
        if unused_deps:
            if circular or unused:
                return cls.UNUSED_DEPS_COMBINED
            return cls.UNUSED_DEPS
        if circular and unused:
            return cls.CIRCULAR_AND_UNUSED
        if circular:
            return cls.CIRCULAR
        if unused:
            return cls.UNUSED
        return cls.OK


@dataclass
class AnalysisConfig:
    """Configuration for one analysis run."""
    source_dir: Path = field(default_factory=lambda: Path("."))
    entry_point: str | None = None
    test_dir: str | None = None
    ci: bool = False
    fail_on_circular: bool = False
    fail_on_unused: bool = False
    fail_on_unused_deps: bool = False
    cache_size: int = 500
    skip_dirs: list[str] = field(default_factory=lambda: list(IGNORE_DIRS))
    extensions: tuple[str, ...] = SOURCE_EXTENSIONS

    def effective_fail_flags(self) -> tuple[bool, bool, bool]:
        """Return (circular, unused, unused_deps), expanding --ci."""
        flags = (self.fail_on_circular, self.fail_on_unused, self.fail_on_unused_deps)
        if self.ci and not any(flags):
            return (True, True, True)
        return flags

    @property
    def fails_enabled(self) -> bool:
        return any(self.effective_fail_flags())


@dataclass
class AnalysisReport:
    """Everything the CLI prints for one run."""
    source_dir: str
    entry_point: str
    files: list[str] = field(default_factory=list)
    reachable: set[str] = field(default_factory=set)
    unused_modules: list[str] = field(default_factory=list)
    test_files: list[str] = field(default_factory=list)
    cycles: list[list[str]] = field(default_factory=list)
    tree_text: str = ""
    tree_circular: list[str] = field(default_factory=list)
    test_tree_text: str = ""
    unused_dependencies: set[str] = field(default_factory=set)

    def exit_code(self, config: AnalysisConfig) -> ExitCode:
        circular, unused, unused_deps = config.effective_fail_flags()
        return ExitCode.from_failures(
            circular=circular and bool(self.cycles),
            unused=unused and bool(self.unused_modules),
            unused_deps=unused_deps and bool(self.unused_dependencies),
        )
