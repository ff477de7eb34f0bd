"""Unused module detection: scanned files the entry point never reaches."""

from __future__ import annotations

import os

from treetracr.scanner import is_test_file


def find_test_files(
    files: list[str],
    test_dir: str | None = None,
    source_dir: str | None = None,
) -> list[str]:
    return [f for f in files if is_test_file(f, test_dir, source_dir)]


def find_unused_modules(
    files: list[str],
    reachable: set[str],
    test_dir: str | None = None,
    source_dir: str | None = None,
) -> list[str]:
    """Scanned, non-test files that are absent from ``reachable``.

    Test files are never reported; they are entry points of their own.
    """
    return [
        f for f in files
        if os.path.normpath(f) not in reachable
        and not is_test_file(f, test_dir, source_dir)
    ]
