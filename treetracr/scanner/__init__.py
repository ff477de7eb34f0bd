"""Source tree walker and test-file detection."""

from __future__ import annotations

import fnmatch
import logging
import os
from pathlib import Path

from treetracr.scanner.file_cache import FileContentCache
from treetracr.scanner.language_map import (
    IGNORE_DIRS,
    SOURCE_EXTENSIONS,
    TEST_PATTERNS,
)

logger = logging.getLogger(__name__)


def should_skip_dir(path: Path, skip_dirs: list[str] | tuple[str, ...] = IGNORE_DIRS) -> bool:
    return any(fnmatch.fnmatch(path.name, pattern) for pattern in skip_dirs)


def should_analyze_file(path: Path, extensions: tuple[str, ...] = SOURCE_EXTENSIONS) -> bool:
    return path.suffix in extensions


def scan_directory(
    directory: Path | str,
    skip_dirs: list[str] | tuple[str, ...] = IGNORE_DIRS,
    extensions: tuple[str, ...] = SOURCE_EXTENSIONS,
) -> list[str]:
    """Recursively collect source files below ``directory``.

    Walks depth-first. A directory that cannot be listed is logged and
    contributes no files; the rest of the scan carries on.
    """
    root = Path(os.path.abspath(directory))
    files: list[str] = []

    try:
        entries = sorted(root.iterdir())
    except OSError as e:
        logger.error("Error scanning directory %s: %s", root, e)
        return files

    for entry in entries:
        try:
            is_dir = entry.is_dir()
            is_file = entry.is_file()
        except OSError as e:
            logger.error("Error reading %s: %s", entry, e)
            continue
        if is_dir:
            if not should_skip_dir(entry, skip_dirs):
                files.extend(scan_directory(entry, skip_dirs, extensions))
        elif is_file and should_analyze_file(entry, extensions):
            files.append(str(entry))

    return files


def is_test_file(
    file_path: str,
    test_dir: str | None = None,
    source_dir: str | None = None,
) -> bool:
    """True when ``file_path`` looks like a test module.

    ``test_dir`` overrides pattern detection: any file below it counts as a
    test. Relative test dirs are taken relative to ``source_dir``. Patterns
    are matched against the path below ``source_dir`` when it is given, so a
    project checked out under some ``/test/`` directory is not all tests.
    """
    path = os.path.abspath(file_path)
    if test_dir:
        base = source_dir or os.getcwd()
        test_root = os.path.normpath(os.path.join(os.path.abspath(base), test_dir))
        if path == test_root or path.startswith(test_root + os.sep):
            return True
    if source_dir:
        path = "/" + os.path.relpath(path, os.path.abspath(source_dir))
    posix = path.replace(os.sep, "/")
    return any(pattern.search(posix) for pattern in TEST_PATTERNS)


__all__ = [
    "FileContentCache",
    "is_test_file",
    "scan_directory",
    "should_analyze_file",
    "should_skip_dir",
]
