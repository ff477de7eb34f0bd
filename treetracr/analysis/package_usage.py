"""Declared package dependencies that no scanned file mentions."""

from __future__ import annotations

import logging
import re

from treetracr.scanner.file_cache import FileContentCache

logger = logging.getLogger(__name__)


def usage_patterns(name: str) -> list[re.Pattern[str]]:
    """Patterns that count as a use of package ``name``.

    A subpath such as ``name/sub`` counts as a use of ``name``.
    """
    spec = rf"""['"]{re.escape(name)}(?:/[^'"]*)?['"]"""
    return [
        # import { a } from 'name'
        re.compile(rf"""\bimport\s+(?:type\s+)?[\w$\s{{}},*]*?\{{[^}}]*\}}\s*from\s*{spec}"""),
        # import x from 'name' / import * as x from 'name'
        re.compile(rf"""\bimport\s+(?:[\w$]+|\*\s*as\s+[\w$]+)[\w$\s,{{}}]*?\s*from\s*{spec}"""),
        # require('name')
        re.compile(rf"""\brequire\s*\(\s*{spec}\s*\)"""),
        # import('name')
        re.compile(rf"""\bimport\s*\(\s*{spec}\s*\)"""),
        # any other quoted occurrence: import 'name', export ... from 'name', config strings
        re.compile(spec),
    ]


def check_unused_dependencies(
    manifest: dict | None,
    files: list[str],
    cache: FileContentCache,
) -> set[str]:
    """Names in ``manifest["dependencies"]`` never referenced by ``files``."""
    if not manifest:
        return set()
    dependencies = manifest.get("dependencies")
    if not isinstance(dependencies, dict) or not dependencies:
        return set()

    contents: list[str] = []
    for file_path in files:
        try:
            contents.append(cache.read(file_path))
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Error reading file %s: %s", file_path, e)

    unused: set[str] = set()
    for name in dependencies:
        patterns = usage_patterns(name)
        used = any(
            pattern.search(content)
            for content in contents
            for pattern in patterns
        )
        if not used:
            unused.add(name)
    return unused
