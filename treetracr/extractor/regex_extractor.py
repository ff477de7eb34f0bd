"""Regex-based import extraction. Fast, approximate, never fails."""

from __future__ import annotations

import re

from treetracr.extractor.base import BaseImportStrategy

# Order is fixed; every pattern is run over the whole file.
IMPORT_PATTERNS: tuple[re.Pattern[str], ...] = (
    # import x from '...' / import { a, b } from '...' / import * as ns from '...'
    re.compile(r"""\bimport\s+(?:type\s+)?[\w$\s{},*]+?\s*from\s*['"]([^'"\n]+)['"]"""),
    # import '...'
    re.compile(r"""\bimport\s*['"]([^'"\n]+)['"]"""),
    # export { a } from '...' / export * from '...' / export * as ns from '...'
    re.compile(
        r"""\bexport\s+(?:type\s+)?(?:\*(?:\s*as\s+[\w$]+)?|\{[^}]*\})\s*from\s*['"]([^'"\n]+)['"]"""
    ),
    # import('...')
    re.compile(r"""\bimport\s*\(\s*['"`]([^'"`\n]+)['"`]\s*\)"""),
    # const x = require('...') / const { a } = require('...')
    re.compile(
        r"""\b(?:const|let|var)\s+(?:[\w$]+|\{[^}]*\}|\[[^\]]*\])\s*=\s*"""
        r"""require\s*\(\s*['"]([^'"\n]+)['"]\s*\)"""
    ),
    # require('...') anywhere
    re.compile(r"""\brequire\s*\(\s*['"]([^'"\n]+)['"]\s*\)"""),
)


class RegexImportStrategy(BaseImportStrategy):
    name = "regex"

    def __init__(self, patterns: tuple[re.Pattern[str], ...] = IMPORT_PATTERNS):
        self.patterns = patterns

    def extract(self, source: str, file_path: str = "") -> list[str]:
        specifiers: list[str] = []
        for pattern in self.patterns:
            for m in pattern.finditer(source):
                specifiers.append(m.group(1))
        return specifiers
