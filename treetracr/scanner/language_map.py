"""Shared extension, grammar and directory tables for scanning and parsing."""

from __future__ import annotations

import re

# Lookup order matters: it decides which file wins when several candidates exist.
SOURCE_EXTENSIONS: tuple[str, ...] = (".js", ".jsx", ".ts", ".tsx", ".mjs", ".jest")

# Maps file extension -> tree-sitter grammar name
EXT_TO_GRAMMAR: dict[str, str] = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".jest": "javascript",
    ".ts": "typescript",
    ".tsx": "tsx",
}

IGNORE_DIRS: tuple[str, ...] = ("node_modules", "dist", "build", ".git", "coverage")

TEST_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\.test\.[jt]sx?$"),
    re.compile(r"\.spec\.[jt]sx?$"),
    re.compile(r"__tests__/"),
    re.compile(r"/test/"),
)
