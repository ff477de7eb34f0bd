"""Tree-sitter-based import extraction for JavaScript and TypeScript."""

from __future__ import annotations

import os

from tree_sitter_language_pack import get_parser

from treetracr.extractor.base import BaseImportStrategy, ImportParseError
from treetracr.scanner.language_map import EXT_TO_GRAMMAR

_DEFAULT_GRAMMAR = "javascript"

# Statement nodes whose ``source`` field is the module specifier
_SOURCE_FIELD_TYPES = {"import_statement", "export_statement", "import_require_clause"}


class TreeSitterImportStrategy(BaseImportStrategy):
    """Walks the syntax tree and collects module specifiers.

    Covers import declarations, ``export ... from`` re-exports, dynamic
    ``import()`` calls, ``require()`` calls in any position (bare, assigned,
    destructured, nested) and TypeScript ``import x = require()``.
    """

    name = "tree-sitter"

    def __init__(self):
        self._parser_cache: dict[str, object] = {}

    def extract(self, source: str, file_path: str = "") -> list[str]:
        grammar_name = EXT_TO_GRAMMAR.get(os.path.splitext(file_path)[1], _DEFAULT_GRAMMAR)
        source_bytes = source.encode("utf-8")
        try:
            tree = self._get_parser(grammar_name).parse(source_bytes)
        except (ValueError, RuntimeError) as e:
            raise ImportParseError(f"{file_path or '<source>'}: {e}") from e

        if tree.root_node.has_error:
            raise ImportParseError(f"{file_path or '<source>'}: syntax error")

        specifiers: list[str] = []
        stack = [tree.root_node]
        while stack:
            node = stack.pop()
            spec = self._specifier_of(node)
            if spec is not None:
                specifiers.append(spec)
            stack.extend(reversed(node.children))
        return specifiers

    def _specifier_of(self, node) -> str | None:
        if node.type in _SOURCE_FIELD_TYPES:
            source = node.child_by_field_name("source")
            if source is None and node.type == "import_require_clause":
                # older typescript grammars leave the string unnamed
                source = next((c for c in node.named_children if c.type == "string"), None)
            return _string_value(source)

        if node.type == "call_expression":
            func = node.child_by_field_name("function")
            if func is None:
                return None
            is_dynamic_import = func.type == "import"
            is_require = func.type == "identifier" and func.text == b"require"
            if not (is_dynamic_import or is_require):
                return None
            args = node.child_by_field_name("arguments")
            if args is None or not args.named_children:
                return None
            return _string_value(args.named_children[0])

        return None

    def _get_parser(self, grammar_name: str):
        if grammar_name not in self._parser_cache:
            self._parser_cache[grammar_name] = get_parser(grammar_name)
        return self._parser_cache[grammar_name]


def _string_value(node) -> str | None:
    """Literal value of a string node, or None for anything computed."""
    if node is None or not node.text:
        return None
    if node.type == "string":
        return node.text.decode("utf-8")[1:-1]
    if node.type == "template_string":
        if any(child.type == "template_substitution" for child in node.children):
            return None
        return node.text.decode("utf-8")[1:-1]
    return None
