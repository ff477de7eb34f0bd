"""Import extraction: strategy composition and per-file resolution."""

from __future__ import annotations

import logging
import os

from treetracr.extractor.base import BaseImportStrategy, ImportParseError
from treetracr.extractor.regex_extractor import RegexImportStrategy
from treetracr.extractor.treesitter_extractor import TreeSitterImportStrategy
from treetracr.resolver import ModuleResolver, is_relative
from treetracr.scanner.file_cache import FileContentCache

logger = logging.getLogger(__name__)


class FallbackImportStrategy(BaseImportStrategy):
    """Try ``primary``; use ``fallback`` when it raises ImportParseError."""

    def __init__(self, primary: BaseImportStrategy, fallback: BaseImportStrategy):
        self.primary = primary
        self.fallback = fallback
        self.name = f"{primary.name}+{fallback.name}"

    def extract(self, source: str, file_path: str = "") -> list[str]:
        try:
            return self.primary.extract(source, file_path)
        except ImportParseError as e:
            logger.debug("%s failed (%s), falling back to %s", self.primary.name, e, self.fallback.name)
            return self.fallback.extract(source, file_path)


def default_strategy() -> BaseImportStrategy:
    return FallbackImportStrategy(TreeSitterImportStrategy(), RegexImportStrategy())


class ImportExtractor:
    """Read one file and return the canonical paths of its local imports."""

    def __init__(
        self,
        resolver: ModuleResolver,
        cache: FileContentCache,
        strategy: BaseImportStrategy | None = None,
    ):
        self.resolver = resolver
        self.cache = cache
        self.strategy = strategy or default_strategy()

    def extract_imports(self, file_path: str) -> list[str]:
        if not os.path.isfile(file_path):
            return []
        try:
            content = self.cache.read(file_path)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Error reading file %s: %s", file_path, e)
            return []

        if not content.strip():
            return []

        imports: dict[str, None] = {}
        for specifier in self.strategy.extract(content, file_path):
            if is_relative(specifier):
                imports[self.resolver.resolve(file_path, specifier)] = None
        return list(imports)


__all__ = [
    "BaseImportStrategy",
    "FallbackImportStrategy",
    "ImportExtractor",
    "ImportParseError",
    "RegexImportStrategy",
    "TreeSitterImportStrategy",
    "default_strategy",
]
