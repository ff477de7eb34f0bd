"""Turns relative import specifiers into canonical module identities."""

from __future__ import annotations

import logging
import os

from treetracr.scanner.file_cache import FileContentCache
from treetracr.scanner.language_map import SOURCE_EXTENSIONS

logger = logging.getLogger(__name__)


def is_relative(specifier: str) -> bool:
    return specifier.startswith(".")


class ModuleResolver:
    """Resolve ``./foo`` style specifiers against the importing file.

    Extension-less paths are tried as ``<path>/index.<ext>`` first, then
    ``<path><ext>``, in the order of ``extensions``.
    """

    def __init__(
        self,
        extensions: tuple[str, ...] = SOURCE_EXTENSIONS,
        cache: FileContentCache | None = None,
    ):
        self.extensions = extensions
        self.cache = cache

    def resolve(self, base_path: str, specifier: str) -> str:
        if not is_relative(specifier):
            return specifier

        full_path = os.path.normpath(
            os.path.join(os.path.dirname(os.path.abspath(base_path)), specifier)
        )

        if os.path.splitext(full_path)[1]:
            resolved = full_path if os.path.isfile(full_path) else None
        else:
            resolved = self._find_candidate(full_path)

        if resolved is None:
            logger.warning(
                "Could not resolve %r imported from %s", specifier, base_path,
            )
            return full_path

        if self.cache is not None:
            self.cache.prefetch(resolved)
        return resolved

    def _find_candidate(self, full_path: str) -> str | None:
        for ext in self.extensions:
            index_path = os.path.join(full_path, f"index{ext}")
            if os.path.isfile(index_path):
                return index_path

        for ext in self.extensions:
            with_ext = f"{full_path}{ext}"
            if os.path.isfile(with_ext):
                return with_ext

        return None
