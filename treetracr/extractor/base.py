"""Abstract import-extraction strategy."""

from __future__ import annotations

import abc


class ImportParseError(Exception):
    """Raised by a strategy that could not make sense of a file."""


class BaseImportStrategy(abc.ABC):
    """Base class for strategies that pull import specifiers out of source text."""

    name: str = "base"

    @abc.abstractmethod
    def extract(self, source: str, file_path: str = "") -> list[str]:
        """Return every import specifier found in ``source``, in order.

        Specifiers are returned raw (external and relative alike); callers
        filter and resolve them. ``file_path`` only selects a grammar.
        """
