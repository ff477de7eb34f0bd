"""package.json loading and entry point detection."""

from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_ENTRY_POINT = "./src/index.js"

# Checked in this order when no entry point is given
ENTRY_FIELDS = ("main", "module", "browser", "exports")


def load_manifest(directory: Path | str) -> dict | None:
    """Parse ``package.json`` in ``directory``; None if absent or invalid."""
    manifest_path = Path(directory) / "package.json"
    try:
        data = json.loads(manifest_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.debug("No usable package.json at %s: %s", manifest_path, e)
        return None
    if not isinstance(data, dict):
        logger.debug("package.json at %s is not an object", manifest_path)
        return None
    return data


def _entry_from_exports(exports) -> str | None:
    if isinstance(exports, str):
        return exports
    if not isinstance(exports, dict):
        return None
    root = exports.get(".")
    if isinstance(root, str) and root:
        return root
    if isinstance(root, dict):
        for key in ("default", "import"):
            value = root.get(key)
            if isinstance(value, str) and value:
                return value
    return None


def determine_entry_point(
    manifest: dict | None,
    user_entry: str | None = None,
) -> str:
    """Pick the entry point: user value, then manifest fields, then the default."""
    if user_entry:
        return user_entry

    if manifest:
        for field_name in ENTRY_FIELDS:
            value = manifest.get(field_name)
            if not value:
                continue
            if field_name == "exports":
                entry = _entry_from_exports(value)
                if entry:
                    return entry
                continue
            if isinstance(value, str):
                return value

    return DEFAULT_ENTRY_POINT
