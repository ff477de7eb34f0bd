"""Shared fixtures: small JavaScript projects written into tmp_path."""

import json
from pathlib import Path

import pytest


def write_project(root: Path, files: dict[str, str], manifest: dict | None = None) -> Path:
    for rel_path, content in files.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    if manifest is not None:
        (root / "package.json").write_text(json.dumps(manifest), encoding="utf-8")
    return root


@pytest.fixture
def simple_project(tmp_path):
    """index.js pulls in utils, components/Bar and services/baz; nothing unused."""
    return write_project(tmp_path, {
        "index.js": (
            "import { add } from './utils.js';\n"
            "import Bar from './components/Bar.js';\n"
            "const baz = require('./services/baz.js');\n"
        ),
        "utils.js": "export const add = (a, b) => a + b;\n",
        "components/Bar.js": "export default function Bar() { return null; }\n",
        "services/baz.js": "module.exports = {};\n",
    })


@pytest.fixture
def cyclic_project(tmp_path):
    """a.js -> b.js -> c.js -> a.js"""
    return write_project(tmp_path, {
        "a.js": "import './b.js';\n",
        "b.js": "import './c.js';\n",
        "c.js": "import './a.js';\n",
    })


@pytest.fixture
def make_project(tmp_path):
    def _make(files: dict[str, str], manifest: dict | None = None) -> Path:
        return write_project(tmp_path, files, manifest)
    return _make
