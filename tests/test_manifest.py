"""Tests for package.json loading and entry point detection."""

import pytest

from treetracr.manifest import DEFAULT_ENTRY_POINT, determine_entry_point, load_manifest


def test_load_manifest(make_project):
    root = make_project({}, manifest={"name": "x", "main": "lib/index.js"})
    assert load_manifest(root) == {"name": "x", "main": "lib/index.js"}


def test_load_manifest_missing(tmp_path):
    assert load_manifest(tmp_path) is None


def test_load_manifest_invalid_json(tmp_path):
    (tmp_path / "package.json").write_text("{not json")
    assert load_manifest(tmp_path) is None


def test_load_manifest_not_an_object(tmp_path):
    (tmp_path / "package.json").write_text("[1, 2]")
    assert load_manifest(tmp_path) is None


def test_user_entry_wins():
    assert determine_entry_point({"main": "main.js"}, "custom.js") == "custom.js"


def test_default_without_manifest():
    assert determine_entry_point(None) == DEFAULT_ENTRY_POINT == "./src/index.js"


@pytest.mark.parametrize("manifest, expected", [
    ({"main": "m.js", "module": "mod.js"}, "m.js"),
    ({"module": "mod.js", "browser": "b.js"}, "mod.js"),
    ({"browser": "b.js", "exports": "e.js"}, "b.js"),
    ({"exports": "./e.js"}, "./e.js"),
    ({"exports": {".": "./dot.js"}}, "./dot.js"),
    ({"exports": {".": {"default": "./d.js", "import": "./i.js"}}}, "./d.js"),
    ({"exports": {".": {"import": "./i.js", "require": "./r.cjs"}}}, "./i.js"),
    ({"exports": {".": {"require": "./r.cjs"}}}, DEFAULT_ENTRY_POINT),
    ({"exports": {"./sub": "./sub.js"}}, DEFAULT_ENTRY_POINT),
    ({"main": ""}, DEFAULT_ENTRY_POINT),
    ({"browser": {"./a.js": "./b.js"}}, DEFAULT_ENTRY_POINT),
    ({"name": "nothing"}, DEFAULT_ENTRY_POINT),
])
def test_entry_field_priority(manifest, expected):
    assert determine_entry_point(manifest) == expected
