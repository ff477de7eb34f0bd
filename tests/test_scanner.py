"""Tests for the directory walker and test-file detection."""

import logging
import os

from treetracr.scanner import is_test_file, scan_directory, should_skip_dir


def test_scan_finds_source_files(make_project):
    root = make_project({
        "index.js": "",
        "src/app.tsx": "",
        "src/lib.mjs": "",
        "README.md": "",
        "styles.css": "",
    })
    files = scan_directory(root)
    assert files == sorted(files)
    assert set(files) == {
        str(root / "index.js"),
        str(root / "src" / "app.tsx"),
        str(root / "src" / "lib.mjs"),
    }


def test_scan_skips_ignored_dirs(make_project):
    root = make_project({
        "index.js": "",
        "node_modules/pkg/index.js": "",
        "dist/bundle.js": "",
        "build/out.js": "",
        "coverage/lcov.js": "",
        ".git/hooks/x.js": "",
    })
    assert scan_directory(root) == [str(root / "index.js")]


def test_scan_returns_absolute_paths(make_project, monkeypatch):
    root = make_project({"a.js": ""})
    monkeypatch.chdir(root)
    files = scan_directory(".")
    assert files == [str(root / "a.js")]
    assert os.path.isabs(files[0])


def test_unreadable_directory_is_empty(tmp_path, caplog):
    with caplog.at_level(logging.ERROR, logger="treetracr.scanner"):
        assert scan_directory(tmp_path / "does-not-exist") == []
    assert "Error scanning directory" in caplog.text


def test_should_skip_dir(tmp_path):
    assert should_skip_dir(tmp_path / "node_modules")
    assert not should_skip_dir(tmp_path / "src")


class TestIsTestFile:
    def test_patterns(self):
        assert is_test_file("/p/src/a.test.js")
        assert is_test_file("/p/src/a.spec.tsx")
        assert is_test_file("/p/src/__tests__/a.js")
        assert is_test_file("/p/test/a.js")
        assert not is_test_file("/p/src/a.js")
        assert not is_test_file("/p/src/testing.js")

    def test_relative_to_source_dir(self):
        # the checkout itself lives under a /test/ directory
        assert not is_test_file("/home/test/proj/src/a.js", source_dir="/home/test/proj")
        assert is_test_file("/home/test/proj/test/a.js", source_dir="/home/test/proj")

    def test_test_dir_override(self):
        assert is_test_file("/p/e2e/flow.js", test_dir="e2e", source_dir="/p")
        assert is_test_file("/p/e2e/deep/flow.js", test_dir="/p/e2e")
        assert not is_test_file("/p/e2e-helpers/x.js", test_dir="e2e", source_dir="/p")
