"""Tests for the command line interface."""

import pytest
from click.testing import CliRunner

from treetracr.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def project(make_project):
    return make_project(
        {
            "src/index.js": "import './utils.js';\nimport './components/button.js';\n",
            "src/utils.js": "export const add = (a, b) => a + b;\n",
            "src/components/button.js": "import '../utils.js';\n",
        },
        {"name": "test-project", "main": "./src/index.js"},
    )


@pytest.fixture
def messy_project(make_project):
    return make_project(
        {
            "src/index.js": "import './a.js';\n",
            "src/a.js": "import './b.js';\n",
            "src/b.js": "import './a.js';\n",
            "src/orphan.js": "",
        },
        {"name": "messy", "dependencies": {"never-used": "1.0.0"}},
    )


def test_help(runner):
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "ENTRY_POINT" in result.output
    assert "Exit codes" in result.output


def test_short_help(runner):
    assert runner.invoke(cli, ["-h"]).exit_code == 0


def test_clean_project(runner, project):
    result = runner.invoke(cli, [str(project)])
    assert result.exit_code == 0, result.output
    assert "Using entry point: ./src/index.js" in result.output
    assert "Found 3 JavaScript/TypeScript files" in result.output
    assert "No unused local modules found!" in result.output
    assert "DEPENDENCY TREE FROM ENTRY POINT" in result.output
    assert "src/utils.js [ref: 2]" in result.output
    assert "No circular dependencies found!" in result.output
    assert "CI SUMMARY" not in result.output


def test_custom_entry(runner, project):
    result = runner.invoke(cli, [str(project), "src/utils.js"])
    assert result.exit_code == 0
    assert "Using entry point: src/utils.js" in result.output
    assert "Found 2 unused local modules" in result.output


def test_problems_without_fail_flags_exit_zero(runner, messy_project):
    result = runner.invoke(cli, [str(messy_project)])
    assert result.exit_code == 0
    assert "src/a.js -> src/b.js -> src/a.js" in result.output
    assert "Circular references in dependency tree:" in result.output
    assert "- src/index.js -> src/a.js -> src/b.js -> src/a.js" in result.output
    assert "- src/orphan.js" in result.output
    assert "- never-used" in result.output


@pytest.mark.parametrize("flags, code", [
    (["--fail-on-circular"], 1),
    (["--fail-on-unused"], 2),
    (["--fail-on-circular", "--fail-on-unused"], 3),
    (["--fail-on-unused-deps"], 4),
    (["--fail-on-unused-deps", "--fail-on-circular"], 7),
    (["--ci"], 7),
    (["--ci", "--fail-on-unused"], 2),
])
def test_exit_codes(runner, messy_project, flags, code):
    result = runner.invoke(cli, [str(messy_project), *flags])
    assert result.exit_code == code, result.output
    assert "CI SUMMARY" in result.output


def test_ci_passes_on_clean_project(runner, project):
    result = runner.invoke(cli, ["--ci", str(project)])
    assert result.exit_code == 0
    assert "Exit code: 0" in result.output


def test_unknown_option_is_warning(runner, project):
    result = runner.invoke(cli, ["--bogus", str(project)])
    assert result.exit_code == 0
    assert "Unknown option --bogus" in result.output


def test_test_dir_option(runner, make_project):
    root = make_project({
        "src/index.js": "",
        "e2e/flow.js": "import '../src/index.js';\n",
    })
    result = runner.invoke(cli, [str(root), "--test-dir", "e2e", "--fail-on-unused"])
    assert result.exit_code == 0, result.output
    assert "- e2e/flow.js" in result.output


def test_missing_directory_is_fatal(runner, tmp_path):
    result = runner.invoke(cli, [str(tmp_path / "nope")])
    assert result.exit_code == 70
    assert "Error:" in result.output


def test_main_module_import_does_not_run_cli():
    import importlib

    module = importlib.import_module("treetracr.__main__")
    assert module.cli is cli
