"""Click CLI: analyze a directory and print the dependency report."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import click

from treetracr import __version__
from treetracr.analysis.cycles import format_cycle
from treetracr.models import AnalysisConfig, AnalysisReport, ExitCode
from treetracr.pipeline import run_analysis

logger = logging.getLogger(__name__)

_RULE = "============================================="

_EPILOG = """\b
Exit codes:
  0  all enabled checks passed
  1  circular dependencies found
  2  unused modules found
  3  circular dependencies and unused modules found
  4  unused package dependencies found
  7  unused package dependencies plus circular and/or unused modules
  70 internal error
"""


def _section(title: str, color: str = "cyan") -> None:
    click.echo(click.style(f"\n{_RULE}", fg=color))
    click.echo(click.style(title, fg=color))
    click.echo(click.style(_RULE, fg=color))


def _rel(path: str, source_dir: str) -> str:
    return os.path.relpath(path, source_dir)


def _split_args(args: tuple[str, ...]) -> tuple[str, str | None]:
    """Positional DIRECTORY / ENTRY_POINT; unknown options are warned about."""
    positional: list[str] = []
    for arg in args:
        if arg.startswith("-"):
            click.echo(click.style(f"Warning: Unknown option {arg}", fg="yellow"), err=True)
        else:
            positional.append(arg)
    for extra in positional[2:]:
        click.echo(click.style(f"Warning: Ignoring extra argument {extra}", fg="yellow"), err=True)
    directory = positional[0] if positional else "."
    entry_point = positional[1] if len(positional) > 1 else None
    return directory, entry_point


def print_report(report: AnalysisReport, config: AnalysisConfig) -> None:
    src = report.source_dir

    _section("UNUSED LOCAL MODULES", "yellow")
    if not report.unused_modules:
        click.echo(click.style("No unused local modules found!", fg="green"))
    else:
        click.echo(click.style(f"Found {len(report.unused_modules)} unused local modules:", fg="yellow"))
        for module in report.unused_modules:
            click.echo(click.style(f"- {_rel(module, src)}", fg="yellow"))

    _section("DEPENDENCY TREE FROM ENTRY POINT", "green")
    click.echo(report.tree_text)

    _section("CIRCULAR DEPENDENCIES", "red" if report.cycles else "cyan")
    if not report.cycles:
        click.echo(click.style("No circular dependencies found!", fg="green"))
    else:
        click.echo(click.style(f"Found {len(report.cycles)} circular dependencies:", fg="red"))
        for i, cycle in enumerate(report.cycles, 1):
            click.echo(click.style(f"{i}. {format_cycle(cycle, src)}", fg="red"))
    if report.tree_circular:
        click.echo(click.style("\nCircular references in dependency tree:", fg="yellow"))
        for chain in report.tree_circular:
            click.echo(click.style(f"- {chain}", fg="yellow"))

    _section("UNUSED PACKAGE DEPENDENCIES", "yellow")
    if not report.unused_dependencies:
        click.echo(click.style("No unused package dependencies found!", fg="green"))
    else:
        click.echo(click.style(
            f"Found {len(report.unused_dependencies)} unused package dependencies:", fg="yellow",
        ))
        for name in sorted(report.unused_dependencies):
            click.echo(click.style(f"- {name}", fg="yellow"))

    _section("TEST FILES")
    if not report.test_files:
        click.echo("No test files found.")
    else:
        click.echo(f"Found {len(report.test_files)} test files:")
        for test_file in report.test_files:
            click.echo(f"- {_rel(test_file, src)}")
        click.echo(click.style(f"\nDependencies of {_rel(report.test_files[0], src)}:", dim=True))
        click.echo(report.test_tree_text)

    if config.fails_enabled:
        _print_ci_summary(report, config)


def _print_ci_summary(report: AnalysisReport, config: AnalysisConfig) -> None:
    circular, unused, unused_deps = config.effective_fail_flags()
    _section("CI SUMMARY", "magenta")
    checks = [
        ("Circular dependencies", circular, len(report.cycles)),
        ("Unused modules", unused, len(report.unused_modules)),
        ("Unused package dependencies", unused_deps, len(report.unused_dependencies)),
    ]
    for label, enabled, count in checks:
        if not enabled:
            status = click.style("skipped", dim=True)
        elif count:
            status = click.style(f"FAIL ({count})", fg="red", bold=True)
        else:
            status = click.style("pass", fg="green")
        click.echo(f"  {label:<30} {status}")

    code = report.exit_code(config)
    color = "green" if code == ExitCode.OK else "red"
    click.echo(click.style(f"\nExit code: {int(code)}", fg=color))


@click.command(
    epilog=_EPILOG,
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
    },
)
@click.version_option(version=__version__)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.option("-t", "--test-dir", help="Treat every file under this directory as a test")
@click.option("--ci", is_flag=True, help="Fail on every check unless specific --fail-on flags are given")
@click.option("--fail-on-circular", is_flag=True, help="Exit non-zero when cycles are found")
@click.option("--fail-on-unused", is_flag=True, help="Exit non-zero when unused modules are found")
@click.option("--fail-on-unused-deps", is_flag=True, help="Exit non-zero when declared packages are unused")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(
    ctx: click.Context,
    args: tuple[str, ...],
    test_dir: str | None,
    ci: bool,
    fail_on_circular: bool,
    fail_on_unused: bool,
    fail_on_unused_deps: bool,
    verbose: bool,
):
    """treetracr: find unused modules, cycles and unused packages in a JS/TS project.

    \b
    DIRECTORY    project to analyze (default: current directory)
    ENTRY_POINT  main file (default: from package.json, else ./src/index.js)
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    directory, entry_point = _split_args(args)
    config = AnalysisConfig(
        source_dir=Path(directory),
        entry_point=entry_point,
        test_dir=test_dir,
        ci=ci,
        fail_on_circular=fail_on_circular,
        fail_on_unused=fail_on_unused,
        fail_on_unused_deps=fail_on_unused_deps,
    )

    try:
        if not config.source_dir.is_dir():
            raise NotADirectoryError(f"{directory} is not a directory")

        click.echo(click.style(f"Scanning source directory: {directory}", fg="blue"))
        report = run_analysis(config)
        click.echo(click.style(f"Using entry point: {report.entry_point}", fg="blue"))
        click.echo(f"Found {len(report.files)} JavaScript/TypeScript files")

        print_report(report, config)
    except Exception as e:
        logger.debug("analysis failed", exc_info=True)
        click.echo(click.style("Error: ", fg="red") + str(e), err=True)
        ctx.exit(int(ExitCode.FATAL))

    ctx.exit(int(report.exit_code(config)))


if __name__ == "__main__":
    cli()
