#!/usr/bin/env python3
"""
chartassert CLI - assertions for rendered Kubernetes manifests

Usage:
    chartassert run <suite.yaml> <manifest.yaml>... [OPTIONS]
    chartassert validate <suite.yaml>
    chartassert --version
"""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .errors import DocumentLoadError
from .results import Reporter
from .runner import run_suite
from .suite import load_documents, load_suite

app = typer.Typer(
    name="chartassert",
    help="Assertions for rendered Kubernetes manifests",
    add_completion=False,
)
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"chartassert v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
    log_level: str = typer.Option(
        "WARNING", "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)"
    ),
):
    """
    chartassert - assertions for rendered Kubernetes manifests

    Check rendered manifests against declarative YAML assertion suites.
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def run(
    suite_file: Path = typer.Argument(
        ...,
        help="Path to the assertion suite YAML file",
        exists=True,
        readable=True,
    ),
    manifests: List[Path] = typer.Argument(
        ...,
        help="Rendered manifest files (multi-document YAML)",
    ),
    fail_fast: Optional[bool] = typer.Option(
        None, "--fail-fast/--no-fail-fast",
        help="Stop each assertion at the first failing document (overrides the suite default)"
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q",
        help="Only show failures and the final status"
    ),
    output: str = typer.Option(
        "text", "--output", "-o",
        help="Output format: text or json"
    ),
):
    """
    Run an assertion suite against rendered manifests.
    """
    suite, validation = load_suite(suite_file)

    if not validation.is_valid:
        console.print(f"\n[red]❌ Validation failed:[/red]")
        console.print(str(validation))
        raise typer.Exit(code=1)

    try:
        documents = load_documents(manifests)
    except DocumentLoadError as e:
        console.print(f"[red]❌ Cannot load manifests:[/red] {e}")
        raise typer.Exit(code=1)

    if not quiet and output != "json":
        console.print(f"📄 Suite: {suite.name} ({len(suite.asserts)} assertions, {len(documents)} documents)")

    results = run_suite(suite, documents, fail_fast=fail_fast)

    if output == "json":
        console.print_json(data={
            "suite": suite.name,
            "passed": all(r.passed for r in results),
            "results": [r.to_dict() for r in results],
        })
    else:
        Reporter(console=console).print_results(results)
        console.print(Reporter.summary(results))

    if all(r.passed for r in results):
        raise typer.Exit(code=0)
    raise typer.Exit(code=1)


@app.command()
def validate(
    suite_file: Path = typer.Argument(
        ...,
        help="Path to the assertion suite YAML file",
        exists=True,
        readable=True,
    ),
):
    """
    Validate an assertion suite without running it.
    """
    console.print(f"\n📄 Validating: {suite_file}")

    suite, validation = load_suite(suite_file)

    if not validation.is_valid:
        console.print(f"\n[red]❌ Validation failed:[/red]")
        console.print(str(validation))
        raise typer.Exit(code=1)

    console.print(f"\n[green]✅ Valid suite:[/green] {suite.name}")

    table = Table(title="Assertions")
    table.add_column("#", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Path")
    table.add_column("Modifiers")

    for index, assertion in enumerate(suite.asserts):
        modifiers = []
        if assertion.not_:
            modifiers.append("not")
        if assertion.document_index is not None:
            modifiers.append(f"documentIndex={assertion.document_index}")
        if assertion.skipped:
            modifiers.append("skipped")
        table.add_row(
            str(index),
            assertion.assert_type,
            assertion.validator.path,
            ", ".join(modifiers),
        )

    console.print()
    console.print(table)


@app.command()
def info():
    """
    Show information about chartassert.
    """
    console.print(f"""
[bold]chartassert[/bold] v{__version__}

Assertions for rendered Kubernetes manifests

[bold]Assertions:[/bold]
  • stringContains (plain, fromJson, fromYaml, ignoreFormatting)
  • equal, matchRegex, exists, lengthEqual
  • not / documentIndex / customInfo / skip modifiers

[bold]Quick Start:[/bold]
  chartassert validate tests/deployment_test.yaml
  chartassert run tests/deployment_test.yaml rendered/deployment.yaml
""")


if __name__ == "__main__":
    app()
