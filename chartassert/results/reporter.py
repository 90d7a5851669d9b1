"""
Rendering of assertion results.

Formatting is pure: ``format_result`` turns a result into display lines,
``print_results`` sends them to a rich Console.
"""

from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.markup import escape

from .models import AssertionResult

INDENT = "  "


class Reporter:
    """
    Formats failed assertion results for the terminal.

    Example:
        reporter = Reporter()
        for line in reporter.format_result(result):
            print(line)
    """

    def __init__(self, console: Console | None = None, level: int = 0):
        self.console = console or Console(highlight=False)
        self.level = level

    def format_result(self, result: AssertionResult, level: int | None = None) -> list[str]:
        """
        Lay out one result: title line, then each diagnostic line one level
        deeper. Passing and skipped results produce no lines.
        """
        if result.passed or result.skipped:
            return []

        level = self.level if level is None else level
        lines = [f"{INDENT * level}{result.title()}"]
        lines.extend(f"{INDENT * (level + 1)}{line}" for line in result.fail_info)
        return lines

    def format_results(self, results: Iterable[AssertionResult]) -> list[str]:
        lines: list[str] = []
        for result in results:
            lines.extend(self.format_result(result))
        return lines

    def print_results(self, results: Iterable[AssertionResult]) -> None:
        """Print failed results, titles in red, followed by a blank line each."""
        for result in results:
            lines = self.format_result(result)
            if not lines:
                continue
            self.console.print(f"[red]{escape(lines[0])}[/red]")
            for line in lines[1:]:
                self.console.print(escape(line))
            self.console.print()

    @staticmethod
    def summary(results: Iterable[AssertionResult]) -> str:
        """One-line pass/fail/skip count."""
        results = list(results)
        skipped = sum(1 for r in results if r.skipped)
        passed = sum(1 for r in results if r.passed and not r.skipped)
        failed = len(results) - passed - skipped
        return f"Assertions: {passed} passed, {failed} failed, {skipped} skipped, {len(results)} total"
