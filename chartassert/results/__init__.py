"""
Assertion results and reporting.

Usage:
    from chartassert.results import AssertionResult, Reporter

    reporter = Reporter()
    reporter.print_results(results)
    print(Reporter.summary(results))
"""

# Models
from .models import AssertionResult

# Reporter
from .reporter import Reporter

__all__ = [
    # Models
    "AssertionResult",
    # Reporter
    "Reporter",
]
