"""pytest plugin for methodcheck.

Provides fixtures for method assertions:
    method_spec_parser: MethodSpecParser
    subject_resolver: Subject resolution (override in conftest.py)
    methodcheck_config: Failure report configuration
    methodcheck: MethodCheck entry point

Failed method assertions get an extra "methodcheck" report section
rendered by ConsoleReporter.

Configuration (pytest.ini or pyproject.toml):
    methodcheck_report_width: Report width in characters (default: 120)
    methodcheck_report_color: Colored report (default: true)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from methodcheck.application.reporters.console import ConsoleReporter
from methodcheck.domain.exceptions import HasMethodAssertionError

# Register fixtures from fixtures module
from methodcheck.presentation.pytest_plugin.fixtures import (
    console_config_from_ini,
    method_spec_parser,
    methodcheck,
    methodcheck_config,
    subject_resolver,
)

if TYPE_CHECKING:
    from collections.abc import Generator

# Export fixtures for pytest discovery
__all__ = [
    "method_spec_parser",
    "methodcheck",
    "methodcheck_config",
    "subject_resolver",
]

REPORT_SECTION = "methodcheck"


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        "methodcheck_report_width",
        "Width of methodcheck failure reports in characters",
        default=None,
    )
    parser.addini(
        "methodcheck_report_color",
        "Render methodcheck failure reports with ANSI styles",
        type="bool",
        default=True,
    )


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "methodcheck: mark test as method signature test",
    )


@pytest.hookimpl(wrapper=True)
def pytest_runtest_makereport(
    item: pytest.Item,
    call: pytest.CallInfo[None],
) -> Generator[None, pytest.TestReport, pytest.TestReport]:
    """Attach rich failure report to tests failing a method assertion."""
    report = yield

    if call.excinfo is not None and isinstance(call.excinfo.value, HasMethodAssertionError):
        reporter = ConsoleReporter(console_config_from_ini(item.config))
        report.sections.append((REPORT_SECTION, reporter.report(call.excinfo.value)))

    return report
