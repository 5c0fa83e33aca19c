"""Tests for ConsoleReporter.

Tests:
- ConsoleConfig default values and customization
- ConsoleReporter report() output format
"""

import pytest

from methodcheck.application.reporters.console import ConsoleConfig, ConsoleReporter
from tests.factories import make_assertion_error


class TestConsoleConfig:
    """Tests for ConsoleConfig."""

    def test_default_values(self) -> None:
        config = ConsoleConfig()
        assert config.width == 120
        assert config.color is True
        assert config.show_reason is True

    def test_custom_values(self) -> None:
        config = ConsoleConfig(width=80, color=False, show_reason=False)
        assert config.width == 80
        assert config.color is False
        assert config.show_reason is False

    def test_non_positive_width_raises(self) -> None:
        with pytest.raises(ValueError, match="width must be > 0"):
            ConsoleConfig(width=0)


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    def test_report_contains_header(self) -> None:
        output = ConsoleReporter().report(make_assertion_error())
        assert "METHOD ASSERTION FAILED" in output

    def test_report_contains_fields(self) -> None:
        reporter = ConsoleReporter(ConsoleConfig(color=False))
        output = reporter.report(make_assertion_error())
        assert "Subject" in output
        assert "'tests.samples.ClassWithMethodFoo'" in output
        assert "Expected" in output
        assert "has private method foo()" in output
        assert "Actual" in output
        assert "has public method foo" in output

    def test_report_without_reason(self) -> None:
        reporter = ConsoleReporter(ConsoleConfig(color=False, show_reason=False))
        output = reporter.report(make_assertion_error())
        assert "Actual" not in output

    def test_report_contains_custom_message(self) -> None:
        reporter = ConsoleReporter(ConsoleConfig(color=False))
        output = reporter.report(make_assertion_error(message="services must expose foo"))
        assert "services must expose foo" in output

    def test_markup_in_subject_is_escaped(self) -> None:
        reporter = ConsoleReporter(ConsoleConfig(color=False))
        output = reporter.report(make_assertion_error(subject="[1, 2]"))
        assert "[1, 2]" in output

    def test_no_ansi_without_color(self) -> None:
        reporter = ConsoleReporter(ConsoleConfig(color=False))
        assert "\x1b[" not in reporter.report(make_assertion_error())

    def test_ansi_with_color(self) -> None:
        reporter = ConsoleReporter(ConsoleConfig(color=True))
        assert "\x1b[" in reporter.report(make_assertion_error())
