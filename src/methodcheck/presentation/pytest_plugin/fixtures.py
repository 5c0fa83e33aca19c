"""pytest fixtures for method assertions.

User overrides subject_resolver or methodcheck_config in their conftest.py.
"""

from __future__ import annotations

import pytest

from methodcheck.application.reporters.console import ConsoleConfig
from methodcheck.application.services.parser import MethodSpecParser
from methodcheck.domain.ports.subject_resolver import SubjectResolver
from methodcheck.infrastructure.reflection import ReflectionResolver
from methodcheck.presentation.api.assertions import MethodCheck

DEFAULT_REPORT_WIDTH = 120


def _get_ini_value(config: pytest.Config, name: str, default: str) -> str:
    """Get ini value from pytest config with fallback.

    Args:
        config: pytest Config object
        name: ini option name
        default: default value if not set

    Returns:
        String value of ini option
    """
    value = config.getini(name)
    if value:
        return str(value)
    return default


def console_config_from_ini(config: pytest.Config) -> ConsoleConfig:
    """Build reporter configuration from ini options.

    Reads methodcheck_report_width and methodcheck_report_color.

    Raises:
        pytest.UsageError: If methodcheck_report_width is not a positive integer
    """
    raw_width = _get_ini_value(config, "methodcheck_report_width", str(DEFAULT_REPORT_WIDTH))
    try:
        width = int(raw_width)
    except ValueError as e:
        raise pytest.UsageError(
            f"methodcheck_report_width must be an integer, got {raw_width!r}"
        ) from e
    if width <= 0:
        raise pytest.UsageError(f"methodcheck_report_width must be > 0, got {width}")

    return ConsoleConfig(
        width=width,
        color=bool(config.getini("methodcheck_report_color")),
    )


@pytest.fixture(scope="session")
def method_spec_parser() -> MethodSpecParser:
    """Parser for method specification strings.

    Returns:
        Stateless MethodSpecParser
    """
    return MethodSpecParser()


@pytest.fixture(scope="session")
def subject_resolver() -> SubjectResolver:
    """Subject resolution used by the methodcheck fixture.

    Override in conftest.py to resolve subjects differently.

    Returns:
        ReflectionResolver (runtime introspection)
    """
    return ReflectionResolver()


@pytest.fixture(scope="session")
def methodcheck_config(request: pytest.FixtureRequest) -> ConsoleConfig:
    """Failure report configuration read from ini options.

    Returns:
        ConsoleConfig
    """
    return console_config_from_ini(request.config)


@pytest.fixture(scope="session")
def methodcheck(subject_resolver: SubjectResolver) -> MethodCheck:
    """Entry point for method assertions.

    Returns:
        MethodCheck bound to subject_resolver
    """
    return MethodCheck(subject_resolver)
