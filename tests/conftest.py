"""Pytest configuration and shared fixtures."""

import io
import os

import pytest
from hypothesis import Verbosity, settings

from menucalc import ENGLISH, Application, Console, build_registry

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def registry():
    """Provide the built-in operations with English names."""
    return build_registry(ENGLISH.operation_names)


@pytest.fixture
def make_console():
    """Build a Console over scripted input lines; returns (console, stdout)."""

    def _make(*lines: str) -> tuple[Console, io.StringIO]:
        stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        stdout = io.StringIO()
        return Console(stdin, stdout), stdout

    return _make


@pytest.fixture
def run_session(registry, make_console):
    """Run a full English session over scripted input; returns (app, output)."""

    def _run(*lines: str):
        console, stdout = make_console(*lines)
        app = Application(registry, console, ENGLISH)
        app.run()
        return app, stdout.getvalue()

    return _run


@pytest.fixture
def expected_menu():
    """The exact English banner and menu block."""
    return """\
======== CALCULATOR ==========
1.Addition
2.Subtraction
3.Multiplication
4.Division
5.Power
6.Square root
7.Sine
8.Cosine
9.Tangent
10.Cotangent
11.Natural logarithm (ln)
12.Decimal logarithm (log10)
"""
