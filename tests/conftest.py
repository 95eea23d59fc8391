"""Pytest configuration and shared fixtures for the html2annotated test suite.

This module registers the test markers, configures Hypothesis profiles and
provides fixtures shared across unit and integration tests.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from html2annotated.annotated import AnnotatedStringBuilder

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, deadline=None, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20, deadline=None)
settings.register_profile(
    "debug",
    max_examples=10,
    deadline=None,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate],
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - full conversion pipeline tests")
    config.addinivalue_line("markers", "security: Sanitization and URL safety tests")


@pytest.fixture
def builder() -> AnnotatedStringBuilder:
    """Provide a fresh annotated string builder."""
    return AnnotatedStringBuilder()
