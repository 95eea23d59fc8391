#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_decorators.py
"""Unit tests for dependency checking, timing and the exception hierarchy."""

import logging

import pytest

from html2annotated.exceptions import (
    AnnotationScopeError,
    DependencyError,
    Html2AnnotatedError,
    InvalidOptionsError,
    ParsingError,
    ValidationError,
)
from html2annotated.utils.decorators import (
    check_version_requirement,
    debug_timer,
    find_unmet_requirements,
    requires_dependencies,
)


@pytest.mark.unit
class TestRequiresDependencies:
    """Tests for the requires_dependencies decorator."""

    def test_passes_through_when_available(self) -> None:
        """Test that the wrapped function runs when packages are importable."""

        @requires_dependencies("html", [("beautifulsoup4", "bs4", "")])
        def convert(value):
            return value * 2

        assert convert(21) == 42

    def test_missing_package(self) -> None:
        """Test that a missing package raises DependencyError with install hints."""

        @requires_dependencies("html", [("not-a-real-package", "not_a_real_package_xyz", ">=1.0")])
        def convert():
            return "unreachable"

        with pytest.raises(DependencyError) as exc_info:
            convert()

        error = exc_info.value
        assert error.missing_packages == [("not-a-real-package", ">=1.0")]
        assert isinstance(error.original_import_error, ImportError)
        assert "pip install" in str(error)

    def test_version_mismatch(self) -> None:
        """Test that an unsatisfiable version requirement is reported."""

        @requires_dependencies("html", [("beautifulsoup4", "bs4", ">=999.0")])
        def convert():
            return "unreachable"

        with pytest.raises(DependencyError) as exc_info:
            convert()

        assert exc_info.value.version_mismatches[0][:2] == ("beautifulsoup4", ">=999.0")

    def test_find_unmet_requirements(self) -> None:
        """Test that missing and satisfied packages are told apart."""
        missing, mismatched, first_error = find_unmet_requirements(
            [("beautifulsoup4", "bs4", ">=4.0"), ("not-a-real-package", "not_a_real_package_xyz", "")]
        )

        assert missing == [("not-a-real-package", "")]
        assert mismatched == []
        assert isinstance(first_error, ImportError)

    def test_check_version_requirement(self) -> None:
        """Test version checks against installed and missing distributions."""
        meets, installed = check_version_requirement("beautifulsoup4", ">=4.0")
        assert meets is True
        assert installed

        assert check_version_requirement("not-a-real-package", ">=1.0") == (False, None)


@pytest.mark.unit
class TestDebugTimer:
    """Tests for the debug_timer context manager."""

    def test_logs_when_debug_enabled(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that elapsed time is logged at DEBUG level."""
        logger = logging.getLogger("html2annotated.test")
        with caplog.at_level(logging.DEBUG, logger="html2annotated.test"):
            with debug_timer(logger, "Sample walk"):
                pass
        assert "Sample walk completed in" in caplog.text

    def test_silent_otherwise(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that nothing is logged above DEBUG level."""
        logger = logging.getLogger("html2annotated.test.quiet")
        with caplog.at_level(logging.INFO, logger="html2annotated.test.quiet"):
            with debug_timer(logger, "Quiet walk"):
                pass
        assert "Quiet walk" not in caplog.text


@pytest.mark.unit
class TestExceptions:
    """Tests for the exception hierarchy."""

    @pytest.mark.parametrize(
        "error",
        [
            ValidationError("bad"),
            InvalidOptionsError("html", dict, list),
            AnnotationScopeError("unbalanced"),
            ParsingError("failed", parsing_stage="parse"),
            DependencyError("html", [("bleach", ">=6.0.0")]),
        ],
    )
    def test_all_derive_from_base(self, error: Exception) -> None:
        """Test that every library error can be caught with the base class."""
        assert isinstance(error, Html2AnnotatedError)

    def test_invalid_options_message(self) -> None:
        """Test the generated message names both types."""
        error = InvalidOptionsError("html", dict, list)
        assert "'dict'" in error.message
        assert "'list'" in error.message
        assert isinstance(error, ValidationError)

    def test_original_error_kept(self) -> None:
        """Test that a wrapped exception is preserved."""
        cause = ValueError("inner")
        error = ParsingError("outer", parsing_stage="sanitize", original_error=cause)

        assert error.original_error is cause
        assert error.parsing_stage == "sanitize"

    def test_dependency_error_install_command(self) -> None:
        """Test that a custom install command replaces the generated one."""
        error = DependencyError("html", [("lxml", "")], install_command="pip install html2annotated[lxml]")
        assert "html2annotated[lxml]" in str(error)
