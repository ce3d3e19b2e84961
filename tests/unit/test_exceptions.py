"""Tests for custom exceptions in nimbridge/core/exceptions.py."""

import pytest

from nimbridge.core.exceptions import (
    ConflictingSourceSpecError,
    ConflictingVariableError,
    HomeDirectoryUnavailableError,
    MissingRequiredFieldError,
    MissingSourceSpecError,
    ProcessInvocationError,
    ServerlessError,
    UnsupportedFeatureError,
)


class TestServerlessError:
    """Test ServerlessError base class."""

    def test_init_with_defaults(self) -> None:
        """ServerlessError stores message and code, non-recoverable by default."""
        error = ServerlessError("Test message", "TEST_CODE")
        assert error.message == "Test message"
        assert error.code == "TEST_CODE"
        assert error.recoverable is False

    def test_str_representation(self) -> None:
        """__str__ includes code and message."""
        error = ServerlessError("Something went wrong", "ERR_001")
        assert str(error) == "[ERR_001] Something went wrong"

    def test_to_dict(self) -> None:
        """to_dict returns serializable dictionary."""
        error = ServerlessError("Test message", "TEST_CODE", recoverable=True)
        assert error.to_dict() == {
            "error": "TEST_CODE",
            "message": "Test message",
            "recoverable": True,
        }


class TestSpecificErrors:
    """Test the error kinds raised by nimbridge."""

    @pytest.mark.parametrize(
        ("error", "code"),
        [
            (HomeDirectoryUnavailableError(), "HOME_UNAVAILABLE"),
            (MissingSourceSpecError(), "MISSING_SOURCE"),
            (ConflictingSourceSpecError(), "CONFLICTING_SOURCE"),
            (UnsupportedFeatureError("deploy on push"), "UNSUPPORTED"),
            (MissingRequiredFieldError("repo"), "MISSING_FIELD"),
            (ConflictingVariableError("web", "SERVERLESS_URL"), "CONFLICTING_VARIABLE"),
            (ProcessInvocationError(["auth"], returncode=1), "PROCESS_FAILED"),
        ],
    )
    def test_codes(self, error: ServerlessError, code: str) -> None:
        """Each error kind has its own code and is a ServerlessError."""
        assert error.code == code
        assert isinstance(error, ServerlessError)

    def test_home_directory_cause(self) -> None:
        """Cause is kept and shown."""
        cause = RuntimeError("no HOME")
        error = HomeDirectoryUnavailableError(cause)
        assert error.cause is cause
        assert "no HOME" in str(error)

    def test_source_errors_name_component(self) -> None:
        """Component name appears in source errors when given."""
        assert "'api'" in str(MissingSourceSpecError("api"))
        assert "'api'" in str(ConflictingSourceSpecError("api"))

    def test_missing_field_default_message(self) -> None:
        """Field name is kept and used in the default message."""
        error = MissingRequiredFieldError("repo")
        assert error.field == "repo"
        assert "`repo`" in str(error)

    def test_missing_field_custom_message(self) -> None:
        """Custom message replaces the default one."""
        error = MissingRequiredFieldError("path", "path or source_dir needed")
        assert error.message == "path or source_dir needed"

    def test_conflicting_variable(self) -> None:
        """Site and key are kept."""
        error = ConflictingVariableError("web", "SERVERLESS_URL")
        assert error.site == "web"
        assert error.key == "SERVERLESS_URL"
        assert "web" in str(error)


class TestProcessInvocationError:
    """Test ProcessInvocationError."""

    def test_non_zero_exit(self) -> None:
        """Output and exit status are preserved."""
        error = ProcessInvocationError(
            ["project", "deploy"], output="Error: no credentials", returncode=2
        )
        assert error.output == "Error: no credentials"
        assert error.returncode == 2
        assert error.command_args == ["project", "deploy"]
        assert "nim project deploy" in str(error)
        assert "status 2" in str(error)
        assert error.recoverable is True

    def test_launch_failure(self) -> None:
        """Launch failures carry the cause and no output."""
        cause = FileNotFoundError("nim")
        error = ProcessInvocationError(["auth", "current"], cause=cause)
        assert error.cause is cause
        assert error.output == ""
        assert error.returncode is None
        assert "failed to run" in str(error)
