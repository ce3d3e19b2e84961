"""Exception hierarchy for nimbridge.

Every error carries a machine-readable code and a recoverability hint so
that the CLI (or any other caller) can report it consistently.
"""

from collections.abc import Sequence


class ServerlessError(Exception):
    """Base exception for serverless deployment errors.

    Attributes:
        message: Human-readable error message.
        code: Machine-readable error code.
        recoverable: Whether retrying the operation could succeed.
    """

    def __init__(
        self,
        message: str,
        code: str,
        recoverable: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.recoverable = recoverable

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, str | bool]:
        """Convert exception to dictionary for JSON serialization.

        Returns:
            Dictionary with error details.
        """
        return {
            "error": self.code,
            "message": self.message,
            "recoverable": self.recoverable,
        }


class HomeDirectoryUnavailableError(ServerlessError):
    """The current user's home directory cannot be determined."""

    def __init__(self, cause: Exception | None = None) -> None:
        message = "Cannot determine the home directory of the current user"
        if cause:
            message += f": {cause}"
        super().__init__(message, "HOME_UNAVAILABLE")
        self.cause = cause


class MissingSourceSpecError(ServerlessError):
    """A serverless component has neither a `local` nor a `github` source."""

    def __init__(self, component: str | None = None) -> None:
        message = "one of `local` or `github` must appear in a `serverless` spec"
        if component:
            message = f"{message} (component '{component}')"
        super().__init__(message, "MISSING_SOURCE")
        self.component = component


class ConflictingSourceSpecError(ServerlessError):
    """A serverless component has both a `local` and a `github` source."""

    def __init__(self, component: str | None = None) -> None:
        message = "you cannot specify both `local` and `github` in a `serverless` spec"
        if component:
            message = f"{message} (component '{component}')"
        super().__init__(message, "CONFLICTING_SOURCE")
        self.component = component


class UnsupportedFeatureError(ServerlessError):
    """A requested capability is not implemented for serverless components."""

    def __init__(self, feature: str) -> None:
        super().__init__(
            f"the `{feature}` feature is not currently supported for serverless",
            "UNSUPPORTED",
        )
        self.feature = feature


class MissingRequiredFieldError(ServerlessError):
    """A required field is empty."""

    def __init__(self, field: str, message: str | None = None) -> None:
        super().__init__(
            message or f"the `{field}` field is required",
            "MISSING_FIELD",
        )
        self.field = field


class ConflictingVariableError(ServerlessError):
    """A static site already defines the variable that would be injected."""

    def __init__(self, site: str, key: str) -> None:
        super().__init__(
            f"static site '{site}' already defines the environment variable `{key}`",
            "CONFLICTING_VARIABLE",
        )
        self.site = site
        self.key = key


class ProcessInvocationError(ServerlessError):
    """The deployment tool could not be launched or exited with failure.

    The combined stdout/stderr text of the tool is kept in ``output`` so the
    caller can show the tool's own diagnostics verbatim.
    """

    def __init__(
        self,
        args: Sequence[str],
        output: str = "",
        returncode: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        command = " ".join(args)
        if cause is not None:
            message = f"failed to run `nim {command}`: {cause}"
        else:
            message = f"`nim {command}` exited with status {returncode}"
        super().__init__(message, "PROCESS_FAILED", recoverable=True)
        self.command_args = list(args)
        self.output = output
        self.returncode = returncode
        self.cause = cause
