"""
Error classes for GitHub API calls.

Errors are returned as values inside a GHResponse rather than raised
across the public API. They subclass Exception so that callers who
prefer exceptions can use GHResponse.unwrap().
"""

from typing import Any, Optional


class GitHubError(Exception):
    """Base class for all errors produced while executing an operation."""

    def __init__(self, message: str):
        """Initialize error."""
        super().__init__(message)
        self.message = message

    def __eq__(self, other):
        return type(self) is type(other) and self.__dict__ == other.__dict__

    def __hash__(self):
        return hash((type(self), self.message))


class NetworkError(GitHubError):
    """Connection, timeout or DNS failure; no HTTP response was received."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        """
        Initialize network error.

        Args:
            message: Error message
            cause: Underlying transport exception, if any
        """
        super().__init__(message)
        self.cause = cause


class ApiError(GitHubError):
    """GitHub answered with a non-success status."""

    def __init__(self, status: int, message: str,
                 response_data: Optional[Any] = None):
        """
        Initialize API error.

        Args:
            status: HTTP status code
            message: Upstream error message, or the raw body when there is none
            response_data: Decoded error body for debugging
        """
        super().__init__(message)
        self.status = status
        self.response_data = response_data

    def __str__(self):
        return f"{self.status}: {self.message}"


class DecodingError(GitHubError):
    """Response body did not match the operation's expected type."""

    def __init__(self, message: str, body: Optional[str] = None):
        """
        Initialize decoding error.

        Args:
            message: What failed to decode
            body: Raw response body
        """
        super().__init__(message)
        self.body = body


class ProgramError(GitHubError):
    """A program step failed to produce the next operation; no call was made."""

    def __init__(self, message: str, step: int, cause: Optional[BaseException] = None):
        """
        Initialize program error.

        Args:
            message: Error message
            step: Index of the failing step
            cause: Exception raised by the step, if any
        """
        super().__init__(message)
        self.step = step
        self.cause = cause
