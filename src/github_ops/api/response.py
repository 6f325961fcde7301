"""Typed result of executing an operation."""

from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, Optional, TypeVar

from .errors import GitHubError

T = TypeVar('T')
U = TypeVar('U')


@dataclass(frozen=True)
class GHResponse(Generic[T]):
    """
    Either a decoded result with its status code, or an error.

    A failed response carries ``error`` and nothing else. A successful
    response has ``error=None``; its ``status_code`` is that of the HTTP
    call that produced it, or None when no call was made (an empty
    Program). It may still carry ``result=None`` (e.g. 204 No Content).
    """

    result: Optional[T] = None
    status_code: Optional[int] = None
    headers: Dict[str, str] = field(default_factory=dict)
    error: Optional[GitHubError] = None

    @classmethod
    def success(cls, result: T, status_code: Optional[int],
                headers: Optional[Dict[str, str]] = None) -> 'GHResponse[T]':
        return cls(result=result, status_code=status_code, headers=dict(headers or {}))

    @classmethod
    def failure(cls, error: GitHubError) -> 'GHResponse[T]':
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the result, raising the carried error if there is one."""
        if self.error is not None:
            raise self.error
        return self.result

    def map(self, fn: Callable[[T], U]) -> 'GHResponse[U]':
        """Apply fn to a successful result; errors pass through untouched."""
        if self.error is not None:
            return GHResponse.failure(self.error)
        return GHResponse.success(fn(self.result), self.status_code, self.headers)
