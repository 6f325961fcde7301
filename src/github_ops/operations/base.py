"""
Operation descriptors.

An Operation is an immutable description of one GitHub API call. It
knows how to describe the HTTP request it stands for (``request()``)
but never performs it; an interpreter hands that description to a
transport. Operations are grouped into closed OperationGroups, one per
API area, which the interpreter combines.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Tuple, Type
from urllib.parse import quote

from ..domain.common import Pagination


@dataclass(frozen=True)
class ApiRequest:
    """Everything the transport needs to issue one call."""
    method: str
    path: str
    params: Mapping[str, Any] = field(default_factory=dict)
    pagination: Optional[Pagination] = None
    body: Optional[Any] = None
    headers: Mapping[str, str] = field(default_factory=dict)
    # Turns the raw response text into the result; without one the parsed JSON is returned
    decoder: Optional[Callable[[str], Any]] = None


@dataclass(frozen=True)
class Operation(ABC):
    """Base class of every operation descriptor."""

    @abstractmethod
    def request(self) -> ApiRequest:
        """Describe the HTTP call this operation stands for."""


@dataclass(frozen=True)
class OperationGroup:
    """A closed set of operation classes belonging to one API area."""
    name: str
    operations: Tuple[Type[Operation], ...]

    def contains(self, operation: Operation) -> bool:
        return type(operation) in self.operations


def segment(value: Any) -> str:
    """Encode a value for use as a single path segment."""
    return quote(str(value), safe='')


def repo_path(owner: str, repo: str, *rest: Any) -> str:
    return "/".join(["repos", segment(owner), segment(repo)] + [segment(r) for r in rest])
