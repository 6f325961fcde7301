"""Users operations."""

from dataclasses import dataclass
from typing import List, Optional

from ..domain import Pagination, User, json_decoder
from .base import ApiRequest, Operation, OperationGroup, segment


class UserOp(Operation):
    """Marker base for the users group."""


@dataclass(frozen=True)
class GetUser(UserOp):
    """Get information for a particular user."""
    username: str

    def request(self) -> ApiRequest:
        return ApiRequest("GET", f"users/{segment(self.username)}", decoder=json_decoder(User))


@dataclass(frozen=True)
class GetAuthUser(UserOp):
    """Get information of the authenticated user."""

    def request(self) -> ApiRequest:
        return ApiRequest("GET", "user", decoder=json_decoder(User))


@dataclass(frozen=True)
class ListUsers(UserOp):
    """
    List all users in the order they signed up.

    Attributes:
        since: The integer ID of the last user that you've seen
        pagination: Optional page/per_page
    """
    since: int
    pagination: Optional[Pagination] = None

    def request(self) -> ApiRequest:
        return ApiRequest(
            "GET",
            "users",
            params={'since': str(self.since)},
            pagination=self.pagination,
            decoder=json_decoder(List[User])
        )


@dataclass(frozen=True)
class ListFollowing(UserOp):
    """List the users a user follows."""
    username: str
    pagination: Optional[Pagination] = None

    def request(self) -> ApiRequest:
        return ApiRequest(
            "GET",
            f"users/{segment(self.username)}/following",
            pagination=self.pagination,
            decoder=json_decoder(List[User])
        )


USERS = OperationGroup("users", (GetUser, GetAuthUser, ListUsers, ListFollowing))
