"""
Activity operations: notification thread subscriptions and stars.

Passing ``timeline=True`` to the star listings switches to the star
media type, which adds ``starred_at`` to every element and changes the
element shape accordingly.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from ..config import STAR_TIMELINE_ACCEPT
from ..domain import (
    Pagination,
    Subscription,
    SubscriptionRequest,
    json_decoder,
    stargazers_decoder,
    starred_repositories_decoder
)
from .base import ApiRequest, Operation, OperationGroup, repo_path, segment


def timeline_headers(timeline: bool) -> Dict[str, str]:
    return {'Accept': STAR_TIMELINE_ACCEPT} if timeline else {}


class ActivityOp(Operation):
    """Marker base for the activity group."""


@dataclass(frozen=True)
class SetThreadSubscription(ActivityOp):
    """Subscribe to, or ignore, a notification thread."""
    id: int
    subscribed: bool
    ignored: bool

    def request(self) -> ApiRequest:
        return ApiRequest(
            "PUT",
            f"notifications/threads/{segment(self.id)}/subscription",
            body=SubscriptionRequest(subscribed=self.subscribed, ignored=self.ignored).to_dict(),
            decoder=json_decoder(Subscription)
        )


@dataclass(frozen=True)
class ListStargazers(ActivityOp):
    owner: str
    repo: str
    timeline: bool = False
    pagination: Optional[Pagination] = None

    def request(self) -> ApiRequest:
        return ApiRequest(
            "GET",
            repo_path(self.owner, self.repo, "stargazers"),
            pagination=self.pagination,
            headers=timeline_headers(self.timeline),
            decoder=stargazers_decoder(self.timeline)
        )


@dataclass(frozen=True)
class ListStarredRepositories(ActivityOp):
    """
    List repositories starred by a user.

    Attributes:
        username: User whose stars are listed
        timeline: Include ``starred_at`` for each repository
        sort: ``created`` (when starred) or ``updated`` (last push)
        direction: ``asc`` or ``desc``
        pagination: Optional page/per_page
    """
    username: str
    timeline: bool = False
    sort: Optional[str] = None
    direction: Optional[str] = None
    pagination: Optional[Pagination] = None

    def request(self) -> ApiRequest:
        params = {}
        if self.sort is not None:
            params['sort'] = self.sort
        if self.direction is not None:
            params['direction'] = self.direction
        return ApiRequest(
            "GET",
            f"users/{segment(self.username)}/starred",
            params=params,
            pagination=self.pagination,
            headers=timeline_headers(self.timeline),
            decoder=starred_repositories_decoder(self.timeline)
        )


ACTIVITY = OperationGroup("activity", (SetThreadSubscription, ListStargazers, ListStarredRepositories))
