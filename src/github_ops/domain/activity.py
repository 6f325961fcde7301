"""
Activity records: notification subscriptions and stars.

Star listings come in two shapes. With the default media type each
element is the bare user or repository. With the star media type
(``timeline``) each element wraps it together with ``starred_at``.
"""

from typing import Callable, List, Optional

from .common import GitHubModel, RequestBody, type_adapter
from .repository import Repository
from .user import User


class Subscription(GitHubModel):
    subscribed: bool
    ignored: bool
    reason: Optional[str] = None
    created_at: Optional[str] = None
    url: Optional[str] = None
    thread_url: Optional[str] = None


class SubscriptionRequest(RequestBody):
    subscribed: bool
    ignored: bool


class Stargazer(GitHubModel):
    user: User
    starred_at: Optional[str] = None


class TimelineStargazer(Stargazer):
    starred_at: str


class StarredRepository(GitHubModel):
    repo: Repository
    starred_at: Optional[str] = None


class TimelineStarredRepository(StarredRepository):
    starred_at: str


def stargazers_decoder(timeline: bool = False) -> Callable[[str], List[Stargazer]]:
    """Decoder for a stargazer listing in the shape the media type selects."""
    if timeline:
        return type_adapter(List[TimelineStargazer]).validate_json
    users = type_adapter(List[User])
    return lambda text: [Stargazer(user=user) for user in users.validate_json(text)]


def starred_repositories_decoder(timeline: bool = False) -> Callable[[str], List[StarredRepository]]:
    """Decoder for a starred-repository listing in the shape the media type selects."""
    if timeline:
        return type_adapter(List[TimelineStarredRepository]).validate_json
    repos = type_adapter(List[Repository])
    return lambda text: [StarredRepository(repo=repo) for repo in repos.validate_json(text)]
