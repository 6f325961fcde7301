"""Issue, comment and label records plus their request bodies."""

from typing import Any, Dict, Optional, Tuple

from .common import GitHubModel, RequestBody
from .user import User


class Label(GitHubModel):
    name: str
    color: str
    id: Optional[int] = None
    url: Optional[str] = None
    default: Optional[bool] = None


class Issue(GitHubModel):
    """
    An issue. Pull requests are issues too; for them ``pull_request``
    holds the links GitHub attaches.
    """
    id: int
    number: int
    title: str
    state: str
    html_url: str
    created_at: str
    comments: int = 0
    labels: Tuple[Label, ...] = ()
    user: Optional[User] = None
    body: Optional[str] = None
    assignee: Optional[User] = None
    updated_at: Optional[str] = None
    closed_at: Optional[str] = None
    pull_request: Optional[Dict[str, Any]] = None


class Comment(GitHubModel):
    id: int
    body: str
    html_url: str
    created_at: str
    updated_at: str
    user: Optional[User] = None


class NewIssueRequest(RequestBody):
    title: str
    body: str
    labels: Tuple[str, ...] = ()
    assignees: Tuple[str, ...] = ()
    milestone: Optional[int] = None


class EditIssueRequest(RequestBody):
    state: str
    title: str
    body: str
    labels: Tuple[str, ...] = ()
    assignees: Tuple[str, ...] = ()
    milestone: Optional[int] = None


class CommentRequest(RequestBody):
    body: str
