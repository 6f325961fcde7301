"""
Pull request records, request bodies and list filters.

Filters are (name, value) pairs flattened into the query string of
GET repos/{owner}/{repo}/pulls. The state, sort and direction kinds only
accept the values GitHub documents; head and base take any string
(``user:ref-name`` and a branch name respectively).
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, Iterable, Optional, Tuple, Union

from .common import GitHubModel, RequestBody
from .repository import Repository
from .user import User


class PullRequestBase(GitHubModel):
    """The base (or head) ref of a pull request."""
    ref: str
    sha: str
    user: User
    label: Optional[str] = None
    # Null when the source repository was deleted
    repo: Optional[Repository] = None


class PullRequest(GitHubModel):
    id: int
    number: int
    state: str
    title: str
    locked: bool
    html_url: str
    created_at: str
    body: Optional[str] = None
    updated_at: Optional[str] = None
    closed_at: Optional[str] = None
    merged_at: Optional[str] = None
    base: Optional[PullRequestBase] = None
    user: Optional[User] = None
    assignee: Optional[User] = None


class PullRequestFile(GitHubModel):
    sha: str
    filename: str
    status: str
    additions: int
    deletions: int
    changes: int
    blob_url: str
    raw_url: str
    contents_url: str
    patch: Optional[str] = None  # Omitted for binary or very large diffs


class PullRequestReviewState(str, Enum):
    APPROVED = "APPROVED"
    CHANGES_REQUESTED = "CHANGES_REQUESTED"
    COMMENTED = "COMMENTED"
    PENDING = "PENDING"
    DISMISSED = "DISMISSED"


class PullRequestReview(GitHubModel):
    id: int
    body: str
    commit_id: str
    state: PullRequestReviewState
    html_url: str
    pull_request_url: str
    user: Optional[User] = None


@dataclass(frozen=True)
class NewPullRequestData:
    """Open a pull request with a fresh title and body."""
    title: str
    body: str


@dataclass(frozen=True)
class NewPullRequestIssue:
    """Turn an existing issue into a pull request."""
    issue: int


NewPullRequest = Union[NewPullRequestData, NewPullRequestIssue]


class CreatePullRequestData(RequestBody):
    title: str
    body: str
    head: str
    base: str
    # None leaves the key out of the body
    maintainer_can_modify: Optional[bool] = True


class CreatePullRequestIssue(RequestBody):
    issue: int
    head: str
    base: str
    maintainer_can_modify: Optional[bool] = True


CreatePullRequest = Union[CreatePullRequestData, CreatePullRequestIssue]


def create_pull_request_body(new_pull_request: NewPullRequest, head: str, base: str,
                             maintainer_can_modify: Optional[bool] = True) -> CreatePullRequest:
    """Pick the wire body matching the kind of new pull request."""
    if isinstance(new_pull_request, NewPullRequestData):
        return CreatePullRequestData(
            title=new_pull_request.title,
            head=head,
            base=base,
            body=new_pull_request.body,
            maintainer_can_modify=maintainer_can_modify
        )
    if isinstance(new_pull_request, NewPullRequestIssue):
        return CreatePullRequestIssue(
            issue=new_pull_request.issue,
            head=head,
            base=base,
            maintainer_can_modify=maintainer_can_modify
        )
    raise TypeError(f"Unsupported new pull request: {new_pull_request!r}")


@dataclass(frozen=True)
class PRFilter:
    """A named query-parameter constraint for listing pull requests."""
    name: ClassVar[str] = ""
    allowed: ClassVar[Optional[Tuple[str, ...]]] = None

    value: str

    def __post_init__(self):
        if self.allowed is not None and self.value not in self.allowed:
            raise ValueError(
                f"Invalid {self.name} filter '{self.value}', expected one of {', '.join(self.allowed)}")

    def tupled(self) -> Tuple[str, str]:
        return (self.name, self.value)


@dataclass(frozen=True)
class PRFilterState(PRFilter):
    name: ClassVar[str] = "state"
    allowed: ClassVar[Optional[Tuple[str, ...]]] = ("open", "closed", "all")


@dataclass(frozen=True)
class PRFilterHead(PRFilter):
    name: ClassVar[str] = "head"


@dataclass(frozen=True)
class PRFilterBase(PRFilter):
    name: ClassVar[str] = "base"


@dataclass(frozen=True)
class PRFilterSort(PRFilter):
    name: ClassVar[str] = "sort"
    allowed: ClassVar[Optional[Tuple[str, ...]]] = ("created", "updated", "popularity", "long-running")


@dataclass(frozen=True)
class PRFilterDirection(PRFilter):
    name: ClassVar[str] = "direction"
    allowed: ClassVar[Optional[Tuple[str, ...]]] = ("asc", "desc")


PR_FILTER_OPEN = PRFilterState("open")
PR_FILTER_CLOSED = PRFilterState("closed")
PR_FILTER_ALL = PRFilterState("all")

PR_FILTER_SORT_CREATED = PRFilterSort("created")
PR_FILTER_SORT_UPDATED = PRFilterSort("updated")
PR_FILTER_SORT_POPULARITY = PRFilterSort("popularity")
PR_FILTER_SORT_LONG_RUNNING = PRFilterSort("long-running")

PR_FILTER_ORDER_ASC = PRFilterDirection("asc")
PR_FILTER_ORDER_DESC = PRFilterDirection("desc")


def filters_to_params(filters: Iterable[PRFilter]) -> Dict[str, str]:
    """Flatten filters into query parameters; a later filter of the same kind wins."""
    return dict(f.tupled() for f in filters)
