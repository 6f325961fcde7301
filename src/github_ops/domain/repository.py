"""
Repository records.

Covers the repository itself plus the commit, branch and commit-status
shapes returned by the repositories API, and the body used to create
a commit status.
"""

from typing import Literal, Optional, Tuple

from .common import GitHubModel, RequestBody
from .user import User

STATUS_STATES = ("pending", "success", "error", "failure")

StatusState = Literal["pending", "success", "error", "failure"]


class Repository(GitHubModel):
    """Repository as returned by GET repos/{owner}/{repo} and list calls."""
    id: int
    name: str
    full_name: str
    owner: User
    private: bool
    html_url: str
    fork: bool
    # Counters are absent from the slim repository embedded in events
    stargazers_count: int = 0
    watchers_count: int = 0
    forks_count: int = 0
    open_issues_count: int = 0
    description: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    pushed_at: Optional[str] = None
    homepage: Optional[str] = None
    language: Optional[str] = None
    default_branch: Optional[str] = None
    url: Optional[str] = None


class CommitAuthor(GitHubModel):
    name: Optional[str] = None
    email: Optional[str] = None
    date: str


class CommitDetail(GitHubModel):
    message: str
    author: CommitAuthor


class Commit(GitHubModel):
    """An entry from GET repos/{owner}/{repo}/commits."""
    sha: str
    html_url: str
    commit: CommitDetail
    # Null when the commit email matches no GitHub account
    author: Optional[User] = None

    @property
    def message(self) -> str:
        return self.commit.message

    @property
    def date(self) -> str:
        return self.commit.author.date

    @property
    def login(self) -> Optional[str]:
        return self.author.login if self.author else None

    @property
    def url(self) -> str:
        return self.html_url

    @property
    def avatar_url(self) -> Optional[str]:
        return self.author.avatar_url if self.author else None

    @property
    def author_url(self) -> Optional[str]:
        return self.author.html_url if self.author else None


class BranchCommit(GitHubModel):
    sha: str
    url: Optional[str] = None


class Branch(GitHubModel):
    name: str
    commit: BranchCommit
    protected: Optional[bool] = None

    @property
    def commit_sha(self) -> str:
        return self.commit.sha


class Status(GitHubModel):
    """A single commit status set by a CI system."""
    id: int
    state: str
    context: Optional[str] = None
    description: Optional[str] = None
    target_url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class CombinedStatus(GitHubModel):
    state: str
    sha: str
    total_count: int
    statuses: Tuple[Status, ...]
    repository: Optional[Repository] = None


class NewStatusRequest(RequestBody):
    """Body of POST repos/{owner}/{repo}/statuses/{sha}."""
    state: StatusState
    target_url: Optional[str] = None
    description: Optional[str] = None
    context: Optional[str] = None
