"""Repository operations: repositories, commits, branches, contributors and statuses."""

from dataclasses import dataclass
from typing import List, Optional

from ..domain import (
    Branch,
    CombinedStatus,
    Commit,
    NewStatusRequest,
    Pagination,
    Repository,
    STATUS_STATES,
    Status,
    User,
    json_decoder
)
from .base import ApiRequest, Operation, OperationGroup, repo_path, segment


class RepositoryOp(Operation):
    """Marker base for the repositories group."""


@dataclass(frozen=True)
class GetRepo(RepositoryOp):
    owner: str
    repo: str

    def request(self) -> ApiRequest:
        return ApiRequest("GET", repo_path(self.owner, self.repo), decoder=json_decoder(Repository))


@dataclass(frozen=True)
class ListOrgRepos(RepositoryOp):
    """List repositories of an organization; type is all, public, private, forks, sources or member."""
    org: str
    type: Optional[str] = None
    pagination: Optional[Pagination] = None

    def request(self) -> ApiRequest:
        return ApiRequest(
            "GET",
            f"orgs/{segment(self.org)}/repos",
            params={'type': self.type} if self.type else {},
            pagination=self.pagination,
            decoder=json_decoder(List[Repository])
        )


@dataclass(frozen=True)
class ListUserRepos(RepositoryOp):
    """List public repositories of a user; type is all, owner or member."""
    user: str
    type: Optional[str] = None
    pagination: Optional[Pagination] = None

    def request(self) -> ApiRequest:
        return ApiRequest(
            "GET",
            f"users/{segment(self.user)}/repos",
            params={'type': self.type} if self.type else {},
            pagination=self.pagination,
            decoder=json_decoder(List[Repository])
        )


@dataclass(frozen=True)
class ListCommits(RepositoryOp):
    """
    List commits on a repository.

    Attributes:
        sha: SHA or branch to start listing from
        path: Only commits touching this file path
        author: GitHub login or email of the author
        since: ISO 8601 timestamp, only commits after it
        until: ISO 8601 timestamp, only commits before it
    """
    owner: str
    repo: str
    sha: Optional[str] = None
    path: Optional[str] = None
    author: Optional[str] = None
    since: Optional[str] = None
    until: Optional[str] = None
    pagination: Optional[Pagination] = None

    def request(self) -> ApiRequest:
        params = {
            'sha': self.sha,
            'path': self.path,
            'author': self.author,
            'since': self.since,
            'until': self.until
        }
        return ApiRequest(
            "GET",
            repo_path(self.owner, self.repo, "commits"),
            params={k: v for k, v in params.items() if v is not None},
            pagination=self.pagination,
            decoder=json_decoder(List[Commit])
        )


@dataclass(frozen=True)
class ListBranches(RepositoryOp):
    owner: str
    repo: str
    only_protected: Optional[bool] = None
    pagination: Optional[Pagination] = None

    def request(self) -> ApiRequest:
        params = {}
        if self.only_protected is not None:
            params['protected'] = 'true' if self.only_protected else 'false'
        return ApiRequest(
            "GET",
            repo_path(self.owner, self.repo, "branches"),
            params=params,
            pagination=self.pagination,
            decoder=json_decoder(List[Branch])
        )


@dataclass(frozen=True)
class ListContributors(RepositoryOp):
    owner: str
    repo: str
    anon: Optional[bool] = None
    pagination: Optional[Pagination] = None

    def request(self) -> ApiRequest:
        params = {}
        if self.anon is not None:
            params['anon'] = 'true' if self.anon else 'false'
        return ApiRequest(
            "GET",
            repo_path(self.owner, self.repo, "contributors"),
            params=params,
            pagination=self.pagination,
            decoder=json_decoder(List[User])
        )


@dataclass(frozen=True)
class GetCombinedStatus(RepositoryOp):
    """Combined status for a ref (SHA, branch or tag)."""
    owner: str
    repo: str
    ref: str

    def request(self) -> ApiRequest:
        return ApiRequest(
            "GET",
            repo_path(self.owner, self.repo, "commits", self.ref, "status"),
            decoder=json_decoder(CombinedStatus)
        )


@dataclass(frozen=True)
class ListStatuses(RepositoryOp):
    owner: str
    repo: str
    ref: str

    def request(self) -> ApiRequest:
        return ApiRequest(
            "GET",
            repo_path(self.owner, self.repo, "commits", self.ref, "statuses"),
            decoder=json_decoder(List[Status])
        )


@dataclass(frozen=True)
class CreateStatus(RepositoryOp):
    """Create a commit status; state is pending, success, error or failure."""
    owner: str
    repo: str
    sha: str
    state: str
    target_url: Optional[str] = None
    description: Optional[str] = None
    context: Optional[str] = None

    def __post_init__(self):
        if self.state not in STATUS_STATES:
            raise ValueError(f"Invalid status state '{self.state}', expected one of {', '.join(STATUS_STATES)}")

    def request(self) -> ApiRequest:
        body = NewStatusRequest(state=self.state, target_url=self.target_url,
                                description=self.description, context=self.context)
        return ApiRequest(
            "POST",
            repo_path(self.owner, self.repo, "statuses", self.sha),
            body=body.to_dict(),
            decoder=json_decoder(Status)
        )


REPOSITORIES = OperationGroup("repositories", (
    GetRepo,
    ListOrgRepos,
    ListUserRepos,
    ListCommits,
    ListBranches,
    ListContributors,
    GetCombinedStatus,
    ListStatuses,
    CreateStatus
))
