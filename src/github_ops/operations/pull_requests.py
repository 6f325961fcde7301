"""Pull request operations."""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..domain import (
    NewPullRequest,
    Pagination,
    PRFilter,
    PullRequest,
    PullRequestFile,
    PullRequestReview,
    create_pull_request_body,
    filters_to_params,
    json_decoder
)
from .base import ApiRequest, Operation, OperationGroup, repo_path


class PullRequestOp(Operation):
    """Marker base for the pull requests group."""


@dataclass(frozen=True)
class GetPullRequest(PullRequestOp):
    owner: str
    repo: str
    number: int

    def request(self) -> ApiRequest:
        return ApiRequest(
            "GET",
            repo_path(self.owner, self.repo, "pulls", self.number),
            decoder=json_decoder(PullRequest)
        )


@dataclass(frozen=True)
class ListPullRequests(PullRequestOp):
    """
    List pull requests for a repository.

    Attributes:
        owner: Owner of the repo
        repo: Name of the repo
        filters: Any of state, head, base, sort and direction filters.
            One query parameter is sent per filter name; if a name
            repeats, the last filter wins.
        pagination: Optional page/per_page
    """
    owner: str
    repo: str
    filters: Tuple[PRFilter, ...] = ()
    pagination: Optional[Pagination] = None

    def __post_init__(self):
        # Accept any iterable but keep the descriptor immutable
        object.__setattr__(self, 'filters', tuple(self.filters))

    def request(self) -> ApiRequest:
        return ApiRequest(
            "GET",
            repo_path(self.owner, self.repo, "pulls"),
            params=filters_to_params(self.filters),
            pagination=self.pagination,
            decoder=json_decoder(List[PullRequest])
        )


@dataclass(frozen=True)
class ListPullRequestFiles(PullRequestOp):
    """List files changed by a pull request."""
    owner: str
    repo: str
    number: int
    pagination: Optional[Pagination] = None

    def request(self) -> ApiRequest:
        return ApiRequest(
            "GET",
            repo_path(self.owner, self.repo, "pulls", self.number, "files"),
            pagination=self.pagination,
            decoder=json_decoder(List[PullRequestFile])
        )


@dataclass(frozen=True)
class CreatePullRequest(PullRequestOp):
    """
    Create a pull request.

    Attributes:
        owner: Owner of the repo
        repo: Name of the repo
        new_pull_request: A NewPullRequestData (title and body) or a
            NewPullRequestIssue (existing issue number)
        head: Branch where the changes are implemented, ``user:branch``
            for cross-repository pull requests
        base: Branch the changes are pulled into
        maintainer_can_modify: Whether maintainers can push to head.
            Defaults to True; None leaves the key out of the body.
    """
    owner: str
    repo: str
    new_pull_request: NewPullRequest
    head: str
    base: str
    maintainer_can_modify: Optional[bool] = True

    def request(self) -> ApiRequest:
        body = create_pull_request_body(
            self.new_pull_request, self.head, self.base, self.maintainer_can_modify)
        return ApiRequest(
            "POST",
            repo_path(self.owner, self.repo, "pulls"),
            body=body.to_dict(),
            decoder=json_decoder(PullRequest)
        )


@dataclass(frozen=True)
class ListPullRequestReviews(PullRequestOp):
    owner: str
    repo: str
    pull_request: int
    pagination: Optional[Pagination] = None

    def request(self) -> ApiRequest:
        return ApiRequest(
            "GET",
            repo_path(self.owner, self.repo, "pulls", self.pull_request, "reviews"),
            pagination=self.pagination,
            decoder=json_decoder(List[PullRequestReview])
        )


@dataclass(frozen=True)
class GetPullRequestReview(PullRequestOp):
    owner: str
    repo: str
    pull_request: int
    review: int

    def request(self) -> ApiRequest:
        return ApiRequest(
            "GET",
            repo_path(self.owner, self.repo, "pulls", self.pull_request, "reviews", self.review),
            decoder=json_decoder(PullRequestReview)
        )


PULL_REQUESTS = OperationGroup("pull_requests", (
    GetPullRequest,
    ListPullRequests,
    ListPullRequestFiles,
    CreatePullRequest,
    ListPullRequestReviews,
    GetPullRequestReview
))
