"""Issue, comment and label operations."""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..domain import (
    Comment,
    CommentRequest,
    EditIssueRequest,
    Issue,
    Label,
    NewIssueRequest,
    Pagination,
    json_decoder
)
from .base import ApiRequest, Operation, OperationGroup, repo_path


class IssueOp(Operation):
    """Marker base for the issues group."""


def _freeze(op: Operation, *names: str) -> None:
    for name in names:
        object.__setattr__(op, name, tuple(getattr(op, name)))


@dataclass(frozen=True)
class ListIssues(IssueOp):
    owner: str
    repo: str
    pagination: Optional[Pagination] = None

    def request(self) -> ApiRequest:
        return ApiRequest(
            "GET",
            repo_path(self.owner, self.repo, "issues"),
            pagination=self.pagination,
            decoder=json_decoder(List[Issue])
        )


@dataclass(frozen=True)
class GetIssue(IssueOp):
    owner: str
    repo: str
    number: int

    def request(self) -> ApiRequest:
        return ApiRequest("GET", repo_path(self.owner, self.repo, "issues", self.number),
                          decoder=json_decoder(Issue))


@dataclass(frozen=True)
class CreateIssue(IssueOp):
    owner: str
    repo: str
    title: str
    body: str
    milestone: Optional[int] = None
    labels: Tuple[str, ...] = ()
    assignees: Tuple[str, ...] = ()

    def __post_init__(self):
        _freeze(self, 'labels', 'assignees')

    def request(self) -> ApiRequest:
        body = NewIssueRequest(title=self.title, body=self.body, labels=self.labels,
                               assignees=self.assignees, milestone=self.milestone)
        return ApiRequest(
            "POST",
            repo_path(self.owner, self.repo, "issues"),
            body=body.to_dict(),
            decoder=json_decoder(Issue)
        )


@dataclass(frozen=True)
class EditIssue(IssueOp):
    """Edit an issue; state is open or closed."""
    owner: str
    repo: str
    number: int
    state: str
    title: str
    body: str
    milestone: Optional[int] = None
    labels: Tuple[str, ...] = ()
    assignees: Tuple[str, ...] = ()

    def __post_init__(self):
        _freeze(self, 'labels', 'assignees')

    def request(self) -> ApiRequest:
        body = EditIssueRequest(state=self.state, title=self.title, body=self.body, labels=self.labels,
                                assignees=self.assignees, milestone=self.milestone)
        return ApiRequest(
            "PATCH",
            repo_path(self.owner, self.repo, "issues", self.number),
            body=body.to_dict(),
            decoder=json_decoder(Issue)
        )


@dataclass(frozen=True)
class ListComments(IssueOp):
    owner: str
    repo: str
    number: int

    def request(self) -> ApiRequest:
        return ApiRequest(
            "GET",
            repo_path(self.owner, self.repo, "issues", self.number, "comments"),
            decoder=json_decoder(List[Comment])
        )


@dataclass(frozen=True)
class CreateComment(IssueOp):
    owner: str
    repo: str
    number: int
    body: str

    def request(self) -> ApiRequest:
        return ApiRequest(
            "POST",
            repo_path(self.owner, self.repo, "issues", self.number, "comments"),
            body=CommentRequest(body=self.body).to_dict(),
            decoder=json_decoder(Comment)
        )


@dataclass(frozen=True)
class EditComment(IssueOp):
    owner: str
    repo: str
    id: int
    body: str

    def request(self) -> ApiRequest:
        return ApiRequest(
            "PATCH",
            repo_path(self.owner, self.repo, "issues", "comments", self.id),
            body=CommentRequest(body=self.body).to_dict(),
            decoder=json_decoder(Comment)
        )


@dataclass(frozen=True)
class DeleteComment(IssueOp):
    """Delete a comment. GitHub answers 204, so the result is None."""
    owner: str
    repo: str
    id: int

    def request(self) -> ApiRequest:
        return ApiRequest("DELETE", repo_path(self.owner, self.repo, "issues", "comments", self.id))


@dataclass(frozen=True)
class ListLabels(IssueOp):
    owner: str
    repo: str
    number: int

    def request(self) -> ApiRequest:
        return ApiRequest(
            "GET",
            repo_path(self.owner, self.repo, "issues", self.number, "labels"),
            decoder=json_decoder(List[Label])
        )


@dataclass(frozen=True)
class AddLabels(IssueOp):
    """Add labels to an issue; the body is the bare JSON array of names."""
    owner: str
    repo: str
    number: int
    labels: Tuple[str, ...]

    def __post_init__(self):
        _freeze(self, 'labels')

    def request(self) -> ApiRequest:
        return ApiRequest(
            "POST",
            repo_path(self.owner, self.repo, "issues", self.number, "labels"),
            body=list(self.labels),
            decoder=json_decoder(List[Label])
        )


@dataclass(frozen=True)
class RemoveLabel(IssueOp):
    """Remove one label; GitHub returns the labels left on the issue."""
    owner: str
    repo: str
    number: int
    label: str

    def request(self) -> ApiRequest:
        return ApiRequest(
            "DELETE",
            repo_path(self.owner, self.repo, "issues", self.number, "labels", self.label),
            decoder=json_decoder(List[Label])
        )


ISSUES = OperationGroup("issues", (
    ListIssues,
    GetIssue,
    CreateIssue,
    EditIssue,
    ListComments,
    CreateComment,
    EditComment,
    DeleteComment,
    ListLabels,
    AddLabels,
    RemoveLabel
))
