"""
Domain model for github-ops.

Pydantic records mirroring GitHub's JSON field names, request bodies, and
the pull request list filters.
"""

from .common import GitHubModel, RequestBody, Pagination, json_decoder
from .user import User
from .repository import (
    Repository,
    Commit,
    Branch,
    Status,
    CombinedStatus,
    NewStatusRequest,
    STATUS_STATES
)
from .pull_request import (
    PullRequest,
    PullRequestBase,
    PullRequestFile,
    PullRequestReview,
    PullRequestReviewState,
    NewPullRequest,
    NewPullRequestData,
    NewPullRequestIssue,
    CreatePullRequestData,
    CreatePullRequestIssue,
    create_pull_request_body,
    PRFilter,
    PRFilterState,
    PRFilterHead,
    PRFilterBase,
    PRFilterSort,
    PRFilterDirection,
    PR_FILTER_OPEN,
    PR_FILTER_CLOSED,
    PR_FILTER_ALL,
    PR_FILTER_SORT_CREATED,
    PR_FILTER_SORT_UPDATED,
    PR_FILTER_SORT_POPULARITY,
    PR_FILTER_SORT_LONG_RUNNING,
    PR_FILTER_ORDER_ASC,
    PR_FILTER_ORDER_DESC,
    filters_to_params
)
from .activity import (
    Subscription,
    SubscriptionRequest,
    Stargazer,
    StarredRepository,
    stargazers_decoder,
    starred_repositories_decoder
)
from .issue import Issue, Comment, Label, NewIssueRequest, EditIssueRequest, CommentRequest
from .gist import Gist, GistFile, NewGistRequest, EditGistRequest

__all__ = [
    'Pagination',
    'GitHubModel',
    'RequestBody',
    'json_decoder',
    'User',
    'Repository',
    'Commit',
    'Branch',
    'Status',
    'CombinedStatus',
    'NewStatusRequest',
    'STATUS_STATES',
    'PullRequest',
    'PullRequestBase',
    'PullRequestFile',
    'PullRequestReview',
    'PullRequestReviewState',
    'NewPullRequest',
    'NewPullRequestData',
    'NewPullRequestIssue',
    'CreatePullRequestData',
    'CreatePullRequestIssue',
    'create_pull_request_body',
    'PRFilter',
    'PRFilterState',
    'PRFilterHead',
    'PRFilterBase',
    'PRFilterSort',
    'PRFilterDirection',
    'PR_FILTER_OPEN',
    'PR_FILTER_CLOSED',
    'PR_FILTER_ALL',
    'PR_FILTER_SORT_CREATED',
    'PR_FILTER_SORT_UPDATED',
    'PR_FILTER_SORT_POPULARITY',
    'PR_FILTER_SORT_LONG_RUNNING',
    'PR_FILTER_ORDER_ASC',
    'PR_FILTER_ORDER_DESC',
    'filters_to_params',
    'Subscription',
    'SubscriptionRequest',
    'Stargazer',
    'StarredRepository',
    'stargazers_decoder',
    'starred_repositories_decoder',
    'Issue',
    'Comment',
    'Label',
    'NewIssueRequest',
    'EditIssueRequest',
    'CommentRequest',
    'Gist',
    'GistFile',
    'NewGistRequest',
    'EditGistRequest'
]
