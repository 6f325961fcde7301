"""
Operation groups for github-ops.

Each module defines one closed group of operation descriptors for an
area of the GitHub API.
"""

from .base import ApiRequest, Operation, OperationGroup
from .users import USERS, UserOp, GetUser, GetAuthUser, ListUsers, ListFollowing
from .pull_requests import (
    PULL_REQUESTS,
    PullRequestOp,
    GetPullRequest,
    ListPullRequests,
    ListPullRequestFiles,
    CreatePullRequest,
    ListPullRequestReviews,
    GetPullRequestReview
)
from .activity import (
    ACTIVITY,
    ActivityOp,
    SetThreadSubscription,
    ListStargazers,
    ListStarredRepositories
)
from .repositories import (
    REPOSITORIES,
    RepositoryOp,
    GetRepo,
    ListOrgRepos,
    ListUserRepos,
    ListCommits,
    ListBranches,
    ListContributors,
    GetCombinedStatus,
    ListStatuses,
    CreateStatus
)
from .issues import (
    ISSUES,
    IssueOp,
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
)
from .gists import GISTS, GistOp, NewGist, GetGist, EditGist

__all__ = [
    'ApiRequest', 'Operation', 'OperationGroup',
    'USERS', 'UserOp', 'GetUser', 'GetAuthUser', 'ListUsers', 'ListFollowing',
    'PULL_REQUESTS', 'PullRequestOp', 'GetPullRequest', 'ListPullRequests',
    'ListPullRequestFiles', 'CreatePullRequest', 'ListPullRequestReviews',
    'GetPullRequestReview',
    'ACTIVITY', 'ActivityOp', 'SetThreadSubscription', 'ListStargazers',
    'ListStarredRepositories',
    'REPOSITORIES', 'RepositoryOp', 'GetRepo', 'ListOrgRepos', 'ListUserRepos',
    'ListCommits', 'ListBranches', 'ListContributors', 'GetCombinedStatus',
    'ListStatuses', 'CreateStatus',
    'ISSUES', 'IssueOp', 'ListIssues', 'GetIssue', 'CreateIssue', 'EditIssue',
    'ListComments', 'CreateComment', 'EditComment', 'DeleteComment',
    'ListLabels', 'AddLabels', 'RemoveLabel',
    'GISTS', 'GistOp', 'NewGist', 'GetGist', 'EditGist'
]
