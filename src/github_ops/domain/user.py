"""GitHub user record."""

from typing import Optional

from .common import GitHubModel


class User(GitHubModel):
    """A GitHub user or organization account as returned by the users API."""
    id: int
    login: str
    avatar_url: str
    html_url: str
    name: Optional[str] = None
    email: Optional[str] = None
    company: Optional[str] = None
    blog: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    type: Optional[str] = None
    site_admin: Optional[bool] = None
