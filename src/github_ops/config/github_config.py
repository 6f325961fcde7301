"""GitHub API configuration module."""

import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from dotenv import load_dotenv

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_ACCEPT = "application/vnd.github.v3+json"
STAR_TIMELINE_ACCEPT = "application/vnd.github.v3.star+json"


@dataclass(frozen=True)
class GitHubConfig:
    """Transport settings shared by every request."""

    api_url: str = DEFAULT_API_URL
    accept: str = DEFAULT_ACCEPT
    user_agent: str = "github-ops"
    timeout: float = 30.0  # Seconds per request
    retry_count: int = 3  # Number of retries for 5xx responses
    retry_delay: float = 1.0  # Backoff factor between retries

    @classmethod
    def from_env(cls) -> 'GitHubConfig':
        """Create GitHub config from environment variables."""
        load_dotenv()
        return cls(
            api_url=os.getenv('GITHUB_API_URL', DEFAULT_API_URL),
            timeout=float(os.getenv('GITHUB_TIMEOUT', '30')),
            retry_count=int(os.getenv('GITHUB_RETRY_COUNT', '3')),
            retry_delay=float(os.getenv('GITHUB_RETRY_DELAY', '1.0'))
        )


@dataclass(frozen=True)
class Config:
    """
    Per-call credentials and headers.

    A Config is handed to the interpreter at execution time, so the same
    operation can be replayed with different credentials.

    Attributes:
        access_token: Token sent as ``Authorization: token <access_token>``
        headers: Extra headers, merged over the defaults
    """

    access_token: Optional[str] = None
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        # Read-only copy; the caller's dict may change after construction
        object.__setattr__(self, 'headers', MappingProxyType(dict(self.headers)))

    def __hash__(self):
        return hash((self.access_token, tuple(sorted(self.headers.items()))))

    @classmethod
    def from_env(cls) -> 'Config':
        """Create a Config from GITHUB_TOKEN (or GITHUB_API_TOKEN)."""
        load_dotenv()
        token = os.getenv('GITHUB_TOKEN')
        if not token:
            token = os.getenv('GITHUB_API_TOKEN')  # Fallback
        return cls(access_token=token or None)
