"""
API package for github-ops.

This package talks to the GitHub REST API. It provides:

1. The HTTP transport adapter
2. The GHResponse result type
3. Error values for network, API and decoding failures
"""

from .errors import GitHubError, NetworkError, ApiError, DecodingError, ProgramError
from .response import GHResponse
from .http_client import HttpClient

__all__ = [
    'GitHubError',
    'NetworkError',
    'ApiError',
    'DecodingError',
    'ProgramError',
    'GHResponse',
    'HttpClient'
]
