"""
github-ops: GitHub REST API operations as composable values.

Operations describe API calls; an Interpreter executes them through an
HttpClient and returns GHResponse values carrying either the decoded
result or an error.
"""

from .config import Config, GitHubConfig
from .api import GHResponse, HttpClient, GitHubError, NetworkError, ApiError, DecodingError, ProgramError
from .interpreter import Interpreter, Program, DEFAULT_GROUPS

__version__ = "0.1.0"

__all__ = [
    'Config',
    'GitHubConfig',
    'GHResponse',
    'HttpClient',
    'GitHubError',
    'NetworkError',
    'ApiError',
    'DecodingError',
    'ProgramError',
    'Interpreter',
    'Program',
    'DEFAULT_GROUPS'
]
