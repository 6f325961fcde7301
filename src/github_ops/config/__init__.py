"""
Configuration package for github-ops.

Provides the transport settings (GitHubConfig) and the per-call
credentials (Config) used when executing operations.
"""

from .github_config import (
    GitHubConfig,
    Config,
    DEFAULT_API_URL,
    DEFAULT_ACCEPT,
    STAR_TIMELINE_ACCEPT
)

__all__ = [
    'GitHubConfig',
    'Config',
    'DEFAULT_API_URL',
    'DEFAULT_ACCEPT',
    'STAR_TIMELINE_ACCEPT'
]
