"""Test configuration and fixtures."""

import os
import pytest

from github_ops import Config, GitHubConfig, HttpClient, Interpreter

API_URL = 'https://api.github.com'


@pytest.fixture(autouse=True)
def setup_test_env():
    """Set up test environment variables."""
    # Save original environment
    original_env = dict(os.environ)

    for key in ('GITHUB_TOKEN', 'GITHUB_API_TOKEN', 'GITHUB_API_URL',
                'GITHUB_TIMEOUT', 'GITHUB_RETRY_COUNT', 'GITHUB_RETRY_DELAY'):
        os.environ.pop(key, None)

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def github_config():
    """Transport settings without retries so error statuses come back at once."""
    return GitHubConfig(api_url=API_URL, retry_count=0, retry_delay=0)


@pytest.fixture
def http_client(github_config):
    return HttpClient(github_config)


@pytest.fixture
def interpreter(http_client):
    return Interpreter(http_client)


@pytest.fixture
def config():
    return Config(access_token='test_token')
