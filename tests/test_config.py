"""Tests for configuration loading."""

import os

import pytest

from github_ops import Config, GitHubConfig, Interpreter


def test_github_config_defaults():
    config = GitHubConfig()

    assert config.api_url == 'https://api.github.com'
    assert config.accept == 'application/vnd.github.v3+json'
    assert config.retry_count == 3


def test_github_config_from_env():
    os.environ.update({
        'GITHUB_API_URL': 'https://github.example.com/api/v3',
        'GITHUB_TIMEOUT': '5',
        'GITHUB_RETRY_COUNT': '1',
        'GITHUB_RETRY_DELAY': '0.5'
    })

    config = GitHubConfig.from_env()

    assert config.api_url == 'https://github.example.com/api/v3'
    assert config.timeout == 5.0
    assert config.retry_count == 1
    assert config.retry_delay == 0.5


def test_config_from_env_token():
    os.environ['GITHUB_TOKEN'] = 'env_token'

    assert Config.from_env().access_token == 'env_token'


def test_config_from_env_fallback_token():
    os.environ['GITHUB_API_TOKEN'] = 'fallback_token'

    assert Config.from_env().access_token == 'fallback_token'


def test_config_from_env_without_token(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)

    assert Config.from_env().access_token is None


def test_config_is_frozen():
    config = Config(access_token='abc')

    with pytest.raises(AttributeError):
        config.access_token = 'other'


def test_config_headers_are_a_private_copy():
    headers = {'X-Trace': '1'}
    config = Config(headers=headers)

    headers['X-Trace'] = '2'

    assert config.headers['X-Trace'] == '1'
    with pytest.raises(TypeError):
        config.headers['X-Other'] = 'x'


def test_config_is_hashable():
    assert hash(Config()) == hash(Config())
    assert hash(Config('a', {'X-Trace': '1'})) == hash(Config('a', {'X-Trace': '1'}))
    assert Config('a', {'X-Trace': '1'}) == Config('a', {'X-Trace': '1'})
    assert len({Config(), Config(), Config('a')}) == 2


def test_interpreter_from_env():
    os.environ['GITHUB_API_URL'] = 'https://github.example.com/api/v3'

    interpreter = Interpreter.from_env()

    assert interpreter.transport.config.api_url == 'https://github.example.com/api/v3'
