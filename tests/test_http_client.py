"""Tests for the HTTP transport adapter."""

import json
from urllib.parse import parse_qs, urlparse

import pytest
import requests
import responses

from github_ops import ApiError, Config, DecodingError, GitHubConfig, HttpClient, NetworkError
from github_ops.domain import Pagination, User, json_decoder

from payloads import user_json

API_URL = 'https://api.github.com'


def request_body(call):
    body = call.request.body
    if isinstance(body, bytes):
        body = body.decode('utf-8')
    return body


def query_of(call):
    return {k: v[0] for k, v in parse_qs(urlparse(call.request.url).query).items()}


@responses.activate
def test_get_decodes_success(http_client, config):
    """Test a plain GET decodes the body and keeps the status code."""
    responses.add(responses.GET, f'{API_URL}/users/octocat', json=user_json(), status=200)

    response = http_client.get('users/octocat', config, decoder=json_decoder(User))

    assert response.ok
    assert response.status_code == 200
    assert response.result.login == 'octocat'
    assert response.error is None


@responses.activate
def test_default_headers(http_client, config):
    """Test Accept and Authorization headers are set."""
    responses.add(responses.GET, f'{API_URL}/user', json=user_json(), status=200)

    http_client.get('user', config)

    headers = responses.calls[0].request.headers
    assert headers['Accept'] == 'application/vnd.github.v3+json'
    assert headers['Authorization'] == 'token test_token'


@responses.activate
def test_no_token_means_no_authorization_header(http_client):
    responses.add(responses.GET, f'{API_URL}/user', json=user_json(), status=200)

    http_client.get('user', Config())

    assert 'Authorization' not in responses.calls[0].request.headers


@responses.activate
def test_config_headers_override_defaults(http_client):
    """Test caller headers win over the default Accept and Authorization."""
    responses.add(responses.GET, f'{API_URL}/user', json=user_json(), status=200)
    config = Config(access_token='abc', headers={
        'Accept': 'application/vnd.github.squirrel-girl-preview',
        'Authorization': 'Bearer other',
        'X-Trace': '1'
    })

    http_client.get('user', config)

    headers = responses.calls[0].request.headers
    assert headers['Accept'] == 'application/vnd.github.squirrel-girl-preview'
    assert headers['Authorization'] == 'Bearer other'
    assert headers['X-Trace'] == '1'
    # Config itself is left untouched
    assert config.headers['X-Trace'] == '1'
    assert len(config.headers) == 3


@responses.activate
def test_operation_headers_override_config_headers(http_client):
    responses.add(responses.GET, f'{API_URL}/user', json=user_json(), status=200)
    config = Config(headers={'Accept': 'application/json'})

    http_client.get('user', config, headers={'Accept': 'application/vnd.github.v3.star+json'})

    assert responses.calls[0].request.headers['Accept'] == 'application/vnd.github.v3.star+json'


@responses.activate
def test_pagination_merged_into_query(http_client, config):
    """Test pagination keys are appended and override query params."""
    responses.add(responses.GET, f'{API_URL}/users', json=[], status=200)

    http_client.get(
        'users', config,
        query_params={'since': 135, 'page': '9'},
        pagination=Pagination(page=2, per_page=50)
    )

    assert query_of(responses.calls[0]) == {'since': '135', 'page': '2', 'per_page': '50'}


@responses.activate
def test_partial_pagination(http_client, config):
    responses.add(responses.GET, f'{API_URL}/users', json=[], status=200)

    http_client.get('users', config, pagination=Pagination(per_page=10))

    assert query_of(responses.calls[0]) == {'per_page': '10'}


@responses.activate
def test_custom_base_url(config):
    client = HttpClient(GitHubConfig(api_url='https://github.example.com/api/v3/', retry_count=0))
    responses.add(responses.GET, 'https://github.example.com/api/v3/user', json=user_json(), status=200)

    response = client.get('user', config)

    assert response.ok
    assert responses.calls[0].request.url == 'https://github.example.com/api/v3/user'


@responses.activate
def test_post_serializes_compact_json(http_client, config):
    responses.add(responses.POST, f'{API_URL}/gists', json={'ok': True}, status=201)

    response = http_client.post('gists', config, body={'public': True, 'description': 'x'})

    assert response.status_code == 201
    call = responses.calls[0]
    assert request_body(call) == '{"public":true,"description":"x"}'
    assert call.request.headers['Content-Type'] == 'application/json'


@responses.activate
def test_get_sends_no_body(http_client, config):
    responses.add(responses.GET, f'{API_URL}/user', json=user_json(), status=200)

    http_client.get('user', config, body={'ignored': True})

    assert not responses.calls[0].request.body


@responses.activate
def test_not_found_is_api_error(http_client, config):
    """Test a 404 with a JSON body becomes an ApiError with the upstream message."""
    responses.add(
        responses.GET, f'{API_URL}/users/ghost',
        json={'message': 'Not Found', 'documentation_url': 'https://docs.github.com/rest'},
        status=404
    )

    response = http_client.get('users/ghost', config, decoder=json_decoder(User))

    assert not response.ok
    assert response.result is None
    assert isinstance(response.error, ApiError)
    assert response.error.status == 404
    assert response.error.message == 'Not Found'
    assert response.error.response_data['documentation_url'] == 'https://docs.github.com/rest'


@responses.activate
def test_api_error_without_json_body(http_client, config):
    responses.add(responses.GET, f'{API_URL}/user', body='Bad gateway', status=502)

    response = http_client.get('user', config)

    assert isinstance(response.error, ApiError)
    assert response.error.status == 502
    assert response.error.message == 'Bad gateway'


@responses.activate
def test_validation_failed(http_client, config):
    responses.add(
        responses.POST, f'{API_URL}/repos/octocat/hello-world/pulls',
        json={'message': 'Validation Failed', 'errors': [{'code': 'custom'}]},
        status=422
    )

    response = http_client.post('repos/octocat/hello-world/pulls', config, body={'title': 't'})

    assert response.error == ApiError(422, 'Validation Failed',
                                      {'message': 'Validation Failed', 'errors': [{'code': 'custom'}]})


@responses.activate
def test_malformed_json_is_decoding_error(http_client, config):
    responses.add(responses.GET, f'{API_URL}/users/octocat', body='{"id": 1, "login":',
                  status=200, content_type='application/json')

    response = http_client.get('users/octocat', config, decoder=json_decoder(User))

    assert isinstance(response.error, DecodingError)
    assert response.result is None
    assert response.error.body == '{"id": 1, "login":'


@responses.activate
def test_schema_mismatch_is_decoding_error(http_client, config):
    """Test a body missing required fields is not partially decoded."""
    responses.add(responses.GET, f'{API_URL}/users/octocat', json={'id': 1, 'login': 'octocat'}, status=200)

    response = http_client.get('users/octocat', config, decoder=json_decoder(User))

    assert isinstance(response.error, DecodingError)
    assert response.result is None


@responses.activate
def test_wrong_type_is_decoding_error(http_client, config):
    data = user_json()
    data['id'] = 'one'
    responses.add(responses.GET, f'{API_URL}/users/octocat', json=data, status=200)

    response = http_client.get('users/octocat', config, decoder=json_decoder(User))

    assert isinstance(response.error, DecodingError)


@responses.activate
def test_no_content(http_client, config):
    responses.add(responses.DELETE, f'{API_URL}/repos/o/r/issues/comments/1', status=204)

    response = http_client.delete('repos/o/r/issues/comments/1', config)

    assert response.ok
    assert response.status_code == 204
    assert response.result is None


@responses.activate
def test_empty_body_with_decoder_is_decoding_error(http_client, config):
    """Test an empty 200 is not reported as a successful None user."""
    responses.add(responses.GET, f'{API_URL}/users/octocat', body='', status=200)

    response = http_client.get('users/octocat', config, decoder=json_decoder(User))

    assert not response.ok
    assert isinstance(response.error, DecodingError)
    assert response.result is None


@responses.activate
def test_no_content_with_decoder_is_decoding_error(http_client, config):
    responses.add(responses.GET, f'{API_URL}/users/octocat', status=204)

    response = http_client.get('users/octocat', config, decoder=json_decoder(User))

    assert isinstance(response.error, DecodingError)


@responses.activate
def test_no_decoder_returns_parsed_json(http_client, config):
    responses.add(responses.GET, f'{API_URL}/rate_limit', json={'rate': {'limit': 60}}, status=200)

    response = http_client.get('rate_limit', config)

    assert response.result == {'rate': {'limit': 60}}


@responses.activate
def test_connection_error_is_network_error(http_client, config):
    responses.add(responses.GET, f'{API_URL}/user',
                  body=requests.exceptions.ConnectionError('Name or service not known'))

    response = http_client.get('user', config)

    assert isinstance(response.error, NetworkError)
    assert isinstance(response.error.cause, requests.exceptions.ConnectionError)


@responses.activate
def test_timeout_is_network_error(http_client, config):
    responses.add(responses.GET, f'{API_URL}/user', body=requests.exceptions.ReadTimeout('slow'))

    response = http_client.get('user', config)

    assert isinstance(response.error, NetworkError)
    assert 'timed out' in response.error.message


def test_unwrap_raises_carried_error(http_client, config):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, f'{API_URL}/users/ghost', json={'message': 'Not Found'}, status=404)
        response = http_client.get('users/ghost', config)

    with pytest.raises(ApiError) as excinfo:
        response.unwrap()
    assert excinfo.value.status == 404


@responses.activate
def test_response_headers_kept(http_client, config):
    responses.add(responses.GET, f'{API_URL}/user', json=user_json(), status=200,
                  headers={'X-RateLimit-Remaining': '4999'})

    response = http_client.get('user', config)

    assert response.headers['X-RateLimit-Remaining'] == '4999'


@responses.activate
def test_json_array_body(http_client, config):
    responses.add(responses.POST, f'{API_URL}/repos/o/r/issues/1/labels', json=[], status=200)

    http_client.post('repos/o/r/issues/1/labels', config, body=['bug', 'help wanted'])

    assert json.loads(request_body(responses.calls[0])) == ['bug', 'help wanted']
