"""
HTTP transport adapter for the GitHub REST API.

This module turns a described API call into an actual request and maps
the outcome to a GHResponse:
- Base URL, auth token and default headers
- Query parameters merged with pagination
- Compact JSON request bodies
- Session-level retries on server errors
- Typed errors for network, API and decoding failures
"""

import json
import logging
from typing import Any, Callable, Dict, Mapping, Optional

import requests
from pydantic import ValidationError
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import Config, GitHubConfig
from ..domain.common import Pagination
from .errors import ApiError, DecodingError, NetworkError
from .response import GHResponse

logger = logging.getLogger(__name__)

BODY_METHODS = ("POST", "PATCH", "PUT", "DELETE")


class HttpClient:
    """
    Thin wrapper around a requests session.

    The client holds no per-call state: credentials and extra headers
    arrive with every call through a Config.
    """

    def __init__(self, config: Optional[GitHubConfig] = None,
                 session: Optional[requests.Session] = None):
        """
        Initialize the HTTP client.

        Args:
            config: Transport settings, defaults to GitHubConfig()
            session: Optional pre-built session (its adapters are left as is)
        """
        self.config = config or GitHubConfig()
        if session is None:
            session = requests.Session()
            retries = Retry(
                total=self.config.retry_count,
                backoff_factor=self.config.retry_delay,
                status_forcelist=[500, 502, 503, 504],
                allowed_methods=["GET", "PUT", "DELETE"],
                raise_on_status=False
            )
            session.mount('https://', HTTPAdapter(max_retries=retries))
            session.mount('http://', HTTPAdapter(max_retries=retries))
        self.session = session

        logger.info(f"GitHub HTTP client initialized for {self.config.api_url}")

    def build_url(self, path: str) -> str:
        return f"{self.config.api_url.rstrip('/')}/{path.lstrip('/')}"

    def build_headers(self, config: Config,
                      headers: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        """
        Merge headers in increasing precedence.

        Defaults, then the token, then the caller's Config headers, then
        headers required by the operation itself.
        """
        merged = {
            'Accept': self.config.accept,
            'User-Agent': self.config.user_agent
        }
        if config.access_token:
            merged['Authorization'] = f'token {config.access_token}'
        merged.update(config.headers)
        if headers:
            merged.update(headers)
        return merged

    @staticmethod
    def build_params(query_params: Optional[Mapping[str, Any]] = None,
                     pagination: Optional[Pagination] = None) -> Dict[str, str]:
        params = {k: str(v) for k, v in (query_params or {}).items()}
        if pagination is not None:
            params.update(pagination.to_params())
        return params

    def execute(self, method: str, path: str, config: Config,
                query_params: Optional[Mapping[str, Any]] = None,
                pagination: Optional[Pagination] = None,
                body: Optional[Any] = None,
                headers: Optional[Mapping[str, str]] = None,
                decoder: Optional[Callable[[str], Any]] = None) -> GHResponse:
        """
        Issue one request and decode its response.

        Args:
            method: HTTP verb
            path: Path relative to the API base URL
            config: Per-call credentials and headers
            query_params: Query string parameters
            pagination: Optional page/per_page, overriding query_params
            body: JSON-serializable payload for POST/PATCH/PUT/DELETE
            headers: Headers required by the operation
            decoder: Callable turning the response text into the result type;
                without one the parsed JSON (or None for an empty body) is returned

        Returns:
            GHResponse with the decoded result or a NetworkError, ApiError
            or DecodingError
        """
        method = method.upper()
        url = self.build_url(path)
        request_headers = self.build_headers(config, headers)
        params = self.build_params(query_params, pagination)

        data = None
        if body is not None and method in BODY_METHODS:
            data = json.dumps(body, separators=(',', ':'))
            request_headers['Content-Type'] = 'application/json'

        try:
            logger.debug(f"{method} {url} params={params}")
            response = self.session.request(
                method,
                url,
                params=params or None,
                data=data,
                headers=request_headers,
                timeout=self.config.timeout
            )
        except requests.exceptions.Timeout as e:
            logger.warning(f"Request to {url} timed out after {self.config.timeout} seconds")
            return GHResponse.failure(
                NetworkError(f"Request timed out after {self.config.timeout} seconds", e))
        except requests.exceptions.RequestException as e:
            logger.warning(f"Connection error for {url}: {e}")
            return GHResponse.failure(NetworkError(f"Connection error: {e}", e))

        logger.debug(f"{method} {url} -> {response.status_code}")
        response_headers = dict(response.headers)

        if not 200 <= response.status_code < 300:
            return GHResponse.failure(self._api_error(response))

        if decoder is None:
            # Nothing to decode into; 204 No Content and DELETE calls end here
            if response.status_code == 204 or not response.content:
                return GHResponse.success(None, response.status_code, response_headers)
        elif not response.content:
            logger.warning(f"Empty response from {url} where a result was expected")
            return GHResponse.failure(DecodingError(
                f"Empty response from {path} (status {response.status_code}) where a result was expected",
                response.text))

        try:
            result = decoder(response.text) if decoder is not None else response.json()
        except (ValidationError, ValueError) as e:
            logger.warning(f"Could not decode response from {url}: {e}")
            return GHResponse.failure(
                DecodingError(f"Could not decode response from {path}: {e}", response.text))

        return GHResponse.success(result, response.status_code, response_headers)

    def _api_error(self, response: requests.Response) -> ApiError:
        """Build an ApiError carrying the upstream message if present."""
        response_data = None
        message = response.text or response.reason or ''
        try:
            response_data = response.json()
        except ValueError:
            pass
        if isinstance(response_data, dict) and response_data.get('message'):
            message = response_data['message']
        logger.warning(f"API error: {response.status_code} - {message}")
        return ApiError(response.status_code, message, response_data)

    def get(self, path: str, config: Config, **kwargs) -> GHResponse:
        return self.execute("GET", path, config, **kwargs)

    def post(self, path: str, config: Config, **kwargs) -> GHResponse:
        return self.execute("POST", path, config, **kwargs)

    def put(self, path: str, config: Config, **kwargs) -> GHResponse:
        return self.execute("PUT", path, config, **kwargs)

    def patch(self, path: str, config: Config, **kwargs) -> GHResponse:
        return self.execute("PATCH", path, config, **kwargs)

    def delete(self, path: str, config: Config, **kwargs) -> GHResponse:
        return self.execute("DELETE", path, config, **kwargs)
