"""GitHub API client used as the transport for release handles."""

import logging
import re
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx

from hubrel import __version__
from hubrel.core.config import HubrelConfig, get_config
from hubrel.core.repository import Repository
from hubrel.core.transport import Decoder, T, TransportError


logger = logging.getLogger(__name__)


def parse_repo_spec(spec: str) -> tuple[str, str]:
    """Parse a repo spec into (owner, repo).

    Accepts:
    - owner/repo
    - https://github.com/owner/repo
    - github.com/owner/repo
    """
    # Handle full URLs
    url_pattern = r"(?:https?://)?github\.com/([^/]+)/([^/]+?)(?:\.git)?/?$"
    match = re.match(url_pattern, spec)
    if match:
        return match.group(1), match.group(2)

    # Handle owner/repo format
    if "/" in spec:
        parts = spec.split("/")
        if len(parts) == 2 and all(parts):
            return parts[0], parts[1]

    raise ValueError(f"Invalid repo spec: {spec}. Use 'owner/repo' or GitHub URL.")


class GitHubClient:
    """Async client for the GitHub REST API.

    One instance owns one ``httpx.AsyncClient`` connection pool. Handles
    created from it (``client.repo(...).releases()``) only keep a
    reference to the client, so they are cheap to create and can be used
    from concurrent tasks.
    """

    def __init__(
        self,
        config: HubrelConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config or get_config()
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": f"hubrel/{__version__}",
        }
        if self.config.token:
            headers["Authorization"] = f"Bearer {self.config.token}"
        self.client = httpx.AsyncClient(
            base_url=self.config.api_url,
            headers=headers,
            timeout=self.config.timeout,
            transport=transport,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    def repo(self, owner: str, repo: str) -> Repository:
        """Get a handle on a repository. Does not issue a request."""
        return Repository(self, owner, repo)

    async def get(self, path: str, decode: Decoder[T]) -> T:
        response = await self._send("GET", path)
        return self._decode(response, decode)

    async def post(self, path: str, body: dict, decode: Decoder[T]) -> T:
        response = await self._send("POST", path, json=body)
        return self._decode(response, decode)

    async def post_type(
        self, path: str, content: bytes, content_type: str, decode: Decoder[T]
    ) -> T:
        """POST a raw binary body with an explicit content type."""
        response = await self._send(
            "POST",
            path,
            content=content,
            headers={"Content-Type": content_type},
        )
        return self._decode(response, decode)

    async def patch(self, path: str, body: dict, decode: Decoder[T]) -> T:
        response = await self._send("PATCH", path, json=body)
        return self._decode(response, decode)

    async def delete(self, path: str) -> None:
        await self._send("DELETE", path)

    @asynccontextmanager
    async def stream(
        self, url: str, accept: str = "application/octet-stream"
    ) -> AsyncIterator[httpx.Response]:
        """Stream a GET response, following redirects.

        ``url`` may be absolute (e.g. an asset's API URL); the client's
        auth and user agent headers are sent either way.
        """
        logger.debug("GET %s (stream)", url)
        try:
            async with self.client.stream(
                "GET", url, headers={"Accept": accept}, follow_redirects=True
            ) as response:
                if not response.is_success:
                    await response.aread()
                    logger.warning("GET %s returned HTTP %d", url, response.status_code)
                    raise TransportError(
                        _error_message(response, url), response.status_code
                    )
                yield response
        except httpx.HTTPError as e:
            logger.warning("GET %s failed: %s", url, e)
            raise TransportError(f"Request to {url} failed: {e}") from e

    async def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        logger.debug("%s %s", method, path)
        try:
            response = await self.client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise TransportError(f"Request to {path} failed: {e}") from e

        if response.is_success:
            return response

        logger.warning("%s %s returned HTTP %d", method, path, response.status_code)
        raise TransportError(_error_message(response, path), response.status_code)

    @staticmethod
    def _decode(response: httpx.Response, decode: Decoder[T]) -> T:
        try:
            return decode(response.json())
        except (ValueError, KeyError, TypeError) as e:
            raise TransportError(
                f"Unexpected response body from {response.request.url.path}: {e!r}",
                response.status_code,
            ) from e


def _error_message(response: httpx.Response, path: str) -> str:
    """Build a readable message for a failed response."""
    if response.status_code == 404:
        return f"Not found: {path}"
    if response.status_code in (403, 429) and response.headers.get("x-ratelimit-remaining") == "0":
        return "GitHub API rate limit exceeded"

    message = f"HTTP {response.status_code} from {path}"
    try:
        detail = response.json().get("message")
    except (ValueError, AttributeError):
        detail = None
    if detail:
        message = f"{message}: {detail}"
    return message
