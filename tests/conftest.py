import json

import httpx
import pytest

from hubrel.core.client import GitHubClient
from hubrel.core.config import HubrelConfig


API_URL = "https://api.test"


def user_json(login: str = "octocat", id: int = 1) -> dict:
    return {
        "login": login,
        "id": id,
        "avatar_url": f"https://avatars.test/u/{id}",
        "gravatar_id": "",
        "url": f"{API_URL}/users/{login}",
        "html_url": f"https://github.test/{login}",
        "type": "User",
        "site_admin": False,
    }


def asset_json(id: int = 10, name: str = "asset.bin", uploader: dict | None = None) -> dict:
    return {
        "url": f"{API_URL}/repos/o/r/releases/assets/{id}",
        "browser_download_url": f"https://github.test/o/r/releases/download/v1.0/{name}",
        "id": id,
        "name": name,
        "label": None,
        "state": "uploaded",
        "content_type": "application/octet-stream",
        "size": 5,
        "download_count": 3,
        "created_at": "2024-01-01T00:00:00Z",
        "updated_at": "2024-01-02T00:00:00Z",
        "uploader": uploader or user_json(),
    }


def release_json(id: int = 42, tag: str = "v1.0", assets: list[dict] | None = None) -> dict:
    return {
        "url": f"{API_URL}/repos/o/r/releases/{id}",
        "html_url": f"https://github.test/o/r/releases/tag/{tag}",
        "assets_url": f"{API_URL}/repos/o/r/releases/{id}/assets",
        "upload_url": f"https://uploads.test/repos/o/r/releases/{id}/assets{{?name,label}}",
        "tarball_url": f"{API_URL}/repos/o/r/tarball/{tag}",
        "zipball_url": f"{API_URL}/repos/o/r/zipball/{tag}",
        "id": id,
        "tag_name": tag,
        "target_commitish": "main",
        "name": f"Release {tag}",
        "body": "Notes",
        "draft": False,
        "prerelease": False,
        "created_at": "2024-01-01T00:00:00Z",
        "published_at": "2024-01-01T01:00:00Z",
        "author": user_json(),
        "assets": assets if assets is not None else [],
    }


class FakeTransport:
    """Records every call and answers with queued JSON documents."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls: list[tuple] = []

    def _next(self, decode):
        if not self.responses:
            raise AssertionError("No more fake responses available")
        return decode(self.responses.pop(0))

    async def get(self, path, decode):
        self.calls.append(("GET", path))
        return self._next(decode)

    async def post(self, path, body, decode):
        self.calls.append(("POST", path, body))
        return self._next(decode)

    async def post_type(self, path, content, content_type, decode):
        self.calls.append(("POST", path, content, content_type))
        return self._next(decode)

    async def patch(self, path, body, decode):
        self.calls.append(("PATCH", path, body))
        return self._next(decode)

    async def delete(self, path):
        self.calls.append(("DELETE", path))


class RecordingHandler:
    """httpx.MockTransport handler replaying queued responses."""

    def __init__(self, *responses: httpx.Response):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            raise AssertionError("No more mock responses available")
        return self.responses.pop(0)

    def body(self, index: int = 0):
        return json.loads(self.requests[index].content)


@pytest.fixture
def config() -> HubrelConfig:
    return HubrelConfig(api_url=API_URL, token="test-token", timeout=5.0)


@pytest.fixture
def make_client(config):
    def factory(*responses: httpx.Response) -> tuple[GitHubClient, RecordingHandler]:
        handler = RecordingHandler(*responses)
        client = GitHubClient(config=config, transport=httpx.MockTransport(handler))
        return client, handler

    return factory
