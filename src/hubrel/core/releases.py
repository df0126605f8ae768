"""Handles for the releases API of one repository.

Handles only compose request paths. Creating one (``Releases.get`` or
``ReleaseRef.assets``) never touches the network; the coroutine methods
each issue exactly one request through the shared transport.
"""

from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from hubrel.core.downloader import download_file
from hubrel.core.transport import Transport, list_of
from hubrel.models.options import ReleaseOptions
from hubrel.models.release import Asset, Release


logger = logging.getLogger(__name__)


class ContentReadError(Exception):
    """Upload content could not be read."""

    pass


@dataclass(frozen=True)
class Assets:
    """The asset collection of one release."""

    github: Transport
    owner: str
    repo: str
    release_id: int

    def path(self, more: str = "") -> str:
        return f"/repos/{self.owner}/{self.repo}/releases/{self.release_id}/assets{more}"

    async def list(self) -> list[Asset]:
        return await self.github.get(self.path(), list_of(Asset.from_api_response))

    async def get(self, asset_id: int) -> Asset:
        return await self.github.get(self.path(f"/{asset_id}"), Asset.from_api_response)

    async def delete(self, asset_id: int) -> None:
        await self.github.delete(self.path(f"/{asset_id}"))

    async def post(
        self,
        name: str,
        content: BinaryIO | str | os.PathLike,
        mime_type: str,
    ) -> Asset:
        """Upload a new asset to the release.

        Args:
            name: Asset file name, sent as the ``name`` query parameter
            content: Readable binary file object, or a path to read from
            mime_type: Content type of the uploaded bytes

        The whole content is read into memory before the request is
        sent. Raises ContentReadError if reading fails, in which case no
        request is made.
        """
        data = await asyncio.to_thread(_read_content, content)
        logger.debug("Uploading %s (%d bytes) to release %s", name, len(data), self.release_id)
        return await self.github.post_type(
            self.path(f"?name={name}"),
            data,
            mime_type,
            Asset.from_api_response,
        )

    async def download(
        self,
        asset: Asset,
        dest: Path | None = None,
        show_progress: bool = False,
    ) -> Path:
        """Download an asset's file. Returns the path it was saved to.

        The file is fetched from the asset's API URL through the shared
        client, so private repository assets use the configured token.
        """
        return await download_file(
            self.github,
            asset.url,
            dest=dest,
            filename=asset.name,
            show_progress=show_progress,
        )


@dataclass(frozen=True)
class ReleaseRef:
    """One release of a repository."""

    github: Transport
    owner: str
    repo: str
    id: int

    def path(self, more: str = "") -> str:
        return f"/repos/{self.owner}/{self.repo}/releases/{self.id}{more}"

    async def get(self) -> Release:
        return await self.github.get(self.path(), Release.from_api_response)

    def assets(self) -> Assets:
        return Assets(self.github, self.owner, self.repo, self.id)


@dataclass(frozen=True)
class Releases:
    """The release collection of one repository."""

    github: Transport
    owner: str
    repo: str

    def path(self, more: str = "") -> str:
        return f"/repos/{self.owner}/{self.repo}/releases{more}"

    async def list(self) -> list[Release]:
        return await self.github.get(self.path(), list_of(Release.from_api_response))

    async def create(self, options: ReleaseOptions) -> Release:
        return await self.github.post(
            self.path(), options.to_dict(), Release.from_api_response
        )

    async def edit(self, id: int, options: ReleaseOptions) -> Release:
        """Update a release. Fields unset in options are left unchanged."""
        return await self.github.patch(
            self.path(f"/{id}"), options.to_dict(), Release.from_api_response
        )

    async def delete(self, id: int) -> None:
        await self.github.delete(self.path(f"/{id}"))

    def get(self, id: int) -> ReleaseRef:
        """Get a handle on a single release. Does not issue a request."""
        return ReleaseRef(self.github, self.owner, self.repo, id)

    async def latest(self) -> Release:
        """Get the latest published, non-prerelease release."""
        return await self.github.get(self.path("/latest"), Release.from_api_response)

    async def by_tag(self, tag: str) -> Release:
        """Get a release by its tag name."""
        return await self.github.get(self.path(f"/tags/{tag}"), Release.from_api_response)


def _read_content(content: BinaryIO | str | os.PathLike) -> bytes:
    """Read all bytes from a file object or path."""
    try:
        if isinstance(content, (str, os.PathLike)):
            with open(content, "rb") as f:
                data = f.read()
        else:
            data = content.read()
    except Exception as e:
        raise ContentReadError(f"Failed to read upload content: {e}") from e

    if not isinstance(data, bytes):
        raise ContentReadError(
            f"Upload content must be bytes, got {type(data).__name__}"
        )
    return data
