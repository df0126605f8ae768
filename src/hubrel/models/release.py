"""GitHub release data models."""

from dataclasses import dataclass

from hubrel.models.user import User


@dataclass(frozen=True)
class Asset:
    """Represents a GitHub release asset."""

    url: str
    browser_download_url: str
    id: int
    name: str
    label: str | None
    state: str
    content_type: str
    size: int
    download_count: int
    created_at: str
    updated_at: str
    uploader: User

    @classmethod
    def from_api_response(cls, data: dict) -> "Asset":
        """Create Asset from GitHub API response."""
        return cls(
            url=data["url"],
            browser_download_url=data["browser_download_url"],
            id=data["id"],
            name=data["name"],
            label=data.get("label"),
            state=data.get("state", "uploaded"),
            content_type=data.get("content_type", "application/octet-stream"),
            size=data["size"],
            download_count=data.get("download_count", 0),
            created_at=data.get("created_at", ""),
            updated_at=data.get("updated_at", ""),
            uploader=User.from_api_response(data["uploader"]),
        )


@dataclass(frozen=True)
class Release:
    """Represents a GitHub release."""

    url: str
    html_url: str
    assets_url: str
    upload_url: str
    id: int
    tag_name: str
    target_commitish: str
    name: str
    body: str
    draft: bool
    prerelease: bool
    created_at: str
    published_at: str | None
    author: User
    assets: tuple[Asset, ...] = ()
    tarball_url: str = ""
    zipball_url: str = ""

    @classmethod
    def from_api_response(cls, data: dict) -> "Release":
        """Create Release from GitHub API response."""
        assets = tuple(Asset.from_api_response(a) for a in data.get("assets", []))
        return cls(
            url=data["url"],
            html_url=data.get("html_url", ""),
            assets_url=data.get("assets_url", ""),
            upload_url=data.get("upload_url", ""),
            id=data["id"],
            tag_name=data["tag_name"],
            target_commitish=data.get("target_commitish", ""),
            name=data.get("name") or data["tag_name"],
            body=data.get("body") or "",
            draft=data.get("draft", False),
            prerelease=data.get("prerelease", False),
            created_at=data.get("created_at", ""),
            published_at=data.get("published_at"),
            author=User.from_api_response(data["author"]),
            assets=assets,
            tarball_url=data.get("tarball_url") or "",
            zipball_url=data.get("zipball_url") or "",
        )
