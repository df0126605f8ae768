"""GitHub user data model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Represents a GitHub user (release author or asset uploader)."""

    login: str
    id: int
    avatar_url: str = ""
    gravatar_id: str = ""
    url: str = ""
    html_url: str = ""
    followers_url: str = ""
    following_url: str = ""
    gists_url: str = ""
    starred_url: str = ""
    subscriptions_url: str = ""
    organizations_url: str = ""
    repos_url: str = ""
    events_url: str = ""
    received_events_url: str = ""
    type: str = "User"
    site_admin: bool = False

    @classmethod
    def from_api_response(cls, data: dict) -> "User":
        """Create User from GitHub API response."""
        return cls(
            login=data["login"],
            id=data["id"],
            avatar_url=data.get("avatar_url", ""),
            gravatar_id=data.get("gravatar_id") or "",
            url=data.get("url", ""),
            html_url=data.get("html_url", ""),
            followers_url=data.get("followers_url", ""),
            following_url=data.get("following_url", ""),
            gists_url=data.get("gists_url", ""),
            starred_url=data.get("starred_url", ""),
            subscriptions_url=data.get("subscriptions_url", ""),
            organizations_url=data.get("organizations_url", ""),
            repos_url=data.get("repos_url", ""),
            events_url=data.get("events_url", ""),
            received_events_url=data.get("received_events_url", ""),
            type=data.get("type", "User"),
            site_admin=data.get("site_admin", False),
        )
