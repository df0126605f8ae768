"""Core client, transport and resource handles."""

from hubrel.core.transport import Transport, TransportError, list_of
from hubrel.core.releases import Releases, ReleaseRef, Assets, ContentReadError
from hubrel.core.repository import Repository
from hubrel.core.client import GitHubClient, parse_repo_spec

__all__ = [
    "Transport",
    "TransportError",
    "list_of",
    "Releases",
    "ReleaseRef",
    "Assets",
    "ContentReadError",
    "Repository",
    "GitHubClient",
    "parse_repo_spec",
]
