"""Repository handle, the entry point to per-repository APIs."""

from dataclasses import dataclass

from hubrel.core.releases import Releases
from hubrel.core.transport import Transport


@dataclass(frozen=True)
class Repository:
    """One repository, identified by owner and name."""

    github: Transport
    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    def releases(self) -> Releases:
        return Releases(self.github, self.owner, self.repo)
