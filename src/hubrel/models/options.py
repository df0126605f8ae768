"""Payloads for creating and editing releases."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class ReleaseOptions:
    """Body of a create or edit release request.

    Only ``tag_name`` is required. Optional fields left as ``None`` are
    dropped from the payload, so an edit only touches what was set.
    """

    tag_name: str
    target_commitish: str | None = None
    name: str | None = None
    body: str | None = None
    draft: bool | None = None
    prerelease: bool | None = None

    def to_dict(self) -> dict:
        """Convert to the JSON body sent to the API."""
        data = {"tag_name": self.tag_name}
        optional = {
            "target_commitish": self.target_commitish,
            "name": self.name,
            "body": self.body,
            "draft": self.draft,
            "prerelease": self.prerelease,
        }
        data.update({key: value for key, value in optional.items() if value is not None})
        return data

    @classmethod
    def builder(cls, tag: str) -> "ReleaseOptionsBuilder":
        """Start building options for the given tag."""
        return ReleaseOptionsBuilder(tag)


class ReleaseOptionsBuilder:
    """Builder interface for ReleaseOptions.

    Example:

        options = ReleaseOptionsBuilder("v1.0").name("1.0").draft(True).build()
    """

    def __init__(self, tag: str):
        self._options = ReleaseOptions(tag_name=tag)

    def commitish(self, commit: str) -> "ReleaseOptionsBuilder":
        self._options = replace(self._options, target_commitish=commit)
        return self

    def name(self, name: str) -> "ReleaseOptionsBuilder":
        self._options = replace(self._options, name=name)
        return self

    def body(self, body: str) -> "ReleaseOptionsBuilder":
        self._options = replace(self._options, body=body)
        return self

    def draft(self, draft: bool) -> "ReleaseOptionsBuilder":
        self._options = replace(self._options, draft=draft)
        return self

    def prerelease(self, pre: bool) -> "ReleaseOptionsBuilder":
        self._options = replace(self._options, prerelease=pre)
        return self

    def build(self) -> ReleaseOptions:
        """Return the options staged so far.

        The builder stays usable; later setter calls do not change
        options that were already built.
        """
        return self._options
