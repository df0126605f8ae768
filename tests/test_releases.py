import io
from pathlib import Path

import pytest

from hubrel.core.releases import Assets, ContentReadError, ReleaseRef, Releases
from hubrel.core.repository import Repository
from hubrel.models.options import ReleaseOptionsBuilder

from conftest import FakeTransport, asset_json, release_json


@pytest.mark.parametrize(
    "owner,repo,release_id",
    [("o", "r", 1), ("octo-org", "hello.world", 987654321)],
)
def test_assets_path_composes_from_releases(owner: str, repo: str, release_id: int) -> None:
    transport = FakeTransport()

    assets = Releases(transport, owner, repo).get(release_id).assets()

    assert assets.path() == f"/repos/{owner}/{repo}/releases/{release_id}/assets"
    assert assets == Assets(transport, owner, repo, release_id)
    assert transport.calls == []


def test_composition_shares_transport() -> None:
    transport = FakeTransport()

    ref = Repository(transport, "o", "r").releases().get(7)

    assert isinstance(ref, ReleaseRef)
    assert ref.github is transport
    assert ref.assets().github is transport


def test_handles_are_immutable() -> None:
    releases = Releases(FakeTransport(), "o", "r")

    with pytest.raises(AttributeError):
        releases.owner = "other"


@pytest.mark.asyncio
async def test_list_releases() -> None:
    transport = FakeTransport([release_json(id=1), release_json(id=2, tag="v2.0")])

    releases = await Releases(transport, "o", "r").list()

    assert [r.id for r in releases] == [1, 2]
    assert transport.calls == [("GET", "/repos/o/r/releases")]


@pytest.mark.asyncio
async def test_create_posts_options() -> None:
    transport = FakeTransport(release_json(id=99))
    options = ReleaseOptionsBuilder("v1.0").draft(True).build()

    release = await Releases(transport, "o", "r").create(options)

    assert release.id == 99
    assert transport.calls == [
        ("POST", "/repos/o/r/releases", {"tag_name": "v1.0", "draft": True})
    ]


@pytest.mark.asyncio
async def test_edit_patches_release() -> None:
    transport = FakeTransport(release_json(id=5))
    options = ReleaseOptionsBuilder("v1.0").name("Renamed").build()

    await Releases(transport, "o", "r").edit(5, options)

    assert transport.calls == [
        ("PATCH", "/repos/o/r/releases/5", {"tag_name": "v1.0", "name": "Renamed"})
    ]


@pytest.mark.asyncio
async def test_delete_release_issues_one_delete() -> None:
    transport = FakeTransport()

    result = await Releases(transport, "o", "r").delete(42)

    assert result is None
    assert transport.calls == [("DELETE", "/repos/o/r/releases/42")]


@pytest.mark.asyncio
async def test_latest_and_by_tag() -> None:
    transport = FakeTransport(release_json(id=1), release_json(id=2, tag="v2.0"))
    releases = Releases(transport, "o", "r")

    latest = await releases.latest()
    tagged = await releases.by_tag("v2.0")

    assert latest.id == 1
    assert tagged.tag_name == "v2.0"
    assert transport.calls == [
        ("GET", "/repos/o/r/releases/latest"),
        ("GET", "/repos/o/r/releases/tags/v2.0"),
    ]


@pytest.mark.asyncio
async def test_release_ref_get() -> None:
    transport = FakeTransport(release_json(id=3, assets=[asset_json()]))

    release = await Releases(transport, "o", "r").get(3).get()

    assert release.id == 3
    assert len(release.assets) == 1
    assert transport.calls == [("GET", "/repos/o/r/releases/3")]


@pytest.mark.asyncio
async def test_asset_list_get_delete() -> None:
    transport = FakeTransport([asset_json(id=1), asset_json(id=2)], asset_json(id=2))
    assets = Assets(transport, "o", "r", 3)

    listed = await assets.list()
    fetched = await assets.get(2)
    await assets.delete(2)

    assert [a.id for a in listed] == [1, 2]
    assert fetched.id == 2
    assert transport.calls == [
        ("GET", "/repos/o/r/releases/3/assets"),
        ("GET", "/repos/o/r/releases/3/assets/2"),
        ("DELETE", "/repos/o/r/releases/3/assets/2"),
    ]


@pytest.mark.asyncio
async def test_post_uploads_full_content() -> None:
    transport = FakeTransport(asset_json(id=11, name="asset.bin"))
    assets = Assets(transport, "o", "r", 3)

    asset = await assets.post("asset.bin", io.BytesIO(b"12345"), "application/octet-stream")

    assert asset.id == 11
    assert transport.calls == [
        (
            "POST",
            "/repos/o/r/releases/3/assets?name=asset.bin",
            b"12345",
            "application/octet-stream",
        )
    ]


@pytest.mark.asyncio
async def test_post_reads_from_path(tmp_path: Path) -> None:
    upload = tmp_path / "tool.tar.gz"
    upload.write_bytes(b"\x1f\x8b data")
    transport = FakeTransport(asset_json(name="tool.tar.gz"))

    await Assets(transport, "o", "r", 3).post("tool.tar.gz", upload, "application/gzip")

    assert transport.calls[0][2] == b"\x1f\x8b data"


class BrokenReader:
    def read(self) -> bytes:
        raise OSError("disk went away")


@pytest.mark.asyncio
async def test_post_read_failure_issues_no_request() -> None:
    transport = FakeTransport(asset_json())

    with pytest.raises(ContentReadError, match="disk went away"):
        await Assets(transport, "o", "r", 3).post("asset.bin", BrokenReader(), "text/plain")

    assert transport.calls == []


@pytest.mark.asyncio
async def test_post_missing_file_issues_no_request(tmp_path: Path) -> None:
    transport = FakeTransport(asset_json())

    with pytest.raises(ContentReadError):
        await Assets(transport, "o", "r", 3).post(
            "asset.bin", tmp_path / "missing.bin", "application/octet-stream"
        )

    assert transport.calls == []


@pytest.mark.asyncio
async def test_post_rejects_text_content() -> None:
    transport = FakeTransport(asset_json())

    with pytest.raises(ContentReadError, match="must be bytes"):
        await Assets(transport, "o", "r", 3).post("notes.txt", io.StringIO("hi"), "text/plain")

    assert transport.calls == []


@pytest.mark.asyncio
async def test_post_closed_file_issues_no_request() -> None:
    transport = FakeTransport(asset_json())
    upload = io.BytesIO(b"12345")
    upload.close()

    with pytest.raises(ContentReadError, match="closed file"):
        await Assets(transport, "o", "r", 3).post("asset.bin", upload, "application/octet-stream")

    assert transport.calls == []


class FailingDecoder:
    def read(self) -> bytes:
        raise ValueError("decoder failed")


@pytest.mark.asyncio
async def test_post_reader_error_issues_no_request() -> None:
    transport = FakeTransport(asset_json())

    with pytest.raises(ContentReadError, match="decoder failed") as excinfo:
        await Assets(transport, "o", "r", 3).post("asset.bin", FailingDecoder(), "text/plain")

    assert isinstance(excinfo.value.__cause__, ValueError)
    assert transport.calls == []
