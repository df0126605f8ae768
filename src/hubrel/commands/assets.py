"""Asset commands for a single release."""

import asyncio
import mimetypes
from pathlib import Path

import click
from rich.console import Console
from rich.prompt import Confirm
from rich.table import Table

from hubrel.core.client import GitHubClient
from hubrel.core.downloader import DownloadError
from hubrel.core.releases import ContentReadError
from hubrel.core.transport import TransportError
from hubrel.commands.releases import parse_repo_or_exit
from hubrel.models.release import Asset

console = Console()


def format_size(size: int) -> str:
    """Format a byte count for display."""
    if size < 1024:
        return f"{size} B"
    value = float(size)
    for unit in ("KB", "MB", "GB"):
        value /= 1024
        if value < 1024 or unit == "GB":
            break
    return f"{value:.1f} {unit}"


@click.group()
def assets():
    """Manage the assets of a release."""
    pass


async def _list(owner: str, repo: str, release_id: int) -> list[Asset]:
    async with GitHubClient() as client:
        return await client.repo(owner, repo).releases().get(release_id).assets().list()


@assets.command("list")
@click.argument("repo_spec")
@click.argument("release_id", type=int)
def list_assets(repo_spec: str, release_id: int):
    """List the assets of a release."""
    owner, repo = parse_repo_or_exit(repo_spec)

    try:
        items = asyncio.run(_list(owner, repo, release_id))
    except TransportError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    if not items:
        console.print(f"Release {release_id} has no assets")
        raise SystemExit(0)

    table = Table(show_header=True, header_style="bold")
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Type")
    table.add_column("Size")
    table.add_column("Downloads")

    for asset in items:
        table.add_row(
            str(asset.id),
            asset.name,
            asset.content_type,
            format_size(asset.size),
            str(asset.download_count),
        )

    console.print(table)


async def _upload(
    owner: str, repo: str, release_id: int, name: str, path: Path, content_type: str
) -> Asset:
    async with GitHubClient() as client:
        release_assets = client.repo(owner, repo).releases().get(release_id).assets()
        return await release_assets.post(name, path, content_type)


@assets.command()
@click.argument("repo_spec")
@click.argument("release_id", type=int)
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--name", "-n", help="Asset name (defaults to the file name)")
@click.option("--content-type", "-c", help="MIME type (guessed from the file name)")
def upload(
    repo_spec: str,
    release_id: int,
    file: Path,
    name: str | None,
    content_type: str | None,
):
    """Upload FILE as a new asset of a release."""
    owner, repo = parse_repo_or_exit(repo_spec)
    name = name or file.name
    if content_type is None:
        content_type = mimetypes.guess_type(name)[0] or "application/octet-stream"

    try:
        asset = asyncio.run(_upload(owner, repo, release_id, name, file, content_type))
    except (ContentReadError, TransportError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    console.print(
        f"[green]✓[/green] Uploaded [cyan]{asset.name}[/cyan] "
        f"({format_size(asset.size)}, id {asset.id})"
    )


async def _delete(owner: str, repo: str, release_id: int, asset_id: int) -> None:
    async with GitHubClient() as client:
        await client.repo(owner, repo).releases().get(release_id).assets().delete(asset_id)


@assets.command()
@click.argument("repo_spec")
@click.argument("release_id", type=int)
@click.argument("asset_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
def delete(repo_spec: str, release_id: int, asset_id: int, yes: bool):
    """Delete an asset from a release."""
    owner, repo = parse_repo_or_exit(repo_spec)

    if not yes and not Confirm.ask(f"Delete asset {asset_id}?", default=False):
        console.print("Cancelled")
        raise SystemExit(0)

    try:
        asyncio.run(_delete(owner, repo, release_id, asset_id))
    except TransportError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    console.print(f"[green]✓[/green] Deleted asset {asset_id}")


async def _download(
    owner: str, repo: str, release_id: int, asset_id: int, dest: Path | None
) -> Path:
    async with GitHubClient() as client:
        release_assets = client.repo(owner, repo).releases().get(release_id).assets()
        asset = await release_assets.get(asset_id)
        console.print(f"  Selected asset: [cyan]{asset.name}[/cyan]")
        return await release_assets.download(asset, dest=dest, show_progress=True)


@assets.command()
@click.argument("repo_spec")
@click.argument("release_id", type=int)
@click.argument("asset_id", type=int)
@click.option(
    "--dest",
    "-d",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory to save into (defaults to the current directory)",
)
def download(repo_spec: str, release_id: int, asset_id: int, dest: Path | None):
    """Download an asset of a release."""
    owner, repo = parse_repo_or_exit(repo_spec)

    try:
        path = asyncio.run(_download(owner, repo, release_id, asset_id, dest))
    except (TransportError, DownloadError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    console.print(f"[green]✓[/green] Saved to {path}")
