"""Release commands: list, show, create, edit, delete."""

import asyncio

import click
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm
from rich.table import Table

from hubrel.core.client import GitHubClient, parse_repo_spec
from hubrel.core.transport import TransportError
from hubrel.models.options import ReleaseOptions, ReleaseOptionsBuilder
from hubrel.models.release import Release

console = Console()


def parse_repo_or_exit(spec: str) -> tuple[str, str]:
    try:
        return parse_repo_spec(spec)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)


def options_from_flags(
    tag: str,
    target: str | None,
    name: str | None,
    body: str | None,
    draft: bool | None,
    prerelease: bool | None,
) -> ReleaseOptions:
    """Build release options, leaving out flags that were not given."""
    builder = ReleaseOptionsBuilder(tag)
    if target is not None:
        builder.commitish(target)
    if name is not None:
        builder.name(name)
    if body is not None:
        builder.body(body)
    if draft is not None:
        builder.draft(draft)
    if prerelease is not None:
        builder.prerelease(prerelease)
    return builder.build()


def print_release(release: Release) -> None:
    state = "draft" if release.draft else "prerelease" if release.prerelease else "published"
    lines = [
        f"[bold]ID:[/bold] {release.id}",
        f"[bold]Tag:[/bold] {release.tag_name}",
        f"[bold]Target:[/bold] {release.target_commitish}",
        f"[bold]State:[/bold] {state}",
        f"[bold]Author:[/bold] {release.author.login}",
        f"[bold]Published:[/bold] {release.published_at or '-'}",
        f"[bold]URL:[/bold] {release.html_url}",
        f"[bold]Assets:[/bold] {len(release.assets)}",
    ]
    if release.body:
        lines.append(f"\n{release.body}")
    console.print(Panel("\n".join(lines), title=f"[green]{release.name}[/green]"))


async def _list(owner: str, repo: str) -> list[Release]:
    async with GitHubClient() as client:
        return await client.repo(owner, repo).releases().list()


@click.command("list")
@click.argument("repo_spec")
def list_releases(repo_spec: str):
    """List releases of a repository.

    REPO_SPEC is owner/repo or a GitHub URL.
    """
    owner, repo = parse_repo_or_exit(repo_spec)

    try:
        releases = asyncio.run(_list(owner, repo))
    except TransportError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    if not releases:
        console.print(f"No releases found for {owner}/{repo}")
        raise SystemExit(0)

    table = Table(show_header=True, header_style="bold")
    table.add_column("ID")
    table.add_column("Tag")
    table.add_column("Name")
    table.add_column("Assets")
    table.add_column("Published")

    for release in releases:
        tag = release.tag_name
        if release.draft:
            tag += " [dim](draft)[/dim]"
        elif release.prerelease:
            tag += " [yellow](prerelease)[/yellow]"
        table.add_row(
            str(release.id),
            tag,
            release.name,
            str(len(release.assets)),
            release.published_at or "-",
        )

    console.print(table)


async def _show(owner: str, repo: str, release_id: int | None, tag: str | None) -> Release:
    async with GitHubClient() as client:
        releases = client.repo(owner, repo).releases()
        if release_id is not None:
            return await releases.get(release_id).get()
        if tag is not None:
            return await releases.by_tag(tag)
        return await releases.latest()


@click.command()
@click.argument("repo_spec")
@click.argument("release_id", type=int, required=False)
@click.option("--tag", "-t", help="Look up the release by tag instead of ID")
def show(repo_spec: str, release_id: int | None, tag: str | None):
    """Show a release. Defaults to the latest release.

    REPO_SPEC is owner/repo or a GitHub URL.
    """
    owner, repo = parse_repo_or_exit(repo_spec)

    try:
        release = asyncio.run(_show(owner, repo, release_id, tag))
    except TransportError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    print_release(release)


def release_options(func):
    """Options shared by create and edit."""
    func = click.option("--target", help="Commitish the tag is created from")(func)
    func = click.option("--name", "-n", help="Release title")(func)
    func = click.option("--body", "-b", help="Release notes")(func)
    func = click.option("--draft/--no-draft", default=None, help="Mark as draft")(func)
    func = click.option(
        "--prerelease/--no-prerelease", default=None, help="Mark as prerelease"
    )(func)
    return func


async def _create(owner: str, repo: str, options: ReleaseOptions) -> Release:
    async with GitHubClient() as client:
        return await client.repo(owner, repo).releases().create(options)


@click.command()
@click.argument("repo_spec")
@click.argument("tag")
@release_options
def create(repo_spec: str, tag: str, target, name, body, draft, prerelease):
    """Create a release for TAG."""
    owner, repo = parse_repo_or_exit(repo_spec)
    options = options_from_flags(tag, target, name, body, draft, prerelease)

    try:
        release = asyncio.run(_create(owner, repo, options))
    except TransportError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    console.print(
        f"[green]✓[/green] Created release [bold]{release.tag_name}[/bold] (id {release.id})"
    )
    console.print(f"  {release.html_url}")


async def _edit(owner: str, repo: str, release_id: int, options: ReleaseOptions) -> Release:
    async with GitHubClient() as client:
        return await client.repo(owner, repo).releases().edit(release_id, options)


@click.command()
@click.argument("repo_spec")
@click.argument("release_id", type=int)
@click.option("--tag", "-t", required=True, help="Tag name of the release")
@release_options
def edit(repo_spec: str, release_id: int, tag: str, target, name, body, draft, prerelease):
    """Edit a release. Only the given options are changed."""
    owner, repo = parse_repo_or_exit(repo_spec)
    options = options_from_flags(tag, target, name, body, draft, prerelease)

    try:
        release = asyncio.run(_edit(owner, repo, release_id, options))
    except TransportError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    console.print(f"[green]✓[/green] Updated release [bold]{release.tag_name}[/bold]")


async def _delete(owner: str, repo: str, release_id: int) -> None:
    async with GitHubClient() as client:
        await client.repo(owner, repo).releases().delete(release_id)


@click.command()
@click.argument("repo_spec")
@click.argument("release_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
def delete(repo_spec: str, release_id: int, yes: bool):
    """Delete a release."""
    owner, repo = parse_repo_or_exit(repo_spec)

    if not yes and not Confirm.ask(f"Delete release {release_id} of {owner}/{repo}?", default=False):
        console.print("Cancelled")
        raise SystemExit(0)

    try:
        asyncio.run(_delete(owner, repo, release_id))
    except TransportError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    console.print(f"[green]✓[/green] Deleted release {release_id}")
