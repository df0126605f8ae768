"""CLI entry point for hubrel."""

import logging

import click
from rich.logging import RichHandler

from hubrel import __version__
from hubrel.commands import assets, releases


@click.group()
@click.version_option(version=__version__, prog_name="hubrel")
@click.option("--verbose", "-v", is_flag=True, help="Log API requests")
def main(verbose: bool):
    """Hubrel - manage GitHub releases and their assets.

    Set GITHUB_TOKEN to authenticate.

    Examples:

        hubrel list junegunn/fzf

        hubrel create owner/repo v1.0 --name "1.0" --draft

        hubrel assets upload owner/repo 12345 dist/tool.tar.gz
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


# Register commands
main.add_command(releases.list_releases)
main.add_command(releases.show)
main.add_command(releases.create)
main.add_command(releases.edit)
main.add_command(releases.delete)
main.add_command(assets.assets)


if __name__ == "__main__":
    main()
