"""Asset download with progress reporting."""

import logging
from pathlib import Path

from rich.progress import (
    Progress,
    BarColumn,
    DownloadColumn,
    TransferSpeedColumn,
    TimeRemainingColumn,
)

from hubrel.core.transport import Transport, TransportError


logger = logging.getLogger(__name__)


class DownloadError(Exception):
    """Error during download."""

    pass


async def download_file(
    client: Transport,
    url: str,
    dest: Path | None = None,
    filename: str | None = None,
    show_progress: bool = True,
) -> Path:
    """Download a file from URL.

    Args:
        client: Client whose connection and credentials are used
        url: URL to download from
        dest: Destination directory (defaults to the current directory)
        filename: Filename to save as (defaults to URL filename)
        show_progress: Whether to show progress bar

    Returns:
        Path to downloaded file
    """
    if dest is None:
        dest = Path.cwd()
    dest.mkdir(parents=True, exist_ok=True)

    if filename is None:
        filename = url.split("/")[-1]

    file_path = dest / filename
    logger.debug("Downloading %s to %s", url, file_path)

    try:
        async with client.stream(url) as response:
            total = int(response.headers.get("content-length", 0))

            if show_progress and total > 0:
                with Progress(
                    "[progress.description]{task.description}",
                    BarColumn(),
                    DownloadColumn(),
                    TransferSpeedColumn(),
                    TimeRemainingColumn(),
                ) as progress:
                    task = progress.add_task(f"Downloading {filename}", total=total)

                    with open(file_path, "wb") as f:
                        async for chunk in response.aiter_bytes(chunk_size=8192):
                            f.write(chunk)
                            progress.update(task, advance=len(chunk))
            else:
                with open(file_path, "wb") as f:
                    async for chunk in response.aiter_bytes(chunk_size=8192):
                        f.write(chunk)
    except TransportError as e:
        file_path.unlink(missing_ok=True)
        raise DownloadError(f"Failed to download {url}: {e}") from e

    return file_path
