"""Download service: fetches a file and hands it to a delivery target."""

import logging
import re
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Callable
from urllib.parse import quote

import httpx

from moada import remote
from moada.api.download.dto.download import FetchedFile

logger = logging.getLogger("moada.api.download")

DOWNLOAD_PATH = "/downloadFile"
DEFAULT_FILENAME = "downloaded-file"
SPOOL_MAX_SIZE = 8 * 1024 * 1024  # 8MB in memory before spilling to disk

FILENAME_PATTERN = re.compile(r'filename="((?:[^"\\]|\\.)+)"', re.IGNORECASE)

# Escapes produced by Go's strconv.Quote
GO_ESCAPE = re.compile(r"\\(x[0-9a-fA-F]{2}|u[0-9a-fA-F]{4}|U[0-9a-fA-F]{8}|.)")
GO_SIMPLE_ESCAPES = {"a": "\a", "b": "\b", "f": "\f", "n": "\n", "r": "\r", "t": "\t", "v": "\v"}

# Receives the open payload handle and the suggested save name
Delivery = Callable[[BinaryIO, str], None]


def extract_filename(content_disposition: str | None) -> str:
    """Return the quoted ``filename`` of a Content-Disposition header.

    Other directives around the clause are ignored. Falls back to
    ``DEFAULT_FILENAME`` when the header or the clause is missing.
    """
    if not content_disposition:
        return DEFAULT_FILENAME
    match = FILENAME_PATTERN.search(content_disposition)
    if not match:
        return DEFAULT_FILENAME
    return unquote_go(match.group(1))


def _go_escape(match: re.Match) -> str:
    code = match.group(1)
    if len(code) > 1:
        return chr(int(code[1:], 16))
    return GO_SIMPLE_ESCAPES.get(code, code)


def unquote_go(value: str) -> str:
    """Undo the escapes the service adds when it quotes a name with %q."""
    return GO_ESCAPE.sub(_go_escape, value)


def content_disposition(filename: str) -> str:
    """Build an attachment header, adding an RFC 5987 form for non-latin names."""
    escaped = filename.replace("\\", "\\\\").replace('"', '\\"')
    try:
        escaped.encode("latin-1")
    except UnicodeEncodeError:
        return f"attachment; filename*=utf-8''{quote(filename)}"
    return f'attachment; filename="{escaped}"'


async def fetch_file(client: httpx.AsyncClient, public_id: str) -> FetchedFile:
    """GET the binary payload for an already validated public id."""
    response = await remote.send(client, "GET", DOWNLOAD_PATH, params={"idPublic": public_id})
    filename = extract_filename(response.headers.get("Content-Disposition"))
    content = response.content
    logger.info("Fetched %s (%d bytes)", filename, len(content))
    return FetchedFile(filename=filename, content=content)


@contextmanager
def payload_handle(content: bytes):
    """Expose ``content`` through a temporary file that is always closed on exit."""
    handle = tempfile.SpooledTemporaryFile(max_size=SPOOL_MAX_SIZE)
    try:
        handle.write(content)
        handle.seek(0)
        yield handle
    finally:
        handle.close()


def safe_filename(filename: str) -> str:
    """Strip any directory part the service might send along."""
    name = Path(filename.replace("\\", "/")).name
    if not name or name in (".", ".."):
        return DEFAULT_FILENAME
    return name


class SaveToDirectory:
    """Save deliveries into a directory without overwriting existing files."""

    def __init__(self, directory: Path):
        self.directory = Path(directory)
        self.saved: list[Path] = []

    def _target(self, filename: str) -> Path:
        name = safe_filename(filename)
        target = self.directory / name
        stem, suffix = Path(name).stem, Path(name).suffix
        counter = 1
        while target.exists():
            target = self.directory / f"{stem} ({counter}){suffix}"
            counter += 1
        return target

    def __call__(self, handle: BinaryIO, filename: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        target = self._target(filename)
        f = open(target, "xb")
        try:
            with f:
                shutil.copyfileobj(handle, f)
        except OSError:
            # Leave no partial file behind
            target.unlink(missing_ok=True)
            raise
        self.saved.append(target)
        logger.info("Saved to: %s", target)
