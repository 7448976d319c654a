"""Existence probe for file: URIs on the local machine."""

from __future__ import annotations

import asyncio
import re
from pathlib import Path
from urllib.parse import unquote

from urirebase.exceptions import InvalidUriError
from urirebase.infrastructure.logger import logger
from urirebase.uris.segmenter import parse_uri

_DRIVE_PATH = re.compile(r"^/[A-Za-z]:")


def uri_to_path(uri: str) -> Path | None:
    """Convert a file: URI to a local path. None for any other scheme."""
    parsed = parse_uri(uri)
    if parsed.scheme.lower() != "file":
        return None
    path = unquote(parsed.path)
    if _DRIVE_PATH.match(path):
        path = path[1:]
    if parsed.authority and parsed.authority != "localhost":
        path = f"//{parsed.authority}{path}"
    return Path(path)


class LocalFilesystemProbe:
    """Checks file: URIs against the filesystem; other schemes never exist."""

    async def exists(self, uri: str) -> bool:
        try:
            path = uri_to_path(uri)
        except InvalidUriError:
            logger.debug("Probe skipped unparseable URI", uri=uri)
            return False
        if path is None:
            return False
        found = await asyncio.to_thread(path.exists)
        if not found:
            logger.debug("Probe miss", uri=uri)
        return found
