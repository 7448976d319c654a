"""Console implementations of the interactive prompter."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from urirebase.infrastructure.logger import logger


class ConsolePrompter:
    """Asks on stdin; blocking reads run in a worker thread."""

    async def offer_locate(self, message: str) -> bool:
        answer = await asyncio.to_thread(input, f"{message}. Locate... [y/N] ")
        return answer.strip().lower() in ("y", "yes")

    async def pick_file(self, extension: str, default_uri: str | None) -> str | None:
        hint = f" (*.{extension})" if extension else ""
        where = f" [{default_uri}]" if default_uri else ""
        answer = (await asyncio.to_thread(input, f"Path to matching file{hint}{where}: ")).strip()
        if not answer:
            return None
        return Path(answer).expanduser().resolve().as_uri()

    async def report_error(self, message: str) -> None:
        logger.error("Locate failed", reason=message)
        print(message, file=sys.stderr)


class DecliningPrompter:
    """Never locates anything. Used for non-interactive runs."""

    async def offer_locate(self, message: str) -> bool:
        return False

    async def pick_file(self, extension: str, default_uri: str | None) -> str | None:
        return None

    async def report_error(self, message: str) -> None:
        logger.error("Locate failed", reason=message)
