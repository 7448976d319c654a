"""Workspace file enumeration backed by os.walk."""

from __future__ import annotations

import asyncio
import os
from pathlib import Path

from urirebase.infrastructure.config import WORKSPACE_EXCLUDE


class GlobWorkspaceFinder:
    """Finds files by bare name under a fixed set of workspace roots."""

    def __init__(self, roots: list[Path], exclude: list[str] | None = None) -> None:
        self._roots = [root.resolve() for root in roots]
        self._exclude = set(WORKSPACE_EXCLUDE if exclude is None else exclude)

    @property
    def roots(self) -> list[str]:
        return [root.as_uri() for root in self._roots]

    async def find_by_filename(self, filename: str) -> set[str]:
        return await asyncio.to_thread(self._walk, filename)

    def _walk(self, filename: str) -> set[str]:
        matches: set[str] = set()
        for root in self._roots:
            for dirpath, dirnames, filenames in os.walk(root):
                dirnames[:] = [d for d in dirnames if d not in self._exclude]
                if filename in filenames:
                    matches.add((Path(dirpath) / filename).as_uri())
        return matches
