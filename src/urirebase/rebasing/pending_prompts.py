"""Dedup guard for interactive "Locate..." prompts."""

from __future__ import annotations

import contextlib
from collections.abc import Iterator


class PendingPromptSet:
    """Tracks artifact URIs with an outstanding prompt.

    Only suppresses a second pop-up for the same URI. It does not make other
    callers wait for the first prompt's answer.
    """

    def __init__(self) -> None:
        self._pending: set[str] = set()

    def __contains__(self, artifact_uri: object) -> bool:
        return artifact_uri in self._pending

    def __len__(self) -> int:
        return len(self._pending)

    def claim(self, artifact_uri: str) -> bool:
        if artifact_uri in self._pending:
            return False
        self._pending.add(artifact_uri)
        return True

    def release(self, artifact_uri: str) -> None:
        self._pending.discard(artifact_uri)

    @contextlib.contextmanager
    def outstanding(self, artifact_uri: str) -> Iterator[bool]:
        claimed = self.claim(artifact_uri)
        try:
            yield claimed
        finally:
            if claimed:
                self.release(artifact_uri)
