"""Learned prefix correspondences between artifact and local URIs."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from urirebase.infrastructure.logger import logger
from urirebase.rebasing.types import BaseTranslation
from urirebase.uris.segmenter import common_suffix_length, join_segments


class BaseTranslationTable:
    """Artifact prefix -> local prefix, last write wins, never pruned."""

    def __init__(self) -> None:
        self._entries: dict[str, BaseTranslation] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, artifact_prefix: object) -> bool:
        return artifact_prefix in self._entries

    def get(self, artifact_prefix: str) -> BaseTranslation | None:
        return self._entries.get(artifact_prefix)

    def learn(self, artifact: Sequence[str], local: Sequence[str]) -> BaseTranslation | None:
        """Store the prefixes left over once the common trailing segments are removed.

        Returns None when both prefixes are identical, since such an entry
        would only rewrite a URI into itself.
        """
        common = common_suffix_length(artifact, local)
        entry = BaseTranslation(
            artifact_prefix=join_segments(artifact[: len(artifact) - common]),
            local_prefix=join_segments(local[: len(local) - common]),
        )
        if entry.artifact_prefix == entry.local_prefix:
            return None
        self._entries[entry.artifact_prefix] = entry
        logger.info("Learned base", artifact_prefix=entry.artifact_prefix, local_prefix=entry.local_prefix)
        return entry

    def candidates(self) -> list[BaseTranslation]:
        return list(self._entries.values())

    def rebase(self, artifact_uri: str) -> Iterator[str]:
        """Yield artifact_uri rewritten through every entry whose prefix it starts with."""
        for entry in self.candidates():
            if artifact_uri.startswith(entry.artifact_prefix):
                yield entry.local_prefix + artifact_uri[len(entry.artifact_prefix) :]
