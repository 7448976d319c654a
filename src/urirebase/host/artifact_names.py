"""Filename -> artifact URI index for names that occur once in a report."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from urirebase.uris.segmenter import uri_filename


class DistinctArtifactNames:
    """Bare filenames known to the analysis report, each with its artifact URI."""

    def __init__(self, names: dict[str, str] | None = None) -> None:
        self._names: dict[str, str] = dict(names or {})

    @classmethod
    def from_uris(cls, uris: Iterable[str]) -> DistinctArtifactNames:
        """Register only the filenames that appear in exactly one distinct URI."""
        unique = list(dict.fromkeys(uris))
        counts = Counter(uri_filename(uri) for uri in unique)
        return cls({uri_filename(uri): uri for uri in unique if counts[uri_filename(uri)] == 1})

    def __len__(self) -> int:
        return len(self._names)

    def has(self, filename: str) -> bool:
        return filename in self._names

    def get(self, filename: str) -> str:
        return self._names[filename]
