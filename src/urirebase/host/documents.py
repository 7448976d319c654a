"""Registry of currently open document URIs."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class OpenDocuments:
    def __init__(self, uris: Iterable[str] = ()) -> None:
        self._uris: list[str] = []
        for uri in uris:
            self.open(uri)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._uris))

    def __len__(self) -> int:
        return len(self._uris)

    def open(self, uri: str) -> None:
        if uri not in self._uris:
            self._uris.append(uri)

    def close(self, uri: str) -> None:
        if uri in self._uris:
            self._uris.remove(uri)
