"""Bidirectional memo of confirmed artifact/local URI pairs."""

from __future__ import annotations


class ValidationCache:
    """Both directions are only ever written together through put()."""

    def __init__(self) -> None:
        self._artifact_to_local: dict[str, str] = {}
        self._local_to_artifact: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._artifact_to_local)

    def local_for(self, artifact_uri: str) -> str | None:
        return self._artifact_to_local.get(artifact_uri)

    def artifact_for(self, local_uri: str) -> str | None:
        return self._local_to_artifact.get(local_uri)

    def put(self, artifact_uri: str, local_uri: str) -> None:
        self._artifact_to_local[artifact_uri] = local_uri
        self._local_to_artifact[local_uri] = artifact_uri
