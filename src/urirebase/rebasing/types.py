"""Rebasing value types and collaborator protocols."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

from urirebase.infrastructure.config import LOCAL_ROOT_MARKER, SELF_SCHEME


class BaseTranslation(BaseModel):
    """Everything under artifact_prefix maps to the same remainder under local_prefix."""

    model_config = ConfigDict(frozen=True)

    artifact_prefix: str
    local_prefix: str


class RebaserOptions(BaseModel):
    self_scheme: str = SELF_SCHEME  # Owned by the host, always exists
    local_root_marker: str = LOCAL_ROOT_MARKER


@runtime_checkable
class ArtifactNameIndex(Protocol):
    def has(self, filename: str) -> bool: ...
    def get(self, filename: str) -> str: ...


@runtime_checkable
class FilesystemProbe(Protocol):
    async def exists(self, uri: str) -> bool: ...


@runtime_checkable
class WorkspaceFileFinder(Protocol):
    @property
    def roots(self) -> list[str]: ...

    async def find_by_filename(self, filename: str) -> set[str]: ...


@runtime_checkable
class OpenDocumentRegistry(Protocol):
    def __iter__(self) -> Iterator[str]: ...


@runtime_checkable
class InteractivePrompter(Protocol):
    async def offer_locate(self, message: str) -> bool: ...
    async def pick_file(self, extension: str, default_uri: str | None) -> str | None: ...
    async def report_error(self, message: str) -> None: ...
