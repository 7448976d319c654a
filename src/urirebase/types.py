"""Barrel re-export of all domain types."""

from urirebase.exceptions import InvalidUriError, RebaseError, SessionConfigError
from urirebase.rebasing.types import (
    ArtifactNameIndex,
    BaseTranslation,
    FilesystemProbe,
    InteractivePrompter,
    OpenDocumentRegistry,
    RebaserOptions,
    WorkspaceFileFinder,
)
from urirebase.session import SessionConfig
from urirebase.uris.segmenter import ParsedUri

__all__ = [
    "ArtifactNameIndex",
    "BaseTranslation",
    "FilesystemProbe",
    "InteractivePrompter",
    "InvalidUriError",
    "OpenDocumentRegistry",
    "ParsedUri",
    "RebaseError",
    "RebaserOptions",
    "SessionConfig",
    "SessionConfigError",
    "WorkspaceFileFinder",
]
