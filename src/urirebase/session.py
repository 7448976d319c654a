"""Session file loading and Rebaser wiring for command line use."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from urirebase.exceptions import SessionConfigError
from urirebase.host.artifact_names import DistinctArtifactNames
from urirebase.host.documents import OpenDocuments
from urirebase.host.filesystem import LocalFilesystemProbe
from urirebase.host.prompter import ConsolePrompter, DecliningPrompter
from urirebase.host.workspace import GlobWorkspaceFinder
from urirebase.infrastructure.logger import logger
from urirebase.rebasing.rebaser import Rebaser
from urirebase.rebasing.types import RebaserOptions
from urirebase.uris.segmenter import parse_uri


class SessionConfig(BaseModel):
    workspace_roots: list[Path] = []
    uri_bases: list[str] = []
    artifact_uris: list[str] = []
    open_documents: list[str] = []
    self_scheme: str | None = None

    @field_validator("uri_bases", "artifact_uris", "open_documents")
    @classmethod
    def _absolute_uris(cls, uris: list[str]) -> list[str]:
        for uri in uris:
            parse_uri(uri)
        return uris


def load_session(path: Path) -> SessionConfig:
    """Read a YAML session file. Relative workspace roots resolve against its directory."""
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as err:
        raise SessionConfigError(f"Cannot read session file {path}", {"error": str(err)}) from err
    if not isinstance(raw, dict):
        raise SessionConfigError(f"Session file {path} must contain a mapping")

    try:
        config = SessionConfig(**raw)
    except ValidationError as err:
        logger.warning("Invalid session file", path=str(path), errors=err.error_count())
        raise SessionConfigError(f"Invalid session file {path}", {"errors": err.errors()}) from err

    config.workspace_roots = [root if root.is_absolute() else path.parent / root for root in config.workspace_roots]
    return config


def build_rebaser(config: SessionConfig, interactive: bool = True) -> Rebaser:
    options = RebaserOptions() if config.self_scheme is None else RebaserOptions(self_scheme=config.self_scheme)
    rebaser = Rebaser(
        artifact_names=DistinctArtifactNames.from_uris(config.artifact_uris),
        probe=LocalFilesystemProbe(),
        finder=GlobWorkspaceFinder(config.workspace_roots),
        documents=OpenDocuments(config.open_documents),
        prompter=ConsolePrompter() if interactive else DecliningPrompter(),
        options=options,
    )
    rebaser.uri_bases.extend(config.uri_bases)
    return rebaser
