"""Artifact <-> local URI translation with learned bases and a fallback chain."""

from __future__ import annotations

from urirebase.infrastructure.logger import logger
from urirebase.rebasing.bases import BaseTranslationTable
from urirebase.rebasing.pending_prompts import PendingPromptSet
from urirebase.rebasing.types import (
    ArtifactNameIndex,
    FilesystemProbe,
    InteractivePrompter,
    OpenDocumentRegistry,
    RebaserOptions,
    WorkspaceFileFinder,
)
from urirebase.rebasing.validation_cache import ValidationCache
from urirebase.uris.segmenter import (
    common_indices,
    join_segments,
    parse_uri,
    split_uri,
    uri_extension,
    uri_filename,
)


class Rebaser:
    """Resolves artifact URIs to local URIs and back for one workspace session.

    Strategies are tried strictly in order, each awaited in full before the
    next. A successful match is cached in both directions and generalized into
    a base so siblings under the same directory resolve through the table.
    """

    def __init__(
        self,
        artifact_names: ArtifactNameIndex,
        probe: FilesystemProbe,
        finder: WorkspaceFileFinder,
        documents: OpenDocumentRegistry,
        prompter: InteractivePrompter,
        options: RebaserOptions | None = None,
    ) -> None:
        self._artifact_names = artifact_names
        self._probe = probe
        self._finder = finder
        self._documents = documents
        self._prompter = prompter
        self._options = options or RebaserOptions()
        self._bases = BaseTranslationTable()
        self._validated = ValidationCache()
        self._pending = PendingPromptSet()
        self.uri_bases: list[str] = []

    @property
    def bases(self) -> BaseTranslationTable:
        return self._bases

    @property
    def validated(self) -> ValidationCache:
        return self._validated

    def _first_workspace_root(self) -> str | None:
        roots = self._finder.roots
        return roots[0] if roots else None

    def _accept(self, artifact_uri: str, local_uri: str, step: str) -> str:
        self._validated.put(artifact_uri, local_uri)
        self._bases.learn(split_uri(artifact_uri), split_uri(local_uri))
        logger.debug("Resolved artifact", artifact_uri=artifact_uri, local_uri=local_uri, step=step)
        return local_uri

    async def _distinct_workspace_file(self, filename: str) -> str | None:
        matches = await self._finder.find_by_filename(filename)
        return next(iter(matches)) if len(matches) == 1 else None

    async def translate_local_to_artifact(self, local_uri: str) -> str:
        """Return the artifact URI for local_uri, or local_uri itself when unknown."""
        parse_uri(local_uri)
        cached = self._validated.artifact_for(local_uri)
        if cached is not None:
            return cached

        filename = uri_filename(local_uri)
        if not self._artifact_names.has(filename):
            return local_uri
        # Without a workspace the filename is assumed distinct.
        if self._finder.roots and await self._distinct_workspace_file(filename) is None:
            return local_uri

        artifact_uri = self._artifact_names.get(filename)
        self._validated.put(artifact_uri, local_uri)
        self._bases.learn(split_uri(artifact_uri), split_uri(local_uri))
        logger.debug("Resolved local", local_uri=local_uri, artifact_uri=artifact_uri)
        return artifact_uri

    async def translate_artifact_to_local(self, artifact_uri: str) -> str:
        """Return a validated local URI, or "" when none could be established."""
        if parse_uri(artifact_uri).scheme == self._options.self_scheme:
            return artifact_uri

        local_uri = await self._resolve(artifact_uri)
        if local_uri:
            return local_uri

        with self._pending.outstanding(artifact_uri) as claimed:
            if not claimed:
                logger.debug("Locate prompt already pending", artifact_uri=artifact_uri)
                return ""
            if not await self._locate(artifact_uri):
                return ""
            return await self._resolve(artifact_uri)

    async def _locate(self, artifact_uri: str) -> bool:
        """Ask the user to point at the file. True when a base was learned."""
        filename = uri_filename(artifact_uri)
        logger.info("Offering locate prompt", artifact_uri=artifact_uri)
        if not await self._prompter.offer_locate(f"Unable to find '{filename}'"):
            return False

        picked = await self._prompter.pick_file(uri_extension(artifact_uri), self._first_workspace_root())
        if not picked:
            return False

        old_parts = split_uri(artifact_uri)
        new_parts = split_uri(picked)
        old_name, new_name = uri_filename(artifact_uri), uri_filename(picked)
        if old_name != new_name:
            logger.warning("Picked file name does not match", artifact_uri=artifact_uri, picked=picked)
            await self._prompter.report_error(f'File names must match: "{old_name}" and "{new_name}"')
            return False

        self._bases.learn(old_parts, new_parts)
        return True

    async def _resolve(self, artifact_uri: str) -> str:
        cached = self._validated.local_for(artifact_uri)
        if cached is not None:
            logger.debug("Validation cache hit", artifact_uri=artifact_uri)
            return cached

        if await self._probe.exists(artifact_uri):
            return self._accept(artifact_uri, artifact_uri, "exists")

        # TODO: try every workspace root, not only the first.
        workspace_root = self._first_workspace_root()
        if workspace_root:
            marker = self._options.local_root_marker
            local_uri = f"{workspace_root}/{artifact_uri.replace(marker, '', 1)}"
            if await self._probe.exists(local_uri):
                return self._accept(artifact_uri, local_uri, "workspace-root")

        for local_uri in self._bases.rebase(artifact_uri):
            if await self._probe.exists(local_uri):
                return self._accept(artifact_uri, local_uri, "known-base")

        local_uri = await self._try_uri_bases(artifact_uri)
        if local_uri:
            return self._accept(artifact_uri, local_uri, "uri-bases")

        filename = uri_filename(artifact_uri)
        if self._artifact_names.has(filename):
            local_uri = await self._distinct_workspace_file(filename)
            if local_uri:
                return self._accept(artifact_uri, local_uri, "distinct-filename")

        for local_uri in self._documents:
            if uri_filename(local_uri) == filename:
                return self._accept(artifact_uri, local_uri, "open-document")

        return ""

    async def _try_uri_bases(self, artifact_uri: str) -> str | None:
        artifact_parts = split_uri(artifact_uri)
        for local_base in list(self.uri_bases):
            local_parts = split_uri(local_base)
            for artifact_index, local_index in common_indices(artifact_parts, local_parts):
                rebased = join_segments([*local_parts[:local_index], *artifact_parts[artifact_index:]])
                if await self._probe.exists(rebased):
                    return rebased
        return None
