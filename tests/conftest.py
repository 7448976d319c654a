"""Shared fakes for rebasing tests."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from urirebase.host.artifact_names import DistinctArtifactNames
from urirebase.host.documents import OpenDocuments
from urirebase.rebasing.rebaser import Rebaser


class RecordingProbe:
    """Reports existence from a fixed set and records every probed URI."""

    def __init__(self, existing: set[str] | None = None) -> None:
        self.existing: set[str] = set(existing or ())
        self.calls: list[str] = []

    async def exists(self, uri: str) -> bool:
        self.calls.append(uri)
        return uri in self.existing


class FakeFinder:
    def __init__(self, roots: list[str] | None = None, files: list[str] | None = None) -> None:
        self._roots = list(roots or [])
        self.files: list[str] = list(files or [])
        self.searches: list[str] = []

    @property
    def roots(self) -> list[str]:
        return self._roots

    async def find_by_filename(self, filename: str) -> set[str]:
        self.searches.append(filename)
        return {uri for uri in self.files if uri.rsplit("/", 1)[-1] == filename}


@dataclass
class ScriptedPrompter:
    """Answers prompts from preset values and records what was asked."""

    accept: bool = False
    picked: str | None = None
    offers: list[str] = field(default_factory=list)
    picks: list[tuple[str, str | None]] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    async def offer_locate(self, message: str) -> bool:
        self.offers.append(message)
        return self.accept

    async def pick_file(self, extension: str, default_uri: str | None) -> str | None:
        self.picks.append((extension, default_uri))
        return self.picked

    async def report_error(self, message: str) -> None:
        self.errors.append(message)


@dataclass
class Host:
    probe: RecordingProbe
    finder: FakeFinder
    documents: OpenDocuments
    prompter: ScriptedPrompter
    names: DistinctArtifactNames
    rebaser: Rebaser


@pytest.fixture
def make_host():
    """Build a Rebaser wired to fakes."""

    def _make(
        existing: set[str] | None = None,
        roots: list[str] | None = None,
        files: list[str] | None = None,
        documents: list[str] | None = None,
        names: dict[str, str] | None = None,
        prompter: ScriptedPrompter | None = None,
    ) -> Host:
        probe = RecordingProbe(existing)
        finder = FakeFinder(roots, files)
        docs = OpenDocuments(documents or [])
        prompt = prompter or ScriptedPrompter()
        index = DistinctArtifactNames(names)
        rebaser = Rebaser(artifact_names=index, probe=probe, finder=finder, documents=docs, prompter=prompt)
        return Host(probe, finder, docs, prompt, index, rebaser)

    return _make
