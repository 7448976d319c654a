"""Tests for session loading and the command line."""

import pytest
import yaml

from urirebase.__main__ import main
from urirebase.exceptions import SessionConfigError
from urirebase.host.prompter import DecliningPrompter
from urirebase.session import SessionConfig, build_rebaser, load_session


@pytest.fixture
def project(tmp_path):
    (tmp_path / "proj" / "src" / "app").mkdir(parents=True)
    (tmp_path / "proj" / "src" / "app" / "foo.c").write_text("")
    (tmp_path / "proj" / "src" / "app" / "bar.c").write_text("")
    return tmp_path


def write_session(path, data):
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


class TestLoadSession:
    def test_relative_roots_resolve_against_file(self, project):
        session = write_session(project / "session.yaml", {"workspace_roots": ["proj"]})
        config = load_session(session)
        assert config.workspace_roots == [project / "proj"]
        assert config.uri_bases == []

    def test_empty_file_gives_defaults(self, tmp_path):
        session = tmp_path / "session.yaml"
        session.write_text("")
        assert load_session(session) == SessionConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(SessionConfigError):
            load_session(tmp_path / "missing.yaml")

    def test_not_a_mapping(self, tmp_path):
        session = tmp_path / "session.yaml"
        session.write_text("- a\n- b\n")
        with pytest.raises(SessionConfigError):
            load_session(session)

    @pytest.mark.parametrize("field", ["uri_bases", "artifact_uris", "open_documents"])
    def test_relative_uri_entries_rejected(self, tmp_path, field):
        session = write_session(tmp_path / "session.yaml", {field: ["file:///w/ok.c", "src/foo.c"]})
        with pytest.raises(SessionConfigError) as exc_info:
            load_session(session)
        assert exc_info.value.details["errors"][0]["loc"][0] == field

    def test_validation_error_has_details(self, tmp_path):
        session = write_session(tmp_path / "session.yaml", {"uri_bases": "not-a-list"})
        with pytest.raises(SessionConfigError) as exc_info:
            load_session(session)
        assert exc_info.value.details["errors"]


class TestBuildRebaser:
    def test_wires_uri_bases_and_prompter(self, project):
        config = SessionConfig(workspace_roots=[project / "proj"], uri_bases=["file:///w/src"])
        rebaser = build_rebaser(config, interactive=False)
        assert rebaser.uri_bases == ["file:///w/src"]
        assert isinstance(rebaser._prompter, DecliningPrompter)

    @pytest.mark.asyncio
    async def test_resolves_against_real_workspace(self, project):
        config = SessionConfig(
            workspace_roots=[project / "proj"],
            artifact_uris=["x://log/src/app/foo.c", "x://log/src/app/bar.c"],
        )
        rebaser = build_rebaser(config, interactive=False)
        local = await rebaser.translate_artifact_to_local("x://log/src/app/foo.c")
        assert local == (project / "proj" / "src" / "app" / "foo.c").resolve().as_uri()


class TestMain:
    def test_resolves_and_exits_zero(self, project, capsys):
        session = write_session(
            project / "session.yaml",
            {"workspace_roots": ["proj"], "artifact_uris": ["x://log/src/app/foo.c"]},
        )
        code = main(["--session", str(session), "--no-prompt", "x://log/src/app/foo.c", "x://log/src/app/bar.c"])
        out = capsys.readouterr().out.splitlines()
        assert code == 0
        assert out[0].endswith("proj/src/app/foo.c")
        # bar.c is not in the name index but resolves through the base learned from foo.c.
        assert out[1].endswith("proj/src/app/bar.c")

    def test_unresolved_exits_one(self, project, capsys):
        session = write_session(project / "session.yaml", {"workspace_roots": ["proj"]})
        code = main(["--session", str(session), "--no-prompt", "x://log/src/app/missing.c"])
        assert code == 1
        assert capsys.readouterr().out == "x://log/src/app/missing.c\t\n"

    def test_reverse(self, project, capsys):
        session = write_session(
            project / "session.yaml",
            {"workspace_roots": ["proj"], "artifact_uris": ["x://log/src/app/foo.c"]},
        )
        local = (project / "proj" / "src" / "app" / "foo.c").resolve().as_uri()
        code = main(["--session", str(session), "--reverse", local])
        assert code == 0
        assert capsys.readouterr().out == f"{local}\tx://log/src/app/foo.c\n"

    def test_invalid_uri_exits_two(self, project, capsys):
        session = write_session(project / "session.yaml", {"workspace_roots": ["proj"]})
        assert main(["--session", str(session), "--no-prompt", "relative/foo.c"]) == 2
        assert "Invalid URI" in capsys.readouterr().err

    def test_bad_session_uri_fails_before_any_output(self, project, capsys):
        session = write_session(project / "session.yaml", {"workspace_roots": ["proj"], "open_documents": ["src/foo.c"]})
        code = main(["--session", str(session), "--no-prompt", "x://log/src/app/foo.c"])
        captured = capsys.readouterr()
        assert code == 2
        assert captured.out == ""
        assert "session.yaml" in captured.err

    def test_reverse_unknown_exits_one(self, project, capsys):
        session = write_session(project / "session.yaml", {"workspace_roots": ["proj"]})
        local = (project / "proj" / "src" / "app" / "foo.c").resolve().as_uri()
        code = main(["--session", str(session), "--reverse", local])
        assert code == 1
        assert capsys.readouterr().out == f"{local}\t{local}\n"
