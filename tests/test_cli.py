"""Tests for the fixflow command-line interface."""

from __future__ import annotations

import io
import json

import pytest

from fixflow.cli import create_parser, main
from fixflow.commands import edit, open_store
from fixflow.commands.walk import WalkSession, interact
from fixflow.editor import to_editable_text
from fixflow.engine import CopySolution, ViewKind
from fixflow.graph import TroubleshootingGraph, default_graph
from fixflow.notify import RecordingNotifier


@pytest.fixture
def storage_dir(tmp_path):
    return tmp_path / "flows"


@pytest.fixture
def run_cli(storage_dir):
    def _run(*argv: str) -> int:
        return main(["--storage-dir", str(storage_dir), *argv])

    return _run


@pytest.fixture
def flow_file(tmp_path):
    path = tmp_path / "flow.json"
    path.write_text(
        json.dumps(
            {
                "start": {
                    "id": "start",
                    "question": "Is the light on?",
                    "answers": [
                        {"text": "No", "nextId": "bulb"},
                        {"text": "Solution: Nothing to fix.", "nextId": None},
                    ],
                },
                "bulb": {"id": "bulb", "question": "Replace the bulb.", "answers": []},
            }
        )
    )
    return path


def _scripted(*lines: str):
    it = iter(lines)

    def read(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


class TestParser:
    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage: fixflow" in capsys.readouterr().out

    def test_version(self, capsys):
        assert main(["version"]) == 0
        assert capsys.readouterr().out.startswith("fixflow ")

    def test_import_requires_file(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["import"])


class TestShow:
    def test_show_start(self, run_cli, capsys):
        assert run_cli("show") == 0
        out = capsys.readouterr().out
        assert "What is the problem with the process?" in out
        assert "1. ▶ It's not starting" in out

    def test_show_terminal_step(self, run_cli, capsys):
        assert run_cli("show", "high-cpu") == 0
        assert "(copy solution)" in capsys.readouterr().out

    def test_show_missing_step(self, run_cli, capsys):
        assert run_cli("show", "nowhere") == 0
        assert "End of Flow" in capsys.readouterr().out

    def test_show_json(self, run_cli, capsys):
        assert run_cli("show", "log-errors", "--json") == 0
        data = json.loads(capsys.readouterr().out)
        assert data["options"][0]["action"]["type"] == "copy"


class TestExportImport:
    def test_export_stdout(self, run_cli, capsys):
        assert run_cli("export") == 0
        assert capsys.readouterr().out == to_editable_text(default_graph())

    def test_export_file(self, run_cli, tmp_path):
        out = tmp_path / "out.json"
        assert run_cli("export", "-o", str(out)) == 0
        assert out.read_text(encoding="utf-8") == to_editable_text(default_graph())

    def test_import_replaces_flow(self, run_cli, flow_file, capsys):
        assert run_cli("import", str(flow_file)) == 0
        assert "Flow Saved!" in capsys.readouterr().err

        run_cli("show")
        assert "Is the light on?" in capsys.readouterr().out

    def test_import_stdin(self, run_cli, flow_file, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO(flow_file.read_text()))
        assert run_cli("import", "-") == 0

    def test_import_invalid_keeps_flow(self, run_cli, tmp_path, storage_dir, capsys):
        bad = tmp_path / "bad.json"
        bad.write_text("{nope")

        assert run_cli("import", str(bad)) == 1
        assert "Invalid JSON" in capsys.readouterr().err
        assert not (storage_dir / "troubleshootingData.json").exists()

    def test_import_missing_file(self, run_cli, tmp_path):
        assert run_cli("import", str(tmp_path / "missing.json")) == 1

    def test_reset(self, run_cli, flow_file, storage_dir):
        run_cli("import", str(flow_file))
        assert run_cli("reset") == 0
        saved = (storage_dir / "troubleshootingData.json").read_text(encoding="utf-8")
        assert json.loads(saved) == json.loads(to_editable_text(default_graph()))

    def test_corrupt_storage_warns_and_uses_default(self, run_cli, storage_dir, capsys):
        storage_dir.mkdir()
        (storage_dir / "troubleshootingData.json").write_text("{corrupt")

        assert run_cli("show") == 0
        captured = capsys.readouterr()
        assert "Could not load custom flow" in captured.err
        assert "What is the problem with the process?" in captured.out


class TestCheck:
    def test_clean_default_flow(self, run_cli, capsys):
        assert run_cli("check") == 0
        assert "✓" in capsys.readouterr().out

    def test_reports_dangling_and_missing_start(self, run_cli, tmp_path, capsys):
        path = tmp_path / "f.json"
        path.write_text('{"a": {"answers": [{"text": "x", "nextId": "zzz"}]}}')
        run_cli("import", str(path))
        capsys.readouterr()

        assert run_cli("check", "--json") == 0
        report = json.loads(capsys.readouterr().out)
        assert report["missing_start"] is True
        assert report["dangling"] == [{"step": "a", "answer": 0, "target": "zzz"}]

    def test_unreadable_storage(self, run_cli, storage_dir):
        storage_dir.mkdir()
        (storage_dir / "troubleshootingData.json").write_text("[")
        assert run_cli("check") == 1


class TestConfigCommand:
    def test_path_without_file(self, capsys):
        assert main(["config", "path"]) == 0
        assert "using defaults" in capsys.readouterr().out

    def test_init_then_show(self, tmp_path, capsys):
        assert main(["config", "init"]) == 0
        assert (tmp_path / ".fixflow.toml").exists()
        assert main(["config", "init"]) == 1
        capsys.readouterr()

        assert main(["config", "show"]) == 0
        assert 'key = "troubleshootingData"' in capsys.readouterr().out

    def test_config_sets_storage_dir(self, tmp_path, flow_file):
        store_dir = tmp_path / "configured"
        (tmp_path / ".fixflow.toml").write_text(f'[storage]\ndir = "{store_dir.as_posix()}"\n')
        assert main(["import", str(flow_file)]) == 0
        assert (store_dir / "troubleshootingData.json").exists()


class TestWalk:
    @pytest.fixture
    def session(self, storage_dir):
        args = create_parser().parse_args(["--storage-dir", str(storage_dir), "walk"])
        store, _ = open_store(args, notify=RecordingNotifier())
        return WalkSession(store)

    def test_choose_pushes_frames(self, session):
        assert session.choose(1) is None
        assert session.frames == ["start", "not-starting"]
        assert session.view().title == "Have you checked the logs for startup errors?"

    def test_terminal_answer_returns_solution(self, session):
        session.choose(1)
        session.choose(1)
        assert session.choose(1) == CopySolution(
            "Check file permissions or kill the process on that port."
        )
        assert session.frames == ["start", "not-starting", "log-errors"]

    def test_back_and_restart(self, session):
        session.choose(2)
        session.choose(1)
        assert session.pop() is True
        assert session.frames == ["start", "running-slow"]
        session.restart()
        assert session.frames == ["start"]
        assert session.pop() is False

    def test_invalid_choice(self, session):
        with pytest.raises(IndexError):
            session.choose(7)

    def test_interactive_transcript(self, session):
        out = io.StringIO()
        code = interact(session, read=_scripted("3", "1", "1", "b", "x", "q"), out=out)

        text = out.getvalue()
        assert code == 0
        assert "Was there a crash report generated?" in text
        assert "Please submit the crash report to the development team." in text
        assert "  Done!" in text
        assert "Unknown choice: 'x'" in text

    def test_missing_start_is_reported(self, session):
        session.store.save(TroubleshootingGraph())
        assert session.view().kind is ViewKind.INVALID_FLOW

    def test_eof_quits(self, session):
        assert interact(session, read=_scripted(), out=io.StringIO()) == 0


class TestEdit:
    @pytest.fixture
    def args(self, storage_dir):
        return create_parser().parse_args(["--storage-dir", str(storage_dir), "edit"])

    def test_unchanged_edit(self, args, capsys):
        assert edit.run(args, edit=lambda text, cmd: text) == 0
        assert "No changes." in capsys.readouterr().out

    def test_valid_edit_saved(self, args, storage_dir):
        def fake_editor(text, cmd):
            return text.replace("What is the problem with the process?", "What broke?")

        assert edit.run(args, edit=fake_editor) == 0
        saved = (storage_dir / "troubleshootingData.json").read_text(encoding="utf-8")
        assert "What broke?" in saved

    def test_invalid_edit_reopened_with_invalid_text(self, args):
        seen: list[str] = []

        def fake_editor(text, cmd):
            seen.append(text)
            return "{broken" if len(seen) == 1 else "{}"

        assert edit.run(args, edit=fake_editor, confirm=lambda prompt: True) == 0
        assert seen[1] == "{broken"

    def test_invalid_edit_discarded(self, args, storage_dir, capsys):
        code = edit.run(args, edit=lambda text, cmd: "{broken", confirm=lambda prompt: False)
        assert code == 1
        assert "Edit discarded." in capsys.readouterr().err
        assert not (storage_dir / "troubleshootingData.json").exists()

    def test_editor_command_resolution(self, monkeypatch):
        assert edit.editor_command({"editor": {"command": "code --wait"}}) == ["code", "--wait"]
        monkeypatch.setenv("EDITOR", "nano")
        assert edit.editor_command({"editor": {"command": ""}}) == ["nano"]
        monkeypatch.setenv("VISUAL", "emacs")
        assert edit.editor_command({}) == ["emacs"]

    def test_launch_editor_failure(self, args, capsys):
        assert edit.run(args, edit=_raise_oserror) == 1
        assert "could not run editor" in capsys.readouterr().err


def _raise_oserror(text, cmd):
    raise OSError("not found")
