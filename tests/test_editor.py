"""Tests for launching the editor."""

from types import SimpleNamespace

from dirban.editor import editor_command, open_in_editor


def test_configured_editor_wins(monkeypatch):
    monkeypatch.setenv("VISUAL", "nano")
    assert editor_command("code --wait") == ["code", "--wait"]


def test_visual_before_editor(monkeypatch):
    monkeypatch.setenv("VISUAL", "nano")
    monkeypatch.setenv("EDITOR", "ed")
    assert editor_command() == ["nano"]


def test_editor_env(monkeypatch):
    monkeypatch.delenv("VISUAL", raising=False)
    monkeypatch.setenv("EDITOR", "emacs -nw")
    assert editor_command() == ["emacs", "-nw"]


def test_fallback(monkeypatch):
    monkeypatch.delenv("VISUAL", raising=False)
    monkeypatch.delenv("EDITOR", raising=False)
    assert editor_command() == ["vi"]


def test_open_in_editor_runs_command(monkeypatch, tmp_path):
    calls = []

    def fake_run(args):
        calls.append(args)
        return SimpleNamespace(returncode=3)

    monkeypatch.setattr("dirban.editor.subprocess.run", fake_run)
    path = tmp_path / "my card.md"
    assert open_in_editor(path, "hx") == 3
    assert calls == [["hx", str(path)]]
