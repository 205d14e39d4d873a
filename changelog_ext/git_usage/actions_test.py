from pathlib import Path
from types import SimpleNamespace

import pytest

from changelog_ext.errors import CommandFailedError
from changelog_ext.git_usage import actions
from changelog_ext.git_usage.actions import git_commit_file, npm_version
from changelog_ext.models import SemVer


@pytest.fixture()
def commands(monkeypatch) -> list[tuple[str, Path]]:
    called: list[tuple[str, Path]] = []

    def fake_run(command: str, cwd: Path, **kwargs):
        called.append((command, cwd))
        return SimpleNamespace(clean_complete=True, stdout="", stderr="")

    monkeypatch.setattr(actions, "run_and_wait", fake_run)
    return called


def test_git_commit_file(commands, tmp_path):
    path = tmp_path / "CHANGELOG.md"
    git_commit_file(tmp_path, path)
    assert commands == [
        (f'git add "{path}"', tmp_path),
        ('git commit -m "update changelog"', tmp_path),
    ]


def test_npm_version(commands, tmp_path):
    npm_version(tmp_path, SemVer(1, 2, 0))
    assert commands == [("npm version 1.2.0", tmp_path)]


def test_failed_command(monkeypatch, tmp_path):
    def fake_run(command: str, cwd: Path, **kwargs):
        return SimpleNamespace(clean_complete=False, stdout="", stderr="not a git repository")

    monkeypatch.setattr(actions, "run_and_wait", fake_run)
    with pytest.raises(CommandFailedError, match="not a git repository") as exc:
        git_commit_file(tmp_path, tmp_path / "CHANGELOG.md")
    assert exc.value.command.startswith("git add")
