# Git and package manager side effects

from .actions import CHANGELOG_COMMIT_MESSAGE, git_commit_file, npm_version, run_checked

__all__ = [
    "CHANGELOG_COMMIT_MESSAGE",
    "git_commit_file",
    "npm_version",
    "run_checked",
]
