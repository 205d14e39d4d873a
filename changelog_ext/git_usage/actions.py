import logging
from pathlib import Path

from ask_shell import run_and_wait

from changelog_ext.errors import CommandFailedError
from changelog_ext.models import SemVer

logger = logging.getLogger(__name__)
CHANGELOG_COMMIT_MESSAGE = "update changelog"


def run_checked(command: str, cwd: Path) -> str:
    result = run_and_wait(command, cwd=cwd, allow_non_zero_exit=True)
    if not result.clean_complete:
        raise CommandFailedError(command, result.stderr or result.stdout)
    return result.stdout


def git_commit_file(
    repo_dir: Path, path: Path, message: str = CHANGELOG_COMMIT_MESSAGE
) -> None:
    run_checked(f'git add "{path}"', cwd=repo_dir)
    run_checked(f'git commit -m "{message}"', cwd=repo_dir)
    logger.info(f"committed {path.name}: {message}")


def npm_version(pkg_dir: Path, version: SemVer) -> None:
    """Updates package.json and creates the git tag."""
    run_checked(f"npm version {version}", cwd=pkg_dir)
