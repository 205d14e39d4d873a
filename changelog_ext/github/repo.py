import logging
from pathlib import Path

from git import InvalidGitRepositoryError, NoSuchPathError, Repo
from git.exc import BadName

from changelog_ext.errors import RemoteURLNotFound, TitleLookupError
from changelog_ext.github.url import (
    GithubResource,
    ResourceKind,
    normalize_repo_url,
    owner_repo,
)

logger = logging.getLogger(__name__)


def _open_repo(path: Path) -> Repo:
    try:
        return Repo(path, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError) as e:
        raise RemoteURLNotFound(reason=repr(e), path=path) from e


def read_remote_url(path: Path) -> str:
    repo = _open_repo(path)
    remotes = sorted(repo.remotes, key=lambda remote: remote.name != "origin")
    if not remotes:
        raise RemoteURLNotFound("no remotes", path)
    for remote in remotes:
        if urls := list(remote.urls):
            return normalize_repo_url(urls[0])
    raise RemoteURLNotFound("no urls", path)


def read_local_commit(path: Path, commitish: str) -> tuple[GithubResource, str]:
    """Resolve a local commit-ish to its GitHub resource and headline."""
    repo = _open_repo(path)
    try:
        commit = repo.commit(commitish)
    except (BadName, ValueError) as e:
        raise TitleLookupError(commitish, f"not a GitHub url or a local commit: {e!r}") from e
    owner, repo_name = owner_repo(read_remote_url(path))
    headline = str(commit.summary).strip()
    if not headline:
        raise TitleLookupError(commitish, "no commit message found")
    resource = GithubResource(
        owner=owner,
        repo=repo_name,
        kind=ResourceKind.COMMIT,
        ref=commit.hexsha,
    )
    logger.info(f"resolved local commit {commitish} to {resource.html_url}")
    return resource, headline
