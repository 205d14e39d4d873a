import pytest
from git import Actor, Repo

from changelog_ext.errors import RemoteURLNotFound, TitleLookupError
from changelog_ext.github import ResourceKind, format_entry, read_local_commit, read_remote_url

_actor = Actor("Test", "test@example.com")


@pytest.fixture()
def git_repo(tmp_path) -> Repo:
    repo = Repo.init(tmp_path)
    repo.create_remote("upstream", "https://github.com/other/r.git")
    repo.create_remote("origin", "git@github.com:o/r.git")
    path = tmp_path / "README.md"
    path.write_text("hello\n")
    repo.index.add([str(path)])
    repo.index.commit("Fix the thing\n\nlonger body", author=_actor, committer=_actor)
    return repo


def test_read_remote_url_prefers_origin(git_repo, tmp_path):
    assert read_remote_url(tmp_path) == "https://github.com/o/r"


def test_read_local_commit(git_repo, tmp_path):
    resource, headline = read_local_commit(tmp_path, "HEAD")
    sha = git_repo.head.commit.hexsha
    assert headline == "Fix the thing"
    assert resource.kind == ResourceKind.COMMIT
    assert resource.ref == sha
    assert format_entry(resource, headline) == (
        f"Fix the thing ([{sha[:7]}](https://github.com/o/r/commit/{sha}))"
    )


def test_unknown_commit(git_repo, tmp_path):
    with pytest.raises(TitleLookupError) as exc:
        read_local_commit(tmp_path, "does-not-exist")
    assert exc.value.url == "does-not-exist"


def test_repo_without_remotes(tmp_path):
    Repo.init(tmp_path)
    with pytest.raises(RemoteURLNotFound, match="no remotes"):
        read_remote_url(tmp_path)
