"""Business logic workflows for changelog commands.

Every external input (titles, current version, date, repository url) is
resolved before the document is mutated and the file is written once."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from model_lib.model_base import Entity
from rich.console import Console
from zero_3rdparty.datetime_utils import utc_now

from changelog_ext.changelog import (
    LinkBuilder,
    add_entry,
    infer_link_builder,
    init_document,
    promote_release,
    read_changelog,
    write_changelog,
)
from changelog_ext.errors import (
    ChangelogExistsError,
    ManifestError,
    NoEntryError,
    RemoteURLNotFound,
)
from changelog_ext.git_usage import git_commit_file, npm_version
from changelog_ext.github import (
    format_entry,
    looks_like_url,
    parse_github_url,
    read_local_commit,
    read_remote_url,
)
from changelog_ext.models import ChangelogDocument, SemVer, VersionBlock
from changelog_ext.settings import ChangelogSettings
from changelog_ext.versioning import (
    needs_current_version,
    read_current_version,
    resolve_version,
)

logger = logging.getLogger(__name__)
console = Console(stderr=True)
EDITOR_COMMENT = "#"


def print_status(message: str) -> None:
    console.print(f"[bold green]CHANGELOG[/bold green] {message}", highlight=False)


def today() -> str:
    return utc_now().date().isoformat()


def load_document(settings: ChangelogSettings) -> ChangelogDocument:
    return read_changelog(settings.changelog_path)


def remote_link_builder(settings: ChangelogSettings) -> LinkBuilder | None:
    try:
        repo_url = read_remote_url(settings.pwd)
    except RemoteURLNotFound as e:
        logger.info(f"no git remote for links: {e}")
        return None
    return LinkBuilder(repo_url=repo_url, tag_prefix=settings.tag_prefix)


def document_link_builder(
    settings: ChangelogSettings, document: ChangelogDocument
) -> LinkBuilder | None:
    """The links already in the changelog win over the git remote."""
    inferred = infer_link_builder(document, settings.tag_prefix)
    return inferred or remote_link_builder(settings)


def init_workflow(settings: ChangelogSettings) -> Path:
    path = settings.changelog_path
    if path.exists():
        raise ChangelogExistsError(path)
    document = init_document(remote_link_builder(settings))
    return write_changelog(path, document)


def editor_preface(category: str) -> str:
    return "\n".join(
        [
            f"{EDITOR_COMMENT} Write the {category} entries, one per line.",
            f"{EDITOR_COMMENT} Lines starting with '{EDITOR_COMMENT}' are ignored, an empty message aborts.",
            "",
        ]
    )


def parse_editor_text(text: str | None) -> list[str]:
    """
    >>> parse_editor_text("# comment\\nFirst\\n\\n - Second\\n")
    ['First', 'Second']
    >>> parse_editor_text(None)
    []
    """
    if not text:
        return []
    entries = []
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith(EDITOR_COMMENT):
            continue
        entries.append(stripped.removeprefix("- ").removeprefix("* ").strip())
    return [entry for entry in entries if entry]


def resolve_link_entry(settings: ChangelogSettings, link: str) -> str:
    if looks_like_url(link):
        resource = parse_github_url(link)
        title = settings.github_client().resolve_title(resource)
    else:
        resource, title = read_local_commit(settings.pwd, link)
    return format_entry(resource, title)


def resolve_entries(
    settings: ChangelogSettings,
    category: str,
    *,
    link: str | None = None,
    message: str | None = None,
    edit: bool = False,
) -> list[str]:
    if message:
        entries = [message]
    elif link:
        entries = [resolve_link_entry(settings, link)]
    else:
        entries = []
        edit = True
    if edit:
        initial = "\n".join([editor_preface(category), *entries])
        entries = parse_editor_text(typer.edit(initial, extension=".md"))
    if not entries:
        raise NoEntryError(category)
    return entries


def add_workflow(
    settings: ChangelogSettings,
    category: str,
    entries: list[str],
    *,
    commit: bool = False,
) -> ChangelogDocument:
    path = settings.changelog_path
    document = read_changelog(path)
    for entry in entries:
        add_entry(document, category, entry)
    write_changelog(path, document)
    if commit:
        git_commit_file(settings.pwd, path)
    return document


class ReleaseInput(Entity):
    settings: ChangelogSettings
    mode: str = "infer"
    date: str = ""
    with_npm: bool = False
    require_entries: bool = False

    @property
    def release_date(self) -> str:
        return self.date or today()


def resolve_release_version(settings: ChangelogSettings, mode: str) -> SemVer:
    if not needs_current_version(mode):
        return resolve_version(mode)
    try:
        current = read_current_version(settings.pwd)
    except ManifestError as e:
        return resolve_version(mode, None, missing_reason=str(e))
    return resolve_version(mode, current)


def release_workflow(release_input: ReleaseInput) -> VersionBlock:
    settings = release_input.settings
    path = settings.changelog_path
    document = read_changelog(path)
    version = resolve_release_version(settings, release_input.mode)
    release = promote_release(
        document,
        version,
        release_input.release_date,
        document_link_builder(settings, document),
        require_entries=release_input.require_entries,
        tag_prefix=settings.tag_prefix,
    )
    write_changelog(path, document)
    if release_input.with_npm:
        git_commit_file(settings.pwd, path)
        npm_version(settings.pwd, version)
    return release
