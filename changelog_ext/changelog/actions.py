from __future__ import annotations

import logging
from typing import Union

from zero_3rdparty.enum_utils import StrEnum

from changelog_ext.changelog.links import LinkBuilder, infer_link_builder
from changelog_ext.errors import (
    AlreadyReleasedError,
    NothingToReleaseError,
    VersionNotFoundError,
)
from changelog_ext.models import (
    NOTHING_YET,
    UNRELEASED,
    ChangelogDocument,
    SemVer,
    VersionBlock,
    VersionId,
)
from changelog_ext.models.document import is_placeholder

logger = logging.getLogger(__name__)

KEEP_A_CHANGELOG_PREAMBLE = """\
# Changelog

All notable changes to this project will be documented in this file.

The format is based on [Keep a Changelog](https://keepachangelog.com/en/1.1.0/),
and this project adheres to [Semantic Versioning](https://semver.org/spec/v2.0.0.html)."""


class NotesSelector(StrEnum):
    UNRELEASED = "unreleased"
    LATEST = "latest"


SelectorT = Union[NotesSelector, SemVer]


def parse_selector(raw: str) -> SelectorT:
    """
    >>> parse_selector("Latest")
    'latest'
    >>> parse_selector("1.0.0")
    SemVer(major=1, minor=0, patch=0)
    """
    lowered = raw.strip().lower()
    for selector in NotesSelector:
        if selector.value == lowered:
            return selector
    return SemVer.parse(raw)


def _placeholder_line(document: ChangelogDocument) -> str:
    return f"{document.bullet} {NOTHING_YET}"


def init_document(link_builder: LinkBuilder | None = None) -> ChangelogDocument:
    document = ChangelogDocument(preamble=KEEP_A_CHANGELOG_PREAMBLE)
    unreleased = document.ensure_unreleased()
    unreleased.description.append(_placeholder_line(document))
    if link_builder:
        document.set_link(UNRELEASED, link_builder.unreleased_link(None))
    return document


def add_entry(document: ChangelogDocument, category: str, text: str) -> VersionBlock:
    unreleased = document.ensure_unreleased()
    unreleased.remove_placeholder()
    unreleased.section(category).entries.append(text)
    return unreleased


def select_version(
    document: ChangelogDocument, selector: SelectorT
) -> VersionBlock | None:
    match selector:
        case NotesSelector.UNRELEASED:
            return document.unreleased
        case NotesSelector.LATEST:
            unreleased = document.unreleased
            if unreleased and unreleased.has_entries:
                return unreleased
            return document.newest_release
        case SemVer():
            if block := document.find(selector):
                return block
            raise VersionNotFoundError(str(selector))
    raise ValueError(f"unknown selector: {selector!r}")


def get_notes(document: ChangelogDocument, selector: SelectorT) -> dict[str, list[str]]:
    if block := select_version(document, selector):
        return block.entries()
    return {}


def list_versions(
    document: ChangelogDocument, amount: int | None = None
) -> list[tuple[VersionId, str]]:
    """Unreleased first, then up to `amount` releases newest first.

    The unreleased block does not count against `amount`, `amount=None` lists all."""
    blocks = document.released
    if amount is not None:
        blocks = blocks[:amount]
    if unreleased := document.unreleased:
        blocks.insert(0, unreleased)
    return [(block.version, document.link(block.version)) for block in blocks]


def promote_release(
    document: ChangelogDocument,
    version: SemVer,
    date: str,
    link_builder: LinkBuilder | None = None,
    *,
    require_entries: bool = False,
    tag_prefix: str = "v",
) -> VersionBlock:
    if document.find(version) is not None:
        raise AlreadyReleasedError(str(version))
    unreleased = document.ensure_unreleased()
    if require_entries and not unreleased.has_entries:
        raise NothingToReleaseError(str(version))
    previous_block = document.newest_release
    previous: SemVer | None = previous_block.version if previous_block else None  # type: ignore
    if previous and version < previous:
        logger.warning(f"releasing {version} which is older than {previous}")
    release = VersionBlock(
        label=str(version),
        version=version,
        date=date,
        bracketed=unreleased.bracketed,
        description=[line for line in unreleased.description if not is_placeholder(line)],
        sections=unreleased.sections,
    )
    unreleased.sections = {}
    unreleased.description = [_placeholder_line(document)]
    document.versions.insert(document.versions.index(unreleased) + 1, release)
    update_release_links(
        document, version, previous, link_builder, tag_prefix=tag_prefix
    )
    return release


def update_release_links(
    document: ChangelogDocument,
    version: SemVer,
    previous: SemVer | None,
    link_builder: LinkBuilder | None = None,
    *,
    tag_prefix: str = "v",
) -> None:
    """`tag_prefix` applies when the existing links do not show a tag."""
    if builder := link_builder or infer_link_builder(document, tag_prefix):
        document.set_link(version, builder.release_link(version, previous))
        document.set_link(UNRELEASED, builder.unreleased_link(version))
        return
    unreleased_ref = document.link_reference(UNRELEASED)
    if unreleased_ref is None:
        logger.info(f"no repository url known, skipping links for {version}")
        return
    old_url = unreleased_ref.url
    document.set_link(version, old_url.replace("HEAD", f"{tag_prefix}{version}"))
    if previous:
        unreleased_ref.url = old_url.replace(str(previous), str(version))
