# Changelog document domain

from .actions import (
    KEEP_A_CHANGELOG_PREAMBLE,
    NotesSelector,
    SelectorT,
    add_entry,
    get_notes,
    init_document,
    list_versions,
    parse_selector,
    promote_release,
    select_version,
    update_release_links,
)
from .files import read_changelog, write_changelog
from .links import LinkBuilder, infer_link_builder
from .parser import parse_changelog_text
from .renderer import format_notes, render_changelog

__all__ = [
    "KEEP_A_CHANGELOG_PREAMBLE",
    "NotesSelector",
    "SelectorT",
    "add_entry",
    "get_notes",
    "init_document",
    "list_versions",
    "parse_selector",
    "promote_release",
    "select_version",
    "update_release_links",
    "read_changelog",
    "write_changelog",
    "LinkBuilder",
    "infer_link_builder",
    "parse_changelog_text",
    "format_notes",
    "render_changelog",
]
