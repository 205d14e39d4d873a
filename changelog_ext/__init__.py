"""isort:skip_file."""

from changelog_ext.changelog import (
    add_entry,
    format_notes,
    get_notes,
    init_document,
    list_versions,
    parse_changelog_text,
    promote_release,
    read_changelog,
    render_changelog,
    write_changelog,
)
from changelog_ext.errors import ChangelogExtError
from changelog_ext.models import (
    UNRELEASED,
    Category,
    ChangelogDocument,
    SemVer,
    VersionBlock,
)
from changelog_ext.versioning import resolve_version

VERSION = "0.1.0"
__all__ = [
    "add_entry",
    "format_notes",
    "get_notes",
    "init_document",
    "list_versions",
    "parse_changelog_text",
    "promote_release",
    "read_changelog",
    "render_changelog",
    "write_changelog",
    "ChangelogExtError",
    "UNRELEASED",
    "Category",
    "ChangelogDocument",
    "SemVer",
    "VersionBlock",
    "resolve_version",
]
