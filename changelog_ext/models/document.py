from __future__ import annotations

from contextlib import suppress
from dataclasses import dataclass, field

from zero_3rdparty.enum_utils import StrEnum

from changelog_ext.errors import InvalidVersionStringError
from changelog_ext.models.version_id import (
    UNRELEASED,
    SemVer,
    VersionId,
    parse_version_id,
    version_label,
    version_sort_key,
)

NOTHING_YET = "Nothing yet!"


class Category(StrEnum):
    ADDED = "Added"
    CHANGED = "Changed"
    DEPRECATED = "Deprecated"
    REMOVED = "Removed"
    FIXED = "Fixed"
    SECURITY = "Security"


CANONICAL_CATEGORIES: tuple[str, ...] = tuple(category.value for category in Category)


def category_order(names: list[str]) -> list[str]:
    """
    >>> category_order(["Fixed", "Internal", "Added", "Docs"])
    ['Added', 'Fixed', 'Internal', 'Docs']
    """
    canonical = [name for name in CANONICAL_CATEGORIES if name in names]
    custom = [name for name in names if name not in CANONICAL_CATEGORIES]
    return canonical + custom


@dataclass
class Section:
    name: str
    entries: list[str] = field(default_factory=list)
    preface: list[str] = field(default_factory=list)
    spaced: bool = True  # blank line between the heading and the list
    bullet: str = ""  # empty uses the document bullet
    trailer: list[str] = field(default_factory=list)  # text after the list


@dataclass
class VersionBlock:
    label: str
    version: VersionId
    date: str = ""
    bracketed: bool = True
    date_separator: str = " - "
    description: list[str] = field(default_factory=list)
    sections: dict[str, Section] = field(default_factory=dict)

    @classmethod
    def unreleased_block(cls) -> VersionBlock:
        return cls(label=version_label(UNRELEASED), version=UNRELEASED)

    @property
    def is_unreleased(self) -> bool:
        return self.version == UNRELEASED

    @property
    def ordered_sections(self) -> list[Section]:
        return [self.sections[name] for name in category_order(list(self.sections))]

    @property
    def has_entries(self) -> bool:
        return any(section.entries for section in self.sections.values())

    def section(self, name: str) -> Section:
        if name not in self.sections:
            self.sections[name] = Section(name=name)
        return self.sections[name]

    def entries(self) -> dict[str, list[str]]:
        return {
            section.name: list(section.entries)
            for section in self.ordered_sections
            if section.entries
        }

    def remove_placeholder(self) -> None:
        self.description = [
            line for line in self.description if not is_placeholder(line)
        ]


def is_placeholder(line: str) -> bool:
    return line.strip().lstrip("-*").strip() == NOTHING_YET


@dataclass
class LinkReference:
    label: str
    url: str

    @property
    def version(self) -> VersionId | None:
        with suppress(InvalidVersionStringError):
            return parse_version_id(self.label)
        return None

    def __str__(self) -> str:
        return f"[{self.label}]: {self.url}"


@dataclass
class ChangelogDocument:
    preamble: str = ""
    versions: list[VersionBlock] = field(default_factory=list)
    links: list[LinkReference] = field(default_factory=list)
    bullet: str = "-"

    @property
    def unreleased(self) -> VersionBlock | None:
        return next((block for block in self.versions if block.is_unreleased), None)

    def ensure_unreleased(self) -> VersionBlock:
        if block := self.unreleased:
            return block
        block = VersionBlock.unreleased_block()
        self.versions.insert(0, block)
        return block

    def find(self, version: VersionId) -> VersionBlock | None:
        return next((block for block in self.versions if block.version == version), None)

    @property
    def released(self) -> list[VersionBlock]:
        """Newest first, regardless of the order in the file."""
        blocks = [block for block in self.versions if not block.is_unreleased]
        return sorted(
            blocks, key=lambda block: version_sort_key(block.version), reverse=True
        )

    @property
    def newest_release(self) -> VersionBlock | None:
        return next(iter(self.released), None)

    def link_reference(self, version: VersionId) -> LinkReference | None:
        return next((ref for ref in self.links if ref.version == version), None)

    def link(self, version: VersionId) -> str:
        if ref := self.link_reference(version):
            return ref.url
        return ""

    def set_link(self, version: VersionId, url: str) -> LinkReference:
        """Updates an existing reference or inserts a new one.

        New references are placed after the unreleased reference, or first when
        there is none, which keeps the footer newest first."""
        if ref := self.link_reference(version):
            ref.url = url
            return ref
        label = UNRELEASED if version == UNRELEASED else str(version)
        ref = LinkReference(label=label, url=url)
        index = 0
        if version != UNRELEASED and (unreleased_ref := self.link_reference(UNRELEASED)):
            index = self.links.index(unreleased_ref) + 1
        self.links.insert(index, ref)
        return ref

    def semver_versions(self) -> list[SemVer]:
        return [block.version for block in self.released]  # type: ignore
