"""Parse keep-a-changelog markdown into a `ChangelogDocument`.

Lines the parser does not recognize are kept as free text on the closest
version block or section, rendering the document again reproduces them."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from changelog_ext.errors import (
    DuplicateVersionError,
    InvalidVersionStringError,
    MalformedHeadingError,
)
from changelog_ext.models import (
    ChangelogDocument,
    LinkReference,
    Section,
    VersionBlock,
    parse_version_id,
)

logger = logging.getLogger(__name__)

_version_heading_regex = re.compile(
    r"^##\s+(?P<open>\[)?(?P<label>[^\]]+?)(?(open)\])(?:(?P<separator>\s+(?:-\s+)?)(?P<date>.*\S))?\s*$"
)
_section_heading_regex = re.compile(r"^###\s+(?P<name>.*\S)\s*$")
_bullet_regex = re.compile(r"^(?P<bullet>[-*])\s(?P<text>.*)$")
_link_reference_regex = re.compile(r"^\[(?P<label>[^\]]+)\]:\s*(?P<url>\S+)\s*$")


def is_version_heading(line: str) -> bool:
    return line.startswith("## ") or line.rstrip() == "##"


def parse_version_heading(line: str, line_number: int) -> VersionBlock:
    """
    >>> parse_version_heading("## [1.0.0] - 2024-01-31", 3)
    VersionBlock(label='1.0.0', version=SemVer(major=1, minor=0, patch=0), date='2024-01-31', bracketed=True, date_separator=' - ', description=[], sections={})
    >>> parse_version_heading("## 1.0.0 (2024-01-31)", 3).date_separator
    ' '
    >>> parse_version_heading("## Unreleased", 3).is_unreleased
    True
    """
    match = _version_heading_regex.match(line)
    if not match:
        raise MalformedHeadingError(line_number, line)
    label = match["label"].strip()
    try:
        version = parse_version_id(label)
    except InvalidVersionStringError as e:
        raise MalformedHeadingError(line_number, line) from e
    return VersionBlock(
        label=label,
        version=version,
        date=match["date"] or "",
        bracketed=bool(match["open"]),
        date_separator=match["separator"] or " - ",
    )


def _strip_trailing_blanks(lines: list[str]) -> list[str]:
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


def _footer_start(lines: list[str], first_heading: int) -> int:
    """Index of the first line of the trailing link reference block."""
    start = len(lines)
    for index in range(len(lines) - 1, first_heading, -1):
        line = lines[index]
        if not line.strip():
            continue
        if not _link_reference_regex.match(line):
            break
        start = index
    return start


@dataclass
class _BlockBuilder:
    """Collects the lines of one version block."""

    block: VersionBlock
    section: Section | None = None
    awaiting_first_line: bool = False
    blank_after_heading: bool = False
    pending_blanks: int = 0
    bullets: list[str] = field(default_factory=list)

    def start_section(self, name: str) -> None:
        self.section = self.block.section(name)
        self.awaiting_first_line = True
        self.blank_after_heading = False
        self.pending_blanks = 0

    def add_blank(self) -> None:
        section = self.section
        if section is None:
            if self.block.description:
                self.block.description.append("")
            return
        if self.awaiting_first_line:
            self.blank_after_heading = True
        elif section.trailer:
            section.trailer.append("")
        elif section.entries:
            self.pending_blanks += 1
        elif section.preface:
            section.preface.append("")

    def add_line(self, line: str) -> None:
        section = self.section
        if section is None:
            self.block.description.append(line)
            return
        if self.awaiting_first_line:
            section.spaced = self.blank_after_heading
            self.awaiting_first_line = False
        blanks, self.pending_blanks = self.pending_blanks, 0
        if section.trailer:
            section.trailer.append(line)
        elif bullet_match := _bullet_regex.match(line):
            self.bullets.append(bullet_match["bullet"])
            section.bullet = section.bullet or bullet_match["bullet"]
            section.entries.append(bullet_match["text"])
        elif not section.entries:
            section.preface.append(line)
        elif blanks and not line[:1].isspace():
            # a paragraph after the list is not part of the last entry
            section.trailer.append(line)
        else:
            section.entries[-1] = section.entries[-1] + "\n" * (blanks + 1) + line

    def finish(self) -> VersionBlock:
        _strip_trailing_blanks(self.block.description)
        for section in self.block.sections.values():
            _strip_trailing_blanks(section.preface)
            _strip_trailing_blanks(section.trailer)
        return self.block


def parse_changelog_text(text: str) -> ChangelogDocument:
    lines = text.splitlines()
    first_heading = next(
        (index for index, line in enumerate(lines) if is_version_heading(line)),
        len(lines),
    )
    footer_start = _footer_start(lines, first_heading)
    document = ChangelogDocument(
        preamble="\n".join(_strip_trailing_blanks(lines[:first_heading])),
    )
    for line in lines[footer_start:]:
        if match := _link_reference_regex.match(line):
            document.links.append(LinkReference(label=match["label"], url=match["url"]))
    builders: list[_BlockBuilder] = []
    for index in range(first_heading, footer_start):
        line = lines[index]
        line_number = index + 1
        if is_version_heading(line):
            block = parse_version_heading(line, line_number)
            if document.find(block.version) is not None:
                raise DuplicateVersionError(block.label, line_number)
            document.versions.append(block)
            builders.append(_BlockBuilder(block))
            continue
        builder = builders[-1]
        if section_match := _section_heading_regex.match(line):
            builder.start_section(section_match["name"])
        elif not line.strip():
            builder.add_blank()
        else:
            builder.add_line(line)
    for builder in builders:
        builder.finish()
    if bullets := [bullet for builder in builders for bullet in builder.bullets]:
        document.bullet = bullets[0]
    logger.debug(
        f"parsed {len(document.versions)} versions and {len(document.links)} link references"
    )
    return document
