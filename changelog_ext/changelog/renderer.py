from __future__ import annotations

from changelog_ext.models import ChangelogDocument, Section, VersionBlock

BLOCK_SEPARATOR = "\n\n"


def render_heading(block: VersionBlock) -> str:
    """
    >>> from changelog_ext.models import SemVer
    >>> render_heading(VersionBlock(label="1.0.0", version=SemVer(1, 0, 0), date="2024-01-31"))
    '## [1.0.0] - 2024-01-31'
    >>> render_heading(VersionBlock(label="1.0.0", version=SemVer(1, 0, 0), date="2024-01-31", bracketed=False, date_separator=" "))
    '## 1.0.0 2024-01-31'
    """
    label = f"[{block.label}]" if block.bracketed else block.label
    heading = f"## {label}"
    if block.date:
        heading = f"{heading}{block.date_separator}{block.date}"
    return heading


def render_section(section: Section, bullet: str) -> str:
    heading = f"### {section.name}"
    bullet = section.bullet or bullet
    body = section.preface + [f"{bullet} {entry}" for entry in section.entries]
    if not body:
        return heading
    separator = BLOCK_SEPARATOR if section.spaced else "\n"
    text = heading + separator + "\n".join(body)
    if section.trailer:
        text = text + BLOCK_SEPARATOR + "\n".join(section.trailer)
    return text


def render_block(block: VersionBlock, bullet: str) -> str:
    chunks = [render_heading(block)]
    if block.description:
        chunks.append("\n".join(block.description))
    chunks.extend(render_section(section, bullet) for section in block.ordered_sections)
    return BLOCK_SEPARATOR.join(chunks)


def render_changelog(document: ChangelogDocument) -> str:
    parts: list[str] = []
    if document.preamble:
        parts.append(document.preamble)
    parts.extend(render_block(block, document.bullet) for block in document.versions)
    if document.links:
        parts.append("\n".join(str(ref) for ref in document.links))
    if not parts:
        return ""
    return BLOCK_SEPARATOR.join(parts) + "\n"


def format_notes(notes: dict[str, list[str]], bullet: str = "-") -> str:
    """Entries only, grouped by category, without the version heading.

    >>> format_notes({"Added": ["a"], "Fixed": ["b", "c"]})
    '### Added\\n\\n- a\\n\\n### Fixed\\n\\n- b\\n- c\\n'
    """
    if not notes:
        return ""
    sections = [
        render_section(Section(name=name, entries=entries), bullet)
        for name, entries in notes.items()
    ]
    return BLOCK_SEPARATOR.join(sections) + "\n"
