import pytest

from changelog_ext.changelog import NotesSelector, get_notes, parse_changelog_text
from changelog_ext.conftest import SAMPLE_CHANGELOG
from changelog_ext.errors import DuplicateVersionError, MalformedHeadingError
from changelog_ext.models import UNRELEASED, SemVer


def test_parse_sample():
    document = parse_changelog_text(SAMPLE_CHANGELOG)
    assert document.preamble.startswith("# Changelog\n\nAll notable changes")
    assert [block.label for block in document.versions] == [
        "Unreleased",
        "2.0.0",
        "1.0.0",
    ]
    assert document.versions[0].version == UNRELEASED
    assert document.versions[1].date == "2024-03-01"
    assert document.versions[1].entries() == {
        "Changed": ["Rename the `run` command"],
        "Fixed": ["Crash on empty input\n  when the file has no newline"],
    }
    assert [ref.label for ref in document.links] == ["unreleased", "2.0.0", "1.0.0"]
    assert document.bullet == "-"


def test_star_bullets_are_detected():
    document = parse_changelog_text("## [Unreleased]\n\n### Added\n\n* one\n* two\n")
    assert document.bullet == "*"
    assert document.unreleased.entries() == {"Added": ["one", "two"]}


def test_missing_unreleased_is_not_an_error():
    document = parse_changelog_text("## [1.0.0] - 2024-01-31\n\n### Added\n\n- x\n")
    assert document.unreleased is None
    assert document.newest_release.version == SemVer(1, 0, 0)


def test_unknown_categories_and_out_of_order_versions_are_kept():
    text = "## 1.0.0\n\n### Internal\n\n- ci\n\n## 2.0.0\n\n### Added\n\n- y\n"
    document = parse_changelog_text(text)
    assert [block.label for block in document.versions] == ["1.0.0", "2.0.0"]
    assert document.versions[0].entries() == {"Internal": ["ci"]}
    assert not document.versions[0].bracketed


def test_placeholder_is_description():
    document = parse_changelog_text("## [Unreleased]\n\n- Nothing yet!\n")
    unreleased = document.unreleased
    assert unreleased.description == ["- Nothing yet!"]
    assert not unreleased.has_entries


def test_malformed_heading():
    text = "# Changelog\n\n## [Unreleased]\n\n## [next] - 2024-01-01\n"
    with pytest.raises(MalformedHeadingError) as exc:
        parse_changelog_text(text)
    assert exc.value.line_number == 5
    assert exc.value.line == "## [next] - 2024-01-01"


def test_duplicate_version():
    text = "## [1.0.0]\n\n- a\n\n## [v1.0.0]\n\n- b\n"
    with pytest.raises(DuplicateVersionError) as exc:
        parse_changelog_text(text)
    assert exc.value.line_number == 5


def test_link_lines_inside_a_block_are_not_footer():
    text = "## [1.0.0]\n\n[docs]: https://example.com\n\nMore text\n"
    document = parse_changelog_text(text)
    assert document.links == []
    assert document.versions[0].description == [
        "[docs]: https://example.com",
        "",
        "More text",
    ]


def test_heading_date_separator_is_kept():
    document = parse_changelog_text("## [1.0.0] 2024-01-31\n\n## 0.9.0 (2024-01-01)\n")
    assert [(block.date_separator, block.date) for block in document.versions] == [
        (" ", "2024-01-31"),
        (" ", "(2024-01-01)"),
    ]


def test_bullet_is_kept_per_section():
    text = "## [Unreleased]\n\n### Added\n\n* a\n\n### Fixed\n\n- b\n"
    document = parse_changelog_text(text)
    assert document.bullet == "*"
    sections = document.unreleased.sections
    assert (sections["Added"].bullet, sections["Fixed"].bullet) == ("*", "-")


def test_paragraph_after_list_is_not_an_entry():
    text = "## [Unreleased]\n\n### Added\n\n- x\n\nA closing note paragraph.\n"
    document = parse_changelog_text(text)
    section = document.unreleased.sections["Added"]
    assert get_notes(document, NotesSelector.UNRELEASED) == {"Added": ["x"]}
    assert section.trailer == ["A closing note paragraph."]


def test_indented_paragraph_after_blank_continues_the_entry():
    text = "## [Unreleased]\n\n### Added\n\n- x\n\n  more about x\n- y\n"
    document = parse_changelog_text(text)
    assert document.unreleased.entries() == {"Added": ["x\n\n  more about x", "y"]}
