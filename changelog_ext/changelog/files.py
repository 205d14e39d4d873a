import logging
from pathlib import Path

from zero_3rdparty.file_utils import ensure_parents_write_text

from changelog_ext.changelog.parser import parse_changelog_text
from changelog_ext.changelog.renderer import render_changelog
from changelog_ext.errors import UnreadableFileError, UnwritableFileError
from changelog_ext.models import ChangelogDocument

logger = logging.getLogger(__name__)


def read_changelog(path: Path) -> ChangelogDocument:
    try:
        text = path.read_text()
    except (OSError, UnicodeDecodeError) as e:
        raise UnreadableFileError(path, repr(e)) from e
    return parse_changelog_text(text)


def write_changelog(path: Path, document: ChangelogDocument) -> Path:
    content = render_changelog(document)
    try:
        ensure_parents_write_text(path, content)
    except OSError as e:
        raise UnwritableFileError(path, repr(e)) from e
    logger.info(f"changelog written @ {path}")
    return path
