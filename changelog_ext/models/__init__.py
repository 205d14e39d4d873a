# Document model domain

from .document import (
    CANONICAL_CATEGORIES,
    NOTHING_YET,
    Category,
    ChangelogDocument,
    LinkReference,
    Section,
    VersionBlock,
    category_order,
)
from .version_id import (
    UNRELEASED,
    SemVer,
    VersionId,
    parse_version_id,
    version_label,
    version_sort_key,
)

__all__ = [
    "CANONICAL_CATEGORIES",
    "NOTHING_YET",
    "Category",
    "ChangelogDocument",
    "LinkReference",
    "Section",
    "VersionBlock",
    "category_order",
    "UNRELEASED",
    "SemVer",
    "VersionId",
    "parse_version_id",
    "version_label",
    "version_sort_key",
]
