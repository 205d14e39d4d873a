from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal, Union

from changelog_ext.errors import InvalidVersionStringError

UNRELEASED = "unreleased"
UnreleasedT = Literal["unreleased"]

_semver_regex = re.compile(r"^v?(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)$")


@dataclass(frozen=True, order=True)
class SemVer:
    major: int
    minor: int
    patch: int

    @classmethod
    def parse(cls, raw: str) -> SemVer:
        """
        >>> SemVer.parse("1.2.3")
        SemVer(major=1, minor=2, patch=3)
        >>> str(SemVer.parse("v0.10.0"))
        '0.10.0'
        """
        if match := _semver_regex.match(raw.strip()):
            return cls(int(match["major"]), int(match["minor"]), int(match["patch"]))
        raise InvalidVersionStringError(raw)

    def bump_major(self) -> SemVer:
        return SemVer(self.major + 1, 0, 0)

    def bump_minor(self) -> SemVer:
        return SemVer(self.major, self.minor + 1, 0)

    def bump_patch(self) -> SemVer:
        return SemVer(self.major, self.minor, self.patch + 1)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


VersionId = Union[SemVer, UnreleasedT]


def is_unreleased_label(raw: str) -> bool:
    return raw.strip().lower() == UNRELEASED


def parse_version_id(raw: str) -> VersionId:
    """
    >>> parse_version_id("Unreleased")
    'unreleased'
    >>> parse_version_id("2.0.1")
    SemVer(major=2, minor=0, patch=1)
    """
    if is_unreleased_label(raw):
        return UNRELEASED
    return SemVer.parse(raw)


def version_sort_key(version: VersionId) -> tuple[int, int, int, int]:
    """Ascending key, reverse it for newest first with unreleased on top."""
    if version == UNRELEASED:
        return (1, 0, 0, 0)
    assert isinstance(version, SemVer)
    return (0, version.major, version.minor, version.patch)


def version_label(version: VersionId) -> str:
    if version == UNRELEASED:
        return "Unreleased"
    return str(version)
