from __future__ import annotations

from typing import Callable

from zero_3rdparty.enum_utils import StrEnum

from changelog_ext.errors import MissingManifestVersionError
from changelog_ext.models import SemVer


class BumpMode(StrEnum):
    INFER = "infer"
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


def _identity(version: SemVer) -> SemVer:
    return version


_bumps: dict[BumpMode, Callable[[SemVer], SemVer]] = {
    BumpMode.INFER: _identity,
    BumpMode.MAJOR: SemVer.bump_major,
    BumpMode.MINOR: SemVer.bump_minor,
    BumpMode.PATCH: SemVer.bump_patch,
}
# fail on import if a BumpMode is added without a bump function
_missing_bumps = [mode for mode in list(BumpMode) if mode not in _bumps]
assert not _missing_bumps, f"missing bump function for modes: {_missing_bumps}"


def as_bump_mode(mode: str) -> BumpMode | None:
    """
    >>> as_bump_mode("Minor")
    'minor'
    >>> as_bump_mode("1.2.3") is None
    True
    """
    lowered = mode.strip().lower()
    return next((bump for bump in BumpMode if bump.value == lowered), None)


def needs_current_version(mode: str) -> bool:
    return as_bump_mode(mode) is not None


def resolve_version(
    mode: str, current_version: SemVer | None = None, *, missing_reason: str = ""
) -> SemVer:
    """`mode` is one of infer|major|minor|patch or an explicit version.

    >>> str(resolve_version("major", SemVer(1, 2, 3)))
    '2.0.0'
    >>> str(resolve_version("3.0.2"))
    '3.0.2'
    """
    bump_mode = as_bump_mode(mode)
    if bump_mode is None:
        return SemVer.parse(mode)
    if current_version is None:
        raise MissingManifestVersionError(bump_mode.value, missing_reason)
    return _bumps[bump_mode](current_version)
