# Version resolution domain

from .manifest import find_manifest, read_current_version
from .semver import BumpMode, as_bump_mode, needs_current_version, resolve_version

__all__ = [
    "find_manifest",
    "read_current_version",
    "BumpMode",
    "as_bump_mode",
    "needs_current_version",
    "resolve_version",
]
