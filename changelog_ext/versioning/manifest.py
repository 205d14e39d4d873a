import logging
from pathlib import Path
from typing import Any

from model_lib.serialize.parse import parse_dict

from changelog_ext.errors import (
    InvalidVersionStringError,
    ManifestError,
)
from changelog_ext.models import SemVer

logger = logging.getLogger(__name__)
PACKAGE_JSON = "package.json"
PYPROJECT_TOML = "pyproject.toml"
MANIFEST_FILENAMES = (PACKAGE_JSON, PYPROJECT_TOML)


def find_manifest(directory: Path) -> Path:
    for filename in MANIFEST_FILENAMES:
        path = directory / filename
        if path.exists():
            return path
    raise ManifestError(directory, f"none of {list(MANIFEST_FILENAMES)} found")


def _raw_version(manifest: dict[str, Any], path: Path) -> str:
    if path.name == PACKAGE_JSON:
        return manifest.get("version") or ""
    if version := manifest.get("project", {}).get("version"):
        return version
    return manifest.get("tool", {}).get("poetry", {}).get("version") or ""


def read_current_version(path: Path) -> SemVer:
    """To find the version:
    1. `version` in package.json
    2. `project.version` in pyproject.toml
    3. `tool.poetry.version` in pyproject.toml

    A directory is searched for the manifest files in that order."""
    if path.is_dir():
        path = find_manifest(path)
    if not path.exists():
        raise ManifestError(path, "file not found")
    try:
        manifest = parse_dict(path)
    except Exception as e:
        raise ManifestError(path, repr(e)) from e
    raw_version = _raw_version(manifest, path)
    if not raw_version:
        raise ManifestError(path, "no version field")
    try:
        version = SemVer.parse(str(raw_version))
    except InvalidVersionStringError as e:
        raise ManifestError(path, str(e)) from e
    logger.info(f"current version {version} from {path}")
    return version

