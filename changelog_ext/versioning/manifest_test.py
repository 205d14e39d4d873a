import pytest

from changelog_ext.errors import ManifestError
from changelog_ext.models import SemVer
from changelog_ext.versioning import find_manifest, read_current_version


def test_package_json(package_json):
    assert read_current_version(package_json) == SemVer(0, 1, 0)
    assert read_current_version(package_json.parent) == SemVer(0, 1, 0)


def test_pyproject_project_version(tmp_path):
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "my-pkg"\nversion = "1.4.0"\n')
    assert read_current_version(tmp_path) == SemVer(1, 4, 0)


def test_pyproject_poetry_version(tmp_path):
    path = tmp_path / "pyproject.toml"
    path.write_text('[tool.poetry]\nname = "my-pkg"\nversion = "0.9.1"\n')
    assert read_current_version(path) == SemVer(0, 9, 1)


def test_package_json_wins(tmp_path, package_json):
    (tmp_path / "pyproject.toml").write_text('[project]\nversion = "9.9.9"\n')
    assert find_manifest(tmp_path) == package_json


def test_missing_manifest(tmp_path):
    with pytest.raises(ManifestError) as exc:
        read_current_version(tmp_path)
    assert exc.value.path == tmp_path


@pytest.mark.parametrize(
    "content, reason",
    [
        ('{"name": "my-pkg"}', "no version field"),
        ('{"version": "latest"}', "Invalid version string"),
    ],
)
def test_invalid_package_json(tmp_path, content, reason):
    path = tmp_path / "package.json"
    path.write_text(content)
    with pytest.raises(ManifestError, match=reason):
        read_current_version(path)
