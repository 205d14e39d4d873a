import re
from pathlib import Path
from typing import Protocol

import pytest
from zero_3rdparty.file_utils import ensure_parents_write_text
from zero_3rdparty.str_utils import ensure_prefix

from changelog_ext.settings import ChangelogSettings

TEST_DATA_PATH = Path(__file__).parent / "testdata"
_ENV_VARS = (
    "GITHUB_API_TOKEN",
    "GITHUB_TOKEN",
    "CHANGELOG_EXT_FILENAME",
    "CHANGELOG_EXT_PWD",
    "CHANGELOG_EXT_TAG_PREFIX",
    "CHANGELOG_EXT_GITHUB_API_TOKEN",
    "CHANGELOG_EXT_GITHUB_GRAPHQL_URL",
    "CHANGELOG_EXT_LIST_AMOUNT",
)

SAMPLE_CHANGELOG = """\
# Changelog

All notable changes to this project will be documented in this file.

## [Unreleased]

### Added

- Support for scoped packages ([#12](https://github.com/o/r/pull/12))

## [2.0.0] - 2024-03-01

### Changed

- Rename the `run` command

### Fixed

- Crash on empty input
  when the file has no newline

## [1.0.0] - 2024-01-31

### Added

- Initial release

[unreleased]: https://github.com/o/r/compare/v2.0.0...HEAD
[2.0.0]: https://github.com/o/r/compare/v1.0.0...v2.0.0
[1.0.0]: https://github.com/o/r/releases/tag/v1.0.0
"""


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def settings(tmp_path) -> ChangelogSettings:
    return ChangelogSettings(pwd=tmp_path)


@pytest.fixture()
def changelog_path(settings) -> Path:
    path = settings.changelog_path
    ensure_parents_write_text(path, SAMPLE_CHANGELOG)
    return path


@pytest.fixture()
def package_json(settings) -> Path:
    path = settings.pwd / "package.json"
    ensure_parents_write_text(path, '{"name": "my-pkg", "version": "0.1.0"}\n')
    return path


class LocalRegressionCheck(Protocol):
    def __call__(self, text: str, extension: str): ...


@pytest.fixture()
def file_regression_testdata(file_regression, request) -> LocalRegressionCheck:
    basename = re.sub(r"[\W]", "_", request.node.name)

    def local_regression_check(text: str, extension: str):
        dotted_extension = ensure_prefix(extension, ".")
        path = TEST_DATA_PATH / f"{basename}{dotted_extension}"
        return file_regression.check(text, fullpath=path)

    return local_regression_check
