from pathlib import Path


class ChangelogExtError(Exception):
    """Base for errors reported to the user without a traceback"""

    pass


class ParseError(ChangelogExtError):
    pass


class MalformedHeadingError(ParseError):
    def __init__(self, line_number: int, line: str) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(
            f"Malformed version heading on line {line_number}: {line!r}, expected '## [Unreleased]' or '## [1.2.3] - 2024-01-31'"
        )


class DuplicateVersionError(ParseError):
    def __init__(self, label: str, line_number: int) -> None:
        self.label = label
        self.line_number = line_number
        super().__init__(f"Version {label} is listed twice, again on line {line_number}")


class InvalidVersionStringError(ChangelogExtError):
    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"Invalid version string: {raw!r}, expected major.minor.patch")


class MissingManifestVersionError(ChangelogExtError):
    def __init__(self, mode: str, reason: str = "") -> None:
        self.mode = mode
        self.reason = reason
        message = f"Release mode '{mode}' needs the current version from a package manifest"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ManifestError(ChangelogExtError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read version from manifest @ {path}: {reason}")


class VersionNotFoundError(ChangelogExtError):
    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"Couldn't find notes for version: {version}")


class AlreadyReleasedError(ChangelogExtError):
    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"Version {version} is already released")


class NothingToReleaseError(ChangelogExtError):
    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"No unreleased entries to release as {version}")


class InvalidGithubUrlError(ChangelogExtError):
    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid GitHub URL {url!r}: {reason}")


class TitleLookupError(ChangelogExtError):
    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Could not resolve a title for {url}: {reason}")


class RemoteURLNotFound(ChangelogExtError):
    def __init__(self, reason: str, path: Path):
        self.reason = reason
        self.path = path
        super().__init__(f"Could not find remote URL for git repo @ {path}: {reason}")


class UnreadableFileError(ChangelogExtError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read {path}: {reason}")


class UnwritableFileError(ChangelogExtError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not write {path}: {reason}")


class ChangelogExistsError(ChangelogExtError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Changelog already exists @ {path}")


class CommandFailedError(ChangelogExtError):
    def __init__(self, command: str, output: str) -> None:
        self.command = command
        self.output = output
        super().__init__(f"Command failed: {command}\n{output}")


class NoEntryError(ChangelogExtError):
    def __init__(self, category: str) -> None:
        self.category = category
        super().__init__(f"No {category} entry given, the editor was closed without content")
