from __future__ import annotations

import re
from dataclasses import dataclass

from changelog_ext.models import UNRELEASED, ChangelogDocument, SemVer

_repo_link_regex = re.compile(
    r"^(?P<repo>https?://[^/]+/[^/]+/[^/]+)/(?:compare|releases/tag|tree|commits?)/(?P<ref>[^.\s]*?)(?=\d|HEAD|$)"
)


@dataclass
class LinkBuilder:
    """Builds comparison links in the GitHub url layout."""

    repo_url: str
    tag_prefix: str = "v"

    def __post_init__(self):
        self.repo_url = self.repo_url.rstrip("/")

    @classmethod
    def from_link(cls, url: str, default_prefix: str = "v") -> LinkBuilder | None:
        """
        >>> LinkBuilder.from_link("https://github.com/o/r/compare/v1.0.0...HEAD")
        LinkBuilder(repo_url='https://github.com/o/r', tag_prefix='v')
        >>> LinkBuilder.from_link("https://github.com/o/r/releases/tag/2.0.0")
        LinkBuilder(repo_url='https://github.com/o/r', tag_prefix='')
        >>> LinkBuilder.from_link("https://example.com") is None
        True
        """
        match = _repo_link_regex.match(url)
        if not match:
            return None
        versioned = url[match.end() :][:1].isdigit()
        tag_prefix = match["ref"] if versioned else default_prefix
        return cls(repo_url=match["repo"], tag_prefix=tag_prefix)

    def tag(self, version: SemVer) -> str:
        return f"{self.tag_prefix}{version}"

    def compare(self, old_ref: str, new_ref: str) -> str:
        return f"{self.repo_url}/compare/{old_ref}...{new_ref}"

    def release_link(self, version: SemVer, previous: SemVer | None) -> str:
        """
        >>> builder = LinkBuilder("https://github.com/o/r")
        >>> builder.release_link(SemVer(1, 1, 0), SemVer(1, 0, 0))
        'https://github.com/o/r/compare/v1.0.0...v1.1.0'
        >>> builder.release_link(SemVer(0, 1, 0), None)
        'https://github.com/o/r/releases/tag/v0.1.0'
        """
        if previous is None:
            return f"{self.repo_url}/releases/tag/{self.tag(version)}"
        return self.compare(self.tag(previous), self.tag(version))

    def unreleased_link(self, latest: SemVer | None) -> str:
        if latest is None:
            return f"{self.repo_url}/commits/HEAD"
        return self.compare(self.tag(latest), "HEAD")


def infer_link_builder(
    document: ChangelogDocument, default_prefix: str = "v"
) -> LinkBuilder | None:
    """Reuse the repository url of the existing links, the unreleased link first.

    `default_prefix` is used when no link names a tag, e.g. `commits/HEAD`."""
    refs = list(document.links)
    if unreleased_ref := document.link_reference(UNRELEASED):
        refs.insert(0, unreleased_ref)
    for ref in refs:
        if builder := LinkBuilder.from_link(ref.url, default_prefix):
            return builder
    return None
