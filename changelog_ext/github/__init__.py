# GitHub lookups domain

from .client import DEFAULT_GRAPHQL_URL, GithubClient, format_entry
from .repo import read_local_commit, read_remote_url
from .url import (
    GithubResource,
    ResourceKind,
    looks_like_url,
    normalize_repo_url,
    owner_repo,
    parse_github_url,
    remove_credentials,
)

__all__ = [
    "DEFAULT_GRAPHQL_URL",
    "GithubClient",
    "format_entry",
    "read_local_commit",
    "read_remote_url",
    "GithubResource",
    "ResourceKind",
    "looks_like_url",
    "normalize_repo_url",
    "owner_repo",
    "parse_github_url",
    "remove_credentials",
]
