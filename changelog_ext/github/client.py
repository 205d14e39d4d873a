"""Resolve GitHub pull requests, issues, commits and discussions to titles.

Uses the GraphQL API, one blocking request per lookup and no retries."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from changelog_ext.errors import TitleLookupError
from changelog_ext.github.url import GithubResource, ResourceKind

logger = logging.getLogger(__name__)
DEFAULT_GRAPHQL_URL = "https://api.github.com/graphql"
USER_AGENT = "changelog-ext"

_queries: dict[ResourceKind, str] = {
    ResourceKind.PULL: """\
query($owner: String!, $repo: String!, $number: Int!) {
  repository(owner: $owner, name: $repo) { pullRequest(number: $number) { title } }
}""",
    ResourceKind.ISSUE: """\
query($owner: String!, $repo: String!, $number: Int!) {
  repository(owner: $owner, name: $repo) { issue(number: $number) { title } }
}""",
    ResourceKind.DISCUSSION: """\
query($owner: String!, $repo: String!, $number: Int!) {
  repository(owner: $owner, name: $repo) { discussion(number: $number) { title } }
}""",
    ResourceKind.COMMIT: """\
query($owner: String!, $repo: String!, $sha: GitObjectID!) {
  repository(owner: $owner, name: $repo) { object(oid: $sha) { ... on Commit { title: messageHeadline } } }
}""",
}
_response_keys: dict[ResourceKind, str] = {
    ResourceKind.PULL: "pullRequest",
    ResourceKind.ISSUE: "issue",
    ResourceKind.DISCUSSION: "discussion",
    ResourceKind.COMMIT: "object",
}


def query_variables(resource: GithubResource) -> dict[str, Any]:
    variables: dict[str, Any] = {"owner": resource.owner, "repo": resource.repo}
    if resource.kind == ResourceKind.COMMIT:
        variables["sha"] = resource.ref
    else:
        variables["number"] = resource.number
    return variables


class GithubClient:
    def __init__(
        self,
        token: str,
        *,
        graphql_url: str = DEFAULT_GRAPHQL_URL,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.token = token
        self.graphql_url = graphql_url
        self.timeout = timeout
        self.transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "User-Agent": USER_AGENT,
            "Content-Type": "application/json",
        }

    def graphql(self, query: str, variables: dict[str, Any], *, url: str) -> dict[str, Any]:
        """`url` is only used for error messages."""
        if not self.token:
            raise TitleLookupError(url, "no api token, set GITHUB_API_TOKEN")
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.post(
                    self.graphql_url,
                    json={"query": query, "variables": variables},
                    headers=self._headers(),
                )
        except httpx.HTTPError as e:
            raise TitleLookupError(url, f"request failed: {e!r}") from e
        if response.status_code >= 400:
            raise TitleLookupError(
                url, f"GitHub API responded {response.status_code}: {response.text}"
            )
        try:
            payload = response.json()
        except ValueError as e:
            raise TitleLookupError(url, f"invalid JSON response: {e}") from e
        if not isinstance(payload, dict):
            raise TitleLookupError(url, f"invalid JSON response: {payload!r}")
        if errors := payload.get("errors"):
            raise TitleLookupError(url, errors[0].get("message", str(errors[0])))
        return payload.get("data") or {}

    def resolve_title(self, resource: GithubResource) -> str:
        kind = ResourceKind(resource.kind)
        url = resource.url or resource.html_url
        data = self.graphql(_queries[kind], query_variables(resource), url=url)
        node = (data.get("repository") or {}).get(_response_keys[kind]) or {}
        title = node.get("title")
        if not title:
            raise TitleLookupError(url, f"no {kind} found")
        logger.info(f"resolved title for {url}: {title}")
        return title


def format_entry(resource: GithubResource, title: str) -> str:
    """
    >>> from changelog_ext.github.url import parse_github_url
    >>> format_entry(parse_github_url("https://github.com/o/r/pull/12"), "Fix crash")
    'Fix crash ([#12](https://github.com/o/r/pull/12))'
    """
    return f"{title} ([{resource.link_text}]({resource.html_url}))"
