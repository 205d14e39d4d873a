from pathlib import Path
from typing import ClassVar

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from changelog_ext.github import DEFAULT_GRAPHQL_URL, GithubClient


class ChangelogSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CHANGELOG_EXT_")

    DEFAULT_FILENAME: ClassVar[str] = "CHANGELOG.md"
    DEFAULT_LIST_AMOUNT: ClassVar[int] = 10

    filename: str = DEFAULT_FILENAME
    pwd: Path = Field(default_factory=Path.cwd)
    tag_prefix: str = Field(
        default="v",
        description="{tag_prefix}{version} used in the comparison links, the prefix of existing links wins",
    )
    github_api_token: str = Field(
        default="",
        validation_alias=AliasChoices(
            "GITHUB_API_TOKEN", "GITHUB_TOKEN", "CHANGELOG_EXT_GITHUB_API_TOKEN"
        ),
    )
    github_graphql_url: str = DEFAULT_GRAPHQL_URL
    http_timeout: float = 10.0
    list_amount: int = DEFAULT_LIST_AMOUNT

    @property
    def changelog_path(self) -> Path:
        return self.pwd / self.filename

    def github_client(self) -> GithubClient:
        return GithubClient(
            self.github_api_token,
            graphql_url=self.github_graphql_url,
            timeout=self.http_timeout,
        )


def changelog_settings(
    *,
    filename: str | None = None,
    pwd: Path | None = None,
) -> ChangelogSettings:
    """CLI arg -> Env var -> Default"""
    kwargs = {}
    if filename is not None:
        kwargs["filename"] = filename
    if pwd is not None:
        kwargs["pwd"] = pwd.resolve()
    return ChangelogSettings(**kwargs)
