"""CLI options and arguments for changelog commands."""

from pathlib import Path

import typer

argument_link = typer.Argument(
    None,
    help="GitHub pull request, issue, discussion or commit url, or a local commit-ish",
)
argument_selector = typer.Argument(
    "latest",
    help="unreleased | latest | <version>",
)
argument_release_mode = typer.Argument(
    "infer",
    help="infer | major | minor | patch | <version>, infer uses the package.json/pyproject.toml version as is",
)

option_filename = typer.Option(
    None,
    "-f",
    "--filename",
    envvar="CHANGELOG_EXT_FILENAME",
    help="Name of the changelog file inside --pwd",
)
option_pwd = typer.Option(
    None,
    "--pwd",
    envvar="CHANGELOG_EXT_PWD",
    help="Directory holding the changelog and the package manifest",
)
option_message = typer.Option(
    None,
    "-m",
    "--message",
    help="Entry text, used as is without any lookup",
)
option_commit = typer.Option(
    False,
    "-c",
    "--commit",
    help="git commit the changelog after adding the entry",
)
option_edit = typer.Option(
    False,
    "-e",
    "--edit",
    help="Open the entry in $EDITOR before adding it",
)
option_amount = typer.Option(
    None,
    "-a",
    "--amount",
    help="Number of versions to list or 'all'",
)
option_all = typer.Option(False, "--all", help="List all versions")
option_with_npm = typer.Option(
    False,
    "--with-npm",
    help="Commit the changelog and run `npm version <version>`",
)
option_date = typer.Option(
    None,
    "--date",
    help="Release date, defaults to today (UTC) in YYYY-MM-DD",
)
option_require_entries = typer.Option(
    False,
    "--require-entries",
    help="Fail when the unreleased section has no entries",
)


def parse_amount(raw: str | None, default: int, list_all: bool = False) -> int | None:
    """None means all.

    >>> parse_amount("all", 10) is None
    True
    >>> parse_amount(None, 10)
    10
    >>> parse_amount("3", 10)
    3
    """
    if list_all:
        return None
    if raw is None:
        return default
    if raw.strip().lower() == "all":
        return None
    try:
        amount = int(raw)
    except ValueError as e:
        raise typer.BadParameter(f"expected a number or 'all', got {raw!r}") from e
    if amount < 0:
        raise typer.BadParameter(f"amount must be positive, got {amount}")
    return amount


def as_path(raw: Path | None) -> Path | None:
    return raw.expanduser() if raw is not None else None
