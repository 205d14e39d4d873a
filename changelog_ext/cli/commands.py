"""CLI commands for changelog-ext."""

import logging
from functools import wraps
from pathlib import Path
from typing import Callable, TypeVar

import typer
from typer import Typer

from changelog_ext.changelog import (
    format_notes,
    get_notes,
    list_versions,
    parse_selector,
)
from changelog_ext.cli.options import (
    argument_link,
    argument_release_mode,
    argument_selector,
    as_path,
    option_all,
    option_amount,
    option_commit,
    option_date,
    option_edit,
    option_filename,
    option_message,
    option_pwd,
    option_require_entries,
    option_with_npm,
    parse_amount,
)
from changelog_ext.cli.workflows import (
    ReleaseInput,
    add_workflow,
    init_workflow,
    load_document,
    print_status,
    release_workflow,
    resolve_entries,
)
from changelog_ext.errors import ChangelogExtError
from changelog_ext.models import Category, version_label
from changelog_ext.settings import ChangelogSettings, changelog_settings

logger = logging.getLogger(__name__)
app = Typer(
    name="changelog",
    help="Maintain a keep-a-changelog CHANGELOG.md",
    no_args_is_help=True,
)
T = TypeVar("T", bound=Callable)


def report_errors(func: T) -> T:
    """Known errors are printed without a traceback."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ChangelogExtError as e:
            logger.debug(f"command failed: {e!r}")
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from e

    return wrapper  # type: ignore


@app.callback()
def main(
    ctx: typer.Context,
    filename: str | None = option_filename,
    pwd: Path | None = option_pwd,
):
    """changelog: add entries, read notes and cut releases"""
    ctx.obj = changelog_settings(filename=filename, pwd=as_path(pwd))


@app.command()
@report_errors
def init(ctx: typer.Context):
    """Create a new changelog with an empty Unreleased section"""
    settings: ChangelogSettings = ctx.obj
    path = init_workflow(settings)
    print_status(f"created {path}")


def _add(
    ctx: typer.Context,
    category: Category,
    link: str | None,
    message: str | None,
    commit: bool,
    edit: bool,
) -> None:
    settings: ChangelogSettings = ctx.obj
    entries = resolve_entries(
        settings, category.value, link=link, message=message, edit=edit
    )
    add_workflow(settings, category.value, entries, commit=commit)
    for entry in entries:
        print_status(f"{category.value}: {entry}")


@app.command()
@report_errors
def add(
    ctx: typer.Context,
    link: str | None = argument_link,
    message: str | None = option_message,
    commit: bool = option_commit,
    edit: bool = option_edit,
):
    """Add an 'Added' entry to the Unreleased section"""
    _add(ctx, Category.ADDED, link, message, commit, edit)


@app.command()
@report_errors
def fix(
    ctx: typer.Context,
    link: str | None = argument_link,
    message: str | None = option_message,
    commit: bool = option_commit,
    edit: bool = option_edit,
):
    """Add a 'Fixed' entry to the Unreleased section"""
    _add(ctx, Category.FIXED, link, message, commit, edit)


@app.command()
@report_errors
def change(
    ctx: typer.Context,
    link: str | None = argument_link,
    message: str | None = option_message,
    commit: bool = option_commit,
    edit: bool = option_edit,
):
    """Add a 'Changed' entry to the Unreleased section"""
    _add(ctx, Category.CHANGED, link, message, commit, edit)


@app.command()
@report_errors
def remove(
    ctx: typer.Context,
    link: str | None = argument_link,
    message: str | None = option_message,
    commit: bool = option_commit,
    edit: bool = option_edit,
):
    """Add a 'Removed' entry to the Unreleased section"""
    _add(ctx, Category.REMOVED, link, message, commit, edit)


@app.command()
@report_errors
def deprecate(
    ctx: typer.Context,
    link: str | None = argument_link,
    message: str | None = option_message,
    commit: bool = option_commit,
    edit: bool = option_edit,
):
    """Add a 'Deprecated' entry to the Unreleased section"""
    _add(ctx, Category.DEPRECATED, link, message, commit, edit)


@app.command()
@report_errors
def notes(ctx: typer.Context, selector: str = argument_selector):
    """Print the entries of a version, latest is Unreleased unless it is empty"""
    settings: ChangelogSettings = ctx.obj
    document = load_document(settings)
    version_notes = get_notes(document, parse_selector(selector))
    if text := format_notes(version_notes, document.bullet):
        typer.echo(text, nl=False)


@app.command(name="list")
@report_errors
def list_cmd(
    ctx: typer.Context,
    amount: str | None = option_amount,
    list_all: bool = option_all,
):
    """List versions, newest first, with their links"""
    settings: ChangelogSettings = ctx.obj
    document = load_document(settings)
    limit = parse_amount(amount, settings.list_amount, list_all)
    for version, link in list_versions(document, limit):
        label = version_label(version)
        typer.echo(f"- {label:15} {link}".rstrip())


@app.command()
@report_errors
def release(
    ctx: typer.Context,
    mode: str = argument_release_mode,
    with_npm: bool = option_with_npm,
    date: str | None = option_date,
    require_entries: bool = option_require_entries,
):
    """Move the Unreleased entries into a new version section"""
    settings: ChangelogSettings = ctx.obj
    release_input = ReleaseInput(
        settings=settings,
        mode=mode,
        date=date or "",
        with_npm=with_npm,
        require_entries=require_entries,
    )
    block = release_workflow(release_input)
    print_status(f"released {block.label} - {block.date}")
