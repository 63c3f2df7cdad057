"""gitdraft changes command - print the structured change summary."""

from pathlib import Path

import click

from gitdraft.cli.utils import (
    NO_CHANGES_MESSAGE,
    find_repo_root,
    load_repo_config,
    read_structured_changes,
)


@click.command()
@click.argument(
    "path", default=".", type=click.Path(exists=True, file_okay=False, path_type=Path)
)
@click.option("--staged", is_flag=True, help="Only summarize changes already in the index")
@click.pass_context
def changes_command(ctx: click.Context, path: Path, staged: bool) -> None:
    """Print a per-file summary of pending changes.

    PATH is any directory inside the repository (default: current directory).
    """
    repo_root = find_repo_root(path)
    config = load_repo_config(ctx, repo_root)

    structured = read_structured_changes(repo_root, config, staged=staged)
    if not structured:
        click.echo(NO_CHANGES_MESSAGE)
        return

    click.echo(structured, nl=False)
