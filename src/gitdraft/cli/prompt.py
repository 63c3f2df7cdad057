"""gitdraft prompt command - render the commit-message prompt."""

from pathlib import Path

import click

from gitdraft.cli.utils import (
    NO_CHANGES_MESSAGE,
    find_repo_root,
    load_repo_config,
    read_structured_changes,
)
from gitdraft.prompts import build_request, build_user_prompt


@click.command()
@click.argument(
    "path", default=".", type=click.Path(exists=True, file_okay=False, path_type=Path)
)
@click.option("--staged", is_flag=True, help="Only summarize changes already in the index")
@click.option("-c", "--context", default=None, help="Additional context for the commit message")
@click.option("-m", "--model", default=None, help="Model name for the JSON request")
@click.option("--json", "as_json", is_flag=True, help="Output a chat-completion request body")
@click.pass_context
def prompt_command(
    ctx: click.Context,
    path: Path,
    staged: bool,
    context: str | None,
    model: str | None,
    as_json: bool,
) -> None:
    """Print the commit-message prompt for pending changes.

    PATH is any directory inside the repository (default: current directory).
    """
    repo_root = find_repo_root(path)
    config = load_repo_config(ctx, repo_root)

    structured = read_structured_changes(repo_root, config, staged=staged)
    if not structured:
        click.echo(NO_CHANGES_MESSAGE)
        return

    context = context if context is not None else config.prompt.context
    if as_json:
        request = build_request(structured, model or config.prompt.model, context)
        click.echo(request.model_dump_json(indent=2))
    else:
        click.echo(build_user_prompt(structured, context), nl=False)
