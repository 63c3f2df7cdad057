"""gitdraft CLI."""

import click

from gitdraft.cli.changes import changes_command
from gitdraft.cli.prompt import prompt_command
from gitdraft.core.logging import configure_logging, set_run_id


@click.group()
@click.version_option(version="0.1.0", prog_name="gitdraft")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """gitdraft - summarize pending git changes for commit-message drafting."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    set_run_id()
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(changes_command, name="changes")
cli.add_command(prompt_command, name="prompt")


if __name__ == "__main__":
    cli()
