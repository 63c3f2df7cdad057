"""CLI utilities."""

from pathlib import Path

import click

from gitdraft.config import GitDraftConfig, load_config
from gitdraft.core.errors import ConfigError
from gitdraft.core.logging import configure_logging, get_logger
from gitdraft.git import GitError, GitRepo

log = get_logger("gitdraft.cli")

NO_CHANGES_MESSAGE = "No changes detected. Nothing to generate a commit message for."


def find_repo_root(start_path: Path | None = None) -> Path:
    """Find the git repository root from the given path.

    Walks up the directory tree looking for a .git entry (directory or
    worktree file). If start_path is None, uses the current working directory.

    Raises:
        click.ClickException: If not inside a git repository
    """
    if start_path is None:
        start_path = Path.cwd()

    current = start_path.resolve()

    while current != current.parent:
        if (current / ".git").exists():
            return current
        current = current.parent

    if (current / ".git").exists():
        return current

    raise click.ClickException(f"Not inside a git repository: {start_path}")


def load_repo_config(ctx: click.Context, repo_root: Path) -> GitDraftConfig:
    """Load config for repo_root and apply its logging section unless -v was given."""
    try:
        config = load_config(repo_root)
    except ConfigError as e:
        raise click.ClickException(e.message) from e
    if not (ctx.obj or {}).get("verbose"):
        configure_logging(config=config.logging)
    return config


def read_structured_changes(repo_root: Path, config: GitDraftConfig, *, staged: bool) -> str:
    """Run the extraction pipeline, turning git failures into CLI errors."""
    include_unstaged = config.changes.include_unstaged and not staged
    try:
        with GitRepo(
            repo_root,
            context_lines=config.changes.context_lines,
            detect_renames=config.changes.detect_renames,
            summary_width=config.changes.summary_width,
        ) as repo:
            return repo.structured_changes(include_unstaged)
    except GitError as e:
        log.error("extraction_failed", repo=str(repo_root), error=str(e))
        raise click.ClickException(str(e)) from e
