"""CLI interface for gitstats."""

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from gitstats.config import FIRST_COMMIT, LAST_COMMIT, LOG_LEVEL
from gitstats.git import GitStatsError, Repository


console = Console()


def setup_logging(verbose: bool) -> None:
    """Send library logs to a rich handler."""
    level = logging.getLevelName(LOG_LEVEL)
    if not isinstance(level, int):
        level = logging.WARNING

    logging.basicConfig(
        level=logging.DEBUG if verbose else level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def open_repository(repo_path: str, first: str | None, last: str | None, verbose: bool) -> Repository:
    """Create a repository handle, echoing commands when verbose."""
    setup_logging(verbose)
    repo = Repository(repo_path, first_commit_hash=first, last_commit_hash=last)
    if verbose:
        repo.add_command_observer(
            lambda command, result: console.print(f"[dim]$ {command}[/dim]")
        )
    return repo


def range_options(func):
    """Attach the shared repository arguments to a command."""
    func = click.option("-v", "--verbose", is_flag=True, help="Verbose output")(func)
    func = click.option("--last", default=LAST_COMMIT, help="Last commit of the range (default: HEAD)")(func)
    func = click.option("--first", default=FIRST_COMMIT, help="Commit the range starts after")(func)
    func = click.argument("repo_path", type=click.Path(exists=True, file_okay=False), default=".")(func)
    return func


@click.group()
@click.version_option(package_name="gitstats")
def cli():
    """gitstats - authors, commits and version of a git repository."""
    pass


@cli.command()
@range_options
def authors(repo_path, first, last, verbose):
    """List authors in the commit range."""
    try:
        repo = open_repository(repo_path, first, last, verbose)
        author_list = repo.authors()

        if not author_list:
            console.print("[yellow]No authors found in range.[/yellow]")
            return

        table = Table(title=f"Authors: {repo.project_name} ({repo.commit_range})")
        table.add_column("Name", style="cyan")
        table.add_column("Email", style="green")
        for author in author_list:
            table.add_row(author.name, author.email)

        console.print(table)

    except GitStatsError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)


@cli.command()
@range_options
def commits(repo_path, first, last, verbose):
    """List commits in the commit range, oldest first."""
    try:
        repo = open_repository(repo_path, first, last, verbose)
        commit_list = repo.commits()

        if not commit_list:
            console.print("[yellow]No commits found in range.[/yellow]")
            return

        table = Table(title=f"Commits: {repo.project_name} ({repo.commit_range})")
        table.add_column("Hash", style="cyan")
        table.add_column("Date", style="green")
        table.add_column("Author", style="yellow")
        for commit in commit_list:
            table.add_row(
                commit.hash,
                commit.date.strftime("%Y-%m-%d %H:%M:%S %z"),
                f"{commit.author.name} <{commit.author.email}>",
            )

        console.print(table)

        if verbose:
            first_date, last_date = repo.commits_period()
            console.print(
                f"{len(commit_list)} commits from {first_date.strftime('%Y-%m-%d')} "
                f"to {last_date.strftime('%Y-%m-%d')}"
            )

    except GitStatsError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)


@cli.command()
@range_options
def version(repo_path, first, last, verbose):
    """Print the abbreviated hash of the range's last commit."""
    try:
        repo = open_repository(repo_path, first, last, verbose)
        click.echo(repo.project_version())

    except GitStatsError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)
