"""pathglob CLI - Inspect glob patterns and check paths against them."""

import sys
from pathlib import Path

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import CONFIG_DIR, CONFIG_FILE, Config, ConfigValidationError
from .glob import GlobError, compile_glob, translate_glob
from .models import PatternSet

console = Console()


def display_matches(title: str, rows: list[tuple[str, list[str]]]) -> None:
    """Display paths and the names they matched in a table."""
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Path", style="cyan")
    table.add_column("Matches", style="green")

    for path, names in rows:
        table.add_row(escape(path), escape(", ".join(names)) if names else "[red]none[/]")

    console.print(table)


@click.group()
def main() -> None:
    """Compile glob patterns and match paths against them."""


@main.command()
@click.argument("pattern")
def translate(pattern: str) -> None:
    """Print the regular expression PATTERN translates to."""
    try:
        expression = translate_glob(pattern)
    except GlobError as e:
        console.print(f"[red]Error: {escape(str(e))}[/]")
        sys.exit(1)

    console.print(expression, markup=False, highlight=False)


@main.command()
@click.argument("pattern")
@click.argument("paths", nargs=-1, required=True)
@click.option("--quiet", "-q", is_flag=True, help="Only set the exit status")
def match(pattern: str, paths: tuple[str, ...], quiet: bool) -> None:
    """Match each of PATHS against PATTERN.

    Exits with status 1 unless every path matches.
    """
    try:
        glob = compile_glob(pattern)
    except GlobError as e:
        if not quiet:
            console.print(f"[red]Error: {escape(str(e))}[/]")
        sys.exit(1)

    results = [(path, glob.match(path)) for path in paths]

    if not quiet:
        table = Table(title=f"Pattern {escape(str(glob))}", show_header=True, header_style="bold")
        table.add_column("Path", style="cyan")
        table.add_column("Match")
        for path, matched in results:
            table.add_row(escape(path), "[green]yes[/]" if matched else "[red]no[/]")
        console.print(table)

    if not all(matched for _, matched in results):
        sys.exit(1)


@main.command()
@click.argument("paths", nargs=-1, required=True)
@click.option(
    "--root",
    default=".",
    type=click.Path(file_okay=False, path_type=Path),
    help="Project root holding .pathglob/config.yml",
)
@click.option("--strict", is_flag=True, help="Fail on invalid patterns instead of skipping them")
@click.option("--verbose", "-v", is_flag=True, help="Show the loaded patterns")
def check(paths: tuple[str, ...], root: Path, strict: bool, verbose: bool) -> None:
    """Check PATHS against the named patterns in the project config.

    Exits with status 1 if any path matches no pattern.
    """
    try:
        config = Config.load(root)
    except ConfigValidationError as e:
        console.print(f"[red]Error: {escape(str(e))}[/]")
        sys.exit(1)
    except yaml.YAMLError as e:
        console.print(f"[red]Failed to parse config YAML: {escape(str(e))}[/]")
        sys.exit(1)

    if strict:
        config.strict = True

    if not config.patterns:
        console.print(f"[red]No patterns configured in {root / CONFIG_DIR / CONFIG_FILE}[/]")
        console.print("[dim]Run 'pathglob init' to create one[/]")
        sys.exit(1)

    pattern_set = PatternSet.from_config(config)

    for warning in (e for e in pattern_set.errors if not e.fatal):
        console.print(f"[yellow]Warning: {escape(warning.message)}[/]")

    if pattern_set.fatal_errors:
        console.print("[red]Pattern validation failed:[/]")
        for error in pattern_set.fatal_errors:
            console.print(f"  - {escape(error.message)}")
        sys.exit(1)

    if verbose:
        for name, glob in pattern_set:
            console.print(f"[dim]{escape(name)}: {escape(str(glob))}[/]")

    results = pattern_set.classify(paths)
    display_matches("Path matches", results)

    unmatched = [path for path, names in results if not names]
    if unmatched:
        console.print(f"[red]{len(unmatched)} path(s) matched no pattern[/]")
        sys.exit(1)

    console.print("[bold green]All paths matched[/]")


@main.command()
@click.option(
    "--root", default=".", type=click.Path(file_okay=False, path_type=Path), help="Project root"
)
@click.option("--force", is_flag=True, help="Overwrite an existing config")
def init(root: Path, force: bool) -> None:
    """Write a starter .pathglob/config.yml."""
    config_path = root / CONFIG_DIR / CONFIG_FILE
    if config_path.exists() and not force:
        console.print(f"[red]Config already exists: {config_path}[/]")
        console.print("[dim]Use --force to overwrite[/]")
        sys.exit(1)

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(Config.generate_template())
    console.print(f"[green]Created {config_path}[/]")


if __name__ == "__main__":
    main()
