"""
bookoptions: CLI for inspecting and validating book options.
"""

import logging
from pathlib import Path

import typer
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .config import UserConfig, load_user_defaults
from .console import console
from .options import BookOptions
from .schema.core import OptionType
from .shared.errors import BookOptionsError, ConfigError

app = typer.Typer(
    help="bookoptions: Inspect and validate the options understood by a book.\n\n"
    "Configuration: Use 'bookoptions config init' to create a user defaults file.\n"
    "Environment: Set BOOKOPTIONS_CONFIG to use a custom defaults file location.",
    epilog="Examples:\n\n"
    "  # List every option as Markdown\n"
    "  bookoptions describe --markdown\n\n"
    "  # Validate a few options against the schema\n"
    "  bookoptions check numbering=2 display_toc=true --root ~/books/mybook\n\n"
    "  # Initialize the user defaults file\n"
    "  bookoptions config init",
    no_args_is_help=True,
)
config_app = typer.Typer(help="User defaults file commands")
app.add_typer(config_app, name="config")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Configure logging for every command."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


@app.command(name="describe", help="Describe every option valid for a book.")
def describe(
    markdown: bool = typer.Option(False, "--markdown", "-m", help="Format the description as Markdown"),
):
    # Markdown output is meant to be copied into docs, so print it without markup
    console.print(BookOptions.description(markdown), end="", markup=False, highlight=False, soft_wrap=True)


def split_pair(pair: str) -> tuple[str, str]:
    """Split a KEY=VALUE argument; the value may itself contain '='."""
    key, sep, value = pair.partition("=")
    if not sep or not key.strip():
        raise typer.BadParameter(f"expected KEY=VALUE, got '{pair}'")
    return key.strip(), value


def options_table(options: BookOptions) -> Table:
    """Render stored options as a table, resolving path options against the root."""
    table = Table(title=f"Book options (root: {escape(str(options.root))})")
    table.add_column("Key", style="bold")
    table.add_column("Type")
    table.add_column("Value")
    table.add_column("Resolved path", style="dim")

    # Keys, values and paths come from the user and must not be read as markup
    for key in sorted(options.keys()):
        option = options.get(key)
        resolved = ""
        if option.kind == OptionType.PATH:
            try:
                resolved = escape(options.get_path(key))
            except BookOptionsError as e:
                resolved = f"[red]{escape(str(e))}[/red]"
        table.add_row(escape(key), option.kind.display_name, escape(repr(option.value)), resolved)

    return table


def print_errors(errors: list[BookOptionsError]) -> None:
    """Print each error with its recovery hint, if any."""
    console.print("[red]Option Validation Errors:[/red]", style="bold")
    for error in errors:
        console.print(f"  - {error}", style="red", markup=False)
        if error.recovery_hint:
            console.print(f"    {error.recovery_hint}", style="dim", markup=False)


@app.command(name="check", help="Validate KEY=VALUE pairs against the option schema.")
def check(
    pairs: list[str] | None = typer.Argument(None, help="Options to set, as KEY=VALUE"),
    root: str = typer.Option(".", "--root", "-r", help="Book root used to resolve path options"),
    use_user_config: bool = typer.Option(
        True, "--user-config/--no-user-config", help="Apply the user defaults file first"
    ),
):
    settings = [split_pair(pair) for pair in pairs or []]
    options = BookOptions(root=root)
    errors: list[BookOptionsError] = []

    if use_user_config:
        try:
            load_user_defaults(options)
        except ConfigError as e:
            errors.append(e)

    for key, value in settings:
        try:
            options.set(key, value)
        except BookOptionsError as e:
            errors.append(e)

    if errors:
        print_errors(errors)
        raise typer.Exit(1)

    console.print(options_table(options))


@config_app.command(name="path", help="Show where the user defaults file is searched for.")
def config_path():
    config = UserConfig()
    found = config.find_config_file()
    console.print("[bold]Configuration file locations (in priority order):[/bold]")
    for i, search_path in enumerate(config.get_config_paths(), 1):
        if search_path == found:
            console.print(f"  {i}. {escape(str(search_path))} [bold green](in use)[/bold green]")
        else:
            console.print(f"  {i}. {search_path}", markup=False)


@config_app.command(name="init", help="Create a user defaults file listing every option.")
def init_config(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config file"),
    config_path: str | None = typer.Option(None, "--path", "-p", help="Custom config file path"),
):
    try:
        config = UserConfig()
        target_path = Path(config_path) if config_path else config.get_default_config_path()

        if target_path.exists() and not force:
            console.print(f"[yellow]Configuration file already exists:[/yellow] {escape(str(target_path))}")
            console.print("[dim]Use --force to overwrite the existing configuration file[/dim]")
            raise typer.Exit(0)

        created_path = config.create_default_config(target_path)
        console.print(f"[bold green]Configuration file created:[/bold green] {escape(str(created_path))}")
    except typer.Exit:
        raise
    except OSError as e:
        console.print(f"[red]Error creating configuration file:[/red] {escape(str(e))}", style="bold")
        raise typer.Exit(1) from None
