"""Main vetstudy CLI application."""

import typer
from rich.console import Console

from vetstudy import __version__
from vetstudy.commands import check, matrix_cmd, token


console = Console()

app = typer.Typer(
    name="vetstudy",
    help="Inspect MyVetStudy roles and permissions.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register commands
app.command(name="matrix")(matrix_cmd.show_matrix)
app.command(name="hierarchy")(matrix_cmd.show_hierarchy)
app.command(name="who-can")(matrix_cmd.who_can)
app.command(name="check")(check.check)
app.command(name="token")(token.token)


@app.callback(invoke_without_command=True)
def version_callback(
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit."
    ),
) -> None:
    """vetstudy CLI - Inspect roles and permissions."""
    if version:
        console.print(f"[bold cyan]vetstudy[/bold cyan] version {__version__}")
        raise typer.Exit()


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
