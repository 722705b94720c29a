"""Command: vetstudy token - Mint a development access token."""

from datetime import timedelta
from uuid import uuid4

import typer
from rich.console import Console

from vetstudy.utils import parse_role


console = Console()


def token(
    role: str = typer.Argument(..., help="Role to embed in the token"),
    user_id: str | None = typer.Option(
        None, "--user-id", "-u", help="Subject claim (random if omitted)"
    ),
    practice_id: str | None = typer.Option(
        None, "--practice-id", "-p", help="Practice the user belongs to"
    ),
    minutes: int | None = typer.Option(
        None,
        "--minutes",
        "-m",
        min=1,
        help="Lifetime in minutes (settings default if omitted)",
    ),
) -> None:
    """Mint a signed access token for local testing.

    Signed with SECRET_KEY from the environment; refused in production.
    """
    from vetstudy.config import settings
    from vetstudy.core.auth.backend import create_access_token

    try:
        production = settings.is_production
    except ValueError:
        # Production with the default secret
        production = True

    if production:
        console.print("[red]Error:[/red] Refusing to mint tokens in production.")
        raise typer.Exit(1)

    parsed_role = parse_role(role, console)
    expires_delta = timedelta(minutes=minutes) if minutes is not None else None

    # Plain print: the token must stay on one line for shell capture
    typer.echo(
        create_access_token(
            user_id or str(uuid4()),
            parsed_role,
            practice_id=practice_id,
            expires_delta=expires_delta,
        )
    )
