"""Helpers shared by CLI commands."""

import typer
from rich.console import Console

from vetstudy.core.permissions.models import Permission, Role


def parse_role(value: str, console: Console) -> Role:
    """Parse a role name case-insensitively, exiting with code 2 if unknown."""
    try:
        return Role(value.strip().upper())
    except ValueError:
        choices = ", ".join(role.value for role in Role)
        console.print(f"[red]Error:[/red] Unknown role '{value}'. Choose from: {choices}")
        raise typer.Exit(2) from None


def parse_permission(value: str, console: Console) -> Permission:
    """Parse a permission identifier case-insensitively, exiting with code 2 if unknown."""
    try:
        return Permission(value.strip().lower())
    except ValueError:
        console.print(
            f"[red]Error:[/red] Unknown permission '{value}'. "
            "Run 'vetstudy matrix' to list permissions."
        )
        raise typer.Exit(2) from None
