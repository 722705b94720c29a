"""Command: vetstudy check - Evaluate a role against permissions."""

import typer
from rich.console import Console

from vetstudy.core.permissions.guard import RouteGuard
from vetstudy.core.permissions.policy import default_policy
from vetstudy.utils import parse_permission, parse_role


console = Console()


def check(
    role: str = typer.Argument(..., help="Role name, e.g. RECEPTIONIST"),
    permissions: list[str] = typer.Argument(..., help="Permissions to require"),
    any_of: bool = typer.Option(
        False, "--any", help="Allow when any one permission is held"
    ),
) -> None:
    """Check whether a role passes a permission guard.

    Exits 0 when allowed and 1 when denied.
    """
    parsed_role = parse_role(role, console)
    guard = RouteGuard(
        required_permissions=[parse_permission(p, console) for p in permissions],
        require_all=not any_of,
    )

    decision = guard.evaluate(parsed_role, default_policy)

    for permission in guard.required_permissions or ():
        mark = (
            "[green]✓[/green]"
            if default_policy.has_permission(parsed_role, permission)
            else "[red]✗[/red]"
        )
        console.print(f"  {mark} {permission.value}")

    if not decision:
        console.print(f"[red]Denied:[/red] {parsed_role.value}")
        raise typer.Exit(1)

    console.print(f"[green]Allowed:[/green] {parsed_role.value}")
