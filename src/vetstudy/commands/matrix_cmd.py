"""Commands: vetstudy matrix / hierarchy / who-can - Inspect the role table."""

import typer
from rich.console import Console
from rich.table import Table

from vetstudy.core.permissions.policy import default_policy
from vetstudy.utils import parse_permission


console = Console()


def show_matrix() -> None:
    """Show which roles hold which permissions."""
    roles = default_policy.get_role_hierarchy()

    table = Table(title="Role Permissions", show_header=True)
    table.add_column("Permission", style="cyan", no_wrap=True)
    for role in roles:
        table.add_column(role.value, justify="center", no_wrap=True)

    for permission in default_policy.permissions:
        row = [permission.value]
        row.extend(
            "[green]✓[/green]" if default_policy.has_permission(role, permission) else ""
            for role in roles
        )
        table.add_row(*row)

    console.print(table)


def show_hierarchy() -> None:
    """Show roles from most to fewest permissions.

    Rank is the permission count, so roles with equal counts rank equally.
    """
    table = Table(title="Role Hierarchy", show_header=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Role", style="cyan", no_wrap=True)
    table.add_column("Permissions", justify="right", style="green")

    for rank, role in enumerate(default_policy.get_role_hierarchy(), start=1):
        table.add_row(str(rank), role.value, str(default_policy.permission_count(role)))

    console.print(table)


def who_can(
    permission: str = typer.Argument(..., help="Permission identifier, e.g. delete_patient"),
) -> None:
    """List the roles holding a permission."""
    parsed = parse_permission(permission, console)
    roles = default_policy.get_roles_with_permission(parsed)

    console.print(f"[bold cyan]{parsed.value}[/bold cyan]")
    for role in roles:
        console.print(f"  {role.value}")
