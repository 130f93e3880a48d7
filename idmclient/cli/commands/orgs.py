"""
idm orgs command - Organization management CLI.

Create, list, and manage organizations via command line.
"""

import asyncio
import json
from typing import Any, Dict, Optional

import typer
from rich.console import Console
from rich.table import Table

from ...client import ManagementClient
from ...exceptions import APIError

console = Console()


def _parse_metadata(metadata: Optional[str]) -> Optional[Dict[str, Any]]:
    if metadata is None:
        return None
    try:
        value = json.loads(metadata)
    except json.JSONDecodeError as e:
        console.print(f"[red]Error:[/red] Invalid JSON: {e}")
        raise typer.Exit(1)
    if not isinstance(value, dict):
        console.print("[red]Error:[/red] Metadata must be a JSON object")
        raise typer.Exit(1)
    return value


def _print_org(org: Dict[str, Any]) -> None:
    console.print(f"ID: [cyan]{org.get('id')}[/cyan]")
    console.print(f"Name: [cyan]{org.get('name')}[/cyan]")
    if org.get("display_name"):
        console.print(f"Display name: [cyan]{org['display_name']}[/cyan]")
    if org.get("metadata"):
        console.print("\nMetadata:")
        for key, value in org["metadata"].items():
            console.print(f"  {key}: [cyan]{value}[/cyan]")
    console.print()


def _run(coro) -> None:
    """Run a command coroutine, turning failures into exit code 1."""
    try:
        asyncio.run(coro)
    except APIError as e:
        console.print(f"[red]Error {e.status_code}:[/red] {e.message}")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def orgs_create_command(
    name: str = typer.Argument(..., help="Organization name (lowercase identifier)"),
    display_name: Optional[str] = typer.Option(
        None,
        "--display-name",
        "-d",
        help="Friendly name shown to users",
    ),
    metadata: Optional[str] = typer.Option(
        None,
        "--metadata",
        "-m",
        help="Metadata JSON (e.g., '{\"tier\": \"pro\"}')",
    ),
) -> None:
    """
    Create a new organization.

    Example:
        $ idm orgs create acme
        $ idm orgs create acme --display-name "Acme Corp" --metadata '{"tier": "pro"}'
    """
    data: Dict[str, Any] = {"name": name}
    if display_name:
        data["display_name"] = display_name
    metadata_dict = _parse_metadata(metadata)
    if metadata_dict is not None:
        data["metadata"] = metadata_dict

    console.print("\n[bold cyan]Creating Organization[/bold cyan]\n")

    _run(_create_org(data))


async def _create_org(data: Dict[str, Any]) -> None:
    """Internal async function to create organization."""
    client = await ManagementClient.create()
    try:
        org = await client.organizations.create(data)
    finally:
        await client.close()

    console.print("[green]✓[/green] Organization created successfully!\n")
    _print_org(org)


def orgs_list_command(
    per_page: int = typer.Option(50, "--per-page", "-n", help="Organizations per page"),
    page: int = typer.Option(0, "--page", "-p", help="Page number, zero indexed"),
) -> None:
    """
    List organizations.

    Example:
        $ idm orgs list
        $ idm orgs list --per-page 10 --page 2
    """
    console.print("\n[bold cyan]Organizations[/bold cyan]\n")

    _run(_list_orgs(per_page, page))


async def _list_orgs(per_page: int, page: int) -> None:
    """Internal async function to list organizations."""
    client = await ManagementClient.create()
    try:
        orgs = await client.organizations.get_all({"per_page": per_page, "page": page})
    finally:
        await client.close()

    if not orgs:
        console.print("[yellow]No organizations found[/yellow]\n")
        return

    table = Table(title=f"Organizations (page {page}, showing {len(orgs)})")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Display name", style="magenta")

    for org in orgs:
        table.add_row(
            str(org.get("id", "")),
            str(org.get("name", "")),
            str(org.get("display_name") or ""),
        )

    console.print(table)
    console.print()


def orgs_get_command(
    org_id: str = typer.Argument(..., help="Organization ID"),
) -> None:
    """
    Get an organization by ID.

    Example:
        $ idm orgs get org_123
    """
    console.print("\n[bold cyan]Organization Details[/bold cyan]\n")

    _run(_get_org(org_id))


async def _get_org(org_id: str) -> None:
    """Internal async function to get organization."""
    client = await ManagementClient.create()
    try:
        org = await client.organizations.get({"id": org_id})
    finally:
        await client.close()

    _print_org(org)


def orgs_update_command(
    org_id: str = typer.Argument(..., help="Organization ID"),
    name: Optional[str] = typer.Option(None, "--name", help="New name"),
    display_name: Optional[str] = typer.Option(
        None, "--display-name", "-d", help="New display name"
    ),
    metadata: Optional[str] = typer.Option(
        None, "--metadata", "-m", help="Metadata JSON (replaces existing)"
    ),
) -> None:
    """
    Update an organization.

    Example:
        $ idm orgs update org_123 --display-name "Acme Inc"
    """
    data: Dict[str, Any] = {}
    if name is not None:
        data["name"] = name
    if display_name is not None:
        data["display_name"] = display_name
    metadata_dict = _parse_metadata(metadata)
    if metadata_dict is not None:
        data["metadata"] = metadata_dict

    if not data:
        console.print("[yellow]Nothing to update[/yellow]\n")
        raise typer.Exit(1)

    console.print("\n[bold cyan]Updating Organization[/bold cyan]\n")

    _run(_update_org(org_id, data))


async def _update_org(org_id: str, data: Dict[str, Any]) -> None:
    """Internal async function to update organization."""
    client = await ManagementClient.create()
    try:
        org = await client.organizations.update({"id": org_id}, data)
    finally:
        await client.close()

    console.print("[green]✓[/green] Organization updated\n")
    _print_org(org)


def orgs_delete_command(
    org_id: str = typer.Argument(..., help="Organization ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """
    Delete an organization.

    Example:
        $ idm orgs delete org_123 --yes
    """
    if not yes:
        typer.confirm(f"Delete organization {org_id}?", abort=True)

    _run(_delete_org(org_id))


async def _delete_org(org_id: str) -> None:
    """Internal async function to delete organization."""
    client = await ManagementClient.create()
    try:
        await client.organizations.delete({"id": org_id})
    finally:
        await client.close()

    console.print(f"[green]✓[/green] Organization {org_id} deleted\n")
