"""
idm CLI - Command-line interface for the identity-management API.

Usage:
    idm orgs create         Create an organization
    idm orgs list           List organizations
    idm orgs get            Show an organization
    idm orgs update         Update an organization
    idm orgs delete         Delete an organization

Configuration is read from IDM_* environment variables or a .env file.
"""

import logging

import typer

from .commands import orgs

# Create the main Typer app
app = typer.Typer(
    name="idm",
    help="Identity-management API client",
    add_completion=False,
)

# Create orgs subcommand group
orgs_app = typer.Typer(help="Manage organizations")
orgs_app.command(name="create")(orgs.orgs_create_command)
orgs_app.command(name="list")(orgs.orgs_list_command)
orgs_app.command(name="get")(orgs.orgs_get_command)
orgs_app.command(name="update")(orgs.orgs_update_command)
orgs_app.command(name="delete")(orgs.orgs_delete_command)
app.add_typer(orgs_app, name="orgs")


@app.callback()
def callback(
    debug: bool = typer.Option(False, "--debug", help="Log HTTP requests"),
) -> None:
    """
    idm - manage organizations from the command line.
    """
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


if __name__ == "__main__":
    app()
