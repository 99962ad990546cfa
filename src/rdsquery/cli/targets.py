"""The `targets` command group: manage saved targets."""

from __future__ import annotations

import click

from rdsquery.cli._shared import fail
from rdsquery.errors import TargetConfigError
from rdsquery.targets import TARGET_KEYS, list_targets, remove_target, save_target


@click.group()
def targets() -> None:
    """Manage saved targets (~/.query-rds-data/targets.toml)."""


@targets.command("add")
@click.argument("name")
@click.argument("values", nargs=-1, required=True)
def targets_add(name: str, values: tuple[str, ...]) -> None:
    """Add or replace a saved target.

    \b
    Keys: cluster, user, database, region, profile.
    Examples:
      query-rds-data targets add prod cluster=demo user=read_only database=app
      query-rds-data targets add staging cluster=staging region=eu-west-1
    """
    parsed: dict[str, str] = {}
    for v in values:
        if "=" not in v:
            raise click.BadParameter(f"Expected key=value, got '{v}'")
        k, val = v.split("=", 1)
        parsed[k.strip()] = val.strip()

    try:
        path = save_target(name, parsed)
    except TargetConfigError as e:
        fail(e)
    click.echo(f"Saved target '{name}' to {path}")


@targets.command("list")
def targets_list() -> None:
    """List saved targets."""
    try:
        saved = list_targets()
    except TargetConfigError as e:
        fail(e)
    if not saved:
        click.echo("No targets configured.")
        click.echo("Add one: query-rds-data targets add <name> cluster=<id> user=<id>")
        return

    for name, entry in saved.items():
        fields = ", ".join(f"{k}={entry[k]}" for k in TARGET_KEYS if k in entry)
        click.echo(f"  {name}: {fields}")


@targets.command("remove")
@click.argument("name")
def targets_remove(name: str) -> None:
    """Remove a saved target."""
    try:
        removed = remove_target(name)
    except TargetConfigError as e:
        fail(e)
    if not removed:
        click.echo(f"Target '{name}' not found.", err=True)
        raise SystemExit(1)
    click.echo(f"Removed target '{name}'.")
