"""The `ls` command: show discovered clusters and their DB users."""

from __future__ import annotations

import json

import click

from rdsquery.aws.credentials import credentials_for_cluster
from rdsquery.cli._shared import discover, fail, get_connector, hints_from_options, target_options
from rdsquery.errors import QueryRdsDataError
from rdsquery.log import configure_logging


@click.command("ls")
@target_options
@click.option("--format", "output_format", type=click.Choice(["json", "text"]), default="text")
@click.pass_context
def ls(
    ctx: click.Context,
    target: str | None,
    profile: str | None,
    region: str | None,
    cluster: str | None,
    verbose: int,
    output_format: str,
) -> None:
    """List clusters and the DB users that have secrets for them.

    With -c, only that cluster is shown.
    """
    configure_logging(verbose)
    try:
        hints = hints_from_options(
            target=target, cluster=cluster, region=region, profile=profile,
        )
        provider, _ = get_connector(ctx)(hints)
        candidates = discover(provider)
    except QueryRdsDataError as e:
        fail(e)

    clusters = [
        c for c in candidates.clusters if hints.cluster is None or c.identifier == hints.cluster
    ]
    listing = [
        {
            "id": c.identifier,
            "engine": c.engine,
            "users": [
                cred.identifier
                for cred in credentials_for_cluster(c.resource_id, candidates.secrets)
            ],
        }
        for c in clusters
    ]

    if output_format == "json":
        click.echo(json.dumps({"region": hints.region, "clusters": listing}, indent=2))
        return

    if not listing:
        click.echo(f"No DBs found in {hints.region}.")
        return
    for entry in listing:
        engine = f" ({entry['engine']})" if entry["engine"] else ""
        click.echo(f"{entry['id']}{engine}")
        for u in entry["users"]:
            click.echo(f"  {u}")
