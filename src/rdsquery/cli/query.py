"""The `query` command: discover → resolve → validate → execute → render."""

from __future__ import annotations

import click
from loguru import logger

from rdsquery.cli._shared import (
    discover,
    fail,
    get_connector,
    hints_from_options,
    target_options,
    user_option,
)
from rdsquery.errors import QueryRdsDataError
from rdsquery.log import configure_logging
from rdsquery.output import OutputFormat, render
from rdsquery.resolver import select_target
from rdsquery.sqlcheck import check_sql, dialect_for, require_sql


@click.command()
@click.argument("sql")
@target_options
@user_option
@click.option(
    "-d", "--database", envvar="AWS_RDS_DATABASE", default=None, help="Database name.",
)
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.CSV.value,
    show_default=True,
    help="Output format.",
)
@click.option("--no-validate", is_flag=True, help="Skip local SQL parsing before execution.")
@click.pass_context
def query(
    ctx: click.Context,
    sql: str,
    target: str | None,
    profile: str | None,
    region: str | None,
    cluster: str | None,
    user: str | None,
    verbose: int,
    database: str | None,
    output_format: str,
    no_validate: bool,
) -> None:
    """Run one SQL statement against an RDS cluster through the Data API.

    The cluster and DB user are picked automatically when only one of each
    exists; otherwise name them with -c and -u.
    """
    configure_logging(verbose)
    try:
        sql = require_sql(sql)
        hints = hints_from_options(
            target=target, cluster=cluster, user=user, database=database,
            region=region, profile=profile,
        )
        provider, executor = get_connector(ctx)(hints)
        candidates = discover(provider)
        query_target = select_target(
            candidates,
            cluster_hint=hints.cluster,
            user_hint=hints.user,
            database=hints.database,
            region=hints.region,
            sql=sql,
        )
        logger.info(
            f"Resolved cluster {query_target.cluster_id!r}, user {query_target.credential_id!r}"
        )
        if not no_validate:
            stmt_type = check_sql(sql, dialect=dialect_for(query_target.cluster.engine))
            logger.info(f"Statement type: {stmt_type.value}")

        result = executor.execute(query_target)
        text = render(result, OutputFormat(output_format.lower()))
    except QueryRdsDataError as e:
        fail(e)

    # CSV text already ends each line; json and raw get one trailing newline.
    click.echo(text, nl=output_format.lower() != OutputFormat.CSV.value)
