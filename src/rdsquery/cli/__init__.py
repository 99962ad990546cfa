"""CLI entry point for `query-rds-data`."""

from __future__ import annotations

import click

from rdsquery.cli.ls import ls
from rdsquery.cli.query import query
from rdsquery.cli.targets import targets


@click.group()
@click.version_option(package_name="query-rds-data")
def main() -> None:
    """query-rds-data: query Amazon RDS through the Data API."""


main.add_command(query)
main.add_command(ls)
main.add_command(targets)
