"""Shared options and helpers for the query and ls commands."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import NoReturn

import click
from loguru import logger

from rdsquery.aws._base import CandidateProvider, Candidates, QueryExecutor
from rdsquery.aws._session import AwsClients
from rdsquery.aws.data_api import DataApiExecutor
from rdsquery.aws.discovery import RdsDiscovery, fetch_candidates
from rdsquery.config import Hints, build_hints
from rdsquery.errors import QueryRdsDataError
from rdsquery.targets import get_target

Connector = Callable[[Hints], tuple[CandidateProvider, QueryExecutor]]


def aws_connector(hints: Hints) -> tuple[CandidateProvider, QueryExecutor]:
    clients = AwsClients(hints.region, hints.profile)
    return RdsDiscovery(clients), DataApiExecutor(clients)


def target_options(f):
    """Hint options shared by every command that talks to a cluster."""
    decorators = [
        click.option(
            "-t", "--target", envvar="QUERY_RDS_DATA_TARGET", default=None,
            help="Saved target supplying default hints.",
        ),
        click.option(
            "-p", "--aws-profile", "profile", envvar="AWS_PROFILE", default=None,
            help="AWS profile from ~/.aws/config.",
        ),
        click.option(
            "-r", "--aws-region", "region", envvar="AWS_DEFAULT_REGION", default=None,
            help="AWS region to target. [default: us-east-1]",
        ),
        click.option(
            "-c", "--db-cluster-identifier", "cluster", envvar="AWS_RDS_CLUSTER", default=None,
            help="RDS cluster identifier.",
        ),
        click.option(
            "-v", "--verbose", count=True,
            help="Increase logging verbosity (-v, -vv, -vvv).",
        ),
    ]
    for decorator in reversed(decorators):
        f = decorator(f)
    return f


def user_option(f):
    """The DB user hint, for commands that resolve a credential."""
    return click.option(
        "-u", "--db-user-identifier", "user", envvar="AWS_RDS_USER", default=None,
        help="DB user identifier (the last part of the secret name).",
    )(f)


def hints_from_options(
    *,
    target: str | None,
    cluster: str | None,
    user: str | None = None,
    database: str | None = None,
    region: str | None,
    profile: str | None,
) -> Hints:
    """Settle hints from options, filling gaps from the saved target."""
    saved = get_target(target) if target else None
    hints = build_hints(
        cluster=cluster, user=user, database=database,
        region=region, profile=profile, saved=saved,
    )
    logger.debug(f"Hints: {hints}")
    return hints


def get_connector(ctx: click.Context) -> Connector:
    """The AWS connector, replaceable through `obj={"connect": ...}`."""
    obj = ctx.find_root().obj
    if isinstance(obj, dict) and "connect" in obj:
        return obj["connect"]
    return aws_connector


def discover(provider: CandidateProvider) -> Candidates:
    return asyncio.run(fetch_candidates(provider))


def fail(error: QueryRdsDataError) -> NoReturn:
    message = " ".join(str(error).split("\n"))
    click.echo(f"Error: {message}", err=True)
    raise SystemExit(1)
