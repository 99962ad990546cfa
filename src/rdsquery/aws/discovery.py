"""Candidate discovery: DB clusters from RDS, secrets from Secrets Manager."""

from __future__ import annotations

import asyncio

from botocore.exceptions import BotoCoreError, ClientError
from loguru import logger

from rdsquery.aws._base import CandidateProvider, Candidates, Cluster, Secret
from rdsquery.aws._session import AwsClients
from rdsquery.errors import RemoteFailure


class RdsDiscovery:
    """Lists clusters and secrets for one account/region."""

    def __init__(self, clients: AwsClients) -> None:
        self._clients = clients

    def list_clusters(self) -> list[Cluster]:
        clusters: list[Cluster] = []
        try:
            paginator = self._clients.rds().get_paginator("describe_db_clusters")
            for page in paginator.paginate():
                logger.trace(f"DescribeDBClusters page: {page}")
                for c in page.get("DBClusters", []):
                    clusters.append(
                        Cluster(
                            identifier=c.get("DBClusterIdentifier", ""),
                            arn=c.get("DBClusterArn", ""),
                            resource_id=c.get("DbClusterResourceId", ""),
                            engine=c.get("Engine"),
                        )
                    )
        except (ClientError, BotoCoreError) as e:
            logger.debug(f"DescribeDBClusters failed: {e}")
            raise RemoteFailure("lookup clusters", str(e)) from e

        logger.info(f"Found {len(clusters)} DB clusters")
        return clusters

    def list_secrets(self) -> list[Secret]:
        secrets: list[Secret] = []
        try:
            paginator = self._clients.secrets_manager().get_paginator("list_secrets")
            for page in paginator.paginate():
                logger.trace(f"ListSecrets page: {page}")
                for s in page.get("SecretList", []):
                    if "Name" in s and "ARN" in s:
                        secrets.append(Secret(name=s["Name"], arn=s["ARN"]))
        except (ClientError, BotoCoreError) as e:
            logger.debug(f"ListSecrets failed: {e}")
            raise RemoteFailure("lookup secrets", str(e)) from e

        logger.info(f"Found {len(secrets)} secrets")
        return secrets


async def fetch_candidates(provider: CandidateProvider) -> Candidates:
    """Fetch clusters and secrets concurrently; both must succeed.

    A cluster lookup failure is reported ahead of a secret lookup failure.
    """
    clusters, secrets = await asyncio.gather(
        asyncio.to_thread(provider.list_clusters),
        asyncio.to_thread(provider.list_secrets),
        return_exceptions=True,
    )
    if isinstance(clusters, BaseException):
        raise clusters
    if isinstance(secrets, BaseException):
        raise secrets
    return Candidates(clusters=tuple(clusters), secrets=tuple(secrets))
