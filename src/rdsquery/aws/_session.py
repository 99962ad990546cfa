"""boto3 session and lazily created service clients."""

from __future__ import annotations

import threading

import boto3
from botocore.config import Config
from loguru import logger

_DEFAULT_CONFIG = Config(user_agent_extra="query-rds-data")


class AwsClients:
    """Creates the RDS, Secrets Manager and RDS Data clients on first use.

    boto3 sessions are not thread-safe, clients are. Client creation is
    serialized so the two discovery calls can run on worker threads.
    """

    def __init__(
        self,
        region: str,
        profile: str | None = None,
        *,
        session: boto3.Session | None = None,
        config: Config | None = None,
    ) -> None:
        self.region = region
        self.profile = profile
        self._session = session
        self._config = config or _DEFAULT_CONFIG
        self._clients: dict[str, object] = {}
        self._lock = threading.Lock()

    def client(self, service: str):
        with self._lock:
            if service not in self._clients:
                if self._session is None:
                    self._session = boto3.Session(
                        profile_name=self.profile, region_name=self.region
                    )
                self._clients[service] = self._session.client(
                    service, region_name=self.region, config=self._config
                )
                logger.debug(
                    f"Created {service} client with profile: {self.profile or 'default'}, "
                    f"region: {self.region}"
                )
            return self._clients[service]

    def rds(self):
        return self.client("rds")

    def secrets_manager(self):
        return self.client("secretsmanager")

    def rds_data(self):
        return self.client("rds-data")
