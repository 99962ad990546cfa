"""Root conftest: isolated environment and in-memory AWS fakes."""

from __future__ import annotations

import logging

import pytest
from loguru import logger

from rdsquery.aws._base import Cluster, ResultSet, Secret
from rdsquery.log import InterceptHandler

_ENV_VARS = (
    "AWS_RDS_CLUSTER",
    "AWS_RDS_USER",
    "AWS_RDS_DATABASE",
    "AWS_DEFAULT_REGION",
    "AWS_PROFILE",
    "QUERY_RDS_DATA_TARGET",
)


@pytest.fixture(autouse=True)
def _isolated(monkeypatch, tmp_path):
    """No ambient hints and a private targets file for every test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("rdsquery.targets._TARGETS_FILE", tmp_path / "targets.toml")
    yield
    # Sinks added by a CLI run point at that run's captured stderr.
    logger.remove()
    root = logging.getLogger()
    for handler in [h for h in root.handlers if isinstance(h, InterceptHandler)]:
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)


def cluster(identifier: str, engine: str | None = "aurora-postgresql") -> Cluster:
    return Cluster(
        identifier=identifier,
        arn=f"arn:aws:rds:us-east-1:123456789012:cluster:{identifier}",
        resource_id=f"cluster-{identifier.upper()}",
        engine=engine,
    )


def secret(cluster_id: str, user: str) -> Secret:
    name = f"rds-db-credentials/cluster-{cluster_id.upper()}/{user}"
    return Secret(name=name, arn=f"arn:aws:secretsmanager:us-east-1:123456789012:secret:{name}")


class FakeAws:
    """CandidateProvider and QueryExecutor backed by lists."""

    def __init__(
        self,
        clusters: list[Cluster] | None = None,
        secrets: list[Secret] | None = None,
        result: ResultSet | None = None,
    ) -> None:
        self.clusters = clusters or []
        self.secrets = secrets or []
        self.result = result or ResultSet(columns=[], rows=[])
        self.cluster_error: Exception | None = None
        self.secret_error: Exception | None = None
        self.execute_error: Exception | None = None
        self.executed: list = []
        self.hints = None

    def list_clusters(self) -> list[Cluster]:
        if self.cluster_error is not None:
            raise self.cluster_error
        return list(self.clusters)

    def list_secrets(self) -> list[Secret]:
        if self.secret_error is not None:
            raise self.secret_error
        return list(self.secrets)

    def execute(self, target) -> ResultSet:
        if self.execute_error is not None:
            raise self.execute_error
        self.executed.append(target)
        return self.result

    def connect(self, hints):
        self.hints = hints
        return self, self


@pytest.fixture
def fake_aws() -> FakeAws:
    return FakeAws(
        clusters=[cluster("demo")],
        secrets=[secret("demo", "admin")],
        result=ResultSet(columns=["id", "name"], rows=[[1, "Bruce"]], records_updated=0),
    )


@pytest.fixture
def make_cluster():
    return cluster


@pytest.fixture
def make_secret():
    return secret
