"""Candidate and result types, and the protocols the AWS collaborators implement."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from rdsquery.resolver import QueryTarget


@dataclass(frozen=True)
class Cluster:
    identifier: str
    arn: str
    resource_id: str
    engine: str | None = None


@dataclass(frozen=True)
class Secret:
    name: str
    arn: str


@dataclass(frozen=True)
class Credential:
    """A DB user secret belonging to one cluster."""

    identifier: str  # DB user id, the last part of the secret name
    secret: Secret

    @property
    def arn(self) -> str:
        return self.secret.arn


@dataclass(frozen=True)
class Candidates:
    """Everything discovered for one invocation, in provider order."""

    clusters: tuple[Cluster, ...] = ()
    secrets: tuple[Secret, ...] = ()


@dataclass
class ResultSet:
    """Rows returned by the Data API, reduced to native Python values."""

    columns: list[str]
    rows: list[list[object]]
    records_updated: int | None = None
    raw: dict[str, object] = field(default_factory=dict)


@runtime_checkable
class CandidateProvider(Protocol):
    def list_clusters(self) -> list[Cluster]: ...
    def list_secrets(self) -> list[Secret]: ...


@runtime_checkable
class QueryExecutor(Protocol):
    def execute(self, target: QueryTarget) -> ResultSet: ...
