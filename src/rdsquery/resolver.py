"""Narrow discovered candidates down to one cluster and one DB user.

Pure functions only: hints arrive as plain values, candidates as already
fetched sequences. Nothing here reads the environment or talks to AWS.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, TypeVar

from rdsquery.aws._base import Candidates, Cluster, Credential
from rdsquery.aws.credentials import credentials_for_cluster
from rdsquery.errors import Ambiguous, NoMatch, NotFound, ResolutionError

CLUSTER = "DB"
CREDENTIAL = "DB user"


class _Identified(Protocol):
    @property
    def identifier(self) -> str: ...


C = TypeVar("C", bound=_Identified)

# A resolved value, or the reason it could not be resolved.
Outcome = C | ResolutionError


def resolve(hint: str | None, candidates: Sequence[str], kind: str) -> str:
    """Pick exactly one identifier, honoring an optional exact-match hint.

    Raises NotFound when there are no candidates, NoMatch when the hint
    matches none of them, and Ambiguous when there is no hint and more
    than one candidate. Matching is exact and case-sensitive.
    """
    if not candidates:
        raise NotFound(kind=kind)
    if hint is not None:
        if hint in candidates:
            return hint
        raise NoMatch(kind=kind, hint=hint, available=list(candidates))
    if len(candidates) == 1:
        return candidates[0]
    raise Ambiguous(kind=kind, available=list(candidates))


def pick(hint: str | None, candidates: Sequence[C], kind: str) -> C:
    """`resolve` over objects with an `identifier`; the first of equal ids wins."""
    by_id: dict[str, C] = {}
    for c in candidates:
        by_id.setdefault(c.identifier, c)
    return by_id[resolve(hint, [c.identifier for c in candidates], kind)]


def attempt(hint: str | None, candidates: Sequence[C], kind: str) -> Outcome[C]:
    """Like `pick`, but the failure is returned instead of raised."""
    try:
        return pick(hint, candidates, kind)
    except ResolutionError as e:
        return e


@dataclass(frozen=True)
class QueryTarget:
    cluster: Cluster
    credential: Credential
    database: str | None
    region: str
    sql: str

    @property
    def cluster_id(self) -> str:
        return self.cluster.identifier

    @property
    def credential_id(self) -> str:
        return self.credential.identifier

    @property
    def resource_arn(self) -> str:
        return self.cluster.arn

    @property
    def secret_arn(self) -> str:
        return self.credential.arn


def assemble(
    cluster: Outcome[Cluster],
    credential: Outcome[Credential],
    *,
    database: str | None,
    region: str,
    sql: str,
) -> QueryTarget:
    """Build the target, raising the cluster failure ahead of the credential one."""
    if isinstance(cluster, ResolutionError):
        raise cluster
    if isinstance(credential, ResolutionError):
        raise credential
    return QueryTarget(
        cluster=cluster,
        credential=credential,
        database=database,
        region=region,
        sql=sql,
    )


def select_target(
    candidates: Candidates,
    *,
    cluster_hint: str | None,
    user_hint: str | None,
    database: str | None,
    region: str,
    sql: str,
) -> QueryTarget:
    """Resolve the cluster, then the DB user among that cluster's secrets."""
    cluster = attempt(cluster_hint, candidates.clusters, CLUSTER)
    users: list[Credential] = []
    if isinstance(cluster, Cluster):
        users = credentials_for_cluster(cluster.resource_id, candidates.secrets)
    credential = attempt(user_hint, users, CREDENTIAL)
    return assemble(cluster, credential, database=database, region=region, sql=sql)
