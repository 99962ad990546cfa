"""AWS collaborators: candidate discovery and statement execution."""

from rdsquery.aws._base import (
    CandidateProvider,
    Candidates,
    Cluster,
    Credential,
    QueryExecutor,
    ResultSet,
    Secret,
)

__all__ = [
    "CandidateProvider",
    "Candidates",
    "Cluster",
    "Credential",
    "QueryExecutor",
    "ResultSet",
    "Secret",
]
