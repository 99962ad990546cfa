"""DB user secrets: the `rds-db-credentials/<cluster-resource-id>/<user>` naming convention."""

from __future__ import annotations

from collections.abc import Sequence

from rdsquery.aws._base import Credential, Secret

SECRET_PREFIX = "rds-db-credentials/"


def user_id(secret_name: str) -> str:
    """The DB user part of a secret name (everything after the second slash)."""
    parts = secret_name.split("/", 2)
    return parts[-1] if len(parts) == 3 else ""


def credentials_for_cluster(resource_id: str, secrets: Sequence[Secret]) -> list[Credential]:
    """Secrets belonging to one cluster, in provider order."""
    prefix = f"{SECRET_PREFIX}{resource_id}/"
    return [
        Credential(identifier=user_id(s.name), secret=s)
        for s in secrets
        if s.name.startswith(prefix)
    ]
