"""Tests for the DB user secret naming convention."""

from rdsquery.aws._base import Secret
from rdsquery.aws.credentials import credentials_for_cluster, user_id


def _secret(name: str) -> Secret:
    return Secret(name=name, arn=f"arn:{name}")


def test_user_id_is_third_path_part():
    assert user_id("rds-db-credentials/cluster-ABC/admin") == "admin"
    assert user_id("rds-db-credentials/cluster-ABC/team/reader") == "team/reader"
    assert user_id("not-a-db-secret") == ""


def test_credentials_filtered_by_resource_id_in_order():
    secrets = [
        _secret("rds-db-credentials/cluster-ABC/read_only"),
        _secret("rds-db-credentials/cluster-XYZ/admin"),
        _secret("some/other/secret"),
        _secret("rds-db-credentials/cluster-ABC/admin"),
        _secret("rds-db-credentials/cluster-ABCD/admin"),
    ]
    creds = credentials_for_cluster("cluster-ABC", secrets)
    assert [c.identifier for c in creds] == ["read_only", "admin"]
    assert creds[0].arn == "arn:rds-db-credentials/cluster-ABC/read_only"


def test_no_secrets():
    assert credentials_for_cluster("cluster-ABC", []) == []
