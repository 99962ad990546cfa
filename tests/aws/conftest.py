"""boto3 clients wired to botocore stubs; no network, no real credentials."""

from __future__ import annotations

import boto3
import pytest
from botocore.stub import Stubber

from rdsquery.aws._session import AwsClients


@pytest.fixture
def clients() -> AwsClients:
    session = boto3.Session(
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
        region_name="us-east-1",
    )
    return AwsClients("us-east-1", session=session)


@pytest.fixture
def stub(clients):
    """Activate a Stubber on one service client: `stub("rds")`."""
    stubbers: list[Stubber] = []

    def _stub(service: str) -> Stubber:
        stubber = Stubber(clients.client(service))
        stubber.activate()
        stubbers.append(stubber)
        return stubber

    yield _stub
    for s in stubbers:
        s.assert_no_pending_responses()
        s.deactivate()
