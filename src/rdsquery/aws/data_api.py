"""Statement execution through the RDS Data API."""

from __future__ import annotations

from typing import TYPE_CHECKING

from botocore.exceptions import BotoCoreError, ClientError
from loguru import logger

from rdsquery.aws._base import ResultSet
from rdsquery.aws._session import AwsClients
from rdsquery.errors import RemoteFailure

if TYPE_CHECKING:
    from rdsquery.resolver import QueryTarget

_SCALAR_KEYS = ("booleanValue", "longValue", "doubleValue", "stringValue", "blobValue")
_ARRAY_KEYS = ("booleanValues", "longValues", "doubleValues", "stringValues")


def _array_value(array: dict) -> list[object]:
    for key in _ARRAY_KEYS:
        if key in array:
            return list(array[key])
    if "arrayValues" in array:
        return [_array_value(a) for a in array["arrayValues"]]
    return []


def field_value(field: dict) -> object:
    """Collapse a Data API `Field` union into one native value.

    Timestamps, dates and decimals arrive as strings and stay strings.
    """
    if field.get("isNull"):
        return None
    for key in _SCALAR_KEYS:
        if key in field:
            return field[key]
    if "arrayValue" in field:
        return _array_value(field["arrayValue"])
    return None


def column_names(response: dict) -> list[str]:
    return [
        col.get("label") or col.get("name") or "?"
        for col in response.get("columnMetadata") or []
    ]


def to_result_set(response: dict) -> ResultSet:
    raw = {k: v for k, v in response.items() if k != "ResponseMetadata"}
    return ResultSet(
        columns=column_names(response),
        rows=[[field_value(f) for f in record] for record in response.get("records") or []],
        records_updated=response.get("numberOfRecordsUpdated"),
        raw=raw,
    )


class DataApiExecutor:
    def __init__(self, clients: AwsClients) -> None:
        self._clients = clients

    def execute(self, target: QueryTarget) -> ResultSet:
        request: dict[str, object] = {
            "resourceArn": target.resource_arn,
            "secretArn": target.secret_arn,
            "sql": target.sql,
            "includeResultMetadata": True,
            "resultSetOptions": {"decimalReturnType": "STRING"},
        }
        if target.database:
            request["database"] = target.database

        logger.info(f"ExecuteStatement request: {request}")
        try:
            response = self._clients.rds_data().execute_statement(**request)
        except (ClientError, BotoCoreError) as e:
            logger.debug(f"ExecuteStatement failed: {e}")
            raise RemoteFailure("execute statement", str(e)) from e
        logger.debug(f"ExecuteStatement response: {response}")

        return to_result_set(response)
