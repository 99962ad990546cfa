"""Reject empty or unparsable SQL before it reaches the Data API."""

from __future__ import annotations

import enum

import sqlglot
from sqlglot import exp

from rdsquery.errors import InvalidQuery


class StatementType(enum.Enum):
    READ = "read"
    DML = "dml"
    DDL = "ddl"
    OTHER = "other"  # SET, SHOW, CALL, anything sqlglot keeps as a Command


_READ_TYPES = (exp.Select, exp.Union, exp.Intersect, exp.Except)
_DML_TYPES = (exp.Insert, exp.Update, exp.Delete, exp.Merge)
_DDL_TYPES = (exp.Create, exp.Drop, exp.Alter, exp.TruncateTable)

_ENGINE_DIALECTS = {
    "aurora-postgresql": "postgres",
    "aurora-mysql": "mysql",
    "aurora": "mysql",
}


def dialect_for(engine: str | None) -> str | None:
    """sqlglot dialect for an RDS engine name, None when unknown."""
    if engine is None:
        return None
    return _ENGINE_DIALECTS.get(engine.lower())


def require_sql(sql: str) -> str:
    text = sql.strip()
    if not text:
        raise InvalidQuery("Empty query")
    return text


def classify(statement: exp.Expression) -> StatementType:
    if isinstance(statement, _READ_TYPES):
        return StatementType.READ
    if isinstance(statement, _DML_TYPES):
        return StatementType.DML
    if isinstance(statement, _DDL_TYPES):
        return StatementType.DDL
    return StatementType.OTHER


def _parse_error_message(e: sqlglot.errors.ParseError) -> str:
    if not e.errors:
        return str(e).splitlines()[0]
    first = e.errors[0]
    return (
        f"{first.get('description', 'parse error')} "
        f"(line {first.get('line')}, column {first.get('col')})"
    )


def check_sql(sql: str, *, dialect: str | None = None) -> StatementType:
    """Parse a single statement and classify it.

    Raises InvalidQuery for empty text, a syntax error, or more than one
    statement (the Data API runs exactly one).
    """
    text = require_sql(sql)
    try:
        statements = sqlglot.parse(text, dialect=dialect)
    except sqlglot.errors.ParseError as e:
        raise InvalidQuery(f"Invalid SQL: {_parse_error_message(e)}") from e
    except sqlglot.errors.SqlglotError as e:
        raise InvalidQuery(f"Invalid SQL: {str(e).splitlines()[0]}") from e

    # Trailing semicolons parse as None.
    statements = [s for s in statements if s is not None]
    if not statements:
        raise InvalidQuery("Empty query")
    if len(statements) > 1:
        raise InvalidQuery(
            f"Multiple statements found ({len(statements)}), only one is allowed per query"
        )
    return classify(statements[0])
