"""Render a ResultSet as csv, json or raw Data API JSON."""

from __future__ import annotations

import base64
import csv
import enum
import io
import json

from rdsquery.aws._base import ResultSet


class OutputFormat(enum.Enum):
    CSV = "csv"
    JSON = "json"
    RAW = "raw"


def _jsonable(value: object) -> object:
    if isinstance(value, bytes):
        return base64.b64encode(value).decode("ascii")
    if isinstance(value, list):
        return [_jsonable(v) for v in value]
    return value


def _csv_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, bytes | list):
        jv = _jsonable(value)
        return jv if isinstance(jv, str) else json.dumps(jv, ensure_ascii=False)
    return str(value)


def render_csv(result: ResultSet) -> str:
    """Header line then one line per row; NULL renders as an empty field."""
    buf = io.StringIO()
    updated = result.records_updated
    if updated is not None and (updated > 0 or not result.columns):
        buf.write(f"number_of_records_updated: {updated}\n")
    if result.columns:
        writer = csv.writer(buf, lineterminator="\n")
        writer.writerow(result.columns)
        for row in result.rows:
            writer.writerow(_csv_text(v) for v in row)
    return buf.getvalue()


def _record(columns: list[str], row: list[object]) -> str:
    # Built by hand so duplicate column names survive, in order.
    pairs = (
        f"{json.dumps(k, ensure_ascii=False)}:"
        f"{json.dumps(_jsonable(v), ensure_ascii=False, separators=(',', ':'))}"
        for k, v in zip(columns, row, strict=False)
    )
    return "{" + ",".join(pairs) + "}"


def render_json(result: ResultSet) -> str:
    """One object per row, keys in column order: `[{"id":1,"name":"Bruce"}]`."""
    return "[" + ",".join(_record(result.columns, row) for row in result.rows) + "]"


def render_raw(result: ResultSet) -> str:
    """The Data API response as pretty JSON, blobs base64-encoded."""
    return json.dumps(result.raw, indent=2, default=_raw_default)


def _raw_default(value: object) -> object:
    if isinstance(value, bytes):
        return base64.b64encode(value).decode("ascii")
    return str(value)


def render(result: ResultSet, output_format: OutputFormat) -> str:
    if output_format is OutputFormat.JSON:
        return render_json(result)
    if output_format is OutputFormat.RAW:
        return render_raw(result)
    return render_csv(result)
