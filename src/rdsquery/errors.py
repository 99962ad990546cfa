"""Error taxonomy.

Resolution failures are a closed family: `NotFound`, `NoMatch` and
`Ambiguous`. Each carries the label of what was being resolved ("DB" or
"DB user") plus its own payload, and renders the exact user-facing message.
Match on the class to tell them apart:

    match err:
        case Ambiguous(kind="DB", available=ids): ...
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field


class QueryRdsDataError(Exception):
    """Base for every failure reported to the user as `Error: <message>`."""


def _id_list(ids: list[str]) -> str:
    return "[" + ", ".join(json.dumps(i, ensure_ascii=False) for i in ids) + "]"


@dataclass(eq=False)
class ResolutionError(QueryRdsDataError):
    kind: str

    def __str__(self) -> str:
        return f"{self.kind} resolution failed"


@dataclass(eq=False)
class NotFound(ResolutionError):
    """No candidate exists at all."""

    def __str__(self) -> str:
        return f"No {self.kind}s found"


@dataclass(eq=False)
class NoMatch(ResolutionError):
    """A hint was given but no candidate has that exact identifier."""

    hint: str
    available: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        return f'No {self.kind} matched "{self.hint}", available ids are {_id_list(self.available)}'


@dataclass(eq=False)
class Ambiguous(ResolutionError):
    """No hint and more than one candidate."""

    available: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        return f"Multiple {self.kind}s found, please specify one of {_id_list(self.available)}"


class RemoteFailure(QueryRdsDataError):
    """An AWS call failed. The underlying message is kept verbatim."""

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(f"Failed to {operation}: {message}")
        self.operation = operation
        self.message = message


class InvalidQuery(QueryRdsDataError):
    """The SQL text is empty or cannot be parsed."""


class TargetConfigError(QueryRdsDataError):
    """A saved target is missing or malformed."""
