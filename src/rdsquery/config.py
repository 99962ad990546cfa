"""Selection hints, settled once from flags, environment and a saved target."""

from __future__ import annotations

from dataclasses import dataclass

from rdsquery.targets import SavedTarget

DEFAULT_REGION = "us-east-1"


@dataclass(frozen=True)
class Hints:
    cluster: str | None = None
    user: str | None = None
    database: str | None = None
    region: str = DEFAULT_REGION
    profile: str | None = None


def _first(*values: str | None) -> str | None:
    for v in values:
        if v:
            return v
    return None


def build_hints(
    *,
    cluster: str | None = None,
    user: str | None = None,
    database: str | None = None,
    region: str | None = None,
    profile: str | None = None,
    saved: SavedTarget | None = None,
) -> Hints:
    """Merge explicit values (flag or env, already settled by click) over a saved target.

    Empty strings count as unset.
    """
    if saved is None:
        saved = SavedTarget(name="")
    return Hints(
        cluster=_first(cluster, saved.cluster),
        user=_first(user, saved.user),
        database=_first(database, saved.database),
        region=_first(region, saved.region) or DEFAULT_REGION,
        profile=_first(profile, saved.profile),
    )
