"""Saved targets in ~/.query-rds-data/targets.toml.

A target is a named set of default hints:

    [prod]
    cluster = "demo"
    user = "read_only"
    database = "app"
"""

from __future__ import annotations

import os
import stat
import tomllib
from dataclasses import dataclass
from pathlib import Path

from rdsquery.errors import TargetConfigError

TARGET_KEYS = ("cluster", "user", "database", "region", "profile")

_TARGETS_FILE = Path.home() / ".query-rds-data" / "targets.toml"


@dataclass(frozen=True)
class SavedTarget:
    name: str
    cluster: str | None = None
    user: str | None = None
    database: str | None = None
    region: str | None = None
    profile: str | None = None


def _escape_toml_value(v: str) -> str:
    """Escape a string for a TOML double-quoted value."""
    return v.replace("\\", "\\\\").replace('"', '\\"')


def _write_toml(data: dict[str, dict]) -> None:
    """Serialize targets to TOML and write with restricted permissions."""
    lines: list[str] = []
    for name, entry in data.items():
        lines.append(f'["{_escape_toml_value(name)}"]')
        for k, v in entry.items():
            lines.append(f'{k} = "{_escape_toml_value(str(v))}"')
        lines.append("")

    _TARGETS_FILE.parent.mkdir(parents=True, exist_ok=True, mode=0o700)
    _TARGETS_FILE.write_text("\n".join(lines))
    os.chmod(_TARGETS_FILE, stat.S_IRUSR | stat.S_IWUSR)  # 0600


def _load_file() -> dict:
    if not _TARGETS_FILE.exists():
        return {}
    try:
        return tomllib.loads(_TARGETS_FILE.read_text())
    except tomllib.TOMLDecodeError as e:
        raise TargetConfigError(f"Cannot read {_TARGETS_FILE}: {e}") from e


def list_targets() -> dict[str, dict]:
    """Return all saved targets as {name: {key: value}}."""
    return _load_file()


def get_target(name: str) -> SavedTarget:
    """Look up a saved target. Raises TargetConfigError if it does not exist."""
    data = _load_file()
    entry = data.get(name)
    if not isinstance(entry, dict):
        raise TargetConfigError(f'No saved target named "{name}" in {_TARGETS_FILE}')
    values = {k: str(entry[k]) for k in TARGET_KEYS if entry.get(k)}
    return SavedTarget(name=name, **values)


def save_target(name: str, values: dict[str, str]) -> Path:
    """Save a target to the config file, replacing one with the same name."""
    unknown = sorted(set(values) - set(TARGET_KEYS))
    if unknown:
        raise TargetConfigError(
            f"Unknown target keys: {', '.join(unknown)}. Valid: {', '.join(TARGET_KEYS)}"
        )
    data = _load_file()
    data[name] = dict(values)
    _write_toml(data)
    return _TARGETS_FILE


def remove_target(name: str) -> bool:
    """Remove a saved target. Returns True if removed, False if not found."""
    data = _load_file()
    if name not in data:
        return False
    del data[name]
    if not data:
        _TARGETS_FILE.unlink(missing_ok=True)
    else:
        _write_toml(data)
    return True
