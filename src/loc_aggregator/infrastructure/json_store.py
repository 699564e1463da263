"""JSON documents on disk: the repository cache and the blacklist.

Both documents are created with their defaults when absent.  Malformed
content is logged and replaced by the defaults rather than failing startup.
"""

from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, ValidationError

from loc_aggregator.domain.entities import CacheEntry, ExclusionRules
from loc_aggregator.domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)


# ── Document schemas ────────────────────────────────────────────────────────


class CacheEntryDocument(BaseModel):
    """On-disk shape of one cache entry."""

    model_config = ConfigDict(populate_by_name=True)

    latest_commit: str | None = Field(alias="latestCommit")
    languages: dict[str, NonNegativeInt]


class BlacklistDocument(BaseModel):
    """On-disk shape of ``blacklist.json``."""

    repos: list[str]
    paths: list[str]
    languages: list[str]


_EMPTY_BLACKLIST: dict[str, list[str]] = {"repos": [], "paths": [], "languages": []}

# Mode a plainly created file would get under the process umask.
_UMASK = os.umask(0)
os.umask(_UMASK)
_NEW_FILE_MODE = 0o666 & ~_UMASK


# ── File helpers ────────────────────────────────────────────────────────────


def atomic_write_json(path: Path, data: Any) -> None:
    """Rewrite *path* with *data* via a temp file and ``os.replace``.

    The rewritten file keeps the permissions of the one it replaces.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            json.dump(data, fh, indent=2)
        mode = stat.S_IMODE(path.stat().st_mode) if path.exists() else _NEW_FILE_MODE
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def load_json_document(path: Path, default: Any) -> Any:
    """Return the parsed JSON object at *path*, or *default*.

    A missing file is created holding *default*.  Unreadable content or a
    non-object top level is logged and *default* is returned.
    """
    if not path.exists():
        atomic_write_json(path, default)
        return default

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Error reading %s: %s", path, exc)
        return default

    if not isinstance(data, dict):
        logger.error("Error reading %s: expected a JSON object", path)
        return default
    return data


# ── Cache store ─────────────────────────────────────────────────────────────


class JsonCacheStore:
    """Concrete CacheStore persisting the whole mapping as one JSON file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> dict[str, CacheEntry]:
        raw = load_json_document(self._path, {})
        entries: dict[str, CacheEntry] = {}
        for full_name, payload in raw.items():
            try:
                doc = CacheEntryDocument.model_validate(payload)
            except ValidationError:
                logger.warning("Skipping malformed cache entry for %s", full_name)
                continue
            entries[full_name] = CacheEntry(
                latest_commit=doc.latest_commit, languages=dict(doc.languages)
            )
        return entries

    def save(self, entries: Mapping[str, CacheEntry]) -> None:
        payload = {
            full_name: CacheEntryDocument(
                latest_commit=entry.latest_commit, languages=entry.languages
            ).model_dump(by_alias=True)
            for full_name, entry in entries.items()
        }
        try:
            atomic_write_json(self._path, payload)
        except OSError as exc:
            raise PersistenceError(f"Could not write {self._path}: {exc}") from exc


# ── Blacklist ───────────────────────────────────────────────────────────────


def load_exclusion_rules(path: Path) -> ExclusionRules:
    """Read ``blacklist.json``; fall back to empty rules if it is malformed."""
    raw = load_json_document(path, _EMPTY_BLACKLIST)
    try:
        doc = BlacklistDocument.model_validate(raw)
    except ValidationError as exc:
        logger.error("Malformed blacklist %s, using defaults: %s", path, exc)
        return ExclusionRules()

    rules = ExclusionRules(
        repos=frozenset(doc.repos),
        paths=tuple(doc.paths),
        languages=frozenset(doc.languages),
    )
    logger.info(
        "Blacklist: %d repos, %d paths, %d languages",
        len(rules.repos),
        len(rules.paths),
        len(rules.languages),
    )
    return rules
