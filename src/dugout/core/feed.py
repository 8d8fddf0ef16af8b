"""Snapshot loading.

Snapshots arrive either in the flat dashboard shape (``status``,
``linescore``, ``teams``, ``currentPlay``, ``boxscore``) or as a full MLB
Stats API live feed (``gameData`` / ``liveData``). Both are normalized to
the flat shape.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def normalize_feed(raw: dict | None) -> dict:
    """Project a live-feed document onto the flat snapshot shape."""
    if not raw:
        return {}
    if "gameData" not in raw and "liveData" not in raw:
        return raw
    game_data = raw.get("gameData") or {}
    live_data = raw.get("liveData") or {}
    return {
        "status": game_data.get("status") or {},
        "teams": game_data.get("teams") or {},
        "linescore": live_data.get("linescore") or {},
        "currentPlay": (live_data.get("plays") or {}).get("currentPlay") or {},
        "boxscore": (live_data.get("boxscore") or {}).get("teams") or {},
    }


def load_snapshot(path: Path) -> dict:
    """Read and normalize a snapshot JSON file."""
    with open(path, encoding="utf-8") as f:
        return normalize_feed(json.load(f))


class SnapshotWatcher:
    """Polls a snapshot file and yields a new snapshot when it changes."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._mtime: float | None = None

    @property
    def path(self) -> Path:
        return self._path

    def poll(self) -> dict | None:
        """Return the new snapshot if the file changed since the last poll."""
        try:
            mtime = self._path.stat().st_mtime
        except FileNotFoundError:
            return None
        if mtime == self._mtime:
            return None
        try:
            snapshot = load_snapshot(self._path)
        except FileNotFoundError:
            return None
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            # Partial write, will catch next poll
            logger.debug("Snapshot %s not readable yet: %s", self._path, exc)
            return None
        if not isinstance(snapshot, dict):
            logger.warning("Ignoring snapshot %s: expected an object", self._path)
            self._mtime = mtime
            return None
        self._mtime = mtime
        return snapshot
