"""Terminal title synchronization.

The window title shows a compact score line (``"NYY 5 - BOS 3 ▲ 7"``)
while a dashboard is active. The title is a process-wide resource: one
``TitleSync`` owns the sink at a time and restores it on teardown.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from rich.console import Console

from dugout.core.selectors import select_game_status, select_linescore, select_teams

logger = logging.getLogger(__name__)

TOP_MARKER = "▲"
BOTTOM_MARKER = "▼"

_STATE_SUFFIXES = {
    "Postponed": "PPD",
    "Cancelled": "C",
    "Final": "F",
}
_NOT_STARTED = ("Pre-Game", "Warmup")


def inning_suffix(status: dict, linescore: dict) -> str:
    """Suffix appended to the score line for the current game phase."""
    state = status.get("detailedState")
    if state in _STATE_SUFFIXES:
        return _STATE_SUFFIXES[state]
    if state in _NOT_STARTED:
        return ""
    inning = linescore.get("currentInning")
    if not inning:
        return ""
    marker = TOP_MARKER if linescore.get("isTopInning") else BOTTOM_MARKER
    return f" {marker} {inning}"


def compute_title(status: dict, linescore: dict, teams: dict) -> str:
    """``"<away> <runs> - <home> <runs><suffix>"``; absent runs show as 0."""
    score = linescore.get("teams") or {}
    away_runs = (score.get("away") or {}).get("runs") or 0
    home_runs = (score.get("home") or {}).get("runs") or 0
    away = (teams.get("away") or {}).get("abbreviation", "")
    home = (teams.get("home") or {}).get("abbreviation", "")
    return f"{away} {away_runs} - {home} {home_runs}{inning_suffix(status, linescore)}"


def title_for_snapshot(snapshot: dict | None) -> str:
    return compute_title(
        select_game_status(snapshot),
        select_linescore(snapshot),
        select_teams(snapshot),
    )


class TitleSinkBusyError(RuntimeError):
    """Raised when a second owner tries to claim an owned title sink."""


class TitleSink(ABC):
    """Process-wide title target with single-owner access."""

    def __init__(self) -> None:
        self._owner = None

    @property
    def owner(self):
        return self._owner

    def claim(self, owner) -> None:
        if self._owner is not None and self._owner is not owner:
            raise TitleSinkBusyError(f"title sink already owned by {self._owner!r}")
        self._owner = owner

    def release(self, owner) -> None:
        """Restore the title and drop ownership. No-op for non-owners."""
        if self._owner is not owner:
            return
        self._owner = None
        self.restore()

    @abstractmethod
    def publish(self, title: str) -> None: ...

    @abstractmethod
    def restore(self) -> None: ...


class TerminalTitleSink(TitleSink):
    """Sets the terminal window title through rich."""

    def __init__(self, console: Console, default_title: str = "dugout") -> None:
        super().__init__()
        self._console = console
        self._default_title = default_title

    def publish(self, title: str) -> None:
        self._console.set_window_title(title)

    def restore(self) -> None:
        self._console.set_window_title(self._default_title)


class TitleSync:
    """Keeps the title sink in step with the snapshot while active.

    Use as a context manager so teardown restores the title on every exit
    path::

        with TitleSync(sink, enabled=config.title) as sync:
            sync.update(snapshot)

    When enabled, activation claims the sink whether or not anything is
    published, and deactivation restores it exactly once.
    """

    def __init__(self, sink: TitleSink, enabled: bool = True) -> None:
        self._sink = sink
        self._enabled = enabled
        self._active = False
        self._holding = False

    @property
    def active(self) -> bool:
        return self._active

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = value
        if self._active:
            self._sync_ownership()

    def activate(self, snapshot: dict | None = None) -> None:
        if self._active:
            return
        self._active = True
        self._sync_ownership()
        if snapshot is not None:
            self.update(snapshot)

    def update(self, snapshot: dict | None) -> None:
        if not self._active or not self._holding:
            return
        title = title_for_snapshot(snapshot)
        logger.debug("Publishing title %r", title)
        self._sink.publish(title)

    def deactivate(self) -> None:
        if not self._active:
            return
        self._active = False
        self._drop()

    def _sync_ownership(self) -> None:
        if self._enabled and not self._holding:
            self._sink.claim(self)
            self._holding = True
        elif not self._enabled and self._holding:
            self._drop()

    def _drop(self) -> None:
        if self._holding:
            self._holding = False
            logger.debug("Restoring title")
            self._sink.release(self)

    def __enter__(self) -> TitleSync:
        self.activate()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.deactivate()
