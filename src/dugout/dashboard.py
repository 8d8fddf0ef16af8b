"""LiveDashboard — ties snapshot projection, view state, and the title together.

The dashboard holds only the latest snapshot and the interactive state.
Every render re-derives its content from the snapshot.
"""

from __future__ import annotations

import logging

from rich.align import Align
from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from dugout.config import DashboardConfig
from dugout.core.feed import normalize_feed
from dugout.core.keys import HelpEntry, KeyDispatcher
from dugout.core.state import DashboardState, KeyAction, ViewCycleState, reduce
from dugout.core.title import TitleSink, TitleSync, title_for_snapshot
from dugout.core.views import (
    MATCHUP_VIEWS,
    OverlayContent,
    build_overlay,
    render_matchup,
    view_indicator,
)

logger = logging.getLogger(__name__)


class LiveDashboard:
    """Projection and view-state engine for one live game."""

    def __init__(
        self,
        config: DashboardConfig,
        sink: TitleSink,
        dispatcher: KeyDispatcher | None = None,
        views=MATCHUP_VIEWS,
    ) -> None:
        self._config = config
        self._views = views
        self._snapshot: dict = {}
        self._state = DashboardState(views=ViewCycleState(size=len(views)))
        self._title = TitleSync(sink, enabled=config.title)
        self._dispatcher = dispatcher or KeyDispatcher()
        self._register_keys()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def __enter__(self) -> LiveDashboard:
        self.activate()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.deactivate()

    def activate(self) -> None:
        self._register_keys()
        self._title.activate(self._snapshot or None)

    def deactivate(self) -> None:
        """Release the title and the dashboard's keys."""
        self._title.deactivate()
        keys = self._config.keys
        for key in (keys.prev_view, keys.next_view, keys.toggle_overlay):
            self._dispatcher.unregister(key)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def recompute(self, snapshot: dict | None) -> None:
        """Replace the snapshot wholesale and resync the title."""
        self._snapshot = normalize_feed(snapshot)
        self._title.update(self._snapshot)

    def handle_key(self, key: str) -> bool:
        """Dispatch a key press. Returns False for unbound keys."""
        return self._dispatcher.dispatch(key)

    def apply(self, action: KeyAction) -> None:
        self._state = reduce(self._state, action)
        logger.debug(
            "%s -> view %d, overlay %s",
            action.value,
            self._state.views.index,
            "open" if self._state.overlay.open else "closed",
        )
        self._register_keys()

    def _register_keys(self) -> None:
        keys = self._config.keys
        overlay_label = "Close Stats" if self._state.overlay.open else "Advanced Stats"
        for key, action, label in (
            (keys.prev_view, KeyAction.PREV_VIEW, "Prev View"),
            (keys.next_view, KeyAction.NEXT_VIEW, "Next View"),
            (keys.toggle_overlay, KeyAction.TOGGLE_OVERLAY, overlay_label),
        ):
            self._dispatcher.register(
                key,
                lambda action=action: self.apply(action),
                HelpEntry(key=key, label=label),
            )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def snapshot(self) -> dict:
        return self._snapshot

    @property
    def state(self) -> DashboardState:
        return self._state

    @property
    def dispatcher(self) -> KeyDispatcher:
        return self._dispatcher

    @property
    def title_sync(self) -> TitleSync:
        return self._title

    def matchup(self) -> Text:
        return render_matchup(self._snapshot, self._state.views.index, self._views)

    def indicator(self) -> Text:
        return view_indicator(self._state.views.index, self._views)

    def overlay(self) -> OverlayContent | None:
        """Overlay content, or None when closed or the matchup is unknown."""
        if not self._state.overlay.open:
            return None
        return build_overlay(self._snapshot, close_key=self._config.keys.toggle_overlay)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> Group:
        """Build the full display."""
        parts = [self._build_header(), self._build_matchup_panel()]
        overlay_panel = self._build_overlay_panel()
        if overlay_panel is not None:
            parts.append(overlay_panel)
        parts.append(self._build_footer())
        return Group(*parts)

    def _build_header(self) -> Panel:
        state = (self._snapshot.get("status") or {}).get("detailedState", "")
        title = Text(title_for_snapshot(self._snapshot), style="bold")
        sub = Text(state or "No game data", style="dim")
        return Panel(
            Group(Align.center(title), Align.center(sub)),
            border_style="bright_white",
            padding=(0, 1),
        )

    def _build_matchup_panel(self) -> Panel:
        return Panel(
            Group(self.indicator(), self.matchup()),
            title="[bold]Matchup[/bold]",
            border_style="green",
            padding=(0, 1),
        )

    def _build_overlay_panel(self) -> Panel | None:
        content = self.overlay()
        if content is None:
            return None
        layout = Table(show_header=False, show_edge=False, padding=0, expand=True)
        layout.add_column("stats", ratio=55)
        layout.add_column("lineups", ratio=45)
        layout.add_row(content.stats, content.lineups)
        return Panel(layout, border_style="cyan", padding=(0, 1))

    def _build_footer(self) -> Text:
        footer = Text()
        footer.append(" LIVE ", style="bold white on green")
        for entry in self._dispatcher.help_entries():
            footer.append(f"  {entry.key}", style="bold")
            footer.append(f" {entry.label}", style="dim")
        footer.append(f"  {self._config.keys.quit}", style="bold")
        footer.append(" Quit", style="dim")
        return footer
