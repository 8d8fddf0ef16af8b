"""Tests for LiveDashboard — events in, projections out."""

import io

import pytest
from rich.console import Console

from conftest import make_snapshot
from dugout.config import DashboardConfig
from dugout.core.keys import HelpEntry, KeyDispatcher
from dugout.core.views import NO_DATA
from dugout.dashboard import LiveDashboard


@pytest.fixture
def dashboard(sink):
    return LiveDashboard(DashboardConfig(), sink)


def _labels(dashboard):
    return {e.key: e.label for e in dashboard.dispatcher.help_entries()}


def _render_to_text(dashboard) -> str:
    console = Console(file=io.StringIO(), width=120, color_system=None)
    console.print(dashboard.render())
    return console.file.getvalue()


class TestKeys:
    def test_registers_three_actions(self, dashboard):
        assert dashboard.dispatcher.help_entries() == [
            HelpEntry("[", "Prev View"),
            HelpEntry("]", "Next View"),
            HelpEntry("a", "Advanced Stats"),
        ]

    def test_view_cycle_keys(self, dashboard):
        dashboard.handle_key("]")
        dashboard.handle_key("]")
        assert dashboard.state.views.index == 2
        assert dashboard.indicator().plain == "Advanced Pitching 3/4"
        dashboard.handle_key("[")
        dashboard.handle_key("[")
        dashboard.handle_key("[")
        assert dashboard.state.views.index == 3

    def test_overlay_label_follows_state(self, dashboard):
        dashboard.handle_key("a")
        assert dashboard.state.overlay.open
        assert _labels(dashboard)["a"] == "Close Stats"
        dashboard.handle_key("a")
        assert _labels(dashboard)["a"] == "Advanced Stats"

    def test_unbound_key(self, dashboard):
        assert dashboard.handle_key("z") is False

    def test_teardown_releases_keys(self, sink):
        dispatcher = KeyDispatcher()
        dispatcher.register("?", lambda: None, HelpEntry("?", "Help"))
        with LiveDashboard(DashboardConfig(), sink, dispatcher=dispatcher) as dashboard:
            assert dashboard.handle_key("]") is True
        assert dashboard.handle_key("]") is False
        assert dispatcher.help_entries() == [HelpEntry("?", "Help")]

    def test_reactivate_restores_keys(self, sink):
        dashboard = LiveDashboard(DashboardConfig(), sink)
        with dashboard:
            pass
        with dashboard:
            assert dashboard.handle_key("a") is True
            assert dashboard.state.overlay.open

    def test_custom_bindings(self, sink):
        config = DashboardConfig()
        config.keys.toggle_overlay = "s"
        dashboard = LiveDashboard(config, sink)
        assert dashboard.handle_key("a") is False
        dashboard.handle_key("s")
        assert dashboard.state.overlay.open


class TestProjection:
    def test_matchup_follows_view(self, dashboard, snapshot):
        dashboard.recompute(snapshot)
        assert dashboard.matchup().plain.startswith("BOS Pitching:")
        dashboard.handle_key("]")
        assert dashboard.matchup().plain.startswith("BATTER: Aaron Judge")

    def test_snapshot_replaced_wholesale(self, dashboard):
        dashboard.recompute(make_snapshot())
        dashboard.recompute(make_snapshot(batter_id=None))
        assert dashboard.matchup().plain == NO_DATA

    def test_overlay_closed_by_default(self, dashboard, snapshot):
        dashboard.recompute(snapshot)
        assert dashboard.overlay() is None

    def test_overlay_open(self, dashboard, snapshot):
        dashboard.recompute(snapshot)
        dashboard.handle_key("a")
        assert "PITCHER: Brayan Bello" in dashboard.overlay().stats.plain

    def test_overlay_open_without_batter(self, dashboard):
        dashboard.recompute(make_snapshot(batter_id=None))
        dashboard.handle_key("a")
        assert dashboard.state.overlay.open
        assert dashboard.overlay() is None

    def test_accepts_live_feed_shape(self, dashboard, snapshot):
        dashboard.recompute({
            "gameData": {"status": snapshot["status"], "teams": snapshot["teams"]},
            "liveData": {
                "linescore": snapshot["linescore"],
                "plays": {"currentPlay": snapshot["currentPlay"]},
                "boxscore": {"teams": snapshot["boxscore"]},
            },
        })
        assert dashboard.snapshot == snapshot


class TestTitle:
    def test_lifecycle(self, sink, snapshot):
        with LiveDashboard(DashboardConfig(), sink) as dashboard:
            dashboard.recompute(snapshot)
            dashboard.recompute(make_snapshot(detailed_state="Final"))
        assert sink.published == ["NYY 5 - BOS 3 ▲ 7", "NYY 5 - BOS 3F"]
        assert sink.restores == 1

    def test_activate_without_snapshot_publishes_nothing(self, sink):
        with LiveDashboard(DashboardConfig(), sink):
            pass
        assert sink.calls == [("restore", None)]

    def test_title_disabled(self, sink, snapshot):
        with LiveDashboard(DashboardConfig(title=False), sink) as dashboard:
            dashboard.recompute(snapshot)
        assert sink.calls == []

    def test_keys_do_not_touch_title(self, sink, snapshot):
        with LiveDashboard(DashboardConfig(), sink) as dashboard:
            dashboard.recompute(snapshot)
            dashboard.handle_key("]")
            dashboard.handle_key("a")
        assert len(sink.published) == 1


class TestRender:
    def test_render_contains_sections(self, dashboard, snapshot):
        dashboard.recompute(snapshot)
        dashboard.handle_key("a")
        out = _render_to_text(dashboard)
        assert "NYY 5 - BOS 3 ▲ 7" in out
        assert "Basic 1/4" in out
        assert "Advanced Stats & Lineup" in out
        assert "Close Stats" in out

    def test_render_empty_snapshot(self, dashboard):
        out = _render_to_text(dashboard)
        assert "No game data" in out
        assert NO_DATA in out
