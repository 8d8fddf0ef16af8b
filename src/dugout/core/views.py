"""Matchup renderers and the advanced-stats overlay.

Every renderer takes the resolved pitcher and batter (``PlayerMatch``) and
returns a ``rich.text.Text``. Callers only pass matches whose ``player`` is
set; ``render_matchup`` and ``build_overlay`` handle the misses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from rich.text import Text

from dugout.core.lineup import format_lineup_compact, project_batting_order
from dugout.core.players import PlayerMatch, full_name, lookup_player, stat
from dugout.core.selectors import (
    select_boxscore,
    select_linescore,
    select_matchup_ids,
    select_teams,
)
from dugout.core.stats import format_stat

NO_DATA = "Waiting for the next matchup..."
CELL_WIDTH = 5


def _abbr(match: PlayerMatch) -> str:
    return match.team.get("abbreviation", "")


def _pitching(match: PlayerMatch, group: str, name: str, decimals: int = 0) -> str:
    return format_stat(stat(match.player, group, "pitching", name), decimals)


def _batting(match: PlayerMatch, group: str, name: str, decimals: int = 0) -> str:
    return format_stat(stat(match.player, group, "batting", name), decimals)


def _row(cells: list[tuple[str, str]]) -> str:
    """``| ERA   3.21 | WHIP  1.10 |`` style stat row."""
    parts = [f"{label:<4} {value:>{CELL_WIDTH}}" for label, value in cells]
    return "  | " + " | ".join(parts) + " |"


def _pitcher_rows(p: PlayerMatch) -> tuple[list[str], list[str]]:
    season = [
        _row([
            ("ERA", _pitching(p, "seasonStats", "era", 2)),
            ("WHIP", _pitching(p, "seasonStats", "whip", 2)),
            ("K/9", _pitching(p, "seasonStats", "strikeoutsPer9Inn", 1)),
            ("W-L", f"{_pitching(p, 'seasonStats', 'wins')}-{_pitching(p, 'seasonStats', 'losses')}"),
        ])
    ]
    today = [
        _row([
            ("IP", _pitching(p, "stats", "inningsPitched", 1)),
            ("H", _pitching(p, "stats", "hits")),
            ("ER", _pitching(p, "stats", "earnedRuns")),
        ]),
        _row([
            ("K", _pitching(p, "stats", "strikeOuts")),
            ("BB", _pitching(p, "stats", "baseOnBalls")),
            ("P", _pitching(p, "stats", "pitchesThrown")),
        ]),
    ]
    return season, today


def _batter_rows(b: PlayerMatch) -> tuple[list[str], list[str]]:
    season = [
        _row([
            ("AVG", _batting(b, "seasonStats", "avg", 3)),
            ("OBP", _batting(b, "seasonStats", "obp", 3)),
            ("SLG", _batting(b, "seasonStats", "slg", 3)),
            ("OPS", _batting(b, "seasonStats", "ops", 3)),
        ]),
        _row([
            ("HR", _batting(b, "seasonStats", "homeRuns")),
            ("RBI", _batting(b, "seasonStats", "rbi")),
            ("SB", _batting(b, "seasonStats", "stolenBases")),
            ("AB", _batting(b, "seasonStats", "atBats")),
        ]),
    ]
    today = [
        _row([
            ("H-AB", f"{_batting(b, 'stats', 'hits')}-{_batting(b, 'stats', 'atBats')}"),
            ("RBI", _batting(b, "stats", "rbi")),
            ("R", _batting(b, "stats", "runs")),
        ]),
        _row([
            ("K", _batting(b, "stats", "strikeOuts")),
            ("BB", _batting(b, "stats", "baseOnBalls")),
        ]),
    ]
    return season, today


def _heading(text: Text, label: str, match: PlayerMatch) -> None:
    text.append(f"{label}: {full_name(match.player)} ({_abbr(match)})\n", style="bold")


def _block(text: Text, title: str, rows: list[str]) -> None:
    text.append(f"{title}:\n")
    for row in rows:
        text.append(row + "\n")


# ── Matchup renderers ───────────────────────────────────────────────


def render_basic(pitcher: PlayerMatch, batter: PlayerMatch) -> Text:
    text = Text()
    text.append(f"{_abbr(pitcher)} Pitching: ")
    text.append(full_name(pitcher.player), style="bold")
    text.append(
        f" {_pitching(pitcher, 'stats', 'inningsPitched', 1)} IP,"
        f" {_pitching(pitcher, 'stats', 'pitchesThrown')} P,"
        f" {_pitching(pitcher, 'seasonStats', 'era', 2)} ERA\n"
    )
    text.append(f"{_abbr(batter)} At Bat:   ")
    text.append(full_name(batter.player), style="bold")
    text.append(
        f" {_batting(batter, 'stats', 'hits')}-{_batting(batter, 'stats', 'atBats')},"
        f" {_batting(batter, 'seasonStats', 'avg', 3)} AVG,"
        f" {_batting(batter, 'seasonStats', 'homeRuns')} HR"
    )
    return text


def render_advanced_batting(pitcher: PlayerMatch, batter: PlayerMatch) -> Text:
    text = Text()
    _heading(text, "BATTER", batter)
    season, today = _batter_rows(batter)
    _block(text, "Season", season)
    _block(text, "Today", today)
    text.rstrip()
    return text


def render_advanced_pitching(pitcher: PlayerMatch, batter: PlayerMatch) -> Text:
    text = Text()
    _heading(text, "PITCHER", pitcher)
    season, today = _pitcher_rows(pitcher)
    _block(text, "Season", season)
    _block(text, "Today", today)
    text.rstrip()
    return text


def render_game_stats(pitcher: PlayerMatch, batter: PlayerMatch) -> Text:
    """Today's lines only, pitcher over batter."""
    text = Text()
    _heading(text, "PITCHER", pitcher)
    _, pitcher_today = _pitcher_rows(pitcher)
    for row in pitcher_today:
        text.append(row + "\n")
    _heading(text, "BATTER", batter)
    _, batter_today = _batter_rows(batter)
    for row in batter_today:
        text.append(row + "\n")
    text.rstrip()
    return text


@dataclass(frozen=True)
class MatchupView:
    name: str
    render: Callable[[PlayerMatch, PlayerMatch], Text]


MATCHUP_VIEWS: tuple[MatchupView, ...] = (
    MatchupView("Basic", render_basic),
    MatchupView("Advanced Batting", render_advanced_batting),
    MatchupView("Advanced Pitching", render_advanced_pitching),
    MatchupView("Game Stats", render_game_stats),
)


def resolve_matchup(snapshot: dict | None) -> tuple[PlayerMatch, PlayerMatch] | None:
    """Look up the current pitcher and batter; None when either is unknown."""
    pitcher_id, batter_id = select_matchup_ids(snapshot)
    if pitcher_id is None or batter_id is None:
        return None
    boxscore = select_boxscore(snapshot)
    teams = select_teams(snapshot)
    pitcher = lookup_player(boxscore, teams, pitcher_id)
    batter = lookup_player(boxscore, teams, batter_id)
    if not pitcher.found or not batter.found:
        return None
    return pitcher, batter


def render_matchup(snapshot: dict | None, index: int, views=MATCHUP_VIEWS) -> Text:
    """Render the view at ``index`` for the current matchup."""
    matchup = resolve_matchup(snapshot)
    if matchup is None:
        return Text(NO_DATA, style="dim")
    return views[index].render(*matchup)


def view_indicator(index: int, views=MATCHUP_VIEWS) -> Text:
    """``"Advanced Batting 2/4"``, dim and right-justified."""
    return Text(f"{views[index].name} {index + 1}/{len(views)}", style="dim", justify="right")


# ── Overlay ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class OverlayContent:
    stats: Text
    lineups: Text


def build_overlay(snapshot: dict | None, close_key: str = "a") -> OverlayContent | None:
    """Advanced stats and both lineups for the current matchup.

    Returns None when the pitcher or batter cannot be resolved.
    """
    matchup = resolve_matchup(snapshot)
    if matchup is None:
        return None
    pitcher, batter = matchup
    _, batter_id = select_matchup_ids(snapshot)

    stats = Text()
    stats.append("Advanced Stats & Lineup", style="bold cyan")
    stats.append(f"  (Press '{close_key}' to close)\n\n")
    _heading(stats, "PITCHER", pitcher)
    season, today = _pitcher_rows(pitcher)
    _block(stats, "Season", season)
    _block(stats, "Today", today)
    stats.append("\n")
    _heading(stats, "BATTER", batter)
    season, today = _batter_rows(batter)
    _block(stats, "Season", season)
    _block(stats, "Today", today)

    boxscore = select_boxscore(snapshot)
    teams = select_teams(snapshot)
    away_batting = bool(select_linescore(snapshot).get("isTopInning"))
    lineups = Text()
    for side, is_batting in (("away", away_batting), ("home", not away_batting)):
        if side == "home":
            lineups.append("\n")
        abbr = (teams.get(side) or {}).get("abbreviation", "")
        lineups.append(f"{abbr}{' *' if is_batting else ''}\n", style="bold")
        lineups.append_text(
            format_lineup_compact(
                project_batting_order(boxscore, side),
                batter_id=batter_id,
                is_batting=is_batting,
            )
        )
    return OverlayContent(stats=stats, lineups=lineups)
