"""Batting order projection.

Turns a team's boxscore ``battingOrder`` (a list of player ids) into
display rows, and formats those rows into the compact two-team lineup
shown in the stats overlay.
"""

import re
from dataclasses import dataclass

from rich.text import Text

from dugout.core.players import player_key

NAME_WIDTH = 20
CURRENT_BATTER_STYLE = "green"

# Leading integer, the way the feed's string fields are usually parsed
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True)
class LineupRow:
    """One batter in a projected lineup."""

    id: int
    name: str
    position: str
    batting_order: str  # raw feed value, e.g. "300" or "301" for a sub
    slot: int
    at_bats: int
    hits: int
    avg: str


def lineup_slot(raw_batting_order, index: int) -> int:
    """Lineup slot from the raw ``battingOrder`` field.

    The raw value encodes slot and substitution order together
    (``"300"`` is the 3rd slot, ``"301"`` its first substitute). When the
    value does not parse or yields 0, fall back to the 1-based ``index``.
    """
    match = _LEADING_INT_RE.match(str(raw_batting_order or ""))
    if match:
        slot = int(match.group(1)) // 100
        if slot:
            return slot
    return index + 1


def project_batting_order(boxscore: dict | None, side: str) -> list[LineupRow]:
    """Build lineup rows for ``side`` ("home" or "away") in batting order.

    Ids with no roster record are dropped; input order is kept.
    """
    if not boxscore or not boxscore.get(side):
        return []
    team = boxscore[side]
    players = team.get("players") or {}

    resolved = []
    for player_id in team.get("battingOrder") or []:
        player = players.get(player_key(player_id))
        if player:
            resolved.append(player)

    rows = []
    for idx, player in enumerate(resolved):
        today = (player.get("stats") or {}).get("batting") or {}
        season = (player.get("seasonStats") or {}).get("batting") or {}
        person = player.get("person") or {}
        raw_order = player.get("battingOrder") or ""
        rows.append(
            LineupRow(
                id=person.get("id"),
                name=person.get("fullName", ""),
                position=(player.get("position") or {}).get("abbreviation") or "",
                batting_order=raw_order,
                slot=lineup_slot(raw_order, idx),
                at_bats=today.get("atBats") or 0,
                hits=today.get("hits") or 0,
                avg=season.get("avg") or ".000",
            )
        )
    return rows


def short_name(name: str, width: int = NAME_WIDTH) -> str:
    """Truncate to ``width`` characters, marking the cut with ``..``."""
    if len(name) > width:
        return name[: width - 2] + ".."
    return name


def format_lineup_compact(
    rows: list[LineupRow],
    batter_id=None,
    is_batting: bool = False,
) -> Text:
    """One line per batter: ``"  3. Name                 1-2"``.

    The current batter is marked with ``*`` and highlighted, but only for
    the team currently at bat.
    """
    text = Text()
    for i, row in enumerate(rows):
        if i:
            text.append("\n")
        is_current = is_batting and batter_id is not None and row.id == batter_id
        prefix = "* " if is_current else "  "
        line = f"{prefix}{row.slot}. {short_name(row.name):<{NAME_WIDTH}} {row.hits}-{row.at_bats}"
        text.append(line, style=CURRENT_BATTER_STYLE if is_current else None)
    return text
