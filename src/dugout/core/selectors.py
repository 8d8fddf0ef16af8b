"""Accessors for the sub-documents of a game snapshot.

Each selector is total: a missing section comes back as an empty dict so
callers can chain ``.get`` without guarding.
"""


def _section(snapshot: dict | None, key: str) -> dict:
    value = (snapshot or {}).get(key)
    return value if isinstance(value, dict) else {}


def select_game_status(snapshot: dict | None) -> dict:
    return _section(snapshot, "status")


def select_linescore(snapshot: dict | None) -> dict:
    return _section(snapshot, "linescore")


def select_teams(snapshot: dict | None) -> dict:
    return _section(snapshot, "teams")


def select_current_play(snapshot: dict | None) -> dict:
    return _section(snapshot, "currentPlay")


def select_boxscore(snapshot: dict | None) -> dict:
    return _section(snapshot, "boxscore")


def select_matchup_ids(snapshot: dict | None) -> tuple[int | None, int | None]:
    """Return ``(pitcher_id, batter_id)`` for the current play."""
    matchup = select_current_play(snapshot).get("matchup") or {}
    pitcher_id = (matchup.get("pitcher") or {}).get("id")
    batter_id = (matchup.get("batter") or {}).get("id")
    return pitcher_id, batter_id
