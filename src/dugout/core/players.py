"""Player resolution across the home and away boxscore rosters."""

from dataclasses import dataclass

PLAYER_KEY_PREFIX = "ID"


def player_key(player_id) -> str:
    """Boxscore roster key for a player id, e.g. ``660271 -> "ID660271"``."""
    return f"{PLAYER_KEY_PREFIX}{player_id}"


@dataclass(frozen=True)
class PlayerMatch:
    """Owning team and roster record for a looked-up player.

    ``player`` is None on a lookup miss; ``team`` is then the away team.
    """

    team: dict
    player: dict | None

    @property
    def found(self) -> bool:
        return self.player is not None


def _roster(boxscore: dict, side: str) -> dict:
    return (boxscore.get(side) or {}).get("players") or {}


def lookup_player(boxscore: dict, teams: dict, player_id) -> PlayerMatch:
    """Resolve a player id: home roster first, otherwise away.

    This is not an existence check. An id missing from both rosters comes
    back as the away team with ``player=None``.
    """
    key = player_key(player_id)
    home_record = _roster(boxscore, "home").get(key)
    if home_record is not None:
        return PlayerMatch(team=teams.get("home") or {}, player=home_record)
    return PlayerMatch(
        team=teams.get("away") or {},
        player=_roster(boxscore, "away").get(key),
    )


def stat(player: dict | None, group: str, category: str, name: str):
    """Read ``player[group][category][name]``, None when any level is absent.

    ``group`` is ``"stats"`` (today) or ``"seasonStats"``; ``category`` is
    ``"batting"`` or ``"pitching"``.
    """
    if not player:
        return None
    return ((player.get(group) or {}).get(category) or {}).get(name)


def full_name(player: dict | None) -> str:
    return ((player or {}).get("person") or {}).get("fullName", "")
