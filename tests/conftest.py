"""Shared test fixtures for dugout."""

import pytest

from dugout.core.title import TitleSink

PITCHER_ID = 543037
BATTER_ID = 592450


def make_player(
    player_id,
    name,
    position="P",
    batting_order=None,
    batting=None,
    pitching=None,
    season_batting=None,
    season_pitching=None,
):
    player = {
        "person": {"id": player_id, "fullName": name},
        "position": {"abbreviation": position},
        "stats": {"batting": batting or {}, "pitching": pitching or {}},
        "seasonStats": {"batting": season_batting or {}, "pitching": season_pitching or {}},
    }
    if batting_order is not None:
        player["battingOrder"] = batting_order
    return player


def make_snapshot(
    detailed_state="In Progress",
    inning=7,
    is_top=True,
    away=("NYY", 5),
    home=("BOS", 3),
    pitcher_id=PITCHER_ID,
    batter_id=BATTER_ID,
):
    """Flat snapshot with NYY batting against a BOS pitcher."""
    away_players = {
        f"ID{BATTER_ID}": make_player(
            BATTER_ID, "Aaron Judge", position="RF", batting_order="200",
            batting={"atBats": 3, "hits": 2, "rbi": 1, "runs": 1, "strikeOuts": 0, "baseOnBalls": 1},
            season_batting={
                "avg": ".311", "obp": ".425", "slg": ".650", "ops": "1.075",
                "homeRuns": 41, "rbi": 102, "stolenBases": 8, "atBats": 480,
            },
        ),
        "ID665742": make_player(
            665742, "Juan Soto", position="LF", batting_order="100",
            batting={"atBats": 3, "hits": 1}, season_batting={"avg": ".288"},
        ),
        "ID650402": make_player(
            650402, "Gleyber Torres", position="2B", batting_order="300",
            batting={"atBats": 2, "hits": 0},
        ),
    }
    home_players = {
        f"ID{PITCHER_ID}": make_player(
            PITCHER_ID, "Brayan Bello",
            pitching={
                "inningsPitched": "6.1", "hits": 5, "earnedRuns": 3,
                "strikeOuts": 7, "baseOnBalls": 2, "pitchesThrown": 98,
            },
            season_pitching={
                "era": "3.21", "whip": "1.104", "strikeoutsPer9Inn": "9.52",
                "wins": 11, "losses": 6,
            },
        ),
        "ID646240": make_player(
            646240, "Rafael Devers", position="3B", batting_order="100",
            batting={"atBats": 3, "hits": 1}, season_batting={"avg": ".272"},
        ),
    }
    return {
        "status": {"detailedState": detailed_state},
        "linescore": {
            "teams": {"away": {"runs": away[1]}, "home": {"runs": home[1]}},
            "currentInning": inning,
            "isTopInning": is_top,
        },
        "teams": {"away": {"abbreviation": away[0]}, "home": {"abbreviation": home[0]}},
        "currentPlay": {
            "matchup": {
                "pitcher": {"id": pitcher_id} if pitcher_id is not None else {},
                "batter": {"id": batter_id} if batter_id is not None else {},
            }
        },
        "boxscore": {
            "away": {
                "players": away_players,
                "battingOrder": [665742, BATTER_ID, 650402],
            },
            "home": {
                "players": home_players,
                "battingOrder": [646240],
            },
        },
    }


class RecordingSink(TitleSink):
    """Title sink that records every call."""

    def __init__(self):
        super().__init__()
        self.calls = []

    def publish(self, title):
        self.calls.append(("publish", title))

    def restore(self):
        self.calls.append(("restore", None))

    @property
    def restores(self):
        return sum(1 for name, _ in self.calls if name == "restore")

    @property
    def published(self):
        return [title for name, title in self.calls if name == "publish"]


@pytest.fixture
def snapshot():
    return make_snapshot()


@pytest.fixture
def sink():
    return RecordingSink()
