from datetime import datetime, timezone

import pytest

from plugins.sports_announcer.models import Match, Sport
from plugins.sports_announcer.parsers import nfl, soccer
from plugins.sports_announcer.parsers.common import parse_iso_datetime

from .samples import (
    NFL_PLAYER,
    NFL_SCHEDULE,
    NFL_STANDINGS,
    SOCCER_MATCHES,
    SOCCER_PLAYER,
    SOCCER_STANDINGS,
)


def test_parse_iso_datetime_handles_zulu_and_offset():
    expected = datetime(2025, 9, 13, 14, 0, tzinfo=timezone.utc)
    assert parse_iso_datetime("2025-09-13T14:00:00Z") == expected
    assert parse_iso_datetime("2025-09-13T14:00:00+00:00") == expected
    assert parse_iso_datetime("2025-09-13T14:00:00").tzinfo is not None


def test_soccer_matches_one_record_per_item():
    matches = soccer.parse_matches(SOCCER_MATCHES)

    assert len(matches) == len(SOCCER_MATCHES["matches"])
    first = matches[0]
    assert first.sport is Sport.SOCCER
    assert first.home_team == "Arsenal FC"
    assert first.away_team == "Nottingham Forest FC"
    assert first.time == datetime(2025, 9, 13, 14, 0, tzinfo=timezone.utc)
    assert first.home_score is None
    assert not first.is_live
    assert matches[1].is_live
    assert (matches[1].home_score, matches[1].away_score) == (1, 0)


def test_nfl_schedule_reads_week_games_and_top_level_games():
    nested = nfl.parse_schedule(NFL_SCHEDULE)
    flat = nfl.parse_schedule({"games": NFL_SCHEDULE["week"]["games"]})

    assert nested == flat
    assert len(nested) == 2
    assert nested[0].sport is Sport.AMERICAN_FOOTBALL
    assert (nested[0].home_team, nested[0].away_team) == ("Eagles", "Cowboys")
    assert nested[1].is_live
    assert nested[1].home_score == 14


def test_soccer_standings_lines():
    assert soccer.parse_standings(SOCCER_STANDINGS) == [
        "1. Liverpool FC - 9 pts",
        "2. Arsenal FC - 6 pts",
    ]


def test_nfl_standings_one_block_per_division():
    blocks = nfl.parse_standings(NFL_STANDINGS)

    assert blocks == [
        "🏈 **AFC East**\nBuffalo Bills - 2-0\nMiami Dolphins - 0-2",
        "🏈 **NFC East**\nPhiladelphia Eagles - 2-0",
    ]


def test_player_stats_formats():
    assert soccer.parse_player_stats(SOCCER_PLAYER) == (
        "⚽ **Player Stats for Bukayo Saka**\nGoals: 3\nAssists: 2"
    )
    assert nfl.parse_player_stats(NFL_PLAYER) == (
        "🏈 **Player Stats for Jalen Hurts**\nPassing Yards: 512\nTouchdowns: 4"
    )


@pytest.mark.parametrize(
    "payload",
    [{}, {"matches": [{"homeTeam": {"name": "A"}}]}, {"matches": None}],
)
def test_soccer_matches_raise_on_unexpected_shape(payload):
    with pytest.raises((KeyError, TypeError)):
        soccer.parse_matches(payload)


def test_match_key_falls_back_to_teams_and_kickoff():
    kickoff = datetime(2025, 9, 13, 14, 0, tzinfo=timezone.utc)
    with_id = Match(Sport.SOCCER, "A", "B", kickoff, match_id="7")
    without_id = Match(Sport.SOCCER, "A", "B", kickoff)

    assert with_id.key == "soccer_7"
    assert without_id.key == f"soccer_A_B_{int(kickoff.timestamp())}"


def test_sport_tags():
    assert Sport.from_tag("Soccer") is Sport.SOCCER
    assert Sport.from_tag("nfl") is Sport.AMERICAN_FOOTBALL
    assert Sport.from_tag("Cricket") is None
    assert Sport.from_tag("football") is None
    assert Sport.resolve(Sport.SOCCER) is Sport.SOCCER


def test_null_ids_become_empty():
    payload = {"matches": [dict(SOCCER_MATCHES["matches"][0], id=None)]}

    assert soccer.parse_matches(payload)[0].match_id == ""
