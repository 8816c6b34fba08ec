"""Tests for feeds.ncaa module."""

from unittest.mock import Mock, patch

import pytest

from feeds.ncaa import NcaaClient, convert_game_to_banner, team_id_from_name


def _entry(home: str = "UC San Diego", away: str = "Long Beach St.", state: str = "live", period: str = "2nd") -> dict:
    return {
        "game": {
            "gameID": "g1",
            "home": {"score": "2", "names": {"full": home, "short": home}},
            "away": {"score": "1", "names": {"full": away, "short": away}},
            "gameState": state,
            "currentPeriod": period,
            "contestClock": "12:00",
            "startTime": "7:00PM PST",
            "startTimeEpoch": "1707534000",
        }
    }


class TestConvertGameToBanner:
    def test_ucsd_home(self) -> None:
        banner = convert_game_to_banner(_entry(), "soccer-men")
        assert banner.home_team_id == "ucsd"
        assert banner.away_team_id == "csulb"
        assert (banner.home_score, banner.away_score) == (2, 1)
        assert banner.game_status == "live"
        assert banner.venue == "TBD"
        assert banner.date.year == 2024

    def test_ucsd_away(self) -> None:
        banner = convert_game_to_banner(_entry(home="Cal Poly", away="UC San Diego"), "soccer-men")
        assert banner.home_team_id == "cal-poly"
        assert banner.away_team_id == "ucsd"

    def test_halftime(self) -> None:
        banner = convert_game_to_banner(_entry(state="pre", period="HALFTIME"), "soccer-men")
        assert banner.game_status == "halftime"


class TestTeamIdFromName:
    def test_known_and_unknown(self) -> None:
        assert team_id_from_name("San Diego St.") == "sdsu"
        assert team_id_from_name("Cal State LA") == "cal-state-la"


class TestNcaaClient:
    @patch("feeds.ncaa.requests.get")
    def test_scoreboard_url_and_filter(self, mock_get: Mock) -> None:
        mock_get.return_value.json.return_value = {
            "games": [_entry(), _entry(home="UCLA", away="USC")]
        }
        games = NcaaClient(season="2024").get_ucsd_games("soccer-men")
        assert len(games) == 1
        assert mock_get.call_args.args[0] == "https://ncaa-api.henrygd.me/scoreboard/soccer-men/d1/2024/all-conf"

    def test_invalid_sport(self) -> None:
        with pytest.raises(ValueError):
            NcaaClient().get_scoreboard("quidditch")
        assert NcaaClient().get_ucsd_games("quidditch") == []
