"""Tests for feeds.sports module."""

from unittest.mock import Mock

import requests

from feeds.sports import ESPN_SPORTS, NCAA_SPORTS, UnifiedSportsService


def _espn_event(name: str = "UCLA at UC San Diego Basketball") -> dict:
    return {
        "id": "401",
        "name": name,
        "date": "2024-02-10T03:00Z",
        "status": {"period": 1, "clock": 60, "type": {"state": "in", "shortDetail": "1:00"}},
        "competitions": [
            {
                "competitors": [
                    {"homeAway": "home", "score": "10", "team": {"abbreviation": "UCSD"}},
                    {"homeAway": "away", "score": "8", "team": {"abbreviation": "UCLA"}},
                ]
            }
        ],
    }


def _ncaa_entry() -> dict:
    return {
        "game": {
            "gameID": "n1",
            "home": {"score": "3", "names": {"full": "UC San Diego", "short": "UC San Diego"}},
            "away": {"score": "0", "names": {"full": "UC Irvine", "short": "UC Irvine"}},
            "gameState": "final",
            "startTimeEpoch": "1707534000",
        }
    }


def _service(espn_games=(), ncaa_games=()) -> UnifiedSportsService:
    espn = Mock()
    espn.get_live_ucsd_games.return_value = list(espn_games)
    espn.get_upcoming_ucsd_games.return_value = []
    espn.get_ucsd_games.return_value = list(espn_games)
    espn.fetch_ucsd_games.return_value = list(espn_games)
    ncaa = Mock()
    ncaa.get_ucsd_games.side_effect = lambda sport: list(ncaa_games) if sport == "soccer-men" else []
    ncaa.get_upcoming_ucsd_games.return_value = []
    ncaa.fetch_ucsd_games.return_value = []
    return UnifiedSportsService(espn, ncaa)


class TestUnifiedSportsService:
    def test_live_games_merge_sources(self) -> None:
        games = _service([_espn_event()], [_ncaa_entry()]).get_live_games()
        assert [(g.source, g.sport, g.id) for g in games] == [
            ("espn", "basketball", "401"),
            ("ncaa", "soccer-men", "n1"),
        ]
        assert games[1].game_status == "final"

    def test_ncaa_failure_for_one_sport_is_skipped(self) -> None:
        service = _service([_espn_event()])
        service.ncaa.get_ucsd_games.side_effect = RuntimeError("boom")
        games = service.get_live_games()
        assert [g.source for g in games] == ["espn"]

    def test_malformed_espn_event_does_not_sink_aggregate(self) -> None:
        broken = _espn_event()
        broken["id"] = "402"
        del broken["competitions"][0]["competitors"][1]["team"]
        games = _service([broken, _espn_event()], [_ncaa_entry()]).get_live_games()
        assert [(g.source, g.id) for g in games] == [("espn", "401"), ("ncaa", "n1")]

    def test_games_by_sport_routes_to_source(self) -> None:
        service = _service([_espn_event()], [_ncaa_entry()])
        assert [g.source for g in service.get_games_by_sport("basketball")] == ["espn"]
        assert [g.source for g in service.get_games_by_sport("soccer-men")] == ["ncaa"]
        assert service.get_games_by_sport("quidditch") == []

    def test_sport_lists(self) -> None:
        service = _service()
        assert service.get_espn_sports() == list(ESPN_SPORTS)
        assert service.get_ncaa_sports() == list(NCAA_SPORTS)
        assert len(service.get_all_available_sports()) == len(ESPN_SPORTS) + len(NCAA_SPORTS)

    def test_api_status_reports_each_upstream(self) -> None:
        service = _service([_espn_event()])
        service.ncaa.fetch_ucsd_games.side_effect = requests.ConnectionError("offline")
        status = service.test_apis()
        assert status["espn"] is True
        assert status["ncaa"] is False
        assert len(status["details"]) == 2

    def test_comprehensive_data(self) -> None:
        data = _service([_espn_event()]).get_comprehensive_data()
        assert len(data["live_games"]) == 1
        assert data["upcoming_games"] == []
        assert data["total_sports"] == len(ESPN_SPORTS) + len(NCAA_SPORTS)
        assert data["api_status"] == {"espn": True, "ncaa": True}
