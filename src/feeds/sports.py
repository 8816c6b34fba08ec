"""One view over ESPN (basketball, baseball) and NCAA (everything else)."""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import asdict
from typing import Callable, Optional

from feeds import espn, ncaa
from feeds.espn import EspnClient
from feeds.models import GameBanner, UnifiedGame
from feeds.ncaa import NcaaClient

logger = logging.getLogger(__name__)

ESPN_SPORTS = ("basketball", "baseball")
NCAA_SPORTS = (
    "football",
    "soccer-men",
    "soccer-women",
    "volleyball",
    "hockey-men",
    "hockey-women",
    "softball",
    "lacrosse-men",
    "lacrosse-women",
    "tennis-men",
    "tennis-women",
    "swimming-men",
    "swimming-women",
    "track-men",
    "track-women",
    "golf-men",
    "golf-women",
    "wrestling",
    "gymnastics",
    "field-hockey",
    "water-polo-men",
    "water-polo-women",
    "bowling",
    "fencing",
    "rowing",
    "skiing",
    "volleyball-beach",
)


def _unified(banner: Optional[GameBanner], game_id: str, source: str) -> Optional[UnifiedGame]:
    if banner is None or not banner.home_team_id or not banner.away_team_id:
        return None
    return UnifiedGame(**asdict(banner), id=game_id, source=source)


class UnifiedSportsService:
    def __init__(self, espn_client: Optional[EspnClient] = None, ncaa_client: Optional[NcaaClient] = None):
        self.espn = espn_client or EspnClient()
        self.ncaa = ncaa_client or NcaaClient()

    def _from_espn(self, events: list[dict], sport: Optional[str] = None) -> list[UnifiedGame]:
        games = []
        for event in events:
            event_sport = sport or espn.sport_of(event)
            game = _unified(espn.convert_game_to_banner(event, event_sport), str(event.get("id", "")), "espn")
            if game is not None:
                games.append(game)
        return games

    def _from_ncaa(self, sport: str, fetch: Callable[[str], list[dict]]) -> list[UnifiedGame]:
        games = []
        try:
            entries = fetch(sport)
            for entry in entries:
                game_id = str((entry.get("game") or {}).get("gameID", ""))
                game = _unified(ncaa.convert_game_to_banner(entry, sport), game_id, "ncaa")
                if game is not None:
                    games.append(game)
        except Exception as e:
            logger.error("Error fetching NCAA games for %s: %s", sport, e)
        return games

    def get_live_games(self) -> list[UnifiedGame]:
        games = self._from_espn(self.espn.get_live_ucsd_games())
        for sport in NCAA_SPORTS:
            games.extend(self._from_ncaa(sport, self.ncaa.get_ucsd_games))
        return games

    def get_upcoming_games(self) -> list[UnifiedGame]:
        games = self._from_espn(self.espn.get_upcoming_ucsd_games())
        for sport in NCAA_SPORTS:
            games.extend(self._from_ncaa(sport, self.ncaa.get_upcoming_ucsd_games))
        return games

    def get_games_by_sport(self, sport: str) -> list[UnifiedGame]:
        if sport in ESPN_SPORTS:
            return self._from_espn(self.espn.get_ucsd_games(sport), sport)
        if sport in NCAA_SPORTS:
            return self._from_ncaa(sport, self.ncaa.get_ucsd_games)
        logger.warning("Unknown sport: %s", sport)
        return []

    def get_all_available_sports(self) -> list[str]:
        return [*ESPN_SPORTS, *NCAA_SPORTS]

    def get_espn_sports(self) -> list[str]:
        return list(ESPN_SPORTS)

    def get_ncaa_sports(self) -> list[str]:
        return list(NCAA_SPORTS)

    def test_apis(self) -> dict:
        """Call each upstream once and report which ones answered."""
        results = {"espn": False, "ncaa": False, "details": []}
        try:
            games = self.espn.fetch_ucsd_games("basketball")
            results["espn"] = True
            results["details"].append(f"ESPN API: working ({len(games)} basketball games found)")
        except Exception as e:
            results["details"].append(f"ESPN API: error - {e}")
        try:
            games = self.ncaa.fetch_ucsd_games("football")
            results["ncaa"] = True
            results["details"].append(f"NCAA API: working ({len(games)} football games found)")
        except Exception as e:
            results["details"].append(f"NCAA API: error - {e}")
        return results

    def get_comprehensive_data(self) -> dict:
        with ThreadPoolExecutor(max_workers=3) as executor:
            live = executor.submit(self.get_live_games)
            upcoming = executor.submit(self.get_upcoming_games)
            status = executor.submit(self.test_apis)
            api_status = status.result()
            return {
                "live_games": live.result(),
                "upcoming_games": upcoming.result(),
                "total_sports": len(self.get_all_available_sports()),
                "api_status": {"espn": api_status["espn"], "ncaa": api_status["ncaa"]},
            }
