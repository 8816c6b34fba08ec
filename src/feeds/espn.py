"""UC San Diego games and news from the ESPN site API."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

import requests

from common.datetime import parse_datetime
from feeds.models import GameBanner

logger = logging.getLogger(__name__)

ESPN_BASE_URL = "https://site.api.espn.com/apis/site/v2/sports"
LEAGUES = {
    "basketball": "mens-college-basketball",
    "baseball": "college-baseball",
}
UCSD_KEYWORDS = ("UC San Diego", "Tritons")

TEAM_IDS = {
    "UCSD": "ucsd",
    "UCLA": "ucla",
    "USC": "usc",
    "STAN": "stanford",
    "CAL": "cal",
    "SDSU": "sdsu",
    "UNLV": "unlv",
    "GONZ": "gonzaga",
    "SMC": "saint-marys",
    "UCSB": "ucsb",
    "UCI": "uci",
    "UCR": "ucr",
    "UCD": "ucd",
    "CSUF": "csuf",
    "CSULB": "csulb",
    "CSUN": "csun",
    "UH": "uh",
    "CSUB": "bakersfield",
}


def team_id_from_abbreviation(abbreviation: str) -> str:
    return TEAM_IDS.get(abbreviation, abbreviation.lower())


def ordinal(n: int) -> str:
    if n % 10 == 1 and n % 100 != 11:
        return f"{n}st"
    if n % 10 == 2 and n % 100 != 12:
        return f"{n}nd"
    if n % 10 == 3 and n % 100 != 13:
        return f"{n}rd"
    return f"{n}th"


def is_ucsd_team(team: dict) -> bool:
    return team.get("abbreviation") == "UCSD" or "UC San Diego" in (team.get("displayName") or "")


def is_ucsd_game(event: dict) -> bool:
    competitions = event.get("competitions") or []
    if not competitions:
        return False
    return any(is_ucsd_team(c.get("team") or {}) for c in competitions[0].get("competitors") or [])


def game_state(event: dict) -> str:
    return ((event.get("status") or {}).get("type") or {}).get("state", "")


def sport_of(event: dict) -> str:
    return "basketball" if "basketball" in (event.get("name") or "").lower() else "baseball"


def convert_game_to_banner(event: dict, sport: str) -> Optional[GameBanner]:
    """Map an ESPN scoreboard event to a banner, or None if either team is missing."""
    competitions = event.get("competitions") or []
    if not competitions:
        return None
    competition = competitions[0]
    competitors = competition.get("competitors") or []
    home = next((c for c in competitors if c.get("homeAway") == "home"), None)
    away = next((c for c in competitors if c.get("homeAway") == "away"), None)
    if home is None or away is None:
        return None
    home_abbreviation = (home.get("team") or {}).get("abbreviation")
    away_abbreviation = (away.get("team") or {}).get("abbreviation")
    if not home_abbreviation or not away_abbreviation:
        logger.warning("Skipping ESPN event %s without team abbreviations", event.get("id"))
        return None

    status = event.get("status") or {}
    status_type = status.get("type") or {}
    period_number = status.get("period") or 0
    clock = int(status.get("clock") or 0)

    state = status_type.get("state")
    if state == "post":
        game_status = "final"
    elif state == "in":
        game_status = "halftime" if period_number == 2 and clock == 0 else "live"
    else:
        game_status = "scheduled"

    time_remaining = ""
    if game_status == "live":
        time_remaining = f"{clock // 60}:{clock % 60:02d}"

    if sport == "basketball":
        period = f"Q{period_number}" if period_number <= 4 else f"OT{period_number - 4}"
    else:
        period = ordinal(period_number)

    return GameBanner(
        sport=sport,
        home_team_id=team_id_from_abbreviation(home_abbreviation),
        away_team_id=team_id_from_abbreviation(away_abbreviation),
        home_score=_score(home.get("score")),
        away_score=_score(away.get("score")),
        game_status=game_status,
        game_time=status_type.get("shortDetail") or status_type.get("detail") or "",
        venue=(competition.get("venue") or {}).get("fullName") or "TBD",
        date=parse_datetime(event.get("date")),
        period=period,
        time_remaining=time_remaining,
    )


def _score(value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


class EspnClient:
    def __init__(self, timeout: float = 10, base_url: str = ESPN_BASE_URL):
        self.timeout = timeout
        self.base_url = base_url

    def _get(self, sport: str, endpoint: str) -> dict:
        if sport not in LEAGUES:
            raise ValueError(f"Unsupported ESPN sport: {sport}")
        response = requests.get(f"{self.base_url}/{sport}/{LEAGUES[sport]}/{endpoint}", timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def fetch_ucsd_games(self, sport: str) -> list[dict]:
        """Today's scoreboard events involving UC San Diego. Raises on HTTP errors."""
        events = self._get(sport, "scoreboard").get("events") or []
        return [event for event in events if is_ucsd_game(event)]

    def get_ucsd_games(self, sport: str) -> list[dict]:
        try:
            return self.fetch_ucsd_games(sport)
        except (requests.RequestException, ValueError) as e:
            logger.error("Error fetching %s scoreboard: %s", sport, e)
            return []

    def get_ucsd_news(self, sport: str) -> list[dict]:
        try:
            articles = self._get(sport, "news").get("articles") or []
        except (requests.RequestException, ValueError) as e:
            logger.error("Error fetching %s news: %s", sport, e)
            return []
        return [
            article
            for article in articles
            if any(
                keyword in (article.get("headline") or "") or keyword in (article.get("description") or "")
                for keyword in UCSD_KEYWORDS
            )
        ]

    def _all_sports_games(self) -> list[dict]:
        with ThreadPoolExecutor(max_workers=len(LEAGUES)) as executor:
            results = list(executor.map(self.get_ucsd_games, LEAGUES))
        return [event for games in results for event in games]

    def get_live_ucsd_games(self) -> list[dict]:
        """In-progress and finished games for every covered sport."""
        return [e for e in self._all_sports_games() if game_state(e) in ("in", "post")]

    def get_upcoming_ucsd_games(self) -> list[dict]:
        return [e for e in self._all_sports_games() if game_state(e) == "pre"]
