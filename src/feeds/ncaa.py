"""UC San Diego games from the public NCAA scoreboard API."""

import logging
import re
from datetime import date, datetime, timezone
from typing import Optional

import requests

from feeds.models import GameBanner

logger = logging.getLogger(__name__)

NCAA_BASE_URL = "https://ncaa-api.henrygd.me"

SPORTS = (
    "football",
    "basketball-men",
    "basketball-women",
    "soccer-men",
    "soccer-women",
    "volleyball",
    "hockey-men",
    "hockey-women",
    "baseball",
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
DIVISIONS = ("d1", "d2", "d3", "fbs", "fcs", "nc")
UCSD_KEYWORDS = ("uc san diego", "tritons", "ucsd")

TEAM_IDS = {
    "UC San Diego": "ucsd",
    "UCSD": "ucsd",
    "Tritons": "ucsd",
    "UCLA": "ucla",
    "USC": "usc",
    "Stanford": "stanford",
    "Cal": "cal",
    "San Diego St.": "sdsu",
    "SDSU": "sdsu",
    "UNLV": "unlv",
    "Gonzaga": "gonzaga",
    "Saint Mary's": "saint-marys",
    "UC Santa Barbara": "ucsb",
    "UCSB": "ucsb",
    "UC Irvine": "uci",
    "UCI": "uci",
    "UC Riverside": "ucr",
    "UCR": "ucr",
    "UC Davis": "ucd",
    "UCD": "ucd",
    "Cal State Fullerton": "csuf",
    "CSUF": "csuf",
    "Long Beach St.": "csulb",
    "CSULB": "csulb",
    "CSUN": "csun",
    "Hawai'i": "uh",
    "UH": "uh",
    "Cal State Bakersfield": "bakersfield",
    "CSUB": "bakersfield",
}


def team_id_from_name(name: str) -> str:
    return TEAM_IDS.get(name, re.sub(r"\s+", "-", name.lower()))


def is_ucsd_side(side: dict) -> bool:
    full_name = ((side.get("names") or {}).get("full") or "").lower()
    return any(keyword in full_name for keyword in UCSD_KEYWORDS)


def is_ucsd_game(entry: dict) -> bool:
    game = entry.get("game") or {}
    return is_ucsd_side(game.get("home") or {}) or is_ucsd_side(game.get("away") or {})


def _score(value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def convert_game_to_banner(entry: dict, sport: str) -> GameBanner:
    game = entry["game"]
    if game.get("gameState") == "final":
        game_status = "final"
    elif game.get("gameState") == "live":
        game_status = "live"
    elif game.get("currentPeriod") == "HALFTIME":
        game_status = "halftime"
    else:
        game_status = "scheduled"

    home, away = game.get("home") or {}, game.get("away") or {}
    ucsd_home = is_ucsd_side(home)
    opponent = away if ucsd_home else home
    opponent_id = team_id_from_name((opponent.get("names") or {}).get("short") or "")

    epoch = game.get("startTimeEpoch")
    start = (
        datetime.fromtimestamp(int(epoch), tz=timezone.utc) if epoch else datetime.now(timezone.utc)
    )

    return GameBanner(
        sport=sport,
        home_team_id="ucsd" if ucsd_home else opponent_id,
        away_team_id=opponent_id if ucsd_home else "ucsd",
        home_score=_score(home.get("score")),
        away_score=_score(away.get("score")),
        game_status=game_status,
        game_time=game.get("startTime") or game.get("finalMessage") or "",
        venue="TBD",  # not in the scoreboard feed
        date=start,
        period=game.get("currentPeriod") or "",
        time_remaining=game.get("contestClock") or "",
    )


class NcaaClient:
    def __init__(self, season: Optional[str] = None, timeout: float = 10, base_url: str = NCAA_BASE_URL):
        self.season = season or str(date.today().year)
        self.timeout = timeout
        self.base_url = base_url

    def get_scoreboard(
        self, sport: str, division: str = "d1", week: Optional[str] = None, conference: str = "all-conf"
    ) -> dict:
        if sport not in SPORTS or division not in DIVISIONS:
            raise ValueError(f"Invalid sport or division: {sport}/{division}")
        parts = [self.base_url, "scoreboard", sport, division, self.season]
        if week:
            parts.append(week)
        parts.append(conference)
        response = requests.get("/".join(parts), timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def fetch_ucsd_games(self, sport: str) -> list[dict]:
        """Scoreboard entries involving UC San Diego. Raises on HTTP errors."""
        games = self.get_scoreboard(sport).get("games") or []
        return [entry for entry in games if is_ucsd_game(entry)]

    def get_ucsd_games(self, sport: str) -> list[dict]:
        try:
            return self.fetch_ucsd_games(sport)
        except (requests.RequestException, ValueError) as e:
            logger.error("Error fetching UCSD games for %s: %s", sport, e)
            return []

    def get_upcoming_ucsd_games(self, sport: str) -> list[dict]:
        # TODO: the schedule endpoint lists game dates only; upcoming games
        # need a per-date scoreboard lookup.
        return []
