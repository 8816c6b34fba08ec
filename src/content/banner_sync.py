"""Keep sport banners in step with ESPN scoreboards."""

import logging
from dataclasses import asdict
from datetime import timedelta
from typing import Callable, Optional

from common.datetime import parse_datetime, utcnow
from content.sport_banners import SportBannerService
from feeds import espn
from feeds.espn import EspnClient

logger = logging.getLogger(__name__)

SYNC_EDITOR = "espn-sync"
FINAL_BANNER_MAX_AGE = timedelta(days=1)


class GameNotFoundError(Exception):
    def __init__(self, game_id: str, sport: str):
        super().__init__(f"Game not found: {sport}/{game_id}")
        self.game_id = game_id
        self.sport = sport


class BannerSyncService:
    """Writes ESPN games into the sport banner collection.

    A live game overwrites the enabled banner when there is one; otherwise
    a new banner is created. Runs on demand from the admin routes.
    """

    def __init__(
        self,
        banners: SportBannerService,
        espn_client: EspnClient,
        clock: Callable = utcnow,
    ):
        self.banners = banners
        self.espn = espn_client
        self.clock = clock

    def _write(self, event: dict, sport: str, active_id: Optional[str]) -> Optional[str]:
        banner = espn.convert_game_to_banner(event, sport)
        if banner is None:
            return None
        data = asdict(banner)
        if active_id is not None:
            self.banners.update_banner(active_id, data, editor_id=SYNC_EDITOR)
            logger.info("Updated banner %s for %s game", active_id, sport)
            return active_id
        banner_id = self.banners.create_banner(data, editor_id=SYNC_EDITOR)
        logger.info("Created banner %s for %s game", banner_id, sport)
        return banner_id

    def _active_banner_id(self) -> Optional[str]:
        active = self.banners.get_active_banner()
        return active.id if active else None

    def perform_sync(self) -> list[str]:
        """Push every live UCSD game into the banners. Returns the banner ids written."""
        games = self.espn.get_live_ucsd_games()
        if not games:
            logger.info("No live UCSD games found")
            return []
        active_id = self._active_banner_id()
        written = []
        for event in games:
            banner_id = self._write(event, espn.sport_of(event), active_id)
            if banner_id is not None:
                written.append(banner_id)
        logger.info("ESPN sync wrote %d banners", len(written))
        return written

    def sync_game(self, game_id: str, sport: str) -> str:
        """Sync one game from today's scoreboard into the active banner."""
        game = next((e for e in self.espn.get_ucsd_games(sport) if str(e.get("id")) == game_id), None)
        if game is None:
            raise GameNotFoundError(game_id, sport)
        banner_id = self._write(game, sport, self._active_banner_id())
        if banner_id is None:
            raise ValueError("Failed to convert game data")
        return banner_id

    def sync_upcoming_games(self) -> list[str]:
        """Create a banner for each upcoming UCSD game."""
        created = []
        for event in self.espn.get_upcoming_ucsd_games():
            banner_id = self._write(event, espn.sport_of(event), None)
            if banner_id is not None:
                created.append(banner_id)
        logger.info("Synced %d upcoming games", len(created))
        return created

    def cleanup_old_banners(self, max_age: timedelta = FINAL_BANNER_MAX_AGE) -> list[str]:
        """Delete banners for games that finished more than ``max_age`` ago."""
        cutoff = parse_datetime(self.clock()) - max_age
        deleted = []
        for banner in self.banners.get_all_banners():
            if banner.game_status == "final" and banner.date < cutoff:
                self.banners.delete_banner(banner.id)
                deleted.append(banner.id)
        if deleted:
            logger.info("Deleted %d old banners", len(deleted))
        return deleted
