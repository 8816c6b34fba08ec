"""Configuration loader for media-api."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from auth.service import SESSION_TTL_SECONDS
from common.config import ConfigSingleton, find_config_path, load_yaml, secret, section
from feeds.cache import DEFAULT_TTL_SECONDS
from feeds.stocks import STOCK_SYMBOLS
from feeds.weather import DEFAULT_LOCATION, LA_JOLLA

load_dotenv()

CONFIG_ENV_VAR = "MEDIA_API_CONFIG"
CONFIG_DIR_ENV_VAR = "MEDIA_API_CONFIG_DIR"


@dataclass
class StoreConfig:
    backend: str = "sql"  # "sql" or "memory"
    database_url: Optional[str] = None


@dataclass
class AuthConfig:
    backend: str = "firebase"  # "firebase" or "memory"
    api_key: Optional[str] = None
    session_ttl_seconds: int = SESSION_TTL_SECONDS


@dataclass
class FeedsConfig:
    ttl_seconds: int = DEFAULT_TTL_SECONDS
    request_timeout: int = 10
    stock_symbols: list[str] = field(default_factory=lambda: list(STOCK_SYMBOLS))
    alpha_vantage_api_key: Optional[str] = None
    latitude: float = LA_JOLLA[0]
    longitude: float = LA_JOLLA[1]
    location: str = DEFAULT_LOCATION


@dataclass
class SearchConfig:
    result_cap: int = 20
    debounce_seconds: float = 0.3


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8000


@dataclass
class AppConfig:
    store: StoreConfig = field(default_factory=StoreConfig)
    auth: AuthConfig = field(default_factory=AuthConfig)
    feeds: FeedsConfig = field(default_factory=FeedsConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    server: ServerConfig = field(default_factory=ServerConfig)

    @property
    def is_memory(self) -> bool:
        return self.store.backend == "memory"


def load_config(config_name: Optional[str] = None, config_dir: Optional[Path] = None) -> AppConfig:
    """Load configuration from YAML file.

    Args:
        config_name: Name of config file (without .yaml extension); defaults to
            $MEDIA_API_CONFIG or "prod"
        config_dir: Directory holding config files; defaults to
            $MEDIA_API_CONFIG_DIR or the repo's configs/

    Returns:
        AppConfig instance
    """
    path = find_config_path(
        config_name,
        config_dir,
        default_name="prod",
        env_var=CONFIG_ENV_VAR,
        dir_env_var=CONFIG_DIR_ENV_VAR,
    )
    raw = load_yaml(path)

    store_raw = section(raw, "store")
    store_config = StoreConfig(
        backend=store_raw.get("backend", "sql"),
        database_url=secret("DATABASE_URL", store_raw.get("database_url")),
    )

    auth_raw = section(raw, "auth")
    auth_config = AuthConfig(
        backend=auth_raw.get("backend", "firebase"),
        api_key=secret("FIREBASE_API_KEY"),
        session_ttl_seconds=auth_raw.get("session_ttl_seconds", SESSION_TTL_SECONDS),
    )

    feeds_raw = section(raw, "feeds")
    feeds_config = FeedsConfig(
        ttl_seconds=feeds_raw.get("ttl_seconds", DEFAULT_TTL_SECONDS),
        request_timeout=feeds_raw.get("request_timeout", 10),
        stock_symbols=list(feeds_raw.get("stock_symbols", STOCK_SYMBOLS)),
        alpha_vantage_api_key=secret("ALPHA_VANTAGE_API_KEY"),
        latitude=feeds_raw.get("latitude", LA_JOLLA[0]),
        longitude=feeds_raw.get("longitude", LA_JOLLA[1]),
        location=feeds_raw.get("location", DEFAULT_LOCATION),
    )

    search_raw = section(raw, "search")
    search_config = SearchConfig(
        result_cap=search_raw.get("result_cap", 20),
        debounce_seconds=search_raw.get("debounce_seconds", 0.3),
    )

    server_raw = section(raw, "server")
    server_config = ServerConfig(
        host=server_raw.get("host", "0.0.0.0"),
        port=server_raw.get("port", 8000),
    )

    return AppConfig(
        store=store_config,
        auth=auth_config,
        feeds=feeds_config,
        search=search_config,
        server=server_config,
    )


_manager: ConfigSingleton[AppConfig] = ConfigSingleton(load_config)
get_config = _manager.get
set_config = _manager.set
reset_config = _manager.reset
