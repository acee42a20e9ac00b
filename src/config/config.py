import os
from dataclasses import dataclass

from utils.load_secrets import load_env_vars


@dataclass(frozen=True)
class Settings:
    supabase_url: str
    supabase_anon_key: str
    moods_table: str
    opencage_api_key: str
    geocode_language: str
    geocode_timeout: int
    geocode_min_delay: float
    auth_provider: str
    identity_user_id_claim: str
    share_compose_url: str
    miniapp_sdk_url: str
    map_tiles_url: str
    log_level: str

    def __init__(self):
        load_env_vars()
        object.__setattr__(
            self, "supabase_url", os.getenv("SUPABASE_URL", "").strip()
        )
        object.__setattr__(
            self, "supabase_anon_key", os.getenv("SUPABASE_ANON_KEY", "").strip()
        )
        object.__setattr__(
            self, "moods_table", os.getenv("MOODS_TABLE", "moods").strip()
        )
        object.__setattr__(
            self, "opencage_api_key", os.getenv("OPENCAGE_API_KEY", "").strip()
        )
        object.__setattr__(
            self, "geocode_language", os.getenv("GEOCODE_LANGUAGE", "en").strip()
        )
        object.__setattr__(
            self, "geocode_timeout", int(os.getenv("GEOCODE_TIMEOUT", "10").strip())
        )
        object.__setattr__(
            self,
            "geocode_min_delay",
            float(os.getenv("GEOCODE_MIN_DELAY", "1").strip()),
        )
        object.__setattr__(
            self, "auth_provider", os.getenv("AUTH_PROVIDER", "").strip()
        )
        object.__setattr__(
            self,
            "identity_user_id_claim",
            os.getenv("IDENTITY_USER_ID_CLAIM", "fid").strip(),
        )
        object.__setattr__(
            self,
            "share_compose_url",
            os.getenv("SHARE_COMPOSE_URL", "https://warpcast.com/~/compose").strip(),
        )
        object.__setattr__(
            self,
            "miniapp_sdk_url",
            os.getenv(
                "MINIAPP_SDK_URL", "https://esm.sh/@farcaster/miniapp-sdk"
            ).strip(),
        )
        object.__setattr__(
            self,
            "map_tiles_url",
            os.getenv(
                "MAP_TILES_URL",
                "https://{s}.basemaps.cartocdn.com/dark_all/{z}/{x}/{y}{r}.png",
            ).strip(),
        )
        object.__setattr__(
            self, "log_level", os.getenv("LOG_LEVEL", "INFO").strip().upper()
        )


SETTINGS = Settings()

MAP_TILES_ATTRIBUTION = (
    "&copy; OpenStreetMap contributors &copy; CARTO"
)
