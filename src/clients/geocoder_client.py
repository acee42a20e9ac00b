from typing import Optional
from geopy.extra.rate_limiter import RateLimiter
from geopy.geocoders import OpenCage
from geopy.location import Location
from config.config import SETTINGS
from models.errors import GeocoderNotConfigured
from models.models import Coordinates


class GeocoderClient:
    """OpenCage lookups spaced at least ``min_delay_seconds`` apart.

    Calls are never retried and provider errors propagate to the caller.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        language: Optional[str] = None,
        timeout: Optional[int] = None,
        min_delay_seconds: Optional[float] = None,
    ):
        self.api_key = SETTINGS.opencage_api_key if api_key is None else api_key
        self.language = language or SETTINGS.geocode_language
        self.timeout = timeout or SETTINGS.geocode_timeout
        self.min_delay_seconds = (
            SETTINGS.geocode_min_delay
            if min_delay_seconds is None
            else min_delay_seconds
        )
        self.geolocator = None
        self._reverse = self._geocode = None
        if self.api_key:
            self.geolocator = OpenCage(api_key=self.api_key, timeout=self.timeout)
            self._reverse = self._limited(self.geolocator.reverse)
            self._geocode = self._limited(self.geolocator.geocode)

    def _limited(self, func) -> RateLimiter:
        return RateLimiter(
            func,
            min_delay_seconds=self.min_delay_seconds,
            max_retries=0,
            swallow_exceptions=False,
        )

    @property
    def configured(self) -> bool:
        return self.geolocator is not None

    def _require_key(self) -> None:
        if self.geolocator is None:
            raise GeocoderNotConfigured("OPENCAGE_API_KEY is not set.")

    def reverse(self, coordinates: Coordinates) -> Optional[Location]:
        self._require_key()
        return self._reverse(
            (coordinates.lat, coordinates.lng),
            language=self.language,
            exactly_one=True,
        )

    def geocode(self, label: str) -> Optional[Location]:
        self._require_key()
        return self._geocode(label, language=self.language, exactly_one=True)
