import logging
from typing import Callable, Dict, Iterable, Optional
from geopy.exc import GeocoderQuotaExceeded, GeocoderRateLimited, GeopyError
from clients.geocoder_client import GeocoderClient
from models.models import Coordinates
from tools.geocode_cache import UNRESOLVED, GeocodeCache
from utils.geo_utils import compose_label, coordinate_key

logger = logging.getLogger(__name__)

REVERSE_PREFIX = "reverse:"
FORWARD_PREFIX = "forward:"


def _silent(message: str) -> None:
    logger.debug("Unsurfaced notice: %s", message)


class LocationResolver:
    """Cached coordinate <-> place-name lookups.

    Lookups never raise: every failure is logged, reported through ``notify``
    and returned as ``None``. Empty provider answers are cached as
    ``UNRESOLVED`` so the same key is not looked up twice. Transport errors and
    a missing API key are not cached; the next user action tries again.

    Two callers racing on the same uncached key may both reach the provider.
    The second cache write stores the same value, so this only costs a call.
    """

    def __init__(
        self,
        geocoder_client: GeocoderClient,
        cache: GeocodeCache,
        notify: Optional[Callable[[str], None]] = None,
    ):
        self.geocoder_client = geocoder_client
        self.cache = cache
        self.notify = notify or _silent

    def resolve_label(self, coordinates: Coordinates) -> Optional[str]:
        key = REVERSE_PREFIX + coordinate_key(coordinates)
        if key in self.cache:
            cached = self.cache.get(key)
            return None if cached is UNRESOLVED else cached

        if not self.geocoder_client.configured:
            logger.warning("Reverse geocoding skipped: no API key configured")
            self.notify("Location lookup is not configured.")
            return None
        try:
            location = self.geocoder_client.reverse(coordinates)
        except GeopyError as e:
            logger.warning("Reverse geocoding %s failed: %s", key, e)
            self.notify("Could not look up your location name.")
            return None

        label = None
        if location is not None:
            raw = location.raw or {}
            label = compose_label(
                raw.get("components"), raw.get("formatted") or location.address
            )
        if label is None:
            logger.info("No place name found for %s", key)
            self.notify("No place name found for your location.")
        self.cache.put(key, label)
        return label

    def resolve_coordinates(self, label: str) -> Optional[Coordinates]:
        return self.resolve_many([label])[label]

    def resolve_many(self, labels: Iterable[str]) -> Dict[str, Optional[Coordinates]]:
        """Place each distinct label, with at most one notice for the batch.

        Once the provider reports a rate limit or an exhausted quota, the
        remaining uncached labels are left unplaced until the next call.
        """
        positions: Dict[str, Optional[Coordinates]] = {}
        failed = 0
        throttled = False
        for label in labels:
            if label in positions:
                continue
            key = FORWARD_PREFIX + label
            if key in self.cache:
                cached = self.cache.get(key)
                positions[label] = None if cached is UNRESOLVED else cached
                continue
            positions[label] = None
            if not self.geocoder_client.configured:
                logger.warning("Forward geocoding %r skipped: no API key", label)
                continue
            if throttled:
                failed += 1
                continue
            try:
                location = self.geocoder_client.geocode(label)
            except GeopyError as e:
                logger.warning("Forward geocoding %r failed: %s", label, e)
                failed += 1
                throttled = isinstance(e, (GeocoderRateLimited, GeocoderQuotaExceeded))
                continue
            if location is not None:
                positions[label] = Coordinates(
                    lat=location.latitude, lng=location.longitude
                )
            else:
                logger.info("No coordinates found for %r", label)
            self.cache.put(key, positions[label])

        if failed:
            self.notify(f"{failed} place(s) could not be looked up right now.")
        return positions
