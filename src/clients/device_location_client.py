import logging
from typing import Any, Optional
from pydantic import ValidationError
from streamlit_geolocation import streamlit_geolocation
from models.models import Coordinates

logger = logging.getLogger(__name__)


def parse_position(position: Any) -> Optional[Coordinates]:
    # The component returns {'latitude', 'longitude', ...} with None values
    # until the browser answers, and keeps them None when permission is denied.
    if not isinstance(position, dict):
        return None
    lat = position.get("latitude", position.get("lat"))
    lng = position.get("longitude", position.get("lng"))
    if lat is None or lng is None:
        return None
    try:
        return Coordinates(lat=float(lat), lng=float(lng))
    except (TypeError, ValueError, ValidationError):
        logger.warning("Ignoring malformed device position: %r", position)
        return None


class DeviceLocationClient:
    def request_position(self) -> Optional[Coordinates]:
        """Render the browser geolocation prompt and return the fix, if any."""
        return parse_position(streamlit_geolocation())
