from typing import Any, Dict, Optional
from models.models import Coordinates
from utils.constants import LabelComponents

COORDINATE_KEY_PRECISION = 4


def coordinate_key(coordinates: Coordinates) -> str:
    """Cache key for a reverse lookup; ~11m precision keeps nearby fixes together."""
    p = COORDINATE_KEY_PRECISION
    return f"{coordinates.lat:.{p}f},{coordinates.lng:.{p}f}"


def _first_component(components: Dict[str, Any], keys) -> Optional[str]:
    for key in keys:
        value = components.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def compose_label(
    components: Optional[Dict[str, Any]], formatted: Optional[str] = None
) -> Optional[str]:
    """Build "locality, region, country" from structured address components.

    Falls back to the provider's formatted address when no structured part
    is present. Returns None rather than an empty string.
    """
    components = components or {}
    parts = []
    for group in LabelComponents:
        part = _first_component(components, group.value)
        if part and part not in parts:
            parts.append(part)
    if parts:
        return ", ".join(parts)
    if formatted and formatted.strip():
        return formatted.strip()
    return None
