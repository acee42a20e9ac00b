from typing import Dict, Iterable, Optional
import folium
from config.config import MAP_TILES_ATTRIBUTION, SETTINGS
from models.models import MoodGroup
from tools.mood_grouper import renderable_groups
from utils.constants import MapDefaults
from utils.map_utils import marker_html, popup_html


def build_mood_map(
    groups: Iterable[MoodGroup], focus: Optional[Dict] = None
) -> folium.Map:
    """One marker per group whose label has resolved coordinates."""
    focus = focus or {}
    mood_map = folium.Map(
        location=focus.get("center", MapDefaults.CENTER.value),
        zoom_start=focus.get("zoom", MapDefaults.ZOOM.value),
        min_zoom=MapDefaults.ZOOM.value,
        tiles=SETTINGS.map_tiles_url,
        attr=MAP_TILES_ATTRIBUTION,
        world_copy_jump=True,
    )
    for group in renderable_groups(groups):
        size = (48, 48)
        folium.Marker(
            location=group.position.as_pair(),
            icon=folium.DivIcon(
                html=marker_html(group),
                icon_size=size,
                icon_anchor=(size[0] // 2, size[1]),
                class_name="mood-marker",
            ),
            popup=folium.Popup(popup_html(group), max_width=320),
            tooltip=group.location_label,
        ).add_to(mood_map)
    return mood_map
