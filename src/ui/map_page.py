import logging
import streamlit as st
from streamlit_folium import st_folium
from clients.device_location_client import DeviceLocationClient
from clients.host_client import HostEnvironmentClient
from ui.mood_map import build_mood_map
from ui.mood_overlay import MoodOverlay
from ui.net_action import net_action
from ui.Page import Page
from ui.presentation import PresentationBinding
from utils.constants import Keys, Label, MapDefaults, Pages

logger = logging.getLogger(__name__)


class MapPage(Page):
    """World map of everyone's current mood."""

    title = Pages.MAP.value["title"]

    def __init__(
        self,
        presentation_binding: PresentationBinding,
        host_client: HostEnvironmentClient,
        device_location_client: DeviceLocationClient,
        mood_overlay: MoodOverlay,
    ):
        self.presentation_binding = presentation_binding
        self.host_client = host_client
        self.device_location_client = device_location_client
        self.mood_overlay = mood_overlay

    def _share_text(self) -> str:
        own = self.presentation_binding.own_record()
        text = f"Feeling {own.emoji} today"
        if own.status:
            text += f': "{own.status}"'
        if own.location_label:
            text += f" in {own.location_label}"
        return text

    def _render_actions(self):
        binding = self.presentation_binding
        col_loc, col_refresh, col_update, col_focus, col_share = st.columns(
            [1, 2, 2, 2, 2], vertical_alignment="center"
        )
        with col_loc:
            binding.record_location(self.device_location_client.request_position())
        with col_refresh:
            if st.button(Label.REFRESH_BUTTON.value, use_container_width=True):
                with net_action("Loading moods..."):
                    binding.refresh()
        with col_update:
            st.button(
                Label.UPDATE_BUTTON.value,
                type="primary",
                use_container_width=True,
                on_click=binding.open_overlay,
            )
        with col_focus:
            if st.button(Label.FOCUS_BUTTON.value, use_container_width=True):
                with net_action("Finding you..."):
                    binding.focus_viewer()
        with col_share:
            if binding.own_record() is not None:
                st.link_button(
                    Label.SHARE_BUTTON.value,
                    self.host_client.share_content(self._share_text()),
                    use_container_width=True,
                )

    def render(self):
        try:
            self._render_actions()
            if st.session_state.location_denied:
                st.caption("📍 Tap the location button to share where you are.")
            self.mood_overlay.render()

            focus = self.presentation_binding.consume_focus()
            mood_map = build_mood_map(st.session_state.groups, focus)
            st_folium(
                mood_map,
                key=Keys.MAP.value,
                height=MapDefaults.HEIGHT.value,
                use_container_width=True,
                center=focus["center"] if focus else None,
                zoom=focus["zoom"] if focus else None,
                returned_objects=[],
            )
            unplaced = sum(
                1 for g in st.session_state.groups if g.position is None
            )
            if unplaced:
                st.caption(f"{unplaced} place(s) could not be shown on the map yet.")
        except Exception as e:
            logger.exception("Map page failed to render")
            st.error(str(e))
