import streamlit as st
from ui.presentation import PresentationBinding
from utils.constants import MOOD_EMOJIS, STATUS_MAX_LENGTH, Keys, Label


class MoodOverlay:
    """Modal for picking an emoji and a short status."""

    def __init__(self, presentation_binding: PresentationBinding):
        self.presentation_binding = presentation_binding

    def _body(self):
        binding = self.presentation_binding
        if st.session_state.location_denied:
            st.error(Label.LOCATION_NEEDED.value)

        own = binding.own_record()
        emoji = st.pills(
            "Mood",
            MOOD_EMOJIS,
            selection_mode="single",
            default=own.emoji if own else None,
            key=Keys.EMOJI.value,
            label_visibility="collapsed",
        )
        status = st.text_input(
            Label.STATUS.value,
            max_chars=STATUS_MAX_LENGTH,
            key=Keys.STATUS.value,
            placeholder=Label.STATUS.value,
            label_visibility="collapsed",
        )

        col_submit, col_cancel = st.columns(2)
        with col_submit:
            submitted = st.button(
                Label.SUBMIT_BUTTON.value,
                type="primary",
                use_container_width=True,
                disabled=not emoji
                or st.session_state.location_denied
                or st.session_state.submission_in_progress,
                on_click=binding.begin_submission,
            )
        with col_cancel:
            cancelled = st.button(Label.CANCEL_BUTTON.value, use_container_width=True)

        if submitted:
            with st.spinner("Adding your mood to the map...", show_time=True):
                record = binding.submit(emoji, status)
            if record is not None:
                st.toast("Mood added to the map! 🌍", icon="🌍")
                st.rerun()
        elif cancelled:
            binding.close_overlay()
            st.rerun()

    def render(self):
        if not st.session_state.overlay_open:
            return
        # Closing the dialog with its X must not reopen it on the next run.
        self.presentation_binding.close_overlay()

        @st.dialog(Label.OVERLAY_TITLE.value)
        def _overlay():
            self._body()

        _overlay()
