import streamlit as st
from ui.Page import Page
from ui.presentation import PresentationBinding
from utils.constants import Label, Pages


class FeedPage(Page):
    """Recent moods, newest first."""

    title = Pages.FEED.value["title"]

    def __init__(self, presentation_binding: PresentationBinding):
        self.presentation_binding = presentation_binding

    def render(self):
        st.title("Recent Moods")
        if st.button(Label.REFRESH_BUTTON.value):
            self.presentation_binding.refresh()

        moods = st.session_state.moods
        if not moods:
            st.info("There are no moods yet. Be the first to share your mood!")
            return

        for mood in moods:
            with st.container(border=True):
                col_emoji, col_text = st.columns([1, 6], vertical_alignment="center")
                col_emoji.markdown(f"## {mood.emoji}")
                with col_text:
                    st.markdown(f"**{mood.display_name}**")
                    if mood.status:
                        st.markdown(f'"{mood.status}"')
                    details = [d for d in [mood.location_label] if d]
                    if mood.created_at:
                        details.append(
                            mood.created_at.astimezone().strftime("%Y-%m-%d %H:%M")
                        )
                    if details:
                        st.caption(" · ".join(details))
