import streamlit as st
from ui.state import ensure_state, reset_state
from utils.constants import Pages, Phase
from utils.logging import setup_logging
from utils.styling import load_custom_css
from di.container import Container


def _sign_out():
    reset_state()
    st.logout()


def main():
    st.set_page_config(page_title="Mood Map", page_icon="🌍", layout="wide")
    setup_logging()
    ensure_state()
    load_custom_css()
    container = Container()

    phase = container.presentation_binding().advance()
    if phase != Phase.READY:
        container.landing_page().render(phase)
        return

    st.sidebar.title("Navigation")
    selection = st.sidebar.radio(
        "Navigation",
        (Pages.MAP.value["key"], Pages.FEED.value["key"]),
        format_func=lambda x: {
            Pages.MAP.value["key"]: Pages.MAP.value["title"],
            Pages.FEED.value["key"]: Pages.FEED.value["title"],
        }[x],
        label_visibility="hidden",
    )
    st.sidebar.caption(f"Signed in as {st.session_state.viewer.display_name}")
    if st.sidebar.button("Sign out"):
        _sign_out()

    if selection == Pages.MAP.value["key"]:
        container.map_page().render()
    elif selection == Pages.FEED.value["key"]:
        container.feed_page().render()


if __name__ == "__main__":
    main()
