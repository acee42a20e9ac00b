import streamlit as st
from utils.constants import STATE_KEYS, Phase


def default_state():
    return {
        "phase": Phase.AWAITING_ENVIRONMENT,
        "host_user": None,
        "viewer": None,
        "moods": [],
        "groups": [],
        "overlay_open": False,
        "location": None,
        "location_denied": True,
        "map_focus": None,
        "submission_in_progress": False,
        "initial_load_pending": False,
    }


def ensure_state():
    """Ensure default state values exist for this browser session."""
    for key, value in default_state().items():
        st.session_state.setdefault(key, value)


def reset_state():
    """Forget everything loaded into this session, e.g. after sign-out."""
    defaults = default_state()
    for k in STATE_KEYS + ["host_user", "viewer"]:
        st.session_state[k] = defaults[k]
