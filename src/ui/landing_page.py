import streamlit as st
from clients.identity_client import IdentityClient
from utils.constants import Label, Phase


class LandingPage:
    """Shown until the app knows its host and its viewer."""

    def __init__(self, identity_client: IdentityClient):
        self.identity_client = identity_client

    def render(self, phase: Phase):
        st.title("Mood Map")
        if phase == Phase.AWAITING_ENVIRONMENT:
            st.info(
                "Open this mini app from your Farcaster client to share your mood."
            )
            return
        if self.identity_client.is_ready:
            st.warning("Sign in with an account that has a Farcaster ID.")
            if st.button("Sign out"):
                st.logout()
            return
        st.write("Sign in to put your mood on the map.")
        if st.button(Label.LOGIN_BUTTON.value, type="primary"):
            self.identity_client.login()
