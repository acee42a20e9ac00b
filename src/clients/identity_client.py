import logging
from typing import Optional
import streamlit as st
from config.config import SETTINGS
from models.errors import IdentityUnavailable
from models.models import ViewerIdentity
from utils.constants import UNKNOWN_USER_NAME

logger = logging.getLogger(__name__)


class IdentityClient:
    """Thin wrapper over Streamlit's OIDC login."""

    def __init__(
        self, provider: Optional[str] = None, user_id_claim: Optional[str] = None
    ):
        self.provider = SETTINGS.auth_provider if provider is None else provider
        self.user_id_claim = user_id_claim or SETTINGS.identity_user_id_claim

    @property
    def is_ready(self) -> bool:
        return bool(st.user.get("is_logged_in", False))

    def current_user(self) -> Optional[ViewerIdentity]:
        """Return the signed-in viewer, or ``None`` before sign-in."""
        if not self.is_ready:
            return None
        raw_id = str(st.user.get(self.user_id_claim) or "").strip()
        if not raw_id.isdigit():
            logger.warning("Signed-in user has no numeric %r claim", self.user_id_claim)
            raise IdentityUnavailable("Your account has no Farcaster ID to post with.")
        name = (
            st.user.get("name")
            or st.user.get("preferred_username")
            or UNKNOWN_USER_NAME
        )
        return ViewerIdentity(user_id=int(raw_id), display_name=name)

    def login(self) -> None:
        if self.provider:
            st.login(self.provider)
        else:
            st.login()
