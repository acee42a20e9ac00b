import json
import logging
from typing import Mapping, MutableMapping, Optional
from urllib.parse import urlencode
import streamlit as st
import streamlit.components.v1 as components
from config.config import SETTINGS
from models.errors import HostEnvironmentUnavailable
from models.models import HostUser

logger = logging.getLogger(__name__)

READY_SCRIPT = """
<script>
const app = window.parent;
if (app.farcaster && app.farcaster.actions && app.farcaster.actions.ready) {
  app.farcaster.actions.ready();
} else {
  const s = app.document.createElement("script");
  s.type = "module";
  s.textContent = `import { sdk } from ${SDK_URL}; sdk.actions.ready();`;
  app.document.head.appendChild(s);
}
</script>
"""


class HostEnvironmentClient:
    """Bridge to the social client that embeds the mini app.

    The host launches the app with its user context in the query string
    (``fid``, ``username``, ``displayName``, ``pfpUrl``). The context is either
    there on this run or it is not; nothing delivers it later.
    """

    def __init__(
        self,
        query_params: Optional[Mapping[str, str]] = None,
        compose_url: Optional[str] = None,
        sdk_url: Optional[str] = None,
        state: Optional[MutableMapping] = None,
    ):
        self.compose_url = compose_url or SETTINGS.share_compose_url
        self.sdk_url = sdk_url or SETTINGS.miniapp_sdk_url
        self.state = st.session_state if state is None else state
        self._user = self._parse_context(
            st.query_params if query_params is None else query_params
        )

    @staticmethod
    def _parse_context(params: Mapping[str, str]) -> Optional[HostUser]:
        fid = (params.get("fid") or "").strip()
        if not fid.isdigit():
            logger.info("No host context in launch parameters")
            return None
        return HostUser(
            id=int(fid),
            username=params.get("username") or None,
            display_name=params.get("displayName") or None,
            avatar_url=params.get("pfpUrl") or None,
        )

    def wait_until_ready(self) -> HostUser:
        if self._user is None:
            raise HostEnvironmentUnavailable("Not launched from a social client host")
        return self._user

    def get_current_user(self) -> Optional[HostUser]:
        return self._user

    def signal_ready(self) -> None:
        """Dismiss the host's splash screen, once per session."""
        if self.state.get("host_ready_signalled"):
            return
        components.html(
            READY_SCRIPT.replace("${SDK_URL}", json.dumps(self.sdk_url)), height=0
        )
        self.state["host_ready_signalled"] = True
        logger.info("Signalled ready to host for fid=%s", getattr(self._user, "id", None))

    def share_content(self, text: str) -> str:
        """Return the host compose URL that opens a cast prefilled with ``text``."""
        return f"{self.compose_url}?{urlencode({'text': text})}"
