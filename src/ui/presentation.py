import logging
from typing import Callable, MutableMapping, Optional
import streamlit as st
from clients.host_client import HostEnvironmentClient
from clients.identity_client import IdentityClient
from models.errors import (
    HostEnvironmentUnavailable,
    IdentityUnavailable,
    InvalidMoodSubmission,
    MoodStoreError,
)
from models.models import Coordinates, MoodRecord, ViewerIdentity
from tools.mood_grouper import find_viewer_group
from utils.constants import MapDefaults, Phase
from workflows.map_refresh_workflow import MapRefreshWorkflow
from workflows.submit_mood_workflow import SubmitMoodWorkflow

logger = logging.getLogger(__name__)


class PresentationBinding:
    """Drives a page session from host detection to an interactive map.

    Phases only move forward: awaiting-environment -> awaiting-identity ->
    ready. Every reload replaces the whole mood list and regroups it.
    """

    def __init__(
        self,
        host_client: HostEnvironmentClient,
        identity_client: IdentityClient,
        map_refresh_workflow: MapRefreshWorkflow,
        submit_mood_workflow: SubmitMoodWorkflow,
        notify: Callable[[str], None],
        state: Optional[MutableMapping] = None,
    ):
        self.host_client = host_client
        self.identity_client = identity_client
        self.map_refresh_workflow = map_refresh_workflow
        self.submit_mood_workflow = submit_mood_workflow
        self.notify = notify
        self.state = st.session_state if state is None else state

    @property
    def phase(self) -> Phase:
        return self.state["phase"]

    @property
    def viewer(self) -> Optional[ViewerIdentity]:
        return self.state["viewer"]

    def advance(self) -> Phase:
        if self.phase == Phase.AWAITING_ENVIRONMENT:
            if not self._confirm_environment():
                return self.phase
            self.host_client.signal_ready()
            self.state["phase"] = Phase.AWAITING_IDENTITY

        if self.phase == Phase.AWAITING_IDENTITY:
            identity = self._current_identity()
            if identity is None:
                return self.phase
            host_user = self.state["host_user"]
            display_name = (
                host_user.display_name or host_user.username
                if host_user is not None
                else None
            )
            self.state["viewer"] = ViewerIdentity(
                user_id=identity.user_id,
                display_name=display_name or identity.display_name,
            )
            self._enter_ready()
            self.state["phase"] = Phase.READY
        return self.phase

    def _confirm_environment(self) -> bool:
        try:
            self.state["host_user"] = self.host_client.wait_until_ready()
        except HostEnvironmentUnavailable as e:
            # The sign-in redirect starts a new session without launch parameters.
            identity = self._current_identity()
            if identity is None:
                logger.info("Staying on landing: %s", e)
                return False
            logger.info("Resuming viewer %s without launch context", identity.user_id)
        return True

    def _current_identity(self) -> Optional[ViewerIdentity]:
        try:
            return self.identity_client.current_user()
        except IdentityUnavailable as e:
            self.notify(str(e))
            return None

    def _enter_ready(self) -> None:
        logger.info("Viewer %s ready", self.viewer.user_id)
        self.state["initial_load_pending"] = True
        self.refresh()

    def own_record(self) -> Optional[MoodRecord]:
        if self.viewer is None:
            return None
        return next(
            (m for m in self.state["moods"] if m.user_id == self.viewer.user_id),
            None,
        )

    def refresh(self) -> bool:
        viewer_id = self.viewer.user_id if self.viewer else None
        try:
            output = self.map_refresh_workflow.run({"viewer_id": viewer_id})
        except MoodStoreError as e:
            self.notify(str(e))
            return False
        self.state["moods"] = output["records"]
        self.state["groups"] = output["groups"]
        if self.state["initial_load_pending"]:
            # First successful load after sign-in: new viewers get the picker.
            self.state["initial_load_pending"] = False
            if self.own_record() is None:
                self.open_overlay()
        return True

    def record_location(self, coordinates: Optional[Coordinates]) -> None:
        self.state["location"] = coordinates
        self.state["location_denied"] = coordinates is None

    def open_overlay(self) -> None:
        self.state["overlay_open"] = True

    def close_overlay(self) -> None:
        self.state["overlay_open"] = False

    def begin_submission(self) -> None:
        self.state["submission_in_progress"] = True

    def submit(self, emoji: Optional[str], status: str) -> Optional[MoodRecord]:
        try:
            if self.state["location_denied"]:
                self.notify("Please allow location access!")
                return None
            record = self.submit_mood_workflow.run(
                {
                    "viewer": self.viewer,
                    "emoji": emoji,
                    "status": status,
                    "coordinates": self.state["location"],
                }
            )
        except (InvalidMoodSubmission, MoodStoreError) as e:
            logger.warning("Mood submission failed: %s", e)
            self.notify(str(e))
            return None
        finally:
            self.state["submission_in_progress"] = False
        self.close_overlay()
        self.refresh()
        return record

    def focus_viewer(self) -> None:
        """Reload, then center the map on the viewer's own group."""
        self.refresh()
        group = find_viewer_group(self.state["groups"])
        if group is None or group.position is None:
            self.notify("Your mood is not on the map yet.")
            return
        self.state["map_focus"] = {
            "center": group.position.as_pair(),
            "zoom": MapDefaults.FOCUS_ZOOM.value,
        }

    def consume_focus(self) -> Optional[dict]:
        """Return the pending viewport focus for one render only."""
        focus = self.state["map_focus"]
        self.state["map_focus"] = None
        return focus
