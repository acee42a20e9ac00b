import logging
from typing import Any, Dict
from langchain_core.runnables import RunnableLambda
from pydantic import ValidationError
from clients.mood_store_client import MoodStoreClient
from models.errors import InvalidMoodSubmission
from models.models import Coordinates, MoodRecord, MoodSubmission, ViewerIdentity
from tools.location_resolver import LocationResolver
from workflows.workflow import Workflow

logger = logging.getLogger(__name__)


class SubmitMoodWorkflow(Workflow):
    """Validate a mood, attach a place name and upsert it over the user's last one."""

    def __init__(
        self, mood_store_client: MoodStoreClient, location_resolver: LocationResolver
    ):
        self.mood_store_client = mood_store_client
        self.location_resolver = location_resolver

    def _validate(self, payload: Dict[str, Any]) -> MoodSubmission:
        viewer = payload.get("viewer")
        coordinates = payload.get("coordinates")
        if not isinstance(viewer, ViewerIdentity):
            raise InvalidMoodSubmission("Sign in before sharing a mood.")
        if not isinstance(coordinates, Coordinates):
            raise InvalidMoodSubmission("Location access is required to share a mood.")
        if not payload.get("emoji"):
            raise InvalidMoodSubmission("Pick an emoji first.")
        try:
            return MoodSubmission(
                user_id=viewer.user_id,
                display_name=viewer.display_name,
                emoji=payload["emoji"],
                status=payload.get("status") or None,
                coordinates=coordinates,
            )
        except ValidationError as e:
            raise InvalidMoodSubmission(e.errors()[0]["msg"]) from e

    def _attach_label(self, submission: MoodSubmission) -> MoodSubmission:
        label = self.location_resolver.resolve_label(submission.coordinates)
        if label is None:
            return submission
        return submission.model_copy(update={"location_label": label})

    def _upsert(self, submission: MoodSubmission) -> MoodRecord:
        row = self.mood_store_client.upsert(submission.to_row())
        logger.info(
            "Stored mood %s for user %s at %r",
            submission.emoji,
            submission.user_id,
            submission.location_label,
        )
        return MoodRecord.from_row(row)

    def run(self, input: Dict[str, Any]) -> MoodRecord:
        self._require_dict(input)
        chain = (
            RunnableLambda(self._validate)
            | RunnableLambda(self._attach_label)
            | RunnableLambda(self._upsert)
        )
        return chain.invoke(input)
