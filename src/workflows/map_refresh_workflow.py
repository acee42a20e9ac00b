import logging
from typing import Any, Dict, List
from langgraph.graph import END, START, StateGraph
from pydantic import ValidationError
from clients.mood_store_client import MoodStoreClient
from models.models import MapState, MoodRecord
from tools.location_resolver import LocationResolver
from tools.mood_grouper import group_moods
from workflows.workflow import Workflow

logger = logging.getLogger(__name__)


class MapRefreshWorkflow(Workflow):
    """Reload every mood, place each distinct label, and regroup."""

    def __init__(
        self, mood_store_client: MoodStoreClient, location_resolver: LocationResolver
    ) -> None:
        self.mood_store_client = mood_store_client
        self.location_resolver = location_resolver
        self.graph = self._build_graph()

    def _build_graph(self):
        graph = StateGraph(MapState)
        graph.add_node("fetch_moods", self._fetch_moods)
        graph.add_node("resolve_positions", self._resolve_positions)
        graph.add_node("group_moods", self._group_moods)
        graph.add_edge(START, "fetch_moods")
        graph.add_edge("fetch_moods", "resolve_positions")
        graph.add_edge("resolve_positions", "group_moods")
        graph.add_edge("group_moods", END)
        return graph.compile()

    def _fetch_moods(self, state: MapState) -> Dict[str, Any]:
        records: List[MoodRecord] = []
        for row in self.mood_store_client.select_all():
            try:
                records.append(MoodRecord.from_row(row))
            except (KeyError, ValidationError):
                logger.warning("Skipping malformed mood row %r", row.get("id"))
        return {"records": records}

    def _resolve_positions(self, state: MapState) -> Dict[str, Any]:
        labels = [
            r.location_label
            for r in state.records
            if r.location_label and r.location_label.strip()
        ]
        return {"positions": self.location_resolver.resolve_many(labels)}

    def _group_moods(self, state: MapState) -> Dict[str, Any]:
        groups = group_moods(state.records, state.positions, state.viewer_id)
        return {"groups": groups}

    def run(self, input: Dict[str, Any]) -> Dict[str, Any]:
        viewer_id = self._require_dict(input).get("viewer_id")
        return self.graph.invoke(input=MapState(viewer_id=viewer_id))
