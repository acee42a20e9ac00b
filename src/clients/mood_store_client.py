import logging
from typing import Any, Dict, List, Optional
import httpx
import streamlit as st
from postgrest.exceptions import APIError
from supabase import Client, create_client
from config.config import SETTINGS
from models.errors import MoodStoreError
from utils.constants import StoreColumns

logger = logging.getLogger(__name__)


@st.cache_resource(show_spinner=False)
def _get_supabase_client(url: str, key: str) -> Client:
    return create_client(url, key)


class MoodStoreClient:
    """Reads and writes the single moods table."""

    def __init__(self, client: Optional[Client] = None, table: Optional[str] = None):
        self.table = table or SETTINGS.moods_table
        if client is None:
            assert SETTINGS.supabase_url, "SUPABASE_URL not found."
            assert SETTINGS.supabase_anon_key, "SUPABASE_ANON_KEY not found."
            client = _get_supabase_client(
                SETTINGS.supabase_url, SETTINGS.supabase_anon_key
            )
        self.client = client

    def select_all(self) -> List[Dict[str, Any]]:
        try:
            response = (
                self.client.table(self.table)
                .select("*")
                .order(StoreColumns.CREATED_AT.value, desc=True)
                .execute()
            )
        except APIError as e:
            logger.exception("Fetching moods failed")
            raise MoodStoreError(f"Could not load moods: {e.message}") from e
        except httpx.HTTPError as e:
            logger.exception("Moods table unreachable")
            raise MoodStoreError(f"Could not load moods: {e}") from e
        return response.data or []

    def upsert(self, row: Dict[str, Any]) -> Dict[str, Any]:
        """Insert or replace the row keyed by the user's social ID."""
        try:
            response = (
                self.client.table(self.table)
                .upsert(row, on_conflict=StoreColumns.USER_ID.value)
                .execute()
            )
        except APIError as e:
            logger.exception(
                "Saving mood for user %s failed", row.get(StoreColumns.USER_ID.value)
            )
            raise MoodStoreError(f"Could not save your mood: {e.message}") from e
        except httpx.HTTPError as e:
            logger.exception("Moods table unreachable while saving")
            raise MoodStoreError(f"Could not save your mood: {e}") from e
        if not response.data:
            raise MoodStoreError("Could not save your mood: empty response")
        return response.data[0]
