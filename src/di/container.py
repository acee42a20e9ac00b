import streamlit as st
from dependency_injector import containers, providers
from clients.device_location_client import DeviceLocationClient
from clients.geocoder_client import GeocoderClient
from clients.host_client import HostEnvironmentClient
from clients.identity_client import IdentityClient
from clients.mood_store_client import MoodStoreClient
from tools.geocode_cache import GeocodeCache
from tools.location_resolver import LocationResolver
from ui.feed_page import FeedPage
from ui.landing_page import LandingPage
from ui.map_page import MapPage
from ui.mood_overlay import MoodOverlay
from ui.net_action import notify
from ui.presentation import PresentationBinding
from workflows.map_refresh_workflow import MapRefreshWorkflow
from workflows.submit_mood_workflow import SubmitMoodWorkflow


@st.cache_resource
def shared_geocode_store() -> dict:
    """Backing dict for the geocode cache; lives as long as the server."""
    return {}


class Container(containers.DeclarativeContainer):
    # Clients
    mood_store_client = providers.Singleton(MoodStoreClient)
    geocoder_client = providers.Singleton(GeocoderClient)
    host_client = providers.Singleton(HostEnvironmentClient)
    identity_client = providers.Singleton(IdentityClient)
    device_location_client = providers.Singleton(DeviceLocationClient)

    # Tools
    geocode_cache = providers.Singleton(
        GeocodeCache, store=providers.Callable(shared_geocode_store)
    )
    location_resolver = providers.Singleton(
        LocationResolver,
        geocoder_client=geocoder_client,
        cache=geocode_cache,
        notify=providers.Object(notify),
    )

    # Workflows
    submit_mood_workflow = providers.Singleton(
        SubmitMoodWorkflow,
        mood_store_client=mood_store_client,
        location_resolver=location_resolver,
    )
    map_refresh_workflow = providers.Singleton(
        MapRefreshWorkflow,
        mood_store_client=mood_store_client,
        location_resolver=location_resolver,
    )

    # Presentation
    presentation_binding = providers.Singleton(
        PresentationBinding,
        host_client=host_client,
        identity_client=identity_client,
        map_refresh_workflow=map_refresh_workflow,
        submit_mood_workflow=submit_mood_workflow,
        notify=providers.Object(notify),
    )

    # UI Pages
    mood_overlay = providers.Singleton(
        MoodOverlay, presentation_binding=presentation_binding
    )
    landing_page = providers.Singleton(LandingPage, identity_client=identity_client)
    map_page = providers.Singleton(
        MapPage,
        presentation_binding=presentation_binding,
        host_client=host_client,
        device_location_client=device_location_client,
        mood_overlay=mood_overlay,
    )
    feed_page = providers.Singleton(FeedPage, presentation_binding=presentation_binding)
