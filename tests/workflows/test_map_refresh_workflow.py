from unittest.mock import MagicMock
import pytest
from geopy.exc import GeocoderServiceError
from models.errors import MoodStoreError
from models.models import Coordinates
from tools.geocode_cache import GeocodeCache
from tools.location_resolver import LocationResolver
from workflows.map_refresh_workflow import MapRefreshWorkflow
from test_data import TEST_ROWS


def _location(lat, lng):
    location = MagicMock()
    location.latitude = lat
    location.longitude = lng
    return location


def _workflow(rows=None):
    store = MagicMock()
    store.select_all.return_value = TEST_ROWS if rows is None else rows
    geocoder = MagicMock()
    geocoder.configured = True
    geocoder.geocode.side_effect = lambda label: {
        "Kadıköy, İstanbul": _location(40.99, 29.03),
    }.get(label)
    resolver = LocationResolver(geocoder, GeocodeCache(), MagicMock())
    return MapRefreshWorkflow(store, resolver), store, geocoder


def test_refresh_loads_groups_and_positions():
    workflow, _, geocoder = _workflow()
    output = workflow.run({"viewer_id": 7})

    assert [r.id for r in output["records"]] == [r["id"] for r in TEST_ROWS]
    assert output["positions"]["Kadıköy, İstanbul"] == Coordinates(lat=40.99, lng=29.03)
    assert output["positions"]["London, England, United Kingdom"] is None

    groups = {g.location_label: g for g in output["groups"]}
    assert set(groups) == {"Kadıköy, İstanbul", "London, England, United Kingdom"}
    kadikoy = groups["Kadıköy, İstanbul"]
    assert kadikoy.count == 2
    assert kadikoy.representative_emoji == "😴"
    assert geocoder.geocode.call_count == 2


def test_second_refresh_reuses_cached_positions():
    workflow, store, geocoder = _workflow()
    workflow.run({"viewer_id": None})
    workflow.run({"viewer_id": None})
    assert store.select_all.call_count == 2
    assert geocoder.geocode.call_count == 2


def test_malformed_rows_are_skipped():
    rows = TEST_ROWS + [{"id": "broken", "fid": 1}]
    workflow, _, _ = _workflow(rows)
    output = workflow.run({})
    assert "broken" not in [r.id for r in output["records"]]
    assert len(output["records"]) == len(TEST_ROWS)


def test_empty_table():
    workflow, _, geocoder = _workflow(rows=[])
    output = workflow.run({})
    assert output["records"] == []
    assert output["groups"] == []
    geocoder.geocode.assert_not_called()


def test_store_failure_propagates():
    workflow, store, _ = _workflow()
    store.select_all.side_effect = MoodStoreError("Could not load moods: down")
    with pytest.raises(MoodStoreError):
        workflow.run({})


def test_failed_lookups_notify_once_per_refresh():
    store = MagicMock()
    store.select_all.return_value = TEST_ROWS
    geocoder = MagicMock()
    geocoder.configured = True
    geocoder.geocode.side_effect = GeocoderServiceError("503")
    notify = MagicMock()
    workflow = MapRefreshWorkflow(store, LocationResolver(geocoder, GeocodeCache(), notify))

    output = workflow.run({"viewer_id": 42})
    assert all(p is None for p in output["positions"].values())
    assert geocoder.geocode.call_count == 2
    notify.assert_called_once_with("2 place(s) could not be looked up right now.")
