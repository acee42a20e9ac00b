from models.models import Coordinates
from utils.geo_utils import compose_label, coordinate_key
from test_data import TEST_OPENCAGE_OCEAN_RAW, TEST_OPENCAGE_REVERSE_RAW


def test_coordinate_key_rounds_to_four_places():
    assert coordinate_key(Coordinates(lat=40.990312, lng=29.02904)) == "40.9903,29.0290"
    assert coordinate_key(Coordinates(lat=-33.8688, lng=151.2093)) == "-33.8688,151.2093"


def test_compose_label_descends_specificity():
    label = compose_label(
        TEST_OPENCAGE_REVERSE_RAW["components"], TEST_OPENCAGE_REVERSE_RAW["formatted"]
    )
    assert label == "Kadıköy, İstanbul, Türkiye"


def test_compose_label_prefers_city_over_town_and_state_over_province():
    components = {
        "village": "Little Snoring",
        "town": "Fakenham",
        "city": "Norwich",
        "province": "Nope",
        "state": "England",
        "country": "United Kingdom",
    }
    assert compose_label(components) == "Norwich, England, United Kingdom"


def test_compose_label_skips_missing_parts():
    assert compose_label({"village": "Hallstatt", "country": "Austria"}) == "Hallstatt, Austria"
    assert compose_label({"country": "Iceland"}) == "Iceland"


def test_compose_label_does_not_repeat_identical_parts():
    components = {"city": "Singapore", "country": "Singapore"}
    assert compose_label(components) == "Singapore"


def test_compose_label_falls_back_to_formatted():
    label = compose_label(
        TEST_OPENCAGE_OCEAN_RAW["components"], TEST_OPENCAGE_OCEAN_RAW["formatted"]
    )
    assert label == "Gulf of Guinea"


def test_compose_label_returns_none_not_empty_string():
    assert compose_label({}, "") is None
    assert compose_label(None, None) is None
    assert compose_label({"city": "   "}, "  ") is None
