"""Pytest configuration and fixtures."""
import pytest
from placeshape.core.models import AddressRecord
from placeshape.core.features import FeatureAssembler


@pytest.fixture
def make_record():
    """Factory for address records with sensible defaults."""
    def _make(**overrides):
        fields = {
            "place_id": 1,
            "osm_type": "N",
            "osm_id": 1,
            "name": {"default": "Somewhere"},
            "osm_key": "place",
            "osm_value": "locality",
            "admin_level": None,
            "rank_address": 20,
            "postcode": None,
            "place": None,
        }
        fields.update(overrides)
        return AddressRecord(**fields)
    return _make


@pytest.fixture
def berlin_source():
    """Search document of Berlin with coordinate and extent."""
    return {
        "osm_id": 62422,
        "osm_type": "R",
        "osm_key": "place",
        "osm_value": "city",
        "postcode": "10117",
        "coordinate": {"lat": 52.5, "lon": 13.4},
        "extent": {"type": "envelope", "coordinates": [[13.0, 52.6], [13.8, 52.4]]},
        "name": {"en": "Berlin", "default": "Berlin", "fr": "Berlin (FR)"},
        "country": {"en": "Germany", "de": "Deutschland", "default": "Deutschland"},
        "state": {"default": "Berlin"},
    }


@pytest.fixture
def street_source():
    """Search document of a house number on a street, without extent."""
    return {
        "osm_id": 2001,
        "osm_type": "N",
        "osm_key": "building",
        "osm_value": "yes",
        "housenumber": "12",
        "coordinate": {"lat": 52.52, "lon": 13.41},
        "street": {"default": "Unter den Linden"},
        "city": {"en": "Berlin", "default": "Berlin"},
    }


@pytest.fixture
def address_rows():
    """Address rows of a house in Berlin, most specific first."""
    return [
        {"place_id": 10, "osm_type": "W", "osm_id": 501, "name": {"default": "Unter den Linden"},
         "class": "highway", "type": "primary", "admin_level": None, "rank_address": 26},
        {"place_id": 11, "osm_type": "R", "osm_id": 701, "name": {"default": "Mitte"},
         "class": "boundary", "type": "administrative", "admin_level": 9, "rank_address": 20},
        {"place_id": 12, "osm_type": "N", "osm_id": 801, "name": {"default": "10117"},
         "class": "place", "type": "postcode", "admin_level": None, "rank_address": 21},
        {"place_id": 13, "osm_type": "R", "osm_id": 62422, "name": {"default": "Berlin", "en": "Berlin"},
         "class": "boundary", "type": "administrative", "admin_level": 4, "rank_address": 8},
        {"place_id": 14, "osm_type": "R", "osm_id": 51477, "name": {"default": "Deutschland", "en": "Germany"},
         "class": "boundary", "type": "administrative", "admin_level": 2, "rank_address": 4},
        {"place_id": 15, "osm_type": "R", "osm_id": 9, "name": {"default": "Europe"},
         "class": "place", "type": "continent", "admin_level": None, "rank_address": 2},
    ]


@pytest.fixture
def assembler():
    """English assembler running inline."""
    return FeatureAssembler(language="en", max_workers=1)
