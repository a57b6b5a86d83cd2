"""Tests for address classification rules."""
import pytest
from placeshape.core import rules
from placeshape.core.constants import CURATED_CITY_RELATION_IDS


@pytest.mark.parametrize("rank", [26, 27])
def test_is_street_inside_band(make_record, rank):
    """Ranks 26 and 27 are streets."""
    assert rules.is_street(make_record(rank_address=rank))


@pytest.mark.parametrize("rank", [25, 28, 30, 4])
def test_is_street_outside_band(make_record, rank):
    """Rank band is half open."""
    assert not rules.is_street(make_record(rank_address=rank))


@pytest.mark.parametrize("value", ["city", "hamlet", "town", "village"])
def test_is_city_by_place_tag(make_record, value):
    """place=city/hamlet/town/village is a city regardless of admin level."""
    assert rules.is_city(make_record(osm_key="place", osm_value=value))
    assert rules.is_city(make_record(osm_key="place", osm_value=value, admin_level=4))


def test_is_city_by_secondary_place(make_record):
    """The loose place label also marks a city."""
    record = make_record(osm_key="boundary", osm_value="administrative", admin_level=6, place="town")
    assert rules.is_city(record)


def test_is_city_by_admin_level(make_record):
    """Admin level 8 boundaries are cities."""
    assert rules.is_city(make_record(osm_key="boundary", osm_value="administrative", admin_level=8))
    assert not rules.is_city(make_record(osm_key="boundary", osm_value="administrative", admin_level=9))
    assert not rules.is_city(make_record(osm_key="boundary", osm_value="administrative", admin_level=None))


def test_is_city_other_values(make_record):
    """Suburbs and non-place keys are not cities."""
    assert not rules.is_city(make_record(osm_key="place", osm_value="suburb"))
    assert not rules.is_city(make_record(osm_key="landuse", osm_value="city"))
    assert not rules.is_city(make_record(osm_key=None, osm_value=None))


def test_is_curated_city(make_record):
    """Curated ids only count for relations."""
    assert rules.is_curated_city(make_record(osm_type="R", osm_id=62772))
    assert not rules.is_curated_city(make_record(osm_type="W", osm_id=62772))
    assert not rules.is_curated_city(make_record(osm_type="N", osm_id=62772))
    assert not rules.is_curated_city(make_record(osm_type="R", osm_id=62773))
    assert not rules.is_curated_city(make_record(osm_type=None, osm_id=None))


def test_curated_ids_reference_data():
    """Reference table is sorted, unique and complete."""
    assert len(CURATED_CITY_RELATION_IDS) == 107
    assert list(CURATED_CITY_RELATION_IDS) == sorted(set(CURATED_CITY_RELATION_IDS))
    assert CURATED_CITY_RELATION_IDS[0] == 27021
    assert CURATED_CITY_RELATION_IDS[-1] == 2793104


def test_is_postcode(make_record):
    """place=postcode and boundary=postal_code are postcodes."""
    assert rules.is_postcode(make_record(osm_key="place", osm_value="postcode"))
    assert rules.is_postcode(make_record(osm_key="boundary", osm_value="postal_code"))
    assert not rules.is_postcode(make_record(osm_key="boundary", osm_value="postcode"))


def test_has_postcode_and_place(make_record):
    """Empty strings count as absent."""
    assert rules.has_postcode(make_record(postcode="10117"))
    assert not rules.has_postcode(make_record(postcode=None))
    assert not rules.has_postcode(make_record(postcode=""))
    assert rules.has_place(make_record(place="village"))
    assert not rules.has_place(make_record(place=""))


def test_is_country(make_record):
    """Admin level 2 boundaries and place=country are countries."""
    assert rules.is_country(make_record(osm_key="boundary", osm_value="administrative", admin_level=2))
    assert rules.is_country(make_record(osm_key="place", osm_value="country"))
    assert not rules.is_country(make_record(osm_key="boundary", osm_value="administrative", admin_level=4))


def test_is_state(make_record):
    """Admin level 4 boundaries and place=state are states."""
    assert rules.is_state(make_record(osm_key="boundary", osm_value="administrative", admin_level=4))
    assert rules.is_state(make_record(osm_key="place", osm_value="state"))
    assert not rules.is_state(make_record(osm_key="boundary", osm_value="protected_area", admin_level=4))


def test_is_useful_for_context(make_record):
    """Named places, boundaries and landuse above continent rank qualify."""
    assert rules.is_useful_for_context(make_record(osm_key="place", osm_value="suburb"))
    assert rules.is_useful_for_context(make_record(osm_key="boundary", osm_value="administrative"))
    assert rules.is_useful_for_context(make_record(osm_key="landuse", osm_value="residential"))
    assert rules.is_useful_for_context(make_record(osm_key="place", osm_value="city", rank_address=4))
    assert not rules.is_useful_for_context(make_record(osm_key="highway", osm_value="primary"))


def test_is_useful_for_context_disqualified(make_record):
    """Each disqualifying condition alone rules a record out."""
    assert not rules.is_useful_for_context(make_record(name={}))
    assert not rules.is_useful_for_context(make_record(osm_key="place", osm_value="postcode"))
    assert not rules.is_useful_for_context(make_record(osm_type="R", osm_id=62422, osm_key="boundary"))
    assert not rules.is_useful_for_context(make_record(osm_key="place", osm_value="continent", rank_address=2))


def test_rules_never_raise_on_bare_record(make_record):
    """A record with nothing but an id answers every rule."""
    record = make_record(osm_type=None, osm_id=None, name=None, osm_key=None, osm_value=None)
    for rule in (rules.is_street, rules.is_city, rules.is_curated_city, rules.is_postcode,
                 rules.has_postcode, rules.has_place, rules.is_country, rules.is_state,
                 rules.is_useful_for_context):
        assert rule(record) in (True, False)
