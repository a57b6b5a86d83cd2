"""Classification rules over a single address record.

Every rule is an independent predicate. A record may satisfy several at once
(a city is usually useful context as well), so callers ask each question
separately. Missing optional fields make a rule answer False; no rule raises.
"""
from placeshape.core.constants import (
    CITY_PLACE_VALUES,
    USEFUL_CONTEXT_KEYS,
    CURATED_CITY_RELATION_ID_SET,
    STREET_RANK_MIN,
    STREET_RANK_MAX,
    MIN_CONTEXT_RANK,
    ADMIN_LEVEL_COUNTRY,
    ADMIN_LEVEL_STATE,
    ADMIN_LEVEL_CITY,
    STATE,
)
from placeshape.core.models import AddressRecord, OsmType


def _is_admin_boundary(record: AddressRecord, level: int) -> bool:
    return (
        record.admin_level == level
        and record.osm_key == "boundary"
        and record.osm_value == "administrative"
    )


def is_street(record: AddressRecord) -> bool:
    """Street level entities live in the rank band [26, 28)."""
    return STREET_RANK_MIN <= record.rank_address < STREET_RANK_MAX


def is_city(record: AddressRecord) -> bool:
    if record.osm_key == "place" and record.osm_value in CITY_PLACE_VALUES:
        return True

    if record.place in CITY_PLACE_VALUES:
        return True

    return _is_admin_boundary(record, ADMIN_LEVEL_CITY)


def is_curated_city(record: AddressRecord) -> bool:
    """Whether the record was manually marked as a city."""
    return record.osm_type is OsmType.RELATION and record.osm_id in CURATED_CITY_RELATION_ID_SET


def is_postcode(record: AddressRecord) -> bool:
    if record.osm_key == "place" and record.osm_value == "postcode":
        return True

    return record.osm_key == "boundary" and record.osm_value == "postal_code"


def has_postcode(record: AddressRecord) -> bool:
    return record.postcode is not None


def has_place(record: AddressRecord) -> bool:
    return record.place is not None


def is_country(record: AddressRecord) -> bool:
    if _is_admin_boundary(record, ADMIN_LEVEL_COUNTRY):
        return True

    return record.osm_key == "place" and record.osm_value == "country"


def is_state(record: AddressRecord) -> bool:
    if record.osm_key == "place" and record.osm_value == STATE:
        return True

    return _is_admin_boundary(record, ADMIN_LEVEL_STATE)


def is_useful_for_context(record: AddressRecord) -> bool:
    """
    Whether the record belongs in the breadcrumb of containing regions.

    Unnamed rows, postcodes and curated cities never qualify; neither do
    very broad entities such as continents and seas.
    """
    if not record.name:
        return False

    if is_postcode(record):
        return False

    if is_curated_city(record):
        # already surfaced as the city
        return False

    if record.rank_address < MIN_CONTEXT_RANK:
        return False

    return record.osm_key in USEFUL_CONTEXT_KEYS
