"""Field names and static reference data for address classification and feature output."""
from typing import FrozenSet, Tuple

# Search document / output property keys
OSM_ID = "osm_id"
OSM_VALUE = "osm_value"
OSM_KEY = "osm_key"
OSM_TYPE = "osm_type"
POSTCODE = "postcode"
HOUSENUMBER = "housenumber"
NAME = "name"
COUNTRY = "country"
CITY = "city"
STREET = "street"
STATE = "state"
COORDINATE = "coordinate"
EXTENT = "extent"
LAT = "lat"
LON = "lon"

# GeoJSON vocabulary
TYPE = "type"
FEATURE = "Feature"
FEATURE_COLLECTION = "FeatureCollection"
GEOMETRY = "geometry"
PROPERTIES = "properties"
POINT = "Point"
COORDINATES = "coordinates"

DEFAULT_LANGUAGE_KEY = "default"

# Copied verbatim, in this order, into every feature when present
KEYS_LANG_UNSPEC: Tuple[str, ...] = (OSM_ID, OSM_VALUE, OSM_KEY, POSTCODE, HOUSENUMBER, OSM_TYPE)
# Resolved against the requested language
KEYS_LANG_SPEC: Tuple[str, ...] = (NAME, COUNTRY, CITY, STREET, STATE)

CITY_PLACE_VALUES: FrozenSet[str] = frozenset({"city", "hamlet", "town", "village"})
USEFUL_CONTEXT_KEYS: FrozenSet[str] = frozenset({"boundary", "landuse", "place"})

# Rank band of street level entities, lower bound inclusive
STREET_RANK_MIN = 26
STREET_RANK_MAX = 28
# Anything broader (continents, seas) never shows up as context
MIN_CONTEXT_RANK = 4

ADMIN_LEVEL_COUNTRY = 2
ADMIN_LEVEL_STATE = 4
ADMIN_LEVEL_CITY = 8

# Relations known to be cities that tagging alone does not reveal
# (see https://github.com/komoot/photon/issues/138). Sorted ascending.
CURATED_CITY_RELATION_IDS: Tuple[int, ...] = (
    27021, 27027, 62340, 62347, 62349, 62352, 62369, 62370,
    62374, 62381, 62385, 62391, 62396, 62400, 62403, 62405,
    62407, 62409, 62410, 62411, 62414, 62418, 62422, 62428,
    62430, 62444, 62449, 62450, 62453, 62455, 62456, 62464,
    62470, 62471, 62478, 62481, 62484, 62493, 62495, 62496,
    62499, 62508, 62512, 62518, 62522, 62523, 62525, 62526,
    62528, 62531, 62532, 62534, 62539, 62554, 62559, 62562,
    62573, 62578, 62581, 62589, 62590, 62591, 62594, 62598,
    62629, 62630, 62631, 62634, 62636, 62638, 62640, 62642,
    62644, 62646, 62649, 62652, 62654, 62658, 62659, 62671,
    62675, 62685, 62691, 62693, 62695, 62699, 62701, 62713,
    62717, 62719, 62720, 62724, 62734, 62745, 62748, 62751,
    62768, 62772, 62780, 62782, 172679, 191645, 285864, 1800297,
    1829065, 2168233, 2793104,
)
CURATED_CITY_RELATION_ID_SET: FrozenSet[int] = frozenset(CURATED_CITY_RELATION_IDS)
