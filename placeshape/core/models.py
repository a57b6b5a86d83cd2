"""Data models for address rows, search hits and output features."""
import json
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Optional, List, Dict, Any, Mapping, Tuple

import pandas as pd
from shapely.geometry import Point

from placeshape.core.constants import (
    COORDINATE, EXTENT, LAT, LON, COORDINATES, TYPE, FEATURE, GEOMETRY, PROPERTIES, POINT,
    OSM_ID, OSM_VALUE, DEFAULT_LANGUAGE_KEY,
)
from placeshape.utils.error_handler import safe_execute


def _missing(value: Any) -> bool:
    """True for None and for the NaN pandas uses for empty cells."""
    if value is None:
        return True
    return isinstance(value, float) and pd.isna(value)


def _optional_int(value: Any) -> Optional[int]:
    """Integer or None; non-integral input such as "8.5" raises ValueError."""
    if _missing(value):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        # CSV exports write integer columns with gaps as floats ("8.0")
        if "." in value:
            value = float(value)
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"Expected an integral value, got {value!r}")
    return int(value)


def _optional_str(value: Any) -> Optional[str]:
    if _missing(value):
        return None
    value = str(value)
    return value or None


def _name_map(value: Any) -> Dict[str, str]:
    """Coerce a backend name column into a language -> label dict."""
    if _missing(value):
        return {}
    if isinstance(value, Mapping):
        return {str(k): str(v) for k, v in value.items() if not _missing(v)}
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return {}
        if value.startswith("{"):
            return _name_map(json.loads(value))
        return {DEFAULT_LANGUAGE_KEY: value}
    raise TypeError(f"Unsupported name value: {value!r}")


class OsmType(str, Enum):
    """Origin object type in the upstream OpenStreetMap data."""
    NODE = "N"
    WAY = "W"
    RELATION = "R"

    @classmethod
    def parse(cls, value: Any) -> Optional["OsmType"]:
        """Accept 'N'/'W'/'R', 'node'/'way'/'relation' or an OsmType; None if unknown."""
        if isinstance(value, cls):
            return value
        if _missing(value):
            return None
        text = str(value).strip().upper()
        if not text:
            return None
        for member in cls:
            if text in (member.value, member.name):
                return member
        return None


@dataclass(frozen=True, repr=False)
class AddressRecord:
    """One row of a place's address as returned by the address backend."""
    place_id: int
    osm_type: Optional[OsmType] = None
    osm_id: Optional[int] = None
    name: Dict[str, str] = field(default_factory=dict)
    osm_key: Optional[str] = None
    osm_value: Optional[str] = None
    admin_level: Optional[int] = None
    rank_address: int = 30
    postcode: Optional[str] = None
    place: Optional[str] = None

    def __post_init__(self):
        # Empty strings from the backend mean "not set"
        object.__setattr__(self, "name", _name_map(self.name))
        object.__setattr__(self, "osm_type", OsmType.parse(self.osm_type))
        object.__setattr__(self, "postcode", _optional_str(self.postcode))
        object.__setattr__(self, "place", _optional_str(self.place))

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "AddressRecord":
        """
        Build a record from a raw backend row.

        Accepts the column names of Nominatim's get_addressdata
        (``class``/``type``) as well as ``osm_key``/``osm_value``.

        Args:
            row: Mapping of column name to value; missing columns are allowed

        Returns:
            AddressRecord
        """
        osm_key = row.get("osm_key", row.get("class"))
        osm_value = row.get("osm_value", row.get("type"))
        rank = _optional_int(row.get("rank_address"))

        return cls(
            place_id=_optional_int(row.get("place_id")) or 0,
            osm_type=row.get("osm_type"),
            osm_id=_optional_int(row.get("osm_id")),
            name=row.get("name"),
            osm_key=_optional_str(osm_key),
            osm_value=_optional_str(osm_value),
            admin_level=_optional_int(row.get("admin_level")),
            rank_address=30 if rank is None else rank,
            postcode=row.get("postcode"),
            place=row.get("place"),
        )

    def __repr__(self) -> str:
        return (
            f"AddressRecord(place_id={self.place_id}, name={self.name}, "
            f"osm_key={self.osm_key}, osm_value={self.osm_value})"
        )


@dataclass(frozen=True)
class Coordinate:
    """WGS84 position."""
    lat: float
    lon: float


@dataclass(frozen=True)
class Extent:
    """Bounding box given by its north-west and south-east corners as (lon, lat)."""
    nw: Tuple[float, float]
    se: Tuple[float, float]

    def as_list(self) -> List[float]:
        """Flatten to [nwLon, nwLat, seLon, seLat], corners in received order."""
        return [self.nw[0], self.nw[1], self.se[0], self.se[1]]


def _parse_corner(value: Any) -> Tuple[float, float]:
    if isinstance(value, Mapping):
        return float(value[LON]), float(value[LAT])
    if isinstance(value, (str, bytes)) or len(value) != 2:
        raise ValueError(f"Extent corner must be a [lon, lat] pair, got {value!r}")
    return float(value[0]), float(value[1])


def parse_extent(raw: Any) -> Extent:
    """
    Parse an extent from a search document.

    Understands the envelope form ``{"type": "envelope", "coordinates": [nw, se]}``,
    a ``{"nw": ..., "se": ...}`` mapping and a bare ``[nw, se]`` pair.

    Raises:
        ValueError: if the extent does not hold exactly two corners
    """
    if isinstance(raw, Mapping):
        if "nw" in raw and "se" in raw:
            corners = [raw["nw"], raw["se"]]
        else:
            corners = raw.get(COORDINATES)
    else:
        corners = raw

    if corners is None or isinstance(corners, (str, bytes)) or len(corners) != 2:
        raise ValueError(f"Extent must have exactly two corners, got {corners!r}")

    return Extent(nw=_parse_corner(corners[0]), se=_parse_corner(corners[1]))


def parse_coordinate(raw: Any) -> Optional[Coordinate]:
    """Parse ``{"lat": .., "lon": ..}``; None when absent or incomplete."""
    if not isinstance(raw, Mapping):
        return None
    lat, lon = raw.get(LAT), raw.get(LON)
    if _missing(lat) or _missing(lon):
        return None
    return Coordinate(lat=float(lat), lon=float(lon))


@dataclass(frozen=True)
class SearchHit:
    """A ranked hit from the search backend."""
    coordinate: Optional[Coordinate] = None
    extent: Optional[Extent] = None
    fields: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_source(cls, source: Mapping[str, Any]) -> "SearchHit":
        """
        Build a hit from a raw search document (``_source``).

        A malformed coordinate or extent is logged as a warning and dropped;
        the hit itself survives.
        """
        fields = {k: v for k, v in source.items() if k not in (COORDINATE, EXTENT)}
        context = {"osm_id": source.get(OSM_ID), "osm_value": source.get(OSM_VALUE)}

        # Unreadable coordinates fall back to None; build_geometry reports the missing point
        coordinate = safe_execute(
            parse_coordinate,
            source.get(COORDINATE),
            default_return=None,
            context=context,
            level="warning",
        )

        extent = None
        raw_extent = source.get(EXTENT)
        if raw_extent is not None:
            extent = safe_execute(
                parse_extent,
                raw_extent,
                default_return=None,
                context=context,
                level="warning",
            )

        return cls(
            coordinate=coordinate,
            extent=extent,
            fields=fields,
        )

    def get(self, key: str, default: Any = None) -> Any:
        """Named field lookup."""
        return self.fields.get(key, default)


@dataclass(frozen=True)
class GeoFeature:
    """
    A GeoJSON feature built from one search hit.

    ``properties`` is a read-only mapping. Sequence values such as ``extent``
    are kept as tuples so the feature stays immutable; ``to_dict`` renders
    them as lists.
    """
    geometry: Optional[Point]
    properties: Mapping[str, Any]

    def __post_init__(self):
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a GeoJSON feature dictionary."""
        geometry = None
        if self.geometry is not None:
            geometry = {TYPE: POINT, COORDINATES: [self.geometry.x, self.geometry.y]}

        properties = {
            key: list(value) if isinstance(value, tuple) else value
            for key, value in self.properties.items()
        }
        return {TYPE: FEATURE, GEOMETRY: geometry, PROPERTIES: properties}
