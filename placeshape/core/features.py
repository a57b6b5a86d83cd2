"""Assembly of search hits into localized GeoJSON features."""
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, List, Dict, Any, Iterable, Mapping, Sequence, Union

import geopandas as gpd
from shapely.geometry import Point

from placeshape.core.config import DEFAULT_LANGUAGE, ASSEMBLY_WORKERS, OUTPUT_CRS
from placeshape.core.constants import (
    KEYS_LANG_UNSPEC, KEYS_LANG_SPEC, EXTENT, OSM_ID, OSM_VALUE,
    TYPE, FEATURE_COLLECTION,
)
from placeshape.core.localization import resolve
from placeshape.core.models import SearchHit, GeoFeature
from placeshape.utils.logging import log_structured
from placeshape.utils.timing import Timer

HitLike = Union[SearchHit, Mapping[str, Any]]


def _as_hit(hit: HitLike) -> SearchHit:
    if isinstance(hit, SearchHit):
        return hit
    return SearchHit.from_source(hit)


def build_properties(hit: SearchHit, language: str) -> Dict[str, Any]:
    """
    Collect the output properties of a hit.

    Language independent fields are copied when present and not null,
    language dependent ones only when a label resolves for the language.
    Absent and null fields are left out rather than set to None.
    """
    properties: Dict[str, Any] = {}

    for key in KEYS_LANG_UNSPEC:
        value = hit.fields.get(key)
        if value is not None:
            properties[key] = value

    for key in KEYS_LANG_SPEC:
        if key in hit.fields:
            label = resolve(hit.fields[key], language)
            if label is not None:
                properties[key] = label

    if hit.extent is not None:
        properties[EXTENT] = tuple(hit.extent.as_list())

    return properties


def build_geometry(hit: SearchHit) -> Optional[Point]:
    """Point geometry of a hit; None (and an error log) when the coordinate is missing."""
    if hit.coordinate is None:
        log_structured(
            "error",
            f"invalid data [id={hit.get(OSM_ID)}, type={hit.get(OSM_VALUE)}], coordinate is missing!",
            osm_id=hit.get(OSM_ID),
            osm_value=hit.get(OSM_VALUE),
        )
        return None
    return Point(hit.coordinate.lon, hit.coordinate.lat)


def assemble_feature(hit: HitLike, language: str = DEFAULT_LANGUAGE) -> GeoFeature:
    """Turn one search hit into a feature."""
    hit = _as_hit(hit)
    return GeoFeature(geometry=build_geometry(hit), properties=build_properties(hit, language))


class FeatureAssembler:
    """Converts ranked search hits into features for one response language."""

    def __init__(self, language: str = DEFAULT_LANGUAGE, max_workers: int = ASSEMBLY_WORKERS):
        """
        Initialize assembler.

        Args:
            language: Language the localized properties are resolved to
            max_workers: Threads used per batch; 1 assembles inline
        """
        self.language = language
        self.max_workers = max(1, int(max_workers))

    def assemble(self, hits: Sequence[HitLike]) -> List[GeoFeature]:
        """
        Assemble features in hit order.

        Output has one feature per hit at the same position, also when the
        batch is spread over worker threads.
        """
        hits = list(hits)
        with Timer("assemble_features", hits=len(hits), language=self.language):
            if self.max_workers == 1 or len(hits) < 2:
                return [assemble_feature(hit, self.language) for hit in hits]

            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                # Executor.map yields results in submission order
                return list(executor.map(lambda hit: assemble_feature(hit, self.language), hits))

    def assemble_response(self, response: Mapping[str, Any]) -> List[GeoFeature]:
        """
        Assemble features from a raw search response.

        Expects the ``{"hits": {"hits": [{"_source": {...}}, ...]}}`` layout
        returned by the search engine.
        """
        hits = response.get("hits", {}).get("hits", [])
        return self.assemble([hit.get("_source", {}) for hit in hits])


def assemble(hits: Sequence[HitLike], language: str = DEFAULT_LANGUAGE) -> List[GeoFeature]:
    """Assemble hits with a one-off assembler."""
    return FeatureAssembler(language).assemble(hits)


def to_feature_collection(features: Iterable[GeoFeature]) -> Dict[str, Any]:
    """Wrap features into a GeoJSON FeatureCollection dictionary."""
    return {
        TYPE: FEATURE_COLLECTION,
        "features": [feature.to_dict() for feature in features],
    }


def to_geodataframe(features: Iterable[GeoFeature]) -> gpd.GeoDataFrame:
    """
    Load features into a GeoDataFrame.

    Every property becomes a column; hits without a coordinate keep their
    row with a missing geometry.
    """
    features = list(features)
    if not features:
        return gpd.GeoDataFrame(geometry=[], crs=OUTPUT_CRS)

    records = [dict(feature.properties) for feature in features]
    geometry = [feature.geometry for feature in features]
    return gpd.GeoDataFrame(records, geometry=geometry, crs=OUTPUT_CRS)
