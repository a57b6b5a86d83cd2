"""Glue between the backends and the shaping core."""
from typing import List, Optional

from placeshape.backends.base import SearchBackend, AddressBackend
from placeshape.core.classification import AddressContext, resolve_address
from placeshape.core.config import DEFAULT_LANGUAGE, LOG_LEVEL
from placeshape.core.features import FeatureAssembler
from placeshape.core.models import AddressRecord, GeoFeature
from placeshape.utils.error_tracking import setup_error_tracking
from placeshape.utils.logging import setup_logging, log_structured


def configure(level: str = LOG_LEVEL, dsn: Optional[str] = None) -> bool:
    """
    Prepare logging and error tracking for a host process.

    Args:
        level: Log level name
        dsn: Sentry DSN; falls back to the configured one

    Returns:
        True if error tracking was enabled
    """
    setup_logging(level)
    return setup_error_tracking(dsn)


def search_features(
    backend: SearchBackend,
    query: str,
    language: str = DEFAULT_LANGUAGE,
    limit: int = 15
) -> List[GeoFeature]:
    """
    Search and shape the hits into features.

    Backend errors propagate to the caller.
    """
    response = backend.search(query, limit=limit)
    features = FeatureAssembler(language).assemble_response(response)

    log_structured(
        "info",
        "Search shaped",
        backend=backend.get_name(),
        query=query,
        language=language,
        features=len(features),
    )
    return features


def address_for_place(
    backend: AddressBackend,
    place_id: int,
    language: str = DEFAULT_LANGUAGE
) -> AddressContext:
    """Fetch a place's address rows and fold them into address parts."""
    rows = backend.get_address_rows(place_id)
    records = [AddressRecord.from_row(row) for row in rows]
    return resolve_address(records, language)
