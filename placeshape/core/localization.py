"""Language resolution for multi-language label maps."""
from typing import Optional, Mapping, Any

from placeshape.core.constants import DEFAULT_LANGUAGE_KEY


def resolve(label_map: Optional[Mapping[str, Any]], language: str) -> Optional[str]:
    """
    Pick the label for a language.

    The requested language wins, then the ``default`` label. There is no
    further fallback (no prefix matching, no stripping of region subtags).
    A plain string is taken to be language independent and returned as is;
    any other non-mapping value resolves to None.

    Args:
        label_map: Mapping of language code to label, or None
        language: Requested language code

    Returns:
        The label, or None if neither key is present
    """
    if label_map is None:
        return None

    if isinstance(label_map, str):
        return label_map

    if not isinstance(label_map, Mapping):
        return None

    value = label_map.get(language)
    if value is not None:
        return value

    return label_map.get(DEFAULT_LANGUAGE_KEY)
