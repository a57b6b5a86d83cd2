"""Address classification engine.

Applies the rules in :mod:`placeshape.core.rules` to address records and
folds a place's address rows into its street/city/postcode/state/country
parts plus the breadcrumb of containing regions.
"""
from dataclasses import dataclass, field, asdict
from typing import Optional, List, Dict, Any, Iterable

from placeshape.core import rules
from placeshape.core.config import DEFAULT_LANGUAGE
from placeshape.core.localization import resolve
from placeshape.core.models import AddressRecord


@dataclass(frozen=True)
class AddressRoles:
    """Every rule's answer for one record."""
    is_street: bool
    is_city: bool
    is_curated_city: bool
    is_postcode: bool
    has_postcode: bool
    has_place: bool
    is_country: bool
    is_state: bool
    is_useful_for_context: bool


def classify(record: AddressRecord) -> AddressRoles:
    """Evaluate all rules against a record."""
    return AddressRoles(
        is_street=rules.is_street(record),
        is_city=rules.is_city(record),
        is_curated_city=rules.is_curated_city(record),
        is_postcode=rules.is_postcode(record),
        has_postcode=rules.has_postcode(record),
        has_place=rules.has_place(record),
        is_country=rules.is_country(record),
        is_state=rules.is_state(record),
        is_useful_for_context=rules.is_useful_for_context(record),
    )


@dataclass
class AddressContext:
    """Address parts of one place, localized to a single language."""
    street: Optional[str] = None
    city: Optional[str] = None
    postcode: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    context: List[str] = field(default_factory=list)

    def add_context(self, label: Optional[str]):
        if label and label not in self.context:
            self.context.append(label)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)


def resolve_address(records: Iterable[AddressRecord], language: str = DEFAULT_LANGUAGE) -> AddressContext:
    """
    Fold a place's address rows into its address parts.

    Rows are expected most specific first, as the address backend returns
    them. The first street, postcode, state and country win. A curated city
    replaces any tag-derived city; further tag-derived cities (a village
    inside a municipality, say) become context.

    Args:
        records: Address rows of one place
        language: Language for the labels

    Returns:
        AddressContext
    """
    address = AddressContext()
    curated_city = False

    for record in records:
        roles = classify(record)
        label = resolve(record.name, language)

        if roles.has_postcode and not roles.is_postcode and address.postcode is None:
            address.postcode = record.postcode

        if roles.is_curated_city:
            if address.city and not curated_city:
                address.add_context(address.city)
            address.city = label
            curated_city = True
            continue

        if roles.is_city and label:
            if address.city is None:
                address.city = label
            elif roles.is_useful_for_context:
                address.add_context(label)
            continue

        if roles.is_street and address.street is None:
            address.street = label
            continue

        if roles.is_postcode:
            if address.postcode is None:
                address.postcode = label or record.postcode
            continue

        if roles.is_state and address.state is None:
            address.state = label
            continue

        if roles.is_country and address.country is None:
            address.country = label
            continue

        if roles.is_useful_for_context:
            address.add_context(label)

    return address
