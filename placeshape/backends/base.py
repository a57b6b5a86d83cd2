"""Base classes for the backends that feed the shaping layer."""
from abc import ABC, abstractmethod
from typing import List, Dict, Any


class SearchBackend(ABC):
    """Search index client returning ranked hits."""

    @abstractmethod
    def search(self, query: str, limit: int = 15) -> Dict[str, Any]:
        """
        Run a search.

        Args:
            query: Search query
            limit: Maximum number of hits

        Returns:
            Raw response in the ``{"hits": {"hits": [{"_source": ...}]}}`` layout
        """
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Get backend name."""
        pass


class AddressBackend(ABC):
    """Address resolution backend returning the address rows of a place."""

    @abstractmethod
    def get_address_rows(self, place_id: int) -> List[Dict[str, Any]]:
        """
        Fetch the address rows of a place, most specific first.

        Args:
            place_id: Backend place identifier

        Returns:
            List of raw rows (see AddressRecord.from_row)
        """
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Get backend name."""
        pass
