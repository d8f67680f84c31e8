"""
Abstract base class for resolver implementations
"""

from abc import ABC, abstractmethod
from ..models import AddressRecord


class Resolver(ABC):
    """
    Abstract reverse resolver.

    Implementations must not keep mutable state between calls: a single
    instance is shared by every worker of a parallel resolution.
    """

    @abstractmethod
    def solve(self, record: AddressRecord) -> AddressRecord:
        """
        Resolve one address.

        Args:
            record: Record holding the address to resolve

        Returns:
            New record with the same address and the resolved name
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
