"""
Data models for PtrLens
"""

import ipaddress
from dataclasses import dataclass, replace
from functools import total_ordering
from typing import Iterable, Iterator, Union

from .errors import InvalidAddress


IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


@total_ordering
@dataclass(frozen=True)
class AddressRecord:
    """
    One IP address paired with its resolved name.

    An empty name means the address has not been resolved yet.
    Records order by IP version first (IPv4 before IPv6), then by
    numeric address, then by IPv6 scope id, then by name.
    """
    address: IPAddress
    name: str = ""

    @classmethod
    def parse(cls, value: str, name: str = "") -> 'AddressRecord':
        """
        Build a record from an address literal.

        Args:
            value: IPv4 or IPv6 address string
            name: Optional pre-resolved name

        Returns:
            AddressRecord

        Raises:
            InvalidAddress: if value is not a valid address
        """
        # Only literals: ip_address() would also take ints and packed bytes
        if not isinstance(value, str):
            raise InvalidAddress(value)
        try:
            address = ipaddress.ip_address(value.strip())
        except ValueError:
            raise InvalidAddress(value) from None
        return cls(address=address, name=name)

    def with_name(self, name: str) -> 'AddressRecord':
        """Return a copy of this record carrying `name`"""
        return replace(self, name=name)

    @property
    def resolved(self) -> bool:
        return self.name != ""

    @property
    def sort_key(self) -> tuple:
        scope = getattr(self.address, "scope_id", None) or ""
        return (self.address.version, int(self.address), scope, self.name)

    def __lt__(self, other):
        if not isinstance(other, AddressRecord):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __str__(self) -> str:
        return f"{self.address} {self.name}" if self.name else str(self.address)


class AddressList:
    """
    Ordered container of AddressRecord.

    Keeps insertion order and duplicates. Resolution never mutates
    a list, it always builds a new one.
    """

    def __init__(self, records: Iterable[AddressRecord] = ()):
        self._records: list[AddressRecord] = list(records)

    @classmethod
    def from_strings(cls, values: Iterable[str]) -> 'AddressList':
        """Parse every address literal into an unresolved record"""
        return cls(AddressRecord.parse(v) for v in values)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> 'AddressList':
        """Build a list of pre-resolved (address, name) pairs"""
        return cls(AddressRecord.parse(ip, name) for ip, name in pairs)

    @classmethod
    def from_records(cls, records: Iterable[AddressRecord]) -> 'AddressList':
        return cls(records)

    def append(self, record: AddressRecord):
        """Add one record at the end of the list"""
        if not isinstance(record, AddressRecord):
            raise TypeError(f"expected AddressRecord, got {type(record).__name__}")
        self._records.append(record)

    push = append

    def extend(self, records: Iterable[AddressRecord]):
        for record in records:
            self.append(record)

    def sort(self):
        """Sort in place by address, then name"""
        self._records.sort()

    def sorted(self) -> 'AddressList':
        return AddressList(sorted(self._records))

    def copy(self) -> 'AddressList':
        return AddressList(self._records)

    def is_empty(self) -> bool:
        return not self._records

    def to_pairs(self) -> list[tuple[str, str]]:
        return [(str(r.address), r.name) for r in self._records]

    def __len__(self) -> int:
        return len(self._records)

    def __bool__(self) -> bool:
        return bool(self._records)

    def __iter__(self) -> Iterator[AddressRecord]:
        return iter(self._records)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return AddressList(self._records[index])
        return self._records[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, AddressList):
            return self._records == other._records
        return NotImplemented

    def __repr__(self) -> str:
        return f"AddressList({self._records!r})"
