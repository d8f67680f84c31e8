"""
Resolvers that never touch the network
"""

import time

from ..config import FAKE_NAME, LATENCY
from ..models import AddressRecord
from .base import Resolver


class NullResolver(Resolver):
    """Use the textual address as its own name"""

    def solve(self, record: AddressRecord) -> AddressRecord:
        return record.with_name(str(record.address))


class FakeResolver(Resolver):
    """Return the same placeholder name for every address (for tests)"""

    def __init__(self, name: str = FAKE_NAME):
        self.name = name

    def solve(self, record: AddressRecord) -> AddressRecord:
        return record.with_name(self.name)

    def __repr__(self) -> str:
        return f"FakeResolver(name={self.name!r})"


class LatentResolver(FakeResolver):
    """
    Fake resolver with an artificial delay.

    Sleeps `delay` seconds before answering, to simulate network
    latency when benchmarking the engines.
    """

    def __init__(self, name: str = FAKE_NAME, delay: float = LATENCY):
        super().__init__(name)
        self.delay = delay

    def solve(self, record: AddressRecord) -> AddressRecord:
        time.sleep(self.delay)
        return super().solve(record)

    def __repr__(self) -> str:
        return f"LatentResolver(name={self.name!r}, delay={self.delay})"
