"""
Reverse resolvers for PtrLens
"""

from .base import Resolver
from .simple import NullResolver, FakeResolver, LatentResolver
from .live import LiveResolver
from .dns_query import DnsResolver
from .solver import ResType, Solver, res_init

__all__ = [
    'Resolver', 'NullResolver', 'FakeResolver', 'LatentResolver',
    'LiveResolver', 'DnsResolver', 'ResType', 'Solver', 'res_init',
]
