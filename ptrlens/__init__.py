"""
PtrLens - Concurrent reverse DNS resolution

Resolve a batch of IPv4/IPv6 addresses to their PTR names, sequentially,
over a bounded thread pool or over asyncio tasks, with the same result.
"""

__version__ = "0.5.0"
__author__ = "PtrLens"

from .errors import (
    PtrLensError, InvalidAddress, InvalidInput, InvalidJobCount, TooManyJobs,
    PipelineBroken,
)
from .models import AddressRecord, AddressList
from .resolver import ResType, Solver, res_init
from .engine import resolve, resolve_async, simple_solve

__all__ = [
    'PtrLensError', 'InvalidAddress', 'InvalidInput', 'InvalidJobCount', 'TooManyJobs',
    'PipelineBroken', 'AddressRecord', 'AddressList', 'ResType', 'Solver',
    'res_init', 'resolve', 'resolve_async', 'simple_solve',
]
