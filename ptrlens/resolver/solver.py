"""
Solver handle and resolver factory
"""

from enum import Enum
from typing import Union

from ..config import DEFAULT_RESOLVER
from ..models import AddressRecord
from .base import Resolver
from .dns_query import DnsResolver
from .live import LiveResolver
from .simple import FakeResolver, LatentResolver, NullResolver


class ResType(Enum):
    """Available resolver kinds"""
    NULL = "null"        # name == address
    FAKE = "fake"        # fixed placeholder, for tests
    LATENT = "latent"    # fake with a delay, for benchmarks
    LIVE = "live"        # system resolver
    DNS = "dns"          # dnspython PTR query

    @classmethod
    def default(cls) -> 'ResType':
        return cls(DEFAULT_RESOLVER)


RESOLVERS = {
    ResType.NULL: NullResolver,
    ResType.FAKE: FakeResolver,
    ResType.LATENT: LatentResolver,
    ResType.LIVE: LiveResolver,
    ResType.DNS: DnsResolver,
}


class Solver:
    """
    Opaque handle around one resolver implementation.

    Copies share the same underlying resolver, so handing one to every
    worker costs nothing.
    """

    __slots__ = ('_impl',)

    def __init__(self, impl: Resolver):
        if not isinstance(impl, Resolver):
            raise TypeError(f"expected Resolver, got {type(impl).__name__}")
        self._impl = impl

    def solve(self, record: AddressRecord) -> AddressRecord:
        return self._impl.solve(record)

    @property
    def resolver(self) -> Resolver:
        return self._impl

    def copy(self) -> 'Solver':
        return Solver(self._impl)

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    def __repr__(self) -> str:
        return f"Solver({self._impl!r})"


def res_init(kind: Union[ResType, str, None] = None, **options) -> Solver:
    """
    Create a Solver for the requested resolver kind.

    Args:
        kind: ResType or its name ('null', 'fake', 'latent', 'live', 'dns');
              defaults to the live resolver
        **options: Passed to the resolver constructor (name, delay, timeout...)

    Returns:
        Solver wrapping a new resolver instance
    """
    if kind is None:
        kind = ResType.default()
    elif isinstance(kind, str):
        try:
            kind = ResType(kind.lower())
        except ValueError:
            raise ValueError(
                f"Unknown resolver '{kind}'. "
                f"Supported: {', '.join(t.value for t in ResType)}"
            ) from None

    resolver_class = RESOLVERS[kind]
    return Solver(resolver_class(**options))
