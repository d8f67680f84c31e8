"""
PTR resolver using dnspython
"""

import logging
from typing import Optional

import dns.exception
import dns.resolver
import dns.reversename

from ..config import DNS_TIMEOUT, NO_PTR_NAME
from ..models import AddressRecord
from .base import Resolver


logger = logging.getLogger(__name__)


class DnsResolver(Resolver):
    """
    PTR lookup through dnspython.

    Queries <reversed-ip>.in-addr.arpa (or ip6.arpa) directly instead of
    going through getnameinfo, so the configured nameservers and timeout
    apply. Like LiveResolver it never raises.
    """

    def __init__(self, timeout: float = DNS_TIMEOUT,
                 nameservers: Optional[list[str]] = None,
                 no_ptr_name: str = NO_PTR_NAME):
        self.timeout = timeout
        self.no_ptr_name = no_ptr_name
        self._resolver = dns.resolver.Resolver()
        self._resolver.timeout = timeout
        self._resolver.lifetime = timeout
        if nameservers:
            self._resolver.nameservers = nameservers

    def _query_ptr(self, address: str) -> Optional[str]:
        """Query PTR record, None when there is none"""
        rev = dns.reversename.from_address(address)
        try:
            answers = self._resolver.resolve(rev, 'PTR')
        except (dns.resolver.NXDOMAIN, dns.resolver.NoAnswer):
            return None
        for rdata in answers:
            return rdata.target.to_text(omit_final_dot=True)
        return None

    def solve(self, record: AddressRecord) -> AddressRecord:
        try:
            name = self._query_ptr(str(record.address))
        except dns.exception.DNSException as e:
            logger.debug("PTR query for %s failed: %s", record.address, e)
            return record.with_name(str(e) or type(e).__name__)

        return record.with_name(name or self.no_ptr_name)

    def __repr__(self) -> str:
        return f"DnsResolver(timeout={self.timeout})"
