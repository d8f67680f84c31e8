"""
PTR resolver backed by the system resolver
"""

import ipaddress
import logging
import socket

from ..config import NO_PTR_NAME
from ..models import AddressRecord, IPAddress
from .base import Resolver


logger = logging.getLogger(__name__)


def lookup_addr(address: IPAddress) -> str:
    """
    Reverse lookup through getnameinfo(3).

    Returns the numeric form of the address when no PTR exists.
    """
    if address.version == 6:
        sockaddr = (str(address), 0, 0, 0)
    else:
        sockaddr = (str(address), 0)
    host, _ = socket.getnameinfo(sockaddr, 0)
    return host


def _is_numeric(name: str, address: IPAddress) -> bool:
    """Check whether the lookup handed back the address itself"""
    if name == str(address):
        return True
    try:
        return ipaddress.ip_address(name.split('%')[0]) == address
    except ValueError:
        return False


class LiveResolver(Resolver):
    """
    Reverse DNS through the platform resolver.

    Never raises: a missing PTR becomes NO_PTR_NAME and a failed
    lookup becomes the error text, so every input gets an answer.
    """

    def __init__(self, no_ptr_name: str = NO_PTR_NAME):
        self.no_ptr_name = no_ptr_name

    def solve(self, record: AddressRecord) -> AddressRecord:
        try:
            name = lookup_addr(record.address)
        except (socket.herror, socket.gaierror, socket.timeout, OSError) as e:
            logger.debug("Lookup of %s failed: %s", record.address, e)
            return record.with_name(str(e))

        # No PTR, force one
        if _is_numeric(name, record.address):
            return record.with_name(self.no_ptr_name)
        return record.with_name(name)
