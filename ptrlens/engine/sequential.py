"""
Sequential resolution
"""

from ..models import AddressList
from ..resolver import Solver


def simple_solve(ipl: AddressList, solver: Solver) -> AddressList:
    """
    Resolve every record in order on the calling thread.

    Args:
        ipl: Addresses to resolve (left untouched)
        solver: Resolver handle

    Returns:
        New list of resolved records, sorted by address
    """
    result = AddressList(solver.solve(record) for record in ipl)
    result.sort()
    return result
