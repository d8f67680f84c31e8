"""
Entry points: admission control and engine selection
"""

import asyncio
import logging
from typing import Iterable, Optional, Union

from ..config import get_settings
from ..errors import InvalidJobCount, TooManyJobs
from ..models import AddressList, AddressRecord
from ..resolver import Solver
from .parallel import parallel_solve, parallel_solve_async
from .sequential import simple_solve


logger = logging.getLogger(__name__)

BACKENDS = ('thread', 'asyncio')

Addresses = Union[AddressList, Iterable[Union[str, AddressRecord]]]


def _as_list(ipl: Addresses) -> AddressList:
    """Accept an AddressList or any iterable of literals/records"""
    if isinstance(ipl, AddressList):
        return ipl
    return AddressList(
        item if isinstance(item, AddressRecord) else AddressRecord.parse(item)
        for item in ipl
    )


def check_jobs(njobs: int, max_threads: Optional[int] = None) -> int:
    """
    Validate the requested job count.

    Args:
        njobs: Requested number of parallel jobs
        max_threads: Upper bound (default: logical cores from Settings)

    Returns:
        The effective upper bound

    Raises:
        InvalidJobCount: njobs < 1
        TooManyJobs: njobs > max_threads
    """
    if max_threads is None:
        max_threads = get_settings().max_threads

    if njobs < 1:
        raise InvalidJobCount(njobs)

    # Hard limit on the number of cores, to avoid oversubscribing the host
    if njobs > max_threads:
        raise TooManyJobs(njobs, max_threads)

    return max_threads


def resolve(ipl: Addresses, njobs: int, solver: Solver, *,
            max_threads: Optional[int] = None,
            backend: str = 'thread') -> AddressList:
    """
    Resolve every address of `ipl` to its name.

    One job runs the sequential solver, more run the parallel pipeline on
    the chosen backend ('thread' or 'asyncio'). The result always has as
    many records as the input and is sorted by address.

    Example:
        l = AddressList.from_strings(["1.1.1.1", "2606:4700:4700::1111", "192.0.2.1"])
        res = res_init(ResType.LIVE)

        ptr = resolve(l, 1, res)
        ptr2 = resolve(l, os.cpu_count(), res)

    Raises:
        InvalidJobCount, TooManyJobs: before any work starts
        PipelineBroken: if the parallel pipeline lost records
        ValueError: unknown backend
    """
    if backend not in BACKENDS:
        raise ValueError(f"Unknown backend '{backend}'. Supported: {', '.join(BACKENDS)}")

    check_jobs(njobs, max_threads)
    ipl = _as_list(ipl)

    if not ipl:
        return AddressList()

    # Bypass the pipeline for a single record
    if len(ipl) == 1:
        return AddressList([solver.solve(ipl[0])])

    if njobs == 1:
        logger.debug("Sequential resolution of %d records", len(ipl))
        return simple_solve(ipl, solver)

    logger.debug("Parallel resolution of %d records, %d jobs, %s backend",
                 len(ipl), njobs, backend)
    if backend == 'asyncio':
        return asyncio.run(parallel_solve_async(ipl, njobs, solver))
    return parallel_solve(ipl, njobs, solver)


async def resolve_async(ipl: Addresses, njobs: int, solver: Solver, *,
                        max_threads: Optional[int] = None) -> AddressList:
    """
    Coroutine version of resolve(), running on asyncio tasks.

    Blocking resolver calls are run in a thread pool so the event loop
    is never stalled.
    """
    check_jobs(njobs, max_threads)
    ipl = _as_list(ipl)

    if not ipl:
        return AddressList()

    loop = asyncio.get_running_loop()

    if len(ipl) == 1:
        record = await loop.run_in_executor(None, solver.solve, ipl[0])
        return AddressList([record])

    if njobs == 1:
        return await loop.run_in_executor(None, simple_solve, ipl, solver)

    return await parallel_solve_async(ipl, njobs, solver)
