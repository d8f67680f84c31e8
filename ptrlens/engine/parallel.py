"""
Parallel resolution with a fan-out/fan-in pipeline

    feeder --(in)--> N workers --(out)--> collector

The feeder pushes a private copy of the input list into the first channel
and closes it. Each worker takes one record at a time, resolves it and
forwards the result. Once every worker has drained the input, the output
channel is closed and the collector returns what it gathered.

Two schedulers run the same pipeline: OS threads with blocking channels
(ThreadPipeline) and asyncio tasks with awaitable channels (AsyncPipeline),
the latter handing the blocking resolver calls to a thread pool.

If collecting is interrupted (Ctrl-C, cancellation, an error), every stage
is stopped before the exception reaches the caller.
"""

import asyncio
import logging
import threading
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Optional

from ..errors import PipelineBroken
from ..models import AddressList, AddressRecord
from ..resolver import Solver
from .channel import AsyncChannel, ChannelClosed, ThreadChannel


logger = logging.getLogger(__name__)


class Pipeline:
    """
    Shared parts of the parallel pipelines.

    Args:
        njobs: Number of workers
        solver: Resolver handle, copied for every worker
        capacity: Channel capacity (default: njobs)
    """

    def __init__(self, njobs: int, solver: Solver, capacity: Optional[int] = None):
        self.njobs = njobs
        self.solver = solver
        self.capacity = capacity or njobs
        self._errors: list[BaseException] = []
        self._lock = threading.Lock()

    def _fail(self, error: BaseException):
        with self._lock:
            self._errors.append(error)

    def _workers_for(self, ipl: AddressList) -> int:
        # No point in idle workers
        return max(1, min(self.njobs, len(ipl)))

    def _finish(self, ipl: AddressList, result: AddressList) -> AddressList:
        """Check that nothing was lost, then sort"""
        if self._errors:
            first = self._errors[0]
            raise PipelineBroken(
                f"{len(self._errors)} failure(s) in pipeline: {first}"
            ) from first

        if len(result) != len(ipl):
            raise PipelineBroken(
                f"Pipeline returned {len(result)} records for {len(ipl)} inputs"
            )

        result.sort()
        return result


class ThreadPipeline(Pipeline):
    """Fan-out/fan-in over OS threads"""

    def __init__(self, njobs: int, solver: Solver, capacity: Optional[int] = None):
        super().__init__(njobs, solver, capacity)
        self._stop = threading.Event()

    def _feed(self, records: AddressList, tx: ThreadChannel):
        try:
            for record in records:
                tx.send(record)
        except ChannelClosed as e:
            self._fail(e)
        finally:
            tx.close()

    def _work(self, rx: ThreadChannel, tx: ThreadChannel, solver: Solver):
        for record in rx:
            if self._stop.is_set():
                return
            try:
                resolved = solver.solve(record)
            except Exception as e:
                logger.warning("Resolver failed on %s: %s", record.address, e)
                self._fail(e)
                continue

            try:
                tx.send(resolved)
            except ChannelClosed as e:
                self._fail(e)
                return

    def _close_when_done(self, workers: list, tx: ThreadChannel):
        try:
            wait(workers)
        finally:
            tx.close()

    def _abort(self, *channels: ThreadChannel):
        """Stop the workers and wake every thread blocked on a channel"""
        logger.debug("Aborting thread pipeline")
        self._stop.set()
        for channel in channels:
            channel.close()

    def _collect(self, rx: ThreadChannel) -> AddressList:
        result = AddressList()
        for record in rx:
            result.append(record)
        return result

    def run(self, ipl: AddressList) -> AddressList:
        """
        Resolve `ipl`, blocking until every record came back.

        Raises:
            PipelineBroken: if a worker failed or a record went missing
        """
        if not ipl:
            return AddressList()

        nworkers = self._workers_for(ipl)
        tx_in = ThreadChannel(self.capacity)
        tx_out = ThreadChannel(self.capacity)

        logger.debug("Thread pipeline: %d records, %d workers", len(ipl), nworkers)

        with ThreadPoolExecutor(max_workers=nworkers + 2,
                                thread_name_prefix='ptrlens') as pool:
            feeder = pool.submit(self._feed, ipl.copy(), tx_in)
            workers = [
                pool.submit(self._work, tx_in, tx_out, self.solver.copy())
                for _ in range(nworkers)
            ]
            closer = pool.submit(self._close_when_done, workers, tx_out)

            try:
                result = self._collect(tx_out)
                feeder.result()
                closer.result()
            except BaseException:
                self._abort(tx_in, tx_out)
                raise

        return self._finish(ipl, result)


class AsyncPipeline(Pipeline):
    """Fan-out/fan-in over asyncio tasks"""

    async def _feed(self, records: AddressList, tx: AsyncChannel):
        try:
            for record in records:
                await tx.send(record)
        except ChannelClosed as e:
            self._fail(e)
        finally:
            await tx.close()

    async def _work(self, rx: AsyncChannel, tx: AsyncChannel, solver: Solver,
                    executor: ThreadPoolExecutor):
        loop = asyncio.get_running_loop()
        async for record in rx:
            try:
                resolved: AddressRecord = await loop.run_in_executor(
                    executor, solver.solve, record
                )
            except Exception as e:
                logger.warning("Resolver failed on %s: %s", record.address, e)
                self._fail(e)
                continue

            try:
                await tx.send(resolved)
            except ChannelClosed as e:
                self._fail(e)
                return

    async def _close_when_done(self, workers: list, tx: AsyncChannel):
        try:
            await asyncio.gather(*workers)
        finally:
            await tx.close()

    async def _collect(self, rx: AsyncChannel) -> AddressList:
        result = AddressList()
        async for record in rx:
            result.append(record)
        return result

    async def run(self, ipl: AddressList) -> AddressList:
        """
        Resolve `ipl`, returning once every record came back.

        Raises:
            PipelineBroken: if a worker failed or a record went missing
        """
        if not ipl:
            return AddressList()

        nworkers = self._workers_for(ipl)
        tx_in = AsyncChannel(self.capacity)
        tx_out = AsyncChannel(self.capacity)

        logger.debug("Async pipeline: %d records, %d workers", len(ipl), nworkers)

        executor = ThreadPoolExecutor(max_workers=nworkers, thread_name_prefix='ptrlens')
        feeder = asyncio.create_task(self._feed(ipl.copy(), tx_in))
        workers = [
            asyncio.create_task(
                self._work(tx_in, tx_out, self.solver.copy(), executor)
            )
            for _ in range(nworkers)
        ]
        closer = asyncio.create_task(self._close_when_done(workers, tx_out))

        try:
            result = await self._collect(tx_out)
            await asyncio.gather(feeder, closer)
        except BaseException:
            await self._abort([feeder, *workers, closer], executor)
            raise

        executor.shutdown()
        return self._finish(ipl, result)

    async def _abort(self, tasks: list, executor: ThreadPoolExecutor):
        """Cancel every stage without waiting on resolver calls in flight"""
        logger.debug("Aborting async pipeline")
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        executor.shutdown(wait=False, cancel_futures=True)


def parallel_solve(ipl: AddressList, njobs: int, solver: Solver) -> AddressList:
    """
    Resolve a list with `njobs` worker threads.

    Example:
        l = AddressList.from_strings(["1.1.1.1", "192.0.2.1"])
        ptr = parallel_solve(l, 4, res_init("fake"))
    """
    return ThreadPipeline(njobs, solver).run(ipl)


async def parallel_solve_async(ipl: AddressList, njobs: int, solver: Solver) -> AddressList:
    """Resolve a list with `njobs` asyncio worker tasks"""
    return await AsyncPipeline(njobs, solver).run(ipl)
