"""
Closable channels connecting the pipeline stages

Both flavours share the same contract: the producer calls close() once it
is exhausted, receivers get ChannelClosed (or the iteration ends) after the
last item, and sending on a closed channel raises ChannelClosed. Closing
wakes every sender and receiver waiting on the channel.
"""

import asyncio
import threading
from collections import deque


class ChannelClosed(Exception):
    """Send on a closed channel, or receive after the last item"""


class ThreadChannel:
    """
    Bounded channel for OS threads.

    A capacity of 1 behaves like a rendezvous with one slot of slack.
    Items already queued when the channel is closed are still delivered.
    """

    def __init__(self, capacity: int = 1):
        self.capacity = max(1, capacity)
        self._items: deque = deque()
        self._closed = False
        self._cond = threading.Condition()

    @property
    def closed(self) -> bool:
        return self._closed

    def send(self, item):
        with self._cond:
            while len(self._items) >= self.capacity and not self._closed:
                self._cond.wait()
            if self._closed:
                raise ChannelClosed("send on closed channel")
            self._items.append(item)
            self._cond.notify_all()

    def recv(self):
        with self._cond:
            while not self._items and not self._closed:
                self._cond.wait()
            if not self._items:
                raise ChannelClosed("channel drained")
            item = self._items.popleft()
            self._cond.notify_all()
            return item

    def close(self):
        with self._cond:
            self._closed = True
            self._cond.notify_all()

    def __iter__(self):
        while True:
            try:
                yield self.recv()
            except ChannelClosed:
                return


class AsyncChannel:
    """Bounded channel for asyncio tasks, the awaitable twin of ThreadChannel"""

    def __init__(self, capacity: int = 1):
        self.capacity = max(1, capacity)
        self._items: deque = deque()
        self._closed = False
        self._cond = asyncio.Condition()

    @property
    def closed(self) -> bool:
        return self._closed

    async def send(self, item):
        async with self._cond:
            await self._cond.wait_for(
                lambda: len(self._items) < self.capacity or self._closed
            )
            if self._closed:
                raise ChannelClosed("send on closed channel")
            self._items.append(item)
            self._cond.notify_all()

    async def recv(self):
        async with self._cond:
            await self._cond.wait_for(lambda: self._items or self._closed)
            if not self._items:
                raise ChannelClosed("channel drained")
            item = self._items.popleft()
            self._cond.notify_all()
            return item

    async def close(self):
        async with self._cond:
            self._closed = True
            self._cond.notify_all()

    def __aiter__(self):
        return self

    async def __anext__(self):
        try:
            return await self.recv()
        except ChannelClosed:
            raise StopAsyncIteration from None
