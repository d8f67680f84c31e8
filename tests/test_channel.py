import asyncio
import threading

import pytest

from ptrlens.engine.channel import AsyncChannel, ChannelClosed, ThreadChannel


def test_thread_channel_fifo():
    ch = ThreadChannel(4)
    for i in range(3):
        ch.send(i)
    ch.close()

    assert list(ch) == [0, 1, 2]


def test_thread_channel_send_after_close():
    ch = ThreadChannel()
    ch.close()
    assert ch.closed
    with pytest.raises(ChannelClosed):
        ch.send(1)


def test_thread_channel_close_is_idempotent():
    ch = ThreadChannel()
    ch.close()
    ch.close()
    with pytest.raises(ChannelClosed):
        ch.recv()


def test_thread_channel_minimum_capacity():
    assert ThreadChannel(0).capacity == 1


def test_thread_channel_wakes_every_receiver():
    ch = ThreadChannel(2)
    seen = []
    lock = threading.Lock()

    def receiver():
        for item in ch:
            with lock:
                seen.append(item)

    threads = [threading.Thread(target=receiver) for _ in range(4)]
    for t in threads:
        t.start()

    for i in range(20):
        ch.send(i)
    ch.close()

    for t in threads:
        t.join(timeout=5)
        assert not t.is_alive()

    assert sorted(seen) == list(range(20))


def test_async_channel_fifo():
    async def run():
        ch = AsyncChannel(4)
        for i in range(3):
            await ch.send(i)
        await ch.close()
        return [item async for item in ch]

    assert asyncio.run(run()) == [0, 1, 2]


def test_async_channel_send_after_close():
    async def run():
        ch = AsyncChannel()
        await ch.close()
        await ch.close()
        with pytest.raises(ChannelClosed):
            await ch.send(1)
        with pytest.raises(ChannelClosed):
            await ch.recv()

    asyncio.run(run())


def test_async_channel_many_receivers():
    async def run():
        ch = AsyncChannel(1)

        async def receiver():
            return [item async for item in ch]

        tasks = [asyncio.create_task(receiver()) for _ in range(3)]
        for i in range(10):
            await ch.send(i)
        await ch.close()
        parts = await asyncio.gather(*tasks)
        return sorted(item for part in parts for item in part)

    assert asyncio.run(run()) == list(range(10))


def test_thread_channel_close_wakes_blocked_sender():
    ch = ThreadChannel(1)
    ch.send("first")
    outcome = []

    def sender():
        try:
            ch.send("second")
        except ChannelClosed as e:
            outcome.append(e)

    t = threading.Thread(target=sender)
    t.start()
    t.join(timeout=0.1)
    assert t.is_alive()

    ch.close()
    t.join(timeout=5)

    assert not t.is_alive()
    assert len(outcome) == 1
    # Items queued before close are still delivered
    assert ch.recv() == "first"


def test_async_channel_close_wakes_blocked_sender():
    async def run():
        ch = AsyncChannel(1)
        await ch.send("first")
        blocked = asyncio.create_task(ch.send("second"))
        await asyncio.sleep(0.01)
        assert not blocked.done()

        await ch.close()
        with pytest.raises(ChannelClosed):
            await asyncio.wait_for(blocked, timeout=5)
        assert await ch.recv() == "first"

    asyncio.run(run())
