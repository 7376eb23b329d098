import asyncio

from duck.store.rwlock import AsyncRWLock


async def settle():
    for _ in range(5):
        await asyncio.sleep(0)


class TestAsyncRWLock:
    """Shared/exclusive behaviour of the store lock"""

    def test_readers_share_the_lock(self):
        """Two readers hold the lock at the same time"""

        async def scenario():
            lock = AsyncRWLock()
            async with lock.read():
                async with lock.read():
                    return lock._readers

        assert asyncio.run(scenario()) == 2

    def test_writer_waits_for_readers(self):
        """A writer cannot enter while a reader holds the lock"""

        async def scenario():
            lock = AsyncRWLock()
            events = []

            async def writer():
                async with lock.write():
                    events.append("write")

            async with lock.read():
                task = asyncio.create_task(writer())
                await settle()
                events.append("read done")

            await task
            return events

        assert asyncio.run(scenario()) == ["read done", "write"]

    def test_reader_waits_for_writer(self):
        """Readers are excluded while a write is in progress"""

        async def scenario():
            lock = AsyncRWLock()
            events = []

            async def reader():
                async with lock.read():
                    events.append("read")

            async with lock.write():
                task = asyncio.create_task(reader())
                await settle()
                events.append("write done")

            await task
            return events

        assert asyncio.run(scenario()) == ["write done", "read"]

    def test_waiting_writer_blocks_new_readers(self):
        """Readers arriving after a queued writer go after it"""

        async def scenario():
            lock = AsyncRWLock()
            events = []

            async def writer():
                async with lock.write():
                    events.append("write")

            async def late_reader():
                async with lock.read():
                    events.append("late read")

            async with lock.read():
                writer_task = asyncio.create_task(writer())
                await settle()
                reader_task = asyncio.create_task(late_reader())
                await settle()
                events.append("first read done")

            await asyncio.gather(writer_task, reader_task)
            return events

        assert asyncio.run(scenario()) == ["first read done", "write", "late read"]

    def test_cancelled_writer_releases_readers(self):
        """A writer that gives up stops holding back readers"""

        async def scenario():
            lock = AsyncRWLock()
            events = []

            async def writer():
                async with lock.write():
                    events.append("write")

            async def late_reader():
                async with lock.read():
                    events.append("late read")

            async with lock.read():
                writer_task = asyncio.create_task(writer())
                await settle()
                reader_task = asyncio.create_task(late_reader())
                await settle()
                writer_task.cancel()
                await asyncio.gather(writer_task, return_exceptions=True)
                await settle()
                events.append("first read done")

            await reader_task
            return events

        assert asyncio.run(scenario()) == ["late read", "first read done"]
