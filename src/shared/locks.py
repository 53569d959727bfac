import asyncio
from contextlib import asynccontextmanager


class InstanceLockRegistry:
    """
    One asyncio.Lock per workflow instance id.

    Serializes the read-check-write of an action execution for a single
    instance. Executions on different instances never contend. A lock is
    only kept while some caller holds or waits on it, so ids that are never
    seen again (including unknown ids) leave nothing behind.
    """

    def __init__(self):
        self._locks: dict[str, asyncio.Lock] = {}
        self._users: dict[str, int] = {}

    @asynccontextmanager
    async def hold(self, instance_id: str):
        lock = self._locks.setdefault(instance_id, asyncio.Lock())
        self._users[instance_id] = self._users.get(instance_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._users[instance_id] -= 1
            if not self._users[instance_id]:
                del self._users[instance_id]
                del self._locks[instance_id]

    def is_locked(self, instance_id: str) -> bool:
        lock = self._locks.get(instance_id)
        return lock is not None and lock.locked()

    def __len__(self) -> int:
        return len(self._locks)


instance_locks = InstanceLockRegistry()
