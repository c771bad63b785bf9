"""
Durable string slots backing the fallback store.

A slot is read and written as one whole string, like browser localStorage.
SqlSlotStorage keeps slots in a SQLite table; MemorySlotStorage keeps them
in-process (tests, throwaway runs).
"""

from typing import Dict, Optional, Protocol

from sqlalchemy.ext.asyncio import AsyncEngine

from studio_planner.db.repo import clear_slot, get_slot, put_slot
from studio_planner.db.session import init_db, make_engine, make_sessionmaker


class SlotStorage(Protocol):
    async def init(self) -> None: ...

    async def read(self) -> Optional[str]: ...

    async def write(self, value: str) -> None: ...

    async def clear(self) -> None: ...

    async def aclose(self) -> None: ...


class SqlSlotStorage:
    def __init__(self, engine: AsyncEngine, key: str):
        self.engine = engine
        self.sessions = make_sessionmaker(engine)
        self.key = key

    @classmethod
    def from_url(cls, url: str, key: str) -> "SqlSlotStorage":
        return cls(make_engine(url), key)

    async def init(self) -> None:
        await init_db(self.engine)

    async def read(self) -> Optional[str]:
        async with self.sessions() as db:
            return await get_slot(db, self.key)

    async def write(self, value: str) -> None:
        async with self.sessions() as db:
            await put_slot(db, self.key, value)

    async def clear(self) -> None:
        async with self.sessions() as db:
            await clear_slot(db, self.key)

    async def aclose(self) -> None:
        await self.engine.dispose()


class MemorySlotStorage:
    def __init__(self, key: str = "default", initial: Optional[str] = None):
        self.key = key
        self.slots: Dict[str, str] = {}
        self.writes = 0
        if initial is not None:
            self.slots[key] = initial

    async def init(self) -> None:
        return None

    async def read(self) -> Optional[str]:
        return self.slots.get(self.key)

    async def write(self, value: str) -> None:
        self.writes += 1
        self.slots[self.key] = value

    async def clear(self) -> None:
        self.slots.pop(self.key, None)

    async def aclose(self) -> None:
        return None
