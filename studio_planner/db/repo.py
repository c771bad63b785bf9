# studio_planner/db/repo.py

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from studio_planner.db.models import StorageSlot


async def get_slot(db: AsyncSession, key: str) -> str | None:
    res = await db.execute(select(StorageSlot).where(StorageSlot.key == key))
    slot = res.scalar_one_or_none()
    return slot.value if slot else None


async def put_slot(db: AsyncSession, key: str, value: str) -> StorageSlot:
    slot = await db.get(StorageSlot, key)
    if slot is None:
        slot = StorageSlot(key=key, value=value)
        db.add(slot)
    else:
        slot.value = value
    await db.commit()
    await db.refresh(slot)
    return slot


async def clear_slot(db: AsyncSession, key: str) -> None:
    await db.execute(delete(StorageSlot).where(StorageSlot.key == key))
    await db.commit()
