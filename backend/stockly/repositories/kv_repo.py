from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from stockly.models.kv_entry import KeyValueEntry


class KeyValueRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, key: str) -> KeyValueEntry | None:
        result = await self.db.execute(
            select(KeyValueEntry).where(KeyValueEntry.key == key)
        )
        return result.scalar_one_or_none()

    async def put(self, key: str, value: list) -> KeyValueEntry:
        row = await self.get(key)
        if row:
            row.value = value
        else:
            row = KeyValueEntry(key=key, value=value)
            self.db.add(row)
        await self.db.commit()
        await self.db.refresh(row)
        return row
