"""DraftStore SQLite 实现

draft_entries 表按 session_id 隔离，同一会话跨重载可恢复，
不同会话之间互不可见。每次写入单独提交。
"""

from collections.abc import Iterable
from datetime import UTC, datetime

import aiosqlite


class SqliteDraftStore:
    """DraftStore 的 SQLite 实现（绑定单个会话）"""

    def __init__(self, conn: aiosqlite.Connection, session_id: str) -> None:
        self._conn = conn
        self._session_id = session_id

    @property
    def session_id(self) -> str:
        return self._session_id

    async def read(self, key: str) -> str | None:
        """读取 key 对应的序列化值"""
        cursor = await self._conn.execute(
            "SELECT value FROM draft_entries WHERE session_id = ? AND key = ?",
            (self._session_id, key),
        )
        row = await cursor.fetchone()
        return row[0] if row else None

    async def write(self, key: str, value: str) -> None:
        """写入 key 对应的序列化值（upsert + 提交）"""
        try:
            await self._conn.execute(
                """
                INSERT INTO draft_entries (session_id, key, value, updated_at)
                VALUES (?, ?, ?, ?)
                ON CONFLICT (session_id, key)
                DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
                """,
                (self._session_id, key, value, datetime.now(UTC).isoformat()),
            )
            await self._conn.commit()
        except aiosqlite.Error:
            await self._conn.rollback()
            raise

    async def remove(self, keys: Iterable[str]) -> int:
        """在同一事务内删除一组 key"""
        removed = 0
        try:
            for key in keys:
                cursor = await self._conn.execute(
                    "DELETE FROM draft_entries WHERE session_id = ? AND key = ?",
                    (self._session_id, key),
                )
                removed += cursor.rowcount
            await self._conn.commit()
        except aiosqlite.Error:
            await self._conn.rollback()
            raise
        return removed

    async def keys(self) -> list[str]:
        """列出当前会话已持久化的 key，按 key 排序"""
        cursor = await self._conn.execute(
            "SELECT key FROM draft_entries WHERE session_id = ? ORDER BY key ASC",
            (self._session_id,),
        )
        rows = await cursor.fetchall()
        return [row[0] for row in rows]

    async def items(self) -> dict[str, str]:
        """读取当前会话全部草稿条目（供 CLI 查看）"""
        cursor = await self._conn.execute(
            "SELECT key, value FROM draft_entries WHERE session_id = ? ORDER BY key ASC",
            (self._session_id,),
        )
        rows = await cursor.fetchall()
        return {row[0]: row[1] for row in rows}
