"""todoapp Core Store -- SQLite 持久化实现

提供工厂函数创建共享数据库连接的 Store 实例组。
"""

from pathlib import Path

import aiosqlite

from .draft_store import SqliteDraftStore
from .protocols import DraftStore, TaskCollection
from .sqlite_init import init_db
from .task_store import SqliteTaskStore


class StoreGroup:
    """Store 实例组 -- 共享同一个数据库连接"""

    def __init__(self, conn: aiosqlite.Connection, session_id: str) -> None:
        self.conn = conn
        self.task_store = SqliteTaskStore(conn)
        self.draft_store = SqliteDraftStore(conn, session_id)


async def create_store_group(db_path: str, session_id: str) -> StoreGroup:
    """创建 Store 实例组

    Args:
        db_path: SQLite 数据库文件路径
        session_id: 草稿所属会话

    Returns:
        StoreGroup 实例
    """
    # 确保数据库目录存在
    db_dir = Path(db_path).parent
    db_dir.mkdir(parents=True, exist_ok=True)

    conn = await aiosqlite.connect(db_path)
    conn.row_factory = aiosqlite.Row
    await init_db(conn)

    return StoreGroup(conn=conn, session_id=session_id)


__all__ = [
    "StoreGroup",
    "create_store_group",
    "DraftStore",
    "TaskCollection",
    "SqliteDraftStore",
    "SqliteTaskStore",
    "init_db",
]
