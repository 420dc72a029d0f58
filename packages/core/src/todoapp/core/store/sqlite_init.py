"""SQLite 数据库初始化

PRAGMA 配置 + 两张表 DDL + 索引创建。
使用 aiosqlite 异步操作。
"""

import aiosqlite

# tasks 表 DDL（seq 自增，保留插入顺序）
_TASKS_DDL = """
CREATE TABLE IF NOT EXISTS tasks (
    seq                 INTEGER PRIMARY KEY AUTOINCREMENT,
    task_id             TEXT NOT NULL UNIQUE,
    name                TEXT NOT NULL,
    description         TEXT,
    emoji               TEXT,
    color               TEXT NOT NULL,
    date                TEXT NOT NULL,
    deadline            TEXT,
    category            TEXT NOT NULL DEFAULT '[]',
    recurring           INTEGER NOT NULL DEFAULT 0,
    recurring_interval  TEXT,
    done                INTEGER NOT NULL DEFAULT 0,
    pinned              INTEGER NOT NULL DEFAULT 0,

    CHECK (recurring = 1 OR recurring_interval IS NULL)
);
"""

_TASKS_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_tasks_date ON tasks(date DESC);",
]

# draft_entries 表 DDL（按会话隔离的草稿镜像）
_DRAFT_ENTRIES_DDL = """
CREATE TABLE IF NOT EXISTS draft_entries (
    session_id  TEXT NOT NULL,
    key         TEXT NOT NULL,
    value       TEXT NOT NULL,
    updated_at  TEXT NOT NULL,

    PRIMARY KEY (session_id, key)
);
"""


async def init_db(conn: aiosqlite.Connection) -> None:
    """初始化数据库：设置 PRAGMA + 创建表 + 创建索引

    Args:
        conn: aiosqlite 数据库连接
    """
    await conn.execute("PRAGMA journal_mode = WAL;")
    await conn.execute("PRAGMA foreign_keys = ON;")
    await conn.execute("PRAGMA busy_timeout = 5000;")

    await conn.execute(_TASKS_DDL)
    await conn.execute(_DRAFT_ENTRIES_DDL)

    for idx_sql in _TASKS_INDEXES:
        await conn.execute(idx_sql)

    await conn.commit()


async def verify_wal_mode(conn: aiosqlite.Connection) -> bool:
    """验证 WAL 模式是否生效

    Returns:
        True 如果 WAL 模式已启用
    """
    cursor = await conn.execute("PRAGMA journal_mode;")
    row = await cursor.fetchone()
    return row is not None and row[0].lower() == "wal"
