"""packages/core 测试配置 -- 核心层 fixture"""

from collections.abc import AsyncGenerator
from pathlib import Path

import aiosqlite
import pytest
import pytest_asyncio
from todoapp.core.models import NotificationKind
from todoapp.core.store.draft_store import SqliteDraftStore
from todoapp.core.store.task_store import SqliteTaskStore


class RecordingNotifier:
    """记录全部通知的 Notifier"""

    def __init__(self) -> None:
        self.messages: list[tuple[str, NotificationKind]] = []

    def notify(self, message: str, kind: NotificationKind) -> None:
        self.messages.append((message, kind))


class RecordingNavigator:
    """记录跳转次数的 Navigator"""

    def __init__(self) -> None:
        self.task_list_visits = 0

    def go_to_task_list(self) -> None:
        self.task_list_visits += 1


@pytest_asyncio.fixture
async def core_db_path(tmp_path: Path) -> Path:
    """核心层临时数据库路径"""
    return tmp_path / "core_test.db"


@pytest_asyncio.fixture
async def core_db(core_db_path: Path) -> AsyncGenerator[aiosqlite.Connection, None]:
    """核心层已初始化数据库连接"""
    from todoapp.core.store.sqlite_init import init_db

    conn = await aiosqlite.connect(str(core_db_path))
    await init_db(conn)
    yield conn
    await conn.close()


@pytest_asyncio.fixture
async def draft_store(core_db: aiosqlite.Connection) -> SqliteDraftStore:
    """session-a 的草稿存储"""
    return SqliteDraftStore(core_db, "session-a")


@pytest_asyncio.fixture
async def task_store(core_db: aiosqlite.Connection) -> SqliteTaskStore:
    return SqliteTaskStore(core_db)


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def navigator() -> RecordingNavigator:
    return RecordingNavigator()
