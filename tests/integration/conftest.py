"""集成测试共享 fixture"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest_asyncio
from todoapp.core.models import NotificationKind
from todoapp.core.store import StoreGroup, create_store_group


class FakeUi:
    """渲染层替身：记录 toast 与路由跳转"""

    def __init__(self) -> None:
        self.toasts: list[tuple[str, NotificationKind]] = []
        self.route = "/add"

    def notify(self, message: str, kind: NotificationKind) -> None:
        self.toasts.append((message, kind))

    def go_to_task_list(self) -> None:
        self.route = "/"


@pytest_asyncio.fixture
async def app_db_path(tmp_path: Path) -> str:
    return str(tmp_path / "sqlite" / "todoapp.db")


@pytest_asyncio.fixture
async def session_stores(app_db_path: str) -> AsyncGenerator[StoreGroup, None]:
    """浏览器会话 tab-1 的 Store 实例组"""
    store_group = await create_store_group(app_db_path, "tab-1")
    yield store_group
    await store_group.conn.close()


@pytest_asyncio.fixture
async def ui() -> FakeUi:
    return FakeUi()
