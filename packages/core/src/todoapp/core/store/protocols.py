"""Store Protocol 接口定义

定义 DraftStore、TaskCollection 的抽象接口，
使用 Python Protocol 实现结构化子类型（duck typing）。
"""

from collections.abc import Iterable
from typing import Protocol

from ..models.task import Task


class DraftStore(Protocol):
    """草稿存储接口 -- 单个会话内的 key-value 镜像

    value 为序列化后的字符串，由 StorageBackedField 负责编解码。
    """

    async def read(self, key: str) -> str | None:
        """读取 key 对应的序列化值，不存在返回 None"""
        ...

    async def write(self, key: str, value: str) -> None:
        """写入（覆盖）key 对应的序列化值，返回前已落盘"""
        ...

    async def remove(self, keys: Iterable[str]) -> int:
        """删除一组 key，返回实际删除的条目数"""
        ...

    async def keys(self) -> list[str]:
        """列出当前会话已持久化的 key"""
        ...


class TaskCollection(Protocol):
    """用户任务集合接口"""

    async def append(self, task: Task) -> None:
        """追加到集合末尾（保留插入顺序，不去重）"""
        ...
