"""StorageBackedField -- 绑定持久化草稿存储的响应式字段

每次 set() 先写入草稿存储中的镜像，成功后再更新内存中的当前值；
load() 时若存储中已有该 key 的值，则以存储值（而非默认值）为初始值。
序列化使用 pydantic TypeAdapter（JSON），str / bool / str | None /
list[Category] 均可无损往返。
"""

from typing import Any, Generic, TypeVar

import structlog
from pydantic import TypeAdapter, ValidationError

from ..store.protocols import DraftStore

log = structlog.get_logger()

T = TypeVar("T")


class StorageBackedField(Generic[T]):
    """单个草稿字段"""

    def __init__(
        self,
        store: DraftStore,
        key: str,
        default: T,
        value_type: Any,
    ) -> None:
        """
        Args:
            store: 草稿存储后端
            key: 存储 key
            default: 存储中无值时的初始值
            value_type: 值类型（用于构造 TypeAdapter），如 str、bool、list[Category]
        """
        self._store = store
        self._key = key
        self._default = default
        self._adapter: TypeAdapter[T] = TypeAdapter(value_type)
        self._value: T = default
        self._loaded = False

    @property
    def key(self) -> str:
        return self._key

    @property
    def value(self) -> T:
        return self._value

    @property
    def loaded(self) -> bool:
        return self._loaded

    def get(self) -> T:
        """返回当前值"""
        return self._value

    async def load(self) -> T:
        """挂载：从草稿存储恢复上一次的值

        存储中的值无法按声明类型解码时丢弃，保留默认值。

        Returns:
            恢复后的当前值
        """
        raw = await self._store.read(self._key)
        if raw is not None:
            try:
                self._value = self._adapter.validate_json(raw)
            except ValidationError:
                log.warning(
                    "draft_field_decode_failed",
                    key=self._key,
                    fallback="default",
                )
                self._value = self._default
        self._loaded = True
        return self._value

    async def set(self, value: T) -> None:
        """写入草稿存储后更新当前值

        存储写入失败时异常向上抛出，当前值保持不变。
        """
        raw = self._adapter.dump_json(value).decode("utf-8")
        await self._store.write(self._key, raw)
        self._value = value
