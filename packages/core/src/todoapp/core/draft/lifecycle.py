"""DraftLifecycle -- 提交成功后清理会话草稿

仅由 SubmissionController 在 COMMITTED 后调用一次；
校验失败或离开页面时草稿保留，用于下次恢复。
"""

from collections.abc import Iterable

import structlog

from ..models.draft import DRAFT_KEYS
from ..store.protocols import DraftStore

log = structlog.get_logger()


class DraftLifecycle:
    """草稿生命周期"""

    def __init__(
        self,
        store: DraftStore,
        keys: Iterable[str] = DRAFT_KEYS,
    ) -> None:
        self._store = store
        self._keys = tuple(keys)

    @property
    def keys(self) -> tuple[str, ...]:
        return self._keys

    async def clear(self) -> int:
        """删除全部草稿 key

        Returns:
            实际删除的条目数
        """
        removed = await self._store.remove(self._keys)
        log.info("draft_cleared", removed=removed)
        return removed
