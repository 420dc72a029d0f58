"""TaskAssembler -- 由草稿组装不可变 Task

归一化顺序：
1. description: 空串 -> None
2. emoji: 空 -> None
3. deadline: 空串 -> None，否则按 datetime-local 格式解析
4. category: 草稿中的分类列表，原样保留
5. recurring_interval: recurring 为 False 或未选择 -> None
6. id: 新生成的 ULID
7. date: 组装时刻
"""

from collections.abc import Callable
from datetime import UTC, datetime

from ulid import ULID

from .config import FormSettings
from .exceptions import TaskInvariantError
from .models.draft import Draft
from .models.task import Task
from .recurrence import resolve_interval


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _new_task_id() -> str:
    return str(ULID())


def parse_deadline(raw: str) -> datetime | None:
    """解析 datetime-local 输入（YYYY-MM-DDTHH:MM[:SS]）

    无时区的值按本地时区解释。格式由输入控件保证，
    解析失败直接抛出 ValueError。
    """
    if raw == "":
        return None
    parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is None:
        parsed = parsed.astimezone()
    return parsed


class TaskAssembler:
    """Task 组装器（除 clock / id_factory 外无副作用）"""

    def __init__(
        self,
        settings: FormSettings,
        clock: Callable[[], datetime] = _utcnow,
        id_factory: Callable[[], str] = _new_task_id,
    ) -> None:
        self._settings = settings
        self._clock = clock
        self._id_factory = id_factory

    def assemble(self, draft: Draft) -> Task:
        """组装 Task

        Args:
            draft: 已通过提交闸门的草稿

        Returns:
            满足全部不变量的 Task

        Raises:
            TaskInvariantError: 名称为空或长度超限
            ValueError: deadline 格式非法
        """
        self._check_lengths(draft)

        description = draft.description if draft.description != "" else None
        emoji = draft.emoji if draft.emoji else None
        deadline = parse_deadline(draft.deadline)
        category = list(draft.categories) if draft.categories else []
        recurring_interval = resolve_interval(draft.recurring, draft.recurring_interval)

        return Task(
            id=self._id_factory(),
            name=draft.name,
            description=description,
            emoji=emoji,
            color=draft.color,
            date=self._clock(),
            deadline=deadline,
            category=category,
            recurring=draft.recurring,
            recurring_interval=recurring_interval,
            done=False,
            pinned=False,
        )

    def _check_lengths(self, draft: Draft) -> None:
        if not 0 < len(draft.name) <= self._settings.name_max_length:
            raise TaskInvariantError(
                f"name length {len(draft.name)} outside "
                f"(0, {self._settings.name_max_length}]"
            )
        if len(draft.description) > self._settings.description_max_length:
            raise TaskInvariantError(
                f"description length {len(draft.description)} exceeds "
                f"{self._settings.description_max_length}"
            )
