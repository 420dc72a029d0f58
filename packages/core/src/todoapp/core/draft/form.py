"""TaskDraftForm -- Add Task 表单的八个草稿字段

每个字段都是 StorageBackedField，修改即镜像到会话草稿存储；
restore() 在表单挂载时调用，恢复上一次未提交的草稿。
错误状态、提示文字、"Create" 可用性均从当前值即时推导。
"""

from typing import Literal

import structlog

from ..config import FormSettings
from ..models.draft import (
    CATEGORIES_KEY,
    COLOR_KEY,
    DEADLINE_KEY,
    DESCRIPTION_KEY,
    EMOJI_KEY,
    NAME_KEY,
    RECURRING_INTERVAL_KEY,
    RECURRING_KEY,
    Draft,
)
from ..models.enums import RecurringInterval
from ..models.task import Category
from ..recurrence import shows_interval_picker
from ..store.protocols import DraftStore
from ..validation import FormErrors, can_create, derive_errors, helper_text
from .field import StorageBackedField

log = structlog.get_logger()


class TaskDraftForm:
    """Add Task 表单状态"""

    def __init__(self, store: DraftStore, settings: FormSettings) -> None:
        self._store = store
        self._settings = settings
        self.name = StorageBackedField[str](store, NAME_KEY, "", str)
        self.emoji = StorageBackedField[str | None](store, EMOJI_KEY, None, str | None)
        self.color = StorageBackedField[str](store, COLOR_KEY, settings.default_color, str)
        self.description = StorageBackedField[str](store, DESCRIPTION_KEY, "", str)
        self.recurring = StorageBackedField[bool](store, RECURRING_KEY, False, bool)
        self.recurring_interval = StorageBackedField[RecurringInterval | Literal[""]](
            store, RECURRING_INTERVAL_KEY, "", RecurringInterval | Literal[""]
        )
        self.deadline = StorageBackedField[str](store, DEADLINE_KEY, "", str)
        self.categories = StorageBackedField[list[Category]](
            store, CATEGORIES_KEY, [], list[Category]
        )

    @property
    def settings(self) -> FormSettings:
        return self._settings

    @property
    def store(self) -> DraftStore:
        return self._store

    @property
    def fields(self) -> list[StorageBackedField]:
        return [
            self.name,
            self.emoji,
            self.color,
            self.description,
            self.recurring,
            self.recurring_interval,
            self.deadline,
            self.categories,
        ]

    async def restore(self) -> Draft:
        """挂载：从草稿存储恢复全部字段

        Returns:
            恢复后的草稿快照
        """
        persisted = set(await self._store.keys())
        for field in self.fields:
            await field.load()
        restored = sorted(persisted.intersection(f.key for f in self.fields))
        if restored:
            log.info("draft_restored", keys=restored)
        return self.snapshot()

    # ---- 字段修改（选择器 / 输入框回调） ----

    async def set_name(self, value: str) -> None:
        await self.name.set(value)

    async def set_description(self, value: str) -> None:
        await self.description.set(value)

    async def set_emoji(self, value: str | None) -> None:
        await self.emoji.set(value)

    async def set_color(self, value: str) -> None:
        await self.color.set(value)

    async def set_recurring(self, checked: bool) -> None:
        # 关闭时保留已选间隔
        await self.recurring.set(checked)

    async def set_recurring_interval(self, value: RecurringInterval) -> None:
        """间隔选择器回调

        Raises:
            ValueError: 不是合法的 RecurringInterval（草稿不变）
        """
        await self.recurring_interval.set(RecurringInterval(value))

    async def set_deadline(self, value: str) -> None:
        await self.deadline.set(value)

    async def clear_deadline(self) -> None:
        await self.deadline.set("")

    async def set_categories(self, categories: list[Category]) -> None:
        await self.categories.set(list(categories))

    # ---- 推导状态 ----

    def snapshot(self) -> Draft:
        """当前字段值的草稿快照"""
        return Draft(
            name=self.name.get(),
            emoji=self.emoji.get(),
            color=self.color.get(),
            description=self.description.get(),
            recurring=self.recurring.get(),
            recurring_interval=self.recurring_interval.get(),
            deadline=self.deadline.get(),
            categories=list(self.categories.get()),
        )

    @property
    def errors(self) -> FormErrors:
        return derive_errors(self.snapshot(), self._settings)

    @property
    def can_create(self) -> bool:
        return can_create(self.errors)

    @property
    def shows_interval_picker(self) -> bool:
        return shows_interval_picker(self.recurring.get())

    @property
    def name_helper_text(self) -> str | None:
        return helper_text(
            self.name.get(),
            self._settings.name_max_length,
            self.errors.name,
        )

    @property
    def description_helper_text(self) -> str | None:
        return helper_text(
            self.description.get(),
            self._settings.description_max_length,
            self.errors.description,
        )
