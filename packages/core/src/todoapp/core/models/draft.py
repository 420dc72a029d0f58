"""Draft Model -- Add Task 表单的未校验草稿

草稿按会话存放在持久化草稿存储中，每个字段一个 key。
"""

from typing import Literal

from pydantic import BaseModel, Field

from ..config import DEFAULT_TASK_COLOR
from .enums import RecurringInterval
from .task import Category

# 草稿存储 key（与表单字段一一对应）
NAME_KEY = "name"
EMOJI_KEY = "emoji"
COLOR_KEY = "color"
DESCRIPTION_KEY = "description"
RECURRING_KEY = "recurring"
RECURRING_INTERVAL_KEY = "recurringInterval"
DEADLINE_KEY = "deadline"
CATEGORIES_KEY = "categories"

DRAFT_KEYS: tuple[str, ...] = (
    NAME_KEY,
    EMOJI_KEY,
    COLOR_KEY,
    DESCRIPTION_KEY,
    RECURRING_KEY,
    RECURRING_INTERVAL_KEY,
    DEADLINE_KEY,
    CATEGORIES_KEY,
)


class Draft(BaseModel):
    """表单草稿快照（原始值，未归一化）"""

    name: str = Field(default="", description="任务名称")
    emoji: str | None = Field(default=None, description="已选 emoji")
    color: str = Field(default=DEFAULT_TASK_COLOR, description="已选颜色")
    description: str = Field(default="", description="任务描述")
    recurring: bool = Field(default=False, description="是否循环")
    recurring_interval: RecurringInterval | Literal[""] = Field(
        default="", description="循环间隔，空串表示未选择"
    )
    deadline: str = Field(default="", description="datetime-local 格式截止时间，空串表示无")
    categories: list[Category] = Field(default_factory=list, description="已选分类")
