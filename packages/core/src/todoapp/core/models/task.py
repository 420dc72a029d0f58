"""Task Domain Model

Task 创建后不可变（frozen），done / pinned 之外的字段不在本包的修改范围内。
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import RecurringInterval


class Category(BaseModel):
    """任务分类引用（由分类选择器提供）"""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="分类 ID")
    name: str = Field(description="分类名称")
    emoji: str | None = Field(default=None, description="分类 emoji")
    color: str = Field(description="分类颜色")


class Task(BaseModel):
    """Task 数据模型

    recurring_interval 仅在 recurring 为 True 时存在。
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="唯一标识，ULID 格式")
    name: str = Field(min_length=1, description="任务名称")
    description: str | None = Field(default=None, description="任务描述")
    emoji: str | None = Field(default=None, description="任务 emoji")
    color: str = Field(description="任务颜色")
    date: datetime = Field(description="创建时间")
    deadline: datetime | None = Field(default=None, description="截止时间")
    category: list[Category] = Field(default_factory=list, description="分类列表")
    recurring: bool = Field(default=False, description="是否循环任务")
    recurring_interval: RecurringInterval | None = Field(
        default=None,
        description="循环间隔",
    )
    done: bool = Field(default=False, description="是否完成")
    pinned: bool = Field(default=False, description="是否置顶")

    @model_validator(mode="after")
    def _interval_requires_recurring(self) -> "Task":
        if not self.recurring and self.recurring_interval is not None:
            raise ValueError("recurring_interval must be absent when recurring is false")
        return self
