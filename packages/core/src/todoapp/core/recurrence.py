"""RecurrencePolicy -- recurring 与 recurring_interval 的依赖关系

关闭 recurring 时不清除草稿中的 recurringInterval（重新开启时仍可用），
组装 Task 时再按 recurring 决定是否保留间隔。
"""

from typing import Literal

from .models.enums import RecurringInterval


def resolve_interval(
    recurring: bool, raw_interval: RecurringInterval | Literal[""]
) -> RecurringInterval | None:
    """计算组装时生效的循环间隔

    Args:
        recurring: 是否循环
        raw_interval: 草稿中的原始间隔，空串表示尚未选择

    Returns:
        recurring 为 False 或未选择间隔时返回 None
    """
    if not recurring or raw_interval == "":
        return None
    return RecurringInterval(raw_interval)


def shows_interval_picker(recurring: bool) -> bool:
    """间隔选择器仅在 recurring 开启时提供"""
    return recurring
