"""Domain Models 单元测试

测试内容：
1. 枚举取值
2. Task 不可变与 recurring 约束
3. Draft 默认值与序列化
"""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError
from todoapp.core.models import (
    DRAFT_KEYS,
    Category,
    Draft,
    NotificationKind,
    RecurringInterval,
    SubmissionState,
    Task,
)


def _make_task(**overrides) -> Task:
    data = {
        "id": "01JTEST000000000000000001",
        "name": "Buy milk",
        "color": "#b624ff",
        "date": datetime.now(UTC),
    }
    data.update(overrides)
    return Task(**data)


class TestEnums:
    """枚举值测试"""

    def test_submission_state_values(self):
        assert SubmissionState.EDITING == "EDITING"
        assert SubmissionState.VALIDATING == "VALIDATING"
        assert SubmissionState.REJECTED == "REJECTED"
        assert SubmissionState.COMMITTED == "COMMITTED"

    def test_recurring_interval_from_string(self):
        assert RecurringInterval("weekly") == RecurringInterval.WEEKLY

    def test_notification_kind_values(self):
        assert NotificationKind.SUCCESS == "success"
        assert NotificationKind.ERROR == "error"


class TestTaskModel:
    """Task 模型测试"""

    def test_task_defaults(self):
        """done / pinned 默认 False，可选字段默认缺省"""
        task = _make_task()
        assert task.done is False
        assert task.pinned is False
        assert task.description is None
        assert task.deadline is None
        assert task.emoji is None
        assert task.category == []
        assert task.recurring_interval is None

    def test_task_is_frozen(self):
        """Task 创建后不可修改"""
        task = _make_task()
        with pytest.raises(ValidationError):
            task.name = "Other"  # type: ignore[misc]

    def test_model_copy_for_done(self):
        """done 通过 model_copy 派生新 Task"""
        task = _make_task()
        finished = task.model_copy(update={"done": True})
        assert finished.done is True
        assert task.done is False
        assert finished.id == task.id

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            _make_task(name="")

    def test_interval_without_recurring_rejected(self):
        """recurring=False 时不允许携带间隔"""
        with pytest.raises(ValidationError):
            _make_task(recurring=False, recurring_interval=RecurringInterval.DAILY)

    def test_recurring_with_interval(self):
        task = _make_task(recurring=True, recurring_interval="monthly")
        assert task.recurring_interval == RecurringInterval.MONTHLY

    def test_recurring_without_interval_allowed(self):
        task = _make_task(recurring=True)
        assert task.recurring_interval is None

    def test_task_json_roundtrip(self):
        task = _make_task(
            description="2 liters",
            category=[Category(id="c1", name="Home", color="#ff0000")],
        )
        restored = Task.model_validate_json(task.model_dump_json())
        assert restored == task


class TestDraftModel:
    """Draft 模型测试"""

    def test_draft_defaults(self):
        draft = Draft()
        assert draft.name == ""
        assert draft.emoji is None
        assert draft.description == ""
        assert draft.recurring is False
        assert draft.recurring_interval == ""
        assert draft.deadline == ""
        assert draft.categories == []

    def test_draft_keys(self):
        """草稿 key 空间包含八个字段"""
        assert set(DRAFT_KEYS) == {
            "name",
            "emoji",
            "color",
            "description",
            "recurring",
            "recurringInterval",
            "deadline",
            "categories",
        }
