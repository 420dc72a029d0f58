"""SubmissionController -- Add Task 提交流程

状态机：EDITING -> VALIDATING -> {REJECTED, COMMITTED}

VALIDATING 依次检查：
1. 名称非空（失败时发送错误通知）
2. 名称、描述均无长度错误（失败时不额外通知，内联错误已可见）

任一失败 -> REJECTED -> 立即回到 EDITING，不创建任务、不修改草稿。
全部通过 -> 组装 Task -> COMMITTED：
追加到任务集合 -> 成功通知 -> 跳转任务列表 -> 清理草稿。
COMMITTED 为终态，重新进入表单时创建新的 controller。
"""

import structlog
from pydantic import BaseModel, Field

from .assembler import TaskAssembler
from .draft.form import TaskDraftForm
from .draft.lifecycle import DraftLifecycle
from .exceptions import InvalidTransitionError, SubmissionClosedError
from .models.enums import (
    NotificationKind,
    RejectionReason,
    SubmissionState,
    validate_transition,
)
from .models.task import Task
from .ports import Navigator, Notifier
from .store.protocols import TaskCollection

log = structlog.get_logger()

NAME_REQUIRED_MESSAGE = "Task name is required."


class SubmissionResult(BaseModel):
    """一次提交尝试的结果"""

    state: SubmissionState = Field(description="REJECTED 或 COMMITTED")
    task: Task | None = Field(default=None, description="COMMITTED 时的新任务")
    reason: RejectionReason | None = Field(default=None, description="REJECTED 原因")

    @property
    def committed(self) -> bool:
        return self.state == SubmissionState.COMMITTED


class SubmissionController:
    """Add Task 提交控制器（单一提交入口）"""

    def __init__(
        self,
        form: TaskDraftForm,
        task_collection: TaskCollection,
        notifier: Notifier,
        navigator: Navigator,
        assembler: TaskAssembler | None = None,
        lifecycle: DraftLifecycle | None = None,
    ) -> None:
        self._form = form
        self._tasks = task_collection
        self._notifier = notifier
        self._navigator = navigator
        self._assembler = assembler or TaskAssembler(form.settings)
        self._lifecycle = lifecycle or DraftLifecycle(form.store)
        self._state = SubmissionState.EDITING
        self._committed_task: Task | None = None

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def form(self) -> TaskDraftForm:
        return self._form

    @property
    def can_create(self) -> bool:
        """Create 按钮可用性：提交后或任一长度超限时禁用"""
        return self._state == SubmissionState.EDITING and self._form.can_create

    async def commit(self) -> SubmissionResult:
        """提交当前草稿

        Returns:
            SubmissionResult

        Raises:
            SubmissionClosedError: 已经提交过
        """
        if self._committed_task is not None:
            raise SubmissionClosedError(self._committed_task.id)

        self._transition(SubmissionState.VALIDATING)
        draft = self._form.snapshot()

        if draft.name == "":
            self._notifier.notify(NAME_REQUIRED_MESSAGE, NotificationKind.ERROR)
            return self._reject(RejectionReason.NAME_REQUIRED)

        if self._form.errors.has_errors:
            return self._reject(RejectionReason.FIELD_TOO_LONG)

        try:
            task = self._assembler.assemble(draft)
            await self._tasks.append(task)
        except Exception as e:
            # 草稿保持不变，回到 EDITING 后向上抛出
            log.error("task_commit_failed", error_type=type(e).__name__)
            self._transition(SubmissionState.REJECTED)
            self._transition(SubmissionState.EDITING)
            raise

        self._committed_task = task
        self._transition(SubmissionState.COMMITTED)
        log.info("task_committed", task_id=task.id, task_name=task.name)

        self._notifier.notify(f"Added task - {task.name}", NotificationKind.SUCCESS)
        self._navigator.go_to_task_list()
        await self._lifecycle.clear()

        return SubmissionResult(state=SubmissionState.COMMITTED, task=task)

    def _reject(self, reason: RejectionReason) -> SubmissionResult:
        self._transition(SubmissionState.REJECTED)
        log.info("submission_rejected", reason=reason.value)
        self._transition(SubmissionState.EDITING)
        return SubmissionResult(state=SubmissionState.REJECTED, reason=reason)

    def _transition(self, to_state: SubmissionState) -> None:
        if not validate_transition(self._state, to_state):
            raise InvalidTransitionError(self._state.value, to_state.value)
        self._state = to_state
