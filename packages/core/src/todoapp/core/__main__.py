"""CLI 入口模块 -- python -m todoapp.core <command>

支持的命令：
  show-draft <session_id>   查看会话中持久化的草稿
  clear-draft <session_id>  删除会话草稿
  add-task <session_id>     提交会话草稿为新任务
  list-tasks                按插入顺序列出任务
"""

import asyncio
import sys

from .config import (
    get_db_path,
    get_log_format,
    get_log_level,
    load_form_settings,
)
from .logging_config import setup_logging

_USAGE = """用法: python -m todoapp.core <command>
命令:
  show-draft <session_id>   查看会话中持久化的草稿
  clear-draft <session_id>  删除会话草稿
  add-task <session_id>     提交会话草稿为新任务
  list-tasks                按插入顺序列出任务"""

_SESSION_COMMANDS = {"show-draft", "clear-draft", "add-task"}


class _PrintNavigator:
    """CLI 下的导航：提示用户去查看任务列表"""

    def go_to_task_list(self) -> None:
        print("使用 list-tasks 查看任务列表")


def main() -> None:
    """CLI 主入口"""
    if len(sys.argv) < 2:
        print(_USAGE)
        sys.exit(1)

    command = sys.argv[1]
    setup_logging(get_log_format(), get_log_level())

    if command in _SESSION_COMMANDS:
        if len(sys.argv) < 3:
            print(f"缺少参数: {command} <session_id>")
            sys.exit(1)
        session_id = sys.argv[2]
        if command == "show-draft":
            asyncio.run(show_draft(session_id))
        elif command == "clear-draft":
            asyncio.run(clear_draft(session_id))
        else:
            committed = asyncio.run(add_task(session_id))
            if not committed:
                sys.exit(2)
    elif command == "list-tasks":
        asyncio.run(list_tasks())
    else:
        print(f"未知命令: {command}")
        print("可用命令: show-draft, clear-draft, add-task, list-tasks")
        sys.exit(1)


async def show_draft(session_id: str) -> None:
    """打印会话草稿（key = 序列化值）"""
    from .store import create_store_group

    store_group = await create_store_group(get_db_path(), session_id)
    try:
        items = await store_group.draft_store.items()
        if not items:
            print(f"会话 {session_id} 没有草稿")
            return
        for key, value in items.items():
            print(f"{key} = {value}")
    finally:
        await store_group.conn.close()


async def clear_draft(session_id: str) -> None:
    """删除会话草稿"""
    from .draft.lifecycle import DraftLifecycle
    from .store import create_store_group

    store_group = await create_store_group(get_db_path(), session_id)
    try:
        removed = await DraftLifecycle(store_group.draft_store).clear()
        print(f"已删除 {removed} 个草稿字段")
    finally:
        await store_group.conn.close()


async def add_task(session_id: str) -> bool:
    """恢复会话草稿并提交

    Returns:
        True 如果任务已创建
    """
    from .draft.form import TaskDraftForm
    from .ports import LogNotifier
    from .store import create_store_group
    from .submission import SubmissionController

    store_group = await create_store_group(get_db_path(), session_id)
    try:
        form = TaskDraftForm(store_group.draft_store, load_form_settings())
        await form.restore()
        controller = SubmissionController(
            form=form,
            task_collection=store_group.task_store,
            notifier=LogNotifier(),
            navigator=_PrintNavigator(),
        )
        result = await controller.commit()
        if result.task is not None:
            print(f"已创建任务 {result.task.id}: {result.task.name}")
        else:
            print(f"提交被拒绝: {result.reason}")
        return result.committed
    finally:
        await store_group.conn.close()


async def list_tasks() -> None:
    """按插入顺序打印任务"""
    from .store import create_store_group

    store_group = await create_store_group(get_db_path(), session_id="")
    try:
        tasks = await store_group.task_store.list_tasks()
        for task in tasks:
            flags = "x" if task.done else " "
            deadline = task.deadline.isoformat() if task.deadline else "-"
            interval = task.recurring_interval.value if task.recurring_interval else "-"
            print(f"[{flags}] {task.id}  {task.name}  deadline={deadline}  every={interval}")
        print(f"共 {len(tasks)} 个任务")
    finally:
        await store_group.conn.close()


if __name__ == "__main__":
    main()
