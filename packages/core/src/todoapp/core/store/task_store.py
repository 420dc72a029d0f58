"""TaskStore SQLite 实现

tasks 表是用户的任务集合：只在末尾追加，seq 列保留插入顺序。
task_id 唯一约束保证集合内 ID 不重复。
"""

import json
from datetime import datetime

import aiosqlite

from ..exceptions import DuplicateTaskError
from ..models.task import Category, Task


class SqliteTaskStore:
    """TaskCollection 的 SQLite 实现"""

    def __init__(self, conn: aiosqlite.Connection) -> None:
        self._conn = conn

    async def append(self, task: Task) -> None:
        """追加任务到集合末尾并提交

        Raises:
            DuplicateTaskError: task_id 已存在
        """
        try:
            await self._conn.execute(
                """
                INSERT INTO tasks (task_id, name, description, emoji, color, date,
                                   deadline, category, recurring, recurring_interval,
                                   done, pinned)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    task.id,
                    task.name,
                    task.description,
                    task.emoji,
                    task.color,
                    task.date.isoformat(),
                    task.deadline.isoformat() if task.deadline else None,
                    json.dumps(
                        [c.model_dump() for c in task.category],
                        ensure_ascii=False,
                    ),
                    int(task.recurring),
                    task.recurring_interval.value if task.recurring_interval else None,
                    int(task.done),
                    int(task.pinned),
                ),
            )
            await self._conn.commit()
        except aiosqlite.IntegrityError as e:
            await self._conn.rollback()
            if "tasks.task_id" in str(e):
                raise DuplicateTaskError(task.id) from e
            raise

    async def get_task(self, task_id: str) -> Task | None:
        """根据 task_id 查询任务"""
        cursor = await self._conn.execute(
            "SELECT * FROM tasks WHERE task_id = ?",
            (task_id,),
        )
        row = await cursor.fetchone()
        if row is None:
            return None
        return self._row_to_task(row)

    async def list_tasks(self) -> list[Task]:
        """查询任务列表，按插入顺序"""
        cursor = await self._conn.execute("SELECT * FROM tasks ORDER BY seq ASC")
        rows = await cursor.fetchall()
        return [self._row_to_task(row) for row in rows]

    async def count_tasks(self) -> int:
        cursor = await self._conn.execute("SELECT COUNT(*) FROM tasks")
        row = await cursor.fetchone()
        return row[0] if row else 0

    @staticmethod
    def _row_to_task(row: aiosqlite.Row) -> Task:
        """将数据库行转换为 Task 模型（row[0] 为 seq）"""
        category_data = json.loads(row[8]) if row[8] else []
        return Task(
            id=row[1],
            name=row[2],
            description=row[3],
            emoji=row[4],
            color=row[5],
            date=datetime.fromisoformat(row[6]),
            deadline=datetime.fromisoformat(row[7]) if row[7] else None,
            category=[Category(**c) for c in category_data],
            recurring=bool(row[9]),
            recurring_interval=row[10],
            done=bool(row[11]),
            pinned=bool(row[12]),
        )
