"""todoapp Core Draft -- 草稿字段、表单与生命周期"""

from .field import StorageBackedField
from .form import TaskDraftForm
from .lifecycle import DraftLifecycle

__all__ = [
    "StorageBackedField",
    "TaskDraftForm",
    "DraftLifecycle",
]
