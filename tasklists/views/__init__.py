"""タスクリストアプリケーションのビュー。

外部（urls.py / tests）からはこのパッケージを経由して参照する。
"""

from .create_views import create_task_list  # noqa: F401
from .delete_views import delete_task_list  # noqa: F401
from .list_views import (  # noqa: F401
    new_task_list_dialog,
    task_list_index,
    task_list_row,
    task_list_rows,
)
from .task_views import (  # noqa: F401
    create_task,
    delete_task,
    edit_task,
    task_list_detail,
    task_sections,
    toggle_task,
)
from .update_views import edit_task_list, toggle_task_list  # noqa: F401
