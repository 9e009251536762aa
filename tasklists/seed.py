"""初回起動時のデモデータ投入。

タスクリストが1件も無いときだけ、サンプルのタスクリストとタスクを作成する。
"""

import logging
from dataclasses import dataclass
from typing import Final

from django.db import transaction

from . import queries
from .models import Task, TaskList

logger = logging.getLogger(__name__)

# (タイトル, [(タスク, メモ, 完了)])
SEED_TASK_LISTS: Final[tuple[tuple[str, tuple[tuple[str, str, bool], ...]], ...]] = (
    (
        "Shopping List",
        (
            ("Milk", "2L", False),
            ("Bread", "", False),
            ("Apples", "2Kg", False),
        ),
    ),
    (
        "Moving List",
        (
            ("Pack books", "", True),
            ("Book a van", "Saturday morning", False),
        ),
    ),
    ("Someday", ()),
)


@dataclass(frozen=True)
class SeedResult:
    """デモデータ投入の結果。"""

    created: bool
    task_list_count: int = 0
    task_count: int = 0


def seed_task_lists(*, force: bool = False) -> SeedResult:
    """デモデータを1トランザクションで作成する。

    Args:
        force: Trueなら既存データがあっても作成する。

    Returns:
        SeedResult。既存データがあり作成しなかった場合は created=False。
    """
    if not force and queries.has_any_task_list():
        logger.info("タスクリストが既に存在するため、デモデータの投入をスキップしました")
        return SeedResult(created=False)

    task_count = 0
    with transaction.atomic():
        for title, tasks in SEED_TASK_LISTS:
            task_list = TaskList.objects.create(title=title)
            Task.objects.bulk_create(
                Task(task_list=task_list, title=task_title, note=note, is_complete=is_complete)
                for task_title, note, is_complete in tasks
            )
            task_count += len(tasks)

    logger.info(
        "デモデータを投入しました: task_lists=%d, tasks=%d",
        len(SEED_TASK_LISTS),
        task_count,
    )
    return SeedResult(created=True, task_list_count=len(SEED_TASK_LISTS), task_count=task_count)
