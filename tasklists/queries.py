"""タスクリストの読み取りクエリ。

データベースからタスクリスト・タスクを取得するQuery Objectパターン。
Django ORMに依存するが、ビジネスロジックは含まない。
"""

import unicodedata
from dataclasses import dataclass

from django.db.models import Count, Q, QuerySet

from .models import Task, TaskList
from .params import DEFAULT_SORT_MODE, SortMode


@dataclass(frozen=True)
class TaskCounts:
    """タスクリストのタスク件数。"""

    total: int
    incomplete: int


def _title_sort_key(task_list: TaskList) -> tuple[str, int]:
    # SQLiteのLOWER()はASCIIのみ対象。大文字小文字とアクセントはここで畳み込む
    folded = unicodedata.normalize("NFKD", task_list.title).casefold()
    return folded, task_list.pk


def get_sorted_task_lists(sort_mode: SortMode = DEFAULT_SORT_MODE) -> list[TaskList]:
    """並び順を適用したタスクリスト一覧を取得する。

    各タスクリストにはタスク総数（task_count）と未完了数（incomplete_count）を
    注釈として付与する。同じ並びキーのリストは挿入順（id）を保つ。
    アルファベット順は大文字小文字を区別せず、アクセント付き文字は基底文字の位置に並ぶ。

    Args:
        sort_mode: 並び順。

    Returns:
        並び替え済みのTaskListのリスト。
    """
    task_lists = TaskList.objects.annotate(
        task_count=Count("tasks"),
        incomplete_count=Count("tasks", filter=Q(tasks__is_complete=False)),
    )

    if sort_mode == SortMode.ALPHABETICAL:
        return sorted(task_lists, key=_title_sort_key)
    return list(task_lists.order_by("date", "id"))


def get_task_counts(task_list: TaskList) -> TaskCounts:
    """タスクリストのタスク件数を集計する。

    インスタンスに残っている注釈は古い可能性があるため使わず、毎回集計クエリを発行する。

    Args:
        task_list: 対象のTaskList。

    Returns:
        TaskCounts。
    """
    counts = task_list.tasks.aggregate(
        total=Count("id"),
        incomplete=Count("id", filter=Q(is_complete=False)),
    )
    return TaskCounts(total=counts["total"], incomplete=counts["incomplete"])


def get_annotated_task_counts(task_list: TaskList) -> TaskCounts:
    """get_sorted_task_lists() が付与した注釈からタスク件数を取得する。

    取得直後のインスタンスにだけ使う。注釈が無ければ集計クエリにフォールバックする。
    """
    total = getattr(task_list, "task_count", None)
    incomplete = getattr(task_list, "incomplete_count", None)
    if isinstance(total, int) and isinstance(incomplete, int):
        return TaskCounts(total=total, incomplete=incomplete)
    return get_task_counts(task_list)


def get_task_list_by_id(task_list_id: int) -> TaskList | None:
    """指定IDのタスクリストを取得する。

    Args:
        task_list_id: タスクリストID。

    Returns:
        TaskListインスタンス。存在しなければNone。
    """
    return TaskList.objects.filter(id=task_list_id).first()


def get_current_tasks(task_list: TaskList) -> QuerySet[Task]:
    """未完了のタスクを挿入順で取得する。"""
    return task_list.tasks.filter(is_complete=False).order_by("id")


def get_completed_tasks(task_list: TaskList) -> QuerySet[Task]:
    """完了済みのタスクを挿入順で取得する。"""
    return task_list.tasks.filter(is_complete=True).order_by("id")


def has_any_task_list() -> bool:
    """タスクリストが1件以上存在するかを返す。"""
    return TaskList.objects.exists()
