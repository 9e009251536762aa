"""タスクリスト操作のビジネスロジック（サービス層）。

タスクリスト・タスクの書き込み操作（create/update/delete）を提供する。
各操作は1つのトランザクションとして実行され、全て反映されるか何も反映されない。
Result型で成功/失敗を表現する。

書き込み失敗（DatabaseError）は例外として伝播させず、
error に STORAGE_UNAVAILABLE_MESSAGE を持つ失敗結果として返す。
書き込みが成功するまでメモリ上のインスタンスは変更しない。
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from django.db import DatabaseError, transaction

from .models import Task, TaskList
from .params import (
    NOTE_MAX_LENGTH,
    NOTE_TOO_LONG_MESSAGE,
    STORAGE_UNAVAILABLE_MESSAGE,
    parse_title,
    validate_title,
)

logger = logging.getLogger(__name__)

# =============================================================================
# Result 型
# =============================================================================


@dataclass(frozen=True)
class SaveTaskListResult:
    """タスクリスト作成の結果。"""

    success: bool
    task_list: TaskList | None = None
    error: str | None = None


@dataclass(frozen=True)
class EditTaskListResult:
    """タスクリストのタイトル変更の結果。"""

    success: bool
    task_list: TaskList | None = None
    changed: bool = False
    error: str | None = None


@dataclass(frozen=True)
class ToggleAllResult:
    """タスクリスト配下のタスク一括完了/未完了の結果。"""

    success: bool
    task_list: TaskList | None = None
    completed: bool = False  # 変更後の状態
    updated_count: int = 0
    error: str | None = None


@dataclass(frozen=True)
class AddTaskResult:
    """タスク追加の結果。"""

    success: bool
    task: Task | None = None
    error: str | None = None


@dataclass(frozen=True)
class EditTaskResult:
    """タスク編集の結果。"""

    success: bool
    task: Task | None = None
    changed: bool = False
    error: str | None = None


@dataclass(frozen=True)
class ToggleTaskResult:
    """タスク完了状態トグルの結果。"""

    success: bool
    task: Task | None = None
    old_status: bool = False
    error: str | None = None


@dataclass(frozen=True)
class DeleteResult:
    """削除の結果。"""

    success: bool
    deleted_count: int = 0
    title: str | None = None  # ログ用
    error: str | None = None


# =============================================================================
# タスクリスト
# =============================================================================


def save_task_list(
    title: str,
    *,
    on_inserted: Callable[[TaskList], None] | None = None,
) -> SaveTaskListResult:
    """タスクリストを作成する。

    タイトルを検証し、問題なければ空のタスクリストを作成する。
    作成後、on_inserted に作成したタスクリストを渡して呼び出す。

    Args:
        title: タスクリストのタイトル。
        on_inserted: 作成完了時に呼ばれるコールバック。

    Returns:
        SaveTaskListResult。成功時はtask_listにインスタンス、
        失敗時はerrorにメッセージ。
    """
    title = parse_title(title)
    error = validate_title(title)
    if error:
        return SaveTaskListResult(success=False, error=error)

    try:
        with transaction.atomic():
            task_list = TaskList.objects.create(title=title)
    except DatabaseError:
        logger.exception("タスクリストの保存に失敗しました: title='%s'", title)
        return SaveTaskListResult(success=False, error=STORAGE_UNAVAILABLE_MESSAGE)

    if on_inserted is not None:
        on_inserted(task_list)
    return SaveTaskListResult(success=True, task_list=task_list)


def edit_task_list(task_list: TaskList, new_title: str) -> EditTaskListResult:
    """タスクリストのタイトルを変更する。

    同一インスタンスのままタイトルだけを更新する。

    Args:
        task_list: 対象のTaskList。
        new_title: 新しいタイトル。

    Returns:
        EditTaskListResult。changedは実際に変更があったか。
    """
    new_title = parse_title(new_title)
    error = validate_title(new_title)
    if error:
        return EditTaskListResult(success=False, task_list=task_list, error=error)

    if new_title == task_list.title:
        return EditTaskListResult(success=True, task_list=task_list, changed=False)

    try:
        with transaction.atomic():
            TaskList.objects.filter(pk=task_list.pk).update(title=new_title)
    except DatabaseError:
        logger.exception("タスクリストの更新に失敗しました: id=%s", task_list.pk)
        return EditTaskListResult(success=False, task_list=task_list, error=STORAGE_UNAVAILABLE_MESSAGE)

    task_list.title = new_title
    return EditTaskListResult(success=True, task_list=task_list, changed=True)


def _set_all_tasks_complete(task_list: TaskList, *, completed: bool | None) -> ToggleAllResult:
    # completed=None の場合は、同じトランザクション内で未完了タスクの有無から決める
    try:
        with transaction.atomic():
            if completed is None:
                completed = task_list.tasks.filter(is_complete=False).exists()
            updated_count = task_list.tasks.update(is_complete=completed)
    except DatabaseError:
        logger.exception(
            "タスクの一括更新に失敗しました: task_list_id=%s, completed=%s",
            task_list.pk,
            completed,
        )
        return ToggleAllResult(success=False, task_list=task_list, error=STORAGE_UNAVAILABLE_MESSAGE)

    return ToggleAllResult(
        success=True,
        task_list=task_list,
        completed=completed,
        updated_count=updated_count,
    )


def done_task_list(task_list: TaskList) -> ToggleAllResult:
    """タスクリスト配下の全タスクを完了にする。"""
    return _set_all_tasks_complete(task_list, completed=True)


def undone_task_list(task_list: TaskList) -> ToggleAllResult:
    """タスクリスト配下の全タスクを未完了に戻す。"""
    return _set_all_tasks_complete(task_list, completed=False)


def toggle_all_tasks(task_list: TaskList) -> ToggleAllResult:
    """タスクリスト配下のタスクを一括で完了/未完了に切り替える。

    未完了タスクが1件でもあれば全て完了に（Done）、
    なければ全て未完了に（Undone）する。判定と更新は1つのトランザクションで行う。

    Args:
        task_list: 対象のTaskList。

    Returns:
        ToggleAllResult。completedに変更後の状態。
    """
    return _set_all_tasks_complete(task_list, completed=None)


def delete_task_list(task_list: TaskList) -> DeleteResult:
    """タスクリストを所有するタスクごと削除する。

    Args:
        task_list: 削除対象のTaskList。

    Returns:
        DeleteResult。deleted_countはタスクを含む削除件数。
    """
    title = task_list.title
    task_list_id = task_list.pk
    try:
        with transaction.atomic():
            deleted_count, _ = task_list.delete()
    except DatabaseError:
        logger.exception("タスクリストの削除に失敗しました: id=%s", task_list_id)
        return DeleteResult(success=False, title=title, error=STORAGE_UNAVAILABLE_MESSAGE)

    return DeleteResult(success=True, deleted_count=deleted_count, title=title)


# =============================================================================
# タスク
# =============================================================================


def _validate_note(note: str) -> str | None:
    if len(note) > NOTE_MAX_LENGTH:
        return NOTE_TOO_LONG_MESSAGE
    return None


def add_task(task_list: TaskList, title: str, note: str = "") -> AddTaskResult:
    """タスクリストの末尾に未完了のタスクを追加する。

    Args:
        task_list: 追加先のTaskList。
        title: タスクのタイトル。
        note: 任意のメモ。

    Returns:
        AddTaskResult。成功時はtaskにインスタンス。
    """
    title = parse_title(title)
    note = (note or "").strip()
    error = validate_title(title) or _validate_note(note)
    if error:
        return AddTaskResult(success=False, error=error)

    try:
        with transaction.atomic():
            task = Task.objects.create(task_list=task_list, title=title, note=note)
    except DatabaseError:
        logger.exception("タスクの追加に失敗しました: task_list_id=%s", task_list.pk)
        return AddTaskResult(success=False, error=STORAGE_UNAVAILABLE_MESSAGE)

    return AddTaskResult(success=True, task=task)


def edit_task(task: Task, title: str, note: str = "") -> EditTaskResult:
    """タスクのタイトルとメモを更新する。

    Args:
        task: 対象のTask。
        title: 新しいタイトル。
        note: 新しいメモ。

    Returns:
        EditTaskResult。changedは実際に変更があったか。
    """
    title = parse_title(title)
    note = (note or "").strip()
    error = validate_title(title) or _validate_note(note)
    if error:
        return EditTaskResult(success=False, task=task, error=error)

    if title == task.title and note == task.note:
        return EditTaskResult(success=True, task=task, changed=False)

    try:
        with transaction.atomic():
            Task.objects.filter(pk=task.pk).update(title=title, note=note)
    except DatabaseError:
        logger.exception("タスクの更新に失敗しました: id=%s", task.pk)
        return EditTaskResult(success=False, task=task, error=STORAGE_UNAVAILABLE_MESSAGE)

    task.title = title
    task.note = note
    return EditTaskResult(success=True, task=task, changed=True)


def toggle_task(task: Task) -> ToggleTaskResult:
    """タスクの完了状態をトグルする。

    Args:
        task: 対象のTask。

    Returns:
        ToggleTaskResult。old_statusに変更前の状態。
    """
    old_status = task.is_complete
    try:
        with transaction.atomic():
            Task.objects.filter(pk=task.pk).update(is_complete=not old_status)
    except DatabaseError:
        logger.exception("タスクの完了状態更新に失敗しました: id=%s", task.pk)
        return ToggleTaskResult(success=False, task=task, old_status=old_status, error=STORAGE_UNAVAILABLE_MESSAGE)

    task.is_complete = not old_status
    return ToggleTaskResult(success=True, task=task, old_status=old_status)


def delete_task(task: Task) -> DeleteResult:
    """単一のタスクを削除する。

    Args:
        task: 削除対象のTask。

    Returns:
        DeleteResult。titleにログ用のタイトル。
    """
    title = task.title
    task_id = task.pk
    try:
        with transaction.atomic():
            deleted_count, _ = task.delete()
    except DatabaseError:
        logger.exception("タスクの削除に失敗しました: id=%s", task_id)
        return DeleteResult(success=False, title=title, error=STORAGE_UNAVAILABLE_MESSAGE)

    return DeleteResult(success=True, deleted_count=deleted_count, title=title)
