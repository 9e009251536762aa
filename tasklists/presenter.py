"""タスクリスト一覧の表示ロジック（プレゼンター）。

一覧の行サマリー、並び順、行アクションの算出と、ユーザー操作（インテント）の
サービス層への振り分けを担当する。HTTP/HTMXには依存しない。

変更後は必ず一覧を明示的に再取得し、購読者へ RowChange を通知する。
行アクションのラベルや完了状態は毎回タスクから算出し、保持しない。
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from . import queries, services
from .models import TaskList
from .params import DEFAULT_SORT_MODE, STORAGE_UNAVAILABLE_MESSAGE, SortMode, normalize_sort_mode
from .queries import TaskCounts

# =============================================================================
# 定数
# =============================================================================

DONE_LABEL: Final[str] = "Done"
UNDONE_LABEL: Final[str] = "Undone"
EDIT_LABEL: Final[str] = "Edit"
DELETE_LABEL: Final[str] = "Delete"

NEW_LIST_TITLE: Final[str] = "New List"
EDIT_LIST_TITLE: Final[str] = "Edit List"
LIST_PROMPT_MESSAGE: Final[str] = "Please set title for new task list"
SAVE_LIST_LABEL: Final[str] = "Save List"
UPDATE_LIST_LABEL: Final[str] = "Update List"
CANCEL_LABEL: Final[str] = "Cancel"


# =============================================================================
# Enum
# =============================================================================


class RowAction(StrEnum):
    """行に対して実行できる操作。"""

    TOGGLE = "toggle"
    EDIT = "edit"
    DELETE = "delete"


class ActionStyle(StrEnum):
    """アクションボタンの表示スタイル。"""

    NORMAL = "normal"
    DESTRUCTIVE = "destructive"


class ChangeKind(StrEnum):
    """一覧に対する変更の種類。"""

    INSERTED = "inserted"
    UPDATED = "updated"
    DELETED = "deleted"
    RELOADED = "reloaded"


# =============================================================================
# 値オブジェクト
# =============================================================================


@dataclass(frozen=True)
class RowSummary:
    """行の補足表示。"""

    secondary_text: str
    show_checkmark: bool


@dataclass(frozen=True)
class RowActionItem:
    """行アクション1件分の表示情報。"""

    action: RowAction
    label: str
    style: ActionStyle


@dataclass(frozen=True)
class TaskListRow:
    """一覧の1行。"""

    task_list: TaskList
    summary: RowSummary
    actions: tuple[RowActionItem, ...]


@dataclass(frozen=True)
class TitlePrompt:
    """タイトル入力ダイアログの内容。"""

    title: str
    message: str
    text: str
    confirm_label: str
    cancel_label: str = CANCEL_LABEL
    task_list_id: int | None = None


@dataclass(frozen=True)
class RowIntent:
    """行に対するユーザー操作。

    UIコンポーネントを参照せず、対象のID・操作種別と必要なデータだけを運ぶ。
    """

    task_list_id: int
    action: RowAction
    title: str | None = None  # EDIT 時の新しいタイトル


@dataclass(frozen=True)
class RowChange:
    """一覧に対する変更通知。"""

    kind: ChangeKind
    index: int | None = None
    task_list_id: int | None = None


@dataclass(frozen=True)
class IntentResult:
    """インテント実行の結果。"""

    success: bool
    change: RowChange | None = None
    task_list: TaskList | None = None
    error: str | None = None

    @property
    def is_storage_error(self) -> bool:
        """ストレージ障害による失敗かを返す。"""
        return self.error == STORAGE_UNAVAILABLE_MESSAGE


RowChangeListener = Callable[[RowChange], None]


# =============================================================================
# 算出ルール
# =============================================================================


def build_row_summary(counts: TaskCounts) -> RowSummary:
    """タスク件数から行の補足表示を算出する。

    - タスクなし: "0"、チェックマークなし
    - 全て完了: 空文字、チェックマークあり
    - 未完了あり: 未完了件数、チェックマークなし

    Args:
        counts: タスク件数。

    Returns:
        RowSummary。
    """
    if counts.total == 0:
        return RowSummary(secondary_text="0", show_checkmark=False)
    if counts.incomplete == 0:
        return RowSummary(secondary_text="", show_checkmark=True)
    return RowSummary(secondary_text=str(counts.incomplete), show_checkmark=False)


def build_row_actions(counts: TaskCounts) -> tuple[RowActionItem, ...]:
    """タスク件数から行アクションを算出する。

    Edit と Delete は常に含む。タスクがある場合は先頭にトグル操作を加え、
    未完了タスクがあれば "Done"、なければ "Undone" とする。

    Args:
        counts: タスク件数。

    Returns:
        表示順に並んだ行アクション。
    """
    actions = [
        RowActionItem(action=RowAction.EDIT, label=EDIT_LABEL, style=ActionStyle.NORMAL),
        RowActionItem(action=RowAction.DELETE, label=DELETE_LABEL, style=ActionStyle.DESTRUCTIVE),
    ]
    if counts.total > 0:
        label = DONE_LABEL if counts.incomplete > 0 else UNDONE_LABEL
        actions.insert(0, RowActionItem(action=RowAction.TOGGLE, label=label, style=ActionStyle.NORMAL))
    return tuple(actions)


def _make_row(task_list: TaskList, counts: TaskCounts) -> TaskListRow:
    return TaskListRow(
        task_list=task_list,
        summary=build_row_summary(counts),
        actions=build_row_actions(counts),
    )


# =============================================================================
# プレゼンター
# =============================================================================


class TaskListPresenter:
    """タスクリスト一覧のプレゼンター。

    Attributes:
        sort_mode: 現在の並び順。
    """

    def __init__(self, sort_mode: SortMode | str | None = DEFAULT_SORT_MODE) -> None:
        self.sort_mode: SortMode = normalize_sort_mode(sort_mode)
        self._task_lists: list[TaskList] = []
        self._listeners: list[RowChangeListener] = []
        self.reload()

    # -------------------------------------------------------------------------
    # 購読
    # -------------------------------------------------------------------------

    def subscribe(self, listener: RowChangeListener) -> None:
        """変更通知の購読者を登録する。"""
        self._listeners.append(listener)

    def unsubscribe(self, listener: RowChangeListener) -> None:
        """変更通知の購読者を解除する。"""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, change: RowChange) -> None:
        for listener in list(self._listeners):
            listener(change)

    # -------------------------------------------------------------------------
    # 読み取り
    # -------------------------------------------------------------------------

    def reload(self) -> None:
        """現在の並び順で一覧を再取得する。"""
        self._task_lists = queries.get_sorted_task_lists(self.sort_mode)

    @property
    def task_lists(self) -> tuple[TaskList, ...]:
        """現在の並び順のタスクリスト。"""
        return tuple(self._task_lists)

    def row_count(self) -> int:
        """行数を返す。"""
        return len(self._task_lists)

    def row_index(self, task_list_id: int) -> int | None:
        """タスクリストの行番号を返す。表示中でなければNone。"""
        for index, task_list in enumerate(self._task_lists):
            if task_list.pk == task_list_id:
                return index
        return None

    def row_summary(self, task_list: TaskList) -> RowSummary:
        """行の補足表示を返す。件数は呼び出しごとに集計し直す。"""
        return build_row_summary(queries.get_task_counts(task_list))

    def available_row_actions(self, task_list: TaskList) -> tuple[RowActionItem, ...]:
        """行で実行できるアクションを返す。件数は呼び出しごとに集計し直す。"""
        return build_row_actions(queries.get_task_counts(task_list))

    def build_row(self, task_list: TaskList) -> TaskListRow:
        """1行分の表示情報を組み立てる。"""
        return _make_row(task_list, queries.get_task_counts(task_list))

    def rows(self) -> list[TaskListRow]:
        """一覧を再取得し、全行の表示情報を返す。"""
        self.reload()
        return [
            _make_row(task_list, queries.get_annotated_task_counts(task_list)) for task_list in self._task_lists
        ]

    def get_row(self, task_list_id: int) -> TaskListRow | None:
        """一覧を再取得し、指定タスクリストの行を返す。表示中でなければNone。"""
        self.reload()
        index = self.row_index(task_list_id)
        if index is None:
            return None
        task_list = self._task_lists[index]
        return _make_row(task_list, queries.get_annotated_task_counts(task_list))

    # -------------------------------------------------------------------------
    # 並び順
    # -------------------------------------------------------------------------

    def set_sort_mode(self, sort_mode: SortMode | str) -> RowChange:
        """並び順を変更し、一覧を再取得する。

        Args:
            sort_mode: 新しい並び順。

        Returns:
            RELOADED の変更通知。
        """
        self.sort_mode = normalize_sort_mode(sort_mode, default=self.sort_mode)
        self.reload()
        change = RowChange(kind=ChangeKind.RELOADED)
        self._notify(change)
        return change

    # -------------------------------------------------------------------------
    # ダイアログ
    # -------------------------------------------------------------------------

    def new_list_prompt(self) -> TitlePrompt:
        """新規作成ダイアログの内容を返す。"""
        return TitlePrompt(
            title=NEW_LIST_TITLE,
            message=LIST_PROMPT_MESSAGE,
            text="",
            confirm_label=SAVE_LIST_LABEL,
        )

    def edit_list_prompt(self, task_list: TaskList) -> TitlePrompt:
        """編集ダイアログの内容を返す。現在のタイトルを初期値とする。"""
        return TitlePrompt(
            title=EDIT_LIST_TITLE,
            message=LIST_PROMPT_MESSAGE,
            text=task_list.title,
            confirm_label=UPDATE_LIST_LABEL,
            task_list_id=task_list.pk,
        )

    # -------------------------------------------------------------------------
    # インテント
    # -------------------------------------------------------------------------

    def create_list(self, title: str) -> IntentResult:
        """タスクリストを作成し、現在の並び順での挿入位置を通知する。

        Args:
            title: タスクリストのタイトル。

        Returns:
            IntentResult。成功時はINSERTEDの変更通知を持つ。
        """
        inserted: list[RowChange] = []

        def on_inserted(task_list: TaskList) -> None:
            self.reload()
            inserted.append(
                RowChange(
                    kind=ChangeKind.INSERTED,
                    index=self.row_index(task_list.pk),
                    task_list_id=task_list.pk,
                )
            )

        result = services.save_task_list(title, on_inserted=on_inserted)
        if not result.success or not inserted:
            return IntentResult(success=False, error=result.error)

        change = inserted[0]
        self._notify(change)
        return IntentResult(success=True, change=change, task_list=result.task_list)

    def dispatch(self, intent: RowIntent) -> IntentResult:
        """行に対するインテントを実行する。

        Args:
            intent: 実行するインテント。

        Returns:
            IntentResult。

        Raises:
            TaskList.DoesNotExist: 対象のタスクリストが存在しない場合。
        """
        task_list = queries.get_task_list_by_id(intent.task_list_id)
        if task_list is None:
            raise TaskList.DoesNotExist(f"TaskList {intent.task_list_id} does not exist")

        if intent.action == RowAction.EDIT:
            return self._edit(task_list, intent.title or "")
        if intent.action == RowAction.DELETE:
            return self._delete(task_list)
        return self._toggle(task_list)

    def _edit(self, task_list: TaskList, new_title: str) -> IntentResult:
        old_index = self.row_index(task_list.pk)
        result = services.edit_task_list(task_list, new_title)
        if not result.success:
            return IntentResult(success=False, task_list=task_list, error=result.error)

        self.reload()
        new_index = self.row_index(task_list.pk)
        # 並び順が変わった場合は一覧全体を描き直す
        kind = ChangeKind.UPDATED if new_index == old_index else ChangeKind.RELOADED
        change = RowChange(kind=kind, index=new_index, task_list_id=task_list.pk)
        self._notify(change)
        return IntentResult(success=True, change=change, task_list=task_list)

    def _delete(self, task_list: TaskList) -> IntentResult:
        task_list_id = task_list.pk
        old_index = self.row_index(task_list_id)
        result = services.delete_task_list(task_list)
        if not result.success:
            return IntentResult(success=False, task_list=task_list, error=result.error)

        self.reload()
        change = RowChange(kind=ChangeKind.DELETED, index=old_index, task_list_id=task_list_id)
        self._notify(change)
        return IntentResult(success=True, change=change)

    def _toggle(self, task_list: TaskList) -> IntentResult:
        result = services.toggle_all_tasks(task_list)
        if not result.success:
            return IntentResult(success=False, task_list=task_list, error=result.error)

        self.reload()
        change = RowChange(
            kind=ChangeKind.UPDATED,
            index=self.row_index(task_list.pk),
            task_list_id=task_list.pk,
        )
        self._notify(change)
        return IntentResult(success=True, change=change, task_list=task_list)
