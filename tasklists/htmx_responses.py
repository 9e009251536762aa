"""HTMX固有のレスポンス生成。

OOBスワップ、パーシャルHTML組み立てなど、HTMX専用の処理を提供する。
"""

from http import HTTPStatus
from typing import Final

from django.http import HttpResponse
from django.template.loader import render_to_string

from . import queries
from .forms import TaskForm, TaskListTitleForm
from .models import Task, TaskList
from .params import SortMode, build_sort_querystring
from .presenter import TaskListPresenter, TaskListRow, TitlePrompt

# =============================================================================
# DOM ID 定数
# =============================================================================

TASK_LIST_ROWS_ID: Final[str] = "task-list-rows"
ROW_COUNT_ID: Final[str] = "row-count"
FORM_ERRORS_ID: Final[str] = "form-errors"


# =============================================================================
# OOB ヘルパー
# =============================================================================


def _add_oob_attribute(html: str, element_id: str, oob_value: str = "true") -> str:
    """HTML断片にOOBスワップ属性を追加する。

    Args:
        html: 対象のHTML文字列。
        element_id: 対象要素のID。
        oob_value: hx-swap-oobの値。

    Returns:
        OOB属性が追加されたHTML。
    """
    return html.replace(
        f'id="{element_id}"',
        f'id="{element_id}" hx-swap-oob="{oob_value}"',
    )


def render_form_errors_oob(message: str | None) -> str:
    """フォームエラー表示のOOB更新用HTMLを生成する。"""
    html = render_to_string("tasklists/_form_errors.html", {"message": message})
    return _add_oob_attribute(html, FORM_ERRORS_ID)


def render_row_count_oob(row_count: int) -> str:
    """行数表示のOOB更新用HTMLを生成する。"""
    html = render_to_string("tasklists/_row_count.html", {"row_count": row_count})
    return _add_oob_attribute(html, ROW_COUNT_ID)


# =============================================================================
# 一覧レスポンス
# =============================================================================


def render_rows_html(presenter: TaskListPresenter, *, inserted_index: int | None = None) -> str:
    """一覧の全行のHTMLを生成する。

    Args:
        presenter: 表示対象のプレゼンター。
        inserted_index: 新規作成された行の位置（強調表示用）。

    Returns:
        レンダリングされたHTML文字列。
    """
    rows = presenter.rows()
    inserted_task_list_id = None
    if inserted_index is not None and 0 <= inserted_index < len(rows):
        inserted_task_list_id = rows[inserted_index].task_list.pk

    return render_to_string(
        "tasklists/_task_list_rows.html",
        {
            "rows": rows,
            "inserted_task_list_id": inserted_task_list_id,
            "current_sort": presenter.sort_mode.value,
            "sort_querystring": build_sort_querystring(presenter.sort_mode),
        },
    )


def render_rows_response(
    presenter: TaskListPresenter,
    *,
    inserted_index: int | None = None,
    include_main_list: bool = True,
    include_list_oob: bool = False,
    status: HTTPStatus = HTTPStatus.OK,
) -> HttpResponse:
    """一覧の全行と行数をOOBスワップで返す。

    include_main_list=False の場合、メインのスワップ対象（ダイアログ等）は空になる。

    Args:
        presenter: 表示対象のプレゼンター。
        inserted_index: 新規作成された行の位置（強調表示用）。
        include_main_list: メインレスポンスに一覧を含めるか。
        include_list_oob: OOBで一覧を更新するか。
        status: 返却するHTTPステータス。

    Returns:
        レンダリングされたHTMLを含むHttpResponse。
    """
    rows_html = ""
    if include_main_list or include_list_oob:
        rows_html = render_rows_html(presenter, inserted_index=inserted_index)

    parts: list[str] = []
    if include_main_list:
        parts.append(rows_html)
    if include_list_oob:
        parts.append(f'<div id="{TASK_LIST_ROWS_ID}" hx-swap-oob="innerHTML">{rows_html}</div>')
    parts.append(render_row_count_oob(presenter.row_count()))

    return HttpResponse("".join(parts), status=status)


def render_deleted_row_response(presenter: TaskListPresenter) -> HttpResponse:
    """削除された行を空で置き換え、行数をOOBで更新する。

    最後の行が削除された場合は、空表示を戻すために一覧もOOBで返す。
    """
    return render_rows_response(
        presenter,
        include_main_list=False,
        include_list_oob=presenter.row_count() == 0,
    )


# =============================================================================
# 単一行レスポンス
# =============================================================================


def render_row_html(row: TaskListRow, *, sort_mode: SortMode, message: str | None = None) -> str:
    """一覧の1行分のHTMLを生成する。

    Args:
        row: 表示対象の行。
        sort_mode: 現在の並び順。
        message: 行に添えるエラーメッセージ。

    Returns:
        レンダリングされたHTML文字列。
    """
    return render_to_string(
        "tasklists/_task_list_row.html",
        {
            "row": row,
            "current_sort": sort_mode.value,
            "sort_querystring": build_sort_querystring(sort_mode),
            "message": message,
        },
    )


def render_title_dialog_html(
    prompt: TitlePrompt,
    form: TaskListTitleForm,
    *,
    sort_mode: SortMode,
    message: str | None = None,
) -> str:
    """タイトル入力ダイアログのHTMLを生成する。

    Args:
        prompt: ダイアログの内容。
        form: タイトル入力フォーム。
        sort_mode: 現在の並び順。
        message: エラーメッセージ。

    Returns:
        レンダリングされたHTML文字列。
    """
    return render_to_string(
        "tasklists/_title_dialog.html",
        {
            "prompt": prompt,
            "form": form,
            "message": message,
            "current_sort": sort_mode.value,
            "sort_querystring": build_sort_querystring(sort_mode),
        },
    )


# =============================================================================
# タスク詳細レスポンス
# =============================================================================


def render_task_sections_response(
    task_list: TaskList,
    *,
    form_error_message: str | None = None,
    status: HTTPStatus = HTTPStatus.OK,
) -> HttpResponse:
    """タスク詳細の「未完了」「完了済み」セクションを返す。

    Args:
        task_list: 表示対象のTaskList。
        form_error_message: フォームエラーの表示メッセージ。
        status: 返却するHTTPステータス。

    Returns:
        レンダリングされたHTMLを含むHttpResponse。
    """
    sections_html = render_to_string(
        "tasklists/_task_sections.html",
        {
            "task_list": task_list,
            "current_tasks": queries.get_current_tasks(task_list),
            "completed_tasks": queries.get_completed_tasks(task_list),
        },
    )
    return HttpResponse(sections_html + render_form_errors_oob(form_error_message), status=status)


def render_task_edit_form_html(task: Task, form: TaskForm, *, message: str | None = None) -> str:
    """タスクのインライン編集フォームを生成する。"""
    return render_to_string(
        "tasklists/_task_edit_form.html",
        {"task": task, "form": form, "message": message},
    )
