import logging
from http import HTTPStatus

from django.http import HttpRequest, HttpResponse
from django.shortcuts import get_object_or_404, render

from shared.enums import RequestMethod

from .. import htmx_responses
from ..forms import TaskListTitleForm
from ..models import TaskList
from ..params import SortMode, build_sort_querystring
from .helpers import get_presenter

logger = logging.getLogger(__name__)


def task_list_index(request: HttpRequest) -> HttpResponse:
    """タスクリスト一覧のメインページを表示する。

    Args:
        request: HTTPリクエストオブジェクト。

    Returns:
        レンダリングされた一覧ページのHttpResponse。
    """
    presenter = get_presenter(request)

    return render(
        request,
        "tasklists/task_list_index.html",
        {
            "rows": presenter.rows(),
            "row_count": presenter.row_count(),
            "current_sort": presenter.sort_mode.value,
            "sort_modes": list(SortMode),
            "sort_querystring": build_sort_querystring(presenter.sort_mode),
        },
    )


def task_list_rows(request: HttpRequest) -> HttpResponse:
    """HTMX用の一覧部分テンプレートを返す。

    並び順の切り替え時に、一覧全体を再描画するために使用される。

    Args:
        request: HTTPリクエストオブジェクト。

    Returns:
        一覧部分と行数（OOB）のHttpResponse。
        メソッド不正時: 405 Method Not AllowedのHttpResponse。
    """
    if request.method != RequestMethod.GET:
        return HttpResponse(status=HTTPStatus.METHOD_NOT_ALLOWED)

    presenter = get_presenter(request)
    logger.debug("一覧を再描画します: sort=%s, rows=%d", presenter.sort_mode.value, presenter.row_count())
    return htmx_responses.render_rows_response(presenter)


def task_list_row(request: HttpRequest, task_list_id: int) -> HttpResponse:
    """一覧の1行分のパーシャルを返す。

    編集ダイアログのキャンセル等で、行の表示へ戻す用途。

    Args:
        request: HTTPリクエストオブジェクト。
        task_list_id: 対象のタスクリストID。

    Returns:
        レンダリングされた行HTMLを含むHttpResponse。
        メソッド不正時: 405 Method Not AllowedのHttpResponse。
    """
    if request.method != RequestMethod.GET:
        return HttpResponse(status=HTTPStatus.METHOD_NOT_ALLOWED)

    presenter = get_presenter(request)
    task_list = get_object_or_404(TaskList, id=task_list_id)
    row = presenter.build_row(task_list)
    return HttpResponse(htmx_responses.render_row_html(row, sort_mode=presenter.sort_mode))


def new_task_list_dialog(request: HttpRequest) -> HttpResponse:
    """新規作成ダイアログ（空のタイトル入力フォーム）を返す。

    Args:
        request: HTTPリクエストオブジェクト。

    Returns:
        ダイアログHTMLを含むHttpResponse。
        メソッド不正時: 405 Method Not AllowedのHttpResponse。
    """
    if request.method != RequestMethod.GET:
        return HttpResponse(status=HTTPStatus.METHOD_NOT_ALLOWED)

    presenter = get_presenter(request)
    html = htmx_responses.render_title_dialog_html(
        presenter.new_list_prompt(),
        TaskListTitleForm(),
        sort_mode=presenter.sort_mode,
    )
    return HttpResponse(html)
