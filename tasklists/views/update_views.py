import logging
from http import HTTPStatus

from django.http import HttpRequest, HttpResponse
from django.shortcuts import get_object_or_404

from shared.enums import RequestMethod

from .. import htmx_responses
from ..forms import TaskListTitleForm
from ..models import TaskList
from ..presenter import ChangeKind, RowAction, RowIntent
from .helpers import failure_status, get_presenter

logger = logging.getLogger(__name__)


def edit_task_list(request: HttpRequest, task_list_id: int) -> HttpResponse:
    """タスクリストのタイトルを編集する。

    GET: 現在のタイトルを初期値にした編集ダイアログを行の位置に返す。
    POST: タイトルを更新し、更新後の行を返す。並び順が変わった場合は一覧全体をOOBで返す。

    Args:
        request: HTTPリクエストオブジェクト。
        task_list_id: 編集するタスクリストのID。

    Returns:
        GET: 編集ダイアログのHttpResponse。
        POST成功時: 更新された行、または一覧（OOB）のHttpResponse。
        バリデーション失敗時: エラー付きダイアログと400 Bad Request。
        ストレージ障害時: エラー付きダイアログと503 Service Unavailable。
        メソッド不正時: 405 Method Not AllowedのHttpResponse。

    Raises:
        Http404: 指定されたIDのタスクリストが存在しない場合。
    """
    if request.method not in (RequestMethod.GET, RequestMethod.POST):
        return HttpResponse(status=HTTPStatus.METHOD_NOT_ALLOWED)

    presenter = get_presenter(request)
    task_list = get_object_or_404(TaskList, id=task_list_id)
    prompt = presenter.edit_list_prompt(task_list)

    if request.method == RequestMethod.GET:
        form = TaskListTitleForm(instance=task_list)
        return HttpResponse(htmx_responses.render_title_dialog_html(prompt, form, sort_mode=presenter.sort_mode))

    # インスタンスを渡すと検証時に書き換わるため、入力値だけで検証する
    form = TaskListTitleForm(request.POST)
    if not form.is_valid():
        logger.warning(
            "タスクリストの編集に失敗しました: id=%d, errors=%s",
            task_list_id,
            form.errors.as_json(),
        )
        message = form.errors["title"][0] if "title" in form.errors else "Please check your input."
        html = htmx_responses.render_title_dialog_html(prompt, form, sort_mode=presenter.sort_mode, message=message)
        return HttpResponse(html, status=HTTPStatus.BAD_REQUEST)

    old_title = task_list.title
    result = presenter.dispatch(
        RowIntent(task_list_id=task_list_id, action=RowAction.EDIT, title=form.cleaned_data["title"])
    )

    if not result.success or result.change is None:
        logger.warning("タスクリストを編集できませんでした: id=%d, error=%s", task_list_id, result.error)
        html = htmx_responses.render_title_dialog_html(
            prompt,
            form,
            sort_mode=presenter.sort_mode,
            message=result.error,
        )
        return HttpResponse(html, status=failure_status(result))

    logger.info(
        "タスクリストを編集しました: id=%d, title='%s' -> '%s'",
        task_list_id,
        old_title,
        result.task_list.title if result.task_list else None,
    )

    if result.change.kind == ChangeKind.RELOADED:
        return htmx_responses.render_rows_response(presenter, include_main_list=False, include_list_oob=True)

    row = presenter.get_row(task_list_id)
    if row is None:
        return htmx_responses.render_rows_response(presenter, include_main_list=False, include_list_oob=True)
    return HttpResponse(htmx_responses.render_row_html(row, sort_mode=presenter.sort_mode))


def toggle_task_list(request: HttpRequest, task_list_id: int) -> HttpResponse:
    """タスクリスト配下のタスクを一括で完了/未完了に切り替える。

    未完了タスクがあれば全て完了（Done）に、なければ全て未完了（Undone）に戻し、
    対象の行だけを再描画して返す。

    Args:
        request: HTTPリクエストオブジェクト。
        task_list_id: 対象のタスクリストID。

    Returns:
        更新成功時: 更新された行のHTMLを含むHttpResponse。
        ストレージ障害時: 変更前の行とエラー、503 Service Unavailable。
        メソッド不正時: 405 Method Not AllowedのHttpResponse。

    Raises:
        Http404: 指定されたIDのタスクリストが存在しない場合。
    """
    if request.method != RequestMethod.POST:
        return HttpResponse(status=HTTPStatus.METHOD_NOT_ALLOWED)

    presenter = get_presenter(request)
    task_list = get_object_or_404(TaskList, id=task_list_id)
    result = presenter.dispatch(RowIntent(task_list_id=task_list_id, action=RowAction.TOGGLE))

    if not result.success:
        logger.error("タスクの一括更新に失敗しました: task_list_id=%d, error=%s", task_list_id, result.error)
        # 変更前の行をそのまま描き直し、エラーを添える
        html = htmx_responses.render_row_html(
            presenter.build_row(task_list),
            sort_mode=presenter.sort_mode,
            message=result.error,
        )
        return HttpResponse(html, status=failure_status(result))

    row = presenter.get_row(task_list_id)
    if row is None:
        logger.error("更新後の行が見つかりません: task_list_id=%d", task_list_id)
        return HttpResponse(status=HTTPStatus.INTERNAL_SERVER_ERROR)

    logger.info(
        "タスクを一括更新しました: task_list_id=%d, row=%s, summary='%s', checkmark=%s",
        task_list_id,
        result.change.index if result.change else None,
        row.summary.secondary_text,
        row.summary.show_checkmark,
    )
    return HttpResponse(htmx_responses.render_row_html(row, sort_mode=presenter.sort_mode))
