import logging
from http import HTTPStatus

from django.http import HttpRequest, HttpResponse

from shared.enums import RequestMethod

from .. import htmx_responses
from ..forms import TaskListTitleForm
from .helpers import failure_status, get_presenter

logger = logging.getLogger(__name__)


def create_task_list(request: HttpRequest) -> HttpResponse:
    """新しいタスクリストを作成する。

    POSTリクエストで送信されたタイトルからタスクリストを作成し、
    ダイアログを閉じて、現在の並び順で再描画した一覧をOOBで返す。

    Args:
        request: HTTPリクエストオブジェクト。

    Returns:
        作成成功時: 空のダイアログと一覧・行数（OOB）のHttpResponse。
        バリデーション失敗時: エラー付きダイアログと400 Bad Request。
        ストレージ障害時: エラー付きダイアログと503 Service Unavailable。
    """
    if request.method != RequestMethod.POST:
        return HttpResponse(status=HTTPStatus.BAD_REQUEST)

    presenter = get_presenter(request)
    prompt = presenter.new_list_prompt()

    # フォームバリデーション
    form = TaskListTitleForm(request.POST)
    if not form.is_valid():
        logger.warning("タスクリストの作成に失敗しました: errors=%s", form.errors.as_json())
        message = form.errors["title"][0] if "title" in form.errors else "Please check your input."
        html = htmx_responses.render_title_dialog_html(prompt, form, sort_mode=presenter.sort_mode, message=message)
        return HttpResponse(html, status=HTTPStatus.BAD_REQUEST)

    # 作成実行
    result = presenter.create_list(form.cleaned_data["title"])

    if not result.success or result.change is None:
        logger.warning("タスクリストを作成できませんでした: error=%s", result.error)
        html = htmx_responses.render_title_dialog_html(
            prompt,
            form,
            sort_mode=presenter.sort_mode,
            message=result.error,
        )
        return HttpResponse(html, status=failure_status(result))

    logger.info(
        "タスクリストを作成しました: id=%s, title='%s', row=%s, sort=%s",
        result.change.task_list_id,
        result.task_list.title if result.task_list else None,
        result.change.index,
        presenter.sort_mode.value,
    )
    return htmx_responses.render_rows_response(
        presenter,
        inserted_index=result.change.index,
        include_main_list=False,
        include_list_oob=True,
    )
