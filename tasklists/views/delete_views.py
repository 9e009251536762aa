import logging
from http import HTTPStatus

from django.http import HttpRequest, HttpResponse
from django.shortcuts import get_object_or_404

from shared.enums import RequestMethod

from .. import htmx_responses
from ..models import TaskList
from ..presenter import RowAction, RowIntent
from .helpers import failure_status, get_presenter

logger = logging.getLogger(__name__)


def delete_task_list(request: HttpRequest, task_list_id: int) -> HttpResponse:
    """タスクリストを削除する。

    確認なしで即座に削除し、対象の行を取り除く（空のレスポンスで置き換える）。
    所有するタスクも合わせて削除される。

    Args:
        request: HTTPリクエストオブジェクト。
        task_list_id: 削除するタスクリストのID。

    Returns:
        削除成功時: 空の行と行数（OOB）のHttpResponse。
        ストレージ障害時: 削除されていない行とエラー、503 Service Unavailable。
        メソッド不正時: 405 Method Not AllowedのHttpResponse。

    Raises:
        Http404: 指定されたIDのタスクリストが存在しない場合。
    """
    if request.method != RequestMethod.DELETE:
        return HttpResponse(status=HTTPStatus.METHOD_NOT_ALLOWED)

    presenter = get_presenter(request)
    task_list = get_object_or_404(TaskList, id=task_list_id)
    title = task_list.title
    result = presenter.dispatch(RowIntent(task_list_id=task_list_id, action=RowAction.DELETE))

    if not result.success:
        logger.error("タスクリストの削除に失敗しました: id=%d, error=%s", task_list_id, result.error)
        # 削除されていない行をそのまま描き直し、エラーを添える
        html = htmx_responses.render_row_html(
            presenter.build_row(task_list),
            sort_mode=presenter.sort_mode,
            message=result.error,
        )
        return HttpResponse(html, status=failure_status(result))

    logger.info(
        "タスクリストを削除しました: id=%d, title='%s', row=%s",
        task_list_id,
        title,
        result.change.index if result.change else None,
    )
    return htmx_responses.render_deleted_row_response(presenter)
