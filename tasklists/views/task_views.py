"""タスク詳細画面のビュー。

一覧で選択されたタスクリストのタスクを「未完了」「完了済み」に分けて表示し、
タスクの追加・完了切り替え・編集・削除を行う。
"""

import logging
from http import HTTPStatus

from django.http import HttpRequest, HttpResponse
from django.shortcuts import get_object_or_404, render

from shared.enums import RequestMethod

from .. import htmx_responses, queries, services
from ..forms import TaskForm
from ..models import Task, TaskList
from .helpers import error_status, get_sort_mode

logger = logging.getLogger(__name__)


def task_list_detail(request: HttpRequest, task_list_id: int) -> HttpResponse:
    """タスクリストの詳細ページを表示する。

    Args:
        request: HTTPリクエストオブジェクト。
        task_list_id: 表示するタスクリストのID。

    Returns:
        レンダリングされた詳細ページのHttpResponse。

    Raises:
        Http404: 指定されたIDのタスクリストが存在しない場合。
    """
    task_list = get_object_or_404(TaskList, id=task_list_id)
    return render(
        request,
        "tasklists/task_list_detail.html",
        {
            "task_list": task_list,
            "current_tasks": queries.get_current_tasks(task_list),
            "completed_tasks": queries.get_completed_tasks(task_list),
            "form": TaskForm(),
            "current_sort": get_sort_mode(request).value,
        },
    )


def task_sections(request: HttpRequest, task_list_id: int) -> HttpResponse:
    """タスクのセクション部分を返す。インライン編集のキャンセルに使う。"""
    if request.method != RequestMethod.GET:
        return HttpResponse(status=HTTPStatus.METHOD_NOT_ALLOWED)

    task_list = get_object_or_404(TaskList, id=task_list_id)
    return htmx_responses.render_task_sections_response(task_list)


def create_task(request: HttpRequest, task_list_id: int) -> HttpResponse:
    """タスクリストにタスクを追加する。

    Args:
        request: HTTPリクエストオブジェクト。
        task_list_id: 追加先のタスクリストID。

    Returns:
        作成成功時: 更新されたセクションのHttpResponse。
        バリデーション失敗時: 400 Bad Request（エラーはOOBで表示）。
        ストレージ障害時: 503 Service Unavailable。
    """
    if request.method != RequestMethod.POST:
        return HttpResponse(status=HTTPStatus.BAD_REQUEST)

    task_list = get_object_or_404(TaskList, id=task_list_id)

    form = TaskForm(request.POST)
    if not form.is_valid():
        logger.warning(
            "タスクの作成に失敗しました: task_list_id=%d, errors=%s",
            task_list_id,
            form.errors.as_json(),
        )
        message = form.errors["title"][0] if "title" in form.errors else "Please check your input."
        return htmx_responses.render_task_sections_response(
            task_list,
            form_error_message=message,
            status=HTTPStatus.BAD_REQUEST,
        )

    result = services.add_task(task_list, form.cleaned_data["title"], form.cleaned_data["note"])
    if not result.success or result.task is None:
        return htmx_responses.render_task_sections_response(
            task_list,
            form_error_message=result.error,
            status=error_status(result.error),
        )

    logger.info(
        "タスクを作成しました: task_list_id=%d, id=%d, title='%s'",
        task_list_id,
        result.task.pk,
        result.task.title,
    )
    return htmx_responses.render_task_sections_response(task_list)


def toggle_task(request: HttpRequest, task_id: int) -> HttpResponse:
    """タスクの完了状態を反転させる。

    Args:
        request: HTTPリクエストオブジェクト。
        task_id: 対象のタスクID。

    Returns:
        更新成功時: 更新されたセクションのHttpResponse。
        メソッド不正時: 405 Method Not AllowedのHttpResponse。
    """
    if request.method != RequestMethod.POST:
        return HttpResponse(status=HTTPStatus.METHOD_NOT_ALLOWED)

    task = get_object_or_404(Task, id=task_id)
    result = services.toggle_task(task)
    if not result.success:
        return htmx_responses.render_task_sections_response(
            task.task_list,
            form_error_message=result.error,
            status=error_status(result.error),
        )

    logger.info(
        "タスクの完了状態を更新しました: id=%d, is_complete=%s -> %s",
        task_id,
        result.old_status,
        task.is_complete,
    )
    return htmx_responses.render_task_sections_response(task.task_list)


def edit_task(request: HttpRequest, task_id: int) -> HttpResponse:
    """タスクのタイトルとメモを編集する。

    GET: インライン編集フォームを返す。
    POST: 更新し、セクション全体を返す。

    Args:
        request: HTTPリクエストオブジェクト。
        task_id: 対象のタスクID。

    Returns:
        GET: 編集フォームのHttpResponse。
        POST成功時: 更新されたセクションのHttpResponse。
        バリデーション失敗時: エラー付き編集フォームと400 Bad Request。
        メソッド不正時: 405 Method Not AllowedのHttpResponse。
    """
    if request.method not in (RequestMethod.GET, RequestMethod.POST):
        return HttpResponse(status=HTTPStatus.METHOD_NOT_ALLOWED)

    task = get_object_or_404(Task, id=task_id)

    if request.method == RequestMethod.GET:
        return HttpResponse(htmx_responses.render_task_edit_form_html(task, TaskForm(instance=task)))

    form = TaskForm(request.POST)
    if not form.is_valid():
        logger.warning("タスクの編集に失敗しました: id=%d, errors=%s", task_id, form.errors.as_json())
        message = form.errors["title"][0] if "title" in form.errors else "Please check your input."
        html = htmx_responses.render_task_edit_form_html(task, form, message=message)
        return HttpResponse(html, status=HTTPStatus.BAD_REQUEST)

    result = services.edit_task(task, form.cleaned_data["title"], form.cleaned_data["note"])
    if not result.success:
        html = htmx_responses.render_task_edit_form_html(task, form, message=result.error)
        return HttpResponse(html, status=error_status(result.error))

    if result.changed:
        logger.info("タスクを編集しました: id=%d, title='%s'", task_id, task.title)
    return htmx_responses.render_task_sections_response(task.task_list)


def delete_task(request: HttpRequest, task_id: int) -> HttpResponse:
    """タスクを削除する。

    Args:
        request: HTTPリクエストオブジェクト。
        task_id: 削除するタスクID。

    Returns:
        削除成功時: 更新されたセクションのHttpResponse。
        メソッド不正時: 405 Method Not AllowedのHttpResponse。
    """
    if request.method != RequestMethod.DELETE:
        return HttpResponse(status=HTTPStatus.METHOD_NOT_ALLOWED)

    task = get_object_or_404(Task, id=task_id)
    task_list = task.task_list
    result = services.delete_task(task)
    if not result.success:
        return htmx_responses.render_task_sections_response(
            task_list,
            form_error_message=result.error,
            status=error_status(result.error),
        )

    logger.info(
        "タスクを削除しました: task_list_id=%d, id=%d, title='%s'",
        task_list.pk,
        task_id,
        result.title,
    )
    return htmx_responses.render_task_sections_response(task_list)
