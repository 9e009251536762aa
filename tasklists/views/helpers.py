"""タスクリストビュー用のヘルパー関数。

リクエストからの並び順の取得など、ビュー本体から切り出した共通処理を提供する。
"""

from http import HTTPStatus

from django.conf import settings
from django.http import HttpRequest

from ..params import STORAGE_UNAVAILABLE_MESSAGE, SortMode, normalize_sort_mode
from ..presenter import IntentResult, TaskListPresenter


def get_default_sort_mode() -> SortMode:
    """設定（TASKLISTS_DEFAULT_SORT）からデフォルトの並び順を取得する。"""
    raw_default = getattr(settings, "TASKLISTS_DEFAULT_SORT", SortMode.DATE.value)
    return normalize_sort_mode(raw_default)


def get_sort_mode(request: HttpRequest) -> SortMode:
    """リクエストのクエリパラメータから並び順を取得する。

    Args:
        request: HTTPリクエスト。

    Returns:
        正規化された並び順。未指定・不正値は設定のデフォルト。
    """
    return normalize_sort_mode(request.GET.get("sort"), default=get_default_sort_mode())


def get_presenter(request: HttpRequest) -> TaskListPresenter:
    """リクエストの並び順でプレゼンターを生成する。"""
    return TaskListPresenter(sort_mode=get_sort_mode(request))


def error_status(error: str | None) -> HTTPStatus:
    """エラーメッセージに対応するHTTPステータスを返す。

    Args:
        error: 失敗結果のエラーメッセージ。

    Returns:
        ストレージ障害なら503、それ以外（入力不正）は400。
    """
    if error == STORAGE_UNAVAILABLE_MESSAGE:
        return HTTPStatus.SERVICE_UNAVAILABLE
    return HTTPStatus.BAD_REQUEST


def failure_status(result: IntentResult) -> HTTPStatus:
    """失敗したインテントに対応するHTTPステータスを返す。"""
    return error_status(result.error)
