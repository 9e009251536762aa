"""タスクリスト一覧のパラメータ解析・正規化。

HTTPリクエストのクエリパラメータや入力値を型安全な値に変換する。
Django非依存（標準ライブラリのみ）。
"""

from enum import StrEnum
from typing import Final
from urllib.parse import urlencode

# =============================================================================
# 定数
# =============================================================================

TITLE_MAX_LENGTH: Final[int] = 255
NOTE_MAX_LENGTH: Final[int] = 1000

EMPTY_TITLE_MESSAGE: Final[str] = "Please enter a title."
TITLE_TOO_LONG_MESSAGE: Final[str] = f"Title must be at most {TITLE_MAX_LENGTH} characters."
NOTE_TOO_LONG_MESSAGE: Final[str] = f"Note must be at most {NOTE_MAX_LENGTH} characters."
STORAGE_UNAVAILABLE_MESSAGE: Final[str] = "Storage is unavailable. Please try again later."


# =============================================================================
# Enum
# =============================================================================


class SortMode(StrEnum):
    """タスクリスト一覧の並び順。"""

    DATE = "date"
    ALPHABETICAL = "alphabetical"


DEFAULT_SORT_MODE: Final[SortMode] = SortMode.DATE


# =============================================================================
# パラメータ正規化
# =============================================================================


def normalize_sort_mode(raw_sort: str | SortMode | None, *, default: SortMode = DEFAULT_SORT_MODE) -> SortMode:
    """並び順を正規化する。

    Args:
        raw_sort: クエリパラメータ等で受け取った並び順。
        default: 未指定・不正値の場合に使う並び順。

    Returns:
        正規化された並び順。未指定・不正値は default。
    """
    if raw_sort is None:
        return default
    if isinstance(raw_sort, SortMode):
        return raw_sort

    sort_mode = str(raw_sort).strip().lower()
    if not sort_mode:
        return default

    try:
        return SortMode(sort_mode)
    except ValueError:
        return default


def parse_title(raw_title: str | None) -> str:
    """タイトル入力を正規化する。

    Args:
        raw_title: フォーム等で受け取ったタイトル。

    Returns:
        前後空白を除去したタイトル。未指定は空文字。
    """
    if raw_title is None:
        return ""
    return raw_title.strip()


def validate_title(title: str) -> str | None:
    """タイトルを検証する。

    Args:
        title: 正規化済みのタイトル。

    Returns:
        エラーメッセージ。問題なければNone。
    """
    if not title:
        return EMPTY_TITLE_MESSAGE
    if len(title) > TITLE_MAX_LENGTH:
        return TITLE_TOO_LONG_MESSAGE
    return None


def build_sort_querystring(sort_mode: SortMode) -> str:
    """並び順を保持するためのクエリ文字列を生成する。

    Args:
        sort_mode: 並び順。

    Note:
        デフォルト値は設定（TASKLISTS_DEFAULT_SORT）で変わり得るため、常に明示する。

    Returns:
        URLエンコード済みのクエリ文字列。
    """
    return urlencode({"sort": sort_mode.value})
