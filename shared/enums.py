"""アプリケーション全体で使用される列挙型を定義するモジュール。

ビューでのメソッド判定に使う HTTP リクエストメソッドを含む。
"""

from enum import StrEnum


class RequestMethod(StrEnum):
    """ビューが受け付けるHTTPリクエストメソッド。

    Attributes:
        GET (str): 画面・パーシャルの取得。
        POST (str): 作成・更新。
        DELETE (str): 削除。
    """

    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"
