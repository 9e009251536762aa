"""タスクリストアプリケーションの設定。

Djangoアプリケーションの設定クラスを定義する。
"""

from django.apps import AppConfig


class TaskListsConfig(AppConfig):
    """タスクリストアプリケーションの設定クラス。

    Attributes:
        name: アプリケーション名。
        default_auto_field: 自動生成される主キーの型。
    """

    name = "tasklists"
    default_auto_field = "django.db.models.BigAutoField"
