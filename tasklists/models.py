"""タスクリストアプリケーションのデータモデル定義。

タスクリスト（TaskList）と、それに所属するタスク（Task）を提供する。
"""

from django.db import models
from django.utils import timezone


class TaskList(models.Model):
    """名前と作成日時を持つタスクのまとまり。

    タスクリストは複数のTaskを所有し、削除時は所有するタスクも削除される。
    「全タスク完了」状態は保存せず、常にタスクから導出する。

    Attributes:
        id: 自動生成されるプライマリキー。挿入順の基準にもなる。
        title: リストのタイトル。最大255文字。
        date: 作成日時。作成時に一度だけ設定される。
    """

    title = models.CharField(max_length=255)
    date = models.DateTimeField(default=timezone.now, editable=False, db_index=True)

    def __str__(self) -> str:
        """タスクリストの文字列表現を返す。

        Returns:
            タスクリストのタイトル。
        """
        return self.title

    @property
    def is_all_complete(self) -> bool:
        """タスクが1件以上あり、未完了タスクが存在しないかを返す。"""
        return self.tasks.exists() and not self.tasks.filter(is_complete=False).exists()


class Task(models.Model):
    """タスクリストに所属する単一のタスク。

    Attributes:
        id: 自動生成されるプライマリキー。
        task_list: 所有するタスクリスト。
        title: タスクのタイトル。最大255文字。
        note: 任意のメモ。最大1000文字。
        date: 作成日時。作成時に一度だけ設定される。
        is_complete: 完了状態。デフォルトはFalse。
    """

    task_list = models.ForeignKey(
        TaskList,
        on_delete=models.CASCADE,
        related_name="tasks",
    )
    title = models.CharField(max_length=255)
    note = models.TextField(max_length=1000, blank=True, default="")
    date = models.DateTimeField(default=timezone.now, editable=False)
    is_complete = models.BooleanField(default=False)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return self.title
