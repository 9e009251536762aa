"""タスクリストアプリケーションの管理サイト設定。

Django管理サイトへのモデル登録を行う。
"""

from django.contrib import admin

from .models import Task, TaskList


class TaskInline(admin.TabularInline):
    """タスクリスト編集画面に表示するタスクのインライン。"""

    model = Task
    extra = 0


@admin.register(TaskList)
class TaskListAdmin(admin.ModelAdmin):
    list_display = ("title", "date", "is_all_complete")
    inlines = [TaskInline]


admin.site.register(Task)
