"""タスクリストアプリケーションのURL設定。

タスクリストアプリケーションの各エンドポイントをビューにマッピングする。

URLパターン:
    - '': タスクリスト一覧のメインページ
    - 'rows/': HTMX用の一覧部分更新（並び替え）
    - 'new/': 新規作成ダイアログ
    - 'create/': 新規タスクリスト作成
    - 'lists/<id>/': タスク詳細ページ
    - 'lists/<id>/row/': 一覧の1行（編集キャンセル用）
    - 'lists/<id>/edit/': タイトル編集
    - 'lists/<id>/toggle/': 配下タスクの一括完了/未完了
    - 'lists/<id>/delete/': タスクリスト削除
    - 'lists/<id>/tasks/': タスクのセクション部分
    - 'lists/<id>/tasks/create/': タスク追加
    - 'tasks/<id>/toggle/': タスクの完了状態切り替え
    - 'tasks/<id>/edit/': タスク編集
    - 'tasks/<id>/delete/': タスク削除
"""

from django.urls import path

from . import views

app_name = "tasklists"

urlpatterns = [
    path("", views.task_list_index, name="task_list_index"),
    path("rows/", views.task_list_rows, name="task_list_rows"),
    path("new/", views.new_task_list_dialog, name="new_task_list_dialog"),
    path("create/", views.create_task_list, name="create_task_list"),
    path("lists/<int:task_list_id>/", views.task_list_detail, name="task_list_detail"),
    path("lists/<int:task_list_id>/row/", views.task_list_row, name="task_list_row"),
    path("lists/<int:task_list_id>/edit/", views.edit_task_list, name="edit_task_list"),
    path("lists/<int:task_list_id>/toggle/", views.toggle_task_list, name="toggle_task_list"),
    path("lists/<int:task_list_id>/delete/", views.delete_task_list, name="delete_task_list"),
    path("lists/<int:task_list_id>/tasks/", views.task_sections, name="task_sections"),
    path("lists/<int:task_list_id>/tasks/create/", views.create_task, name="create_task"),
    path("tasks/<int:task_id>/toggle/", views.toggle_task, name="toggle_task"),
    path("tasks/<int:task_id>/edit/", views.edit_task, name="edit_task"),
    path("tasks/<int:task_id>/delete/", views.delete_task, name="delete_task"),
]
