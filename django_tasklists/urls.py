"""django_tasklistsプロジェクトのURL設定。

プロジェクトレベルのURLルーティングを定義する。

URLパターン:
    - 'admin/': Django管理サイト
    - '': タスクリストアプリケーション
"""

import django.contrib.admin
import django.urls

urlpatterns = [
    django.urls.path("admin/", django.contrib.admin.site.urls),
    django.urls.path("", django.urls.include("tasklists.urls")),
]
