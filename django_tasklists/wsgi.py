"""django_tasklistsプロジェクトのWSGI設定。"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "django_tasklists.settings")

application = get_wsgi_application()
