"""デモデータを投入する管理コマンド。

使用方法:
    python manage.py seed_tasklists [--force]
"""

from django.core.management.base import BaseCommand

from tasklists.seed import seed_task_lists


class Command(BaseCommand):
    help = "Populate demo task lists when the database holds none."

    def add_arguments(self, parser):
        parser.add_argument(
            "--force",
            action="store_true",
            help="Create the demo task lists even if task lists already exist.",
        )

    def handle(self, *args, **options):
        result = seed_task_lists(force=options["force"])
        if not result.created:
            self.stdout.write("Task lists already exist; nothing to seed.")
            return
        self.stdout.write(
            self.style.SUCCESS(
                f"Created {result.task_list_count} task lists with {result.task_count} tasks."
            )
        )
