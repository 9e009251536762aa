#!/usr/bin/env python
"""Django管理コマンドのエントリポイント。"""

import os
import sys


def main() -> None:
    """管理コマンドを実行する。"""
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "django_tasklists.settings")
    from django.core.management import execute_from_command_line

    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
