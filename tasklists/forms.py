"""タスクリストアプリケーションのフォーム定義。

タスクリストのタイトル入力ダイアログと、タスクの作成・編集に使用するフォームを提供する。
"""

from django import forms

from .models import Task, TaskList
from .params import EMPTY_TITLE_MESSAGE, TITLE_TOO_LONG_MESSAGE


class TaskListTitleForm(forms.ModelForm):
    """タスクリストのタイトル入力フォーム。

    新規作成・編集の両ダイアログで使用する。編集時は instance を渡すと
    現在のタイトルが初期値になる。
    """

    class Meta:
        model = TaskList
        fields = ["title"]
        widgets = {
            "title": forms.TextInput(
                attrs={
                    "class": "form-control",
                    "placeholder": "List Name",
                    "required": True,
                    "autofocus": True,
                }
            )
        }
        labels = {
            "title": "",
        }
        error_messages = {
            "title": {
                "required": EMPTY_TITLE_MESSAGE,
                "max_length": TITLE_TOO_LONG_MESSAGE,
            }
        }


class TaskForm(forms.ModelForm):
    """タスクの作成・編集フォーム。"""

    class Meta:
        model = Task
        fields = ["title", "note"]
        widgets = {
            "title": forms.TextInput(
                attrs={
                    "class": "form-control",
                    "placeholder": "New Task",
                    "required": True,
                }
            ),
            "note": forms.TextInput(
                attrs={
                    "class": "form-control",
                    "placeholder": "Note",
                }
            ),
        }
        labels = {
            "title": "",
            "note": "",
        }
        error_messages = {
            "title": {
                "required": EMPTY_TITLE_MESSAGE,
                "max_length": TITLE_TOO_LONG_MESSAGE,
            }
        }
