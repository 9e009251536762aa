"""フォームのテスト。"""

from django.test import TestCase

from ..forms import TaskForm, TaskListTitleForm
from ..models import TaskList
from ..params import EMPTY_TITLE_MESSAGE, TITLE_MAX_LENGTH, TITLE_TOO_LONG_MESSAGE


class TaskListTitleFormTests(TestCase):
    """TaskListTitleFormのテストケース。"""

    def test_valid_title(self):
        form = TaskListTitleForm(data={"title": "Groceries"})
        self.assertTrue(form.is_valid())
        self.assertEqual(form.cleaned_data["title"], "Groceries")

    def test_title_is_stripped(self):
        """前後の空白が除去されることを確認する。"""
        form = TaskListTitleForm(data={"title": "  Groceries  "})
        self.assertTrue(form.is_valid())
        self.assertEqual(form.cleaned_data["title"], "Groceries")

    def test_empty_title_is_invalid(self):
        """空・空白のみのタイトルはエラーになることを確認する。"""
        for title in ("", "   "):
            with self.subTest(title=title):
                form = TaskListTitleForm(data={"title": title})
                self.assertFalse(form.is_valid())
                self.assertEqual(form.errors["title"], [EMPTY_TITLE_MESSAGE])

    def test_too_long_title_is_invalid(self):
        form = TaskListTitleForm(data={"title": "a" * (TITLE_MAX_LENGTH + 1)})
        self.assertFalse(form.is_valid())
        self.assertEqual(form.errors["title"], [TITLE_TOO_LONG_MESSAGE])

    def test_instance_title_is_initial_value(self):
        """編集時は現在のタイトルが初期値になることを確認する。"""
        task_list = TaskList.objects.create(title="Groceries")
        form = TaskListTitleForm(instance=task_list)
        self.assertIn('value="Groceries"', str(form["title"]))

    def test_widget_attributes(self):
        rendered = str(TaskListTitleForm()["title"])
        self.assertIn('placeholder="List Name"', rendered)
        self.assertIn('class="form-control"', rendered)


class TaskFormTests(TestCase):
    """TaskFormのテストケース。"""

    def test_note_is_optional(self):
        form = TaskForm(data={"title": "Milk", "note": ""})
        self.assertTrue(form.is_valid())
        self.assertEqual(form.cleaned_data["note"], "")

    def test_title_required(self):
        form = TaskForm(data={"title": "", "note": "2 bottles"})
        self.assertFalse(form.is_valid())
        self.assertEqual(form.errors["title"], [EMPTY_TITLE_MESSAGE])

    def test_note_length_limit(self):
        """メモの最大長を超えるとエラーになることを確認する。"""
        form = TaskForm(data={"title": "Milk", "note": "a" * 1001})
        self.assertFalse(form.is_valid())
        self.assertIn("note", form.errors)
