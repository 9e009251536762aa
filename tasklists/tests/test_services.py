"""サービス層のテスト。"""

from unittest.mock import patch

from django.db import DatabaseError, connection
from django.test import TestCase
from django.test.utils import CaptureQueriesContext

from .. import services
from ..models import Task, TaskList
from ..params import EMPTY_TITLE_MESSAGE, NOTE_TOO_LONG_MESSAGE, STORAGE_UNAVAILABLE_MESSAGE


class SaveTaskListTests(TestCase):
    """save_task_list関数のテストケース。"""

    def test_save_creates_task_list(self):
        """タスクリストが作成されることを確認する。"""
        result = services.save_task_list("Groceries")
        self.assertTrue(result.success)
        assert result.task_list is not None
        self.assertEqual(result.task_list.title, "Groceries")
        self.assertEqual(TaskList.objects.count(), 1)

    def test_save_invokes_on_inserted_with_created_record(self):
        """作成後にコールバックが作成したレコードで呼ばれることを確認する。"""
        inserted: list[TaskList] = []
        result = services.save_task_list("Groceries", on_inserted=inserted.append)
        self.assertEqual(inserted, [result.task_list])

    def test_save_rejects_empty_title(self):
        """空タイトルは作成されずコールバックも呼ばれないことを確認する。"""
        inserted: list[TaskList] = []
        result = services.save_task_list("   ", on_inserted=inserted.append)
        self.assertFalse(result.success)
        self.assertEqual(result.error, EMPTY_TITLE_MESSAGE)
        self.assertEqual(inserted, [])
        self.assertEqual(TaskList.objects.count(), 0)

    def test_save_reports_storage_unavailable(self):
        """書き込み失敗時はストレージ障害として返すことを確認する。"""
        inserted: list[TaskList] = []
        with (
            patch.object(TaskList.objects, "create", side_effect=DatabaseError("disk I/O error")),
            self.assertLogs("tasklists.services", level="ERROR"),
        ):
            result = services.save_task_list("Groceries", on_inserted=inserted.append)
        self.assertFalse(result.success)
        self.assertEqual(result.error, STORAGE_UNAVAILABLE_MESSAGE)
        self.assertEqual(inserted, [])


class EditTaskListTests(TestCase):
    """edit_task_list関数のテストケース。"""

    def setUp(self):
        self.task_list = TaskList.objects.create(title="Groceries")

    def test_edit_renames_in_place(self):
        """同じレコードのままタイトルが変わることを確認する。"""
        result = services.edit_task_list(self.task_list, "Weekly Groceries")
        self.assertTrue(result.success)
        self.assertTrue(result.changed)
        self.assertIs(result.task_list, self.task_list)
        self.assertEqual(self.task_list.title, "Weekly Groceries")

        self.task_list.refresh_from_db()
        self.assertEqual(self.task_list.title, "Weekly Groceries")
        self.assertEqual(TaskList.objects.count(), 1)

    def test_edit_same_title_is_not_a_change(self):
        result = services.edit_task_list(self.task_list, "Groceries")
        self.assertTrue(result.success)
        self.assertFalse(result.changed)

    def test_edit_rejects_empty_title(self):
        """空タイトルでは更新されないことを確認する。"""
        result = services.edit_task_list(self.task_list, "")
        self.assertFalse(result.success)
        self.task_list.refresh_from_db()
        self.assertEqual(self.task_list.title, "Groceries")

    def test_edit_storage_failure_keeps_instance(self):
        """書き込み失敗時にメモリ上のインスタンスが変わらないことを確認する。"""
        with (
            patch("django.db.models.query.QuerySet.update", side_effect=DatabaseError("locked")),
            self.assertLogs("tasklists.services", level="ERROR"),
        ):
            result = services.edit_task_list(self.task_list, "Renamed")
        self.assertFalse(result.success)
        self.assertEqual(result.error, STORAGE_UNAVAILABLE_MESSAGE)
        self.assertEqual(self.task_list.title, "Groceries")


class ToggleAllTasksTests(TestCase):
    """toggle_all_tasks / done / undone のテストケース。"""

    def setUp(self):
        self.task_list = TaskList.objects.create(title="Groceries")
        self.milk = Task.objects.create(task_list=self.task_list, title="Milk")
        self.eggs = Task.objects.create(task_list=self.task_list, title="Eggs")

    def _states(self) -> list[bool]:
        return list(self.task_list.tasks.values_list("is_complete", flat=True))

    def test_toggle_completes_all_when_any_incomplete(self):
        """未完了があれば全て完了になることを確認する。"""
        Task.objects.filter(pk=self.milk.pk).update(is_complete=True)
        result = services.toggle_all_tasks(self.task_list)
        self.assertTrue(result.success)
        self.assertTrue(result.completed)
        self.assertEqual(self._states(), [True, True])

    def test_toggle_is_an_involution(self):
        """2回適用すると元の状態に戻ることを確認する。"""
        services.toggle_all_tasks(self.task_list)
        self.assertEqual(self._states(), [True, True])

        result = services.toggle_all_tasks(self.task_list)
        self.assertFalse(result.completed)
        self.assertEqual(self._states(), [False, False])

    def test_done_and_undone(self):
        services.done_task_list(self.task_list)
        self.assertEqual(self._states(), [True, True])
        result = services.undone_task_list(self.task_list)
        self.assertEqual(result.updated_count, 2)
        self.assertEqual(self._states(), [False, False])

    def test_toggle_storage_failure_leaves_tasks(self):
        """書き込み失敗時にタスクが変わらないことを確認する。"""
        with (
            patch("django.db.models.query.QuerySet.update", side_effect=DatabaseError("locked")),
            self.assertLogs("tasklists.services", level="ERROR"),
        ):
            result = services.toggle_all_tasks(self.task_list)
        self.assertFalse(result.success)
        self.assertEqual(result.error, STORAGE_UNAVAILABLE_MESSAGE)
        self.assertEqual(self._states(), [False, False])

    def test_toggle_decides_and_updates_in_one_transaction(self):
        """未完了タスクの判定と更新が同じトランザクション内で行われることを確認する。"""
        with CaptureQueriesContext(connection) as context:
            services.toggle_all_tasks(self.task_list)

        sqls = [query["sql"] for query in context.captured_queries]
        select_index = next(i for i, sql in enumerate(sqls) if sql.startswith("SELECT"))
        update_index = next(i for i, sql in enumerate(sqls) if sql.startswith("UPDATE"))
        self.assertTrue(sqls[0].startswith("SAVEPOINT"))
        self.assertTrue(sqls[-1].startswith("RELEASE SAVEPOINT"))
        self.assertLess(0, select_index)
        self.assertLess(select_index, update_index)

    def test_toggle_read_failure_is_storage_error(self):
        with (
            patch("django.db.models.query.QuerySet.exists", side_effect=DatabaseError("locked")),
            self.assertLogs("tasklists.services", level="ERROR"),
        ):
            result = services.toggle_all_tasks(self.task_list)
        self.assertFalse(result.success)
        self.assertEqual(result.error, STORAGE_UNAVAILABLE_MESSAGE)
        self.assertEqual(self._states(), [False, False])


class DeleteTaskListTests(TestCase):
    def test_delete_removes_list_and_tasks(self):
        """タスクリストと所有タスクが削除されることを確認する。"""
        task_list = TaskList.objects.create(title="Groceries")
        Task.objects.create(task_list=task_list, title="Milk")
        other = TaskList.objects.create(title="Other")
        Task.objects.create(task_list=other, title="Keep")

        result = services.delete_task_list(task_list)
        self.assertTrue(result.success)
        self.assertEqual(result.title, "Groceries")
        self.assertEqual(result.deleted_count, 2)
        self.assertEqual(list(TaskList.objects.all()), [other])
        self.assertEqual(Task.objects.count(), 1)


class TaskServiceTests(TestCase):
    """タスク単位の操作のテストケース。"""

    def setUp(self):
        self.task_list = TaskList.objects.create(title="Groceries")

    def test_add_task_appends_incomplete_task(self):
        """タスクが未完了で末尾に追加されることを確認する。"""
        services.add_task(self.task_list, "Milk")
        result = services.add_task(self.task_list, "Eggs", "a dozen")
        self.assertTrue(result.success)
        assert result.task is not None
        self.assertFalse(result.task.is_complete)
        self.assertEqual(result.task.note, "a dozen")
        self.assertEqual(list(self.task_list.tasks.values_list("title", flat=True)), ["Milk", "Eggs"])

    def test_add_task_rejects_invalid_input(self):
        self.assertEqual(services.add_task(self.task_list, "").error, EMPTY_TITLE_MESSAGE)
        self.assertEqual(services.add_task(self.task_list, "Milk", "x" * 1001).error, NOTE_TOO_LONG_MESSAGE)
        self.assertEqual(Task.objects.count(), 0)

    def test_toggle_task(self):
        """完了状態が反転することを確認する。"""
        task = Task.objects.create(task_list=self.task_list, title="Milk")
        result = services.toggle_task(task)
        self.assertTrue(result.success)
        self.assertFalse(result.old_status)
        task.refresh_from_db()
        self.assertTrue(task.is_complete)

    def test_edit_task(self):
        task = Task.objects.create(task_list=self.task_list, title="Milk")
        result = services.edit_task(task, "Oat milk", "unsweetened")
        self.assertTrue(result.changed)
        task.refresh_from_db()
        self.assertEqual((task.title, task.note), ("Oat milk", "unsweetened"))

    def test_delete_task(self):
        task = Task.objects.create(task_list=self.task_list, title="Milk")
        result = services.delete_task(task)
        self.assertTrue(result.success)
        self.assertEqual(result.title, "Milk")
        self.assertFalse(Task.objects.exists())
        self.assertTrue(TaskList.objects.filter(pk=self.task_list.pk).exists())
