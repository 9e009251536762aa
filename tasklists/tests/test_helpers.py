"""ヘルパー関数のテスト。"""

from datetime import timedelta
from http import HTTPStatus

from django.test import RequestFactory, SimpleTestCase, TestCase, override_settings
from django.utils import timezone

from .. import htmx_responses, queries
from ..models import Task, TaskList
from ..params import STORAGE_UNAVAILABLE_MESSAGE, SortMode
from ..presenter import IntentResult, TaskListPresenter
from ..views.helpers import error_status, failure_status, get_default_sort_mode, get_sort_mode


class SortModeHelperTests(SimpleTestCase):
    """並び順取得ヘルパーのテストケース。"""

    def setUp(self):
        self.factory = RequestFactory()

    def test_sort_from_query(self):
        request = self.factory.get("/", {"sort": "alphabetical"})
        self.assertEqual(get_sort_mode(request), SortMode.ALPHABETICAL)

    def test_missing_sort_uses_default(self):
        request = self.factory.get("/")
        self.assertEqual(get_sort_mode(request), SortMode.DATE)

    @override_settings(TASKLISTS_DEFAULT_SORT="bogus")
    def test_invalid_setting_falls_back_to_date(self):
        """設定値が不正な場合は日付順になることを確認する。"""
        self.assertEqual(get_default_sort_mode(), SortMode.DATE)


class FailureStatusTests(SimpleTestCase):
    """error_status / failure_statusのテストケース。"""

    def test_storage_error(self):
        result = IntentResult(success=False, error=STORAGE_UNAVAILABLE_MESSAGE)
        self.assertEqual(failure_status(result), HTTPStatus.SERVICE_UNAVAILABLE)
        self.assertEqual(error_status(STORAGE_UNAVAILABLE_MESSAGE), HTTPStatus.SERVICE_UNAVAILABLE)

    def test_validation_error(self):
        result = IntentResult(success=False, error="Please enter a title.")
        self.assertEqual(failure_status(result), HTTPStatus.BAD_REQUEST)
        self.assertEqual(error_status("Please enter a title."), HTTPStatus.BAD_REQUEST)
        self.assertEqual(error_status(None), HTTPStatus.BAD_REQUEST)


class QueriesTests(TestCase):
    """queriesモジュールのテストケース。"""

    def setUp(self):
        base = timezone.now()
        self.banana = TaskList.objects.create(title="Banana", date=base)
        self.apple = TaskList.objects.create(title="apple", date=base + timedelta(seconds=1))
        Task.objects.create(task_list=self.banana, title="One")
        Task.objects.create(task_list=self.banana, title="Two", is_complete=True)

    def test_annotated_counts(self):
        """一覧取得時の注釈から件数が得られることを確認する。"""
        banana = queries.get_sorted_task_lists(SortMode.DATE)[0]
        self.assertEqual(queries.get_annotated_task_counts(banana), queries.TaskCounts(total=2, incomplete=1))

    def test_counts_ignore_stale_annotation(self):
        """取得後にタスクが変わっても、集計は最新の件数を返すことを確認する。"""
        banana = queries.get_sorted_task_lists(SortMode.DATE)[0]
        banana.tasks.update(is_complete=True)
        self.assertEqual(queries.get_task_counts(banana), queries.TaskCounts(total=2, incomplete=0))

    def test_alphabetical_folds_accents_and_case(self):
        """アクセント付き・小文字のタイトルも基底文字の位置に並ぶことを確認する。"""
        TaskList.objects.create(title="Éclair")
        TaskList.objects.create(title="date")
        TaskList.objects.create(title="Fig")
        titles = [task_list.title for task_list in queries.get_sorted_task_lists(SortMode.ALPHABETICAL)]
        self.assertEqual(titles, ["apple", "Banana", "date", "Éclair", "Fig"])

    def test_counts_without_annotation(self):
        self.assertEqual(queries.get_task_counts(self.banana), queries.TaskCounts(total=2, incomplete=1))
        self.assertEqual(queries.get_task_counts(self.apple), queries.TaskCounts(total=0, incomplete=0))

    def test_task_sections(self):
        self.assertEqual([task.title for task in queries.get_current_tasks(self.banana)], ["One"])
        self.assertEqual([task.title for task in queries.get_completed_tasks(self.banana)], ["Two"])

    def test_get_task_list_by_id(self):
        self.assertEqual(queries.get_task_list_by_id(self.banana.pk), self.banana)
        self.assertIsNone(queries.get_task_list_by_id(9999))


class HtmxResponsesTests(TestCase):
    """htmx_responsesモジュールのテストケース。"""

    def setUp(self):
        self.task_list = TaskList.objects.create(title="Groceries")

    def test_add_oob_attribute(self):
        html = htmx_responses._add_oob_attribute('<p id="row-count">1</p>', "row-count")
        self.assertEqual(html, '<p id="row-count" hx-swap-oob="true">1</p>')

    def test_rows_html_highlights_inserted_row(self):
        """挿入位置の行だけが強調表示されることを確認する。"""
        other = TaskList.objects.create(title="Other")
        presenter = TaskListPresenter()
        html = htmx_responses.render_rows_html(presenter, inserted_index=1)
        self.assertEqual(html.count("list-group-item-info"), 1)
        self.assertLess(html.index(f"task-list-row-{self.task_list.pk}"), html.index("list-group-item-info"))
        self.assertIn(f"task-list-row-{other.pk}", html)

    def test_rows_response_without_main_list(self):
        presenter = TaskListPresenter()
        response = htmx_responses.render_rows_response(presenter, include_main_list=False, include_list_oob=True)
        content = response.content.decode()
        self.assertTrue(content.startswith('<div id="task-list-rows" hx-swap-oob="innerHTML">'))
        self.assertIn('id="row-count" hx-swap-oob="true"', content)

    def test_form_errors_oob_is_cleared_without_message(self):
        html = htmx_responses.render_form_errors_oob(None)
        self.assertIn('id="form-errors" hx-swap-oob="true"', html)
        self.assertNotIn("Please", html)

    def test_deleted_row_response_restores_placeholder_when_empty(self):
        """最後の行が削除されたら空表示を含む一覧をOOBで返すことを確認する。"""
        self.task_list.delete()
        response = htmx_responses.render_deleted_row_response(TaskListPresenter())
        content = response.content.decode()
        self.assertIn('id="task-list-rows" hx-swap-oob="innerHTML"', content)
        self.assertIn("No task lists yet.", content)
        self.assertIn("0 lists", content)

    def test_deleted_row_response_keeps_list_when_rows_remain(self):
        response = htmx_responses.render_deleted_row_response(TaskListPresenter())
        content = response.content.decode()
        self.assertNotIn('id="task-list-rows"', content)
        self.assertIn("1 list", content)

    def test_row_html_with_message(self):
        presenter = TaskListPresenter()
        html = htmx_responses.render_row_html(
            presenter.build_row(self.task_list),
            sort_mode=presenter.sort_mode,
            message=STORAGE_UNAVAILABLE_MESSAGE,
        )
        self.assertIn(f'id="task-list-row-{self.task_list.pk}"', html)
        self.assertIn('data-role="row-error"', html)
        self.assertIn(STORAGE_UNAVAILABLE_MESSAGE, html)
