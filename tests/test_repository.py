"""Tests for the in-memory TaskRepository."""

from structlog.testing import capture_logs

from task_list.core.models import Priority


class TestTaskRepository:
    """Tests for TaskRepository."""

    def test_add_and_find(self, repository, make_task):
        task = make_task(1, "Test Task")
        repository.add(task)

        found = repository.find_by_id(1)
        assert found == task
        assert found is task

    def test_find_by_id_not_found(self, repository):
        assert repository.find_by_id(999) is None

    def test_remove_by_id(self, repository, make_task):
        repository.add(make_task(1))
        repository.remove_by_id(1)

        assert repository.find_by_id(1) is None
        assert repository.list_tasks() == []

    def test_remove_unknown_id_is_noop(self, repository, make_task):
        repository.add(make_task(1, "A"))
        repository.add(make_task(2, "B", Priority.HIGH))
        before = repository.list_tasks()

        repository.remove_by_id(999)

        assert repository.list_tasks() == before
        assert len(repository) == 2

    def test_list_empty(self, repository):
        assert repository.list_tasks() == []

    def test_list_orders_high_first(self, repository, make_task):
        medium = make_task(1, "Medium", Priority.MEDIUM)
        high = make_task(2, "High", Priority.HIGH)
        repository.add(medium)
        repository.add(high)

        assert repository.list_tasks() == [high, medium]

    def test_list_orders_all_levels(self, repository, make_task):
        repository.add(make_task(1, "Low", Priority.LOW))
        repository.add(make_task(2, "High", Priority.HIGH))
        repository.add(make_task(3, "Medium", Priority.MEDIUM))

        priorities = [t.priority for t in repository.list_tasks()]
        assert priorities == [Priority.HIGH, Priority.MEDIUM, Priority.LOW]

    def test_list_keeps_insertion_order_within_level(self, repository, make_task):
        for task_id in (1, 2, 3):
            repository.add(make_task(task_id, priority=Priority.MEDIUM))
        repository.add(make_task(4, priority=Priority.HIGH))

        assert [t.id for t in repository.list_tasks()] == [4, 1, 2, 3]

    def test_list_returns_fresh_sequence(self, repository, make_task):
        repository.add(make_task(1))

        listed = repository.list_tasks()
        listed.clear()

        assert len(repository.list_tasks()) == 1
        assert repository.list_tasks() is not repository.list_tasks()

    def test_list_reflects_priority_changes(self, repository, make_task):
        first = make_task(1, "First")
        second = make_task(2, "Second")
        repository.add(first)
        repository.add(second)

        repository.find_by_id(2).priority = Priority.HIGH

        assert [t.id for t in repository.list_tasks()] == [2, 1]

    def test_duplicate_ids_resolve_to_first_added(self, repository, make_task):
        original = make_task(1, "Original")
        duplicate = make_task(1, "Duplicate")

        with capture_logs() as logs:
            repository.add(original)
            repository.add(duplicate)

        assert len(repository) == 2
        assert repository.find_by_id(1) is original
        assert logs == []

    def test_remove_drops_every_task_with_id(self, repository, make_task):
        repository.add(make_task(1, "Original"))
        repository.add(make_task(1, "Duplicate"))
        repository.add(make_task(2, "Other"))

        repository.remove_by_id(1)

        assert [t.id for t in repository.list_tasks()] == [2]
