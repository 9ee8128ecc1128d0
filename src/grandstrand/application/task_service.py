"""Task add, delete, lookup and update."""

from grandstrand.application.record_service import RecordService
from grandstrand.domain import Task


class TaskService(RecordService[Task]):
    kind = "Task"
    record_type = Task

    def add_task(self, task: Task) -> None:
        """Store a new task. Raises InvalidOperation on None or duplicate id."""
        self._add(task)

    def delete_task(self, task_id: str) -> bool:
        """Remove a task. Returns True if removed, False otherwise."""
        return self._delete(task_id)

    def get_task(self, task_id: str) -> Task | None:
        """Return the task with the given id, or None."""
        return self._get(task_id)

    def list_tasks(self) -> list[Task]:
        return self._list()

    def update_name(self, task_id: str, name: str) -> None:
        self._update(task_id, "name", name)

    def update_description(self, task_id: str, description: str) -> None:
        self._update(task_id, "description", description)
