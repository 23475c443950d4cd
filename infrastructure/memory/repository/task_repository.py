import threading
from datetime import datetime, timezone
from itertools import count

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository


class InMemoryTaskRepository(TaskRepository):
    """
    Store en memoria del proceso. No es durable: pensado para desarrollo
    local y tests.
    """

    def __init__(self) -> None:
        self._data: dict[int, Task] = {}
        self._ids = count(1)
        self._lock = threading.Lock()

    def add(self, title: str) -> Task:
        with self._lock:
            task = Task(
                id=next(self._ids),
                title=title,
                completed=False,
                created_at=datetime.now(timezone.utc),
            )
            self._data[task.id] = task
            return _copy(task)

    def get(self, task_id: int) -> Task | None:
        with self._lock:
            task = self._data.get(task_id)
            return _copy(task) if task is not None else None

    def list(self) -> list[Task]:
        with self._lock:
            tasks = [_copy(t) for t in self._data.values()]
        return sorted(tasks, key=lambda t: (t.created_at, t.id), reverse=True)

    def set_completed(self, task_id: int, completed: bool) -> Task | None:
        with self._lock:
            task = self._data.get(task_id)
            if task is None:
                return None
            task.completed = completed
            return _copy(task)

    def delete(self, task_id: int) -> bool:
        with self._lock:
            return self._data.pop(task_id, None) is not None


def _copy(task: Task) -> Task:
    return Task(
        id=task.id,
        title=task.title,
        completed=task.completed,
        created_at=task.created_at,
    )
