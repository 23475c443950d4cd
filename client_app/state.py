"""
Estado del cliente: espejo local de las tareas más el filtro activo.

El espejo solo cambia a través de las transiciones refresh, add, toggle y
remove, y siempre después de que el servidor confirma la operación. Si la
llamada falla el estado queda intacto y el error se propaga.
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum

from client_app.transport import HttpTaskTransport
from core.application.create_task import CreateTaskCommand
from core.application.delete_task import DeleteTaskCommand
from core.application.update_task import UpdateTaskCommand
from core.domain.errors import NotFoundError, ValidationError
from core.domain.models.task import Task

logger = logging.getLogger(__name__)


class FilterMode(Enum):
    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"


@dataclass(frozen=True, slots=True)
class TaskCounts:
    total: int
    active: int
    completed: int


class TaskListState:
    def __init__(self, transport: HttpTaskTransport) -> None:
        self._transport = transport
        self._tasks: list[Task] = []
        self._filter = FilterMode.ALL
        # Formulario de alta deshabilitado mientras su llamada está en curso.
        self._adding = threading.Lock()

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def filter(self) -> FilterMode:
        return self._filter

    @property
    def is_adding(self) -> bool:
        return self._adding.locked()

    # ── Transiciones ──────────────────────────────────────────────────────────

    def refresh(self) -> None:
        try:
            tasks = self._transport.get_tasks()
        except Exception as e:
            logger.error(f"❌ Error al cargar las tareas: {e}")
            raise
        self._tasks = list(tasks)

    def add(self, title: str) -> Task | None:
        """
        Crea una tarea y la pone al principio del espejo.

        Devuelve None sin llamar al servidor si ya hay un alta en curso.
        """
        title = title.strip()
        if not title:
            raise ValidationError("Title cannot be empty")

        if not self._adding.acquire(blocking=False):
            logger.info("Alta ignorada: ya hay una en curso")
            return None
        try:
            task = self._transport.create_task(CreateTaskCommand(title=title))
        except Exception as e:
            logger.error(f"❌ Error al crear la tarea: {e}")
            raise
        finally:
            self._adding.release()

        self._tasks = [task, *self._tasks]
        return task

    def toggle(self, task_id: int) -> Task:
        current = self._find(task_id)
        if current is None:
            raise NotFoundError(task_id)

        cmd = UpdateTaskCommand(id=task_id, completed=not current.completed)
        try:
            updated = self._transport.update_task(cmd)
        except Exception as e:
            logger.error(f"❌ Error al actualizar la tarea {task_id}: {e}")
            raise

        self._tasks = [updated if t.id == task_id else t for t in self._tasks]
        return updated

    def remove(self, task_id: int) -> bool:
        try:
            result = self._transport.delete_task(DeleteTaskCommand(id=task_id))
        except Exception as e:
            logger.error(f"❌ Error al eliminar la tarea {task_id}: {e}")
            raise

        if result.success:
            self._tasks = [t for t in self._tasks if t.id != task_id]
        return result.success

    def set_filter(self, mode: FilterMode | str) -> None:
        self._filter = FilterMode(mode)

    # ── Vistas derivadas (se recalculan en cada llamada) ─────────────────────

    def visible_tasks(self) -> list[Task]:
        if self._filter is FilterMode.ACTIVE:
            return [t for t in self._tasks if not t.completed]
        if self._filter is FilterMode.COMPLETED:
            return [t for t in self._tasks if t.completed]
        return list(self._tasks)

    def counts(self) -> TaskCounts:
        completed = sum(1 for t in self._tasks if t.completed)
        return TaskCounts(
            total=len(self._tasks),
            active=len(self._tasks) - completed,
            completed=completed,
        )

    def _find(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None
