from abc import ABC, abstractmethod

from core.domain.models.task import Task


class TaskRepository(ABC):
    @abstractmethod
    def list(self) -> list[Task]:
        """Todas las tareas, la más reciente primero."""
        raise NotImplementedError

    @abstractmethod
    def add(self, title: str) -> Task:
        """Inserta una tarea pendiente; el store asigna id y created_at."""
        raise NotImplementedError

    @abstractmethod
    def get(self, task_id: int) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def set_completed(self, task_id: int, completed: bool) -> Task | None:
        """Actualiza solo `completed`. Devuelve None si la fila no existe."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, task_id: int) -> bool:
        """True si se borró una fila, False si no existía."""
        raise NotImplementedError
