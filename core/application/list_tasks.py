import logging

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class ListTasksUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self) -> list[Task]:
        try:
            return self._repository.list()
        except Exception as e:
            logger.error(f"❌ Error al listar las tareas: {e}")
            raise
