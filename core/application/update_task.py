import logging

from pydantic import BaseModel, ConfigDict

from core.domain.errors import NotFoundError
from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class UpdateTaskCommand(BaseModel):
    model_config = ConfigDict(strict=True)

    id: int
    completed: bool


class UpdateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: UpdateTaskCommand) -> Task:
        try:
            task = self._repository.set_completed(cmd.id, cmd.completed)
        except Exception as e:
            logger.error(f"❌ Error al actualizar la tarea {cmd.id}: {e}")
            raise

        if task is None:
            raise NotFoundError(cmd.id)

        logger.info(f"Tarea {task.id} actualizada (completed={task.completed})")
        return task
