import logging

from pydantic import BaseModel, ConfigDict, Field

from core.domain.errors import ValidationError
from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class CreateTaskCommand(BaseModel):
    model_config = ConfigDict(strict=True)

    title: str = Field(min_length=1)


class CreateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: CreateTaskCommand) -> Task:
        title = cmd.title.strip()
        if not title:
            raise ValidationError("Title cannot be empty")

        try:
            task = self._repository.add(title)
        except Exception as e:
            logger.error(f"❌ Error al crear la tarea: {e}")
            raise

        logger.info(f"Tarea {task.id} creada")
        return task
