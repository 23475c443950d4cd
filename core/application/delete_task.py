import logging

from pydantic import BaseModel, ConfigDict

from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class DeleteTaskCommand(BaseModel):
    model_config = ConfigDict(strict=True)

    id: int


class DeleteTaskResult(BaseModel):
    success: bool


class DeleteTaskUseCase:
    """
    Borrado idempotente: un id inexistente no es un error, se informa
    con `success=False`.
    """

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: DeleteTaskCommand) -> DeleteTaskResult:
        try:
            deleted = self._repository.delete(cmd.id)
        except Exception as e:
            logger.error(f"❌ Error al eliminar la tarea {cmd.id}: {e}")
            raise

        if not deleted:
            logger.info(f"Tarea {cmd.id} inexistente, nada que eliminar")
        return DeleteTaskResult(success=deleted)
