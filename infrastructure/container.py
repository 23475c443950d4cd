import logging
import os
from functools import lru_cache

from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskUseCase
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_task_repository() -> TaskRepository:
    orm = os.getenv("ORM", "peewee").lower()
    logger.info(f"Usando el repositorio de tareas '{orm}'")

    if orm == "sqlalchemy":
        from infrastructure.sqlalchemy.repository.task_repository import (
            SqlAlchemyTaskRepository,
        )

        return SqlAlchemyTaskRepository()
    elif orm == "mongo":
        from infrastructure.mongo.repository.task_repository import (
            MongoTaskRepository,
        )

        return MongoTaskRepository()
    elif orm == "memory":
        from infrastructure.memory.repository.task_repository import (
            InMemoryTaskRepository,
        )

        return InMemoryTaskRepository()
    elif orm != "peewee":
        raise ValueError(f"ORM desconocido: {orm}")

    from infrastructure.peewee.repository.task_repository import (
        PeeweeTaskRepository,
    )

    return PeeweeTaskRepository()


def get_create_task_use_case(repository: TaskRepository) -> CreateTaskUseCase:
    return CreateTaskUseCase(repository=repository)


def get_list_tasks_use_case(repository: TaskRepository) -> ListTasksUseCase:
    return ListTasksUseCase(repository=repository)


def get_update_task_use_case(repository: TaskRepository) -> UpdateTaskUseCase:
    return UpdateTaskUseCase(repository=repository)


def get_delete_task_use_case(repository: TaskRepository) -> DeleteTaskUseCase:
    return DeleteTaskUseCase(repository=repository)
