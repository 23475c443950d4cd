from fastapi import APIRouter, Depends, status

from backend_fastapi.api.deps import (
    create_task_use_case,
    delete_task_use_case,
    list_tasks_use_case,
    update_task_use_case,
)
from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.delete_task import (
    DeleteTaskCommand,
    DeleteTaskResult,
    DeleteTaskUseCase,
)
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase
from core.domain.models.task import Task

router = APIRouter(prefix="/rpc", tags=["tasks"])


@router.post(
    "/createTask",
    response_model=Task,
    status_code=status.HTTP_201_CREATED,
    summary="Crear una nueva tarea",
)
def create_task(
    cmd: CreateTaskCommand,
    use_case: CreateTaskUseCase = Depends(create_task_use_case),
) -> Task:
    """
    Crea una tarea pendiente.

    - **title**: Título de la tarea (no vacío).
    """
    return use_case.execute(cmd)


@router.get(
    "/getTasks",
    response_model=list[Task],
    summary="Listar todas las tareas",
)
def get_tasks(
    use_case: ListTasksUseCase = Depends(list_tasks_use_case),
) -> list[Task]:
    """
    Obtiene todas las tareas, la más reciente primero.
    """
    return use_case.execute()


@router.post(
    "/updateTask",
    response_model=Task,
    summary="Marcar o desmarcar una tarea como completada",
)
def update_task(
    cmd: UpdateTaskCommand,
    use_case: UpdateTaskUseCase = Depends(update_task_use_case),
) -> Task:
    """
    Cambia el estado de completado de una tarea existente.

    - **id**: Id de la tarea.
    - **completed**: Nuevo valor.
    """
    return use_case.execute(cmd)


@router.post(
    "/deleteTask",
    response_model=DeleteTaskResult,
    summary="Eliminar una tarea",
)
def delete_task(
    cmd: DeleteTaskCommand,
    use_case: DeleteTaskUseCase = Depends(delete_task_use_case),
) -> DeleteTaskResult:
    """
    Elimina una tarea. Un id inexistente devuelve `success: false`.

    - **id**: Id de la tarea a eliminar.
    """
    return use_case.execute(cmd)
