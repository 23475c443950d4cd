class TaskError(Exception):
    """Base de los errores de dominio de tareas."""


class ValidationError(TaskError):
    """Entrada mal formada o vacía; se lanza antes de tocar el store."""


class NotFoundError(TaskError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task with id {task_id} not found")
        self.task_id = task_id
