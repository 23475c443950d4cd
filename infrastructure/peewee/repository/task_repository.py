from datetime import timezone

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository
from infrastructure.peewee.model.models import TaskModel
from infrastructure.peewee.session.db import db


def _to_domain(model: TaskModel) -> Task:
    return Task(
        id=model.id,
        title=model.title,
        completed=model.completed,
        created_at=model.created_at.replace(tzinfo=timezone.utc),
    )


class PeeweeTaskRepository(TaskRepository):
    def __init__(self):
        # Sin migraciones: la tabla se crea al iniciar el repositorio.
        db.connect(reuse_if_open=True)
        db.create_tables([TaskModel], safe=True)

    def add(self, title: str) -> Task:
        with db.atomic():
            model = TaskModel.create(title=title, completed=False)
        return _to_domain(model)

    def get(self, task_id: int) -> Task | None:
        model = TaskModel.get_or_none(TaskModel.id == task_id)
        if model is None:
            return None
        return _to_domain(model)

    def list(self) -> list[Task]:
        query = TaskModel.select().order_by(
            TaskModel.created_at.desc(), TaskModel.id.desc()
        )
        return [_to_domain(t) for t in query]

    def set_completed(self, task_id: int, completed: bool) -> Task | None:
        with db.atomic():
            updated = (
                TaskModel.update(completed=completed)
                .where(TaskModel.id == task_id)
                .execute()
            )
            if not updated:
                return None
            return _to_domain(TaskModel.get_by_id(task_id))

    def delete(self, task_id: int) -> bool:
        with db.atomic():
            deleted = TaskModel.delete().where(TaskModel.id == task_id).execute()
        return deleted > 0
