from datetime import timezone

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository
from infrastructure.sqlalchemy.model.models import TaskModel
from infrastructure.sqlalchemy.session.db import get_session, init_db


def _to_domain(task_model: TaskModel) -> Task:
    return Task(
        id=task_model.id,
        title=task_model.title,
        completed=task_model.completed,
        created_at=task_model.created_at.replace(tzinfo=timezone.utc),
    )


class SqlAlchemyTaskRepository(TaskRepository):
    def __init__(self) -> None:
        init_db()

    def add(self, title: str) -> Task:
        session = get_session()
        try:
            task_model = TaskModel(title=title, completed=False)
            session.add(task_model)
            session.commit()
            session.refresh(task_model)
            return _to_domain(task_model)
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def get(self, task_id: int) -> Task | None:
        session = get_session()
        try:
            task_model = session.get(TaskModel, task_id)
            if task_model is None:
                return None
            return _to_domain(task_model)
        finally:
            session.close()

    def list(self) -> list[Task]:
        session = get_session()
        try:
            task_models = (
                session.query(TaskModel)
                .order_by(TaskModel.created_at.desc(), TaskModel.id.desc())
                .all()
            )
            return [_to_domain(task_model) for task_model in task_models]
        finally:
            session.close()

    def set_completed(self, task_id: int, completed: bool) -> Task | None:
        session = get_session()
        try:
            task_model = session.get(TaskModel, task_id)
            if task_model is None:
                return None
            task_model.completed = completed
            session.commit()
            session.refresh(task_model)
            return _to_domain(task_model)
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def delete(self, task_id: int) -> bool:
        session = get_session()
        try:
            deleted = (
                session.query(TaskModel)
                .filter(TaskModel.id == task_id)
                .delete(synchronize_session=False)
            )
            session.commit()
            return deleted > 0
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
