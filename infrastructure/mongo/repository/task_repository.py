from datetime import datetime, timezone
from typing import Any

from pymongo import DESCENDING, ReturnDocument
from pymongo.collection import Collection

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository
from infrastructure.mongo.models.task import TaskMongo
from infrastructure.mongo.session.client import get_db

_COUNTER_ID = "tasks"


class MongoTaskRepository(TaskRepository):
    """
    Implementación de TaskRepository usando MongoDB (Synchronous).

    Los ids enteros salen de un documento contador en `counters`, que solo
    crece, así que un id borrado nunca se vuelve a asignar.
    """

    def __init__(self) -> None:
        self.db = get_db()
        self.collection: Collection[Any] = self.db.tasks
        self.counters: Collection[Any] = self.db.counters

    def _next_id(self) -> int:
        counter = self.counters.find_one_and_update(
            {"_id": _COUNTER_ID},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return counter["seq"]

    def add(self, title: str) -> Task:
        """
        Inserta una tarea pendiente con id y fecha asignados por el store.

        Argumentos:
            title (str): Título ya validado.

        Retorna:
            Task: La tarea creada.
        """
        now = datetime.now(timezone.utc)
        task_mongo = TaskMongo(
            id=self._next_id(),
            title=title,
            completed=False,
            # BSON solo guarda milisegundos
            created_at=now.replace(microsecond=now.microsecond // 1000 * 1000),
        )
        self.collection.insert_one(task_mongo.model_dump(by_alias=True))
        return task_mongo.to_domain()

    def get(self, task_id: int) -> Task | None:
        """
        Obtiene una tarea por su ID.

        Retorna:
            Task | None: La tarea encontrada o None si no existe.
        """
        doc = self.collection.find_one({"_id": task_id})
        if not doc:
            return None

        return TaskMongo(**doc).to_domain()

    def list(self) -> list[Task]:
        """
        Lista todas las tareas, la más reciente primero.
        """
        docs = self.collection.find().sort(
            [("created_at", DESCENDING), ("_id", DESCENDING)]
        )
        return [TaskMongo(**doc).to_domain() for doc in docs]

    def set_completed(self, task_id: int, completed: bool) -> Task | None:
        """
        Cambia solo el campo `completed`, en una operación atómica.
        """
        doc = self.collection.find_one_and_update(
            {"_id": task_id},
            {"$set": {"completed": completed}},
            return_document=ReturnDocument.AFTER,
        )
        if not doc:
            return None

        return TaskMongo(**doc).to_domain()

    def delete(self, task_id: int) -> bool:
        """
        Elimina una tarea por su ID.

        Retorna:
            bool: True si existía y se borró.
        """
        result = self.collection.delete_one({"_id": task_id})
        return result.deleted_count > 0
