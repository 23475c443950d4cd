from datetime import datetime, timezone

from pydantic import BaseModel, Field

from core.domain.models.task import Task


class TaskMongo(BaseModel):
    """
    Modelo de Task para MongoDB.
    Representa cómo se almacena la tarea en la colección `tasks`.
    """

    id: int = Field(alias="_id")
    title: str
    completed: bool = False
    created_at: datetime

    model_config = {"populate_by_name": True}

    def to_domain(self) -> Task:
        """
        Convierte el documento de MongoDB al modelo de dominio.

        BSON guarda las fechas en UTC y pymongo las devuelve naive.
        """
        created_at = self.created_at
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return Task(
            id=self.id,
            title=self.title,
            completed=self.completed,
            created_at=created_at,
        )
