from datetime import datetime, timezone

from peewee import AutoField, BooleanField, DateTimeField, Model, SqliteDatabase, TextField
from playhouse.sqlite_ext import AutoIncrementField

from infrastructure.peewee.session.db import db

# En SQLite sin AUTOINCREMENT el último id borrado se puede reutilizar.
_IdField = AutoIncrementField if isinstance(db, SqliteDatabase) else AutoField


def utc_now() -> datetime:
    # Se guarda naive en UTC: SqliteDatabase no sabe parsear offsets.
    return datetime.now(timezone.utc).replace(tzinfo=None)


class TaskModel(Model):
    id = _IdField()
    title = TextField()
    completed = BooleanField(default=False)
    created_at = DateTimeField(default=utc_now)

    class Meta:
        database = db
        table_name = "tasks"
