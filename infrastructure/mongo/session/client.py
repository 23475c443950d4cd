import os
from typing import Any

from pymongo import MongoClient
from pymongo.database import Database

_client: MongoClient[Any] | None = None


def get_client() -> MongoClient[Any]:
    """
    Obtiene el cliente de MongoDB (Singleton).

    Con `tz_aware=True` las fechas vuelven con zona UTC.
    """
    global _client
    if _client is None:
        mongo_uri = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        _client = MongoClient(mongo_uri, tz_aware=True)
    return _client


def get_db() -> Database[Any]:
    """
    Obtiene la base de datos de tareas (`MONGO_DB_NAME`, por defecto "tasks").
    """
    return get_client()[os.getenv("MONGO_DB_NAME", "tasks")]


def close_client() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None
