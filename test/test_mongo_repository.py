from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from pymongo import DESCENDING, ReturnDocument

from infrastructure.mongo.repository.task_repository import MongoTaskRepository


@pytest.fixture
def mock_mongo_collection():
    return MagicMock()


@pytest.fixture
def mock_counters():
    counters = MagicMock()
    counters.find_one_and_update.return_value = {"_id": "tasks", "seq": 7}
    return counters


@pytest.fixture
def mongo_repository(mock_mongo_collection, mock_counters):
    repo = MongoTaskRepository()
    repo.collection = mock_mongo_collection
    repo.counters = mock_counters
    return repo


def _doc(task_id, title="Tarea", completed=False):
    return {
        "_id": task_id,
        "title": title,
        "completed": completed,
        "created_at": datetime(2026, 1, 1, 12, 0, 0),
    }


def test_add_usa_contador_e_inserta(mongo_repository, mock_mongo_collection, mock_counters):
    task = mongo_repository.add("Test Tarea")

    assert task.id == 7
    assert task.title == "Test Tarea"
    assert task.completed is False
    assert task.created_at.tzinfo is not None
    mock_counters.find_one_and_update.assert_called_once_with(
        {"_id": "tasks"},
        {"$inc": {"seq": 1}},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    inserted = mock_mongo_collection.insert_one.call_args.args[0]
    assert inserted["_id"] == 7
    assert inserted["completed"] is False


def test_get_tarea_found(mongo_repository, mock_mongo_collection):
    mock_mongo_collection.find_one.return_value = _doc(3, "Found Tarea")

    result = mongo_repository.get(3)

    assert result is not None
    assert result.id == 3
    assert result.title == "Found Tarea"
    assert result.created_at == datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def test_get_tarea_not_found(mongo_repository, mock_mongo_collection):
    mock_mongo_collection.find_one.return_value = None

    assert mongo_repository.get(3) is None


def test_list_ordena_por_fecha_descendente(mongo_repository, mock_mongo_collection):
    cursor = mock_mongo_collection.find.return_value
    cursor.sort.return_value = [_doc(2, "Tarea 2"), _doc(1, "Tarea 1", True)]

    results = mongo_repository.list()

    cursor.sort.assert_called_once_with(
        [("created_at", DESCENDING), ("_id", DESCENDING)]
    )
    assert [t.title for t in results] == ["Tarea 2", "Tarea 1"]
    assert results[1].completed is True


def test_set_completed(mongo_repository, mock_mongo_collection):
    mock_mongo_collection.find_one_and_update.return_value = _doc(4, completed=True)

    result = mongo_repository.set_completed(4, True)

    assert result is not None
    assert result.completed is True
    mock_mongo_collection.find_one_and_update.assert_called_once_with(
        {"_id": 4},
        {"$set": {"completed": True}},
        return_document=ReturnDocument.AFTER,
    )


def test_set_completed_inexistente(mongo_repository, mock_mongo_collection):
    mock_mongo_collection.find_one_and_update.return_value = None

    assert mongo_repository.set_completed(4, True) is None


@pytest.mark.parametrize("deleted_count, expected", [(1, True), (0, False)])
def test_delete(mongo_repository, mock_mongo_collection, deleted_count, expected):
    mock_mongo_collection.delete_one.return_value.deleted_count = deleted_count

    assert mongo_repository.delete(5) is expected
    mock_mongo_collection.delete_one.assert_called_once_with({"_id": 5})
