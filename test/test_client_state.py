"""
Tests del estado del cliente contra el backend real (TestClient + store en memoria).
"""

import pytest
from fastapi.testclient import TestClient

from backend_fastapi.api.deps import task_repository
from backend_fastapi.main import app
from client_app.state import FilterMode, TaskCounts, TaskListState
from client_app.transport import HttpTaskTransport, RpcError
from core.domain.errors import NotFoundError, ValidationError
from infrastructure.memory.repository.task_repository import InMemoryTaskRepository


@pytest.fixture
def state(api_client):
    return TaskListState(HttpTaskTransport(api_client))


def test_refresh_reemplaza_el_espejo(state, repository):
    repository.add("Buy milk")
    repository.add("Walk dog")

    state.refresh()

    assert [t.title for t in state.tasks] == ["Walk dog", "Buy milk"]


def test_add_antepone_la_tarea(state):
    state.add("Buy milk")
    task = state.add("  Walk dog ")

    assert task is not None
    assert task.title == "Walk dog"
    assert [t.title for t in state.tasks] == ["Walk dog", "Buy milk"]
    assert not state.is_adding


def test_add_titulo_vacio_no_llama_al_servidor(state, repository):
    with pytest.raises(ValidationError):
        state.add("   ")

    assert state.tasks == ()
    assert repository.list() == []


def test_add_ignora_reenvio_mientras_hay_uno_en_curso(repository):
    class ReentrantTransport:
        def __init__(self):
            self.nested = "not called"

        def create_task(self, cmd):
            self.nested = state.add("otra vez")
            return repository.add(cmd.title)

    transport = ReentrantTransport()
    state = TaskListState(transport)

    state.add("Buy milk")

    assert transport.nested is None
    assert [t.title for t in state.tasks] == ["Buy milk"]
    assert not state.is_adding


def test_toggle_reemplaza_con_la_respuesta_del_servidor(state):
    milk = state.add("Buy milk")
    dog = state.add("Walk dog")

    updated = state.toggle(milk.id)

    assert updated.completed is True
    assert updated.created_at == milk.created_at
    by_id = {t.id: t for t in state.tasks}
    assert by_id[milk.id].completed is True
    assert by_id[dog.id].completed is False

    state.toggle(milk.id)
    assert {t.id: t for t in state.tasks}[milk.id].completed is False


def test_toggle_id_desconocido(state):
    with pytest.raises(NotFoundError):
        state.toggle(42)


def test_toggle_fallido_no_modifica_el_espejo(state, repository):
    task = state.add("Borrada en otro cliente")
    repository.delete(task.id)

    with pytest.raises(NotFoundError):
        state.toggle(task.id)

    assert state.tasks == (task,)


def test_remove_solo_quita_si_el_servidor_confirma(state, repository):
    milk = state.add("Buy milk")
    dog = state.add("Walk dog")

    assert state.remove(dog.id) is True
    assert [t.title for t in state.tasks] == ["Buy milk"]

    repository.delete(milk.id)
    assert state.remove(milk.id) is False
    assert [t.title for t in state.tasks] == ["Buy milk"]


def test_filtros_y_contadores(state):
    milk = state.add("Buy milk")
    state.add("Walk dog")
    state.add("Read book")
    state.toggle(milk.id)

    assert state.counts() == TaskCounts(total=3, active=2, completed=1)

    state.set_filter(FilterMode.ACTIVE)
    assert [t.title for t in state.visible_tasks()] == ["Read book", "Walk dog"]

    state.set_filter("completed")
    assert [t.title for t in state.visible_tasks()] == ["Buy milk"]

    state.set_filter(FilterMode.ALL)
    assert len(state.visible_tasks()) == 3


class _BrokenRepository(InMemoryTaskRepository):
    def add(self, title):
        raise ConnectionError("store unavailable")


def test_error_remoto_deja_el_estado_intacto():
    app.dependency_overrides[task_repository] = _BrokenRepository
    try:
        client = TestClient(app, raise_server_exceptions=False)
        state = TaskListState(HttpTaskTransport(client))
        with pytest.raises(RpcError) as exc_info:
            state.add("Buy milk")
    finally:
        app.dependency_overrides.clear()

    assert exc_info.value.status_code == 500
    assert exc_info.value.code == "INTERNAL_SERVER_ERROR"
    assert state.tasks == ()
    assert not state.is_adding
