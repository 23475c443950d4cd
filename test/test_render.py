from datetime import datetime, timezone

from client_app.render import render_board, render_summary, render_task
from client_app.state import FilterMode, TaskListState
from core.domain.models.task import Task


class StaticTransport:
    def __init__(self, tasks):
        self._tasks = tasks

    def get_tasks(self):
        return list(self._tasks)


def _task(task_id, title, completed=False):
    return Task(
        id=task_id,
        title=title,
        completed=completed,
        created_at=datetime(2026, 10, 17, 9, 30, tzinfo=timezone.utc),
    )


def _state(*tasks):
    state = TaskListState(StaticTransport(tasks))
    state.refresh()
    return state


def test_render_task():
    assert render_task(_task(1, "Buy milk")) == "[ ] #1 Buy milk (Created: 2026-10-17)"
    assert render_task(_task(2, "Walk dog", True)).endswith("Done")


def test_tablero_vacio():
    board = render_board(_state())

    assert "Total: 0  Active: 0  Completed: 0" in board
    assert "No tasks yet. Add one above!" in board
    assert "Keep going" not in board


def test_mensajes_vacios_por_filtro():
    state = _state(_task(1, "Buy milk"))

    state.set_filter(FilterMode.COMPLETED)
    assert "No completed tasks yet" in render_board(state)

    state = _state(_task(1, "Buy milk", True))
    state.set_filter(FilterMode.ACTIVE)
    assert "No active tasks" in render_board(state)


def test_resumen():
    assert render_summary(_state()) is None
    assert render_summary(_state(_task(1, "a"))) == "Keep going! 1 task remaining."
    assert (
        render_summary(_state(_task(1, "a"), _task(2, "b"), _task(3, "c", True)))
        == "Keep going! 2 tasks remaining."
    )
    assert (
        render_summary(_state(_task(1, "a", True)))
        == "🎉 All tasks completed! Great job!"
    )


def test_tablero_lista_tareas_visibles():
    state = _state(_task(2, "Walk dog"), _task(1, "Buy milk", True))

    lines = render_board(state).splitlines()

    assert lines[0] == "Total: 2  Active: 1  Completed: 1"
    assert lines[1] == "Filter: all"
    assert lines[3].startswith("[ ] #2 Walk dog")
    assert lines[4].startswith("[x] #1 Buy milk")
