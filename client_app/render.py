from client_app.state import FilterMode, TaskListState
from core.domain.models.task import Task

_EMPTY_MESSAGES = {
    FilterMode.ALL: "No tasks yet. Add one above!",
    FilterMode.ACTIVE: "No active tasks",
    FilterMode.COMPLETED: "No completed tasks yet",
}


def render_task(task: Task) -> str:
    mark = "x" if task.completed else " "
    line = f"[{mark}] #{task.id} {task.title} (Created: {task.created_at:%Y-%m-%d})"
    if task.completed:
        line += " Done"
    return line


def render_summary(state: TaskListState) -> str | None:
    counts = state.counts()
    if counts.total == 0:
        return None
    if counts.completed > 0 and counts.active == 0:
        return "🎉 All tasks completed! Great job!"
    plural = "s" if counts.active != 1 else ""
    return f"Keep going! {counts.active} task{plural} remaining."


def render_board(state: TaskListState) -> str:
    """Vista de texto del tablero: contadores, filtro, tareas y resumen."""
    counts = state.counts()
    lines = [
        f"Total: {counts.total}  Active: {counts.active}  Completed: {counts.completed}",
        f"Filter: {state.filter.value}",
        "",
    ]

    visible = state.visible_tasks()
    if visible:
        lines.extend(render_task(t) for t in visible)
    else:
        lines.append(_EMPTY_MESSAGES[state.filter])

    summary = render_summary(state)
    if summary is not None:
        lines.extend(["", summary])
    return "\n".join(lines)
