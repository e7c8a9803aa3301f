"""Todo list example: a domain model, its action vocabulary and a driver.

Usage:
    python -m examples.todo_app.main
"""

from .models import ChangeText, MarkDone, RootState, Todo, TodoAction, TodoEntity
from .reducers import history_reducer, todo_reducer
from .selectors import select_done_count, select_open_todos, select_todo_done

__all__ = [
    "Todo",
    "RootState",
    "TodoEntity",
    "MarkDone",
    "ChangeText",
    "TodoAction",
    "todo_reducer",
    "history_reducer",
    "select_todo_done",
    "select_open_todos",
    "select_done_count",
]
