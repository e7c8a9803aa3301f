"""Todo selectors."""

from __future__ import annotations

from unistate import create_selector, select_field

from .models import RootState

select_todos = select_field("todos")


def select_todo_done(todo_id: int):
    """Selector returning the done flag of one todo, or None if it is absent."""

    def selector(state: RootState) -> bool | None:
        todo = state.todos.get(todo_id)
        return None if todo is None else todo.done

    return selector


select_open_todos = create_selector(
    select_todos,
    combiner=lambda todos: tuple(todo for todo in todos if not todo.done),
)


def select_done_count(state: RootState) -> int:
    return sum(1 for todo in state.todos if todo.done)
