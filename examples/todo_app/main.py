"""CLI entry point for the todo example.

Usage:
    python -m examples.todo_app.main
    UNISTATE_LOG_LEVEL=DEBUG python -m examples.todo_app.main
"""

from __future__ import annotations

import argparse
import logging
import sys

from unistate import AddEntity, RemoveEntity, Store, StoreSettings, UpdateEntity

from .models import ChangeText, MarkDone, RootState, Todo, TodoAction, TodoEntity
from .reducers import history_reducer, todo_reducer
from .selectors import select_open_todos, select_todo_done
from .settings import TodoAppSettings

SCRIPT: list[TodoAction] = [
    TodoEntity(AddEntity(Todo(1, "understand references"))),
    TodoEntity(AddEntity(Todo(2, "get good"))),
    TodoEntity(AddEntity(Todo(3, "understand lifetimes"))),
    MarkDone(1),
    MarkDone(2),
    TodoEntity(RemoveEntity(1)),
    TodoEntity(UpdateEntity(Todo(2, "get gooder"))),
    TodoEntity(UpdateEntity(Todo(2, "get goodest"))),
    TodoEntity(RemoveEntity(2)),
    TodoEntity(AddEntity(Todo(2, "get good"))),
    ChangeText(2, "git gud"),
]


def create_store(settings: StoreSettings | None = None) -> Store[RootState, TodoAction]:
    """Build the example store with both reducers registered."""
    store: Store[RootState, TodoAction] = Store(RootState(), settings=settings)
    store.register_reducer(todo_reducer).register_reducer(history_reducer)
    return store


def run(store: Store[RootState, TodoAction], actions: list[TodoAction]) -> None:
    store.observe(
        select_todo_done(2),
        lambda done: print(f"todo 2 done: {done}"),
        distinct=True,
    )
    for action in actions:
        store.dispatch(action)
        print(f"after {action}: {[todo.task for todo in store.get_state().todos]}")

    state = store.get_state()
    print(f"\nopen todos: {[todo.task for todo in store.select(select_open_todos)]}")
    print(f"history: {', '.join(state.history)}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="todo-app",
        description="Todo list - unistate example driver",
    )
    parser.add_argument("--strict-reentrancy", action="store_true", help="Reject nested dispatch")
    args = parser.parse_args(argv)

    settings = TodoAppSettings()
    if args.strict_reentrancy:
        settings = settings.model_copy(update={"reentrant_dispatch": "error"})
    logging.basicConfig(level=settings.log_level.upper())

    run(create_store(settings), SCRIPT)
    return 0


if __name__ == "__main__":
    sys.exit(main())
