"""Todo reducers.

todo_reducer owns the todos collection; history_reducer appends a line per
action to the history field. They know nothing of each other, and
registering todo_reducer first means history only sees successful actions.
"""

from __future__ import annotations

from dataclasses import replace

from unistate import entity_reducer

from .models import ChangeText, MarkDone, RootState, TodoAction, TodoEntity


def todo_reducer(state: RootState, action: TodoAction) -> RootState:
    match action:
        case TodoEntity(action=entity_action):
            return replace(state, todos=entity_reducer(state.todos, entity_action))
        case MarkDone(id=todo_id, done=done):
            return replace(
                state, todos=state.todos.modify(todo_id, lambda todo: replace(todo, done=done))
            )
        case ChangeText(id=todo_id, text=text):
            return replace(
                state, todos=state.todos.modify(todo_id, lambda todo: replace(todo, task=text))
            )
        case _:
            return state


def describe(action: TodoAction) -> str:
    """One-line description of an action for the history log."""
    match action:
        case TodoEntity(action=entity_action):
            return type(entity_action).__name__
        case _:
            return type(action).__name__


def history_reducer(state: RootState, action: TodoAction) -> RootState:
    return replace(state, history=(*state.history, describe(action)))
