"""The schedule: an ordered collection of prioritised tasks."""

from __future__ import annotations

from collections.abc import Iterator
from enum import IntEnum

from .task import PriorityTask

_RULE = "_" * 59
_PADDING = " " * 25


class EditAction(IntEnum):
    """Changes that can be applied to a task in the schedule."""

    NAME = 1
    COMPLETE = 2
    INCOMPLETE = 3
    DESCRIPTION = 4
    DATE = 5
    ADD_TAG = 6
    DELETE_TAG = 7
    PRIORITY = 8
    RETURN = 9


class TaskList:
    """A named schedule whose task ids follow their positions after removals."""

    def __init__(self, name: str = "Schedule") -> None:
        self.name = name
        self.tasks: list[PriorityTask] = []

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[PriorityTask]:
        return iter(self.tasks)

    def add_task(self, name: str) -> PriorityTask:
        """Append a new task named ``name`` and return it."""
        task = PriorityTask(name=name, task_id=len(self.tasks))
        self.tasks.append(task)
        return task

    def remove_task(self, task_id: int) -> None:
        """Remove the task with ``task_id`` and renumber the rest."""
        if not self.tasks:
            raise ValueError("No tasks present, cannot delete")
        self.tasks.remove(self.find_task(task_id))
        self._renumber()

    def find_task(self, task_id: int) -> PriorityTask:
        """Return the first task with ``task_id``; raise ValueError if absent."""
        for task in self.tasks:
            if task.task_id == task_id:
                return task
        raise ValueError("task not found, please enter valid task to delete")

    def edit_task(self, task_id: int, change: int, value: str | int | None = None) -> None:
        """Apply ``change`` to the task with ``task_id``; unknown changes do nothing."""
        task = self.find_task(task_id)
        try:
            action = EditAction(change)
        except ValueError:
            return
        if action is EditAction.NAME:
            task.name = str(value)
        elif action is EditAction.COMPLETE:
            task.is_done = True
        elif action is EditAction.INCOMPLETE:
            task.is_done = False
        elif action is EditAction.DESCRIPTION:
            task.description = str(value)
        elif action is EditAction.DATE:
            task.add_date(str(value))
        elif action is EditAction.ADD_TAG:
            task.add_tag(str(value))
        elif action is EditAction.DELETE_TAG:
            task.delete_tag(str(value))
        elif action is EditAction.PRIORITY:
            task.priority = int(value)

    def render(self) -> str:
        """Return the schedule as display text."""
        parts = [f"{_RULE}\n{_PADDING}SCHEDULE{_PADDING}\n{_RULE}\n"]
        for task in self.tasks:
            entry = f"\n\n{task.task_id}. {task.name} --> {task.status}"
            if task.has_date:
                entry += f" -- {task.date}"
            if task.priority is not None:
                entry += f"\n PRIORITY:  {task.priority}"
            entry += f"\n{task.display_tags()}"
            if task.description:
                entry += f"\n\t * {task.description}"
            parts.append(entry + "\n\n")
        if not self.tasks:
            parts.append("No Tasks to do\n")
        return "".join(parts)

    def _renumber(self) -> None:
        for position, task in enumerate(self.tasks):
            task.task_id = position