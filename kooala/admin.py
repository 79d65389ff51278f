"""Interactive text menus for managing the schedule."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from .sorting import sort_alphabetical, sort_by_priority, sort_chronological
from .tasklist import EditAction, TaskList

_MAIN_MENU = (
    "Kooala Task Scheduler\n"
    "Options:\n"
    "1. Display Tasks\n"
    "2. Add Task\n"
    "3. Edit Task \n"
    "4. Delete Task \n"
    "5. Exit Program\n"
    "Please select an option: "
)

_LIST_MENU = (
    "Options:\n"
    "1. Return to Main Menu\n"
    "2. Add Task\n"
    "3. Edit Task\n"
    "4. Delete Task\n"
    "5. Sort Alphabetically\n"
    "6. Sort Chronologically \n"
    "7. Sort by Priority\n"
    "Please select an option: "
)

_EDIT_MENU = (
    "What would you like to change?\n"
    "1. name\n"
    "2. mark complete\n"
    "3. mark incomplete\n"
    "4. add description\n"
    "5. add/change date\n"
    "6. add tag\n"
    "7. delete tag\n"
    "8. add/edit priority\n"
    "9. return\n"
)

_VALUE_PROMPTS = {
    EditAction.NAME: "please enter the name you would like to use \n",
    EditAction.DESCRIPTION: "please enter the description for your task \n",
    EditAction.DATE: "please enter the date for this task in the format mm/dd/yyyy \n",
    EditAction.ADD_TAG: "please enter a tag to add to this task\n",
    EditAction.DELETE_TAG: "please enter a tag to delete\n",
    EditAction.PRIORITY: (
        "please enter the priority (1-10) of the task 1: Urgent -> 10: Doesn't matter\n"
    ),
}

_INVALID_CHOICE = "Please input a valid choice"


class Admin:
    """Menu-driven front end over a TaskList, reading and writing text streams."""

    def __init__(
        self,
        schedule: TaskList | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.schedule = schedule if schedule is not None else TaskList()
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    def run(self) -> None:
        """Show the main menu until the user exits or input ends."""
        try:
            self.main_menu()
        except EOFError:
            pass

    def main_menu(self) -> None:
        while True:
            self._clear_screen()
            self._write(_MAIN_MENU)
            try:
                choice = self._read_choice(1, 5)
                if choice == 1:
                    self.task_list_menu()
                elif choice == 2:
                    self._add_task()
                elif choice == 3:
                    self.edit_task_menu()
                elif choice == 4:
                    self._write(self.schedule.render())
                    self._delete_task()
                else:
                    self._write("\n Goodbye! \n")
                    return
            except ValueError as exc:
                self._write(f"{exc}\n")

    def task_list_menu(self) -> None:
        while True:
            self._clear_screen()
            self._write(self.schedule.render())
            self._write("\n\n")
            self._write(_LIST_MENU)
            try:
                choice = self._read_choice(1, 7)
                if choice == 1:
                    return
                if choice == 2:
                    self._add_task()
                elif choice == 3:
                    self.edit_task_menu()
                elif choice == 4:
                    self._delete_task()
                elif choice == 5:
                    sort_alphabetical(self.schedule.tasks)
                elif choice == 6:
                    sort_chronological(self.schedule.tasks)
                else:
                    sort_by_priority(self.schedule.tasks)
            except ValueError as exc:
                self._write(f"{exc}\n")

    def edit_task_menu(self) -> None:
        while True:
            self._clear_screen()
            self._write(self.schedule.render())
            self._write("\n\n")
            self._write("Enter Task Id or type -1 to return to main menu: \n")
            try:
                task_id = self._read_choice(-1, len(self.schedule) - 1)
            except ValueError as exc:
                self._write(f"{exc}\n")
                continue
            if task_id == -1:
                return
            self._edit_task(task_id)

    def _edit_task(self, task_id: int) -> None:
        while True:
            self._clear_screen()
            self._write(self.schedule.render())
            self._write("\n\n")
            self._write(_EDIT_MENU)
            try:
                action = EditAction(self._read_int())
            except ValueError:
                self._write(f"{_INVALID_CHOICE}\n")
                continue
            if action is EditAction.RETURN:
                return
            try:
                value = self._ask_value(action)
                self.schedule.edit_task(task_id, action, value)
            except ValueError as exc:
                self._write(f"{exc}\n")

    def _ask_value(self, action: EditAction) -> str | int | None:
        prompt = _VALUE_PROMPTS.get(action)
        if prompt is None:
            return None
        self._write(prompt)
        if action is EditAction.PRIORITY:
            return self._read_int()
        return self._read_line()

    def _add_task(self) -> None:
        self._write("Enter Task Name: \n")
        self.schedule.add_task(self._read_line())

    def _delete_task(self) -> None:
        self._write("Enter Task ID to delete: \n")
        self.schedule.remove_task(self._read_int())

    def _clear_screen(self) -> None:
        self._write("\n" * 50)

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _read_line(self) -> str:
        line = self._in.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def _read_int(self) -> int:
        text = self._read_line().strip()
        try:
            return int(text)
        except ValueError:
            raise ValueError(_INVALID_CHOICE) from None

    def _read_choice(self, low: int, high: int) -> int:
        value = self._read_int()
        if not low <= value <= high:
            raise ValueError(_INVALID_CHOICE)
        return value


def main(argv: list[str] | None = None) -> int:
    """Start the interactive task scheduler."""
    parser = argparse.ArgumentParser(prog="kooala", description="Kooala task scheduler")
    parser.parse_args(argv)
    Admin().run()
    return 0