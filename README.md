# kooala

kooala is a small interactive task scheduler for the terminal. It keeps a list of tasks. Each task can have a completion status, a description, a due date, up to ten tags and a priority. The list can be sorted by name, by date or by priority.

## Installation

```
pip install .
```

## Running

```
kooala
```

The main menu offers these choices:

1. Display Tasks
2. Add Task
3. Edit Task
4. Delete Task
5. Exit Program

The task list screen offers adding, editing and deleting tasks. It can also sort the tasks alphabetically, chronologically (dated tasks first, earliest first) or by priority (1 first, tasks without a priority last). When you edit a task you choose it by its id. You can then:

- rename it
- mark it complete or incomplete
- add a description
- set a date
- add or delete a tag
- set a priority

The program keeps asking for a valid choice until it gets one. Choosing "Exit Program" ends it, and so does the end of input.

Dates are entered as `mm/dd/yyyy`; `m/d/yyyy` also works. Only real calendar dates from 2023 to 2999 are accepted. If you enter an invalid date, the task no longer counts as dated. A priority must be 1 or greater, and 1 is the most urgent.

## Using it as a library

```python
from kooala.tasklist import TaskList, EditAction
from kooala.sorting import sort_by_priority

tasks = TaskList()
tasks.add_task("write report")
tasks.add_task("buy groceries")
tasks.edit_task(0, EditAction.DATE, "10/30/2023")
tasks.edit_task(1, EditAction.ADD_TAG, "Home")
tasks.edit_task(1, EditAction.PRIORITY, 1)
sort_by_priority(tasks.tasks)
print(tasks.render())
```

Removing a task with `TaskList.remove_task` renumbers the remaining tasks so that their ids match their positions. When a task or tag cannot be found, or when the input is invalid, the library raises `ValueError`.

The package is split into these modules:

- `kooala.dates`: calendar checks: `verify_day`, `verify_month`, `verify_year` and `verify_month_day_year`.
- `kooala.tag`: the `Tag` dataclass, which holds `name` and `tag_id`.
- `kooala.task`: the task types.
  - `TaskBase` has a name, an id, a done flag, a description and a `status` of `"Completed"` or `"Incomplete"`.
  - `DateTimeTask` adds `add_date`, `from_date` and a `date` property.
  - `TagTask` adds `add_tag`, `delete_tag`, `find_tag` and `display_tags`. It holds at most ten tags.
  - `PriorityTask` adds a `priority` property and `remove_priority`.
- `kooala.sorting`: `sort_alphabetical`, `sort_chronological` and `sort_by_priority`. Each sorts a list of tasks in place.
- `kooala.tasklist`: `TaskList` and the `EditAction` enumeration.
- `kooala.admin`: the interactive `Admin` menus, which read from and write to any text streams, and the `main` entry point.

## What it does not do

Tasks live only in memory while the program runs. Nothing is saved to disk or to a database, so the list is empty every time `kooala` starts. There are no user accounts and no logins.

## Tests

```
pip install ".[test]"
pytest
```