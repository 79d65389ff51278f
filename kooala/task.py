"""Task types: basic, dated, tagged and prioritised."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .dates import verify_month_day_year
from .tag import Tag

MAX_TAGS = 10

COMPLETED = "Completed"
INCOMPLETE = "Incomplete"


def _int_field(width: int) -> str:
    # Mirrors a scanf integer of limited width: the sign counts toward the width.
    return rf"\s*([+-]\d{{1,{width - 1}}}|\d{{1,{width}}})"


_DATE_RE = re.compile(_int_field(2) + "/" + _int_field(2) + "/" + _int_field(4))


@dataclass
class TaskBase:
    """A named task that can be marked done and described."""

    name: str = ""
    task_id: int = 0
    is_done: bool = False
    description: str = ""

    @property
    def status(self) -> str:
        return COMPLETED if self.is_done else INCOMPLETE


@dataclass
class DateTimeTask(TaskBase):
    """A task that may carry a due date."""

    year: int = 0
    month: int = 0
    day: int = 0
    has_date: bool = False

    @classmethod
    def from_task(cls, task: TaskBase) -> DateTimeTask:
        """Build a dated task from an existing task's name and id."""
        return cls(name=task.name, task_id=task.task_id)

    @classmethod
    def from_date(cls, date: str) -> DateTimeTask:
        """Build an unnamed task with the given date; raise ValueError if invalid."""
        task = cls()
        task.add_date(date)
        if not task.has_date:
            raise ValueError("Enter valid date format mm/dd/yyyy")
        return task

    def add_date(self, date: str) -> None:
        """Set the date from ``m/d/yyyy`` text; an invalid date clears has_date."""
        match = _DATE_RE.match(date)
        if match:
            month, day, year = (int(part) for part in match.groups())
            if verify_month_day_year(month, day, year):
                self.month, self.day, self.year = month, day, year
                self.has_date = True
                return
        self.has_date = False

    @property
    def date(self) -> str:
        return f"{self.month}/{self.day}/{self.year}"


@dataclass
class TagTask(DateTimeTask):
    """A dated task holding up to ten tags."""

    tags: list[Tag] = field(default_factory=list)

    @classmethod
    def from_task(cls, task: DateTimeTask) -> TagTask:
        """Build a tagged task from a dated task; the id resets and the date is unset."""
        return cls(
            name=task.name,
            task_id=0,
            is_done=task.status == COMPLETED,
            year=task.year,
            month=task.month,
            day=task.day,
            has_date=False,
        )

    def add_tag(self, name: str) -> None:
        if len(self.tags) >= MAX_TAGS:
            raise ValueError("Too many tags, please delete one before adding")
        self.tags.append(Tag(name))

    def delete_tag(self, name: str) -> None:
        if not self.tags:
            raise ValueError("No tags present, cannot delete")
        self.tags.remove(self.find_tag(name))

    def find_tag(self, name: str) -> Tag:
        """Return the first tag with ``name``; raise ValueError if absent."""
        for tag in self.tags:
            if tag.name == name:
                return tag
        raise ValueError("tag not found, please enter valid tag to delete")

    def display_tags(self) -> str:
        return "TAGS: " + ", ".join(tag.name for tag in self.tags)


@dataclass
class PriorityTask(TagTask):
    """A tagged task with an optional priority (1 is the highest)."""

    _priority: int | None = field(default=None, init=False, repr=False)

    @classmethod
    def from_task(cls, task: TagTask) -> PriorityTask:
        """Build a prioritised task from a tagged task; tags are not carried over."""
        return cls(
            name=task.name,
            task_id=0,
            year=task.year,
            month=task.month,
            day=task.day,
            has_date=task.status == COMPLETED,
        )

    @property
    def priority(self) -> int | None:
        return self._priority

    @priority.setter
    def priority(self, value: int) -> None:
        if value < 1:
            self._priority = None
            raise ValueError("Priority must be 1 or greater (1: Highest priority)")
        self._priority = value

    def remove_priority(self) -> None:
        self._priority = None