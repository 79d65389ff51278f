"""In-place orderings for task lists: by name, by date and by priority."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import combinations

from .task import PriorityTask

_OutOfOrder = Callable[[PriorityTask, PriorityTask], bool]


def _exchange_sort(tasks: MutableSequence[PriorityTask], out_of_order: _OutOfOrder) -> None:
    # Each earlier slot is compared with every later one and swapped when out of order.
    # With the chronological and priority rules this differs from a key-based sort,
    # so the pairwise exchange is kept on purpose.
    for first, second in combinations(range(len(tasks)), 2):
        if out_of_order(tasks[first], tasks[second]):
            tasks[first], tasks[second] = tasks[second], tasks[first]


def _name_after(a: PriorityTask, b: PriorityTask) -> bool:
    return a.name > b.name


def _later_or_undated(a: PriorityTask, b: PriorityTask) -> bool:
    if not a.has_date:
        return True
    if not b.has_date:
        return False
    if a.year > b.year:
        return True
    if a.year >= b.year and a.month > b.month:
        return True
    return a.year >= b.year and a.month >= b.month and a.day >= b.day


def _lower_priority(a: PriorityTask, b: PriorityTask) -> bool:
    if a.priority is None:
        return True
    return b.priority is not None and a.priority > b.priority


def sort_alphabetical(tasks: MutableSequence[PriorityTask]) -> None:
    """Order tasks by name, in place."""
    _exchange_sort(tasks, _name_after)


def sort_chronological(tasks: MutableSequence[PriorityTask]) -> None:
    """Order dated tasks earliest first, undated tasks last, in place."""
    _exchange_sort(tasks, _later_or_undated)


def sort_by_priority(tasks: MutableSequence[PriorityTask]) -> None:
    """Order tasks from highest priority (1) down, unprioritised last, in place."""
    _exchange_sort(tasks, _lower_priority)