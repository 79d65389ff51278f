from kooala.sorting import sort_alphabetical, sort_by_priority, sort_chronological
from kooala.task import PriorityTask


def _task(name, date=None, priority=None):
    task = PriorityTask(name=name)
    if date is not None:
        task.add_date(date)
    if priority is not None:
        task.priority = priority
    return task


def test_alphabetical_orders_names():
    tasks = [_task("pears"), _task("apples"), _task("mangoes"), _task("bananas")]
    sort_alphabetical(tasks)
    assert [t.name for t in tasks] == ["apples", "bananas", "mangoes", "pears"]


def test_alphabetical_keeps_all_tasks():
    tasks = [_task("c"), _task("a"), _task("b"), _task("a")]
    originals = list(tasks)
    sort_alphabetical(tasks)
    assert sorted(id(t) for t in tasks) == sorted(id(t) for t in originals)
    assert [t.name for t in tasks] == sorted(t.name for t in originals)


def test_alphabetical_empty_list():
    tasks = []
    sort_alphabetical(tasks)
    assert tasks == []


def test_chronological_earliest_first():
    tasks = [_task("late", "12/1/2024"), _task("early", "1/5/2023"), _task("mid", "6/15/2023")]
    sort_chronological(tasks)
    assert [t.name for t in tasks] == ["early", "mid", "late"]


def test_chronological_undated_goes_last():
    tasks = [_task("none"), _task("late", "12/1/2024"), _task("early", "1/5/2023")]
    sort_chronological(tasks)
    assert [t.name for t in tasks] == ["early", "late", "none"]


def test_chronological_same_month_by_day():
    tasks = [_task("b", "3/20/2023"), _task("a", "3/2/2023")]
    sort_chronological(tasks)
    assert [t.name for t in tasks] == ["a", "b"]


def test_priority_highest_first():
    tasks = [_task("three", priority=3), _task("one", priority=1), _task("two", priority=2)]
    sort_by_priority(tasks)
    assert [t.priority for t in tasks] == [1, 2, 3]


def test_priority_unset_goes_last():
    tasks = [_task("none"), _task("three", priority=3), _task("one", priority=1)]
    sort_by_priority(tasks)
    assert [t.name for t in tasks] == ["one", "three", "none"]
    assert tasks[-1].priority is None