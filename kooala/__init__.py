"""Terminal task scheduler with dates, tags, priorities and sorting."""

__version__ = "0.1.0"
__all__ = ["admin", "dates", "sorting", "tag", "task", "tasklist"]