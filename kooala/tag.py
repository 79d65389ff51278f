"""Labels attached to tasks."""

from dataclasses import dataclass


@dataclass
class Tag:
    """A named label with a numeric identifier."""

    name: str = ""
    tag_id: int = 0