from dataclasses import dataclass, asdict


@dataclass
class Task:
    """A to-do item. The id is assigned by the store and never changes."""
    id: int
    title: str
    completed: bool = False

    def to_dict(self):
        return asdict(self)
