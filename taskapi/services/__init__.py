from .task_store import TaskStore
from .session_store import SessionStore, MemorySessionStore

__all__ = ["TaskStore", "SessionStore", "MemorySessionStore"]
