"""Config store adapters."""

from .json_file import JsonFileConfigStore
from .memory import InMemoryConfigStore

__all__ = ["JsonFileConfigStore", "InMemoryConfigStore"]
