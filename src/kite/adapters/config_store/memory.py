"""In-memory config store.

Meant for tests and local experiments. Every saved record is copied into
`saves` so callers can inspect exactly what was persisted, and in which order.
Nothing survives the process.
"""

from dataclasses import replace

from kite.domain.config_record import ConfigRecord
from kite.domain.errors import ConfigUnavailableError
from kite.interfaces.config_store import ConfigStore


class InMemoryConfigStore(ConfigStore):
    """ConfigStore implementation that keeps records in RAM."""

    def __init__(self, initial: ConfigRecord | None = None) -> None:
        self.saves: list[ConfigRecord] = []
        self._current = replace(initial) if initial is not None else None

    @property
    def location(self) -> str:
        return "memory://config"

    @property
    def current(self) -> ConfigRecord | None:
        """A copy of the most recently stored record, if any."""
        return replace(self._current) if self._current is not None else None

    def load(self) -> ConfigRecord:
        if self._current is None:
            raise ConfigUnavailableError(self.location, "nothing stored")
        return replace(self._current)

    def save(self, record: ConfigRecord) -> None:
        self._current = replace(record)
        self.saves.append(replace(record))
