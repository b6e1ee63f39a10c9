"""Config store interface definitions."""

import abc

from kite.domain.config_record import ConfigRecord


class ConfigStore(abc.ABC):
    """Abstract base class for persisting the configuration record."""

    @property
    @abc.abstractmethod
    def location(self) -> str:
        """Human-readable location of the persisted configuration."""

    @abc.abstractmethod
    def load(self) -> ConfigRecord:
        """Load the persisted configuration record.

        Returns:
            ConfigRecord: A fresh record populated from storage.

        Raises:
            ConfigUnavailableError: If nothing is stored yet, or the stored
                configuration cannot be read or parsed.
        """

    @abc.abstractmethod
    def save(self, record: ConfigRecord) -> None:
        """Persist the configuration record.

        Implementations must be atomic (a reader never observes a partially
        written record) and idempotent (saving the same record twice leaves
        the same stored state).

        Args:
            record (ConfigRecord): The record to persist.

        Raises:
            PersistenceError: If the record cannot be written.
        """
