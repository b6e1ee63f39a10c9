"""Local filesystem config store backed by a single JSON document.

Document shape::

    {"access_token": "...", "api_key": "...", "team": "...", "team_id": "..."}

Unknown keys are ignored on load. Writes go to a temporary file in the target
directory which is then moved over the target with `os.replace`, so a reader
sees either the previous document or the new one, never a partial write.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from kite.domain.config_record import ConfigRecord
from kite.domain.errors import ConfigUnavailableError, PersistenceError
from kite.interfaces.config_store import ConfigStore

logger = logging.getLogger(__name__)

# document key -> record attribute
FIELDS = {
    "api_key": "api_key",
    "access_token": "access_token",
    "team_id": "team_id",
    "team": "team_name",
}
FILE_MODE = 0o600


class JsonFileConfigStore(ConfigStore):
    """ConfigStore implementation that uses a JSON file on the local filesystem."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)

    @property
    def location(self) -> str:
        return str(self._path)

    @property
    def path(self) -> Path:
        """Path of the JSON document."""
        return self._path

    def load(self) -> ConfigRecord:
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise ConfigUnavailableError(self.location, "file not found") from None
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigUnavailableError(self.location, str(e)) from e

        try:
            document = json.loads(text)
        except (ValueError, RecursionError) as e:
            raise ConfigUnavailableError(self.location, f"invalid JSON: {e}") from e

        return self._to_record(document)

    def save(self, record: ConfigRecord) -> None:
        payload = json.dumps(self._to_document(record), indent=2, sort_keys=True) + "\n"
        tmp_path: Path | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._path.parent,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_path = Path(tmp.name)
                tmp.write(payload)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.chmod(tmp_path, FILE_MODE)
            os.replace(tmp_path, self._path)
        except OSError as e:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            raise PersistenceError(self.location, str(e)) from e
        logger.debug("Saved configuration to %s", self.location)

    # --- Internal Helpers ---

    def _to_record(self, document: Any) -> ConfigRecord:
        if not isinstance(document, dict):
            raise ConfigUnavailableError(
                self.location, f"expected a JSON object, got {type(document).__name__}"
            )

        values: dict[str, str] = {}
        for key, attribute in FIELDS.items():
            value = document.get(key)
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise ConfigUnavailableError(
                    self.location, f"{key!r} must be a string, got {type(value).__name__}"
                )
            values[attribute] = value

        record = ConfigRecord(api_key=values["api_key"], access_token=values["access_token"])
        if values["team_id"] and values["team_name"]:
            record.set_team(values["team_id"], values["team_name"])
        elif values["team_id"] or values["team_name"]:
            logger.warning(
                "Ignoring incomplete default team in %s; a team will be selected again.",
                self.location,
            )
        return record

    @staticmethod
    def _to_document(record: ConfigRecord) -> dict[str, str]:
        return {key: getattr(record, attribute) for key, attribute in FIELDS.items()}
