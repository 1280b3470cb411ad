import json
import logging
from typing import Any, Dict, List

from pydantic import ValidationError

from .errors import StorageError
from .models import StatEntry
from .storage import KeyValueStorage

logger = logging.getLogger(__name__)

STATS_FIELD = "wordSearchStats"


class StatsRecorder:
    """
    Persists round outcomes into a JSON blob shared with other features.

    Entries live under `STATS_FIELD` inside the blob stored at
    `storage_key`, newest first, capped at `limit` entries. Storage
    failures are logged and never raised.

    Attributes:
        storage: Backend holding the shared blob
        storage_key: Namespaced key of the shared blob
        limit: Maximum number of entries kept
    """

    def __init__(self, storage: KeyValueStorage, storage_key: str = "quiz-app-data", limit: int = 50):
        self.storage = storage
        self.storage_key = storage_key
        self.limit = limit

    def _load_blob(self) -> Dict[str, Any]:
        raw = self.storage.get(self.storage_key)
        if not raw:
            return {}
        data = json.loads(raw)
        return data if isinstance(data, dict) else {}

    def record(self, entry: StatEntry) -> bool:
        """
        Add an entry, evicting the oldest beyond the cap.

        Returns:
            True if the entry was saved, False if storage failed
        """
        try:
            blob = self._load_blob()
            stats = blob.get(STATS_FIELD)
            if not isinstance(stats, list):
                stats = []
            stats.insert(0, entry.model_dump(by_alias=True))
            del stats[self.limit:]
            blob[STATS_FIELD] = stats
            self.storage.set(self.storage_key, json.dumps(blob))
        except (StorageError, ValueError) as e:
            logger.error(f"Failed to save word search stats: {e}")
            return False
        return True

    def list(self) -> List[StatEntry]:
        """All stored entries, newest first. Unreadable entries are skipped."""
        try:
            blob = self._load_blob()
        except (StorageError, ValueError) as e:
            logger.error(f"Failed to load word search stats: {e}")
            return []

        entries: List[StatEntry] = []
        for item in blob.get(STATS_FIELD) or []:
            try:
                entries.append(StatEntry.model_validate(item))
            except ValidationError as e:
                logger.warning(f"Skipping malformed stats entry: {e}")
        return entries

    def clear(self) -> None:
        """Remove all entries, leaving the rest of the shared blob intact."""
        try:
            blob = self._load_blob()
            blob.pop(STATS_FIELD, None)
            self.storage.set(self.storage_key, json.dumps(blob))
        except (StorageError, ValueError) as e:
            logger.error(f"Failed to clear word search stats: {e}")
