"""Test score persistence and the storage backends."""

import json

import pytest

from src.game import (
    JsonFileStorage,
    KeyValueStorage,
    MemoryStorage,
    StatEntry,
    StatsRecorder,
    StorageError,
)
from src.game.stats import STATS_FIELD


def make_entry(points: int, **kwargs) -> StatEntry:
    values = {
        "date": f"2026-01-01T00:00:{points % 60:02d}",
        "theme": "Animais",
        "difficulty": "facil",
        "points": points,
        "player_name": "Ana",
    }
    values.update(kwargs)
    return StatEntry(**values)


class BrokenStorage(KeyValueStorage):
    """Storage whose every call fails."""

    def get(self, key):
        raise StorageError("disk unavailable")

    def set(self, key, value):
        raise StorageError("disk unavailable")

    def remove(self, key):
        raise StorageError("disk unavailable")


class TestStatsRecorder:
    """Test cases for StatsRecorder."""

    def test_record_and_list(self):
        stats = StatsRecorder(MemoryStorage())
        assert stats.record(make_entry(120)) is True

        entries = stats.list()
        assert len(entries) == 1
        assert entries[0].points == 120
        assert entries[0].player_name == "Ana"

    def test_newest_first(self):
        stats = StatsRecorder(MemoryStorage())
        for points in (10, 20, 30):
            stats.record(make_entry(points))

        assert [e.points for e in stats.list()] == [30, 20, 10]

    def test_cap_evicts_oldest(self):
        """The 51st entry pushes out the oldest one."""
        stats = StatsRecorder(MemoryStorage(), limit=50)
        for points in range(51):
            stats.record(make_entry(points))

        entries = stats.list()
        assert len(entries) == 50
        assert entries[0].points == 50
        assert entries[-1].points == 1
        assert 0 not in [e.points for e in entries]

    def test_shared_blob_preserved(self):
        """Other features' data under the same key is untouched."""
        storage = MemoryStorage()
        storage.set("quiz-app-data", json.dumps({"quizHistory": [1, 2, 3]}))

        stats = StatsRecorder(storage)
        stats.record(make_entry(40))

        blob = json.loads(storage.get("quiz-app-data"))
        assert blob["quizHistory"] == [1, 2, 3]
        assert len(blob[STATS_FIELD]) == 1

    def test_camel_case_on_disk(self):
        storage = MemoryStorage()
        StatsRecorder(storage).record(make_entry(40, outcome="win"))

        stored = json.loads(storage.get("quiz-app-data"))[STATS_FIELD][0]
        assert stored["playerName"] == "Ana"
        assert stored["outcome"] == "win"
        assert "player_name" not in stored

    def test_storage_failure_not_raised(self):
        """A failing backend loses the entry but never raises."""
        stats = StatsRecorder(BrokenStorage())
        assert stats.record(make_entry(40)) is False
        assert stats.list() == []
        stats.clear()

    def test_corrupt_blob_not_raised(self):
        storage = MemoryStorage()
        storage.set("quiz-app-data", "{not json")

        stats = StatsRecorder(storage)
        assert stats.list() == []
        assert stats.record(make_entry(40)) is False

    def test_malformed_entries_skipped(self):
        storage = MemoryStorage()
        storage.set("quiz-app-data", json.dumps({STATS_FIELD: [
            {"date": "2026-01-01", "theme": "Cores", "difficulty": "medio", "points": 80, "playerName": "Bia"},
            {"date": "2026-01-02", "points": "lots"},
            "garbage",
        ]}))

        entries = StatsRecorder(storage).list()
        assert len(entries) == 1
        assert entries[0].player_name == "Bia"

    def test_clear(self):
        storage = MemoryStorage()
        storage.set("quiz-app-data", json.dumps({"other": True}))
        stats = StatsRecorder(storage)
        stats.record(make_entry(40))

        stats.clear()

        assert stats.list() == []
        assert json.loads(storage.get("quiz-app-data")) == {"other": True}


class TestJsonFileStorage:
    """Test cases for the file-backed storage."""

    def test_persists_across_instances(self, tmp_path):
        path = tmp_path / "data" / "storage.json"
        StatsRecorder(JsonFileStorage(path)).record(make_entry(70))

        entries = StatsRecorder(JsonFileStorage(path)).list()
        assert [e.points for e in entries] == [70]

    def test_missing_file_reads_empty(self, tmp_path):
        storage = JsonFileStorage(tmp_path / "absent.json")
        assert storage.get("anything") is None

    def test_remove(self, tmp_path):
        storage = JsonFileStorage(tmp_path / "storage.json")
        storage.set("a", "1")
        storage.set("b", "2")
        storage.remove("a")

        assert storage.get("a") is None
        assert storage.get("b") == "2"

    def test_corrupt_file_raises_storage_error(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text("[1, 2")

        with pytest.raises(StorageError):
            JsonFileStorage(path).get("quiz-app-data")

    def test_non_object_file_raises_storage_error(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text("[1, 2]")

        with pytest.raises(StorageError):
            JsonFileStorage(path).get("quiz-app-data")
