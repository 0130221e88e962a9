"""
Key-value stores standing in for browser local storage.

Callers receive a store instead of reaching for a global, so the best-score
and anonymous-id logic run the same way in a browser bridge, a CLI or a test.
"""
import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class StorageUnavailable(Exception):
    """Raised when the backing store cannot be read or written."""


class KeyValueStore:
    """Interface: string keys to string values."""

    def get(self, key: str) -> str | None:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError


class InMemoryStore(KeyValueStore):
    def __init__(self, initial: dict | None = None):
        self._data = dict(initial or {})

    def get(self, key):
        return self._data.get(key)

    def set(self, key, value):
        self._data[key] = value

    def remove(self, key):
        self._data.pop(key, None)


class NullStore(KeyValueStore):
    """Remembers nothing; used where no persistent storage exists."""

    def get(self, key):
        return None

    def set(self, key, value):
        pass

    def remove(self, key):
        pass


class JsonFileStore(KeyValueStore):
    """
    Persists all keys in a single JSON object on disk.

    Every write rewrites the whole file. A missing file reads as empty.
    """

    def __init__(self, path):
        self.path = Path(path)

    def _load(self) -> dict:
        try:
            with self.path.open(encoding="utf-8") as fh:
                data = json.load(fh)
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as exc:
            raise StorageUnavailable(f"Cannot read {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise StorageUnavailable(f"{self.path} does not contain a JSON object")
        return data

    def _dump(self, data: dict) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
            with tmp_path.open("w", encoding="utf-8") as fh:
                json.dump(data, fh)
            tmp_path.replace(self.path)
        except OSError as exc:
            raise StorageUnavailable(f"Cannot write {self.path}: {exc}") from exc

    def get(self, key):
        return self._load().get(key)

    def set(self, key, value):
        data = self._load()
        data[key] = value
        self._dump(data)

    def remove(self, key):
        data = self._load()
        if key in data:
            del data[key]
            self._dump(data)
