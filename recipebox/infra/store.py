"""Key-value store port used by every repository.

Keys are plain strings with a ``<kind>:<id>`` prefix convention (``recipes:``,
``meal_plan:``, ``shopping_list:`` ...); values are anything JSON can carry.
Repositories receive a store instance instead of reaching for a global one.
"""
import asyncio
import copy
import json
import logging
import os
import shutil
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """A store operation failed; repositories let it propagate to the caller."""


class KeyValueStore(ABC):
    @abstractmethod
    async def get(self, key: str, default: Any = None) -> Any:
        ...

    @abstractmethod
    async def set(self, key: str, value: Any) -> None:
        ...

    @abstractmethod
    async def list(self, prefix: str) -> List[str]:
        ...

    @abstractmethod
    async def delete(self, key: str) -> None:
        ...


def _serialize(key: str, value: Any) -> str:
    try:
        return json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        logger.error("Value for key %r is not JSON serializable: %s", key, e)
        raise StorageError(f"Failed to save data: {e}") from e


class InMemoryStore(KeyValueStore):
    """Dict-backed store. Values go through JSON so callers never share state with it."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, str] = {}
        for k, v in (initial or {}).items():
            self._data[k] = _serialize(k, v)

    async def get(self, key: str, default: Any = None) -> Any:
        raw = self._data.get(key)
        if raw is None:
            return default
        return json.loads(raw)

    async def set(self, key: str, value: Any) -> None:
        self._data[key] = _serialize(key, value)

    async def list(self, prefix: str) -> List[str]:
        return [k for k in self._data if k.startswith(prefix)]

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __len__(self) -> int:
        return len(self._data)


class JsonFileStore(KeyValueStore):
    """All keys in one JSON document on disk, rewritten atomically on every change.

    File I/O runs in a worker thread. Reads fall back to the default when the
    file cannot be read or decoded; writes refuse to replace such a file.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error("Invalid JSON in store file %s: %s", self.path, e)
            raise StorageError(f"Failed to decode data: {e}") from e
        except OSError as e:
            logger.error("Cannot read store file %s: %s", self.path, e)
            raise StorageError(f"Failed to read data: {e}") from e
        if not isinstance(data, dict):
            logger.error("Store file %s does not hold a JSON object", self.path)
            raise StorageError("Failed to decode data: expected a JSON object")
        return data

    def _write(self, data: Dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=".store_", suffix=".json")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                    json.dump(data, tmp, indent=2, ensure_ascii=False)
                shutil.move(tmp_path, str(self.path))
            finally:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
        except (OSError, TypeError, ValueError) as e:
            logger.error("Failed to write store file %s: %s", self.path, e)
            raise StorageError(f"Failed to save data: {e}") from e

    def _set(self, key: str, value: Any) -> None:
        data = self._load()
        data[key] = value
        self._write(data)

    def _delete(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._write(data)

    async def get(self, key: str, default: Any = None) -> Any:
        try:
            data = await asyncio.to_thread(self._load)
        except StorageError:
            return default
        if key not in data:
            return default
        return copy.deepcopy(data[key])

    async def set(self, key: str, value: Any) -> None:
        _serialize(key, value)
        await asyncio.to_thread(self._set, key, value)

    async def list(self, prefix: str) -> List[str]:
        try:
            data = await asyncio.to_thread(self._load)
        except StorageError:
            return []
        return [k for k in data if k.startswith(prefix)]

    async def delete(self, key: str) -> None:
        await asyncio.to_thread(self._delete, key)


__all__ = ["KeyValueStore", "InMemoryStore", "JsonFileStore", "StorageError"]
