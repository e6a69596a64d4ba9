"""
JSON-file implementation of the key-value repository.

The whole store is one JSON object on disk. A missing or corrupt file is
treated as an empty store; the shuffle service then regenerates its state.
"""

import json
from pathlib import Path
from threading import Lock
from typing import Dict, Optional, Union

from versecard.logging_config import get_logger
from .key_value_repository import KeyValueRepository

logger = get_logger("api.progress_store")


class JsonFileKeyValueRepository(KeyValueRepository):
    """
    File-backed storage, rewritten atomically on every ``set``.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._lock = Lock()

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning(f"Progress file {self.path} unreadable, starting empty: {exc}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Progress file {self.path} is not a JSON object, starting empty")
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        tmp_path.replace(self.path)

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read()
            data[key] = value
            self._write(data)

    def delete(self, key: str) -> bool:
        with self._lock:
            data = self._read()
            if key not in data:
                return False
            del data[key]
            self._write(data)
            return True
