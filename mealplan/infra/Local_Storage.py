"""Local key-value storage: string values under fixed keys in one JSON file."""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class LocalStorage:
    def __init__(self, path: Path):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                store = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(f"Storage file {self.path} unreadable, starting empty: {e}")
            return {}
        if not isinstance(store, dict):
            logger.warning(f"Storage file {self.path} is not a key-value object, starting empty")
            return {}
        return store

    def _atomic_write(self, store: Dict[str, str]):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=".storage_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(store, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, self.path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    def get_item(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        store = self._read_all()
        store[key] = value
        self._atomic_write(store)

    def remove_item(self, key: str) -> None:
        store = self._read_all()
        if key in store:
            del store[key]
            self._atomic_write(store)

    def clear(self) -> None:
        self._atomic_write({})


__all__ = ['LocalStorage']
