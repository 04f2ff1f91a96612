# logitrack/adapters/outbound/persistence/local/key_value_store.py

"""
Armazenamento chave-valor embutido, persistido em um único arquivo JSON.

Cada chave guarda uma lista serializada de registros. As operações são
síncronas e protegidas por um lock; o adapter as executa fora do event loop.
Sem caminho configurado, os dados ficam apenas em memória.
"""

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

Records = List[Dict[str, Any]]


class JsonFileKeyValueStore:
    """
    Key-value store holding one JSON list per key.

    Attributes:
        path: File holding the whole document, or None for memory only
        prefix: Namespace prepended to every key
    """

    def __init__(self, path: Optional[str] = None, prefix: str = "logitrack_"):
        self.path = Path(path) if path else None
        self.prefix = prefix
        self._lock = threading.RLock()
        self._memory: Dict[str, Records] = {}

    def _key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    def _load(self) -> Dict[str, Records]:
        if self.path is None:
            return self._memory
        if not self.path.exists():
            return {}
        with self.path.open("r", encoding="utf-8") as fh:
            content = fh.read()
        return json.loads(content) if content.strip() else {}

    def _dump(self, document: Dict[str, Records]) -> None:
        if self.path is None:
            self._memory = document
            return
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with tmp_path.open("w", encoding="utf-8") as fh:
            json.dump(document, fh, ensure_ascii=False)
        os.replace(tmp_path, self.path)

    def initialize(self) -> None:
        """Create the backing file if it does not exist yet."""
        with self._lock:
            if self.path is None or self.path.exists():
                return
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._dump({})
            logger.info(f"Local storage file created at {self.path}")

    def get_list(self, key: str) -> Records:
        with self._lock:
            return list(self._load().get(self._key(key), []))

    def save_list(self, key: str, records: Records) -> None:
        with self._lock:
            document = dict(self._load())
            document[self._key(key)] = records
            self._dump(document)

    def update_list(self, key: str, mutate: Callable[[Records], Records]) -> Records:
        """Read, transform and write one list atomically with respect to this store."""
        with self._lock:
            document = dict(self._load())
            updated = mutate(list(document.get(self._key(key), [])))
            document[self._key(key)] = updated
            self._dump(document)
            return updated

    def remove(self, key: str) -> None:
        with self._lock:
            document = dict(self._load())
            document.pop(self._key(key), None)
            self._dump(document)
