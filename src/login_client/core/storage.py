from __future__ import annotations
from pathlib import Path
from tinydb import TinyDB, Query

class KeyValueStorage:
    """String key/value pairs kept in one TinyDB table.

    Plays the part browser local storage plays for a web client: whatever is
    written here is still there after the page (or the process) restarts.
    Every record carries a ``scope``; one scope per browser keeps two
    browsers from seeing each other's values.
    """

    TABLE = "storage"
    DEFAULT_SCOPE = "default"

    def __init__(self, db: TinyDB, scope: str = DEFAULT_SCOPE):
        self.db = db
        self.scope = scope
        self.table = db.table(self.TABLE)

    @classmethod
    def open(cls, path: str | Path) -> "KeyValueStorage":
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        return cls(TinyDB(path))

    def scoped(self, scope: str) -> "KeyValueStorage":
        """Same file, different scope."""
        return KeyValueStorage(self.db, scope=scope)

    def _where(self, key: str):
        q = Query()
        return (q.scope == self.scope) & (q.key == key)

    def get(self, key: str) -> str | None:
        doc = self.table.get(self._where(key))
        return doc["value"] if doc else None

    def set(self, key: str, value: str) -> None:
        self.table.upsert({"scope": self.scope, "key": key, "value": value}, self._where(key))

    def remove(self, key: str) -> None:
        self.table.remove(self._where(key))

    def close(self) -> None:
        self.db.close()
