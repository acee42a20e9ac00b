from typing import Any, MutableMapping, Optional


class _Unresolved:
    """Stored for keys that were looked up and had no result."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNRESOLVED"

    def __bool__(self) -> bool:
        return False


UNRESOLVED = _Unresolved()
_ABSENT = object()


class GeocodeCache:
    """Memoized geocoding results. No eviction, no expiry."""

    def __init__(self, store: Optional[MutableMapping[str, Any]] = None):
        self.store = {} if store is None else store

    def get(self, key: str, default: Any = None) -> Any:
        return self.store.get(key, default)

    def put(self, key: str, value: Any) -> None:
        self.store[key] = UNRESOLVED if value is None else value

    def __contains__(self, key: str) -> bool:
        return self.store.get(key, _ABSENT) is not _ABSENT

    def __len__(self) -> int:
        return len(self.store)
