from typing import Dict, Optional
from ..domain.interfaces import IKeyValueStore

class InMemoryKeyValueStore(IKeyValueStore):
    """
    Process-local store. Used by tests and by `--ephemeral` runs.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value
