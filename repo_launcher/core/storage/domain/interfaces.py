from abc import ABC, abstractmethod
from typing import Optional

class IKeyValueStore(ABC):
    """
    Contract for a namespaced string key-value slot store.
    Callers serialize their own values (JSON text).
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Returns the stored text for key, or None if the slot is empty."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Overwrites the slot for key with value (whole-value write)."""
        pass
