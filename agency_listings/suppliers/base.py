from abc import ABC, abstractmethod
from typing import Any, Dict, List


class Supplier(ABC):
    @property
    @abstractmethod
    def name(self) -> str:
        """Short unique feed name, e.g. 'current'."""

    @property
    def optional(self) -> bool:
        return False

    @abstractmethod
    def fetch(self) -> List[Dict[str, Any]]:
        """Return every raw item of this feed in API order."""
