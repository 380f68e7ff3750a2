from abc import ABC, abstractmethod
from typing import Any


class IClient(ABC):
    """Interface of every client wrapper: it hands out the object doing the actual calls"""

    @abstractmethod
    def get_client(self) -> Any:
        pass
