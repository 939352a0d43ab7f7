from abc import ABC, abstractmethod
from typing import Any


class BaseScenario(ABC):
    """Abstract base class for chase scenarios."""

    @abstractmethod
    def setup(self, world: Any) -> None:
        """Place actors and terrain in the world."""
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Return a human readable name for the scenario."""
        pass
