"""Navigation interface."""
from abc import ABC, abstractmethod
from typing import List, Optional


class Navigator(ABC):
    """Moves the host application between screens."""

    @abstractmethod
    def navigate(self, destination: str) -> None:
        """Leave the current screen for ``destination``."""
        pass


class InMemoryNavigator(Navigator):
    """Navigator that only records where it was sent."""

    def __init__(self):
        self.history: List[str] = []

    def navigate(self, destination: str) -> None:
        self.history.append(destination)

    @property
    def current(self) -> Optional[str]:
        """Last destination, or None if never navigated."""
        return self.history[-1] if self.history else None
