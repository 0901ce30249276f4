"""Base class shared by every AI component in the playground."""
from abc import ABC, abstractmethod
from typing import Optional

from .console import Console


class AIComponent(ABC):
    """Common interface for AI-related components.

    A component has a fixed name and description and a two-phase lifecycle:
    ``initialize`` prepares it, ``process`` runs its nominal unit of work.
    Status text goes to the console it was built with.
    """

    def __init__(self, name: str, description: str, console: Optional[Console] = None):
        """Initialize the component.

        Args:
            name: Component name
            description: Component description
            console: Where status notices are written (default: stdout)
        """
        if not name or not description:
            raise ValueError("Component name and description must be non-empty")

        self._name = name
        self._description = description
        self.console = console or Console()

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    def get_name(self) -> str:
        return self._name

    def get_description(self) -> str:
        return self._description

    @abstractmethod
    def initialize(self) -> None:
        """Prepare the component for use. Safe to call more than once."""

    @abstractmethod
    def process(self) -> None:
        """Run the component's main work using its current state."""

    def notify(self, message: str) -> None:
        """Write a status notice."""
        self.console.write(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"
