"""Storage contract shared by every duck backend.

The API layer only talks to a DuckStore. Backends are chosen at startup and
handed to the app, so handlers never know which one they are using.
"""

from abc import ABC, abstractmethod

from duck.schemas import NewRubberDuck, RubberDuck


class DuckStore(ABC):
    """Repository for rubber ducks.

    Implementations must:
    - assign ids themselves, never trusting the caller
    - return ``list_ducks`` sorted by ascending id
    - raise ``StoreUnavailable`` for backend failures
    """

    name: str = "abstract"

    @abstractmethod
    async def list_ducks(self) -> list[RubberDuck]:
        """All ducks, ascending by id."""

    @abstractmethod
    async def create_duck(self, duck: NewRubberDuck) -> RubberDuck:
        """Store a new duck and return it with its assigned id."""

    @abstractmethod
    async def get_duck(self, duck_id: int) -> RubberDuck:
        """Single duck by id. Raises ``DuckNotFound`` if missing."""

    async def open(self) -> None:
        """Prepare the backend. Called once at startup."""
        return None

    async def close(self) -> None:
        """Release backend resources. Called once at shutdown."""
        return None
