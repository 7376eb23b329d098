from duck.schemas import NewRubberDuck, RubberDuck
from duck.store.base import DuckStore
from duck.store.errors import DuckNotFound
from duck.store.rwlock import AsyncRWLock


class InMemoryStore(DuckStore):
    """Keeps ducks in a dict until the process exits."""

    name = "memory"

    def __init__(self) -> None:
        self._ducks: dict[int, RubberDuck] = {}
        self._index = 0
        self._lock = AsyncRWLock()

    async def list_ducks(self) -> list[RubberDuck]:
        async with self._lock.read():
            ducks = [duck.model_copy() for duck in self._ducks.values()]

        ducks.sort(key=lambda duck: duck.id)
        return ducks

    async def create_duck(self, duck: NewRubberDuck) -> RubberDuck:
        async with self._lock.write():
            self._index += 1
            stored = RubberDuck(
                id=self._index,
                name=duck.name,
                color=duck.color,
                size=duck.size,
            )
            self._ducks[stored.id] = stored

        return stored.model_copy()

    async def get_duck(self, duck_id: int) -> RubberDuck:
        async with self._lock.read():
            duck = self._ducks.get(duck_id)

        if duck is None:
            raise DuckNotFound(duck_id)
        return duck.model_copy()
