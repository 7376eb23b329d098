import pytest
from fastapi.testclient import TestClient

from duck.config import Settings
from duck.main import create_app
from duck.schemas import NewRubberDuck, RubberDuck
from duck.store import DuckStore, InMemoryStore, StoreUnavailable


class SpyStore(InMemoryStore):
    """In-memory store that records every call it receives."""

    name = "spy"

    def __init__(self):
        super().__init__()
        self.calls: list[str] = []

    async def list_ducks(self):
        self.calls.append("list_ducks")
        return await super().list_ducks()

    async def create_duck(self, duck: NewRubberDuck) -> RubberDuck:
        self.calls.append("create_duck")
        return await super().create_duck(duck)

    async def get_duck(self, duck_id: int) -> RubberDuck:
        self.calls.append("get_duck")
        return await super().get_duck(duck_id)


class BrokenStore(DuckStore):
    """Every operation fails like a lost database connection."""

    name = "broken"

    async def list_ducks(self):
        raise StoreUnavailable("disk I/O error")

    async def create_duck(self, duck):
        raise StoreUnavailable("disk I/O error")

    async def get_duck(self, duck_id):
        raise StoreUnavailable("disk I/O error")


@pytest.fixture
def settings(tmp_path):
    return Settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'duck.db'}")


@pytest.fixture
def spy_store():
    return SpyStore()


@pytest.fixture
def client(spy_store, settings):
    with TestClient(create_app(spy_store, settings)) as test_client:
        yield test_client


@pytest.fixture
def broken_client(settings):
    with TestClient(create_app(BrokenStore(), settings)) as test_client:
        yield test_client


@pytest.fixture
def donna():
    return {"name": "Donna", "color": "pink", "size": "medium"}
