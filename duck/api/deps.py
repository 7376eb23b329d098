from fastapi import Request

from duck.store.base import DuckStore


def get_store(request: Request) -> DuckStore:
    """Dependency for the store the app was built with."""
    return request.app.state.store
