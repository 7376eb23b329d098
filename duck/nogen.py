"""
Hand-written handler without a store or a validation gate.

Kept next to the schema-driven app in ``duck.main`` for comparison.

Run with:
    uvicorn duck.nogen:app --port 8080
"""

from fastapi import FastAPI

DONNA = {
    "id": 1,
    "name": "Donna",
    "color": "pink",
    "size": "medium",
}


def create_app() -> FastAPI:
    app = FastAPI(title="Rubber Duck API (hand-written)")

    @app.get("/duck")
    async def get_duck():
        return DONNA

    return app


app = create_app()
