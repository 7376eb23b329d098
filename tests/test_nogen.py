from fastapi.testclient import TestClient

from duck.nogen import create_app


class TestHandWrittenApp:
    def test_returns_donna(self):
        client = TestClient(create_app())

        response = client.get("/duck")

        assert response.status_code == 200
        assert response.json() == {"id": 1, "name": "Donna", "color": "pink", "size": "medium"}
