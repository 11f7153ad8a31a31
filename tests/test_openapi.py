"""Tests for the generated API documentation."""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def schema(client: TestClient) -> dict:
    response = client.get("/openapi.json")
    assert response.status_code == 200
    return response.json()


@pytest.mark.unit
def test_openapi_info(schema: dict) -> None:
    assert schema["openapi"].startswith("3.")
    assert schema["info"]["title"] == "API de Usuarios"
    assert schema["info"]["version"] == "1.0.0"
    assert schema["servers"] == [{"url": "http://localhost:3000"}]


@pytest.mark.unit
def test_openapi_documents_user_routes(schema: dict) -> None:
    paths = schema["paths"]

    assert set(paths["/users"]) == {"get", "post"}
    assert set(paths["/users/{user_id}"]) == {"get", "put", "delete"}
    assert "/users/" not in paths
    assert paths["/users"]["get"]["summary"] == "Obtener todos los usuarios"
    assert paths["/users"]["post"]["responses"]["201"]["description"] == "Usuario creado"


@pytest.mark.unit
def test_openapi_documents_not_found(schema: dict) -> None:
    for method in ("get", "put", "delete"):
        responses = schema["paths"]["/users/{user_id}"][method]["responses"]
        assert responses["404"]["description"] == "Usuario no encontrado"


@pytest.mark.unit
def test_openapi_user_schema(schema: dict) -> None:
    user = schema["components"]["schemas"]["User"]

    assert user["properties"]["id"]["type"] == "integer"
    assert "id" in user["required"]


@pytest.mark.unit
def test_swagger_ui_served(client: TestClient) -> None:
    response = client.get("/api-docs")

    assert response.status_code == 200
    assert "swagger-ui" in response.text.lower()
