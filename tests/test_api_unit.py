from fastapi.testclient import TestClient

from backend.app import main as api

client = TestClient(api.app)


def test_solve_endpoint_unique_system() -> None:
    response = client.post(
        "/api/solve", json={"matrix": [["1", "2"], ["3", "4"]], "vector": ["5", "6"]}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["classification"] == "unique"
    assert body["rank"] == 2
    assert body["final_answer"] == "x1 = -4\nx2 = 4.5"
    assert body["latex"].startswith("\\documentclass")
    assert len(body["steps"]) == 15
    assert body["verification_steps"][-1]["description"] == "All equations verified"
    assert body["summary"]["validation_status"] == "pass"


def test_solve_endpoint_accepts_numbers_and_exact_precision() -> None:
    response = client.post(
        "/api/solve",
        json={"matrix": [[1, 1], [1, -1]], "vector": ["1/3", "1/6"], "precision": "exact"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["particular"] == ["1/4", "1/12"]
    assert body["basis"] == []


def test_solve_endpoint_inconsistent_system() -> None:
    response = client.post(
        "/api/solve", json={"matrix": [["1", "1"], ["1", "1"]], "vector": ["1", "2"]}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["classification"] == "none"
    assert body["particular"] is None


def test_solve_endpoint_rejects_invalid_cells() -> None:
    response = client.post("/api/solve", json={"matrix": [["1", "x"]], "vector": ["1"]})
    assert response.status_code == 400
    assert response.json()["detail"] == "The specified values in the matrix M are invalid."


def test_solve_endpoint_rejects_empty_matrix_and_bad_precision() -> None:
    assert client.post("/api/solve", json={"matrix": [], "vector": []}).status_code == 400
    response = client.post(
        "/api/solve", json={"matrix": [["1"]], "vector": ["1"], "precision": "lots"}
    )
    assert response.status_code == 400


def test_solve_endpoint_maps_unexpected_errors_to_500(monkeypatch) -> None:
    def _boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(api, "solve_system", _boom)
    response = client.post("/api/solve", json={"matrix": [["1"]], "vector": ["1"]})
    assert response.status_code == 500
    assert "boom" in response.json()["detail"]
