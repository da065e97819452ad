"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from picscript.config import Settings
from picscript.dependencies import get_settings
from picscript.main import app
from tests.conftest import FLOWCHART, TWO_BOXES


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["commands_registered"] == 65


def test_commands_listed():
    response = client.get("/api/commands")
    assert response.status_code == 200
    names = response.json()
    assert "box" in names
    assert names == sorted(names)


def test_compile_two_boxes():
    response = client.post("/api/compile", json={"source": TWO_BOXES})
    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True
    assert data["errors"] == []
    scene = data["scene"]
    assert len(scene["items"]) == 2
    assert scene["items"][1]["geometry"]["x"] == 100000
    assert scene["bounds"]["text"] == ["-50.25", "-25.25", "150.25", "25.25"]
    assert data["processing_time_ms"] >= 0


def test_compile_flowchart():
    response = client.post("/api/compile", json={"source": FLOWCHART, "title": "Flow"})
    data = response.json()
    assert data["ok"] is True
    assert [item["kind"] for item in data["scene"]["items"]] == ["box", "line", "box", "line", "box", "line"]
    assert data["scene"]["variables"]["title"] == "Flow"


def test_compile_reports_errors():
    response = client.post("/api/compile", json={"source": "box;\nwibble 3;\n", "name": "bad.pic"})
    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is False
    assert data["scene"] is None
    assert data["abandoned"] is False
    error = data["errors"][0]
    assert error["code"] == 2
    assert error["message"] == 'Unknown command "wibble"'
    assert error["line"] == "wibble 3;"


def test_compile_abandoned():
    response = client.post("/api/compile", json={"source": ") box;\n"})
    data = response.json()
    assert data["ok"] is False
    assert data["abandoned"] is True
    assert data["errors"][0]["fatal"] is True


def test_compile_options():
    source = 'box at (0.4,0);\ntext "$title";\n'
    response = client.post(
        "/api/compile",
        json={"source": source, "resolution": 1000, "no_variables": True},
    )
    data = response.json()
    assert data["ok"] is True
    items = data["scene"]["items"]
    assert items[0]["geometry"]["x"] == 0
    assert items[1]["strings"][0]["text"] == "$title"


def test_compile_refuses_includes_when_disabled(tmp_path):
    inner = tmp_path / "inner.pic"
    inner.write_text("box;\n")
    app.dependency_overrides[get_settings] = lambda: Settings(allow_include=False)
    try:
        response = client.post("/api/compile", json={"source": f"include {inner};\n"})
    finally:
        app.dependency_overrides.clear()
    data = response.json()
    assert data["ok"] is False
    assert data["errors"][0]["code"] == 1


def test_compile_refuses_includes_by_default(tmp_path):
    inner = tmp_path / "private.pic"
    inner.write_text("SECRET-value-123\n")
    response = client.post("/api/compile", json={"source": f"include {inner};\n"})
    data = response.json()
    assert data["ok"] is False
    assert [error["code"] for error in data["errors"]] == [1]
    assert data["errors"][0]["message"].endswith("includes are disabled")
    assert "SECRET" not in response.text


def test_compile_follows_includes_when_enabled(tmp_path):
    inner = tmp_path / "inner.pic"
    inner.write_text("box;\n")
    app.dependency_overrides[get_settings] = lambda: Settings(allow_include=True)
    try:
        response = client.post("/api/compile", json={"source": f"include {inner};\nbox;\n"})
    finally:
        app.dependency_overrides.clear()
    data = response.json()
    assert data["ok"] is True
    assert len(data["scene"]["items"]) == 2


def test_compile_missing_source():
    response = client.post("/api/compile", json={})
    assert response.status_code == 422
