"""Tests for the FastAPI service mode."""

from __future__ import annotations

import base64

import pytest

try:
    from fastapi.testclient import TestClient
except ModuleNotFoundError:  # pragma: no cover - optional dependency
    pytest.skip("fastapi not installed", allow_module_level=True)

from embedgen.options import resolve_options
from embedgen.service import create_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_render_text_content(client: TestClient) -> None:
    response = client.post(
        "/render",
        json={
            "name": "main.js",
            "content": "",
            "options": {
                "language": "c++",
                "top_level_namespace": "proj",
                "top_level_namespace_style": "legacy",
                "prepend": ["#pragma once"],
            },
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["name"] == "main.js.h"
    assert data["text"] == (
        "#pragma once\n"
        "namespace proj {\n"
        "namespace main_js {\n"
        "constexpr const unsigned char data[] = {};\n"
        "constexpr const unsigned int length = 0;\n"
        "}\n"
        "}"
    )


def test_render_base64_content(client: TestClient) -> None:
    payload = base64.b64encode(b"\x00\x01\xfe").decode("ascii")

    response = client.post("/render", json={"name": "blob.bin", "content_base64": payload})

    assert response.status_code == 200
    assert response.json()["text"] == (
        "const unsigned char blob_bin_data[] = {0,1,254};\n"
        "const unsigned int blob_bin_length = 3;"
    )


def test_render_rejects_invalid_base64(client: TestClient) -> None:
    response = client.post("/render", json={"name": "blob.bin", "content_base64": "not base64!"})
    assert response.status_code == 400


def test_render_reports_filtered_artifacts() -> None:
    app = create_app(lambda payload: resolve_options({"language": "c", "filter": lambda name: False}))
    client = TestClient(app)

    response = client.post("/render", json={"name": "skip.txt", "content": "x"})

    assert response.status_code == 200
    assert response.json() == {"status": "filtered", "name": None, "text": None}
