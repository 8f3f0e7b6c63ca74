from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from handlers import rich_text_handler, string_arrays_handler
from lib.storage.string_arrays import StringArraysStorage
from lib.txt_span import ResourceNotFound


@pytest.fixture
def storage():
    return MagicMock(spec=StringArraysStorage)


@pytest.fixture
def client(storage):
    app = FastAPI()
    app.include_router(rich_text_handler.router, prefix="/api")
    app.include_router(string_arrays_handler.router, prefix="/api")
    app.state.string_arrays_storage = storage
    return TestClient(app)


def test_rich_text_from_segments(client):
    response = client.post(
        "/api/rich-text",
        json={
            "segments": ["a", "b", "c"],
            "insert_separator": True,
            "annotations": [
                {"kind": "underline", "indices": [0]},
                {"kind": "foreground_color", "indices": [2], "color": "#00ff00"},
            ],
        },
    )

    assert response.status_code == 200
    assert response.json() == {
        "text": "a b c",
        "ranges": [
            {"start": 0, "end": 2, "annotation": {"kind": "underline"}},
            {
                "start": 4,
                "end": 5,
                "annotation": {"kind": "foreground_color", "color": 0xFF00FF00},
            },
        ],
        "html": '<u>a </u>b <span style="color:#00ff00">c</span>',
    }


def test_rich_text_style_parameters(client):
    response = client.post(
        "/api/rich-text",
        json={
            "segments": ["big", "bold"],
            "annotations": [
                {"kind": "style", "indices": [1], "style": "bold"},
                {"kind": "relative_size", "indices": [0], "proportion": 1.5},
            ],
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["text"] == "bigbold"
    assert [r["annotation"] for r in body["ranges"]] == [
        {"kind": "relative_size", "proportion": 1.5},
        {"kind": "style", "style": "bold"},
    ]


def test_rich_text_from_string_array(client, storage):
    storage.get_text_array.return_value = ["Hallo", "wereld"]

    response = client.post(
        "/api/rich-text",
        json={"array_id": "greeting", "locale": "nl", "insert_separator": True},
    )

    assert response.status_code == 200
    assert response.json()["text"] == "Hallo wereld"
    storage.get_text_array.assert_called_once_with("greeting", locale="nl")


def test_rich_text_unknown_string_array(client, storage):
    storage.get_text_array.side_effect = ResourceNotFound("greeting")

    response = client.post("/api/rich-text", json={"array_id": "greeting"})

    assert response.status_code == 404


@pytest.mark.parametrize(
    "payload",
    [
        {"segments": ["a", "b"], "annotations": [{"kind": "underline", "indices": [2]}]},
        {"segments": []},
        {
            "segments": ["a"],
            "annotations": [{"kind": "background_color", "indices": [0], "color": "teal"}],
        },
    ],
)
def test_rich_text_builder_errors_are_bad_requests(client, payload):
    assert client.post("/api/rich-text", json=payload).status_code == 400


@pytest.mark.parametrize(
    "payload",
    [
        {"segments": ["a"], "array_id": "greeting"},
        {},
        {"segments": ["a"], "annotations": [{"kind": "url", "indices": [0]}]},
        {"segments": ["a"], "annotations": [{"kind": "underline", "indices": []}]},
        {"segments": ["a"], "annotations": [{"kind": "blink", "indices": [0]}]},
    ],
)
def test_rich_text_invalid_requests(client, payload):
    assert client.post("/api/rich-text", json=payload).status_code == 422


def test_put_string_array(client, storage):
    storage.save.return_value = {"array_id": "greeting", "locale": "nl", "items": ["a"]}

    response = client.put("/api/string-arrays/greeting", json={"items": ["a"], "locale": "nl"})

    assert response.status_code == 200
    assert response.json() == {"array_id": "greeting", "locale": "nl", "items": ["a"]}
    storage.save.assert_called_once_with("greeting", ["a"], locale="nl")


def test_get_string_array(client, storage):
    storage.get.return_value = {"array_id": "greeting", "locale": "default", "items": ["a"]}

    response = client.get("/api/string-arrays/greeting", params={"locale": "fr"})

    assert response.status_code == 200
    assert response.json()["locale"] == "default"
    storage.get.assert_called_once_with("greeting", locale="fr")


def test_get_string_array_not_found(client, storage):
    storage.get.return_value = None
    assert client.get("/api/string-arrays/greeting").status_code == 404


def test_delete_string_array(client, storage):
    storage.delete.return_value = True
    assert client.delete("/api/string-arrays/greeting").json()["deleted"] is True

    storage.delete.return_value = False
    assert client.delete("/api/string-arrays/greeting").status_code == 404


def test_rich_text_script_urls_render_as_text(client):
    response = client.post(
        "/api/rich-text",
        json={
            "segments": ["go"],
            "annotations": [
                {"kind": "url", "indices": [0], "url": "javascript:alert(document.cookie)"},
                {"kind": "image", "indices": [0], "image": "javascript:alert(1)"},
            ],
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["html"] == "go"
    assert body["ranges"][0]["annotation"] == {
        "kind": "url",
        "url": "javascript:alert(document.cookie)",
    }


def test_rich_text_typeface_cannot_add_declarations(client):
    response = client.post(
        "/api/rich-text",
        json={
            "segments": ["go"],
            "annotations": [
                {"kind": "typeface", "indices": [0], "family": "serif;background:url(x)"},
            ],
        },
    )

    assert response.status_code == 200
    assert response.json()["html"] == (
        '<span style="font-family:&quot;serif;background:url(x)&quot;">go</span>'
    )
