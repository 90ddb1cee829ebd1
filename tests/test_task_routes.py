# tests/test_task_routes.py

from __future__ import annotations

from bson import ObjectId

from todolist.models.task_store import TaskStore

from .fakes import BrokenCollection

URL = "/api/tasks"


def _create(client, title: str) -> dict:
    resp = client.post(URL, json={"title": title})
    assert resp.status_code == 201
    return resp.get_json()["task"]


def test_end_to_end_lifecycle(client) -> None:
    resp = client.post(URL, json={"title": "Buy milk"})
    assert resp.status_code == 201
    task = resp.get_json()["task"]
    assert task["title"] == "Buy milk"
    assert task["completed"] is False
    assert set(task) == {"id", "title", "completed", "createdAt", "updatedAt"}
    assert task["createdAt"].endswith("Z")

    resp = client.put(f"{URL}/{task['id']}", json={"completed": True})
    assert resp.status_code == 200
    assert resp.get_json()["task"]["completed"] is True

    tasks = client.get(URL).get_json()["tasks"]
    assert [(t["id"], t["completed"]) for t in tasks] == [(task["id"], True)]

    resp = client.delete(f"{URL}/{task['id']}")
    assert resp.status_code == 200
    assert resp.get_json() == {"message": "Tâche supprimée"}

    assert client.get(URL).get_json() == {"tasks": []}


def test_create_blank_title_is_400_and_not_persisted(client, collection) -> None:
    for body in ({"title": "   "}, {"title": ""}, {}, {"title": None}):
        resp = client.post(URL, json=body)
        assert resp.status_code == 400
        assert resp.get_json() == {"message": "Le titre est requis"}
    assert collection.count_documents({}) == 0


def test_create_malformed_body_fails_validation(client, collection) -> None:
    resp = client.post(URL, data="not json", content_type="application/json")
    assert resp.status_code == 400
    resp = client.post(URL, data="title=x", content_type="text/plain")
    assert resp.status_code == 400
    assert collection.count_documents({}) == 0


def test_title_length_boundary(client) -> None:
    assert client.post(URL, json={"title": "a" * 100}).status_code == 201
    resp = client.post(URL, json={"title": "a" * 101})
    assert resp.status_code == 400
    assert "100" in resp.get_json()["message"]


def test_title_is_trimmed(client) -> None:
    assert _create(client, "  spaced  ")["title"] == "spaced"


def test_list_is_newest_first(client) -> None:
    a = _create(client, "A")
    b = _create(client, "B")
    tasks = client.get(URL).get_json()["tasks"]
    assert [t["id"] for t in tasks] == [b["id"], a["id"]]


def test_update_unknown_id_is_404_and_store_unchanged(client) -> None:
    task = _create(client, "Keep me")
    before = client.get(URL).get_json()

    resp = client.put(f"{URL}/{ObjectId()}", json={"completed": True})
    assert resp.status_code == 404
    assert resp.get_json() == {"message": "Tâche introuvable"}

    assert client.get(URL).get_json() == before
    assert before["tasks"][0]["id"] == task["id"]


def test_toggle_twice_restores_value(client) -> None:
    task = _create(client, "Flip")
    url = f"{URL}/{task['id']}"
    first = client.put(url, json={"completed": not task["completed"]}).get_json()["task"]
    second = client.put(url, json={"completed": not first["completed"]}).get_json()["task"]
    assert first["completed"] is True
    assert second["completed"] is task["completed"]


def test_update_title_is_validated(client) -> None:
    task = _create(client, "Old")
    url = f"{URL}/{task['id']}"
    assert client.put(url, json={"title": "  New "}).get_json()["task"]["title"] == "New"
    assert client.put(url, json={"title": "  "}).status_code == 400
    assert client.put(url, json={"completed": "true"}).status_code == 400


def test_update_ignores_protected_fields(client) -> None:
    task = _create(client, "Stable")
    resp = client.put(
        f"{URL}/{task['id']}",
        json={"id": str(ObjectId()), "createdAt": "2000-01-01T00:00:00.000Z"},
    )
    assert resp.status_code == 200
    body = resp.get_json()["task"]
    assert body["id"] == task["id"]
    assert body["createdAt"] == task["createdAt"]


def test_invalid_id_is_400(client) -> None:
    assert client.put(f"{URL}/nope", json={"completed": True}).status_code == 400
    assert client.delete(f"{URL}/nope").status_code == 400


def test_delete_twice(client) -> None:
    task = _create(client, "Once")
    assert client.delete(f"{URL}/{task['id']}").status_code == 200
    assert all(t["id"] != task["id"] for t in client.get(URL).get_json()["tasks"])
    resp = client.delete(f"{URL}/{task['id']}")
    assert resp.status_code == 404
    assert resp.get_json() == {"message": "Tâche introuvable"}


def test_store_failure_is_generic_500(client, monkeypatch) -> None:
    monkeypatch.setattr(
        "todolist.controllers.task_controller._store", lambda: TaskStore(BrokenCollection())
    )
    for resp in (
        client.get(URL),
        client.post(URL, json={"title": "x"}),
        client.put(f"{URL}/{ObjectId()}", json={"completed": True}),
        client.delete(f"{URL}/{ObjectId()}"),
    ):
        assert resp.status_code == 500
        assert resp.get_json() == {"message": "Erreur serveur"}


def test_trailing_slash_is_accepted(client) -> None:
    resp = client.post(f"{URL}/", json={"title": "Slash"})
    assert resp.status_code == 201
    task = resp.get_json()["task"]

    assert [t["id"] for t in client.get(f"{URL}/").get_json()["tasks"]] == [task["id"]]

    resp = client.put(f"{URL}/{task['id']}/", json={"completed": True})
    assert resp.status_code == 200
    assert resp.get_json()["task"]["completed"] is True

    assert client.delete(f"{URL}/{task['id']}/").status_code == 200
    assert client.get(URL).get_json() == {"tasks": []}
