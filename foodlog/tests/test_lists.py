from __future__ import annotations

from fastapi.testclient import TestClient

from foodlog.app import app
from foodlog.storage.store import clear_store, list_items

client = TestClient(app)

PLACE = {"name": "Noodle Bar", "address": "8 Pine Ave", "latitude": 37.77, "longitude": -122.41}
OTHER_PLACE = {"name": "Taco Cart", "address": "Corner of 3rd", "latitude": 37.78, "longitude": -122.4}


def _login_demo(c):
    c.post("/auth/login", json={"email": "demo@foodlog.app", "password": "demo123"})


def _login_guest(c):
    c.post("/auth/login", json={"email": "guest@foodlog.app", "password": "guest123"})


def _create_list(c, **body):
    resp = c.post("/lists", json={"name": "Date night", **body})
    assert resp.status_code == 201
    return resp.json()


def test_create_list_defaults():
    clear_store()
    _login_demo(client)
    body = _create_list(client, description="  ")
    assert body["name"] == "Date night"
    assert body["description"] is None
    assert body["color_theme"] == "#ff6b9d"
    assert body["is_public"] is False


def test_create_list_rejects_blank_name():
    _login_demo(client)
    assert client.post("/lists", json={"name": "   "}).status_code == 422


def test_create_list_rejects_bad_color():
    _login_demo(client)
    assert client.post("/lists", json={"name": "x", "color_theme": "red"}).status_code == 422


def test_lists_newest_first_with_counts():
    clear_store()
    _login_demo(client)
    first = _create_list(client, name="First")
    _create_list(client, name="Second")
    client.post(f"/lists/{first['id']}/restaurants", json={"restaurant": PLACE})

    body = client.get("/lists").json()
    assert [lst["name"] for lst in body] == ["Second", "First"]
    assert body[0]["restaurant_count"] == 0
    assert body[1]["restaurant_count"] == 1


def test_add_and_view_restaurants():
    clear_store()
    _login_demo(client)
    lst = _create_list(client)
    resp = client.post(f"/lists/{lst['id']}/restaurants", json={"restaurant": PLACE})
    assert resp.status_code == 201
    client.post(f"/lists/{lst['id']}/restaurants", json={"restaurant": OTHER_PLACE})

    detail = client.get(f"/lists/{lst['id']}").json()
    assert [r["name"] for r in detail["restaurants"]] == ["Noodle Bar", "Taco Cart"]


def test_empty_list_is_normal():
    clear_store()
    _login_demo(client)
    lst = _create_list(client)
    detail = client.get(f"/lists/{lst['id']}")
    assert detail.status_code == 200
    assert detail.json()["restaurants"] == []


def test_already_in_list_conflict():
    clear_store()
    _login_demo(client)
    lst = _create_list(client)
    client.post(f"/lists/{lst['id']}/restaurants", json={"restaurant": PLACE})
    resp = client.post(f"/lists/{lst['id']}/restaurants", json={"restaurant": PLACE})
    assert resp.status_code == 409
    assert len(list_items()) == 1


def test_restaurant_in_several_lists():
    clear_store()
    _login_demo(client)
    a = _create_list(client, name="A")
    b = _create_list(client, name="B")
    ra = client.post(f"/lists/{a['id']}/restaurants", json={"restaurant": PLACE}).json()
    rb = client.post(f"/lists/{b['id']}/restaurants", json={"restaurant_id": ra["id"]}).json()
    assert ra["id"] == rb["id"]


def test_remove_from_list():
    clear_store()
    _login_demo(client)
    lst = _create_list(client)
    r = client.post(f"/lists/{lst['id']}/restaurants", json={"restaurant": PLACE}).json()
    resp = client.delete(f"/lists/{lst['id']}/restaurants/{r['id']}")
    assert resp.status_code == 200
    assert client.get(f"/lists/{lst['id']}").json()["restaurants"] == []
    # Second removal: nothing left to remove
    assert client.delete(f"/lists/{lst['id']}/restaurants/{r['id']}").status_code == 404


def test_update_list():
    clear_store()
    _login_demo(client)
    lst = _create_list(client, description="old")
    resp = client.patch(f"/lists/{lst['id']}", json={
        "name": "Renamed",
        "color_theme": "#8b5cf6",
        "is_public": True,
    })
    assert resp.status_code == 200
    body = resp.json()
    assert body["name"] == "Renamed"
    assert body["color_theme"] == "#8b5cf6"
    assert body["is_public"] is True
    assert body["description"] == "old"


def test_delete_list_removes_items():
    clear_store()
    _login_demo(client)
    lst = _create_list(client)
    client.post(f"/lists/{lst['id']}/restaurants", json={"restaurant": PLACE})
    assert client.delete(f"/lists/{lst['id']}").status_code == 200
    assert client.get(f"/lists/{lst['id']}").status_code == 404
    assert list_items() == {}


def test_other_users_list_is_forbidden():
    clear_store()
    _login_demo(client)
    lst = _create_list(client)

    other = TestClient(app)
    _login_guest(other)
    assert other.get(f"/lists/{lst['id']}").status_code == 403
    assert other.patch(f"/lists/{lst['id']}", json={"name": "mine"}).status_code == 403
    assert other.delete(f"/lists/{lst['id']}").status_code == 403
    resp = other.post(f"/lists/{lst['id']}/restaurants", json={"restaurant": PLACE})
    assert resp.status_code == 403
    assert other.get("/lists").json() == []
