"""HTTP-слой групп: коды ответов и сценарий приглашения."""

from datetime import timedelta

from alumni.core.security import create_access_token
from alumni.models.group import Group


def test_alumni_group_scenario(client, alice, bob, auth):
    res = client.post("/group", json={"name": "Eng Alumni"}, headers=auth(alice))
    assert res.status_code == 201
    group = res.json()
    assert res.headers["location"].endswith(f"/group/{group['id']}")
    assert group["members"] == [alice.id]

    res = client.get("/group", headers=auth(alice))
    assert [g["id"] for g in res.json()] == [group["id"]]

    assert client.get(f"/group/{group['id']}", headers=auth(bob)).status_code == 403

    res = client.post(f"/group/{group['id']}/join", json=bob.id, headers=auth(alice))
    assert res.status_code == 204

    res = client.get(f"/group/{group['id']}", headers=auth(bob))
    assert res.status_code == 200
    assert sorted(res.json()["members"]) == sorted([alice.id, bob.id])


def test_user_groups_empty_for_new_user(client, alice, auth):
    res = client.get("/group", headers=auth(alice))
    assert res.status_code == 200
    assert res.json() == []


def test_get_missing_group(client, alice, auth):
    assert client.get("/group/999", headers=auth(alice)).status_code == 404


def test_self_join_without_body(client, alice, auth):
    group_id = client.post("/group", json={"name": "Eng Alumni"}, headers=auth(alice)).json()["id"]

    assert client.post(f"/group/{group_id}/join", headers=auth(alice)).status_code == 204
    assert client.get(f"/group/{group_id}", headers=auth(alice)).json()["members"] == [alice.id]


def test_join_error_codes(client, alice, bob, carol, auth):
    group_id = client.post("/group", json={"name": "Eng Alumni"}, headers=auth(alice)).json()["id"]

    assert client.post(f"/group/{group_id}/join", json=4242, headers=auth(alice)).status_code == 400
    assert client.post("/group/999/join", headers=auth(alice)).status_code == 404
    assert client.post(f"/group/{group_id}/join", headers=auth(bob)).status_code == 403
    assert client.post(f"/group/{group_id}/join", json=carol.id, headers=auth(bob)).status_code == 403

    assert client.get(f"/group/{group_id}", headers=auth(alice)).json()["members"] == [alice.id]


def test_create_group_validation(client, alice, auth):
    assert client.post("/group", json={"name": ""}, headers=auth(alice)).status_code == 422
    assert client.post("/group", json={}, headers=auth(alice)).status_code == 422


def test_requires_token(client, alice):
    assert client.get("/group").status_code == 401
    assert client.post("/group", json={"name": "x"}).status_code == 401
    assert client.post("/group/1/join").status_code == 401


def test_rejects_bad_tokens(client, db, alice):
    expired = create_access_token(alice.keycloak_id, expires_delta=timedelta(seconds=-5))
    unknown = create_access_token("kc-nobody")

    for token in ("not-a-jwt", expired, unknown):
        res = client.get("/group", headers={"Authorization": f"Bearer {token}"})
        assert res.status_code == 401

    assert db.query(Group).count() == 0


def test_database_error_is_reported_generically(client, alice, auth, monkeypatch):
    from sqlalchemy.exc import OperationalError
    from alumni.services import groups

    def broken(*args, **kwargs):
        raise OperationalError("INSERT INTO groups", {}, Exception("connection lost"))

    monkeypatch.setattr(groups, "create_group", broken)

    res = client.post("/group", json={"name": "Eng Alumni"}, headers=auth(alice))
    assert res.status_code == 500
    assert "connection lost" not in res.text


def test_zero_target_means_self_join(client, alice, auth):
    group_id = client.post("/group", json={"name": "Eng Alumni"}, headers=auth(alice)).json()["id"]

    assert client.post(f"/group/{group_id}/join", json=0, headers=auth(alice)).status_code == 204
    assert client.get(f"/group/{group_id}", headers=auth(alice)).json()["members"] == [alice.id]
