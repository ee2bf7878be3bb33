"""
HTTP API: create a contest, stage inputs, apply holes, read winners and the archive.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest
from fastapi.testclient import TestClient

from fortgolf.api import main
from fortgolf.api.main import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def create(client, **body):
    r = client.post("/games", json=body)
    assert r.status_code == 200, r.text
    return r.json()["game_id"]


def stage(client, game_id, player_id, field, value):
    r = client.post(f"/games/{game_id}/inputs", json={"player_id": player_id, "field": field, "value": value})
    assert r.status_code == 200, r.text
    return r.json()


def test_root_and_options(client):
    assert client.get("/").json()["message"] == "Fort Golf API"

    options = client.get("/options").json()
    assert options["damage_cap_options"] == [5, 10, 15, 20, 25]
    assert options["defaults"] == {"mode": "siege", "num_players": 4, "max_health": 10, "total_holes": 18}
    assert [m["id"] for m in options["modes"]] == ["elimination", "siege"]
    assert [m["display_name"] for m in options["modes"]] == ["Option B: Elimination", "Option E: Siege"]


def test_create_with_defaults(client):
    r = client.post("/games", json={})
    assert r.status_code == 200
    body = r.json()

    assert body["events"][0]["type"] == "game_configured"
    state = body["state"]
    assert [p["name"] for p in state["players"]] == ["Player A", "Player B", "Player C", "Player D"]
    assert state["current_hole"] == 1
    assert state["defender"]["id"] == 0


def test_create_rejects_bad_config(client):
    r = client.post("/games", json={"max_health": 12})
    assert r.status_code == 400
    assert "capacity" in r.json()["detail"]


def test_unknown_game_is_404(client):
    assert client.get("/games/nope").status_code == 404
    assert client.post("/games/nope/apply-hole").status_code == 404
    assert client.get("/games/nope/winner").status_code == 404


def test_play_a_hole(client):
    game_id = create(client, mode="siege", num_players=2, max_health=5, total_holes=3)

    body = stage(client, game_id, 1, "fairway", True)
    assert body["state"]["hole_inputs"]["1"] == {"fairway": True, "gir": False, "score": "bogey+"}
    stage(client, game_id, 1, "score", "birdie")

    r = client.post(f"/games/{game_id}/apply-hole")
    assert r.status_code == 200
    body = r.json()

    assert body["applied"] is True
    assert body["summary"]["net_change"] == -3
    assert body["summary"]["final_health"] == 2
    assert body["state"]["current_hole"] == 2
    assert body["state"]["defender_index"] == 1
    assert body["state"]["hole_inputs"] == {}

    history = client.get(f"/games/{game_id}/history").json()["history"]
    assert [h["hole"] for h in history] == [1]


def test_bad_input_is_400(client):
    game_id = create(client)

    r = client.post(f"/games/{game_id}/inputs", json={"player_id": 0, "field": "score", "value": "eagle"})
    assert r.status_code == 400

    r = client.post(f"/games/{game_id}/inputs", json={"player_id": 9, "field": "gir", "value": True})
    assert r.status_code == 400


def test_winner_only_after_game_over(client):
    game_id = create(client, mode="siege", num_players=2, max_health=10, total_holes=2, names=["Ann", "Bo"])
    assert client.get(f"/games/{game_id}/winner").status_code == 409

    stage(client, game_id, 1, "gir", True)
    client.post(f"/games/{game_id}/apply-hole")
    client.post(f"/games/{game_id}/apply-hole")

    state = client.get(f"/games/{game_id}").json()
    assert state["game_over"] is True
    assert state["game_over_reason"] == "holes_complete"

    r = client.get(f"/games/{game_id}/winner")
    assert r.status_code == 200
    winner = r.json()
    assert winner["winner"]["name"] == "Bo"
    assert winner["is_tie"] is False

    r = client.post(f"/games/{game_id}/apply-hole")
    assert r.json()["applied"] is False
    assert r.json()["summary"] is None
    assert len(client.get(f"/games/{game_id}/history").json()["history"]) == 2


def test_setup_endpoints(client):
    game_id = create(client)

    r = client.post(f"/games/{game_id}/players/2/name", json={"name": "Cal"})
    assert r.json()["state"]["players"][2]["name"] == "Cal"

    r = client.post(f"/games/{game_id}/players/count", json={"num_players": 3})
    assert [p["name"] for p in r.json()["state"]["players"]] == ["Player A", "Player B", "Cal"]

    r = client.post(f"/games/{game_id}/reset")
    assert [p["name"] for p in r.json()["state"]["players"]] == ["Player A", "Player B", "Player C"]

    r = client.post(f"/games/{game_id}/configure", json={"mode": "elimination", "num_players": 2, "max_health": 5, "total_holes": 9})
    assert r.json()["state"]["config"]["mode"] == "elimination"
    assert len(r.json()["state"]["players"]) == 2

    assert client.post(f"/games/{game_id}/players/7/name", json={"name": "X"}).status_code == 400


def test_archive_tracks_finished_games(client):
    game_id = create(client, mode="elimination", num_players=2, max_health=5, total_holes=9, names=["Ann", "Bo"])
    for field, value in (("fairway", True), ("gir", True), ("score", "birdie")):
        stage(client, game_id, 1, field, value)
    client.post(f"/games/{game_id}/apply-hole")  # Ann 5 -> 1
    client.post(f"/games/{game_id}/apply-hole")  # Bo defends
    for field, value in (("fairway", True), ("gir", True), ("score", "birdie")):
        stage(client, game_id, 1, field, value)
    client.post(f"/games/{game_id}/apply-hole")  # Ann falls

    state = client.get(f"/games/{game_id}").json()
    assert state["game_over_reason"] == "last_fort_standing"

    finished = client.get("/archive", params={"status": "finished"}).json()["games"]
    record = next(g for g in finished if g["id"] == game_id)
    assert record["winners"] == ["Bo"]
    assert len(record["history"]) == 3
    assert record["players"][0]["eliminated"] is True

    assert client.delete(f"/archive/{game_id}").status_code == 200
    assert client.delete(f"/archive/{game_id}").status_code == 404


def test_delete_live_game(client):
    game_id = create(client)
    assert client.delete(f"/games/{game_id}").status_code == 200
    assert client.get(f"/games/{game_id}").status_code == 404


def test_concurrent_apply_hole_loses_no_holes(client):
    game_id = create(client, mode="siege", num_players=4, total_holes=36)

    with ThreadPoolExecutor(max_workers=8) as pool:
        responses = list(pool.map(lambda _: client.post(f"/games/{game_id}/apply-hole"), range(20)))

    assert all(r.status_code == 200 for r in responses)
    assert all(r.json()["applied"] for r in responses)
    assert sorted(r.json()["summary"]["hole"] for r in responses) == list(range(1, 21))

    state = client.get(f"/games/{game_id}").json()
    assert state["current_hole"] == 21
    assert state["holes_played"] == 20
    assert state["defender_index"] == 0


def test_deleted_game_releases_its_lock(client):
    game_id = create(client)
    assert game_id in main._game_locks

    client.delete(f"/games/{game_id}")

    assert game_id not in main._game_locks
    assert client.post(f"/games/{game_id}/reset").status_code == 404


@pytest.fixture
def failing_client(monkeypatch):
    def explode():
        raise RuntimeError("options store offline")

    monkeypatch.setattr(main, "get_contest_options", explode)
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


def test_unhandled_error_hides_traceback(failing_client, monkeypatch):
    monkeypatch.setattr(main, "DEBUG", False)

    r = failing_client.get("/options")

    assert r.status_code == 500
    assert r.json() == {"detail": "Internal server error"}


def test_unhandled_error_traceback_in_debug(failing_client, monkeypatch):
    monkeypatch.setattr(main, "DEBUG", True)

    r = failing_client.get("/options")

    assert r.status_code == 500
    body = r.json()
    assert body["detail"] == "options store offline"
    assert "RuntimeError" in body["traceback"]
