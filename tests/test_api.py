"""HTTP-level tests for the trip planner API."""

from fastapi.testclient import TestClient

from trip_planner.api import app


client = TestClient(app)


def _create_session(**config):
    payload = dict(start_date="2024-03-01", days=3, destination="Turkey", board_type="HB")
    payload.update(config)
    resp = client.post("/sessions", json=payload)
    assert resp.status_code == 201
    return resp.json()


def test_health_and_catalog():
    assert client.get("/health").json() == {"status": "ok"}
    codes = [board["code"] for board in client.get("/catalog/board-types").json()]
    assert codes == ["FB", "HB", "NB"]
    assert client.get("/catalog/countries").json()[0]["name"] == "Turkey"
    catalog = client.get("/catalog/Italy").json()
    assert catalog["hotels"][0]["id"] == 301
    assert catalog["meals"]["dinner"]
    assert client.get("/catalog/Atlantis").json()["hotels"] == []


def test_session_flow_with_half_board_and_pricing():
    session = _create_session()
    session_id = session["session_id"]
    assert session["trip_dates"] == ["2024-03-01", "2024-03-02", "2024-03-03"]

    client.put(f"/sessions/{session_id}/days/2024-03-01/hotel", json={"hotel_id": 101})
    client.put(f"/sessions/{session_id}/days/2024-03-01/meals/dinner", json={"meal_id": 1201})
    resp = client.put(f"/sessions/{session_id}/days/2024-03-01/meals/lunch", json={"meal_id": 1101})
    assert resp.status_code == 200
    day = resp.json()["selections"]["2024-03-01"]
    assert day == {"hotel_id": 101, "lunch_id": 1101, "dinner_id": None}

    pricing = client.get(f"/sessions/{session_id}/pricing").json()
    assert pricing["grand_total"] == 135
    assert pricing["missing_hotel_dates"] == ["2024-03-02", "2024-03-03"]


def test_config_patch_resyncs_dates():
    session_id = _create_session()["session_id"]
    client.put(f"/sessions/{session_id}/days/2024-03-03/hotel", json={"hotel_id": 102})

    resp = client.patch(f"/sessions/{session_id}/config", json={"key": "startDate", "value": "2024-03-03"})
    body = resp.json()
    assert body["trip_dates"] == ["2024-03-03", "2024-03-04", "2024-03-05"]
    assert body["selections"]["2024-03-03"]["hotel_id"] == 102
    assert "2024-03-01" not in body["selections"]

    resp = client.patch(f"/sessions/{session_id}/config", json={"key": "days", "value": "oops"})
    assert resp.json()["config"]["days"] == 1


def test_no_board_transition_and_ignored_meals():
    session_id = _create_session(board_type="FB")["session_id"]
    client.put(f"/sessions/{session_id}/days/2024-03-02/hotel", json={"hotel_id": 103})
    client.put(f"/sessions/{session_id}/days/2024-03-02/meals/lunch", json={"meal_id": 1102})

    resp = client.put(f"/sessions/{session_id}/board-type", json={"code": "NB"})
    assert resp.json()["changed"] is True
    assert resp.json()["selections"]["2024-03-02"] == {"hotel_id": 103, "lunch_id": None, "dinner_id": None}

    resp = client.put(f"/sessions/{session_id}/days/2024-03-02/meals/dinner", json={"meal_id": 1201})
    assert resp.json()["applied"] is False
    assert resp.json()["selections"]["2024-03-02"]["dinner_id"] is None

    resp = client.put(f"/sessions/{session_id}/board-type", json={"code": "NB"})
    assert resp.json()["changed"] is False


def test_error_responses():
    session_id = _create_session()["session_id"]
    assert client.get("/sessions/missing").status_code == 404
    assert client.put(f"/sessions/{session_id}/board-type", json={"code": "XX"}).status_code == 400
    assert client.patch(f"/sessions/{session_id}/config", json={"key": "pets", "value": 1}).status_code == 400
    assert client.put(f"/sessions/{session_id}/days/2024-05-01/hotel", json={"hotel_id": 101}).status_code == 404
    resp = client.put(f"/sessions/{session_id}/days/2024-03-01/meals/breakfast", json={"meal_id": 1})
    assert resp.status_code == 400

    assert client.delete(f"/sessions/{session_id}").status_code == 204
    assert client.get(f"/sessions/{session_id}").status_code == 404


def test_days_are_capped_at_the_configured_maximum():
    session = _create_session(days=400)
    assert session["config"]["days"] == 30
    assert len(session["trip_dates"]) == 30

    resp = client.patch(f"/sessions/{session['session_id']}/config", json={"key": "days", "value": 10**8})
    assert resp.status_code == 200
    assert resp.json()["config"]["days"] == 30


def test_far_future_start_date_yields_empty_trip():
    session_id = _create_session()["session_id"]
    resp = client.patch(f"/sessions/{session_id}/config", json={"key": "startDate", "value": "9999-12-30"})
    assert resp.status_code == 200
    assert resp.json()["trip_dates"] == []
    assert resp.json()["pricing"]["grand_total"] == 0
