# tests/integration/test_api_reservations.py
import pytest

RESERVATION = {
    "train_class": "のぞみ",
    "train_name": "96号",
    "seat_class": "reserved",
    "seats": [{"row": 1, "column": "A"}],
    "adult": 1,
    "child": 0,
    "date": "2020-01-01T10:00:00+09:00",
}


def test_reserve(client):
    r = client.post("/api/train/reserve", json=RESERVATION)
    assert r.status_code == 202
    assert r.json() == {"reservation_id": "1111111111", "is_ok": True}


@pytest.mark.parametrize("body", [b"", b"not json", b"null", b"[1, 2]"])
def test_reserve_unparseable_body(client, body):
    r = client.post(
        "/api/train/reserve", content=body, headers={"Content-Type": "application/json"}
    )
    assert r.status_code == 400


@pytest.mark.parametrize("field", ["train_class", "train_name"])
def test_reserve_missing_train(client, field):
    r = client.post("/api/train/reserve", json={**RESERVATION, field: ""})
    assert r.status_code == 400


def test_reserve_wrong_field_type(client):
    r = client.post("/api/train/reserve", json={**RESERVATION, "seats": "A1"})
    assert r.status_code == 400


def test_commit_notifies_payment_once(client, payment_notifier):
    r = client.post("/api/train/reserve/1111/commit")
    assert r.status_code == 202
    assert payment_notifier.count == 1
    assert payment_notifier.payments[0].reservation_id == 1111


@pytest.mark.parametrize("reservation_id", ["abc", "-1", "1e3", "18446744073709551616"])
def test_commit_non_numeric_id(client, payment_notifier, reservation_id):
    r = client.post(f"/api/train/reserve/{reservation_id}/commit")
    assert r.status_code == 400
    assert payment_notifier.count == 0


def test_cancel_is_idempotent(client):
    for _ in range(2):
        r = client.delete("/api/train/reserve/1111")
        assert r.status_code == 204
        assert r.content == b""


def test_cancel_non_numeric_id(client):
    r = client.delete("/api/train/reserve/abc")
    assert r.status_code == 400


def test_list_reservations(client):
    r = client.get("/api/train/reservations")
    assert r.status_code == 200

    reservations = r.json()
    assert len(reservations) == 1
    assert reservations[0]["id"] == 1111
    assert reservations[0]["payment_method"] == "credit_card"
    assert reservations[0]["status"] == "pending"
    assert reservations[0]["reserve_at"]


def test_cancel_empty_id(client):
    r = client.delete("/api/train/reserve/")
    assert r.status_code == 400


def test_reserve_accepts_any_passenger_counts(client):
    r = client.post("/api/train/reserve", json={**RESERVATION, "adult": -1, "child": -2})
    assert r.status_code == 202
