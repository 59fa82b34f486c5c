from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

CLIENT = {"X-User-Id": "client-1", "X-User-Role": "client"}
PROVIDER = {"X-User-Id": "provider-1", "X-User-Role": "provider"}
ADMIN = {"X-User-Id": "admin-1", "X-User-Role": "admin"}
STRANGER = {"X-User-Id": "stranger-1", "X-User-Role": "client"}


def _create(client: TestClient, payload: dict) -> dict:
    res = client.post("/api/v1/hirings", json=payload, headers=CLIENT)
    assert res.status_code == 201, res.json()
    return res.json()


def _set_status(client: TestClient, hiring_id: str, status: str, headers=CLIENT):
    return client.put(f"/api/v1/hirings/{hiring_id}/status", json={"status": status}, headers=headers)


def _complete(client: TestClient, hiring_id: str) -> None:
    for status in ("confirmada", "en_progreso", "completada"):
        assert _set_status(client, hiring_id, status, headers=PROVIDER).status_code == 200


class TestCreateHiringEndpoint:
    def test_create_hiring_success(self, client: TestClient, create_payload):
        body = _create(client, create_payload)

        assert body["status"] == "pendiente"
        assert body["client_id"] == "client-1"
        assert body["provider_id"] == "provider-1"
        assert body["base_price"] == "400.00"
        assert Decimal(body["commission_amount"]) == Decimal("40")
        assert Decimal(body["final_price"]) == Decimal("440")
        assert Decimal(body["provider_price"]) == Decimal("360")
        assert body["paid"] is False
        assert body["payments"] == []
        assert body["rating"] is None
        assert body["notes"] == "Revisar fuga en la cocina"

    def test_naive_dates_are_treated_as_utc(self, client: TestClient, create_payload):
        create_payload["start_date"] = "2025-02-01T09:00:00"
        create_payload["end_date"] = "2025-02-01T13:00:00"

        body = _create(client, create_payload)

        assert body["start_date"].startswith("2025-02-01T09:00:00")
        assert body["start_date"].endswith(("Z", "+00:00"))

    def test_requires_identity_headers(self, client: TestClient, create_payload):
        res = client.post("/api/v1/hirings", json=create_payload)

        assert res.status_code == 401

    def test_unknown_role(self, client: TestClient, create_payload):
        res = client.post(
            "/api/v1/hirings",
            json=create_payload,
            headers={"X-User-Id": "client-1", "X-User-Role": "superuser"},
        )

        assert res.status_code == 400

    def test_duration_out_of_bounds(self, client: TestClient, create_payload):
        create_payload["duration"] = 9

        res = client.post("/api/v1/hirings", json=create_payload, headers=CLIENT)

        assert res.status_code == 400
        assert res.json()["code"] == "INVALID_DURATION"

    def test_end_before_start(self, client: TestClient, create_payload):
        create_payload["start_date"], create_payload["end_date"] = (
            create_payload["end_date"],
            create_payload["start_date"],
        )

        res = client.post("/api/v1/hirings", json=create_payload, headers=CLIENT)

        assert res.status_code == 400
        assert res.json()["code"] == "INVALID_DATE_RANGE"

    def test_unknown_payment_method(self, client: TestClient, create_payload):
        create_payload["payment_method"] = "cheque"

        res = client.post("/api/v1/hirings", json=create_payload, headers=CLIENT)

        assert res.status_code == 400
        assert res.json()["code"] == "VALIDATION_ERROR"

    def test_unknown_service(self, client: TestClient, create_payload):
        create_payload["service_id"] = "missing"

        res = client.post("/api/v1/hirings", json=create_payload, headers=CLIENT)

        assert res.status_code == 404
        assert res.json()["code"] == "SERVICE_NOT_FOUND"

    def test_extra_fields_are_rejected(self, client: TestClient, create_payload):
        create_payload["final_price"] = "1.00"

        res = client.post("/api/v1/hirings", json=create_payload, headers=CLIENT)

        assert res.status_code == 422


class TestHiringLifecycleEndpoints:
    def test_status_transitions(self, client: TestClient, create_payload):
        hiring = _create(client, create_payload)

        res = _set_status(client, hiring["id"], "confirmada", headers=PROVIDER)
        assert res.status_code == 200
        assert res.json()["status"] == "confirmada"

        res = _set_status(client, hiring["id"], "cancelada", headers=ADMIN)
        assert res.status_code == 200

        res = _set_status(client, hiring["id"], "confirmada")
        assert res.status_code == 409
        assert res.json()["code"] == "INVALID_TRANSITION"

        res = _set_status(client, hiring["id"], "cancelada")
        assert res.status_code == 200
        assert res.json()["status"] == "cancelada"

    def test_stranger_cannot_touch_hiring(self, client: TestClient, create_payload):
        hiring = _create(client, create_payload)

        assert _set_status(client, hiring["id"], "cancelada", headers=STRANGER).status_code == 403
        assert client.get(f"/api/v1/hirings/{hiring['id']}", headers=STRANGER).status_code == 403

    def test_missing_hiring(self, client: TestClient):
        res = client.get("/api/v1/hirings/does-not-exist", headers=CLIENT)

        assert res.status_code == 404
        assert res.json()["code"] == "HIRING_NOT_FOUND"

    def test_payments(self, client: TestClient, create_payload):
        hiring = _create(client, create_payload)
        url = f"/api/v1/hirings/{hiring['id']}/payment"

        first = client.post(url, json={"amount": "240.00", "concept": "Anticipo"}, headers=CLIENT)
        assert first.status_code == 200
        assert first.json()["paid"] is False
        assert first.json()["outstanding_amount"] == "200.00"

        second = client.post(
            url,
            json={
                "amount": "200.00",
                "concept": "Liquidación",
                "receipt": "rcpt-77",
                "transaction_id": "tx-77",
            },
            headers=CLIENT,
        )
        body = second.json()
        assert second.status_code == 200
        assert body["paid"] is True
        assert body["paid_at"] is not None
        assert Decimal(body["total_paid"]) == Decimal("440")
        assert Decimal(body["outstanding_amount"]) == Decimal("0")
        assert [p["concept"] for p in body["payments"]] == ["Anticipo", "Liquidación"]
        assert body["payments"][1]["receipt"] == "rcpt-77"
        assert body["transaction_id"] == "tx-77"

    def test_invalid_payment(self, client: TestClient, create_payload):
        hiring = _create(client, create_payload)

        res = client.post(
            f"/api/v1/hirings/{hiring['id']}/payment",
            json={"amount": "0", "concept": "Nada"},
            headers=CLIENT,
        )

        assert res.status_code == 400
        assert res.json()["code"] == "INVALID_PAYMENT"

    @pytest.mark.parametrize("amount", ["1e30", "10000000000", "0.004", "0.005"])
    def test_payment_amount_outside_storable_cents(
        self, client: TestClient, create_payload, amount
    ):
        hiring = _create(client, create_payload)
        url = f"/api/v1/hirings/{hiring['id']}/payment"

        res = client.post(url, json={"amount": amount, "concept": "Abono"}, headers=CLIENT)

        assert res.status_code == 400
        assert res.json()["code"] == "INVALID_PAYMENT"
        stored = client.get(f"/api/v1/hirings/{hiring['id']}", headers=CLIENT).json()
        assert stored["payments"] == []

    def test_payment_concept_too_long(self, client: TestClient, create_payload):
        hiring = _create(client, create_payload)

        res = client.post(
            f"/api/v1/hirings/{hiring['id']}/payment",
            json={"amount": "10", "concept": "c" * 300},
            headers=CLIENT,
        )

        assert res.status_code == 400
        assert res.json()["code"] == "INVALID_PAYMENT"

    def test_provider_cannot_pay(self, client: TestClient, create_payload):
        hiring = _create(client, create_payload)

        res = client.post(
            f"/api/v1/hirings/{hiring['id']}/payment",
            json={"amount": "10", "concept": "Abono"},
            headers=PROVIDER,
        )

        assert res.status_code == 403

    def test_rating_flow(self, client: TestClient, create_payload):
        hiring = _create(client, create_payload)
        url = f"/api/v1/hirings/{hiring['id']}/rate"

        early = client.post(url, json={"score": 5}, headers=CLIENT)
        assert early.status_code == 409
        assert early.json()["code"] == "INVALID_STATE"

        _complete(client, hiring["id"])

        assert client.post(url, json={"score": 5}, headers=PROVIDER).status_code == 403

        invalid = client.post(url, json={"score": 6}, headers=CLIENT)
        assert invalid.status_code == 400
        assert invalid.json()["code"] == "INVALID_SCORE"

        rated = client.post(url, json={"score": 4, "comment": "Muy bien"}, headers=CLIENT)
        assert rated.status_code == 200
        body = rated.json()
        assert body["hiring"]["rating"]["score"] == 4
        assert body["hiring"]["rating"]["comment"] == "Muy bien"
        assert body["service"] == {
            "service_id": "service-1",
            "average_rating": 4.0,
            "rating_count": 1,
        }

        again = client.post(url, json={"score": 1}, headers=CLIENT)
        assert again.status_code == 409
        assert again.json()["code"] == "ALREADY_RATED"

    def test_list_my_hirings(self, client: TestClient, create_payload):
        created = _create(client, create_payload)

        mine = client.get("/api/v1/hirings/my", headers=CLIENT)
        provided = client.get("/api/v1/hirings/my", headers=PROVIDER)
        others = client.get("/api/v1/hirings/my", headers=STRANGER)

        assert [h["id"] for h in mine.json()] == [created["id"]]
        assert [h["id"] for h in provided.json()] == [created["id"]]
        assert others.json() == []
