"""
Tests for error handling across the API.

Every failure is returned in the same envelope:
    {"success": false, "error": {"code": ..., "message": ...}, "timestamp": ...}
"""

from pymongo.errors import ServerSelectionTimeoutError, PyMongoError

from test_fixtures import client, fake_db
from app.exceptions import (
    ConflictError,
    NotFoundError,
    ServiceValidationError,
    SoldOutError,
    UnavailableError,
)
from services.meal_service import MealService
from services.user_service import UserService


def _assert_envelope(body, code):
    assert body["success"] is False
    assert body["error"]["code"] == code
    assert body["error"]["message"]
    assert "timestamp" in body


def test_store_error_on_list_is_500(fake_db, monkeypatch):
    def boom(db, query=None, tags=None):
        raise ServerSelectionTimeoutError("no servers available")

    monkeypatch.setattr(MealService, "list_meals", boom)
    r = client.get("/api/meals")
    assert r.status_code == 500
    _assert_envelope(r.json(), "STORE_ERROR")


def test_store_error_on_reserve_is_500(fake_db, monkeypatch):
    def boom(db, meal_id):
        raise PyMongoError("write failed")

    monkeypatch.setattr(MealService, "reserve_meal", boom)
    r = client.patch("/api/meals/6650a1b2c3d4e5f601234567/reserve")
    assert r.status_code == 500


def test_store_error_on_user_list_is_500(fake_db, monkeypatch):
    def boom(db):
        raise PyMongoError("read failed")

    monkeypatch.setattr(UserService, "get_all_users", boom)
    assert client.get("/api/users").status_code == 500


def test_store_error_on_create_meal_is_400(fake_db, monkeypatch):
    from repositories import MealRepository

    def boom(self, document):
        raise PyMongoError("insert failed")

    monkeypatch.setattr(MealRepository, "create", boom)
    r = client.post("/api/meals", json={"title": "Tacos", "servings": 2})
    assert r.status_code == 400
    _assert_envelope(r.json(), "SERVICE_VALIDATION_ERROR")
    assert r.json()["error"]["message"] == "Failed to create meal"


def test_database_not_connected_is_503():
    # No dependency override and no lifespan: the adapter has no client
    r = client.get("/api/meals")
    assert r.status_code == 503
    _assert_envelope(r.json(), "SERVICE_UNAVAILABLE")


def test_validation_error_lists_fields(fake_db):
    r = client.post("/api/users", json={"name": "No Email"})
    assert r.status_code == 400
    body = r.json()
    _assert_envelope(body, "VALIDATION_ERROR")
    fields = {tuple(e["loc"])[-1] for e in body["error"]["details"]}
    assert {"email", "dorm", "role"} <= fields


def test_unknown_route_is_404():
    r = client.get("/api/does-not-exist")
    assert r.status_code == 404
    _assert_envelope(r.json(), "HTTP_404")


def test_responses_carry_request_id(fake_db):
    r = client.get("/api/meals")
    assert r.headers.get("X-Request-ID")
    assert r.headers.get("X-Process-Time")


def test_exception_status_codes():
    assert ServiceValidationError().http_status == 400
    assert NotFoundError().http_status == 404
    assert ConflictError().http_status == 409
    assert SoldOutError().http_status == 400
    assert UnavailableError().http_status == 503


def test_exception_to_dict_includes_details_only_when_present():
    assert NotFoundError("Meal not found").to_dict() == {
        "code": "NOT_FOUND",
        "message": "Meal not found",
    }
    err = ServiceValidationError("Too big", details={"size": 10})
    assert err.to_dict()["details"] == {"size": 10}
    assert str(err) == "Too big"


def test_health_check():
    r = client.get("/api/health-check")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["service"] == "DormDash"
    assert body["database"] == "disconnected"
