"""
Tests for the meal reservation flow.

Reserving takes exactly one serving per call. The counter never drops below
zero, even when many buyers race for the last serving: the decrement is a
single conditional update in the store.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest
from bson import ObjectId

from test_fixtures import make_fake_db, insert_meal
from adapters.mongo_adapter import MEALS_COLLECTION
from app.exceptions import NotFoundError, SoldOutError
from repositories import MealRepository
from services.meal_service import MealService


def _servings_left(db, meal_id):
    return db[MEALS_COLLECTION].find_one({"_id": ObjectId(meal_id)})["servingsLeft"]


def test_reserve_walks_inventory_down_to_sold_out():
    """servings=6, servingsLeft=4: four reservations succeed, the fifth is sold out."""
    db = make_fake_db()
    meal_id = insert_meal(db, servings=6, servings_left=4)

    meal = MealService.reserve_meal(db, meal_id)
    assert meal["servingsLeft"] == 3
    assert str(meal["_id"]) == meal_id

    for expected in (2, 1, 0):
        assert MealService.reserve_meal(db, meal_id)["servingsLeft"] == expected

    with pytest.raises(SoldOutError):
        MealService.reserve_meal(db, meal_id)
    assert _servings_left(db, meal_id) == 0


def test_reserve_sold_out_meal_fails_immediately():
    db = make_fake_db()
    meal_id = insert_meal(db, servings=5, servings_left=0)

    with pytest.raises(SoldOutError):
        MealService.reserve_meal(db, meal_id)
    assert _servings_left(db, meal_id) == 0


def test_reserve_unknown_meal_is_not_found():
    db = make_fake_db()
    insert_meal(db)

    with pytest.raises(NotFoundError):
        MealService.reserve_meal(db, str(ObjectId()))


def test_reserve_malformed_id_is_not_found():
    db = make_fake_db()

    with pytest.raises(NotFoundError):
        MealService.reserve_meal(db, "not-an-object-id")


def test_reserve_refreshes_updated_at_only():
    db = make_fake_db()
    meal_id = insert_meal(db, servings=3, servings_left=3)
    before = db[MEALS_COLLECTION].find_one({"_id": ObjectId(meal_id)})

    after = MealService.reserve_meal(db, meal_id)

    assert after["updatedAt"] >= before["updatedAt"]
    changed = {k for k in before if before[k] != after[k]}
    assert changed <= {"servingsLeft", "updatedAt"}
    assert after["servings"] == 3


def test_counter_stays_within_bounds_for_any_number_of_attempts():
    db = make_fake_db()
    meal_id = insert_meal(db, servings=5, servings_left=5)

    successes = 0
    for _ in range(9):
        try:
            meal = MealService.reserve_meal(db, meal_id)
            successes += 1
            assert 0 <= meal["servingsLeft"] <= 5
        except SoldOutError:
            pass
        assert 0 <= _servings_left(db, meal_id) <= 5

    assert successes == 5
    assert _servings_left(db, meal_id) == 0


@pytest.mark.parametrize("attempts", [2, 10, 32])
def test_concurrent_reservations_of_last_serving(attempts):
    """Exactly one of M concurrent buyers gets the last serving."""
    db = make_fake_db()
    meal_id = insert_meal(db, servings=4, servings_left=1)

    def attempt(_):
        try:
            MealService.reserve_meal(db, meal_id)
            return "ok"
        except SoldOutError:
            return "sold_out"

    with ThreadPoolExecutor(max_workers=attempts) as pool:
        outcomes = list(pool.map(attempt, range(attempts)))

    assert outcomes.count("ok") == 1
    assert outcomes.count("sold_out") == attempts - 1
    assert _servings_left(db, meal_id) == 0


def test_concurrent_reservations_never_oversell():
    db = make_fake_db()
    meal_id = insert_meal(db, servings=10, servings_left=7)

    def attempt(_):
        try:
            MealService.reserve_meal(db, meal_id)
            return True
        except SoldOutError:
            return False

    with ThreadPoolExecutor(max_workers=16) as pool:
        outcomes = list(pool.map(attempt, range(40)))

    assert sum(outcomes) == 7
    assert _servings_left(db, meal_id) == 0


def test_repository_guards_decrement_in_the_store():
    """The check and the decrement are one conditional update, not read-then-write."""
    db = make_fake_db()
    meal_id = insert_meal(db, servings=2, servings_left=2)

    MealRepository(db).reserve_one(ObjectId(meal_id), now=None)

    name, query, update = db[MEALS_COLLECTION].calls[-1]
    assert name == "find_one_and_update"
    assert query == {"_id": ObjectId(meal_id), "servingsLeft": {"$gt": 0}}
    assert update["$inc"] == {"servingsLeft": -1}


def test_legacy_meal_without_counter_is_sold_out():
    db = make_fake_db()
    meal_id = insert_meal(db)
    db[MEALS_COLLECTION].update_one({"_id": ObjectId(meal_id)}, {"$set": {"servingsLeft": None}})

    with pytest.raises(SoldOutError):
        MealService.reserve_meal(db, meal_id)
