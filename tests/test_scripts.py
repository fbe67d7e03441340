"""
Tests for the maintenance scripts (sample data seeding and image host migration).
"""

from test_fixtures import make_fake_db, make_meal_doc
from adapters.mongo_adapter import MEALS_COLLECTION, USERS_COLLECTION
from domain.feed import filter_meals
from scripts.seed_meals import load_sample_meals, seed_meals
from scripts.migrate_image_host import replace_image_host


def test_sample_meals_file_loads():
    meals = load_sample_meals()
    assert [m["title"] for m in meals] == [
        "Authentic Butter Chicken",
        "Vegan Ramen Bowl",
        "Falafel Wraps",
        "Vegetarian Tacos",
    ]


def test_seed_meals_normalises_like_the_api():
    db = make_fake_db()
    inserted = seed_meals(db, load_sample_meals())
    assert inserted == 4

    docs = list(db[MEALS_COLLECTION].find({}))
    falafel = next(d for d in docs if d["title"] == "Falafel Wraps")
    assert falafel["servingsLeft"] == 2
    assert falafel["originKey"] == "middle eastern"
    assert (falafel["lat"], falafel["lng"]) == (30.0444, 31.2357)
    assert all(d["createdAt"] is not None for d in docs)

    vegan_halal = filter_meals(docs, "", ["vegan", "halal"])
    assert [m["title"] for m in vegan_halal] == ["Falafel Wraps"]


def test_seed_meals_replace_drops_existing():
    db = make_fake_db()
    db[MEALS_COLLECTION].insert_one(make_meal_doc(title="Old Listing"))

    seed_meals(db, load_sample_meals(), replace=True)
    titles = {d["title"] for d in db[MEALS_COLLECTION].find({})}
    assert "Old Listing" not in titles
    assert len(titles) == 4


def test_replace_image_host():
    db = make_fake_db()
    meals = db[MEALS_COLLECTION]
    meals.insert_one(make_meal_doc(image="http://localhost:4000/uploads/image-1.jpg"))
    meals.insert_one(make_meal_doc(image="https://images.unsplash.com/photo.jpg"))
    db[USERS_COLLECTION].insert_one({"name": "Priya", "image": "http://localhost:4000/uploads/me.png"})

    counts = replace_image_host(db, "http://localhost:4000", "https://api.dormdash.edu")

    assert counts == {MEALS_COLLECTION: 1, USERS_COLLECTION: 1}
    images = sorted(d["image"] for d in meals.find({}))
    assert images == [
        "https://api.dormdash.edu/uploads/image-1.jpg",
        "https://images.unsplash.com/photo.jpg",
    ]


def test_replace_image_host_dry_run_changes_nothing():
    db = make_fake_db()
    db[MEALS_COLLECTION].insert_one(make_meal_doc(image="http://localhost:4000/uploads/x.jpg"))

    counts = replace_image_host(db, "http://localhost:4000", "https://new.host", dry_run=True)

    assert counts[MEALS_COLLECTION] == 1
    assert db[MEALS_COLLECTION].find_one({})["image"] == "http://localhost:4000/uploads/x.jpg"
