# seed_demo.py
from datetime import date, timedelta

from werkzeug.security import generate_password_hash

from extensions import get_store

DEMO_USERNAME = "demo"
DEMO_PASSWORD = "demo"


def run():
    """Create the demo farmer with one crop, one inventory item and one task (idempotent)."""
    store = get_store()
    if store.get_user_by_username(DEMO_USERNAME):
        print(f"Seed skipped: user '{DEMO_USERNAME}' already exists.")
        return store.get_user_by_username(DEMO_USERNAME)

    user = store.create_user(DEMO_USERNAME, generate_password_hash(DEMO_PASSWORD))
    today = date.today()
    store.create_crop(user.id, {
        "name": "Corn",
        "quantity": 50,
        "planted_date": today,
        "expected_harvest_date": today + timedelta(days=90),
        "status": "Growing",
    })
    store.create_inventory_item(user.id, {
        "name": "Tomato seeds",
        "category": "Seeds",
        "quantity": 200,
        "unit": "packets",
    })
    store.create_task(user.id, {
        "title": "Water field",
        "description": "North field, morning shift",
        "due_date": today + timedelta(days=1),
        "priority": "High",
        "completed": False,
    })
    print(f"Seed OK: user '{DEMO_USERNAME}' with a crop, an inventory item and a task.")
    return user
