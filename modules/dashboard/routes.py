# dashboard: KPI summary for the caller's home screen
from datetime import date

from flask import jsonify
from flask_login import current_user, login_required

from extensions import get_store
from schemas import CropRead, dump
from utils import days_until, growth_progress

from . import bp

# No weather provider is wired in; the home screen shows fixed values.
MOCK_WEATHER = {
    "temperature": "24°C",
    "humidity": "65%",
    "windSpeed": "12 km/h",
    "condition": "Sunny",
}
HARVEST_SOON_DAYS = 7


def crop_outlook(crop, today: date) -> dict:
    row = dump(CropRead, crop)
    left = days_until(crop.expected_harvest_date, today)
    row["daysUntilHarvest"] = left
    row["harvestSoon"] = left <= HARVEST_SOON_DAYS
    row["growthProgress"] = round(growth_progress(left), 1)
    return row


@bp.route('', methods=['GET'])
@login_required
def summary():
    store = get_store()
    crops = store.list_crops(current_user.id)
    items = store.list_inventory(current_user.id)
    tasks = store.list_tasks(current_user.id)
    done = sum(1 for t in tasks if t.completed)

    today = date.today()
    return jsonify(
        weather=MOCK_WEATHER,
        crops=[crop_outlook(c, today) for c in crops],
        counts={
            "crops": len(crops),
            "inventory": len(items),
            "openTasks": len(tasks) - done,
            "completedTasks": done,
        },
    )
