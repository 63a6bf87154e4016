from flask import request, jsonify, current_app
from flask_login import current_user

from ..errors import ValidationError
from ..extensions import db
from ..helpers.normalization import clean_text
from ..helpers.pickups import schedule_pickup
from ..helpers.scheduling import scheduling_overview
from . import main_bp, json_body


@main_bp.route("/scheduling", methods=["GET"])
def scheduling_data():
    """Vendors, schedulable items and pickups for one owner."""
    user_email = (request.args.get("userEmail") or "").strip()
    if not user_email:
        raise ValidationError("userEmail query parameter is required.")
    return jsonify(scheduling_overview(db.session, user_email)), 200


@main_bp.route("/scheduling", methods=["POST"])
def create_schedule():
    data = json_body()
    item_ids = data.get("itemIds")
    if not isinstance(item_ids, list) or not item_ids:
        raise ValidationError("Missing required fields: itemIds.")

    created_by = clean_text(data.get("createdBy"))
    if created_by:
        created_by = created_by.lower()
    if created_by is None and current_user.is_authenticated:
        created_by = current_user.email

    # The pickup date is always derived server-side; a client "date" is ignored
    try:
        pickup, created = schedule_pickup(
            db.session,
            item_ids,
            data.get("vendorId"),
            created_by=created_by,
            notes=data.get("notes"),
            address=data.get("address"),
            landmark=data.get("landmark"),
            latitude=data.get("latitude"),
            longitude=data.get("longitude"),
            offset_days=current_app.config["PICKUP_DATE_OFFSET_DAYS"],
        )
    except Exception:
        db.session.rollback()
        raise

    return jsonify(pickup.to_dict()), 201 if created else 200
