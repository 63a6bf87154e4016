import logging

from flask import request, jsonify, current_app

from ..errors import LifecycleError
from ..extensions import db
from ..helpers.geocoding import search_addresses
from ..helpers.pickups import validate_address_payload, submit_pickup_address
from . import main_bp

logger = logging.getLogger(__name__)


@main_bp.route("/pickups/update-address", methods=["POST"])
def update_pickup_address():
    """Store the pickup address for an item whose auction just closed."""
    data = request.get_json(silent=True)
    try:
        item_id, address, landmark, lat, lng, vendor_id = validate_address_payload(data)
        result = submit_pickup_address(
            db.session,
            item_id,
            address,
            landmark,
            lat,
            lng,
            vendor_id=vendor_id,
            offset_days=current_app.config["PICKUP_DATE_OFFSET_DAYS"],
        )
    except LifecycleError:
        db.session.rollback()
        raise
    except Exception:
        db.session.rollback()
        logger.exception("POST /pickups/update-address failed")
        return jsonify({"success": False, "message": "An internal server error occurred."}), 500

    return jsonify({
        "success": True,
        "message": "Pickup address updated successfully.",
        "pickupId": result.pickup_id,
        "item": result.item.to_dict(),
    }), 200


@main_bp.route("/pickups/geocode")
def geocode_pickup_address():
    query = request.args.get("q", "")
    results = search_addresses(
        query,
        url=current_app.config["GEOCODER_URL"],
        country_codes=current_app.config["GEOCODER_COUNTRY_CODES"],
    )
    return jsonify(results)
