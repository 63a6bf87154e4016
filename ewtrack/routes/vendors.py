from flask import request, jsonify
from flask_login import login_required, current_user

from ..errors import ValidationError, UnauthorizedError
from ..extensions import db
from ..helpers.normalization import clean_text
from ..helpers.vendor_stats import fetch_vendor_stats
from ..models.vendor import Vendor
from . import main_bp, json_body


@main_bp.route("/vendors", methods=["GET"])
def list_vendors():
    vendors = Vendor.query.order_by(Vendor.name.asc()).all()
    return jsonify([v.to_dict() for v in vendors])


@main_bp.route("/vendors", methods=["POST"])
@login_required
def create_vendor():
    if not current_user.is_admin:
        raise UnauthorizedError("Only admins can add vendors.")

    data = json_body()
    name = clean_text(data.get("name"))
    contact = clean_text(data.get("contact"))
    if not name or not contact:
        raise ValidationError("Missing required fields: name, contact.")

    vendor = Vendor(name=name, contact=contact, certified=bool(data.get("certified", False)))
    db.session.add(vendor)
    db.session.commit()
    return jsonify(vendor.to_dict()), 201


@main_bp.route("/vendors/stats", methods=["GET"])
def vendor_stats():
    """Dashboard counts for one vendor (a Vendor record or a vendor-role user)."""
    vendor_id = (request.args.get("vendorId") or "").strip()
    if not vendor_id:
        raise ValidationError("vendorId query parameter is required.")
    return jsonify(fetch_vendor_stats(db.session, vendor_id)), 200
