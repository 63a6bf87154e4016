from flask import request, jsonify

from ..errors import ValidationError, NotFoundError
from ..extensions import db
from ..helpers.items import create_item, update_item, delete_item
from ..models.item import Item
from . import main_bp, json_body


@main_bp.route("/items", methods=["GET"])
def get_items():
    item_id = request.args.get("id")
    user_email = (request.args.get("userEmail") or "").strip().lower()

    if item_id:
        item = db.session.get(Item, item_id)
        if item is None:
            raise NotFoundError("Item not found.")
        return jsonify(item.to_dict())

    if not user_email:
        raise ValidationError("An 'id' or 'userEmail' query parameter is required.")

    items = Item.query.filter_by(created_by=user_email).order_by(Item.created_at.desc()).all()
    return jsonify([i.to_dict() for i in items])


@main_bp.route("/all-items", methods=["GET"])
def get_all_items():
    """Every item on the platform, newest first. Feeds the department campaign scoreboard."""
    items = Item.query.order_by(Item.created_at.desc()).all()
    return jsonify([i.to_dict() for i in items])


@main_bp.route("/items", methods=["POST"])
def report_item():
    try:
        item = create_item(db.session, json_body())
    except Exception:
        db.session.rollback()
        raise
    return jsonify(item.to_dict()), 201


@main_bp.route("/items", methods=["PATCH"])
def edit_item():
    data = json_body()
    try:
        item = update_item(db.session, data.get("id"), data)
    except Exception:
        db.session.rollback()
        raise
    return jsonify(item.to_dict())


@main_bp.route("/items", methods=["DELETE"])
def remove_item():
    try:
        delete_item(db.session, request.args.get("id"), request.args.get("userEmail"))
    except Exception:
        db.session.rollback()
        raise
    return jsonify({"success": True, "message": "Item deleted."})
