from flask import request, jsonify
from flask_login import login_required, current_user

from ..extensions import db
from ..helpers.auctions import open_auction, close_auction, place_bid, bids_for_items
from ..helpers import dedupe_ids
from . import main_bp, json_body


@main_bp.route("/auctions/start", methods=["POST"])
@login_required
def start_auction():
    data = json_body()
    try:
        item = open_auction(
            db.session,
            data.get("itemId"),
            current_user,
            bidding_end_date=data.get("biddingEndDate"),
            starting_bid=data.get("startingBid"),
        )
    except Exception:
        db.session.rollback()
        raise
    return jsonify({"success": True, "item": item.to_dict()})


@main_bp.route("/auctions/end", methods=["POST"])
@login_required
def end_auction():
    """
    Finalize the auction. The client then asks the owner for a pickup
    address, which arrives as a separate request.
    """
    data = json_body()
    try:
        item = close_auction(db.session, data.get("itemId"), current_user)
    except Exception:
        db.session.rollback()
        raise
    return jsonify({"success": True, "message": "Auction closed.", "item": item.to_dict()})


@main_bp.route("/bids", methods=["POST"])
@login_required
def create_bid():
    data = json_body()
    try:
        bid = place_bid(db.session, data.get("itemId"), current_user, data.get("bidAmount"))
    except Exception:
        db.session.rollback()
        raise
    return jsonify(bid.to_dict()), 201


@main_bp.route("/bids", methods=["GET"])
def list_bids():
    item_ids = dedupe_ids((request.args.get("itemIds") or "").split(","))
    return jsonify([b.to_dict() for b in bids_for_items(db.session, item_ids)])
