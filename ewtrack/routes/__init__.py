from flask import Blueprint, request

main_bp = Blueprint("main", __name__)
auth_bp = Blueprint("auth", __name__, url_prefix="/auth")


def json_body():
    """Request JSON as a dict; anything else becomes an empty dict."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


from . import items, auctions, pickups, scheduling, users, vendors, auth  # noqa: E402,F401
