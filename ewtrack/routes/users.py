from flask import request, jsonify

from ..errors import ValidationError, NotFoundError
from ..extensions import db
from ..helpers import is_valid_id
from ..models.user import User, USER_ROLES
from . import main_bp


@main_bp.route("/users")
def list_users():
    """Users by ``role`` or a single user by ``id``. Passwords are never returned."""
    role = request.args.get("role")
    user_id = request.args.get("id")

    if user_id:
        if not is_valid_id(user_id):
            raise ValidationError("Invalid user ID format.")
        user = db.session.get(User, user_id)
        if user is None:
            raise NotFoundError("User not found.")
        return jsonify(user.to_dict()), 200

    if not role:
        raise ValidationError("A 'role' query parameter or an 'id' query parameter is required.")
    if role not in USER_ROLES:
        raise ValidationError(f"Invalid role specified: {role}. Valid roles are {', '.join(USER_ROLES)}.")

    users = User.query.filter_by(role=role).order_by(User.name.asc()).all()
    return jsonify([u.to_dict() for u in users]), 200
