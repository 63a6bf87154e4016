from datetime import datetime

from flask import jsonify
from flask_login import login_user, logout_user, login_required
from email_validator import validate_email, EmailNotValidError

from ..errors import ValidationError, LifecycleError
from ..extensions import db
from ..models.user import User, USER_ROLES
from . import auth_bp, json_body


@auth_bp.route("/register", methods=["POST"])
def register():
    data = json_body()
    name = (data.get("name") or "").strip()
    email = (data.get("email") or "").strip().lower()
    password = data.get("password") or ""
    role = (data.get("role") or "user").strip().lower()

    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        raise ValidationError("Please enter a valid email address.")
    if not name:
        raise ValidationError("Name is required.")
    if len(password) < 6:
        raise ValidationError("Password must be at least 6 characters.")
    if role not in USER_ROLES:
        raise ValidationError(f"Invalid role specified: {role}. Valid roles are {', '.join(USER_ROLES)}.")
    if User.query.filter_by(email=email).first():
        raise LifecycleError("An account with this email already exists.", status_code=409)

    user = User(
        name=name,
        email=email,
        role=role,
        contact=(data.get("contact") or "").strip() or None,
        certified=bool(data.get("certified", False)),
    )
    user.set_password(password)
    db.session.add(user)
    db.session.commit()
    return jsonify(user.to_dict()), 201


@auth_bp.route("/login", methods=["POST"])
def login():
    data = json_body()
    email = (data.get("email") or "").strip().lower()
    password = data.get("password") or ""

    user = User.query.filter_by(email=email).first()
    if not user or not user.check_password(password):
        return jsonify({"success": False, "message": "Invalid credentials."}), 401

    login_user(user)
    user.updated_at = datetime.utcnow()
    db.session.commit()
    return jsonify({"success": True, "user": user.to_dict()})


@auth_bp.route("/logout", methods=["POST"])
@login_required
def logout():
    logout_user()
    return jsonify({"success": True, "message": "Signed out."})
