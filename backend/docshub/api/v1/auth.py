from flask import jsonify, g, current_app
from flask_jwt_extended import create_access_token, jwt_required
from sqlalchemy.exc import IntegrityError
from docshub.extensions import db
from docshub.models.user import User
from docshub.domain.invariants.exceptions import (
    AuthenticationError,
    InvariantViolation,
    PermissionDenied,
    SlugConflict,
)
from docshub.utils.request_body import json_object
from docshub.utils.decorators import active_user_required
from docshub.utils.transaction import transactional
from . import v1_bp

MIN_PASSWORD_LENGTH = 8


def _credentials():
    data = json_object()
    if not data:
        raise InvariantViolation("Invalid request body")

    email = (data.get("email") or "").strip().lower()
    password = data.get("password") or ""

    if not email or not password:
        raise InvariantViolation("Email and password required")

    return email, password


def _token_response(user, status):
    access_token = create_access_token(identity=user.id)
    return jsonify({
        "access_token": access_token,
        "user": {"id": user.id, "email": user.email}
    }), status


@v1_bp.route("/auth/register", methods=["POST"])
def register():
    email, password = _credentials()

    if "@" not in email:
        raise InvariantViolation("A valid email address is required")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise InvariantViolation(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
        )

    user = User()
    user.email = email
    user.set_password(password)

    try:
        with transactional():
            db.session.add(user)
    except IntegrityError as exc:
        raise SlugConflict("An account with this email already exists") from exc

    current_app.logger.info("Registered user %s", user.id)
    return _token_response(user, 201)


@v1_bp.route("/auth/login", methods=["POST"])
def login():
    email, password = _credentials()

    user = User.query.filter_by(email=email).first()

    if not user or not user.check_password(password):
        raise AuthenticationError("Invalid credentials")

    if not user.is_active:
        raise PermissionDenied("User account disabled")

    return _token_response(user, 200)


@v1_bp.route("/auth/me", methods=["GET"])
@jwt_required()
@active_user_required
def me():
    user = g.current_user
    return jsonify({"id": user.id, "email": user.email}), 200
