import uuid
from flask import current_app, request


def visitor_id_from_request():
    """
    Return (visitor_id, is_new) for the calling browser.

    The id lives in a long-lived cookie; a new random id is issued when the
    cookie is missing or malformed.
    """
    cookie_name = current_app.config["VISITOR_COOKIE_NAME"]
    existing = request.cookies.get(cookie_name)

    if existing:
        try:
            return str(uuid.UUID(existing)), False
        except ValueError:
            pass

    return str(uuid.uuid4()), True


def attach_visitor_cookie(response, visitor_id):
    response.set_cookie(
        current_app.config["VISITOR_COOKIE_NAME"],
        visitor_id,
        max_age=60 * 60 * 24 * 365,
        httponly=True,
        samesite="Lax",
    )
    return response
