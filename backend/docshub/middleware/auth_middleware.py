from flask import g
from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request
from docshub.models.user import User
from docshub.extensions import db

def auth_middleware(app):
    @app.before_request
    def load_current_user():
        # Public routes (docs site, public workspaces) run without a token
        g.current_user = None

        verify_jwt_in_request(optional=True)
        user_id = get_jwt_identity()
        if not user_id:
            return

        user = db.session.get(User, user_id)
        if user and user.is_active:
            # Attach user to global context
            g.current_user = user
