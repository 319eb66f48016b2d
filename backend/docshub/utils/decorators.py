from functools import wraps
from flask import g
from docshub.domain.invariants.exceptions import AuthenticationError
from docshub.domain.roles import TeamRole
from docshub.application.fusiobook.access import get_team, get_workspace, require_role

def active_user_required(fn):
    """Pairs with @jwt_required(): the token's user must still exist and be active."""
    @wraps(fn)
    def wrapper(*args, **kwargs):
        if not getattr(g, "current_user", None):
            raise AuthenticationError("User account not found or disabled")

        return fn(*args, **kwargs)
    return wrapper

def team_role_required(minimum: TeamRole, *, action: str = "perform this action"):
    """
    Resolve the team from the `slug` URL segment and require a minimum role.
    Sets g.current_team and g.current_role.
    """
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            team = get_team(kwargs["slug"])
            g.current_team = team
            g.current_role = require_role(team.id, g.current_user.id, minimum, action=action)

            return fn(*args, **kwargs)
        return wrapper
    return decorator

def workspace_role_required(minimum: TeamRole, *, action: str = "perform this action"):
    """
    Resolve the workspace from the `slug` URL segment and require a minimum
    role in its owning team. Sets g.current_workspace and g.current_role.
    """
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            workspace = get_workspace(kwargs["slug"])
            g.current_workspace = workspace
            g.current_role = require_role(
                workspace.team_id, g.current_user.id, minimum, action=action
            )

            return fn(*args, **kwargs)
        return wrapper
    return decorator
