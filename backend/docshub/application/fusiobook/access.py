from typing import Optional

from docshub.domain.invariants.exceptions import NotFound, PermissionDenied
from docshub.domain.roles import TeamRole
from docshub.models.team import Team
from docshub.models.team_member import TeamMember
from docshub.models.workspace import Workspace


def get_team(slug: str) -> Team:
    team = Team.query.filter_by(slug=slug).first()
    if not team:
        raise NotFound("Team not found")
    return team


def get_workspace(slug: str) -> Workspace:
    workspace = Workspace.query.filter_by(slug=slug).first()
    if not workspace:
        raise NotFound("Workspace not found")
    return workspace


def member_role(team_id: str, user_id: Optional[str]) -> Optional[TeamRole]:
    if not user_id:
        return None

    member = TeamMember.query.filter_by(team_id=team_id, user_id=user_id).first()
    return member.role if member else None


def require_role(
    team_id: str,
    user_id: Optional[str],
    minimum: TeamRole,
    *,
    action: str = "perform this action",
) -> TeamRole:
    """
    Membership check enforced on the server for every team-scoped write.
    Returns the caller's role when it is at least `minimum`.
    """
    role = member_role(team_id, user_id)

    if role is None:
        raise PermissionDenied("You are not a member of this team")

    if not role.at_least(minimum):
        raise PermissionDenied(f"You do not have permission to {action}")

    return role


def workspace_read_role(workspace: Workspace, user_id: Optional[str]) -> Optional[TeamRole]:
    """
    Role used to read a workspace. Public workspaces are readable by
    anyone (None is returned for non-members); private ones need membership.
    """
    role = member_role(workspace.team_id, user_id)

    if role is None and not workspace.is_public:
        # Hide the existence of private workspaces from outsiders
        raise NotFound("Workspace not found")

    return role
