"""
Team membership: invite, role change, removal.

Every action requires the acting member to be an owner or admin, checked
here on the server. Only owners may grant or take away the owner role, and
a team always keeps at least one owner.
"""
from flask import current_app
from sqlalchemy.exc import IntegrityError
from docshub.extensions import db
from docshub.models.team import Team
from docshub.models.team_member import TeamMember
from docshub.models.user import User
from docshub.domain.invariants.exceptions import (
    InvariantViolation,
    NotFound,
    PermissionDenied,
    SlugConflict,
)
from docshub.domain.invariants.resource import require_text
from docshub.domain.roles import TeamRole, assignable_roles, can_manage_members, parse_role
from docshub.utils.audit import log_action
from docshub.utils.transaction import transactional
from .access import member_role


def _require_manager(team: Team, actor_id: str, action: str) -> TeamRole:
    role = member_role(team.id, actor_id)
    if not can_manage_members(role):
        raise PermissionDenied(f"You do not have permission to {action}")
    return role


def _require_assignable(actor_role: TeamRole, role: TeamRole) -> None:
    if role not in assignable_roles(actor_role):
        raise PermissionDenied(f"You cannot assign the {role.value} role")


def _get_member(team: Team, member_id: str) -> TeamMember:
    member = TeamMember.query.filter_by(id=member_id, team_id=team.id).first()
    if not member:
        raise NotFound("Team member not found")
    return member


def _owner_count(team: Team) -> int:
    return TeamMember.query.filter_by(team_id=team.id, role=TeamRole.OWNER).count()


def invite_member(
    *,
    team: Team,
    actor_id: str,
    email: str,
    role,
) -> TeamMember:
    actor_role = _require_manager(team, actor_id, "invite members")
    role = parse_role(role)
    _require_assignable(actor_role, role)

    email = require_text(email, "Email address").lower()
    invitee = User.query.filter(db.func.lower(User.email) == email).first()
    if not invitee:
        raise NotFound("User not found. They must sign up first.")

    member = TeamMember()
    member.team_id = team.id
    member.user_id = invitee.id
    member.role = role

    try:
        with transactional():
            db.session.add(member)
            db.session.flush()

            log_action(
                action="member.invite",
                entity_type="team_member",
                entity_id=member.id,
                actor_id=actor_id,
                team_id=team.id,
                payload={"user_id": invitee.id, "role": role.value},
            )

    except IntegrityError as exc:
        raise SlugConflict("This user is already a member of the team") from exc

    current_app.logger.info("Invited %s to team %s as %s", email, team.slug, role.value)
    return member


def change_member_role(
    *,
    team: Team,
    actor_id: str,
    member_id: str,
    role,
) -> TeamMember:
    actor_role = _require_manager(team, actor_id, "change roles")
    role = parse_role(role)
    member = _get_member(team, member_id)

    if member.role == role:
        raise InvariantViolation(f"Member already has the {role.value} role")

    _require_assignable(actor_role, role)
    if member.role == TeamRole.OWNER:
        _require_assignable(actor_role, TeamRole.OWNER)
        if _owner_count(team) <= 1:
            raise InvariantViolation("A team must keep at least one owner")

    previous = member.role

    with transactional():
        member.role = role

        log_action(
            action="member.role_change",
            entity_type="team_member",
            entity_id=member.id,
            actor_id=actor_id,
            team_id=team.id,
            payload={"from": previous.value, "to": role.value},
        )

    return member


def remove_member(
    *,
    team: Team,
    actor_id: str,
    member_id: str,
) -> None:
    actor_role = _require_manager(team, actor_id, "remove members")
    member = _get_member(team, member_id)

    if member.role == TeamRole.OWNER:
        _require_assignable(actor_role, TeamRole.OWNER)
        if _owner_count(team) <= 1:
            raise InvariantViolation("A team must keep at least one owner")

    removed_id = member.id
    removed_user = member.user_id

    with transactional():
        db.session.delete(member)

        log_action(
            action="member.remove",
            entity_type="team_member",
            entity_id=removed_id,
            actor_id=actor_id,
            team_id=team.id,
            payload={"user_id": removed_user},
        )

    current_app.logger.info("Removed member %s from team %s", removed_user, team.slug)
