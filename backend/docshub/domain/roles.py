from enum import Enum
from typing import List, Optional

from .invariants.exceptions import InvariantViolation


class TeamRole(str, Enum):
    OWNER = "owner"
    ADMIN = "admin"
    EDITOR = "editor"
    VIEWER = "viewer"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    def at_least(self, other: "TeamRole") -> bool:
        return self.rank >= other.rank


_RANKS = {
    TeamRole.VIEWER: 1,
    TeamRole.EDITOR: 2,
    TeamRole.ADMIN: 3,
    TeamRole.OWNER: 4,
}

MANAGER_ROLES = {TeamRole.OWNER, TeamRole.ADMIN}


def parse_role(value) -> TeamRole:
    """
    Parse a role name into the closed TeamRole enum.

    Matching is case-insensitive ("Owner" == "owner"); anything else is
    rejected as invalid input.
    """
    if isinstance(value, TeamRole):
        return value

    if not isinstance(value, str):
        raise InvariantViolation("Role is required")

    try:
        return TeamRole(value.strip().lower())
    except ValueError:
        allowed = ", ".join(r.value for r in TeamRole)
        raise InvariantViolation(
            f"Invalid role '{value}'. Expected one of: {allowed}"
        ) from None


def can_manage_members(role: Optional[TeamRole]) -> bool:
    return role in MANAGER_ROLES


def assignable_roles(role: Optional[TeamRole]) -> List[TeamRole]:
    """Roles the acting member may grant. Only owners can grant owner."""
    if role == TeamRole.OWNER:
        return [TeamRole.OWNER, TeamRole.ADMIN, TeamRole.EDITOR, TeamRole.VIEWER]
    if role == TeamRole.ADMIN:
        return [TeamRole.ADMIN, TeamRole.EDITOR, TeamRole.VIEWER]
    return []


def member_permissions(role: Optional[TeamRole]) -> dict:
    """Management controls the members screen may render for this role."""
    manage = can_manage_members(role)
    return {
        "can_invite": manage,
        "can_change_roles": manage,
        "can_remove_members": manage,
        "assignable_roles": [r.value for r in assignable_roles(role)],
    }
