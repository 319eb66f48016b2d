from typing import Any, Dict
from flask import current_app
from sqlalchemy.exc import IntegrityError
from docshub.extensions import db
from docshub.models.team import Team
from docshub.models.team_member import TeamMember
from docshub.domain.invariants.exceptions import SlugConflict
from docshub.domain.invariants.resource import require_text, resolve_slug
from docshub.domain.roles import TeamRole
from docshub.utils.audit import log_action
from docshub.utils.transaction import transactional


def create_team(
    *,
    actor_id: str,
    data: Dict[str, Any],
) -> Team:
    """
    Create a team and make the caller its owner.

    Both rows are written in one transaction, so a team never exists
    without an owner.
    """
    name = require_text(data.get("name"), "Team name")
    slug = resolve_slug(name=name, slug=data.get("slug"))

    team = Team()
    team.name = name
    team.slug = slug
    team.avatar_url = data.get("avatar_url") or None

    try:
        with transactional():
            db.session.add(team)
            db.session.flush()

            owner = TeamMember()
            owner.team_id = team.id
            owner.user_id = actor_id
            owner.role = TeamRole.OWNER
            db.session.add(owner)

            log_action(
                action="team.create",
                entity_type="team",
                entity_id=team.id,
                actor_id=actor_id,
                team_id=team.id,
                payload={"name": name, "slug": slug},
            )

    except IntegrityError as exc:
        current_app.logger.warning("Team slug %r already taken", slug)
        raise SlugConflict("A team with this slug already exists") from exc

    current_app.logger.info("Created team %s (%s)", slug, team.id)
    return team
