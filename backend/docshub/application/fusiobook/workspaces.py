from typing import Any, Dict
from flask import current_app
from sqlalchemy.exc import IntegrityError
from docshub.extensions import db
from docshub.models.team import Team
from docshub.models.workspace import Workspace, WORKSPACE_THEMES
from docshub.domain.invariants.exceptions import InvariantViolation, SlugConflict
from docshub.domain.invariants.resource import require_text, resolve_slug
from docshub.utils.audit import log_action
from docshub.utils.transaction import transactional


ALLOWED_UPDATE_FIELDS = ("name", "description", "icon", "is_public", "theme", "custom_domain")


def _check_theme(theme):
    if not isinstance(theme, str) or theme not in WORKSPACE_THEMES:
        allowed = ", ".join(sorted(WORKSPACE_THEMES))
        raise InvariantViolation(f"Invalid theme '{theme}'. Expected one of: {allowed}")
    return theme


def create_workspace(
    *,
    team: Team,
    actor_id: str,
    data: Dict[str, Any],
) -> Workspace:
    """
    Create a documentation workspace for a team.

    Edge cases handled:
    - Missing name
    - Unknown theme
    - Duplicate slug (workspace slugs are global: they appear in /w/<slug>)
    """
    name = require_text(data.get("name"), "Name")
    slug = resolve_slug(name=name, slug=data.get("slug"))

    workspace = Workspace()
    workspace.team_id = team.id
    workspace.name = name
    workspace.slug = slug
    workspace.description = data.get("description") or None
    workspace.icon = data.get("icon") or "📚"
    workspace.is_public = bool(data.get("is_public", False))
    workspace.theme = _check_theme(data.get("theme") or "default")

    try:
        with transactional():
            db.session.add(workspace)
            db.session.flush()

            log_action(
                action="workspace.create",
                entity_type="workspace",
                entity_id=workspace.id,
                actor_id=actor_id,
                team_id=team.id,
                payload={"slug": slug, "is_public": workspace.is_public},
            )

    except IntegrityError as exc:
        current_app.logger.warning("Workspace slug %r already taken", slug)
        raise SlugConflict("A workspace with this slug already exists") from exc

    current_app.logger.info("Created workspace %s for team %s", slug, team.slug)
    return workspace


def update_workspace(
    *,
    workspace: Workspace,
    actor_id: str,
    data: Dict[str, Any],
) -> Workspace:
    if "name" in data:
        data = {**data, "name": require_text(data["name"], "Name")}
    if "theme" in data:
        _check_theme(data["theme"])
    if "is_public" in data:
        data = {**data, "is_public": bool(data["is_public"])}

    changed_fields: list[str] = []

    with transactional():
        for field in ALLOWED_UPDATE_FIELDS:
            if field in data and getattr(workspace, field) != data[field]:
                setattr(workspace, field, data[field])
                changed_fields.append(field)

        if not changed_fields:
            raise InvariantViolation("No valid fields provided for update")

        log_action(
            action="workspace.update",
            entity_type="workspace",
            entity_id=workspace.id,
            actor_id=actor_id,
            team_id=workspace.team_id,
            payload={"fields": changed_fields},
        )

    return workspace
