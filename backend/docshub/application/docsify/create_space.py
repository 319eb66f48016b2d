from typing import Any, Dict
from flask import current_app
from sqlalchemy.exc import IntegrityError
from docshub.extensions import db
from docshub.models.space import Space
from docshub.domain.invariants.exceptions import SlugConflict
from docshub.domain.invariants.resource import require_text, resolve_slug
from docshub.utils.audit import log_action
from docshub.utils.transaction import transactional


def create_space(
    *,
    owner_id: str,
    data: Dict[str, Any],
) -> Space:
    """
    Create a documentation space owned by the caller.

    Edge cases handled:
    - Missing name
    - Slug derived from the name when not supplied
    - Duplicate slug
    """
    name = require_text(data.get("name"), "Name")

    space = Space()
    space.name = name
    slug = resolve_slug(name=name, slug=data.get("slug"))
    space.slug = slug
    space.description = data.get("description") or None
    space.is_public = bool(data.get("is_public", False))
    space.owner_id = owner_id

    try:
        with transactional():
            db.session.add(space)
            db.session.flush()

            log_action(
                action="space.create",
                entity_type="space",
                entity_id=space.id,
                actor_id=owner_id,
                payload={"slug": space.slug, "is_public": space.is_public},
            )

    except IntegrityError as exc:
        current_app.logger.warning("Space slug %r already taken", slug)
        raise SlugConflict("A space with this slug already exists") from exc

    current_app.logger.info("Created space %s (%s)", slug, space.id)
    return space
