from typing import Any, Dict
from flask import current_app
from sqlalchemy.exc import IntegrityError
from docshub.extensions import db
from docshub.models.page import Page
from docshub.models.space import Space
from docshub.domain.invariants.exceptions import InvariantViolation, SlugConflict
from docshub.domain.invariants.resource import require_text, resolve_slug
from docshub.utils.audit import log_action
from docshub.utils.order import next_order_index
from docshub.utils.transaction import transactional


def create_page(
    *,
    space: Space,
    actor_id: str,
    data: Dict[str, Any],
) -> Page:
    """
    Create a page in a space, appended after its last sibling.

    Edge cases handled:
    - Missing title
    - Parent page from another space
    - Duplicate slug within the space
    """
    title = require_text(data.get("title"), "Title")
    slug = resolve_slug(name=title, slug=data.get("slug"))
    parent_id = data.get("parent_id") or None

    if parent_id and not Page.query.filter_by(id=parent_id, space_id=space.id).first():
        raise InvariantViolation("Parent page must belong to the same space")

    page = Page()
    page.space_id = space.id
    page.title = title
    page.slug = slug
    page.content = data.get("content") or ""
    page.parent_id = parent_id
    page.is_published = bool(data.get("is_published", False))
    page.created_by = actor_id
    page.order_index = next_order_index(
        Page.query.filter_by(space_id=space.id, parent_id=parent_id), Page
    )

    try:
        with transactional():
            db.session.add(page)
            db.session.flush()

            log_action(
                action="page.create",
                entity_type="page",
                entity_id=page.id,
                actor_id=actor_id,
                payload={
                    "space_id": space.id,
                    "slug": page.slug,
                    "is_published": page.is_published,
                },
            )

    except IntegrityError as exc:
        current_app.logger.warning("Page slug %r already taken in space %s", slug, space.id)
        raise SlugConflict("A page with this slug already exists in this space") from exc

    return page
