from typing import Any, Dict
from sqlalchemy.exc import IntegrityError
from docshub.models.page import Page
from docshub.domain.invariants.exceptions import InvariantViolation, SlugConflict
from docshub.domain.invariants.resource import require_text, resolve_slug
from docshub.utils.audit import log_action
from docshub.utils.transaction import transactional


ALLOWED_UPDATE_FIELDS = ("title", "slug", "content", "is_published")


def update_page(
    *,
    page: Page,
    actor_id: str,
    data: Dict[str, Any],
) -> Page:
    """
    Update mutable fields on a page.

    Design rules:
    - Only whitelisted fields are mutable
    - No silent no-op updates
    """
    if "title" in data:
        data = {**data, "title": require_text(data["title"], "Title")}
    if "slug" in data:
        data = {**data, "slug": resolve_slug(name=None, slug=data["slug"])}
    if "content" in data:
        data = {**data, "content": data["content"] or ""}
    if "is_published" in data:
        data = {**data, "is_published": bool(data["is_published"])}

    changed_fields: list[str] = []

    try:
        with transactional():
            for field in ALLOWED_UPDATE_FIELDS:
                if field in data and getattr(page, field) != data[field]:
                    setattr(page, field, data[field])
                    changed_fields.append(field)

            if not changed_fields:
                # Explicitly fail instead of silently succeeding
                raise InvariantViolation("No valid fields provided for update")

            log_action(
                action="page.update",
                entity_type="page",
                entity_id=page.id,
                actor_id=actor_id,
                payload={"fields": changed_fields},
            )

    except IntegrityError as exc:
        raise SlugConflict("A page with this slug already exists in this space") from exc

    return page
