from typing import Any, Dict
from sqlalchemy.exc import IntegrityError
from docshub.models.space import Space
from docshub.domain.invariants.exceptions import InvariantViolation, SlugConflict
from docshub.domain.invariants.resource import require_text, resolve_slug
from docshub.utils.audit import log_action
from docshub.utils.transaction import transactional


ALLOWED_UPDATE_FIELDS = ("name", "slug", "description", "is_public")


def update_space(
    *,
    space: Space,
    actor_id: str,
    data: Dict[str, Any],
) -> Space:
    """Update a space's settings; no-op updates are rejected."""
    if "name" in data:
        data = {**data, "name": require_text(data["name"], "Name")}
    if "slug" in data:
        data = {**data, "slug": resolve_slug(name=None, slug=data["slug"])}
    if "is_public" in data:
        data = {**data, "is_public": bool(data["is_public"])}

    changed_fields: list[str] = []

    try:
        with transactional():
            for field in ALLOWED_UPDATE_FIELDS:
                if field in data and getattr(space, field) != data[field]:
                    setattr(space, field, data[field])
                    changed_fields.append(field)

            if not changed_fields:
                raise InvariantViolation("No valid fields provided for update")

            log_action(
                action="space.update",
                entity_type="space",
                entity_id=space.id,
                actor_id=actor_id,
                payload={"fields": changed_fields},
            )

    except IntegrityError as exc:
        raise SlugConflict("A space with this slug already exists") from exc

    return space
