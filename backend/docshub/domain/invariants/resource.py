from typing import Optional

from ..slug import generate_slug, is_valid_slug
from .exceptions import InvariantViolation


def resolve_slug(*, name: Optional[str], slug: Optional[str]) -> str:
    """
    Return the slug a create form submits.

    An explicit slug must already be URL-safe; otherwise it is derived from
    the display name.
    """
    if slug is not None and slug != "":
        if not is_valid_slug(slug):
            raise InvariantViolation(
                "Slug may only contain lowercase letters, numbers, and hyphens"
            )
        return slug

    derived = generate_slug(name or "")
    if not derived:
        raise InvariantViolation("A slug could not be derived from the name")
    return derived


def require_text(value: Optional[str], field: str) -> str:
    if value is None:
        raise InvariantViolation(f"{field} is required")
    if not isinstance(value, str):
        raise InvariantViolation(f"{field} must be text")

    if not value.strip():
        raise InvariantViolation(f"{field} is required")
    return value.strip()
