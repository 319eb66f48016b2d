import re

_NON_SLUG_RUN = re.compile(r"[^a-z0-9]+")
SLUG_PATTERN = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


def generate_slug(text: str) -> str:
    """
    Derive a URL-safe token from a display name.

    "Product Docs!! 2.0" -> "product-docs-2-0". Uniqueness is not checked
    here; unique constraints reject duplicates at insert time.
    """
    return _NON_SLUG_RUN.sub("-", (text or "").lower()).strip("-")


def is_valid_slug(slug: str) -> bool:
    return isinstance(slug, str) and SLUG_PATTERN.match(slug) is not None
