from typing import Set

from ..invariants.exceptions import InvariantViolation

# Explicit allowed publish-flag transitions
ALLOWED_DOCUMENT_TRANSITIONS: dict[str, Set[str]] = {
    "draft": {"published"},
    "published": {"draft"},
}


def status_of(is_published: bool) -> str:
    return "published" if is_published else "draft"


def assert_document_transition(*, from_status: str, to_status: str) -> None:
    """
    Guards document publish/unpublish.
    Re-publishing a published document is rejected rather than ignored.
    """
    allowed = ALLOWED_DOCUMENT_TRANSITIONS.get(from_status, set())

    if to_status not in allowed:
        raise InvariantViolation(
            f"Illegal document transition: {from_status} → {to_status}"
        )
