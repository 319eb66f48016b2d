from typing import Any, List
from docshub.models.page import Page
from docshub.models.space import Space
from docshub.domain.invariants.exceptions import InvariantViolation
from docshub.utils.audit import log_action
from docshub.utils.order import compact_order
from docshub.utils.transaction import transactional


def reorder_pages(
    *,
    space: Space,
    actor_id: str,
    items: List[Any],
) -> List[Page]:
    """
    Apply [{id, order_index}, ...] to root pages, then compact to 0..N-1.
    Ids that are not root pages of this space are rejected.
    """
    if not isinstance(items, list) or not items:
        raise InvariantViolation("Invalid payload")

    root_query = Page.query.filter_by(space_id=space.id, parent_id=None)
    page_map = {p.id: p for p in root_query.all()}

    with transactional():
        for item in items:
            if not isinstance(item, dict) or item.get("id") not in page_map:
                raise InvariantViolation("Unknown page in reorder payload")
            if not isinstance(item.get("order_index"), int):
                raise InvariantViolation("order_index must be an integer")

            page_map[item["id"]].order_index = item["order_index"]

        pages = compact_order(root_query, Page)

        log_action(
            action="page.reorder",
            entity_type="space",
            entity_id=space.id,
            actor_id=actor_id,
            payload={"count": len(items)},
        )

    return pages
