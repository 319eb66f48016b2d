from flask import current_app
from docshub.extensions import db
from docshub.models.page import Page
from docshub.utils.audit import log_action
from docshub.utils.order import compact_order
from docshub.utils.transaction import transactional


def delete_page(
    *,
    page: Page,
    actor_id: str,
) -> None:
    """
    Hard-delete a page.

    Child pages are re-attached to the deleted page's parent so the tree
    never points at a missing row; sibling order is re-compacted.
    """
    page_id = page.id
    space_id = page.space_id
    parent_id = page.parent_id

    with transactional():
        Page.query.filter_by(space_id=space_id, parent_id=page_id).update(
            {"parent_id": parent_id}, synchronize_session=False
        )

        db.session.delete(page)
        db.session.flush()

        compact_order(Page.query.filter_by(space_id=space_id, parent_id=parent_id), Page)

        log_action(
            action="page.delete",
            entity_type="page",
            entity_id=page_id,
            actor_id=actor_id,
            payload={"space_id": space_id},
        )

    current_app.logger.info("Deleted page %s from space %s", page_id, space_id)
