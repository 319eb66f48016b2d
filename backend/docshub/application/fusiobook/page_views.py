from typing import Dict, Optional
from docshub.extensions import db
from docshub.models.document import Document
from docshub.models.page_view import PageView
from docshub.utils.transaction import transactional


def record_page_view(
    *,
    document: Document,
    visitor_id: str,
    user_id: Optional[str] = None,
) -> PageView:
    """Analytics rows are not audited; one row per view."""
    view = PageView()
    view.document_id = document.id
    view.visitor_id = visitor_id
    view.user_id = user_id

    with transactional():
        db.session.add(view)

    return view


def document_view_stats(document: Document) -> Dict[str, int]:
    total, unique = (
        db.session.query(
            db.func.count(PageView.id),
            db.func.count(db.distinct(PageView.visitor_id)),
        )
        .filter(PageView.document_id == document.id)
        .one()
    )
    return {"total_views": total or 0, "unique_visitors": unique or 0}
