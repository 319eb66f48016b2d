from typing import Any, Dict, Optional
from flask import current_app
from sqlalchemy.exc import IntegrityError
from docshub.extensions import db
from docshub.models.base import utc_now
from docshub.models.document import Document
from docshub.domain.invariants.exceptions import VersionConflict
from docshub.domain.invariants.resource import require_text
from docshub.utils.audit import log_action
from docshub.utils.transaction import transactional
from docshub.utils.versioning import (
    restore_change_summary,
    snapshot_version,
    update_change_summary,
)
from .documents import get_version

CONFLICT_MESSAGE = "Document was modified by someone else; reload and try again"


def _current_version(document_id: str) -> Optional[int]:
    return (
        db.session.query(Document.version)
        .filter(Document.id == document_id)
        .scalar()
    )


def save_document(
    *,
    document: Document,
    actor_id: str,
    expected_version: int,
    data: Dict[str, Any],
    change_summary: Optional[str] = None,
) -> Document:
    """
    Save an edit as version expected_version + 1.

    The UPDATE only matches while the stored version still equals the
    version the editor loaded; otherwise nothing is written and
    VersionConflict is raised. The history row is inserted in the same
    transaction, so a document and its history never diverge.
    """
    title = require_text(data.get("title", document.title), "Title")
    content = data.get("content", document.content) or ""
    excerpt = data["excerpt"] if "excerpt" in data else document.excerpt

    new_version = expected_version + 1
    document_id = document.id
    team_id = document.collection.workspace.team_id

    try:
        with transactional():
            updated = (
                Document.query
                .filter_by(id=document_id, version=expected_version)
                .update(
                    {
                        "title": title,
                        "content": content,
                        "excerpt": excerpt or None,
                        "version": new_version,
                        "updated_by": actor_id,
                        "updated_at": utc_now(),
                    },
                    synchronize_session=False,
                )
            )

            if updated == 0:
                raise VersionConflict(
                    CONFLICT_MESSAGE, current_version=_current_version(document_id)
                )

            # Reload the row as written by the guarded UPDATE
            db.session.expire(document)

            db.session.add(
                snapshot_version(
                    document,
                    version=new_version,
                    actor_id=actor_id,
                    change_summary=change_summary or update_change_summary(new_version),
                )
            )

            log_action(
                action="document.update",
                entity_type="document",
                entity_id=document_id,
                actor_id=actor_id,
                team_id=team_id,
                payload={"from_version": expected_version, "to_version": new_version},
            )

    except VersionConflict:
        current_app.logger.warning(
            "Rejected stale save of document %s at version %s", document_id, expected_version
        )
        raise

    except IntegrityError as exc:
        # uq_document_version: another save already claimed this number
        raise VersionConflict(
            CONFLICT_MESSAGE, current_version=_current_version(document_id)
        ) from exc

    current_app.logger.info("Saved document %s as version %s", document_id, new_version)
    return document


def restore_document_version(
    *,
    document: Document,
    actor_id: str,
    expected_version: int,
    restore_version: int,
) -> Document:
    """
    Restore a prior version's title and content as a new version.
    History is never rewritten; the restore is itself appended.
    """
    source = get_version(document, restore_version)

    return save_document(
        document=document,
        actor_id=actor_id,
        expected_version=expected_version,
        data={"title": source.title, "content": source.content},
        change_summary=restore_change_summary(restore_version),
    )
