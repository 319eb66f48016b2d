from typing import Dict
from docshub.models.base import utc_now
from docshub.models.document import Document
from docshub.domain.lifecycle.document import assert_document_transition, status_of
from docshub.utils.audit import log_action
from docshub.utils.transaction import transactional


def _set_published(document: Document, *, actor_id: str, publish: bool) -> Dict[str, object]:
    to_status = status_of(publish)

    with transactional():
        # Lifecycle transition enforcement
        assert_document_transition(
            from_status=status_of(document.is_published), to_status=to_status
        )

        document.is_published = publish
        document.published_at = utc_now() if publish else None
        document.updated_by = actor_id

        log_action(
            action=f"document.{'publish' if publish else 'unpublish'}",
            entity_type="document",
            entity_id=document.id,
            actor_id=actor_id,
            team_id=document.collection.workspace.team_id,
            payload={"version": document.version},
        )

    return {
        "document_id": document.id,
        "status": to_status,
        "version": document.version,
    }


def publish_document(*, document: Document, actor_id: str) -> Dict[str, object]:
    """Publish a draft. The content version is left unchanged."""
    return _set_published(document, actor_id=actor_id, publish=True)


def unpublish_document(*, document: Document, actor_id: str) -> Dict[str, object]:
    return _set_published(document, actor_id=actor_id, publish=False)
