from typing import Any, Dict
from flask import current_app
from sqlalchemy.exc import IntegrityError
from docshub.extensions import db
from docshub.models.base import utc_now
from docshub.models.collection import Collection
from docshub.models.document import Document
from docshub.domain.invariants.exceptions import InvariantViolation, SlugConflict
from docshub.domain.invariants.resource import require_text, resolve_slug
from docshub.utils.audit import log_action
from docshub.utils.order import next_order_index
from docshub.utils.transaction import transactional
from docshub.utils.versioning import initial_change_summary, snapshot_version
from .templates import get_template


def create_document(
    *,
    collection: Collection,
    actor_id: str,
    data: Dict[str, Any],
) -> Document:
    """
    Create a document at version 1 together with its first history row.

    Responsibilities:
    - Slug resolution and per-collection uniqueness
    - Template prefill when no content is given
    - Appending after the last sibling
    - Document + version row in one transaction
    """
    workspace = collection.workspace
    title = require_text(data.get("title"), "Title")
    slug = resolve_slug(name=title, slug=data.get("slug"))
    parent_id = data.get("parent_id") or None

    if parent_id and not Document.query.filter_by(id=parent_id, collection_id=collection.id).first():
        raise InvariantViolation("Parent document must belong to the same collection")

    content = data.get("content") or ""
    template_id = data.get("template_id") or None
    if template_id:
        template = get_template(workspace, template_id)
        content = content or template.content

    document = Document()
    document.collection_id = collection.id
    document.parent_id = parent_id
    document.title = title
    document.slug = slug
    document.content = content
    document.excerpt = data.get("excerpt") or None
    document.icon = data.get("icon") or "📄"
    document.template = template_id
    document.is_published = bool(data.get("is_published", False))
    document.published_at = utc_now() if document.is_published else None
    document.version = 1
    document.created_by = actor_id
    document.updated_by = actor_id
    document.order_index = next_order_index(
        Document.query.filter_by(collection_id=collection.id, parent_id=parent_id), Document
    )

    try:
        with transactional():
            db.session.add(document)
            db.session.flush()

            db.session.add(
                snapshot_version(
                    document,
                    version=1,
                    actor_id=actor_id,
                    change_summary=initial_change_summary(),
                )
            )

            log_action(
                action="document.create",
                entity_type="document",
                entity_id=document.id,
                actor_id=actor_id,
                team_id=workspace.team_id,
                payload={"slug": slug, "collection_id": collection.id, "version": 1},
            )

    except IntegrityError as exc:
        current_app.logger.warning(
            "Document slug %r already taken in collection %s", slug, collection.id
        )
        raise SlugConflict("A document with this slug already exists in this collection") from exc

    current_app.logger.info("Created document %s (%s)", slug, document.id)
    return document
