from typing import Any, Dict
from sqlalchemy.exc import IntegrityError
from docshub.extensions import db
from docshub.models.collection import Collection
from docshub.models.workspace import Workspace
from docshub.domain.invariants.exceptions import NotFound, SlugConflict
from docshub.domain.invariants.resource import require_text, resolve_slug
from docshub.utils.audit import log_action
from docshub.utils.order import next_order_index
from docshub.utils.transaction import transactional


def get_collection(workspace: Workspace, slug: str) -> Collection:
    collection = Collection.query.filter_by(workspace_id=workspace.id, slug=slug).first()
    if not collection:
        raise NotFound("Collection not found")
    return collection


def create_collection(
    *,
    workspace: Workspace,
    actor_id: str,
    data: Dict[str, Any],
) -> Collection:
    """Create a collection appended after the workspace's last one."""
    name = require_text(data.get("name"), "Name")
    slug = resolve_slug(name=name, slug=data.get("slug"))

    collection = Collection()
    collection.workspace_id = workspace.id
    collection.name = name
    collection.slug = slug
    collection.description = data.get("description") or None
    collection.icon = data.get("icon") or None
    collection.order_index = next_order_index(
        Collection.query.filter_by(workspace_id=workspace.id), Collection
    )

    try:
        with transactional():
            db.session.add(collection)
            db.session.flush()

            log_action(
                action="collection.create",
                entity_type="collection",
                entity_id=collection.id,
                actor_id=actor_id,
                team_id=workspace.team_id,
                payload={"slug": slug, "order_index": collection.order_index},
            )

    except IntegrityError as exc:
        raise SlugConflict("A collection with this slug already exists in this workspace") from exc

    return collection
