from ._time import iso
from .document import normalize_document_summary


def normalize_workspace(workspace):
    return {
        "id": workspace.id,
        "team_id": workspace.team_id,
        "name": workspace.name,
        "slug": workspace.slug,
        "description": workspace.description,
        "icon": workspace.icon,
        "is_public": workspace.is_public,
        "theme": workspace.theme,
        "custom_domain": workspace.custom_domain,
        "created_at": iso(workspace.created_at),
        "updated_at": iso(workspace.updated_at),
    }


def normalize_collection(collection, documents=None):
    data = {
        "id": collection.id,
        "workspace_id": collection.workspace_id,
        "name": collection.name,
        "slug": collection.slug,
        "description": collection.description,
        "icon": collection.icon,
        "order_index": collection.order_index,
    }

    if documents is not None:
        data["documents"] = [normalize_document_summary(d) for d in documents]

    return data


def normalize_template(template):
    return {
        "id": template.id,
        "workspace_id": template.workspace_id,
        "name": template.name,
        "description": template.description,
        "content": template.content,
        "icon": template.icon,
        "is_default": template.is_default,
    }
