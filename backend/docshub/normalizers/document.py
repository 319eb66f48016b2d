from ._time import iso
from docshub.utils.rendering import render_markdown


def normalize_document_summary(document):
    return {
        "id": document.id,
        "title": document.title,
        "slug": document.slug,
        "excerpt": document.excerpt,
        "icon": document.icon,
        "order_index": document.order_index,
        "is_published": document.is_published,
    }


def normalize_document(document, rendered=False):
    data = normalize_document_summary(document)
    data.update({
        "collection_id": document.collection_id,
        "parent_id": document.parent_id,
        "content": document.content,
        "version": document.version,
        "template": document.template,
        "created_by": document.created_by,
        "updated_by": document.updated_by,
        "created_at": iso(document.created_at),
        "updated_at": iso(document.updated_at),
        "published_at": iso(document.published_at),
    })

    if rendered:
        data["html"] = render_markdown(document.content)

    return data


def normalize_version(version, include_content=False):
    data = {
        "id": version.id,
        "document_id": version.document_id,
        "version": version.version,
        "title": version.title,
        "change_summary": version.change_summary,
        "created_by": version.created_by,
        "created_at": iso(version.created_at),
    }
    if include_content:
        data["content"] = version.content
    return data


def normalize_comment(comment):
    return {
        "id": comment.id,
        "document_id": comment.document_id,
        "user_id": comment.user_id,
        "user_email": comment.user.email if comment.user else "Unknown user",
        "content": comment.content,
        "resolved": comment.resolved,
        "created_at": iso(comment.created_at),
    }
