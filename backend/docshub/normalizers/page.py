from ._time import iso
from docshub.utils.rendering import render_markdown


def normalize_page_summary(page):
    return {
        "id": page.id,
        "title": page.title,
        "slug": page.slug,
        "parent_id": page.parent_id,
        "order_index": page.order_index,
        "is_published": page.is_published,
    }


def normalize_page(page, admin=False, rendered=False):
    data = normalize_page_summary(page)
    data["content"] = page.content

    if rendered:
        data["html"] = render_markdown(page.content)

    if admin:
        data["space_id"] = page.space_id
        data["created_by"] = page.created_by
        data["created_at"] = iso(page.created_at)
    data["updated_at"] = iso(page.updated_at)

    return data
