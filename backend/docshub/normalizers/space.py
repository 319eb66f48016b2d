from ._time import iso
from .page import normalize_page_summary


def normalize_space(space, include_pages=False, pages=None):
    data = {
        "id": space.id,
        "name": space.name,
        "slug": space.slug,
        "description": space.description,
        "owner_id": space.owner_id,
        "is_public": space.is_public,
        "created_at": iso(space.created_at),
        "updated_at": iso(space.updated_at),
    }

    if include_pages:
        items = pages if pages is not None else space.pages
        data["pages"] = [normalize_page_summary(p) for p in items]

    return data
