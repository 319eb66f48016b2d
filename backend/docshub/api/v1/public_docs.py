# docshub/api/v1/public_docs.py
from flask import jsonify
from docshub.models.page import Page
from docshub.models.space import Space
from docshub.domain.invariants.exceptions import NotFound
from docshub.normalizers.space import normalize_space
from docshub.normalizers.page import normalize_page
from . import v1_bp

# ------------------------
# Public documentation site (no authentication)
# ------------------------

def _public_space(slug):
    space = Space.query.filter_by(slug=slug, is_public=True).first()
    if not space:
        raise NotFound("This documentation space does not exist or is not public.")
    return space

@v1_bp.route("/docs/<slug>", methods=["GET"])
def public_space(slug):
    space = _public_space(slug)
    pages = (
        Page.query
        .filter_by(space_id=space.id, parent_id=None, is_published=True)
        .order_by(Page.order_index.asc())
        .all()
    )

    data = normalize_space(space, include_pages=True, pages=pages)
    data.pop("owner_id")

    # Clients redirect to the first published page when there is one
    data["first_page_slug"] = pages[0].slug if pages else None
    return jsonify(data), 200

@v1_bp.route("/docs/<slug>/<page_slug>", methods=["GET"])
def public_page(slug, page_slug):
    space = _public_space(slug)
    page = Page.query.filter_by(
        space_id=space.id,
        slug=page_slug,
        is_published=True
    ).first()

    if not page:
        raise NotFound("This page does not exist or has not been published.")

    return jsonify(normalize_page(page, rendered=True)), 200
