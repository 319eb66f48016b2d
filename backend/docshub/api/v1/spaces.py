# docshub/api/v1/spaces.py
from flask import g, request, jsonify
from flask_jwt_extended import jwt_required
from docshub.models.page import Page
from docshub.models.space import Space
from docshub.application.docsify.access import get_owned_space, get_space_page
from docshub.application.docsify.create_space import create_space
from docshub.application.docsify.update_space import update_space
from docshub.application.docsify.create_page import create_page
from docshub.application.docsify.update_page import update_page
from docshub.application.docsify.delete_page import delete_page
from docshub.application.docsify.reorder_pages import reorder_pages
from docshub.normalizers.space import normalize_space
from docshub.normalizers.page import normalize_page, normalize_page_summary
from docshub.utils.request_body import json_object
from docshub.utils.decorators import active_user_required
from docshub.utils.optimistic_lock import enforce_optimistic_lock, with_last_modified
from . import v1_bp

# ------------------------
# Spaces
# ------------------------

@v1_bp.route("/spaces", methods=["GET"])
@jwt_required()
@active_user_required
def list_spaces():
    spaces = (
        Space.query
        .filter_by(owner_id=g.current_user.id)
        .order_by(Space.created_at.desc())
        .all()
    )
    return jsonify({"items": [normalize_space(s) for s in spaces]}), 200

@v1_bp.route("/spaces", methods=["POST"])
@jwt_required()
@active_user_required
def create_space_route():
    data = json_object()
    space = create_space(owner_id=g.current_user.id, data=data)

    return jsonify(normalize_space(space)), 201

@v1_bp.route("/spaces/<slug>", methods=["GET"])
@jwt_required()
@active_user_required
def get_space(slug):
    space = get_owned_space(slug=slug, user_id=g.current_user.id)
    pages = (
        Page.query
        .filter_by(space_id=space.id)
        .order_by(Page.order_index.asc())
        .all()
    )

    response = jsonify(normalize_space(space, include_pages=True, pages=pages))
    return with_last_modified(response, space), 200

@v1_bp.route("/spaces/<slug>", methods=["PUT"])
@jwt_required()
@active_user_required
def update_space_route(slug):
    space = get_owned_space(slug=slug, user_id=g.current_user.id)
    enforce_optimistic_lock(space)

    data = json_object()
    space = update_space(space=space, actor_id=g.current_user.id, data=data)

    return jsonify(normalize_space(space)), 200

# ------------------------
# Pages
# ------------------------

@v1_bp.route("/spaces/<slug>/pages", methods=["POST"])
@jwt_required()
@active_user_required
def create_page_route(slug):
    space = get_owned_space(slug=slug, user_id=g.current_user.id)
    data = json_object()

    page = create_page(space=space, actor_id=g.current_user.id, data=data)
    return jsonify(normalize_page(page, admin=True)), 201

@v1_bp.route("/spaces/<slug>/pages/reorder", methods=["POST"])
@jwt_required()
@active_user_required
def reorder_pages_route(slug):
    space = get_owned_space(slug=slug, user_id=g.current_user.id)
    items = request.get_json(silent=True)  # [{id: "...", order_index: 0}, ...]

    pages = reorder_pages(space=space, actor_id=g.current_user.id, items=items)
    return jsonify({"items": [normalize_page_summary(p) for p in pages]}), 200

@v1_bp.route("/spaces/<slug>/pages/<page_slug>", methods=["GET"])
@jwt_required()
@active_user_required
def get_page(slug, page_slug):
    space = get_owned_space(slug=slug, user_id=g.current_user.id)
    page = get_space_page(space=space, page_slug=page_slug)

    response = jsonify(normalize_page(page, admin=True, rendered=True))
    return with_last_modified(response, page), 200

@v1_bp.route("/spaces/<slug>/pages/<page_slug>", methods=["PUT"])
@jwt_required()
@active_user_required
def update_page_route(slug, page_slug):
    space = get_owned_space(slug=slug, user_id=g.current_user.id)
    page = get_space_page(space=space, page_slug=page_slug)

    # -----------------------
    # Optimistic Locking Check
    # -----------------------
    enforce_optimistic_lock(page)

    data = json_object()
    page = update_page(page=page, actor_id=g.current_user.id, data=data)

    return jsonify(normalize_page(page, admin=True)), 200

@v1_bp.route("/spaces/<slug>/pages/<page_slug>", methods=["DELETE"])
@jwt_required()
@active_user_required
def delete_page_route(slug, page_slug):
    space = get_owned_space(slug=slug, user_id=g.current_user.id)
    page = get_space_page(space=space, page_slug=page_slug)

    delete_page(page=page, actor_id=g.current_user.id)
    return jsonify({"message": "Page deleted successfully"}), 200
