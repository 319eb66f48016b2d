# docshub/api/v1/workspaces.py
from flask import g, jsonify
from flask_jwt_extended import jwt_required
from docshub.domain.roles import TeamRole
from docshub.application.fusiobook.access import get_workspace as load_workspace, workspace_read_role
from docshub.application.fusiobook.collections import create_collection, get_collection
from docshub.application.fusiobook.create_document import create_document
from docshub.application.fusiobook.documents import list_collections, list_root_documents
from docshub.application.fusiobook.templates import create_template, list_templates
from docshub.application.fusiobook.workspaces import update_workspace
from docshub.normalizers.document import normalize_document
from docshub.normalizers.workspace import (
    normalize_collection,
    normalize_template,
    normalize_workspace,
)
from docshub.utils.request_body import json_object
from docshub.utils.decorators import active_user_required, workspace_role_required
from . import v1_bp

# ------------------------
# Workspaces
# ------------------------

@v1_bp.route("/w/<slug>", methods=["GET"])
def get_workspace(slug):
    """Members see drafts; visitors of a public workspace see published documents only."""
    workspace = load_workspace(slug)
    user = g.current_user
    role = workspace_read_role(workspace, user.id if user else None)

    published_only = role is None
    collections = [
        normalize_collection(
            c, documents=list_root_documents(c, published_only=published_only)
        )
        for c in list_collections(workspace)
    ]

    data = normalize_workspace(workspace)
    data["role"] = role.value if role else None
    data["collections"] = collections
    return jsonify(data), 200

@v1_bp.route("/w/<slug>", methods=["PUT"])
@jwt_required()
@active_user_required
@workspace_role_required(TeamRole.ADMIN, action="update this workspace")
def update_workspace_route(slug):
    data = json_object()

    workspace = update_workspace(
        workspace=g.current_workspace,
        actor_id=g.current_user.id,
        data=data,
    )
    return jsonify(normalize_workspace(workspace)), 200

# ------------------------
# Collections
# ------------------------

@v1_bp.route("/w/<slug>/collections", methods=["POST"])
@jwt_required()
@active_user_required
@workspace_role_required(TeamRole.EDITOR, action="create collections")
def create_collection_route(slug):
    data = json_object()

    collection = create_collection(
        workspace=g.current_workspace,
        actor_id=g.current_user.id,
        data=data,
    )
    return jsonify(normalize_collection(collection)), 201

@v1_bp.route("/w/<slug>/collections/<collection_slug>/documents", methods=["POST"])
@jwt_required()
@active_user_required
@workspace_role_required(TeamRole.EDITOR, action="create documents")
def create_document_route(slug, collection_slug):
    collection = get_collection(g.current_workspace, collection_slug)
    data = json_object()

    document = create_document(
        collection=collection,
        actor_id=g.current_user.id,
        data=data,
    )
    return jsonify(normalize_document(document)), 201

# ------------------------
# Templates
# ------------------------

@v1_bp.route("/w/<slug>/templates", methods=["GET"])
@jwt_required()
@active_user_required
@workspace_role_required(TeamRole.VIEWER, action="view templates")
def list_templates_route(slug):
    templates = list_templates(g.current_workspace)
    return jsonify({"items": [normalize_template(t) for t in templates]}), 200

@v1_bp.route("/w/<slug>/templates", methods=["POST"])
@jwt_required()
@active_user_required
@workspace_role_required(TeamRole.EDITOR, action="create templates")
def create_template_route(slug):
    data = json_object()

    template = create_template(
        workspace=g.current_workspace,
        actor_id=g.current_user.id,
        data=data,
    )
    return jsonify(normalize_template(template)), 201
