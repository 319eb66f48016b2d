# docshub/api/v1/documents.py
from flask import g, request, jsonify
from flask_jwt_extended import jwt_required
from docshub.domain.roles import TeamRole
from docshub.domain.invariants.exceptions import InvariantViolation
from docshub.application.fusiobook.access import get_workspace, workspace_read_role
from docshub.application.fusiobook.comments import add_comment, get_comment, set_comment_resolved
from docshub.application.fusiobook.documents import get_document, list_comments, list_versions
from docshub.application.fusiobook.page_views import document_view_stats, record_page_view
from docshub.application.fusiobook.publish_document import publish_document, unpublish_document
from docshub.application.fusiobook.save_document import restore_document_version, save_document
from docshub.normalizers.document import normalize_comment, normalize_document, normalize_version
from docshub.normalizers.workspace import normalize_collection
from docshub.utils.request_body import json_object
from docshub.utils.decorators import active_user_required, workspace_role_required
from docshub.utils.optimistic_lock import expected_version
from docshub.utils.visitor import attach_visitor_cookie, visitor_id_from_request
from . import v1_bp

# ------------------------
# Documents
# ------------------------

@v1_bp.route("/w/<slug>/docs/<doc_slug>", methods=["GET"])
def get_document_route(slug, doc_slug):
    """
    Document screen. Members get drafts, comments and history; visitors of
    a public workspace get the published document only. Published reads are
    counted as page views.
    """
    workspace = get_workspace(slug)
    user = g.current_user
    role = workspace_read_role(workspace, user.id if user else None)

    document = get_document(workspace, doc_slug, published_only=role is None)

    data = {
        "workspace": {"id": workspace.id, "name": workspace.name, "slug": workspace.slug},
        "collection": normalize_collection(document.collection),
        "document": normalize_document(document, rendered=True),
        "role": role.value if role else None,
    }
    if role is not None:
        data["comments"] = [normalize_comment(c) for c in list_comments(document)]
        data["versions"] = [normalize_version(v) for v in list_versions(document)]

    visitor_id, is_new = visitor_id_from_request()
    if document.is_published:
        record_page_view(
            document=document,
            visitor_id=visitor_id,
            user_id=user.id if user else None,
        )

    response = jsonify(data)
    if is_new:
        attach_visitor_cookie(response, visitor_id)
    return response, 200

@v1_bp.route("/w/<slug>/docs/<doc_slug>", methods=["PUT"])
@jwt_required()
@active_user_required
@workspace_role_required(TeamRole.EDITOR, action="edit documents")
def save_document_route(slug, doc_slug):
    document = get_document(g.current_workspace, doc_slug)
    data = json_object()

    document = save_document(
        document=document,
        actor_id=g.current_user.id,
        expected_version=expected_version(data),
        data=data,
        change_summary=data.get("change_summary") or None,
    )
    return jsonify(normalize_document(document)), 200

@v1_bp.route("/w/<slug>/docs/<doc_slug>/publish", methods=["POST"])
@jwt_required()
@active_user_required
@workspace_role_required(TeamRole.EDITOR, action="publish documents")
def publish_document_route(slug, doc_slug):
    document = get_document(g.current_workspace, doc_slug)
    result = publish_document(document=document, actor_id=g.current_user.id)

    return jsonify(result), 200

@v1_bp.route("/w/<slug>/docs/<doc_slug>/unpublish", methods=["POST"])
@jwt_required()
@active_user_required
@workspace_role_required(TeamRole.EDITOR, action="unpublish documents")
def unpublish_document_route(slug, doc_slug):
    document = get_document(g.current_workspace, doc_slug)
    result = unpublish_document(document=document, actor_id=g.current_user.id)

    return jsonify(result), 200

# ------------------------
# Version history
# ------------------------

@v1_bp.route("/w/<slug>/docs/<doc_slug>/versions", methods=["GET"])
@jwt_required()
@active_user_required
@workspace_role_required(TeamRole.VIEWER, action="view version history")
def list_versions_route(slug, doc_slug):
    document = get_document(g.current_workspace, doc_slug)
    include_content = request.args.get("include_content", "false").lower() == "true"

    return jsonify({
        "document_id": document.id,
        "current_version": document.version,
        "items": [
            normalize_version(v, include_content=include_content)
            for v in list_versions(document)
        ],
    }), 200

@v1_bp.route("/w/<slug>/docs/<doc_slug>/versions/<int:version>/restore", methods=["POST"])
@jwt_required()
@active_user_required
@workspace_role_required(TeamRole.EDITOR, action="restore versions")
def restore_version_route(slug, doc_slug, version):
    document = get_document(g.current_workspace, doc_slug)
    data = json_object()

    document = restore_document_version(
        document=document,
        actor_id=g.current_user.id,
        expected_version=expected_version(data),
        restore_version=version,
    )
    return jsonify(normalize_document(document)), 200

# ------------------------
# Comments
# ------------------------

@v1_bp.route("/w/<slug>/docs/<doc_slug>/comments", methods=["GET"])
@jwt_required()
@active_user_required
@workspace_role_required(TeamRole.VIEWER, action="view comments")
def list_comments_route(slug, doc_slug):
    document = get_document(g.current_workspace, doc_slug)
    return jsonify({"items": [normalize_comment(c) for c in list_comments(document)]}), 200

@v1_bp.route("/w/<slug>/docs/<doc_slug>/comments", methods=["POST"])
@jwt_required()
@active_user_required
@workspace_role_required(TeamRole.VIEWER, action="comment")
def add_comment_route(slug, doc_slug):
    document = get_document(g.current_workspace, doc_slug)
    data = json_object()

    comment = add_comment(
        document=document,
        actor_id=g.current_user.id,
        content=data.get("content"),
    )
    return jsonify(normalize_comment(comment)), 201

@v1_bp.route("/w/<slug>/docs/<doc_slug>/comments/<comment_id>", methods=["PUT"])
@jwt_required()
@active_user_required
@workspace_role_required(TeamRole.VIEWER, action="resolve comments")
def resolve_comment_route(slug, doc_slug, comment_id):
    document = get_document(g.current_workspace, doc_slug)
    comment = get_comment(document, comment_id)
    data = json_object()

    if not isinstance(data.get("resolved"), bool):
        raise InvariantViolation("resolved must be true or false")

    comment = set_comment_resolved(
        document=document,
        comment=comment,
        actor_id=g.current_user.id,
        resolved=data["resolved"],
    )
    return jsonify(normalize_comment(comment)), 200

# ------------------------
# Analytics
# ------------------------

@v1_bp.route("/w/<slug>/docs/<doc_slug>/stats", methods=["GET"])
@jwt_required()
@active_user_required
@workspace_role_required(TeamRole.VIEWER, action="view analytics")
def document_stats_route(slug, doc_slug):
    document = get_document(g.current_workspace, doc_slug)
    return jsonify({"document_id": document.id, **document_view_stats(document)}), 200
