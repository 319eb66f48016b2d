from flask import request, jsonify, g
from flask_jwt_extended import jwt_required
from docshub.domain.roles import TeamRole
from docshub.models.audit_log import AuditLog
from docshub.normalizers.audit import normalize_audit_log
from docshub.normalizers.pagination import normalize_pagination
from docshub.utils.decorators import active_user_required, team_role_required
from docshub.utils.pagination import paginate_cursor, parse_limit
from . import v1_bp

@v1_bp.route("/teams/<slug>/audit", methods=["GET"])
@jwt_required()
@active_user_required
@team_role_required(TeamRole.ADMIN, action="view the audit log")
def list_audit_logs(slug):
    team = g.current_team

    query = AuditLog.query.filter(
        AuditLog.team_id == team.id
    )

    # Optional filters
    if action := request.args.get("action"):
        query = query.filter(AuditLog.action == action)

    if entity_type := request.args.get("entity_type"):
        query = query.filter(AuditLog.entity_type == entity_type)

    if entity_id := request.args.get("entity_id"):
        query = query.filter(AuditLog.entity_id == entity_id)

    logs, meta = paginate_cursor(
        query,
        model=AuditLog,
        cursor=request.args.get("cursor"),
        limit=parse_limit(request.args.get("limit")),
    )

    return jsonify(normalize_pagination(logs, normalize_audit_log, cursor=meta)), 200
