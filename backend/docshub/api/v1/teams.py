# docshub/api/v1/teams.py
from flask import g, jsonify
from flask_jwt_extended import jwt_required
from docshub.models.team_member import TeamMember
from docshub.models.workspace import Workspace
from docshub.domain.roles import TeamRole, member_permissions
from docshub.application.fusiobook.create_team import create_team
from docshub.application.fusiobook.members import (
    change_member_role,
    invite_member,
    remove_member,
)
from docshub.application.fusiobook.workspaces import create_workspace
from docshub.normalizers.team import normalize_member, normalize_team
from docshub.normalizers.workspace import normalize_workspace
from docshub.utils.request_body import json_object
from docshub.utils.decorators import active_user_required, team_role_required
from . import v1_bp

# ------------------------
# Teams
# ------------------------

@v1_bp.route("/teams", methods=["GET"])
@jwt_required()
@active_user_required
def list_teams():
    memberships = (
        TeamMember.query
        .filter_by(user_id=g.current_user.id)
        .order_by(TeamMember.created_at.asc())
        .all()
    )

    return jsonify({
        "items": [normalize_team(m.team, role=m.role) for m in memberships]
    }), 200

@v1_bp.route("/teams", methods=["POST"])
@jwt_required()
@active_user_required
def create_team_route():
    data = json_object()
    team = create_team(actor_id=g.current_user.id, data=data)

    return jsonify(normalize_team(team, role=TeamRole.OWNER)), 201

@v1_bp.route("/teams/<slug>", methods=["GET"])
@jwt_required()
@active_user_required
@team_role_required(TeamRole.VIEWER, action="view this team")
def get_team(slug):
    team = g.current_team
    workspaces = (
        Workspace.query
        .filter_by(team_id=team.id)
        .order_by(Workspace.created_at.desc())
        .all()
    )

    data = normalize_team(team, role=g.current_role)
    data["workspaces"] = [normalize_workspace(w) for w in workspaces]
    return jsonify(data), 200

# ------------------------
# Members
# ------------------------

@v1_bp.route("/teams/<slug>/members", methods=["GET"])
@jwt_required()
@active_user_required
@team_role_required(TeamRole.VIEWER, action="view members")
def list_members(slug):
    team = g.current_team
    members = (
        TeamMember.query
        .filter_by(team_id=team.id)
        .order_by(TeamMember.created_at.asc())
        .all()
    )

    return jsonify({
        "team": normalize_team(team),
        "current_user_role": g.current_role.value,
        "permissions": member_permissions(g.current_role),
        "items": [normalize_member(m) for m in members],
    }), 200

@v1_bp.route("/teams/<slug>/members", methods=["POST"])
@jwt_required()
@active_user_required
@team_role_required(TeamRole.VIEWER)
def invite_member_route(slug):
    data = json_object()

    member = invite_member(
        team=g.current_team,
        actor_id=g.current_user.id,
        email=data.get("email"),
        role=data.get("role", TeamRole.EDITOR.value),
    )

    return jsonify({
        "message": f"Successfully invited {member.user.email} as {member.role.value}",
        "member": normalize_member(member),
    }), 201

@v1_bp.route("/teams/<slug>/members/<member_id>", methods=["PUT"])
@jwt_required()
@active_user_required
@team_role_required(TeamRole.VIEWER)
def change_member_role_route(slug, member_id):
    data = json_object()

    member = change_member_role(
        team=g.current_team,
        actor_id=g.current_user.id,
        member_id=member_id,
        role=data.get("role"),
    )

    return jsonify(normalize_member(member)), 200

@v1_bp.route("/teams/<slug>/members/<member_id>", methods=["DELETE"])
@jwt_required()
@active_user_required
@team_role_required(TeamRole.VIEWER)
def remove_member_route(slug, member_id):
    remove_member(
        team=g.current_team,
        actor_id=g.current_user.id,
        member_id=member_id,
    )

    return jsonify({"message": "Member removed successfully"}), 200

# ------------------------
# Workspaces
# ------------------------

@v1_bp.route("/teams/<slug>/workspaces", methods=["POST"])
@jwt_required()
@active_user_required
@team_role_required(TeamRole.ADMIN, action="create workspaces")
def create_workspace_route(slug):
    data = json_object()

    workspace = create_workspace(
        team=g.current_team,
        actor_id=g.current_user.id,
        data=data,
    )

    return jsonify(normalize_workspace(workspace)), 201
