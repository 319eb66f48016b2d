from flask import jsonify
from flask_jwt_extended import jwt_required
from docshub.utils.request_body import json_object
from docshub.utils.decorators import active_user_required
from docshub.utils.rendering import render_markdown
from . import v1_bp


@v1_bp.route("/markdown/preview", methods=["POST"])
@jwt_required()
@active_user_required
def preview_markdown():
    data = json_object()
    content = data.get("content") or ""

    return jsonify({"html": render_markdown(content)}), 200
