from typing import Any, Dict, List
from docshub.extensions import db
from docshub.models.template import Template
from docshub.models.workspace import Workspace
from docshub.domain.invariants.exceptions import NotFound
from docshub.domain.invariants.resource import require_text
from docshub.utils.audit import log_action
from docshub.utils.transaction import transactional


def list_templates(workspace: Workspace) -> List[Template]:
    return (
        Template.query
        .filter_by(workspace_id=workspace.id)
        .order_by(Template.is_default.desc(), Template.name.asc())
        .all()
    )


def get_template(workspace: Workspace, template_id: str) -> Template:
    template = Template.query.filter_by(id=template_id, workspace_id=workspace.id).first()
    if not template:
        raise NotFound("Template not found")
    return template


def create_template(
    *,
    workspace: Workspace,
    actor_id: str,
    data: Dict[str, Any],
) -> Template:
    """
    Create a reusable document template.
    Marking one as default clears the flag on the others.
    """
    template = Template()
    template.workspace_id = workspace.id
    template.name = require_text(data.get("name"), "Name")
    template.description = data.get("description") or None
    template.content = data.get("content") or ""
    template.icon = data.get("icon") or None
    template.is_default = bool(data.get("is_default", False))

    with transactional():
        if template.is_default:
            Template.query.filter_by(workspace_id=workspace.id, is_default=True).update(
                {"is_default": False}, synchronize_session=False
            )

        db.session.add(template)
        db.session.flush()

        log_action(
            action="template.create",
            entity_type="template",
            entity_id=template.id,
            actor_id=actor_id,
            team_id=workspace.team_id,
            payload={"name": template.name},
        )

    return template
