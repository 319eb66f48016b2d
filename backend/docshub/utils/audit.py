from flask import g
from docshub.extensions import db
from docshub.models.audit_log import AuditLog
from typing import Optional

def log_action(
    *,
    action: str,
    entity_type: str,
    entity_id: Optional[str],
    actor_id: Optional[str] = None,
    team_id: Optional[str] = None,
    payload: dict | None = None
):
    actor_id = actor_id or (getattr(g, "current_user", None) and g.current_user.id)
    if not actor_id:
        return  # Skip logging if there is no acting user

    log = AuditLog()

    log.actor_id = actor_id
    log.team_id = team_id
    log.action = action
    log.entity_type = entity_type
    log.entity_id = entity_id
    log.payload = payload or {}

    db.session.add(log)
