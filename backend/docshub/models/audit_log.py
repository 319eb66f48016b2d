# docshub/models/audit_log.py
from docshub.extensions import db
from .base import BaseModel
from sqlalchemy import event


class AuditLog(BaseModel):
    __tablename__ = "audit_logs"

    __table_args__ = (
        db.Index("ix_audit_cursor", "team_id", "created_at", "id"),
        db.Index("ix_audit_actor_action", "team_id", "actor_id", "action"),
    )

    # Null for Docsify writes, which are owned by a user rather than a team
    team_id = db.Column(db.String(36), db.ForeignKey("teams.id"), nullable=True, index=True)

    actor_id = db.Column(db.String(36), nullable=False, index=True)
    action = db.Column(db.String(50), nullable=False, index=True)

    entity_type = db.Column(db.String(50), nullable=False, index=True)
    entity_id = db.Column(db.String(36), nullable=False, index=True)

    payload = db.Column(db.JSON, nullable=False, default=dict)


@event.listens_for(AuditLog, 'before_update')
@event.listens_for(AuditLog, 'before_delete')
def prevent_audit_mutation(mapper, connection, target):
    raise RuntimeError("Audit logs are immutable")
