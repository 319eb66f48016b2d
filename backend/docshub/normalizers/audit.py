# docshub/normalizers/audit.py
from __future__ import annotations

from typing import Dict, Any
from docshub.models.audit_log import AuditLog
from ._time import iso


def normalize_audit_log(log: AuditLog) -> Dict[str, Any]:
    """
    Normalizes an AuditLog model into API-safe JSON.

    Notes:
    - entity_id is always serialized as string for consistency
    """
    return {
        "id": log.id,
        "team_id": log.team_id,
        "actor_id": log.actor_id,
        "action": log.action,
        "entity_type": log.entity_type,
        "entity_id": str(log.entity_id) if log.entity_id is not None else None,
        "payload": log.payload or {},
        "created_at": iso(log.created_at),
    }
