from __future__ import annotations

import uuid

from sqlalchemy.orm import Session

from ba.db.models.audit import AuditEvent


def create_audit_event(
    db: Session,
    *,
    container_id: uuid.UUID,
    action: str,
    actor_id: uuid.UUID | None = None,
    subject_id: uuid.UUID | None = None,
    detail: str | None = None,
) -> AuditEvent:
    """Stage an audit row in the caller's transaction. The caller commits."""
    event = AuditEvent(
        container_id=container_id,
        actor_id=actor_id,
        action=action,
        subject_id=subject_id,
        detail=detail,
    )
    db.add(event)
    db.flush()
    return event


def list_audit_events_for_container(db: Session, container_id: uuid.UUID) -> list[AuditEvent]:
    return (
        db.query(AuditEvent)
        .filter(AuditEvent.container_id == container_id)
        .order_by(AuditEvent.created_at.desc())
        .all()
    )
