from __future__ import annotations

import logging
import uuid

from sqlalchemy.orm import Session

from ba.core.exceptions import NotFoundException
from ba.db.models.container import Container
from ba.domain.enums import AuditAction, ContainerKind, MemberRole, MembershipStatus
from ba.services import membership_store
from ba.services.audit_service import create_audit_event

logger = logging.getLogger(__name__)


def create_container(
    db: Session, *, kind: ContainerKind, name: str, owner_id: uuid.UUID
) -> Container:
    """Create a board or space together with its owner's active membership."""
    container = Container(kind=kind, name=name, owner_id=owner_id)
    db.add(container)
    db.flush()

    membership_store.create(
        db,
        container.id,
        owner_id,
        MemberRole.owner,
        status=MembershipStatus.active,
        commit=False,
    )
    create_audit_event(
        db,
        container_id=container.id,
        action=AuditAction.container_created,
        actor_id=owner_id,
        subject_id=owner_id,
        detail=f"{kind} '{name}'",
    )
    db.commit()
    db.refresh(container)

    logger.info("%s created: id=%s owner=%s", kind, container.id, owner_id)
    return container


def get_container(db: Session, kind: ContainerKind, container_id: uuid.UUID) -> Container:
    container = (
        db.query(Container)
        .filter(Container.id == container_id, Container.kind == kind)
        .first()
    )
    if container is None:
        raise NotFoundException(f"{kind.capitalize()} not found")
    return container
