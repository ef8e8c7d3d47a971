"""Authorization decisions and ordering for container membership.

Read access to a container's membership requires an active membership of any
role. Lists are ordered by role rank (owner first), then first name, then
user id, so every requester sees the same sequence.
"""

from __future__ import annotations

import logging
import uuid

from sqlalchemy.orm import Session

from ba.core.exceptions import InvalidStateError, NotFoundException, PermissionException
from ba.db.models.container import Container
from ba.db.models.membership import Membership
from ba.db.models.user import User
from ba.domain.enums import ROLE_RANK, AuditAction, MemberRole, MembershipStatus
from ba.services import membership_store
from ba.services.audit_service import create_audit_event

logger = logging.getLogger(__name__)

INVITER_ROLES = frozenset({MemberRole.owner, MemberRole.admin})
ASSIGNABLE_ROLES = frozenset({MemberRole.admin, MemberRole.member})


def member_sort_key(membership: Membership) -> tuple:
    first_name = membership.user.first_name
    return (
        -ROLE_RANK.get(membership.role, 0),
        first_name.casefold(),
        first_name,
        str(membership.user_id),
    )


def require_active_member(db: Session, container: Container, requester_id: uuid.UUID) -> str:
    """Return the requester's role, or raise if they are not an active member."""
    role = membership_store.get_role(db, container.id, requester_id)
    if role is None:
        logger.info(
            "access denied: user=%s is not a member of %s %s",
            requester_id,
            container.kind,
            container.id,
        )
        raise PermissionException(f"Not a member of this {container.kind}")
    return role


def list_members(db: Session, container: Container, requester_id: uuid.UUID) -> list[Membership]:
    require_active_member(db, container, requester_id)
    return sorted(membership_store.list_by_container(db, container.id), key=member_sort_key)


def get_access(
    db: Session, container: Container, requester_id: uuid.UUID, target_user_id: uuid.UUID
) -> Membership:
    require_active_member(db, container, requester_id)
    membership = membership_store.get(db, container.id, target_user_id)
    if membership is None:
        raise NotFoundException("Membership not found")
    return membership


def invite(
    db: Session, container: Container, requester_id: uuid.UUID, target_user_id: uuid.UUID
) -> Membership:
    """Give ``target_user_id`` a pending membership. Owners and admins may invite."""
    role = require_active_member(db, container, requester_id)
    if role not in INVITER_ROLES:
        raise PermissionException("Only owners and admins can invite members")

    if db.get(User, target_user_id) is None:
        raise NotFoundException("User not found")

    create_audit_event(
        db,
        container_id=container.id,
        action=AuditAction.membership_invited,
        actor_id=requester_id,
        subject_id=target_user_id,
    )
    membership = membership_store.create(db, container.id, target_user_id)
    logger.info(
        "invited user=%s to %s %s by %s", target_user_id, container.kind, container.id, requester_id
    )
    return membership


def accept_invite(
    db: Session, container: Container, requester_id: uuid.UUID, target_user_id: uuid.UUID
) -> Membership:
    """Activate a pending membership. Accepting twice is a no-op."""
    if requester_id != target_user_id:
        raise PermissionException("Only the invited user can accept an invite")

    membership = membership_store.get(db, container.id, target_user_id)
    if membership is None:
        raise NotFoundException("Membership not found")
    if membership.status == MembershipStatus.active:
        return membership

    create_audit_event(
        db,
        container_id=container.id,
        action=AuditAction.membership_accepted,
        actor_id=requester_id,
        subject_id=target_user_id,
    )
    membership = membership_store.accept(db, container.id, target_user_id)
    logger.info("user=%s accepted invite to %s %s", target_user_id, container.kind, container.id)
    return membership


def update_access(
    db: Session,
    container: Container,
    requester_id: uuid.UUID,
    target_user_id: uuid.UUID,
    new_role: str,
) -> Membership:
    """Change a member's role. Only the owner may do this."""
    role = require_active_member(db, container, requester_id)
    if role != MemberRole.owner:
        raise PermissionException(f"Only the {container.kind} owner can change roles")

    membership = membership_store.get(db, container.id, target_user_id)
    if membership is None:
        raise NotFoundException("Membership not found")
    if membership.role == MemberRole.owner:
        raise InvalidStateError("The owner's role cannot be changed")
    if new_role not in ASSIGNABLE_ROLES:
        raise InvalidStateError(f"Role '{new_role}' cannot be assigned")
    if membership.role == new_role:
        return membership

    create_audit_event(
        db,
        container_id=container.id,
        action=AuditAction.membership_role_changed,
        actor_id=requester_id,
        subject_id=target_user_id,
        detail=f"{membership.role} -> {new_role}",
    )
    membership = membership_store.update_role(db, container.id, target_user_id, new_role)
    logger.info(
        "role of user=%s in %s %s set to %s", target_user_id, container.kind, container.id, new_role
    )
    return membership
