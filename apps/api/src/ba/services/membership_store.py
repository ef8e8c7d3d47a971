"""Persistence functions over membership rows.

Every write ends with a single commit so later reads, from any session,
observe it. Concurrent role updates on one record are last-write-wins.
"""

from __future__ import annotations

import uuid

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from ba.core.exceptions import ConflictException, NotFoundException
from ba.db.models.membership import Membership
from ba.domain.enums import MemberRole, MembershipStatus


def get(db: Session, container_id: uuid.UUID, user_id: uuid.UUID) -> Membership | None:
    return (
        db.query(Membership)
        .options(joinedload(Membership.user))
        .filter(Membership.container_id == container_id, Membership.user_id == user_id)
        .first()
    )


def list_by_container(db: Session, container_id: uuid.UUID) -> list[Membership]:
    return (
        db.query(Membership)
        .options(joinedload(Membership.user))
        .filter(Membership.container_id == container_id)
        .all()
    )


def get_role(db: Session, container_id: uuid.UUID, user_id: uuid.UUID) -> str | None:
    """Return the user's role if they are an active member, otherwise None."""
    row = (
        db.query(Membership.role)
        .filter(
            Membership.container_id == container_id,
            Membership.user_id == user_id,
            Membership.status == MembershipStatus.active,
        )
        .first()
    )
    return row[0] if row else None


def is_active_member(db: Session, container_id: uuid.UUID, user_id: uuid.UUID) -> bool:
    return get_role(db, container_id, user_id) is not None


def create(
    db: Session,
    container_id: uuid.UUID,
    user_id: uuid.UUID,
    role: str = MemberRole.member,
    *,
    status: str = MembershipStatus.invited,
    commit: bool = True,
) -> Membership:
    """Insert a membership, invited unless told otherwise.

    ``commit=False`` leaves the caller's transaction open so the row lands
    atomically with whatever else the caller stages.
    """
    membership = Membership(
        container_id=container_id,
        user_id=user_id,
        role=role,
        status=status,
    )
    db.add(membership)
    try:
        db.flush()
    except IntegrityError:
        db.rollback()
        raise ConflictException("User already has access to this container") from None
    if commit:
        db.commit()
        db.refresh(membership)
    return membership


def accept(db: Session, container_id: uuid.UUID, user_id: uuid.UUID) -> Membership:
    membership = get(db, container_id, user_id)
    if membership is None:
        raise NotFoundException("Membership not found")
    if membership.status != MembershipStatus.active:
        membership.status = MembershipStatus.active
        db.commit()
        db.refresh(membership)
    return membership


def update_role(
    db: Session, container_id: uuid.UUID, user_id: uuid.UUID, role: str
) -> Membership:
    membership = get(db, container_id, user_id)
    if membership is None:
        raise NotFoundException("Membership not found")
    if membership.role != role:
        membership.role = role
        db.commit()
        db.refresh(membership)
    return membership
