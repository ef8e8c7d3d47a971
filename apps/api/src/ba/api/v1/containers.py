"""Board and space endpoints.

Boards and spaces behave identically, so both routers come out of
``build_container_router`` and differ only in the container kind they serve.
"""

from __future__ import annotations

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.orm import Session

from ba.api.v1.users import public_user
from ba.core.exceptions import PermissionException
from ba.core.security import CurrentUser
from ba.db.session import get_db
from ba.domain.enums import ContainerKind, MemberRole
from ba.services import access_policy
from ba.services.audit_service import list_audit_events_for_container
from ba.services.container_service import create_container, get_container

DB = Annotated[Session, Depends(get_db)]


# -- Schemas ------------------------------------------------------------------


class ContainerCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)


class InviteRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: uuid.UUID = Field(alias="userId")


class RoleUpdate(BaseModel):
    role: MemberRole


# -- Helpers ------------------------------------------------------------------


def _container_to_dict(c):
    return {
        "id": str(c.id),
        "kind": c.kind,
        "name": c.name,
        "ownerId": str(c.owner_id),
        "createdAt": c.created_at.isoformat() if c.created_at else None,
    }


def _member_to_dict(m):
    return {
        "containerId": str(m.container_id),
        "user": public_user(m.user),
        "role": m.role,
        "status": m.status,
    }


# -- Router factory -----------------------------------------------------------


def build_container_router(kind: ContainerKind, prefix: str) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=[prefix.strip("/")])

    @router.post("", status_code=status.HTTP_201_CREATED)
    def create(body: ContainerCreate, user: CurrentUser, db: DB):
        container = create_container(db, kind=kind, name=body.name, owner_id=user.id)
        return _container_to_dict(container)

    @router.get("/{container_id}")
    def get_by_id(container_id: uuid.UUID, user: CurrentUser, db: DB):
        container = get_container(db, kind, container_id)
        access_policy.require_active_member(db, container, user.id)
        return _container_to_dict(container)

    @router.get("/{container_id}/members")
    def list_members(container_id: uuid.UUID, user: CurrentUser, db: DB):
        """Members ordered owner first, then admins, then members, by first name."""
        container = get_container(db, kind, container_id)
        members = access_policy.list_members(db, container, user.id)
        return [_member_to_dict(m) for m in members]

    @router.post("/{container_id}/members", status_code=status.HTTP_201_CREATED)
    def invite_member(container_id: uuid.UUID, body: InviteRequest, user: CurrentUser, db: DB):
        container = get_container(db, kind, container_id)
        membership = access_policy.invite(db, container, user.id, body.user_id)
        return _member_to_dict(membership)

    @router.get("/{container_id}/members/{user_id}")
    def get_member(container_id: uuid.UUID, user_id: uuid.UUID, user: CurrentUser, db: DB):
        container = get_container(db, kind, container_id)
        membership = access_policy.get_access(db, container, user.id, user_id)
        return _member_to_dict(membership)

    @router.put("/{container_id}/members/{user_id}")
    def update_member(
        container_id: uuid.UUID,
        user_id: uuid.UUID,
        body: RoleUpdate,
        user: CurrentUser,
        db: DB,
    ):
        container = get_container(db, kind, container_id)
        membership = access_policy.update_access(db, container, user.id, user_id, body.role)
        return _member_to_dict(membership)

    @router.post("/{container_id}/members/{user_id}/accept")
    def accept_invite(container_id: uuid.UUID, user_id: uuid.UUID, user: CurrentUser, db: DB):
        container = get_container(db, kind, container_id)
        membership = access_policy.accept_invite(db, container, user.id, user_id)
        return _member_to_dict(membership)

    @router.get("/{container_id}/audit")
    def get_audit(container_id: uuid.UUID, user: CurrentUser, db: DB):
        """Membership audit trail. Owners and admins only."""
        container = get_container(db, kind, container_id)
        role = access_policy.require_active_member(db, container, user.id)
        if role not in access_policy.INVITER_ROLES:
            raise PermissionException("Only owners and admins can read the audit trail")
        events = list_audit_events_for_container(db, container.id)
        return [
            {
                "id": str(e.id),
                "action": e.action,
                "actorId": str(e.actor_id) if e.actor_id else None,
                "subjectId": str(e.subject_id) if e.subject_id else None,
                "detail": e.detail,
                "createdAt": e.created_at.isoformat() if e.created_at else None,
            }
            for e in events
        ]

    return router


boards_router = build_container_router(ContainerKind.board, "/boards")
spaces_router = build_container_router(ContainerKind.space, "/spaces")
