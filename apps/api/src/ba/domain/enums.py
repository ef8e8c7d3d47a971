from enum import StrEnum


class ContainerKind(StrEnum):
    board = "board"
    space = "space"


class MemberRole(StrEnum):
    owner = "owner"
    admin = "admin"
    member = "member"


class MembershipStatus(StrEnum):
    invited = "invited"
    active = "active"


ROLE_RANK: dict[str, int] = {
    MemberRole.owner: 3,
    MemberRole.admin: 2,
    MemberRole.member: 1,
}


class AuditAction(StrEnum):
    container_created = "container.created"
    membership_invited = "membership.invited"
    membership_accepted = "membership.accepted"
    membership_role_changed = "membership.role_changed"
