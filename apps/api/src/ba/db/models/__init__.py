from ba.db.models.audit import AuditEvent
from ba.db.models.container import Container
from ba.db.models.membership import Membership
from ba.db.models.user import User

__all__ = [
    "AuditEvent",
    "Container",
    "Membership",
    "User",
]
