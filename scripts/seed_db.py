"""Seed the database with a dev board, its owner and a few members.

Run from the project root:
    uv run python scripts/seed_db.py

This script is intentionally standalone so it works outside the app too.
"""

import sys
from pathlib import Path

# Ensure the api src is on the path when running standalone
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "apps" / "api" / "src"))

from ba.core.config import settings  # noqa: E402
from ba.core.security import hash_password  # noqa: E402
from ba.db.base import Base  # noqa: E402
from ba.db.models import Container, User  # noqa: E402
from ba.db.session import SessionLocal, engine  # noqa: E402
from ba.domain.enums import ContainerKind, MemberRole  # noqa: E402
from ba.services import access_policy  # noqa: E402
from ba.services.container_service import create_container  # noqa: E402

DEV_USERS = [
    ("jeff", "Jeff", "Hansen"),
    ("jon", "Jon", "West"),
    ("amanda", "Amanda", "Callesen"),
    ("bjarke", "Bjarke", "Søgaard"),
]


def seed() -> None:
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()

    try:
        existing = db.query(Container).filter_by(name="Dev Board").first()
        if existing:
            print(f"Seed already applied — board '{existing.name}' exists. Skipping.")
            return

        users = []
        for username, first, last in DEV_USERS:
            user = User(
                username=username,
                first_name=first,
                last_name=last,
                email=f"{username}@dev.local",
                hashed_password=hash_password("password123"),
            )
            db.add(user)
            users.append(user)
        db.commit()

        owner, *members = users
        board = create_container(db, kind=ContainerKind.board, name="Dev Board", owner_id=owner.id)
        for member in members:
            access_policy.invite(db, board, owner.id, member.id)
            access_policy.accept_invite(db, board, member.id, member.id)
        access_policy.update_access(db, board, owner.id, members[0].id, MemberRole.admin)

        print(f"Seeded board='{board.name}' (id={board.id}) owned by '{owner.username}'")
        for m in access_policy.list_members(db, board, owner.id):
            print(f"  {m.role:<7} {m.user.username}")
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    print(f"DATABASE_URL = {settings.DATABASE_URL}")
    seed()
    print("Done.")
