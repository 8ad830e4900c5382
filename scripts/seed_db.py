"""Seed the database with a dev user, its solo organization and a second member.

Run from the repository root:
    python scripts/seed_db.py
"""

import sys
from pathlib import Path

# Ensure the api src is on the path when running standalone
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "apps" / "api" / "src"))

from pwadmin.core.config import settings  # noqa: E402
from pwadmin.db.base import Base  # noqa: E402
from pwadmin.db.models import User, build_registry  # noqa: E402
from pwadmin.db.session import SessionLocal, engine  # noqa: E402
from pwadmin.domain.enums import OrganizationMemberRole  # noqa: E402
from pwadmin.services.membership_service import create_membership  # noqa: E402
from pwadmin.services.user_service import register_user  # noqa: E402


def seed() -> None:
    build_registry()
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()

    try:
        existing = db.query(User).filter_by(username="dev").first()
        if existing:
            print(f"Seed already applied, user '{existing.username}' exists. Skipping.")
            return

        owner = register_user(db, username="dev", email="dev@pathwar.local")
        guest = User(username="guest", email="guest@pathwar.local")
        db.add(guest)
        db.commit()

        organization = owner.organization_memberships[0].organization
        create_membership(
            db,
            user_id=guest.id,
            organization_id=organization.id,
            role=OrganizationMemberRole.member,
        )

        print(f"Seeded user='{owner.username}' (id={owner.id}) owning org id={organization.id}")
        print(f"Seeded user='{guest.username}' (id={guest.id}) as member")
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    print(f"DATABASE_URL = {settings.DATABASE_URL}")
    seed()
    print("Done.")
