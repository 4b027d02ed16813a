#!/usr/bin/env python3
# create_tables.py
"""
Create the portal's tables and a default admin account

Usage:
    python create_tables.py            # create missing tables, add admin if absent
    python create_tables.py --reset    # drop and recreate all tables first
"""
import sys

from sqlalchemy.orm import Session

from app.config.settings import settings
from app.database import Base, engine
from app.models import User, UserRole, Suggestion, Comment  # noqa: F401  registers tables
from app.utils.security import hash_password

def create_tables(reset: bool = False):
    """Create all tables"""
    if reset:
        Base.metadata.drop_all(bind=engine)
        print("Dropped existing tables")
    Base.metadata.create_all(bind=engine)
    print("✅ All tables created successfully!")

def create_default_admin():
    """Create a default admin user if none with the configured email exists"""
    if not settings.ADMIN_PASSWORD:
        print("ADMIN_PASSWORD not set, skipping default admin")
        return

    with Session(engine) as db:
        admin_exists = db.query(User).filter(
            (User.email == settings.ADMIN_EMAIL) | (User.username == settings.ADMIN_USERNAME)
        ).first()
        if admin_exists:
            print(f"Admin user already exists: {admin_exists.email}")
            return

        db.add(User(
            username=settings.ADMIN_USERNAME,
            email=settings.ADMIN_EMAIL,
            password_hash=hash_password(settings.ADMIN_PASSWORD),
            role=UserRole.ADMIN,
        ))
        db.commit()
        print(f"✅ Default admin created: {settings.ADMIN_EMAIL}")

if __name__ == "__main__":
    create_tables(reset="--reset" in sys.argv)
    create_default_admin()
