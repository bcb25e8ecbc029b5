#!/usr/bin/env python3
"""Seed demo data for screenshots.

Creates a dedicated demo user with a handful of saved designs in the main
database. Re-running clears the demo user's designs and seeds them again.

Usage:
    # From project root:
    python scripts/seed_demo_data.py

    # Or against another database:
    DATABASE_URL=postgresql://design_user:design_password@db:5432/design_studio \
        python scripts/seed_demo_data.py
"""

import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from design_studio.config import get_settings
from design_studio.database import Base
from design_studio.models import Design, ItemType
from design_studio.services.credentials import CredentialStore
from design_studio.services.designs import DesignStore
from design_studio.services.passwords import PasswordHasher

DATABASE_URL = os.getenv("DATABASE_URL", get_settings().database_url)

# Demo user credentials (used for app store screenshots)
DEMO_NAME = "Demo User"
DEMO_EMAIL = "demo@example.com"
DEMO_PASSWORD = "demopass123"

# Oldest first; the app lists them newest first
DEMO_DESIGNS = [
    {"item_type": ItemType.TSHIRT, "color": "#ffffff", "style": "classic"},
    {"item_type": ItemType.PANTS, "color": "#1e3a8a", "style": "cargo"},
    {
        "item_type": ItemType.TSHIRT,
        "color": "#f97316",
        "style": "oversized",
        "text_overlay": "Hello, world",
    },
    {"item_type": ItemType.TSHIRT, "color": "#111827", "text_overlay": "Night shift"},
]


def seed_demo_data():
    """Seed the demo database with representative data."""
    engine = create_engine(DATABASE_URL)
    Base.metadata.create_all(bind=engine)
    Session = sessionmaker(bind=engine)
    session = Session()

    try:
        credentials = CredentialStore(session)
        user = credentials.find_by_email(DEMO_EMAIL)
        if user:
            print("Demo data already exists. Clearing and re-seeding designs...")
            session.query(Design).filter_by(user_id=user.id).delete()
            session.commit()
        else:
            print("Creating demo user...")
            hasher = PasswordHasher(rounds=get_settings().bcrypt_rounds)
            user = credentials.create_user(DEMO_NAME, DEMO_EMAIL, hasher.hash(DEMO_PASSWORD))

        print("Creating designs...")
        designs = DesignStore(session, credentials)
        for fields in DEMO_DESIGNS:
            designs.create(owner_id=user.id, **fields)

        print("Demo data seeded successfully!")

    except Exception as e:
        session.rollback()
        print(f"Error seeding demo data: {e}")
        raise
    finally:
        session.close()


if __name__ == "__main__":
    seed_demo_data()
