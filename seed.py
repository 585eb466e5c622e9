"""
Seed script for local development.
Run: python seed.py
Safe to re-run: nothing is inserted once yarn batches exist.
"""
import sys

from sqlalchemy.exc import SQLAlchemyError

from garment_flow import create_app
from garment_flow.errors import AppError
from garment_flow.extensions import db
from garment_flow.services.seed_service import seed_pipeline
from garment_flow.services.store import get_store

app = create_app()


def seed():
    with app.app_context():
        print("Seeding database...")

        try:
            db.session.execute(db.text("SELECT 1"))
            print("✓ Database connected")
        except SQLAlchemyError as e:
            print(f"✗ Database connection failed: {e}")
            sys.exit(1)

        try:
            applied = seed_pipeline(get_store())
        except AppError as e:
            print(f"✗ Seeding failed: {e.message}")
            sys.exit(1)

        if applied:
            print("✓ Added 2 yarn batches and 1 knitting job")
        else:
            print("  Yarn batches already present, nothing to do")

        writer = app.extensions.get('snapshot_writer')
        if writer:
            writer.flush(force=True)

        print("Seeding complete!")


if __name__ == '__main__':
    seed()
